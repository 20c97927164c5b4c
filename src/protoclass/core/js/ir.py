"""
Node Factory.

Builds well-formed subtrees inside a `SyntaxTree`. Shapes follow the layout the
rest of the package relies on:

- FUNCTION: ``[NAME, PARAM_LIST, BLOCK]`` (anonymous functions have an empty NAME)
- GETPROP: ``[object, STRING]``
- ASSIGN: ``[target, value]``
- CLASS: ``[NAME | EMPTY, superclass | EMPTY, CLASS_MEMBERS]``
- MEMBER_FUNCTION_DEF: ``[FUNCTION]`` with the member name as its string
"""

from typing import Iterable, Optional, Union

from protoclass.core.js.jsdoc import JSDocInfo
from protoclass.core.js.tokens import Token
from protoclass.core.js.tree import NodeId, SourcePosition, SyntaxTree, TreeStructureError


class IR:
  """Node factory bound to one tree."""

  def __init__(self, tree: SyntaxTree) -> None:
    self.tree = tree

  # --- Leaves ---

  def name(self, identifier: str, position: Optional[SourcePosition] = None) -> NodeId:
    return self.tree.new_node(Token.NAME, string=identifier, position=position)

  def string(self, value: str) -> NodeId:
    return self.tree.new_node(Token.STRING, string=value)

  def number(self, value: Union[int, float]) -> NodeId:
    return self.tree.new_node(Token.NUMBER, string=str(value))

  def this(self) -> NodeId:
    return self.tree.new_node(Token.THIS)

  def empty(self) -> NodeId:
    return self.tree.new_node(Token.EMPTY)

  # --- Expressions ---

  def getprop(self, target: NodeId, prop: str, *more_props: str) -> NodeId:
    """
    Builds a left-associative property chain.

    ``getprop(name("a"), "b", "c")`` is ``GETPROP(GETPROP(a, b), c)``.
    """
    node = self.tree.new_node(Token.GETPROP, target, self.string(prop))
    for extra in more_props:
      node = self.tree.new_node(Token.GETPROP, node, self.string(extra))
    return node

  def assign(self, target: NodeId, value: NodeId, jsdoc: Optional[JSDocInfo] = None) -> NodeId:
    return self.tree.new_node(Token.ASSIGN, target, value, jsdoc=jsdoc)

  def call(self, callee: NodeId, *args: NodeId) -> NodeId:
    return self.tree.new_node(Token.CALL, callee, *args)

  def objectlit(self, *keys: NodeId) -> NodeId:
    return self.tree.new_node(Token.OBJECTLIT, *keys)

  def string_key(self, key: str, value: NodeId, jsdoc: Optional[JSDocInfo] = None) -> NodeId:
    return self.tree.new_node(Token.STRING_KEY, value, string=key, jsdoc=jsdoc)

  def param_list(self, *names: str) -> NodeId:
    return self.tree.new_node(Token.PARAM_LIST, *(self.name(n) for n in names))

  def function(
    self,
    name: NodeId,
    params: NodeId,
    body: NodeId,
    jsdoc: Optional[JSDocInfo] = None,
    position: Optional[SourcePosition] = None,
  ) -> NodeId:
    if self.tree.token(name) != Token.NAME:
      raise TreeStructureError("Function name must be a NAME node")
    return self.tree.new_node(Token.FUNCTION, name, params, body, jsdoc=jsdoc, position=position)

  def anonymous_function(self, *params: str, body: Optional[NodeId] = None) -> NodeId:
    """`function(params) { body }` with an empty name."""
    return self.function(self.name(""), self.param_list(*params), body if body is not None else self.block())

  # --- Statements ---

  def block(self, *stmts: NodeId) -> NodeId:
    return self.tree.new_node(Token.BLOCK, *stmts)

  def return_(self, value: Optional[NodeId] = None) -> NodeId:
    if value is None:
      return self.tree.new_node(Token.RETURN)
    return self.tree.new_node(Token.RETURN, value)

  def expr_result(self, expr: NodeId, jsdoc: Optional[JSDocInfo] = None) -> NodeId:
    return self.tree.new_node(Token.EXPR_RESULT, expr, jsdoc=jsdoc)

  def declaration(
    self,
    kind: Token,
    identifier: str,
    value: Optional[NodeId] = None,
    jsdoc: Optional[JSDocInfo] = None,
  ) -> NodeId:
    """`var|let|const identifier = value;` with the jsdoc on the declaration."""
    name = self.name(identifier)
    if value is not None:
      self.tree.add_child_to_back(name, value)
    return self.tree.new_node(kind, name, jsdoc=jsdoc)

  def script(self, *stmts: NodeId, source_file: Optional[str] = None) -> NodeId:
    return self.tree.new_node(Token.SCRIPT, *stmts, position=SourcePosition(source_file=source_file))

  # --- Classes ---

  def member_function_def(
    self,
    name: str,
    function: NodeId,
    is_static: bool = False,
    jsdoc: Optional[JSDocInfo] = None,
  ) -> NodeId:
    member = self.tree.new_node(Token.MEMBER_FUNCTION_DEF, function, string=name, jsdoc=jsdoc)
    self.tree.node(member).is_static = is_static
    return member

  def class_members(self, members: Iterable[NodeId] = ()) -> NodeId:
    return self.tree.new_node(Token.CLASS_MEMBERS, *members)

  def class_(
    self,
    name: NodeId,
    superclass: NodeId,
    members: NodeId,
    position: Optional[SourcePosition] = None,
  ) -> NodeId:
    return self.tree.new_node(Token.CLASS, name, superclass, members, position=position)
