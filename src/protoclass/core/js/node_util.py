"""
Structural queries over a `SyntaxTree`.

Covers the two lookups the conversion needs beyond plain navigation:
finding the documentation block that applies to a node, and finding the name
a function or class is bound to by its surrounding code.
"""

from typing import Optional

from protoclass.core.js.jsdoc import JSDocInfo
from protoclass.core.js.qualified_names import qualified_name
from protoclass.core.js.tokens import NAME_DECLARATIONS, Token
from protoclass.core.js.tree import NodeId, SyntaxTree


def get_best_jsdoc(tree: SyntaxTree, node_id: NodeId) -> Optional[JSDocInfo]:
  """
  Finds the documentation block governing a node.

  A block written before `var A = function() {}` or `a.B = function() {}` is
  attached to the declaration or assignment, not to the function, so lookups
  climb through those wrappers:

  - own jsdoc, if any
  - NAME parent: the declaration holding the name (`var A = ...`)
  - ASSIGN parent: the assignment, then its expression statement
  - STRING_KEY / MEMBER_FUNCTION_DEF parent: the key

  Args:
      tree: The tree.
      node_id: Node to look up.

  Returns:
      Optional[JSDocInfo]: The governing block, or None.
  """
  node = tree.node(node_id)
  if node.jsdoc is not None:
    return node.jsdoc

  parent = tree.parent(node_id)
  if parent is None:
    return None
  parent_token = tree.token(parent)

  if parent_token == Token.NAME:
    return get_best_jsdoc(tree, parent)
  if parent_token == Token.ASSIGN:
    return get_best_jsdoc(tree, parent)
  if parent_token == Token.EXPR_RESULT:
    return tree.node(parent).jsdoc
  if parent_token in (Token.STRING_KEY, Token.MEMBER_FUNCTION_DEF):
    return tree.node(parent).jsdoc
  if parent_token in NAME_DECLARATIONS and len(tree.children(parent)) == 1:
    return tree.node(parent).jsdoc
  return None


def get_binding_name(tree: SyntaxTree, node_id: NodeId) -> Optional[str]:
  """
  Name a FUNCTION or CLASS is known by.

  Resolution order:

  1. its own non-empty name (`function A() {}`, `class A {}`)
  2. the declared identifier (`var A = function() {}`)
  3. the assignment target (`a.b.C = class {}` gives `a.b.C`)
  4. the property key (`{C: function() {}}`)

  Returns:
      Optional[str]: The name, or None for anonymous declarations.
  """
  own = tree.first_child(node_id)
  if own is not None and tree.token(own) == Token.NAME and tree.string(own):
    return tree.string(own)

  parent = tree.parent(node_id)
  if parent is None:
    return None
  parent_token = tree.token(parent)

  if parent_token == Token.NAME:
    return tree.string(parent) or None
  if parent_token == Token.ASSIGN and tree.last_child(parent) == node_id:
    target = tree.first_child(parent)
    return qualified_name(tree, target) if target is not None else None
  if parent_token in (Token.STRING_KEY, Token.MEMBER_FUNCTION_DEF):
    return tree.string(parent) or None
  return None


def is_function_assignment(tree: SyntaxTree, node_id: NodeId) -> bool:
  """True for an EXPR_RESULT of shape `ASSIGN(GETPROP, FUNCTION)`."""
  if tree.token(node_id) != Token.EXPR_RESULT:
    return False
  assign = tree.first_child(node_id)
  if assign is None or tree.token(assign) != Token.ASSIGN:
    return False
  kids = tree.children(assign)
  return len(kids) == 2 and tree.token(kids[0]) == Token.GETPROP and tree.token(kids[1]) == Token.FUNCTION
