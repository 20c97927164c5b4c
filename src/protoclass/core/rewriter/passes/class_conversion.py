"""
Class Conversion Pass.

Converts legacy prototype-based class declarations into native classes, one
script at a time:

1.  **Constructor Promotion**: `@constructor` functions become class declarations.
2.  **Member Merging**: `X.prototype.m = function` and `X.s = function` assignments
    become instance and static methods of `X`.
3.  **Class Registration**: Native classes already present are registered so that
    later assignments can merge into them.

Each script gets its own `ClassRegistry`; classes are never shared between
files. Nodes are visited post-order, so a constructor is promoted before the
statement holding it is revisited, and sibling statements are handled in
document order.
"""

from typing import Optional

from protoclass.core.js.node_util import get_best_jsdoc, get_binding_name
from protoclass.core.js.tokens import Token
from protoclass.core.js.tree import NodeId, SyntaxTree
from protoclass.core.rewriter.context import RewriterContext
from protoclass.core.rewriter.interface import RewriterPass
from protoclass.core.rewriter.member_view import MemberAssignmentView
from protoclass.core.rewriter.merger import merge_member
from protoclass.core.rewriter.promoter import promote_constructor
from protoclass.core.rewriter.registry import ClassRegistry
from protoclass.core.tracer import get_tracer


class ClassConversionPass(RewriterPass):
  """
  Pass driving promotion, merging and registration over every script.
  """

  def transform(self, tree: SyntaxTree, context: RewriterContext) -> SyntaxTree:
    """
    Converts each SCRIPT under the tree root independently.

    Args:
        tree: The program.
        context: Shared rewriter state.

    Returns:
        The same tree, rewritten in place.
    """
    tracer = get_tracer()
    for script in tree.children(tree.root):
      if tree.token(script) != Token.SCRIPT:
        continue
      source_file = tree.node(script).position.source_file or f"<script {script}>"
      tracer.start_phase(f"Script {source_file}", "Class conversion")
      try:
        self.convert_script(tree, script, ClassRegistry(tree, context.reporter), context)
      finally:
        tracer.end_phase()
    return tree

  def convert_script(
    self,
    tree: SyntaxTree,
    script: NodeId,
    registry: ClassRegistry,
    context: RewriterContext,
  ) -> None:
    """
    Converts one compilation unit.

    Args:
        tree: The program.
        script: The SCRIPT node.
        registry: Registry for this script; it is reset before traversal.
        context: Shared rewriter state.
    """
    registry.reset()
    self._traverse(tree, script, registry, context)

  def _traverse(self, tree: SyntaxTree, node_id: NodeId, registry: ClassRegistry, context: RewriterContext) -> None:
    # Iterate a snapshot: visiting a child may detach it from this node.
    for child in tree.children(node_id):
      self._traverse(tree, child, registry, context)
    self.visit(tree, node_id, registry, context)

  def visit(
    self,
    tree: SyntaxTree,
    node_id: NodeId,
    registry: ClassRegistry,
    context: RewriterContext,
  ) -> Optional[NodeId]:
    """
    Dispatches a single node.

    Returns:
        Optional[NodeId]: The node created by a promotion or merge, if any.
    """
    token = tree.token(node_id)

    if token == Token.CLASS:
      class_name = get_binding_name(tree, node_id)
      # Anonymous class expressions have nothing to register.
      if class_name:
        registry.register(class_name, node_id)
      return None

    if token == Token.FUNCTION:
      parent = tree.parent(node_id)
      # Methods of a class, including an already promoted `constructor`, stay methods.
      if parent is not None and tree.token(parent) == Token.MEMBER_FUNCTION_DEF:
        return None
      jsdoc = get_best_jsdoc(tree, node_id)
      if jsdoc is not None and jsdoc.is_constructor:
        return promote_constructor(tree, node_id, jsdoc, registry, context)
      return None

    if token == Token.EXPR_RESULT:
      view = MemberAssignmentView.parse(tree, node_id)
      # Non-function values (fields) are not merged.
      if view is not None:
        return merge_member(tree, view, registry, context)
      return None

    return None
