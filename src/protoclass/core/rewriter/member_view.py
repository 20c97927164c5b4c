"""
Member Assignment View.

A read-only projection over an expression statement of the form
`a.b.C.prototype.m = function() {}` (instance member) or
`a.b.C.m = function() {}` (static member). Views are built, used for one merge
decision and dropped; they never modify the tree.
"""

from typing import List, Optional

from protoclass.core.js.jsdoc import JSDocInfo
from protoclass.core.js.node_util import get_best_jsdoc, is_function_assignment
from protoclass.core.js.qualified_names import segments
from protoclass.core.js.tree import NodeId, SyntaxTree
from protoclass.core.rewriter.errors import ConversionInvariantError

PROTOTYPE = "prototype"


class MemberAssignmentView:
  """
  Parsed form of a method-valued property assignment.

  Attributes:
      expr_root: The EXPR_RESULT statement.
      assign: Its ASSIGN child.
      target: The GETPROP being assigned.
      rhs: The assigned FUNCTION.
      target_segments: Segments of `target`, e.g. ``["A", "prototype", "foo"]``.
      jsdoc: Documentation of the assignment.
  """

  def __init__(
    self,
    tree: SyntaxTree,
    expr_root: NodeId,
    assign: NodeId,
    target: NodeId,
    rhs: NodeId,
    target_segments: List[str],
    jsdoc: Optional[JSDocInfo],
  ) -> None:
    self.tree = tree
    self.expr_root = expr_root
    self.assign = assign
    self.target = target
    self.rhs = rhs
    self.target_segments = target_segments
    self.jsdoc = jsdoc

  @classmethod
  def parse(cls, tree: SyntaxTree, expr_root: NodeId) -> Optional["MemberAssignmentView"]:
    """
    Builds a view if `expr_root` is `qualified.name = function() {}`.

    Args:
        tree: The tree.
        expr_root: Candidate EXPR_RESULT.

    Returns:
        Optional[MemberAssignmentView]: The view, or None for any other statement.
    """
    if not is_function_assignment(tree, expr_root):
      return None
    assign = tree.first_child(expr_root)
    target, rhs = tree.children(assign)
    target_segments = segments(tree, target)
    if target_segments is None:
      return None
    return cls(
      tree=tree,
      expr_root=expr_root,
      assign=assign,
      target=target,
      rhs=rhs,
      target_segments=target_segments,
      jsdoc=get_best_jsdoc(tree, assign),
    )

  @property
  def is_static(self) -> bool:
    """Instance members are those whose penultimate segment is `prototype`."""
    return not (len(self.target_segments) >= 2 and self.target_segments[-2] == PROTOTYPE)

  @property
  def member_name(self) -> str:
    return self.target_segments[-1]

  @property
  def class_name(self) -> str:
    """
    Qualified name of the class the member belongs to.

    - `A.B.C.prototype.foo` -> `A.B.C`
    - `A.B.C.D.bar` -> `A.B.C.D`

    Raises:
        ConversionInvariantError: If an instance member has no `prototype` segment.
    """
    if self.is_static:
      return ".".join(self.target_segments[:-1])

    # Outermost property access inwards.
    for idx in range(len(self.target_segments) - 1, -1, -1):
      if self.target_segments[idx] == PROTOTYPE:
        return ".".join(self.target_segments[:idx])
    raise ConversionInvariantError(f"Invalid declaration name: {self.tree.dump(self.target)}")
