"""
Member Merging.

Moves method-valued property assignments into the class they belong to:

- `A.prototype.foo = function() {}` becomes the instance method `foo` of `A`
- `A.bar = function() {}` becomes the static method `bar` of `A`

Methods are appended after the existing members, so merged methods keep their
source order. Assignments naming an unregistered class are left in place; only
instance (prototype) assignments are reported, because static assignments are
just as often made to plain namespace objects.
"""

from typing import Optional

from protoclass.core.diagnostics import UNKNOWN_CLASS_ERROR
from protoclass.core.js.ir import IR
from protoclass.core.js.tokens import Token
from protoclass.core.js.tree import NodeId, SyntaxTree
from protoclass.core.rewriter.context import RewriterContext
from protoclass.core.rewriter.member_view import MemberAssignmentView
from protoclass.core.rewriter.registry import ClassRegistry


def merge_member(
  tree: SyntaxTree,
  view: MemberAssignmentView,
  registry: ClassRegistry,
  context: RewriterContext,
) -> Optional[NodeId]:
  """
  Attempts to move the assignment described by `view` into its class.

  Args:
      tree: The tree being rewritten.
      view: The parsed assignment.
      registry: Classes of the current file.
      context: Shared rewriter state.

  Returns:
      Optional[NodeId]: The new MEMBER_FUNCTION_DEF, or None if nothing moved.
  """
  class_name = view.class_name
  class_node = registry.lookup(class_name)
  if class_node is None:
    if not view.is_static:
      context.reporter.report(UNKNOWN_CLASS_ERROR, tree, view.target, class_name)
    return None

  members = tree.last_child(class_node)
  if members is None or tree.token(members) != Token.CLASS_MEMBERS:
    raise ValueError(f"Registered class {class_name} has no member list: {tree.dump(class_node)}")

  before = tree.dump(view.expr_root)
  tree.detach(view.expr_root)
  tree.detach(view.rhs)

  member = IR(tree).member_function_def(
    view.member_name,
    view.rhs,
    is_static=view.is_static,
    jsdoc=view.jsdoc,
  )
  tree.add_child_to_back(members, member)

  kind = "static" if view.is_static else "instance"
  context.report_code_change(f"Merged {kind} method {class_name}.{view.member_name}", before, tree.dump(member))
  return member
