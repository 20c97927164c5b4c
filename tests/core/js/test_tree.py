"""
Tests for the arena-backed SyntaxTree.

Verifies:
1. Parent/child bookkeeping on construction.
2. Detach-before-attach enforcement.
3. In-place replacement and debug rendering.
"""

import pytest

from protoclass.core.js import Token, TreeStructureError


def test_new_tree_has_root(tree):
  assert tree.token(tree.root) == Token.ROOT
  assert tree.parent(tree.root) is None
  assert tree.children(tree.root) == ()


def test_children_are_adopted_in_order(tree, ir):
  a, b = ir.name("a"), ir.name("b")
  block = tree.new_node(Token.BLOCK, a, b)

  assert tree.children(block) == (a, b)
  assert tree.parent(a) == block
  assert tree.first_child(block) == a
  assert tree.second_child(block) == b
  assert tree.last_child(block) == b
  assert tree.index_of(b) == 1


def test_attach_requires_detached_child(tree, ir):
  """A node can only have one parent at a time."""
  name = ir.name("x")
  first = ir.block()
  second = ir.block()
  tree.add_child_to_back(first, name)

  with pytest.raises(TreeStructureError):
    tree.add_child_to_back(second, name)

  tree.detach(name)
  tree.add_child_to_back(second, name)
  assert tree.parent(name) == second
  assert tree.children(first) == ()


def test_attach_rejects_cycles(tree, ir):
  inner = ir.block()
  outer = ir.block(inner)
  tree.detach(outer)
  with pytest.raises(TreeStructureError):
    tree.add_child_to_back(inner, outer)


def test_detach_is_idempotent(tree, ir):
  name = ir.name("x")
  assert tree.detach(name) == name
  assert tree.parent(name) is None


def test_detach_children(tree, ir):
  fn = ir.anonymous_function("a")
  parts = tree.detach_children(fn)

  assert [tree.token(p) for p in parts] == [Token.NAME, Token.PARAM_LIST, Token.BLOCK]
  assert tree.children(fn) == ()
  assert all(tree.parent(p) is None for p in parts)


def test_replace_child_keeps_position(tree, ir):
  a, b, c = ir.name("a"), ir.name("b"), ir.name("c")
  block = ir.block(a, b)
  tree.replace_child(block, a, c)

  assert tree.children(block) == (c, b)
  assert tree.parent(a) is None
  assert tree.parent(c) == block


def test_replace_child_validates_edges(tree, ir):
  a, b = ir.name("a"), ir.name("b")
  block = ir.block(a)
  with pytest.raises(TreeStructureError):
    tree.replace_child(block, b, ir.name("c"))
  with pytest.raises(TreeStructureError):
    tree.replace_child(block, a, block)


def test_replace_with_requires_parent(tree, ir):
  with pytest.raises(TreeStructureError):
    tree.replace_with(ir.name("a"), ir.name("b"))


def test_is_attached(tree, ir):
  stmt = ir.expr_result(ir.name("a"))
  script = ir.script(stmt)
  assert not tree.is_attached(stmt)
  tree.add_child_to_back(tree.root, script)
  assert tree.is_attached(stmt)


def test_string_payload_restricted(tree):
  with pytest.raises(TreeStructureError):
    tree.new_node(Token.BLOCK, string="oops")


def test_unknown_id(tree):
  with pytest.raises(TreeStructureError):
    tree.node(12345)


def test_dump(tree, ir):
  prop = ir.getprop(ir.name("A"), "prototype", "foo")
  assert tree.dump(prop) == "(getprop (getprop (name A) (string prototype)) (string foo))"
  assert tree.dump(ir.name("")) == '(name "")'


def test_dump_marks_static_members(tree, ir):
  member = ir.member_function_def("bar", ir.anonymous_function(), is_static=True)
  assert tree.dump(member).startswith("(member_function_def:static bar (function")
