"""
Builders for legacy class programs used by the rewriter tests.
"""

from typing import Optional

import pytest

from protoclass.config import RuntimeConfig
from protoclass.core.js import IR, JSDocInfo, NodeId, SyntaxTree
from protoclass.core.js.qualified_names import build
from protoclass.core.rewriter.context import RewriterContext
from protoclass.core.rewriter.registry import ClassRegistry


class LegacyProgram:
  """Small DSL for writing `@constructor` / prototype programs."""

  def __init__(self, tree: SyntaxTree) -> None:
    self.tree = tree
    self.ir = IR(tree)

  def constructor(self, name: str, extends: Optional[str] = None, params=()) -> NodeId:
    """`/** @constructor [@extends {extends}] */ function name(params) { return 0; }`"""
    jsdoc = JSDocInfo(is_constructor=True, base_type=extends)
    body = self.ir.block(self.ir.return_(self.ir.number(0)))
    return self.ir.function(self.ir.name(name), self.ir.param_list(*params), body, jsdoc=jsdoc)

  def method(self, target: str, jsdoc: Optional[JSDocInfo] = None) -> NodeId:
    """`target = function() { return 1; };`"""
    fn = self.ir.anonymous_function(body=self.ir.block(self.ir.return_(self.ir.number(1))))
    return self.ir.expr_result(self.ir.assign(build(self.tree, target), fn, jsdoc=jsdoc))

  def script(self, *stmts: NodeId, source_file: str = "a.js") -> NodeId:
    script = self.ir.script(*stmts, source_file=source_file)
    self.tree.add_child_to_back(self.tree.root, script)
    return script

  def rhs(self, stmt: NodeId) -> NodeId:
    return self.tree.last_child(self.tree.first_child(stmt))


@pytest.fixture
def legacy(tree) -> LegacyProgram:
  return LegacyProgram(tree)


@pytest.fixture
def context() -> RewriterContext:
  return RewriterContext(RuntimeConfig())


@pytest.fixture
def registry(tree, context) -> ClassRegistry:
  return ClassRegistry(tree, context.reporter)
