"""
Tests for the Conversion Engine and the `convert` entry point.
"""

import pytest

from protoclass import ConversionEngine, RuntimeConfig, convert
from protoclass.core.diagnostics import DiagnosticKind
from protoclass.core.js import IR, JSDocInfo, SyntaxTree, Token
from protoclass.core.js.qualified_names import build
from protoclass.core.rewriter.errors import ConversionInvariantError
from protoclass.core.rewriter.interface import RewriterPass
from protoclass.core.tracer import TraceEventType


def _program(*targets: str) -> SyntaxTree:
  """`/** @constructor */ function A() {}` followed by one method per target."""
  tree = SyntaxTree()
  ir = IR(tree)
  ctor = ir.function(ir.name("A"), ir.param_list("x"), ir.block(), jsdoc=JSDocInfo(is_constructor=True))
  methods = [ir.expr_result(ir.assign(build(tree, t), ir.anonymous_function())) for t in targets]
  tree.add_child_to_back(tree.root, ir.script(ctor, *methods, source_file="legacy.js"))
  return tree


class ExplodingPass(RewriterPass):
  def transform(self, tree, context):
    raise ConversionInvariantError("Invalid declaration name: (getprop (name A) (string b))")


def test_run_reports_changes():
  tree = _program("A.prototype.foo", "A.bar")

  result = ConversionEngine(config=RuntimeConfig()).run(tree)

  assert result.success
  assert result.changes == 3
  assert result.changed
  assert not result.has_errors
  script = tree.first_child(tree.root)
  (cls,) = tree.children(script)
  assert tree.token(cls) == Token.CLASS


def test_diagnostics_are_not_fatal_by_default(captured_console):
  tree = _program("B.prototype.foo")

  result = ConversionEngine(config=RuntimeConfig()).run(tree)

  assert result.success
  assert result.has_errors
  (diagnostic,) = result.diagnostics_of_kind(DiagnosticKind.UNKNOWN_CLASS)
  assert diagnostic.source_file == "legacy.js"
  output = captured_console.export_text()
  assert "UNKNOWN_CLASS_ERROR" in output
  assert "1 diagnostics" in output


def test_strict_mode_fails_on_diagnostics():
  tree = _program("B.prototype.foo")

  result = ConversionEngine(config=RuntimeConfig(strict_mode=True)).run(tree)

  assert not result.success
  assert result.errors == []
  assert len(result.diagnostics) == 1


def test_invariant_violation_aborts(captured_console):
  tree = _program()

  result = ConversionEngine(config=RuntimeConfig(), passes=[ExplodingPass()]).run(tree)

  assert not result.success
  assert result.errors == ["Invalid declaration name: (getprop (name A) (string b))"]
  assert "aborted" in captured_console.export_text()


def test_other_exceptions_propagate():
  class BrokenPass(RewriterPass):
    def transform(self, tree, context):
      raise KeyError("boom")

  with pytest.raises(KeyError):
    ConversionEngine(config=RuntimeConfig(), passes=[BrokenPass()]).run(_program())


def test_trace_events_cover_run():
  result = ConversionEngine(config=RuntimeConfig()).run(_program("A.prototype.foo", "C.prototype.bar"))

  types = [e["type"] for e in result.trace_events]
  assert types[0] == TraceEventType.PHASE_START
  assert types[-1] == TraceEventType.PHASE_END
  assert types.count(TraceEventType.AST_MUTATION) == 2
  assert types.count(TraceEventType.DIAGNOSTIC) == 1
  assert result.trace_events[0]["description"] == "Script legacy.js"


def test_trace_is_reset_between_runs():
  engine = ConversionEngine(config=RuntimeConfig())
  engine.run(_program("A.prototype.foo"))

  second = engine.run(SyntaxTree())

  assert second.trace_events == []
  assert second.changes == 0


def test_log_mutations(captured_console):
  ConversionEngine(config=RuntimeConfig(log_mutations=True)).run(_program("A.prototype.foo"))

  output = captured_console.export_text()
  assert "Promoted constructor A" in output
  assert "Merged instance method A.foo" in output


def test_convert_returns_result():
  result = convert(_program("A.prototype.foo"))

  assert result.success
  assert result.changes == 2


def test_convert_strict_raises():
  with pytest.raises(ValueError, match="could not be found"):
    convert(_program("B.prototype.foo"), strict=True)


def test_convert_non_strict_keeps_diagnostics():
  result = convert(_program("B.prototype.foo"))

  assert [d.kind for d in result.diagnostics] == [DiagnosticKind.UNKNOWN_CLASS]


def test_second_run_is_a_no_op():
  tree = _program("A.prototype.foo", "A.bar")
  convert(tree)
  converted = tree.dump()

  again = convert(tree)

  assert again.changes == 0
  assert again.diagnostics == []
  assert tree.dump() == converted
