"""
Tests for diagnostic records and the reporter.
"""

from protoclass.core.diagnostics import (
  CLASS_REDEFINED_ERROR,
  UNKNOWN_CLASS_ERROR,
  Diagnostic,
  DiagnosticKind,
  DiagnosticsReporter,
)
from protoclass.core.js import SourcePosition, Token
from protoclass.core.tracer import TraceEventType, get_tracer


def test_message_templates():
  assert CLASS_REDEFINED_ERROR.format("a.B") == "The class a.B has been defined multiple times within the same file."
  assert UNKNOWN_CLASS_ERROR.format("X") == "The class X could not be found."


def test_report_uses_node_position(tree, ir):
  node = tree.new_node(
    Token.NAME,
    string="X",
    position=SourcePosition(source_file="x.js", line=4, column=2),
  )
  reporter = DiagnosticsReporter()

  diagnostic = reporter.report(UNKNOWN_CLASS_ERROR, tree, node, "X")

  assert diagnostic.kind == DiagnosticKind.UNKNOWN_CLASS
  assert diagnostic.node_id == node
  assert (diagnostic.source_file, diagnostic.line, diagnostic.column) == ("x.js", 4, 2)
  assert diagnostic.describe() == "x.js:4:2: UNKNOWN_CLASS_ERROR: The class X could not be found."
  assert len(reporter) == 1


def test_report_falls_back_to_script_file(tree, ir):
  target = ir.name("A")
  ir.script(ir.expr_result(target), source_file="lib.js")
  reporter = DiagnosticsReporter()

  diagnostic = reporter.report(CLASS_REDEFINED_ERROR, tree, target, "A")

  assert diagnostic.source_file == "lib.js"
  assert diagnostic.line is None
  assert diagnostic.describe().startswith("lib.js: CLASS_REDEFINED_ERROR:")


def test_detached_node_has_unknown_location(tree, ir):
  reporter = DiagnosticsReporter()

  diagnostic = reporter.report(UNKNOWN_CLASS_ERROR, tree, ir.name("Q"), "Q")

  assert diagnostic.source_file is None
  assert diagnostic.describe().startswith("<unknown>: ")


def test_report_is_logged_and_traced(tree, ir, captured_console):
  reporter = DiagnosticsReporter()

  reporter.report(UNKNOWN_CLASS_ERROR, tree, ir.name("X"), "X")

  assert "The class X could not be found." in captured_console.export_text()
  (event,) = get_tracer().export()
  assert event["type"] == TraceEventType.DIAGNOSTIC
  assert event["metadata"] == {"key": "UNKNOWN_CLASS_ERROR"}


def test_of_kind_filters_in_order(tree, ir):
  reporter = DiagnosticsReporter()
  reporter.report(UNKNOWN_CLASS_ERROR, tree, ir.name("X"), "X")
  reporter.report(CLASS_REDEFINED_ERROR, tree, ir.name("A"), "A")
  reporter.report(UNKNOWN_CLASS_ERROR, tree, ir.name("Y"), "Y")

  unknown = reporter.of_kind(DiagnosticKind.UNKNOWN_CLASS)

  assert [d.message for d in unknown] == ["The class X could not be found.", "The class Y could not be found."]


def test_diagnostic_serializes():
  diagnostic = Diagnostic(kind=DiagnosticKind.CLASS_REDEFINED, key="CLASS_REDEFINED_ERROR", message="m", node_id=3)

  dumped = diagnostic.model_dump(mode="json")

  assert dumped["kind"] == "ClassRedefined"
  assert dumped["node_id"] == 3


def test_bracketed_file_names_are_logged_verbatim(tree, ir, captured_console):
  reporter = DiagnosticsReporter()
  target = ir.name("X")
  ir.script(ir.expr_result(target), source_file="pages/[id].js")
  other = ir.name("Y")
  ir.script(ir.expr_result(other), source_file="lib/[/x].js")

  reporter.report(UNKNOWN_CLASS_ERROR, tree, target, "X")
  reporter.report(UNKNOWN_CLASS_ERROR, tree, other, "Y")

  output = captured_console.export_text()
  assert "pages/[id].js: UNKNOWN_CLASS_ERROR" in output
  assert "lib/[/x].js: UNKNOWN_CLASS_ERROR" in output
