"""
Conversion Diagnostics.

Recoverable problems found while converting a file. Reporting a diagnostic
never stops the pass: the offending node is left as found and traversal
continues. Diagnostics are kept in report order, which is file order and then
document order within a file.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field
from rich.markup import escape

from protoclass.core.js.tree import NodeId, SyntaxTree
from protoclass.core.tracer import get_tracer
from protoclass.utils.console import log_error


class DiagnosticKind(str, Enum):
  CLASS_REDEFINED = "ClassRedefined"
  UNKNOWN_CLASS = "UnknownClass"


@dataclass(frozen=True)
class DiagnosticType:
  """
  A kind of diagnostic with its message template.

  Attributes:
      kind: Category exposed to callers.
      key: Stable identifier, e.g. for suppression lists.
      template: `str.format` template; `{0}` is the qualified class name.
  """

  kind: DiagnosticKind
  key: str
  template: str

  def format(self, *args: str) -> str:
    return self.template.format(*args)


CLASS_REDEFINED_ERROR = DiagnosticType(
  DiagnosticKind.CLASS_REDEFINED,
  "CLASS_REDEFINED_ERROR",
  "The class {0} has been defined multiple times within the same file.",
)

UNKNOWN_CLASS_ERROR = DiagnosticType(
  DiagnosticKind.UNKNOWN_CLASS,
  "UNKNOWN_CLASS_ERROR",
  "The class {0} could not be found.",
)


class Diagnostic(BaseModel):
  """A reported problem, anchored to the node that triggered it."""

  kind: DiagnosticKind = Field(..., description="Diagnostic category.")
  key: str = Field(..., description="Identifier of the diagnostic type.")
  message: str = Field(..., description="Rendered message.")
  node_id: NodeId = Field(..., description="Node the diagnostic points at.")
  source_file: Optional[str] = Field(None, description="File of the node, if known.")
  line: Optional[int] = Field(None, description="1-based line of the node, if known.")
  column: Optional[int] = Field(None, description="1-based column of the node, if known.")

  def describe(self) -> str:
    """`file:line:col: KEY: message`, omitting unknown location parts."""
    location = self.source_file or "<unknown>"
    if self.source_file and self.line is not None:
      location = f"{location}:{self.line}:{self.column or 0}"
    return f"{location}: {self.key}: {self.message}"


class DiagnosticsReporter:
  """
  Collects diagnostics for one conversion run.

  Each report is appended to `diagnostics`, logged and traced.
  """

  def __init__(self) -> None:
    self.diagnostics: List[Diagnostic] = []

  def report(self, dtype: DiagnosticType, tree: SyntaxTree, node_id: NodeId, *args: str) -> Diagnostic:
    """
    Records a diagnostic against a node.

    The node's source file falls back to that of its enclosing script when
    the node itself carries no position.

    Args:
        dtype: Which diagnostic.
        tree: The tree holding the node.
        node_id: The triggering node.
        *args: Template arguments.

    Returns:
        Diagnostic: The recorded entry.
    """
    position = tree.node(node_id).position
    diagnostic = Diagnostic(
      kind=dtype.kind,
      key=dtype.key,
      message=dtype.format(*args),
      node_id=node_id,
      source_file=position.source_file or _enclosing_source_file(tree, node_id),
      line=position.line,
      column=position.column,
    )
    self.diagnostics.append(diagnostic)
    log_error(escape(diagnostic.describe()))
    get_tracer().log_diagnostic(diagnostic.key, diagnostic.message)
    return diagnostic

  def of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
    return [d for d in self.diagnostics if d.kind == kind]

  def __len__(self) -> int:
    return len(self.diagnostics)


def _enclosing_source_file(tree: SyntaxTree, node_id: NodeId) -> Optional[str]:
  current: Optional[NodeId] = node_id
  while current is not None:
    source_file = tree.node(current).position.source_file
    if source_file:
      return source_file
    current = tree.parent(current)
  return None
