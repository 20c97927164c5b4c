"""
Data structures representing the output of a conversion run.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from protoclass.core.diagnostics import Diagnostic, DiagnosticKind


class ConversionResult(BaseModel):
  """
  Container for the results of a class conversion.
  """

  changes: int = Field(default=0, description="Number of 'program changed' notifications.")
  diagnostics: List[Diagnostic] = Field(default_factory=list, description="Diagnostics in report order.")
  errors: List[str] = Field(default_factory=list, description="Fatal error messages (aborted runs).")
  success: bool = Field(default=True, description="True if the run completed and, in strict mode, was clean.")
  trace_events: List[Dict[str, Any]] = Field(default_factory=list, description="Execution trace log data.")

  @property
  def changed(self) -> bool:
    return self.changes > 0

  @property
  def has_errors(self) -> bool:
    """
    True if the run aborted or reported any diagnostic.

    Returns:
        True if errors or diagnostics are present.
    """
    return bool(self.errors) or bool(self.diagnostics)

  def diagnostics_of_kind(self, kind: DiagnosticKind) -> List[Diagnostic]:
    return [d for d in self.diagnostics if d.kind == kind]
