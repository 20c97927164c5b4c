"""
Rewriter Context Module.

Holds the state shared by the passes of one conversion run: configuration,
the diagnostics sink and the count of "program changed" notifications.
Per-file state (the class registry) is deliberately not kept here; passes
create it per compilation unit.
"""

from typing import Optional

from protoclass.config import RuntimeConfig
from protoclass.core.diagnostics import DiagnosticsReporter
from protoclass.core.tracer import get_tracer
from protoclass.utils.console import log_info


class RewriterContext:
  """
  Shared state container for the rewriting pipeline.
  """

  def __init__(
    self,
    config: Optional[RuntimeConfig] = None,
    reporter: Optional[DiagnosticsReporter] = None,
  ) -> None:
    """
    Initializes the context.

    Args:
        config: Runtime configuration. Defaults to `RuntimeConfig()`.
        reporter: Diagnostics sink. A fresh one is created if omitted.
    """
    self.config = config or RuntimeConfig()
    self.reporter = reporter or DiagnosticsReporter()
    self.changes: int = 0

  def report_code_change(self, action: str, before: str = "", after: str = "") -> None:
    """
    Notes that the tree was mutated.

    Args:
        action: Short description, e.g. "Promoted constructor A".
        before: Debug rendering of the affected subtree before the change.
        after: Debug rendering after the change.
    """
    self.changes += 1
    get_tracer().log_mutation(action, before, after)
    if self.config.log_mutations:
      log_info(action)
