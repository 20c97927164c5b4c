"""
Orchestration Engine for the class conversion.

`ConversionEngine` runs the rewriter pipeline over an already parsed program
and packages the outcome:

1.  **Context Setup**: fresh diagnostics sink, change counter and trace log.
2.  **Rewriting**: the `ClassConversionPass` over every script, in order.
3.  **Result Assembly**: changes, diagnostics, trace events and the success flag.

Parsing JavaScript into a `SyntaxTree` and printing it back are the host's job.
"""

from typing import List, Optional

from rich.markup import escape

from protoclass.config import RuntimeConfig
from protoclass.core.conversion_result import ConversionResult
from protoclass.core.js.tree import SyntaxTree
from protoclass.core.rewriter.context import RewriterContext
from protoclass.core.rewriter.errors import ConversionInvariantError
from protoclass.core.rewriter.interface import RewriterPass
from protoclass.core.rewriter.passes import ClassConversionPass
from protoclass.core.rewriter.pipeline import RewriterPipeline
from protoclass.core.tracer import get_tracer, reset_tracer
from protoclass.utils.console import log_error, log_success, log_warning


class ConversionEngine:
  """
  Runs the class conversion over one program tree.
  """

  def __init__(
    self,
    config: Optional[RuntimeConfig] = None,
    passes: Optional[List[RewriterPass]] = None,
  ) -> None:
    """
    Initializes the Engine.

    Args:
        config (RuntimeConfig, optional): Runtime configuration; loaded from
            pyproject.toml when omitted.
        passes (List[RewriterPass], optional): Pipeline override. Defaults to
            the class conversion alone.
    """
    self.config = config or RuntimeConfig.load()
    self.passes = passes if passes is not None else [ClassConversionPass()]

  def run(self, tree: SyntaxTree) -> ConversionResult:
    """
    Rewrites `tree` in place.

    An internal invariant violation aborts the run: the result carries the
    error and `success=False`, and the tree must be considered unusable.

    Args:
        tree (SyntaxTree): Program whose root holds SCRIPT nodes.

    Returns:
        ConversionResult: Outcome of the run.
    """
    reset_tracer()
    context = RewriterContext(self.config)
    pipeline = RewriterPipeline(self.passes)

    errors: List[str] = []
    try:
      pipeline.run(tree, context)
    except ConversionInvariantError as e:
      log_error(f"Class conversion aborted: {escape(str(e))}")
      errors.append(str(e))

    diagnostics = list(context.reporter.diagnostics)
    success = not errors and not (self.config.strict_mode and diagnostics)

    if success and not diagnostics:
      log_success(f"Class conversion finished ({context.changes} changes).")
    elif success:
      log_warning(f"Class conversion finished with {len(diagnostics)} diagnostics.")

    return ConversionResult(
      changes=context.changes,
      diagnostics=diagnostics,
      errors=errors,
      success=success,
      trace_events=get_tracer().export(),
    )
