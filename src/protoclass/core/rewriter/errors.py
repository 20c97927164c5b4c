"""
Internal Error Types for the rewriter.

User-facing problems are diagnostics (see `protoclass.core.diagnostics`).
The errors here signal a broken internal contract and abort the pass.
"""


class ConversionInvariantError(RuntimeError):
  """A rewrite reached a state its own classification rules out."""
