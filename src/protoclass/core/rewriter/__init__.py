"""
Rewriter Package.

The class conversion is split by concern:

- Registry: per-file map of class names to class nodes.
- Promoter: `@constructor` functions to class declarations.
- Merger: prototype and static method assignments to class members.
- Passes: the traversal driving the above over each script.
"""

from protoclass.core.rewriter.context import RewriterContext
from protoclass.core.rewriter.errors import ConversionInvariantError
from protoclass.core.rewriter.interface import RewriterPass
from protoclass.core.rewriter.pipeline import RewriterPipeline
from protoclass.core.rewriter.registry import ClassRegistry

__all__ = [
  "ClassRegistry",
  "ConversionInvariantError",
  "RewriterContext",
  "RewriterPass",
  "RewriterPipeline",
]
