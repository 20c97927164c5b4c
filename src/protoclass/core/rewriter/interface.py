"""
Interface definition for Rewriter Passes.

Every pass transforms a `SyntaxTree` in place and is run by the
``RewriterPipeline``.
"""

from abc import ABC, abstractmethod

from protoclass.core.js.tree import SyntaxTree
from protoclass.core.rewriter.context import RewriterContext


class RewriterPass(ABC):
  """
  Abstract contract for a transformation pass in the rewriting pipeline.
  """

  @abstractmethod
  def transform(self, tree: SyntaxTree, context: RewriterContext) -> SyntaxTree:
    """
    Executes the transformation on the given tree.

    Args:
        tree: The tree to rewrite in place.
        context: The shared rewriter context.

    Returns:
        The same tree, for chaining.
    """
    pass
