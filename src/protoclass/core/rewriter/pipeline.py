"""
Orchestration logic for executing sequential rewriter passes.
"""

from typing import List

from protoclass.core.js.tree import SyntaxTree
from protoclass.core.rewriter.context import RewriterContext
from protoclass.core.rewriter.interface import RewriterPass


class RewriterPipeline:
  """
  Manages a sequence of rewriting passes and executes them in order.
  """

  def __init__(self, passes: List[RewriterPass]) -> None:
    """
    Initializes the pipeline with a list of passes.

    Args:
        passes: Sequenced list of passes to execute.
    """
    self.passes = passes

  def run(self, tree: SyntaxTree, context: RewriterContext) -> SyntaxTree:
    """
    Executes all passes sequentially on the tree.

    Args:
        tree: The tree to transform.
        context: The shared execution state.

    Returns:
        The transformed tree.
    """
    current = tree
    for pass_instance in self.passes:
      current = pass_instance.transform(current, context)

    return current
