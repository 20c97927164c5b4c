"""
Per-file Class Registry.

Maps qualified class names to the CLASS node defining them. The registry
references nodes that live in the tree; it never owns them. A new registry is
created (or `reset`) for every compilation unit, so classes never leak across
files.
"""

from typing import Dict, Optional

from protoclass.core.diagnostics import CLASS_REDEFINED_ERROR, DiagnosticsReporter
from protoclass.core.js.tree import NodeId, SyntaxTree


class ClassRegistry:
  """
  File-scoped map of class name to class node.

  The first definition of a name wins; later ones are reported as
  ClassRedefined and ignored.
  """

  def __init__(self, tree: SyntaxTree, reporter: DiagnosticsReporter) -> None:
    self.tree = tree
    self.reporter = reporter
    self._classes: Dict[str, NodeId] = {}

  def reset(self) -> None:
    self._classes.clear()

  def register(self, name: str, node_id: NodeId) -> bool:
    """
    Registers `node_id` under `name`.

    Args:
        name: Qualified class name.
        node_id: The defining node.

    Returns:
        bool: True if inserted; False if `name` was taken (a diagnostic is reported
        against `node_id` and the existing entry is kept).
    """
    if name in self._classes:
      self.reporter.report(CLASS_REDEFINED_ERROR, self.tree, node_id, name)
      return False
    self._classes[name] = node_id
    return True

  def lookup(self, name: str) -> Optional[NodeId]:
    return self._classes.get(name)

  def __contains__(self, name: object) -> bool:
    return name in self._classes

  def __len__(self) -> int:
    return len(self._classes)
