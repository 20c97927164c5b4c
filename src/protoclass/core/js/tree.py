"""
Arena-backed JavaScript Syntax Tree.

Nodes live in a `SyntaxTree` and are addressed by stable integer ids. The tree
owns the structure: an ordered child-id list per node and a parent map. Moving
a subtree is therefore an edge removal followed by a list insertion, and no node
object ever holds a pointer to another node.

Structural rule: a node has at most one parent. Attaching a node that is still
attached elsewhere raises `TreeStructureError`; callers `detach` first.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from protoclass.core.js.jsdoc import JSDocInfo
from protoclass.core.js.tokens import STRING_TOKENS, Token

NodeId = int


class TreeStructureError(ValueError):
  """Raised when an edit would break the single-parent tree structure."""


@dataclass(frozen=True)
class SourcePosition:
  """Origin of a node in the original source, 1-based."""

  source_file: Optional[str] = None
  line: Optional[int] = None
  column: Optional[int] = None

  def describe(self) -> str:
    if self.source_file is None:
      return "<unknown>"
    if self.line is None:
      return self.source_file
    return f"{self.source_file}:{self.line}:{self.column or 0}"


@dataclass
class Node:
  """
  Payload of a single tree element.

  Attributes:
      id: Arena identifier.
      token: The node kind.
      string: Identifier, property name or literal text for string-bearing kinds.
      jsdoc: Attached documentation metadata.
      is_static: Member flag for MEMBER_FUNCTION_DEF nodes.
      position: Source origin used for diagnostics.
  """

  id: NodeId
  token: Token
  string: Optional[str] = None
  jsdoc: Optional[JSDocInfo] = None
  is_static: bool = False
  position: SourcePosition = field(default_factory=SourcePosition)


class SyntaxTree:
  """
  Mutable arena of nodes with explicit parent/child edges.

  A fresh tree contains a single ROOT node (`tree.root`); compilation units are
  SCRIPT nodes appended under it.
  """

  def __init__(self) -> None:
    self._nodes: Dict[NodeId, Node] = {}
    self._children: Dict[NodeId, List[NodeId]] = {}
    self._parent: Dict[NodeId, Optional[NodeId]] = {}
    self._next_id: NodeId = 0
    self.root: NodeId = self.new_node(Token.ROOT)

  # --- Construction ---

  def new_node(
    self,
    token: Token,
    *children: NodeId,
    string: Optional[str] = None,
    jsdoc: Optional[JSDocInfo] = None,
    position: Optional[SourcePosition] = None,
  ) -> NodeId:
    """
    Allocates a node and attaches `children` to it in order.

    Args:
        token: Kind of the new node.
        *children: Detached nodes to adopt.
        string: Payload for string-bearing kinds.
        jsdoc: Documentation metadata.
        position: Source origin.

    Returns:
        NodeId: Id of the new node.
    """
    if string is not None and token not in STRING_TOKENS:
      raise TreeStructureError(f"{token.name} nodes do not carry a string")

    node_id = self._next_id
    self._next_id += 1
    self._nodes[node_id] = Node(
      id=node_id,
      token=token,
      string=string,
      jsdoc=jsdoc,
      position=position or SourcePosition(),
    )
    self._children[node_id] = []
    self._parent[node_id] = None
    for child in children:
      self.add_child_to_back(node_id, child)
    return node_id

  # --- Queries ---

  def node(self, node_id: NodeId) -> Node:
    try:
      return self._nodes[node_id]
    except KeyError:
      raise TreeStructureError(f"Unknown node id {node_id}") from None

  def token(self, node_id: NodeId) -> Token:
    return self.node(node_id).token

  def string(self, node_id: NodeId) -> Optional[str]:
    return self.node(node_id).string

  def children(self, node_id: NodeId) -> Tuple[NodeId, ...]:
    """Snapshot of the child ids, safe to iterate while editing the tree."""
    return tuple(self._children[node_id])

  def parent(self, node_id: NodeId) -> Optional[NodeId]:
    return self._parent[node_id]

  def first_child(self, node_id: NodeId) -> Optional[NodeId]:
    kids = self._children[node_id]
    return kids[0] if kids else None

  def second_child(self, node_id: NodeId) -> Optional[NodeId]:
    kids = self._children[node_id]
    return kids[1] if len(kids) > 1 else None

  def last_child(self, node_id: NodeId) -> Optional[NodeId]:
    kids = self._children[node_id]
    return kids[-1] if kids else None

  def index_of(self, node_id: NodeId) -> int:
    """
    Position of a node among its siblings.

    Raises:
        TreeStructureError: If the node is detached.
    """
    parent = self._parent[node_id]
    if parent is None:
      raise TreeStructureError(f"Node {node_id} has no parent")
    return self._children[parent].index(node_id)

  def is_attached(self, node_id: NodeId) -> bool:
    """True if `node_id` is reachable from the root."""
    current: Optional[NodeId] = node_id
    while current is not None:
      if current == self.root:
        return True
      current = self._parent[current]
    return False

  def __contains__(self, node_id: object) -> bool:
    return node_id in self._nodes

  def __len__(self) -> int:
    return len(self._nodes)

  # --- Mutation ---

  def detach(self, node_id: NodeId) -> NodeId:
    """
    Removes a node (and its subtree) from its parent.

    Detaching an already detached node is a no-op.

    Returns:
        NodeId: The detached node, for chaining.
    """
    parent = self._parent[node_id]
    if parent is not None:
      self._children[parent].remove(node_id)
      self._parent[node_id] = None
    return node_id

  def detach_children(self, node_id: NodeId) -> List[NodeId]:
    """Detaches all children of a node, returning them in order."""
    kids = self._children[node_id]
    self._children[node_id] = []
    for kid in kids:
      self._parent[kid] = None
    return kids

  def add_child_to_back(self, parent: NodeId, child: NodeId) -> None:
    self._check_adoptable(parent, child)
    self._children[parent].append(child)
    self._parent[child] = parent

  def replace_child(self, parent: NodeId, old: NodeId, new: NodeId) -> None:
    """
    Puts `new` at the position of `old`; `old` ends up detached.

    Raises:
        TreeStructureError: If `old` is not a child of `parent` or `new` is attached.
    """
    if self._parent[old] != parent:
      raise TreeStructureError(f"Node {old} is not a child of {parent}")
    self._check_adoptable(parent, new)
    kids = self._children[parent]
    kids[kids.index(old)] = new
    self._parent[old] = None
    self._parent[new] = parent

  def replace_with(self, old: NodeId, new: NodeId) -> None:
    """Replaces `old` in its parent by `new`."""
    parent = self._parent[old]
    if parent is None:
      raise TreeStructureError(f"Node {old} has no parent")
    self.replace_child(parent, old, new)

  def _check_adoptable(self, parent: NodeId, child: NodeId) -> None:
    if child not in self._nodes or parent not in self._nodes:
      raise TreeStructureError(f"Unknown node id in edge {parent} -> {child}")
    if self._parent[child] is not None:
      raise TreeStructureError(f"Node {child} already has parent {self._parent[child]}; detach it first")
    # Reject cycles: the child must not be an ancestor of the new parent.
    current: Optional[NodeId] = parent
    while current is not None:
      if current == child:
        raise TreeStructureError(f"Attaching {child} under {parent} would create a cycle")
      current = self._parent[current]

  # --- Debug Rendering ---

  def dump(self, node_id: Optional[NodeId] = None) -> str:
    """
    Renders a subtree as an S-expression, e.g. `(getprop (name A) (string foo))`.

    Static members are tagged `member_function_def:static`.
    """
    node_id = self.root if node_id is None else node_id
    node = self.node(node_id)
    label = node.token.value
    if node.token == Token.MEMBER_FUNCTION_DEF and node.is_static:
      label += ":static"
    parts = [label]
    if node.string is not None:
      parts.append(node.string or '""')
    parts.extend(self.dump(kid) for kid in self._children[node_id])
    return "(" + " ".join(parts) + ")"
