"""
Qualified-Name Builder.

Converts dotted names to and from property-access chains:

    "a.b.c"  <->  GETPROP(GETPROP(NAME a, STRING b), STRING c)

`build` splits strictly on "." (no trimming, empty segments are kept), so that
``segments(tree, build(tree, s)) == s.split(".")`` for every input.
"""

from typing import List, Optional

from protoclass.core.js.tokens import Token
from protoclass.core.js.tree import NodeId, SyntaxTree


def build(tree: SyntaxTree, text: str) -> NodeId:
  """
  Creates a detached, left-associative GETPROP chain for `text`.

  The first segment becomes the innermost NAME; each following segment wraps
  the previous result.

  Args:
      tree: Tree to allocate the nodes in.
      text: Dotted name, e.g. "goog.events.EventTarget".

  Returns:
      NodeId: Root of the new expression.
  """
  first, *rest = text.split(".")
  node = tree.new_node(Token.NAME, string=first)
  for segment in rest:
    prop = tree.new_node(Token.STRING, string=segment)
    node = tree.new_node(Token.GETPROP, node, prop)
  return node


def segments(tree: SyntaxTree, node_id: NodeId) -> Optional[List[str]]:
  """
  Splits a NAME / THIS / GETPROP chain into its segments.

  `this.x` yields ``["this", "x"]``. Chains rooted in anything else
  (calls, literals, computed access) are not qualified names.

  Returns:
      Optional[List[str]]: Segments from the root outwards, or None.
  """
  parts: List[str] = []
  current = node_id
  while tree.token(current) == Token.GETPROP:
    kids = tree.children(current)
    if len(kids) != 2 or tree.token(kids[1]) != Token.STRING:
      return None
    parts.append(tree.string(kids[1]) or "")
    current = kids[0]

  root_token = tree.token(current)
  if root_token == Token.NAME:
    parts.append(tree.string(current) or "")
  elif root_token == Token.THIS:
    parts.append("this")
  else:
    return None

  parts.reverse()
  return parts


def qualified_name(tree: SyntaxTree, node_id: NodeId) -> Optional[str]:
  """Dotted form of `segments`, or None."""
  parts = segments(tree, node_id)
  if parts is None:
    return None
  return ".".join(parts)
