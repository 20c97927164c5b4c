"""
Documentation Metadata attached to AST nodes.

`JSDocInfo` is the subset of a JSDoc block the class conversion reads: the
constructor flag and the declared base type. Parameter and return types are
carried along opaquely so that they survive the move onto class members.

Hosts that already parse JSDoc build `JSDocInfo` directly. Hosts that only hold
the raw comment text can use `JSDocInfo.from_comment`, which understands the
block tags relevant to legacy class declarations::

    /**
     * A shape.
     * @constructor
     * @extends {geom.Base}
     * @param {number} x
     */
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional, Tuple

# A tag starts at "@word" preceded by whitespace or the start of the block.
_TAG_SPLIT = re.compile(r"(?:^|(?<=\s))@(?=[A-Za-z])")
_TAG_NAME = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True)
class JSDocInfo:
  """
  Parsed documentation block.

  Attributes:
      is_constructor: True for `@constructor` blocks.
      base_type: Textual `@extends` reference as written (e.g. `!a.Base`).
      param_types: Parameter name to declared type expression.
      return_type: Declared `@return` type expression.
      description: Free text preceding the first tag.
  """

  is_constructor: bool = False
  base_type: Optional[str] = None
  param_types: Dict[str, str] = field(default_factory=dict)
  return_type: Optional[str] = None
  description: str = ""

  @classmethod
  def from_comment(cls, text: str) -> "JSDocInfo":
    """
    Reads a `/** ... */` block (comment markers optional).

    Unknown tags are ignored.

    Args:
        text: The raw comment.

    Returns:
        JSDocInfo: The metadata found in the block.
    """
    body = _strip_comment_markers(text)
    chunks = _TAG_SPLIT.split(body)

    is_constructor = False
    base_type = None
    param_types: Dict[str, str] = {}
    return_type = None

    for tag, type_expr, remainder in _iter_tags(chunks[1:]):
      words = remainder.split()
      if tag == "constructor":
        is_constructor = True
      elif tag == "extends":
        # `@extends Base` is accepted without braces.
        base_type = type_expr or (words[0] if words else None)
      elif tag == "param" and words:
        param_types[words[0]] = type_expr or "?"
      elif tag in ("return", "returns"):
        return_type = type_expr

    return cls(
      is_constructor=is_constructor,
      base_type=base_type,
      param_types=param_types,
      return_type=return_type,
      description=" ".join(chunks[0].split()),
    )


def _strip_comment_markers(text: str) -> str:
  body = text.strip()
  if body.startswith("/**"):
    body = body[3:]
  elif body.startswith("/*"):
    body = body[2:]
  if body.endswith("*/"):
    body = body[:-2]

  lines = []
  for line in body.splitlines():
    line = line.strip()
    if line.startswith("*"):
      line = line[1:]
    lines.append(line.strip())
  return "\n".join(lines)


def _iter_tags(chunks) -> Iterator[Tuple[str, Optional[str], str]]:
  """Yields (tag, braced type or None, trailing text) per tag chunk."""
  for chunk in chunks:
    match = _TAG_NAME.match(chunk)
    if not match:
      continue
    rest = chunk[match.end() :].lstrip()
    type_expr = None
    if rest.startswith("{"):
      type_expr, rest = _read_braced(rest)
    yield match.group(0), type_expr, rest


def _read_braced(text: str) -> Tuple[Optional[str], str]:
  """Splits `{...}rest` at the brace matching the first one."""
  depth = 0
  for idx, char in enumerate(text):
    if char == "{":
      depth += 1
    elif char == "}":
      depth -= 1
      if depth == 0:
        return text[1:idx].strip(), text[idx + 1 :].strip()
  # Unbalanced: treat the remainder as the type.
  return text[1:].strip(), ""
