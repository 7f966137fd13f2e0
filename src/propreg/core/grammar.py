"""
Path grammar and variant vocabulary for the property registry.

Defines the descriptor variant tags, the scalar value kinds, and the helpers that
interpret path segments. Everything here is zero-IO and stdlib-only.

Path grammar
------------
A path is an ordered sequence of string segments::

    path        = entity_type , { segment } ;
    segment     = field_name | map_key | index ;
    index       = digit , { digit } ;

- The first segment is always an entity-type name (e.g. ``dockerImage``).
- Later segments are interpreted by the descriptor currently being walked: a field
  name inside an object, an arbitrary key inside a map, or a decimal index inside
  an array. The same text (``"0"``) can therefore mean different things at
  different depths.
- Dotted text (``"dockerImage.name"``) is a convenience for humans and CLIs;
  the resolver itself only ever sees segment sequences.

Examples
--------
>>> from propreg.core.grammar import is_index_segment, parse_path, format_path
>>> is_index_segment("0"), is_index_segment("-1"), is_index_segment("name")
(True, False, False)
>>> parse_path("torture.ports.0.number")
('torture', 'ports', '0', 'number')
>>> format_path(("torture", "ports", "number"))
'torture.ports.number'
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Final

from .errors import GrammarError

__all__ = [
    "PropKind",
    "ScalarKind",
    "DEFAULT_SEPARATOR",
    "is_index_segment",
    "parse_path",
    "format_path",
]

DEFAULT_SEPARATOR: Final[str] = "."


class PropKind(Enum):
    """
    The closed set of descriptor variants.

    Serialized values appear as the ``type`` discriminator on every descriptor.
    """

    SCALAR = "scalar"
    OBJECT = "object"
    ARRAY = "array"
    MAP = "map"


class ScalarKind(Enum):
    """
    Value kinds a scalar descriptor may hold.

    Notes:
        The kind is informational for form renderers and validators; the resolver
        treats every scalar the same way.
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    CODE = "code"
    SELECT = "select"
    PASSWORD = "password"
    TEXT = "text"


def is_index_segment(segment: str) -> bool:
    """
    Return True if a segment is a base-10, non-negative integer.

    Args:
        segment (str): Path segment to classify.

    Returns:
        bool: True for ``"0"``, ``"12"``; False for ``""``, ``"-1"``, ``"1.5"``,
        ``" 1"`` and non-ASCII digits.
    """
    return segment.isascii() and segment.isdecimal()


def parse_path(text: str, separator: str = DEFAULT_SEPARATOR) -> tuple[str, ...]:
    """
    Split dotted path text into segments.

    Args:
        text (str): Path text such as ``"dockerImage.name"``.
        separator (str): Segment separator (default ``"."``).

    Returns:
        tuple[str, ...]: The segments in order. Empty text yields an empty tuple.

    Raises:
        GrammarError: If the separator is empty or the text contains an empty segment.
    """
    if not separator:
        raise GrammarError("path separator must not be empty")
    if text == "":
        return ()
    segments = tuple(text.split(separator))
    if any(s == "" for s in segments):
        raise GrammarError(f"empty segment in path {text!r}")
    return segments


def format_path(segments: Iterable[str], separator: str = DEFAULT_SEPARATOR) -> str:
    return separator.join(segments)
