"""
Property-path resolution against the registry.

Walks a path of string segments and returns the descriptor it designates, or None.
Resolution is total: it never raises, and every miss (unknown entity type, unmatched
name, a segment with no defined transition) degrades to None.

Responsibilities
- find_prop: resolve ``[entityType, segment, ...]`` to a descriptor.
- elides_index: the named rule deciding whether a segment after an array of objects
  skips the index position and names an item field directly.
- iter_prop_paths: enumerate every resolvable path of an entry, with index and key
  positions elided where the walk allows it.

Dispatch table (current descriptor -> next segment ``s``)
----------------------------------------------------------
| current                 | transition
|-------------------------|---------------------------------------------------
| object                  | child named ``s``, else None
| array of object         | ``s`` is an index -> stay on the array;
|                         | otherwise child of the item named ``s``, else None
| array of array/map/...  | the item descriptor, whatever ``s`` is
| map of object           | child of the value named ``s`` if one exists and the
|                         | rest of the path resolves from it; otherwise ``s`` is
|                         | a key and the next segment names a value field
|                         | (a trailing key stays on the map)
| map of array            | the value descriptor, whatever ``s`` is
| map of scalar/map       | None
| scalar                  | None

Notes:
    - A miss does not stop the walk. Remaining segments are still consumed, each a
      no-op against an absent descriptor, and the result stays None.
    - A single-segment path names a root entry, not a field, and resolves to None.

Examples:
    >>> from propreg.core.resolver import find_prop
    >>> find_prop(["dockerImage", "name"]).type
    'scalar'
    >>> find_prop(["dockerImage", "missingField"]) is None
    True
    >>> find_prop(["torture", "arrayOfObjects", "0", "name"]) == find_prop(
    ...     ["torture", "arrayOfObjects", "name"]
    ... )
    True
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from typing import Final

from .grammar import format_path, is_index_segment
from .props import ArrayProp, MapProp, ObjectProp, Prop, RegistryEntry, ScalarProp
from .registry import Registry, default_registry

__all__ = [
    "ELEMENT_SEGMENT",
    "KEY_SEGMENT",
    "describe_paths",
    "elides_index",
    "find_prop",
    "iter_prop_paths",
    "step",
]

logger = logging.getLogger(__name__)

# Placeholder segments emitted by iter_prop_paths where a position cannot be elided.
ELEMENT_SEGMENT: Final[str] = "0"
KEY_SEGMENT: Final[str] = "*"


def elides_index(segment: str) -> bool:
    """
    Return True if ``segment`` skips an array index and names an item field directly.

    After an array whose items are objects, callers may omit the index: both
    ``items.0.name`` and ``items.name`` reach the item's ``name`` field. A segment
    that parses as a base-10 non-negative integer is an index; anything else is
    taken as a field name.

    Args:
        segment (str): The segment following an array-of-object descriptor.

    Returns:
        bool: False for index segments (``"0"``, ``"17"``), True otherwise.
    """
    return not is_index_segment(segment)


def _step_object(prop: ObjectProp, segment: str) -> Prop | None:
    return prop.child(segment)


def _step_array(prop: ArrayProp, segment: str) -> Prop | None:
    item = prop.item
    if item.type == "object":
        if elides_index(segment):
            return item.child(segment)
        # An index alone does not change the shape; the next segment reaches in.
        return prop
    return item


def _step_map(prop: MapProp, segment: str) -> Prop | None:
    value = prop.value
    if value.type == "object":
        child = value.child(segment)
        if child is not None:
            return child
        # Not a field of the value shape, so ``segment`` is the key itself.
        return prop
    if value.type == "array":
        return value
    return None


def _step_scalar(prop: ScalarProp, segment: str) -> Prop | None:
    return None


_STEPS: Final[dict[str, Callable[[Prop, str], Prop | None]]] = {
    "object": _step_object,
    "array": _step_array,
    "map": _step_map,
    "scalar": _step_scalar,
}


def step(prop: Prop, segment: str) -> Prop | None:
    """
    Consume one segment against the current descriptor.

    Args:
        prop (Prop): Descriptor currently being walked.
        segment (str): Next path segment.

    Returns:
        Prop | None: The next descriptor, or None when no transition applies.
    """
    handler = _STEPS.get(prop.type)
    if handler is None:
        return None
    return handler(prop, segment)


def _resolve_from(current: Prop | None, path: Sequence[str], position: int) -> Prop | None:
    for index in range(position, len(path)):
        if current is None:
            # Already absent; keep consuming segments without dispatching.
            continue
        segment = path[index]
        if current.type == "map" and current.value.type == "object":
            field = current.value.child(segment)
            if field is not None:
                resolved = _resolve_from(field, path, index + 1)
                if resolved is not None:
                    return resolved
            # Read as a key: the next segment reaches into the value's fields.
            if index == len(path) - 1:
                return current
            return _resolve_from(current.value, path, index + 1)
        current = step(current, segment)
        if current is None:
            logger.debug(
                "segment %r at position %d of %r did not resolve", segment, index, list(path)
            )
    return current


def find_prop(path: Sequence[str], registry: Registry | None = None) -> Prop | None:
    """
    Resolve a path of segments to the descriptor it designates.

    Args:
        path (Sequence[str]): ``[entityType, segment, ...]``.
        registry (Registry | None): Registry to resolve against; defaults to
            default_registry().

    Returns:
        Prop | None: The descriptor at ``path``, or None when the path does not
        resolve. The reason for a miss is not reported.

    Notes:
        After a map of objects, a segment naming a value field is first read as that
        field (elided key). If the rest of the path dead-ends from there, the same
        segment is re-read as the key, so a key spelled like a field still reaches
        the value's fields.
    """
    if not path:
        return None
    reg = default_registry() if registry is None else registry
    entry = reg.get(path[0])
    if entry is None:
        logger.debug("unknown entity type %r", path[0])
        return None
    if len(path) == 1:
        return None

    current = entry.child(path[1])
    if current is None:
        logger.debug("segment %r at position 1 of %r did not resolve", path[1], list(path))
    return _resolve_from(current, path, 2)


def _walk(prop: Prop, path: tuple[str, ...]) -> Iterator[tuple[tuple[str, ...], Prop]]:
    if prop.type == "object":
        for child in prop.properties:
            child_path = (*path, child.name)
            yield child_path, child
            yield from _walk(child, child_path)
    elif prop.type == "array":
        item = prop.item
        if item.type == "object":
            yield from _walk(item, path)
        else:
            item_path = (*path, ELEMENT_SEGMENT)
            yield item_path, item
            yield from _walk(item, item_path)
    elif prop.type == "map":
        value = prop.value
        if value.type == "object":
            yield from _walk(value, path)
        elif value.type == "array":
            value_path = (*path, KEY_SEGMENT)
            yield value_path, value
            yield from _walk(value, value_path)


def iter_prop_paths(entry: RegistryEntry) -> Iterator[tuple[tuple[str, ...], Prop]]:
    """
    Yield ``(path, prop)`` for every descriptor reachable from an entry, depth-first.

    Index and key positions are elided where the resolver allows it (items and
    values that are objects). Elsewhere ELEMENT_SEGMENT or KEY_SEGMENT stands in for
    the position. Scalar-valued and map-valued maps are leaves: their values have
    no resolvable path.

    Every yielded path resolves through find_prop back to the same descriptor,
    provided no array item field is named like an index (e.g. ``"0"``).

    Examples:
        >>> from propreg.core.entries import DOCKER_IMAGE_ENTRY
        >>> from propreg.core.grammar import format_path
        >>> [format_path(p) for p, _ in iter_prop_paths(DOCKER_IMAGE_ENTRY)][:4]
        ['dockerImage.name', 'dockerImage.image', 'dockerImage.ports', 'dockerImage.ports.0']
    """
    root = (entry.entity_type,)
    for prop in entry.properties:
        prop_path = (*root, prop.name)
        yield prop_path, prop
        yield from _walk(prop, prop_path)


def describe_paths(entry: RegistryEntry, separator: str = ".") -> list[str]:
    """Return every path of ``entry`` as separator-joined text."""
    return [format_path(path, separator) for path, _ in iter_prop_paths(entry)]
