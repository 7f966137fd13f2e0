"""
Canonical JSON serialization for descriptors and registry entries.

Provides a single canonical JSON policy so CLI output and fixtures stay byte-stable
across runs. This module is zero-IO.

Notes:
    - Canonical JSON:
        - sort_keys=True
        - separators=(",", ":")
        - ensure_ascii=False
    - Descriptors are dumped through pydantic in ``json`` mode, so enum values are
      emitted as their lower-case strings.
"""

from __future__ import annotations

import json
from typing import Any

from .props import Prop, RegistryEntry, parse_entry, parse_prop

__all__ = [
    "json_dumps_canonical",
    "json_loads",
    "prop_to_json",
    "prop_from_json",
    "entry_to_json",
    "entry_from_json",
]


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object.

    Returns:
        str: Canonical JSON string with sort_keys=True, compact separators,
        and ensure_ascii=False.
    """
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def json_loads(s: str) -> Any:
    return json.loads(s)


def prop_to_json(prop: Prop) -> str:
    """
    Serialize a descriptor to canonical JSON.

    Examples:
        >>> from propreg.core.props import ScalarProp
        >>> prop_to_json(ScalarProp(name="name"))
        '{"kind":"string","label":null,"name":"name","type":"scalar"}'
    """
    return json_dumps_canonical(prop.model_dump(mode="json"))


def prop_from_json(s: str) -> Prop:
    return parse_prop(json_loads(s))


def entry_to_json(entry: RegistryEntry) -> str:
    return json_dumps_canonical(entry.model_dump(mode="json"))


def entry_from_json(s: str) -> RegistryEntry:
    return parse_entry(json_loads(s))
