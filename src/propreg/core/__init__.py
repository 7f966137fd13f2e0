"""
Core package for propreg contracts (grammar, descriptors, registry, resolution).

## Contracts (single source of truth)
- Grammar: variant tags, scalar kinds, path segment helpers.
- Props: frozen, tagged descriptor models (scalar/object/array/map) and RegistryEntry.
- Entries: compiled-in schemas, one module per entity type.
- Registry: immutable entity-type -> RegistryEntry mapping, built explicitly.
- Resolver: find_prop and the named elision rule.
- Serde: canonical JSON for descriptors.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Resolution never raises; construction raises SchemaError/GrammarError/RegistryError.

## Examples
```python
from propreg.core import find_prop, list_entity_types
"dockerImage" in list_entity_types()  # True
find_prop(["dockerImage", "name"]).type  # 'scalar'
find_prop(["torture", "mapOfObjects", "anyKey", "x"]).name  # 'x'
```
"""

from __future__ import annotations

import logging

from .errors import GrammarError, RegistryError, SchemaError
from .grammar import PropKind, ScalarKind, format_path, is_index_segment, parse_path
from .props import (
    ArrayProp,
    MapProp,
    ObjectProp,
    Prop,
    RegistryEntry,
    ScalarProp,
    parse_entry,
    parse_prop,
    prop_kind,
)
from .registry import Registry, build_registry, default_registry, get_entry, list_entity_types
from .resolver import describe_paths, elides_index, find_prop, iter_prop_paths

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GrammarError",
    "RegistryError",
    "SchemaError",
    "PropKind",
    "ScalarKind",
    "format_path",
    "is_index_segment",
    "parse_path",
    "ArrayProp",
    "MapProp",
    "ObjectProp",
    "Prop",
    "RegistryEntry",
    "ScalarProp",
    "parse_entry",
    "parse_prop",
    "prop_kind",
    "Registry",
    "build_registry",
    "default_registry",
    "get_entry",
    "list_entity_types",
    "describe_paths",
    "elides_index",
    "find_prop",
    "iter_prop_paths",
]
