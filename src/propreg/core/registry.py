"""
Immutable registry mapping entity-type names to their root schemas.

Notes:
    - build_registry is the explicit initialization call: it takes entries in
      registration order and returns a frozen Registry. Nothing is registered as an
      import-time side effect.
    - default_registry builds the compiled-in registry (propreg.core.entries) once
      per flag value and hands back the same instance thereafter. The first build is
      taken under a lock, so concurrent first calls still share one instance.
    - A Registry never changes shape after construction; reads need no locking.

Examples:
    >>> from propreg.core.registry import build_registry
    >>> from propreg.core.entries import DOCKER_IMAGE_ENTRY
    >>> reg = build_registry([DOCKER_IMAGE_ENTRY])
    >>> reg.list_entity_types()
    ['dockerImage']
    >>> reg.get("unknownType") is None
    True
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

from .entries import ENTRIES, TEST_ENTRIES
from .errors import RegistryError
from .props import RegistryEntry

__all__ = [
    "Registry",
    "build_registry",
    "default_registry",
    "get_entry",
    "list_entity_types",
]

logger = logging.getLogger(__name__)

# Built lazily on first use, at most once per flag value even under concurrent first calls.
_DEFAULTS: dict[bool, Registry] = {}
_DEFAULTS_LOCK = threading.Lock()


class Registry(Mapping[str, RegistryEntry]):
    """
    Read-only mapping from entity-type name to RegistryEntry.

    Iteration follows registration order. Lookups of unknown names through ``get``
    return None; ``registry[name]`` raises KeyError like any Mapping.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, RegistryEntry]) -> None:
        self._entries = MappingProxyType(dict(entries))

    def __getitem__(self, entity_type: str) -> RegistryEntry:
        return self._entries[entity_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Registry({list(self._entries)!r})"

    def list_entity_types(self) -> list[str]:
        """Return all registered entity-type names in registration order."""
        return list(self._entries)


def build_registry(entries: Iterable[RegistryEntry]) -> Registry:
    """
    Build an immutable Registry from entries in registration order.

    Args:
        entries (Iterable[RegistryEntry]): Root schemas to register.

    Returns:
        Registry: Frozen mapping keyed by ``entry.entity_type``.

    Raises:
        RegistryError: If two entries share an entity type.
    """
    collected: dict[str, RegistryEntry] = {}
    for entry in entries:
        if entry.entity_type in collected:
            raise RegistryError(f"duplicate entity type: {entry.entity_type!r}")
        collected[entry.entity_type] = entry
    return Registry(collected)


def default_registry(include_test_schemas: bool = True) -> Registry:
    """
    Return the process-wide registry built from the compiled-in entries.

    Args:
        include_test_schemas (bool): Register the fixture schemas (``leftHandPath``,
            ``torture``) ahead of the product schemas.

    Returns:
        Registry: The same instance on every call with the same flag.
    """
    key = bool(include_test_schemas)
    registry = _DEFAULTS.get(key)
    if registry is None:
        with _DEFAULTS_LOCK:
            registry = _DEFAULTS.get(key)
            if registry is None:
                registry = _build_default_registry(key)
                _DEFAULTS[key] = registry
    return registry


def _build_default_registry(include_test_schemas: bool) -> Registry:
    entries = (*TEST_ENTRIES, *ENTRIES) if include_test_schemas else ENTRIES
    registry = build_registry(entries)
    logger.debug(
        "built default registry with %d entity types (test schemas: %s)",
        len(registry),
        include_test_schemas,
    )
    return registry


def get_entry(entity_type: str, registry: Registry | None = None) -> RegistryEntry | None:
    """
    Look up a registry entry by entity-type name.

    Args:
        entity_type (str): Registered name such as ``dockerImage``.
        registry (Registry | None): Registry to consult; defaults to default_registry().

    Returns:
        RegistryEntry | None: The entry, or None when the name is not registered.
    """
    reg = default_registry() if registry is None else registry
    return reg.get(entity_type)


def list_entity_types(registry: Registry | None = None) -> list[str]:
    """Return all registered entity-type names in registration order."""
    reg = default_registry() if registry is None else registry
    return reg.list_entity_types()
