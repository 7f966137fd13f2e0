"""Registry entry for 'system': the top-level grouping of services."""

from __future__ import annotations

from ..grammar import ScalarKind
from ..props import RegistryEntry, ScalarProp

SYSTEM_ENTRY = RegistryEntry(
    entity_type="system",
    label="System",
    properties=(
        ScalarProp(name="description", label="Description", kind=ScalarKind.TEXT),
        ScalarProp(name="environment", label="Environment", kind=ScalarKind.SELECT),
    ),
)
