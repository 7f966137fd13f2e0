"""Registry entry for 'service': a deployable unit bound to an image."""

from __future__ import annotations

from ..grammar import ScalarKind
from ..props import ArrayProp, ObjectProp, RegistryEntry, ScalarProp

SERVICE_ENTRY = RegistryEntry(
    entity_type="service",
    label="Service",
    properties=(
        ScalarProp(name="image", label="Image"),
        ScalarProp(name="deploymentTarget", label="Deployment Target", kind=ScalarKind.SELECT),
        ScalarProp(name="replicas", label="Replicas", kind=ScalarKind.NUMBER),
        ArrayProp(
            name="endpoints",
            label="Endpoints",
            item=ObjectProp(
                name="endpoints",
                properties=(
                    ScalarProp(name="host"),
                    ScalarProp(name="port", kind=ScalarKind.NUMBER),
                    ScalarProp(name="public", kind=ScalarKind.BOOLEAN),
                ),
            ),
        ),
    ),
)
