"""Registry entry for 'dockerImage'.

Purpose:
- A container image reference plus the ports and environment it exposes.

Shape:
- name scalar, image scalar, ports array[scalar number], env map[scalar],
  registry object {url, username, password}
"""

from __future__ import annotations

from ..grammar import ScalarKind
from ..props import ArrayProp, MapProp, ObjectProp, RegistryEntry, ScalarProp

DOCKER_IMAGE_ENTRY = RegistryEntry(
    entity_type="dockerImage",
    label="Docker Image",
    properties=(
        ScalarProp(name="name", label="Name"),
        ScalarProp(name="image", label="Image"),
        ArrayProp(
            name="ports",
            label="Exposed Ports",
            item=ScalarProp(name="ports", kind=ScalarKind.NUMBER),
        ),
        MapProp(
            name="env",
            label="Environment",
            value=ScalarProp(name="env"),
        ),
        ObjectProp(
            name="registry",
            label="Registry",
            properties=(
                ScalarProp(name="url", label="URL"),
                ScalarProp(name="username", label="Username"),
                ScalarProp(name="password", label="Password", kind=ScalarKind.PASSWORD),
            ),
        ),
    ),
)
