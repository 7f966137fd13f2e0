"""
Compiled-in registry entries, one module per entity type.

Notes:
    - ENTRIES holds the product schemas in registration order.
    - TEST_ENTRIES holds fixture schemas (``leftHandPath``, ``torture``) that are
      registered ahead of the product schemas when test schemas are enabled.
    - Entries are frozen pydantic models; nothing here performs IO.
"""

from __future__ import annotations

from ..props import RegistryEntry
from .docker_image import DOCKER_IMAGE_ENTRY
from .k8s_deployment import K8S_DEPLOYMENT_ENTRY
from .left_hand_path import LEFT_HAND_PATH_ENTRY
from .service import SERVICE_ENTRY
from .system import SYSTEM_ENTRY
from .torture import TORTURE_ENTRY

__all__ = [
    "DOCKER_IMAGE_ENTRY",
    "K8S_DEPLOYMENT_ENTRY",
    "LEFT_HAND_PATH_ENTRY",
    "SERVICE_ENTRY",
    "SYSTEM_ENTRY",
    "TORTURE_ENTRY",
    "ENTRIES",
    "TEST_ENTRIES",
]

TEST_ENTRIES: tuple[RegistryEntry, ...] = (
    LEFT_HAND_PATH_ENTRY,
    TORTURE_ENTRY,
)

ENTRIES: tuple[RegistryEntry, ...] = (
    SYSTEM_ENTRY,
    SERVICE_ENTRY,
    DOCKER_IMAGE_ENTRY,
    K8S_DEPLOYMENT_ENTRY,
)
