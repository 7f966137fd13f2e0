"""Test fixture entry 'leftHandPath': object chains used to exercise name lookups."""

from __future__ import annotations

from ..props import ObjectProp, RegistryEntry, ScalarProp

LEFT_HAND_PATH_ENTRY = RegistryEntry(
    entity_type="leftHandPath",
    properties=(
        ScalarProp(name="simpleString"),
        ObjectProp(
            name="party",
            properties=(
                ScalarProp(name="poop"),
                ObjectProp(name="canada", properties=(ScalarProp(name="cat"),)),
            ),
        ),
    ),
)
