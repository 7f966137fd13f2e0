"""Test fixture entry 'torture'.

Purpose:
- One field per dispatch shape the resolver knows about, so every transition
  (object, array of X, map of X) can be exercised against a single entity.

Shape:
- standardString scalar, standardNumber scalar number
- nested object {inner, deeper {leaf}}
- arrayOfStrings array[scalar]
- arrayOfObjects array[object {name, value}]
- arrayOfArrays array[array[scalar]]
- arrayOfArraysOfObjects array[array[object {x}]]
- arrayOfMaps array[map[scalar]]
- mapOfStrings map[scalar]
- mapOfObjects map[object {x, y}]
- mapOfArrays map[array[scalar]]
- mapOfMaps map[map[scalar]]
"""

from __future__ import annotations

from ..grammar import ScalarKind
from ..props import ArrayProp, MapProp, ObjectProp, RegistryEntry, ScalarProp

TORTURE_ENTRY = RegistryEntry(
    entity_type="torture",
    properties=(
        ScalarProp(name="standardString"),
        ScalarProp(name="standardNumber", kind=ScalarKind.NUMBER),
        ObjectProp(
            name="nested",
            properties=(
                ScalarProp(name="inner"),
                ObjectProp(name="deeper", properties=(ScalarProp(name="leaf"),)),
            ),
        ),
        ArrayProp(name="arrayOfStrings", item=ScalarProp(name="arrayOfStrings")),
        ArrayProp(
            name="arrayOfObjects",
            item=ObjectProp(
                name="arrayOfObjects",
                properties=(
                    ScalarProp(name="name"),
                    ScalarProp(name="value", kind=ScalarKind.NUMBER),
                ),
            ),
        ),
        ArrayProp(
            name="arrayOfArrays",
            item=ArrayProp(name="arrayOfArrays", item=ScalarProp(name="arrayOfArrays")),
        ),
        ArrayProp(
            name="arrayOfArraysOfObjects",
            item=ArrayProp(
                name="arrayOfArraysOfObjects",
                item=ObjectProp(name="arrayOfArraysOfObjects", properties=(ScalarProp(name="x"),)),
            ),
        ),
        ArrayProp(
            name="arrayOfMaps",
            item=MapProp(name="arrayOfMaps", value=ScalarProp(name="arrayOfMaps")),
        ),
        MapProp(name="mapOfStrings", value=ScalarProp(name="mapOfStrings")),
        MapProp(
            name="mapOfObjects",
            value=ObjectProp(
                name="mapOfObjects",
                properties=(ScalarProp(name="x"), ScalarProp(name="y")),
            ),
        ),
        MapProp(
            name="mapOfArrays",
            value=ArrayProp(name="mapOfArrays", item=ScalarProp(name="mapOfArrays")),
        ),
        MapProp(
            name="mapOfMaps",
            value=MapProp(name="mapOfMaps", value=ScalarProp(name="mapOfMaps")),
        ),
    ),
)
