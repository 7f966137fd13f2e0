"""Tests for `propreg.core.resolver.find_prop` and its step rules."""

import logging

import pytest

from propreg.core.entries import DOCKER_IMAGE_ENTRY, TORTURE_ENTRY
from propreg.core.props import ArrayProp, MapProp, ObjectProp, RegistryEntry, ScalarProp
from propreg.core.registry import build_registry, default_registry
from propreg.core.resolver import elides_index, find_prop, iter_prop_paths, step


@pytest.fixture()
def registry():
    return build_registry([DOCKER_IMAGE_ENTRY, TORTURE_ENTRY])


def _torture(*segments: str):
    return find_prop(["torture", *segments], default_registry())


# ---------------------------------------------------------------------------
# Degenerate paths
# ---------------------------------------------------------------------------


def test_empty_path_is_absent(registry) -> None:
    assert find_prop([], registry) is None
    assert find_prop([], build_registry([])) is None


def test_unknown_entity_type_is_absent(registry) -> None:
    assert find_prop(["unknownType"], registry) is None
    assert find_prop(["unknownType", "name"], registry) is None


def test_bare_entity_type_is_absent() -> None:
    reg = default_registry()
    for entity_type in reg.list_entity_types():
        assert find_prop([entity_type], reg) is None


# ---------------------------------------------------------------------------
# dockerImage scenario
# ---------------------------------------------------------------------------


def test_docker_image_scenario(registry) -> None:
    prop = find_prop(["dockerImage", "name"], registry)
    assert isinstance(prop, ScalarProp)
    assert prop.name == "name"
    assert find_prop(["dockerImage", "missingField"], registry) is None
    assert find_prop(["dockerImage"], registry) is None


def test_default_registry_is_used_when_none_given() -> None:
    assert find_prop(["dockerImage", "name"]) == DOCKER_IMAGE_ENTRY.child("name")


def test_accepts_tuples(registry) -> None:
    assert find_prop(("dockerImage", "registry", "url"), registry).name == "url"


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------


def test_nested_objects() -> None:
    assert _torture("nested").type == "object"
    assert _torture("nested", "inner").name == "inner"
    assert _torture("nested", "deeper", "leaf").name == "leaf"
    assert _torture("nested", "nope") is None


def test_lookups_are_exact_match() -> None:
    assert _torture("Nested") is None
    assert _torture("nested", "INNER") is None


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


def test_array_of_objects_index_is_elidable() -> None:
    elided = _torture("arrayOfObjects", "name")
    indexed = _torture("arrayOfObjects", "0", "name")
    assert elided is not None
    assert elided == indexed
    assert elided.name == "name"


def test_array_of_objects_index_alone_keeps_array() -> None:
    prop = _torture("arrayOfObjects", "3")
    assert isinstance(prop, ArrayProp)
    assert prop.name == "arrayOfObjects"


def test_array_of_objects_unknown_field_is_absent() -> None:
    assert _torture("arrayOfObjects", "missing") is None
    assert _torture("arrayOfObjects", "-1") is None


def test_array_of_scalars_consumes_any_segment() -> None:
    by_index = _torture("arrayOfStrings", "0")
    by_name = _torture("arrayOfStrings", "whatever")
    assert isinstance(by_index, ScalarProp)
    assert by_index == by_name == TORTURE_ENTRY.child("arrayOfStrings").item


def test_array_of_arrays() -> None:
    inner = _torture("arrayOfArrays", "0")
    assert isinstance(inner, ArrayProp)
    assert isinstance(_torture("arrayOfArrays", "0", "1"), ScalarProp)


def test_array_of_arrays_of_objects() -> None:
    x = _torture("arrayOfArraysOfObjects", "0", "x")
    assert x is not None and x.name == "x"
    assert _torture("arrayOfArraysOfObjects", "0", "0", "x") == x


def test_array_of_maps() -> None:
    assert isinstance(_torture("arrayOfMaps", "2"), MapProp)


# ---------------------------------------------------------------------------
# Maps
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("key", ["anyKey", "0", "prod", "some-key", "x", "y"])
def test_map_of_objects_reaches_value_fields_for_any_key(key: str) -> None:
    x = _torture("mapOfObjects", key, "x")
    assert x is not None
    assert x.name == "x"


def test_map_of_objects_key_is_elidable() -> None:
    assert _torture("mapOfObjects", "y") == _torture("mapOfObjects", "anyKey", "y")


def test_map_key_spelled_like_a_field_falls_back_to_key() -> None:
    x = _torture("mapOfObjects", "x")
    assert _torture("mapOfObjects", "x", "x") == x
    assert _torture("mapOfObjects", "y", "x") == x
    assert _torture("mapOfObjects", "x", "y").name == "y"
    assert _torture("mapOfObjects", "x", "x", "more") is None
    assert _torture("mapOfObjects", "k1", "k2") is None


def test_map_of_objects_key_alone_keeps_map() -> None:
    assert isinstance(_torture("mapOfObjects", "anyKey"), MapProp)


def test_map_of_arrays() -> None:
    value = _torture("mapOfArrays", "anyKey")
    assert isinstance(value, ArrayProp)
    assert isinstance(_torture("mapOfArrays", "anyKey", "0"), ScalarProp)


def test_map_of_scalars_has_no_further_resolution() -> None:
    assert isinstance(_torture("mapOfStrings"), MapProp)
    assert _torture("mapOfStrings", "anyKey") is None


def test_map_of_maps_has_no_further_resolution() -> None:
    assert _torture("mapOfMaps", "anyKey") is None


def test_scalar_cannot_be_indexed() -> None:
    assert _torture("standardString", "0") is None
    assert _torture("standardString", "length") is None


# ---------------------------------------------------------------------------
# Non-short-circuiting policy
# ---------------------------------------------------------------------------


def test_miss_does_not_stop_the_walk(caplog: pytest.LogCaptureFixture) -> None:
    # A miss partway through keeps consuming segments; later segments that would
    # resolve on their own never revive the result.
    path = ["torture", "missing", "nested", "inner"]
    with caplog.at_level(logging.DEBUG, logger="propreg.core.resolver"):
        assert find_prop(path, default_registry()) is None
    misses = [r for r in caplog.records if "did not resolve" in r.getMessage()]
    assert len(misses) == 1
    assert "'missing'" in misses[0].getMessage()


def test_miss_after_scalar_stays_absent() -> None:
    assert _torture("standardString", "x", "nested", "inner") is None


# ---------------------------------------------------------------------------
# Rules and purity
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "segment,expected",
    [("name", True), ("0", False), ("12", False), ("-1", True), ("1.5", True), ("", True)],
)
def test_elides_index_rule(segment: str, expected: bool) -> None:
    assert elides_index(segment) is expected


def test_step_dispatches_on_variant() -> None:
    obj = ObjectProp(name="o", properties=(ScalarProp(name="a"),))
    assert step(obj, "a") == ScalarProp(name="a")
    assert step(ScalarProp(name="s"), "a") is None
    arr = ArrayProp(name="arr", item=obj)
    assert step(arr, "0") is arr
    assert step(arr, "a") == ScalarProp(name="a")


def test_repeated_calls_are_equal() -> None:
    reg = default_registry()
    paths = [
        ["dockerImage", "name"],
        ["torture", "mapOfObjects", "k", "x"],
        ["torture", "arrayOfObjects", "0"],
        ["torture", "missing"],
    ]
    for path in paths:
        assert find_prop(path, reg) == find_prop(path, reg)


def test_custom_registry_is_respected() -> None:
    entry = RegistryEntry(
        entity_type="widget",
        properties=(
            ArrayProp(
                name="items",
                item=ObjectProp(name="items", properties=(ScalarProp(name="name"),)),
            ),
            MapProp(
                name="entries",
                value=ObjectProp(name="entries", properties=(ScalarProp(name="x"),)),
            ),
        ),
    )
    reg = build_registry([entry])
    assert find_prop(["widget", "items", "name"], reg) == find_prop(
        ["widget", "items", "0", "name"], reg
    )
    assert find_prop(["widget", "entries", "anyKey", "x"], reg).name == "x"
    assert find_prop(["dockerImage", "name"], reg) is None


# ---------------------------------------------------------------------------
# Path enumeration
# ---------------------------------------------------------------------------


def test_every_enumerated_path_resolves_to_its_prop() -> None:
    reg = default_registry()
    for entry in reg.values():
        for path, prop in iter_prop_paths(entry):
            assert find_prop(path, reg) == prop, f"{'.'.join(path)} did not round-trip"


def test_enumerated_paths_for_torture_maps() -> None:
    paths = {".".join(p) for p, _ in iter_prop_paths(TORTURE_ENTRY)}
    assert "torture.mapOfObjects.x" in paths
    assert "torture.mapOfArrays.*" in paths
    assert "torture.mapOfArrays.*.0" in paths
    assert "torture.arrayOfObjects.name" in paths
    assert "torture.arrayOfArraysOfObjects.0.x" in paths
    assert not any(p.startswith("torture.mapOfStrings.") for p in paths)
