"""
Pydantic v2 models for the schema variant model: scalar, object, array and map
descriptors, plus the registry entry that roots one entity type.

Responsibilities
- Define the four descriptor variants as frozen, tagged models. The ``type`` literal is
  the discriminator; ``Prop`` is the closed union over it.
- Enforce unique child names inside every object and every registry entry.
- Parse dict-shaped (JSON-like) definitions into descriptors.

Style
- Zero-IO (stdlib + pydantic only).
- The variants deliberately share no base class. Consumers dispatch on ``prop.type``
  (or ``match``) and must handle all four tags, or treat the rest explicitly.

Examples
--------
>>> from propreg.core.props import ArrayProp, ObjectProp, ScalarProp
>>> port = ObjectProp(name="ports", properties=(ScalarProp(name="number", kind="number"),))
>>> ports = ArrayProp(name="ports", item=port)
>>> ports.item.child("number").kind.value
'number'
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationInfo, field_validator

from .errors import SchemaError
from .grammar import PropKind, ScalarKind

__all__ = [
    "ScalarProp",
    "ObjectProp",
    "ArrayProp",
    "MapProp",
    "Prop",
    "RegistryEntry",
    "prop_kind",
    "parse_prop",
    "parse_entry",
]

_FROZEN = ConfigDict(frozen=True, extra="forbid")


def _ensure_unique_names(props: tuple[Any, ...], owner: str) -> tuple[Any, ...]:
    seen: set[str] = set()
    for p in props:
        if p.name in seen:
            raise SchemaError(f"duplicate property name {p.name!r} in {owner}")
        seen.add(p.name)
    return props


def _find_named(props: Iterable[Prop], name: str) -> Prop | None:
    for p in props:
        if p.name == name:
            return p
    return None


class ScalarProp(BaseModel):
    """
    Leaf descriptor with no children.

    Attributes:
        name (str): Field name (non-empty).
        label (str | None): Optional human-facing label.
        kind (ScalarKind): Value kind, defaults to ``string``.
    """

    model_config = _FROZEN

    type: Literal["scalar"] = "scalar"
    name: str = Field(..., min_length=1)
    label: str | None = None
    kind: ScalarKind = ScalarKind.STRING


class ObjectProp(BaseModel):
    """
    Descriptor with an ordered sequence of uniquely named children.

    Attributes:
        name (str): Field name (non-empty).
        label (str | None): Optional human-facing label.
        properties (tuple[Prop, ...]): Children in declaration order.

    Raises:
        pydantic.ValidationError: If two children share a name.
    """

    model_config = _FROZEN

    type: Literal["object"] = "object"
    name: str = Field(..., min_length=1)
    label: str | None = None
    properties: tuple[Prop, ...] = ()

    @field_validator("properties")
    @classmethod
    def _unique_children(cls, v: tuple[Any, ...], info: ValidationInfo) -> tuple[Any, ...]:
        return _ensure_unique_names(v, f"object {info.data.get('name')!r}")

    def child(self, name: str) -> Prop | None:
        """Return the child named exactly ``name``, or None."""
        return _find_named(self.properties, name)


class ArrayProp(BaseModel):
    """
    Descriptor whose elements all share one item descriptor.

    Elements are addressed by position, never by name.
    """

    model_config = _FROZEN

    type: Literal["array"] = "array"
    name: str = Field(..., min_length=1)
    label: str | None = None
    item: Prop


class MapProp(BaseModel):
    """
    Descriptor keyed by arbitrary strings; every value shares one descriptor.
    """

    model_config = _FROZEN

    type: Literal["map"] = "map"
    name: str = Field(..., min_length=1)
    label: str | None = None
    value: Prop


Prop = Annotated[
    Union[ScalarProp, ObjectProp, ArrayProp, MapProp],
    Field(discriminator="type"),
]

ObjectProp.model_rebuild()
ArrayProp.model_rebuild()
MapProp.model_rebuild()


class RegistryEntry(BaseModel):
    """
    Root schema for one entity type: an unnamed object of top-level descriptors.

    Attributes:
        entity_type (str): Non-empty registry key (e.g. ``dockerImage``).
        label (str | None): Optional human-facing label.
        properties (tuple[Prop, ...]): Top-level descriptors in declaration order.

    Raises:
        pydantic.ValidationError: If the entity type is empty or two top-level
            descriptors share a name.

    Examples:
        >>> from propreg.core.props import RegistryEntry, ScalarProp
        >>> entry = RegistryEntry(entity_type="dockerImage", properties=(ScalarProp(name="image"),))
        >>> entry.child("image").type
        'scalar'
    """

    model_config = _FROZEN

    entity_type: str = Field(..., min_length=1)
    label: str | None = None
    properties: tuple[Prop, ...] = ()

    @field_validator("properties")
    @classmethod
    def _unique_children(cls, v: tuple[Any, ...], info: ValidationInfo) -> tuple[Any, ...]:
        return _ensure_unique_names(v, f"entity {info.data.get('entity_type')!r}")

    def child(self, name: str) -> Prop | None:
        """Return the top-level descriptor named exactly ``name``, or None."""
        return _find_named(self.properties, name)


_PROP_ADAPTER: TypeAdapter[Prop] = TypeAdapter(Prop)


def prop_kind(prop: Prop) -> PropKind:
    return PropKind(prop.type)


def parse_prop(data: Mapping[str, Any]) -> Prop:
    """
    Validate a dict-shaped descriptor definition.

    Args:
        data (Mapping[str, Any]): JSON-like mapping with a ``type`` tag.

    Returns:
        Prop: The matching frozen variant.

    Raises:
        pydantic.ValidationError: On unknown tags, missing payloads or duplicate names.
    """
    return _PROP_ADAPTER.validate_python(data)


def parse_entry(data: Mapping[str, Any]) -> RegistryEntry:
    """Validate a dict-shaped registry entry definition."""
    return RegistryEntry.model_validate(data)
