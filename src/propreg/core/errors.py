"""
Core exception types raised while constructing schemas and registries.

Provides typed exceptions for construction-time failures:
- SchemaError for descriptor shape violations (duplicate child names, bad tags).
- GrammarError for malformed path text (empty segments, empty separator).
- RegistryError for registry construction failures (duplicate entity types).

Notes:
    - Path resolution never raises; a miss is always ``None``. These errors only
      surface while schemas and registries are being built.
    - Validators in propreg.core.props raise SchemaError inside pydantic
      validators, so callers constructing models see ``pydantic.ValidationError``.

Examples:
    >>> from propreg.core.errors import RegistryError
    >>> try:
    ...     raise RegistryError("duplicate entity type: 'dockerImage'")
    ... except RegistryError as e:
    ...     msg = str(e)
    >>> "dockerImage" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "GrammarError",
    "RegistryError",
]


class SchemaError(ValueError):
    """Descriptor shape violation (duplicate child names, unknown variant tags)."""


class GrammarError(ValueError):
    """Malformed path text (empty segments or an empty separator)."""


class RegistryError(RuntimeError):
    """Registry construction failure (e.g., the same entity type registered twice)."""
