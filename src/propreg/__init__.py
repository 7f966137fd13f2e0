"""
propreg: entity-type schema registry and property-path resolver.

## Layers
- propreg.core: zero-IO contracts: descriptors, registry, resolver.
- propreg.config: RegistrySettings (env > TOML > defaults).
- propreg.cli: ``propreg`` command line.

## Import DAG discipline
- core depends only on stdlib and pydantic.
- config depends only on stdlib.
- cli depends on core and config.
"""

from __future__ import annotations

__version__ = "0.1.0"
