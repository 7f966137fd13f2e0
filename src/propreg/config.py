"""
Configuration for propreg consumers (CLI and embedding applications).

Defines RegistrySettings, a frozen dataclass carrying runtime configuration for which
schemas are registered, how dotted path text is split, and how verbose logging is.

Precedence
- environment (PROPREG_*) > TOML > defaults.
- TOML search order when no explicit path is given:
    1) ./propreg.toml (either a [registry] table or top-level keys)
    2) ./pyproject.toml under [tool.propreg.registry]

Import DAG discipline
- Depends only on stdlib. propreg.core never imports this module; callers pass the
  relevant values (e.g. ``include_test_schemas``) into core functions explicitly.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

__all__ = ["RegistrySettings"]

logger = logging.getLogger(__name__)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_TRUTHY = {"1", "true", "t", "yes", "y", "on"}
_FALSY = {"0", "false", "f", "no", "n", "off"}


def _bool(v: Any) -> bool | None:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        lo = v.strip().lower()
        if lo in _TRUTHY:
            return True
        if lo in _FALSY:
            return False
    return None


@dataclass(frozen=True)
class RegistrySettings:
    """
    Runtime settings for building and querying the registry.

    Attributes:
        include_test_schemas (bool): Register the fixture schemas (``leftHandPath``,
            ``torture``) alongside the product schemas.
        path_separator (str): Separator used to split dotted path text (default ".").
        log_level (str): Logging level name applied by the CLI.

    Examples:
        >>> from propreg.config import RegistrySettings
        >>> RegistrySettings(path_separator="/")  # doctest: +ELLIPSIS
        RegistrySettings(...)
    """

    include_test_schemas: bool = True
    path_separator: str = "."
    log_level: str = "WARNING"

    @classmethod
    def _apply_mapping(cls, base: RegistrySettings, cfg: dict[str, Any] | None) -> RegistrySettings:
        """Apply a loose config mapping onto RegistrySettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        if "include_test_schemas" in cfg:
            flag = _bool(cfg["include_test_schemas"])
            if flag is None:
                logger.warning(
                    "ignoring include_test_schemas=%r (expected a boolean)",
                    cfg["include_test_schemas"],
                )
            else:
                s = replace(s, include_test_schemas=flag)

        if "path_separator" in cfg:
            sep = cfg["path_separator"]
            if isinstance(sep, str) and sep:
                s = replace(s, path_separator=sep)
            else:
                logger.warning("ignoring path_separator=%r (expected a non-empty string)", sep)

        if "log_level" in cfg and isinstance(cfg["log_level"], str):
            level = cfg["log_level"].strip().upper()
            if level in _LOG_LEVELS:
                s = replace(s, log_level=level)
            else:
                logger.warning("ignoring unknown log_level=%r", cfg["log_level"])

        return s

    @classmethod
    def from_env(
        cls, base: RegistrySettings | None = None, prefix: str = "PROPREG_"
    ) -> RegistrySettings:
        """
        Build RegistrySettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - PROPREG_INCLUDE_TEST_SCHEMAS (1/0/true/false/yes/no/on/off)
            - PROPREG_PATH_SEPARATOR
            - PROPREG_LOG_LEVEL
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("INCLUDE_TEST_SCHEMAS", "PATH_SEPARATOR", "LOG_LEVEL"):
            v = os.getenv(prefix + key)
            if v:
                mapping[key.lower()] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> RegistrySettings:
        """
        Build RegistrySettings from a TOML file.

        Search order when `path` is None:
            1) ./propreg.toml (with either top-level [registry] or direct keys)
            2) ./pyproject.toml under [tool.propreg.registry]

        Returns defaults if no file is present.

        Raises:
            tomllib.TOMLDecodeError: If a candidate file exists but is not valid TOML.
        """
        s = cls()

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "propreg.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            with p.open("rb") as fh:
                data = tomllib.load(fh)
            if p.name == "pyproject.toml":
                tool = data.get("tool")
                section = tool.get("propreg") if isinstance(tool, dict) else None
                cfg = section.get("registry") if isinstance(section, dict) else None
            elif isinstance(data.get("registry"), dict):
                cfg = data["registry"]
            else:
                cfg = data
            if cfg:
                logger.debug("loaded registry settings from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> RegistrySettings:
        """
        Load RegistrySettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (propreg.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
