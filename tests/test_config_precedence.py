from __future__ import annotations

from pathlib import Path

import pytest

from propreg.config import RegistrySettings

_ENV_KEYS = [
    "PROPREG_INCLUDE_TEST_SCHEMAS",
    "PROPREG_PATH_SEPARATOR",
    "PROPREG_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def _write(tmp: Path, name: str, content: str) -> Path:
    p = tmp / name
    p.write_text(content)
    return p


def test_defaults_when_no_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    s = RegistrySettings.load()

    assert s.include_test_schemas is True
    assert s.path_separator == "."
    assert s.log_level == "WARNING"


def test_propreg_toml_registry_table(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(
        tmp_path,
        "propreg.toml",
        """
        [registry]
        include_test_schemas = false
        path_separator = "/"
        log_level = "debug"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)

    s = RegistrySettings.load()

    assert s.include_test_schemas is False
    assert s.path_separator == "/"
    assert s.log_level == "DEBUG"


def test_propreg_toml_top_level_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(tmp_path, "propreg.toml", 'path_separator = ":"')
    monkeypatch.chdir(tmp_path)

    assert RegistrySettings.load().path_separator == ":"


def test_pyproject_tool_table(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(
        tmp_path,
        "pyproject.toml",
        """
        [project]
        name = "demo"

        [tool.propreg.registry]
        include_test_schemas = false
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)

    assert RegistrySettings.load().include_test_schemas is False


def test_pyproject_non_table_tool_entry_falls_back_to_defaults(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    _write(tmp_path, "pyproject.toml", '[tool]\npropreg = "x"\n')
    monkeypatch.chdir(tmp_path)

    assert RegistrySettings.load() == RegistrySettings()

    _write(tmp_path, "pyproject.toml", '[tool.propreg]\nregistry = 3\n')

    assert RegistrySettings.load() == RegistrySettings()


def test_env_overrides_toml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write(
        tmp_path,
        "propreg.toml",
        """
        [registry]
        include_test_schemas = false
        path_separator = "/"
        """.strip(),
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROPREG_INCLUDE_TEST_SCHEMAS", "yes")
    monkeypatch.setenv("PROPREG_LOG_LEVEL", "info")

    s = RegistrySettings.load()

    assert s.include_test_schemas is True
    assert s.path_separator == "/"
    assert s.log_level == "INFO"


def test_explicit_toml_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = _write(tmp_path, "custom.toml", '[registry]\npath_separator = "|"\n')

    assert RegistrySettings.load(cfg).path_separator == "|"


def test_invalid_values_are_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("PROPREG_INCLUDE_TEST_SCHEMAS", "maybe")
    monkeypatch.setenv("PROPREG_LOG_LEVEL", "loud")

    s = RegistrySettings.load()

    assert s.include_test_schemas is True
    assert s.log_level == "WARNING"
