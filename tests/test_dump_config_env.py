from __future__ import annotations

import pytest

from nodedump.core.config import DEFAULT_JSON_INDENT, DumpConfig


@pytest.mark.basic
def test_from_env_defaults(monkeypatch) -> None:
    for name in ("NODEDUMP_FILE_PREFIX", "NODEDUMP_MODULE_ROOT", "NODEDUMP_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)

    assert DumpConfig.from_env() == DumpConfig()


@pytest.mark.basic
def test_from_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("NODEDUMP_FILE_PREFIX", "MyLib")
    monkeypatch.setenv("NODEDUMP_MODULE_ROOT", "/Script/Custom")
    monkeypatch.setenv("NODEDUMP_JSON_INDENT", "-1")

    cfg = DumpConfig.from_env()

    assert cfg.document_name("Full") == "MyLib_Full.json"
    assert cfg.module_root == "/Script/Custom"
    assert cfg.json_indent is None


@pytest.mark.basic
def test_from_env_invalid_indent_keeps_default(monkeypatch) -> None:
    monkeypatch.setenv("NODEDUMP_JSON_INDENT", "wide")
    assert DumpConfig.from_env().json_indent == DEFAULT_JSON_INDENT


@pytest.mark.basic
def test_with_overrides_ignores_none() -> None:
    cfg = DumpConfig()
    assert cfg.with_overrides(file_prefix=None) is cfg
    assert cfg.with_overrides(file_prefix="X").file_prefix == "X"


@pytest.mark.basic
def test_with_overrides_ignores_blank_strings() -> None:
    cfg = DumpConfig()
    assert cfg.with_overrides(file_prefix="") is cfg
    assert cfg.with_overrides(file_prefix="   ") is cfg
    assert cfg.with_overrides(file_prefix="  ", json_indent=0).json_indent == 0
