from __future__ import annotations

# ruff: noqa: S101
import json
from pathlib import Path

import pytest

from aadnorm.config import ConfigData, ConfigStore
from aadnorm.errors import ConfigError, InvalidInput, InvalidVersion


def test_missing_file_loads_empty_config(tmp_path: Path) -> None:
    store = ConfigStore(path=tmp_path / "config.json")
    assert store.load() == ConfigData()


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    store = ConfigStore(path=path)
    store.save(ConfigData(default_tenant="contoso.com", aad_version=2))

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw == {"default_tenant": "contoso.com", "aad_version": 2}
    assert store.load() == ConfigData(default_tenant="contoso.com", aad_version=2)
    assert not path.with_suffix(".tmp").exists()


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"default_tenant": "common", "legacy": True}), encoding="utf-8")
    assert ConfigStore(path=path).load() == ConfigData(default_tenant="common")


def test_malformed_json_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigStore(path=path).load()


def test_invalid_utf8_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_bytes(b"\xff\xfe{")
    with pytest.raises(ConfigError):
        ConfigStore(path=path).load()


def test_non_object_payload_raises_config_error(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigStore(path=path).load()


def test_set_default_tenant_stores_normalized_value(tmp_path: Path) -> None:
    store = ConfigStore(path=tmp_path / "config.json")
    cfg = store.set_default_tenant("Contoso")
    assert cfg.default_tenant == "contoso.onmicrosoft.com"
    assert store.load().default_tenant == "contoso.onmicrosoft.com"


def test_set_default_tenant_rejects_non_string(tmp_path: Path) -> None:
    store = ConfigStore(path=tmp_path / "config.json")
    with pytest.raises(InvalidInput):
        store.set_default_tenant(None)  # type: ignore[arg-type]


def test_set_aad_version(tmp_path: Path) -> None:
    store = ConfigStore(path=tmp_path / "config.json")
    assert store.set_aad_version("v2.0").aad_version == 2
    with pytest.raises(InvalidVersion):
        store.set_aad_version("v3.0")
    assert store.load().aad_version == 2


def test_clear_resets_defaults(tmp_path: Path) -> None:
    store = ConfigStore(path=tmp_path / "config.json")
    store.save(ConfigData(default_tenant="contoso.com", aad_version=1))
    store.clear()
    assert store.load() == ConfigData()


def test_default_path_follows_module_setting(config_home: Path) -> None:
    store = ConfigStore()
    assert store.path == config_home / "config.json"
