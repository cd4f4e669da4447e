import json
from pathlib import Path

import pytest

from evcmode import config
from evcmode.comparator import EvcComparator
from evcmode.providers.static import StaticInventory
from scripts import generate_inventory

_ENV_VARS = ("EVC_INVENTORY_PATH", "APP_ENV", "LOG_LEVEL", "LOG_JSON")


@pytest.fixture
def clean_env(monkeypatch, tmp_path: Path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.chdir(tmp_path)


def test_get_settings_defaults(clean_env):
    settings = config.get_settings()
    assert settings.inventory_path == "inventory.json"
    assert settings.app_env == "development"
    assert settings.log_level == "WARNING"
    assert settings.log_json is False


def test_settings_read_environment(clean_env, monkeypatch):
    monkeypatch.setenv("EVC_INVENTORY_PATH", "/srv/inventory.json")
    monkeypatch.setenv("LOG_JSON", "true")
    settings = config.get_settings()
    assert settings.inventory_path == "/srv/inventory.json"
    assert settings.log_json is True


def test_generate_inventory_is_deterministic():
    first = generate_inventory._generate_document(hosts=10, providers=2, seed=7, amd_ratio=0.5)
    second = generate_inventory._generate_document(hosts=10, providers=2, seed=7, amd_ratio=0.5)
    assert first == second
    assert sorted(first["providers"]) == ["vc01", "vc02"]
    assert [h["provider_ref"] for h in first["hosts"][:4]] == ["vc01", "vc02", "vc01", "vc02"]


def test_generate_inventory_writes_loadable_document(tmp_path: Path):
    path = tmp_path / "out" / "inventory.json"
    document = generate_inventory._generate_document(hosts=5, providers=1, seed=123)
    generate_inventory._write_document(path, document)

    with path.open("r", encoding="utf-8") as f:
        assert json.load(f) == document

    inventory = StaticInventory.from_file(path)
    assert len(inventory.hosts) == 5
    # Intel-only inventory always has a common mode
    assert EvcComparator(inventory).max_common_baseline(inventory.hosts) is not None


def test_generate_inventory_unknown_hosts():
    document = generate_inventory._generate_document(hosts=20, providers=1, seed=1, unknown_ratio=1.0)
    keys = {h["max_baseline_key"] for h in document["hosts"]}
    assert keys <= {None, "unsupported-mode"}
