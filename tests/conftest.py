"""
Pytest configuration for the EVC mode toolkit.

Provides fixtures for:
- A small two-vendor catalog and an inventory built on it
- A comparator over that inventory
- An inventory document on disk for CLI tests
- Settings cache isolation
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from evcmode.comparator import EvcComparator
from evcmode.config import get_settings
from evcmode.domain.models import BaselineRecord, HostRecord, Vendor
from evcmode.providers.static import StaticInventory

PROVIDER = "vc01"


@pytest.fixture
def catalog() -> List[BaselineRecord]:
    """
    A1..A3 form one Intel lineage, B1..B2 an AMD lineage.
    """
    return [
        BaselineRecord(key="A1", vendor=Vendor.INTEL, tier=1),
        BaselineRecord(key="A2", vendor=Vendor.INTEL, tier=2),
        BaselineRecord(key="A3", vendor=Vendor.INTEL, tier=3),
        BaselineRecord(key="B1", vendor=Vendor.AMD, tier=1),
        BaselineRecord(key="B2", vendor=Vendor.AMD, tier=2),
    ]


@pytest.fixture
def make_host() -> Callable[..., HostRecord]:
    def _make(name: str, key: Optional[str], provider_ref: str = PROVIDER) -> HostRecord:
        return HostRecord(name=name, max_baseline_key=key, provider_ref=provider_ref)

    return _make


@pytest.fixture
def inventory(catalog: List[BaselineRecord], make_host) -> StaticInventory:
    hosts = [
        make_host("esx01", "A3"),
        make_host("esx02", "A1"),
        make_host("esx03", "A2"),
        make_host("esx04", "B1"),
        make_host("esx05", None),
    ]
    return StaticInventory({PROVIDER: catalog}, hosts)


@pytest.fixture
def comparator(inventory: StaticInventory) -> EvcComparator:
    return EvcComparator(inventory)


@pytest.fixture
def inventory_file(tmp_path: Path) -> Path:
    """
    Inventory document on disk using the built-in catalog.
    """
    document = {
        "providers": {"vc01": {}},
        "hosts": [
            {"name": "esx01", "max_baseline_key": "intel-skylake", "provider_ref": "vc01"},
            {"name": "esx02", "max_baseline_key": "intel-haswell", "provider_ref": "vc01"},
            {"name": "esx03", "max_baseline_key": "intel-icelake", "provider_ref": "vc01"},
            {"name": "epyc01", "max_baseline_key": "amd-zen3", "provider_ref": "vc01"},
        ],
    }
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
