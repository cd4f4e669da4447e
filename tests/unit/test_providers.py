from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from evcmode.domain.errors import PreconditionError
from evcmode.domain.models import BaselineRecord, Vendor
from evcmode.providers import (
    InventoryProvider,
    StaticInventory,
    builtin_baselines,
)

EXPECTED_INTEL_MODES = 12
EXPECTED_AMD_MODES = 11


def test_builtin_catalog_tiers_ascend_per_vendor() -> None:
    records = builtin_baselines()
    intel = [r for r in records if r.vendor == Vendor.INTEL]
    amd = [r for r in records if r.vendor == Vendor.AMD]

    assert len(intel) == EXPECTED_INTEL_MODES
    assert len(amd) == EXPECTED_AMD_MODES
    assert [r.tier for r in intel] == list(range(1, EXPECTED_INTEL_MODES + 1))
    assert intel[0].key == "intel-merom"
    assert amd[-1].key == "amd-zen4"
    assert len({r.key for r in records}) == len(records)


def test_static_inventory_satisfies_protocol(inventory: StaticInventory) -> None:
    assert isinstance(inventory, InventoryProvider)


def test_resolve_provider_for_host_uses_host_ref(inventory: StaticInventory, make_host) -> None:
    assert inventory.resolve_provider_for_host(make_host("h", "A1", "vc09")) == "vc09"


def test_unknown_provider_raises_key_error(inventory: StaticInventory) -> None:
    with pytest.raises(KeyError):
        inventory.list_supported_baselines("nope")


def test_find_hosts_preserves_requested_order(inventory: StaticInventory) -> None:
    assert [h.name for h in inventory.find_hosts(["esx03", "esx01"])] == ["esx03", "esx01"]


def test_find_hosts_unknown_name(inventory: StaticInventory) -> None:
    with pytest.raises(PreconditionError, match="ghost"):
        inventory.find_hosts(["esx01", "ghost"])


def test_duplicate_keys_rejected() -> None:
    with pytest.raises(ValidationError, match="duplicate EVC mode keys"):
        StaticInventory(
            {
                "vc01": [
                    BaselineRecord(key="A1", vendor=Vendor.INTEL, tier=1),
                    BaselineRecord(key="A1", vendor=Vendor.INTEL, tier=2),
                ]
            }
        )


def test_duplicate_levels_rejected() -> None:
    with pytest.raises(ValidationError):
        StaticInventory(
            {
                "vc01": [
                    BaselineRecord(key="A1", vendor=Vendor.INTEL, tier=1),
                    BaselineRecord(key="A1-bis", vendor=Vendor.INTEL, tier=1),
                ]
            }
        )


def test_from_document_defaults_to_builtin_catalog() -> None:
    inventory = StaticInventory.from_document(
        {
            "providers": {
                "vc01": {},
                "lab": {"baselines": [{"key": "x1", "vendor": "amd", "tier": 1}]},
            },
            "hosts": [
                {"name": "esx01", "max_baseline_key": "intel-haswell", "provider_ref": "vc01"},
                {"name": "esx02", "provider_ref": "lab"},
            ],
        }
    )

    assert inventory.provider_refs == ["vc01", "lab"]
    assert [r.key for r in inventory.list_supported_baselines("vc01")] == [
        r.key for r in builtin_baselines()
    ]
    assert [r.key for r in inventory.list_supported_baselines("lab")] == ["x1"]
    assert inventory.hosts[1].max_baseline_key is None


def test_from_document_rejects_duplicate_host_names() -> None:
    with pytest.raises(ValidationError):
        StaticInventory.from_document(
            {
                "providers": {"vc01": {}},
                "hosts": [
                    {"name": "esx01", "provider_ref": "vc01"},
                    {"name": "esx01", "provider_ref": "vc01"},
                ],
            }
        )


def test_from_document_rejects_unknown_vendor() -> None:
    with pytest.raises(ValidationError):
        StaticInventory.from_document(
            {"providers": {"vc01": {"baselines": [{"key": "v1", "vendor": "via", "tier": 1}]}}}
        )


def test_from_file_round_trip(inventory_file: Path) -> None:
    inventory = StaticInventory.from_file(inventory_file)
    assert [h.name for h in inventory.hosts] == ["esx01", "esx02", "esx03", "epyc01"]


def test_from_file_missing_path_propagates(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        StaticInventory.from_file(tmp_path / "missing.json")


def test_from_file_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        StaticInventory.from_file(path)
