"""
In-memory inventory provider.

Backs the CLI and the test-suite. Catalogs and hosts come either from Python
objects or from a JSON inventory document:

    {
      "providers": {
        "vc01": {},
        "lab": {"baselines": [{"key": "x1", "vendor": "intel", "tier": 1}]}
      },
      "hosts": [
        {"name": "esx01", "max_baseline_key": "intel-skylake", "provider_ref": "vc01"}
      ]
    }

A provider entry without `baselines` uses the built-in catalog.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field, model_validator

from evcmode.domain.errors import PreconditionError
from evcmode.domain.models import BaselineRecord, HostRecord
from evcmode.providers.abstract import AbstractInventoryProvider
from evcmode.providers.catalog import builtin_baselines
from evcmode.utils.logging import get_logger

log = get_logger(__name__)


class ProviderCatalog(BaseModel):
    """
    Catalog section of an inventory document for one provider instance.
    """

    baselines: Optional[List[BaselineRecord]] = Field(
        None, description="Supported EVC modes; omitted means the built-in catalog."
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_unique(self) -> "ProviderCatalog":
        if not self.baselines:
            return self
        keys = [record.key for record in self.baselines]
        duplicate_keys = sorted({key for key in keys if keys.count(key) > 1})
        if duplicate_keys:
            raise ValueError(f"duplicate EVC mode keys: {', '.join(duplicate_keys)}")
        levels = [(record.vendor, record.tier) for record in self.baselines]
        if len(set(levels)) != len(levels):
            raise ValueError("each (vendor, tier) pair must map to exactly one EVC mode key")
        return self

    def records(self) -> List[BaselineRecord]:
        if self.baselines is None:
            return builtin_baselines()
        return list(self.baselines)


class InventoryDocument(BaseModel):
    """
    Top-level JSON inventory document.
    """

    providers: Dict[str, ProviderCatalog] = Field(default_factory=dict)
    hosts: List[HostRecord] = Field(default_factory=list)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_hosts(self) -> "InventoryDocument":
        names = [host.name for host in self.hosts]
        if len(set(names)) != len(names):
            raise ValueError("host names must be unique within an inventory")
        return self


class StaticInventory(AbstractInventoryProvider):
    """
    Inventory provider over fixed catalogs and hosts.

    Parameters
    ----------
    catalogs : Mapping[str, Iterable[BaselineRecord]]
        Supported baselines per provider reference.
    hosts : Iterable[HostRecord]
        Hosts known to the inventory, in listing order.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Iterable[BaselineRecord]],
        hosts: Iterable[HostRecord] = (),
    ) -> None:
        self._catalogs: Dict[str, ProviderCatalog] = {
            ref: ProviderCatalog(baselines=list(records)) for ref, records in catalogs.items()
        }
        self._hosts: List[HostRecord] = list(hosts)

    @classmethod
    def from_document(cls, payload: Mapping[str, Any]) -> "StaticInventory":
        """Build an inventory from a parsed JSON document."""
        document = InventoryDocument.model_validate(payload)
        inventory = cls({}, document.hosts)
        inventory._catalogs = dict(document.providers)
        return inventory

    @classmethod
    def from_file(cls, path: Path | str) -> "StaticInventory":
        """Load an inventory document from disk."""
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            payload = json.load(f)
        inventory = cls.from_document(payload)
        log.debug(
            "Inventory loaded",
            extra={
                "path": str(path),
                "providers": sorted(inventory._catalogs),
                "hosts": len(inventory._hosts),
            },
        )
        return inventory

    @property
    def provider_refs(self) -> List[str]:
        return list(self._catalogs)

    @property
    def hosts(self) -> List[HostRecord]:
        return list(self._hosts)

    def find_hosts(self, names: Sequence[str]) -> List[HostRecord]:
        """
        Return the named hosts in the requested order.

        Raises
        ------
        PreconditionError
            If any name is not in the inventory.
        """
        by_name = {host.name: host for host in self._hosts}
        missing = [name for name in names if name not in by_name]
        if missing:
            raise PreconditionError(
                f"Unknown host(s): {', '.join(missing)}. Available: {', '.join(by_name)}"
            )
        return [by_name[name] for name in names]

    def list_supported_baselines(self, provider_ref: str) -> List[BaselineRecord]:
        if provider_ref not in self._catalogs:
            raise KeyError(f"Unknown provider '{provider_ref}'")
        return self._catalogs[provider_ref].records()


__all__ = ["InventoryDocument", "ProviderCatalog", "StaticInventory"]
