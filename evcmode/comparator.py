"""
EVC mode catalog lookup and compatibility comparison.

Usage:
    from evcmode.comparator import EvcComparator
    from evcmode.providers import StaticInventory

    inventory = StaticInventory.from_file("inventory.json")
    comparator = EvcComparator(inventory)

    comparator.max_common_baseline(inventory.hosts)         # e.g. "intel-haswell"
    comparator.filter_by_compatibility(inventory.hosts, "intel-skylake", True)

EVC modes are monotonic inside a vendor lineage: every tier is a superset of
all lower tiers. The maximum common mode of a host group is therefore the
lowest tier among the hosts' maximum modes, and any vendor mismatch means no
common mode exists.

The catalog is read from the provider on every call and never cached here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from evcmode.domain.errors import InvalidArgument, PreconditionError
from evcmode.domain.models import BaselineRecord, HostRecord, Vendor
from evcmode.providers.abstract import InventoryProvider
from evcmode.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class HostCompatibility:
    """
    One row of a compatibility report.
    """

    host: HostRecord
    baseline: Optional[BaselineRecord]
    compatible: bool


def _find(catalog: Sequence[BaselineRecord], key: Optional[str]) -> Optional[BaselineRecord]:
    if key is None:
        return None
    for record in catalog:
        if record.key == key:
            return record
    return None


def _require_hosts(hosts: Sequence[HostRecord]) -> List[HostRecord]:
    hosts = list(hosts)
    if not hosts:
        raise PreconditionError("At least one host is required")
    return hosts


def selection_mode(compatible: bool, incompatible: bool) -> bool:
    """
    Turn a pair of compatible/incompatible flags into `want_compatible`.

    Exactly one flag must be set.

    Raises
    ------
    PreconditionError
        If both or neither flag is set.
    """
    if compatible == incompatible:
        raise PreconditionError("Specify exactly one of 'compatible' or 'incompatible'")
    return compatible


class EvcComparator:
    """
    Resolves EVC mode keys against a provider catalog and compares hosts.

    Parameters
    ----------
    inventory : InventoryProvider
        Collaborator supplying catalogs and host-to-provider resolution.
    """

    def __init__(self, inventory: InventoryProvider) -> None:
        self._inventory = inventory

    def list_baselines(
        self, provider_ref: str, vendor: Vendor | str | None = None
    ) -> List[BaselineRecord]:
        """List the provider catalog, optionally restricted to one vendor."""
        catalog = list(self._inventory.list_supported_baselines(provider_ref))
        if vendor is None:
            return catalog
        vendor = Vendor(vendor)
        return [record for record in catalog if record.vendor == vendor]

    def resolve_baseline(self, provider_ref: str, key: Optional[str]) -> Optional[BaselineRecord]:
        """
        Look up `key` (case-sensitive) in the provider catalog.

        Returns None when no record matches.
        """
        return _find(self._inventory.list_supported_baselines(provider_ref), key)

    def require_baseline(self, provider_ref: str, key: str) -> BaselineRecord:
        """
        Like `resolve_baseline`, but an unknown key is a caller error.

        Raises
        ------
        InvalidArgument
            Listing every key the provider currently supports.
        """
        return self._require(provider_ref, self._inventory.list_supported_baselines(provider_ref), key)

    def _require(
        self, provider_ref: str, catalog: Sequence[BaselineRecord], key: str
    ) -> BaselineRecord:
        record = _find(catalog, key)
        if record is None:
            # the diagnostic reflects the provider's catalog at failure time
            valid_keys = [r.key for r in self._inventory.list_supported_baselines(provider_ref)]
            raise InvalidArgument(key, valid_keys, provider_ref=provider_ref)
        return record

    def max_common_baseline(self, hosts: Sequence[HostRecord]) -> Optional[str]:
        """
        Compute the most capable EVC mode every host supports.

        The provider is resolved from the first host; the remaining hosts are
        assumed to share it.

        Returns
        -------
        Optional[str]
            The mode key, or None when any host's mode is unknown to the
            catalog or the hosts span more than one vendor.
        """
        hosts = _require_hosts(hosts)
        provider_ref = self._inventory.resolve_provider_for_host(hosts[0])
        catalog = self._inventory.list_supported_baselines(provider_ref)

        current: Optional[BaselineRecord] = None
        for host in hosts:
            record = _find(catalog, host.max_baseline_key)
            if record is None:
                log.debug(
                    f"Host {host.name} reports unresolved EVC mode",
                    extra={"host": host.name, "key": host.max_baseline_key},
                )
                return None
            if current is None:
                current = record
            elif record.vendor != current.vendor:
                log.debug(
                    f"Vendor mismatch at host {host.name}",
                    extra={
                        "host": host.name,
                        "vendor": str(record.vendor),
                        "expected": str(current.vendor),
                    },
                )
                return None
            elif record.tier < current.tier:
                current = record

        log.debug(
            "Maximum common EVC mode resolved",
            extra={"provider": provider_ref, "hosts": len(hosts), "key": current.key},
        )
        return current.key

    def is_compatible(self, host: HostRecord, target_key: str) -> bool:
        """
        Check whether `host` can run at the EVC mode `target_key`.

        Raises
        ------
        InvalidArgument
            If `target_key` is not in the catalog, whatever the host.
        """
        provider_ref = self._inventory.resolve_provider_for_host(host)
        catalog = self._inventory.list_supported_baselines(provider_ref)
        target = self._require(provider_ref, catalog, target_key)
        return self._check(catalog, host, target).compatible

    def filter_by_compatibility(
        self,
        hosts: Sequence[HostRecord],
        target_key: str,
        want_compatible: bool,
    ) -> List[HostRecord]:
        """
        Select the hosts whose compatibility with `target_key` equals
        `want_compatible`, preserving input order.
        """
        return [
            row.host
            for row in self.compatibility_report(hosts, target_key)
            if row.compatible == want_compatible
        ]

    def compatibility_report(
        self, hosts: Sequence[HostRecord], target_key: str
    ) -> List[HostCompatibility]:
        """
        Evaluate every host against `target_key`.

        The target is resolved once, against the first host's provider;
        nothing is evaluated if it is unknown.
        """
        hosts = _require_hosts(hosts)
        provider_ref = self._inventory.resolve_provider_for_host(hosts[0])
        catalog = self._inventory.list_supported_baselines(provider_ref)
        target = self._require(provider_ref, catalog, target_key)
        return [self._check(catalog, host, target) for host in hosts]

    def _check(
        self, catalog: Sequence[BaselineRecord], host: HostRecord, target: BaselineRecord
    ) -> HostCompatibility:
        baseline = _find(catalog, host.max_baseline_key)
        compatible = baseline is not None and baseline.supports(target)
        log.debug(
            f"Host {host.name} {'is' if compatible else 'is not'} compatible with {target.key}",
            extra={
                "host": host.name,
                "host_key": host.max_baseline_key,
                "target": target.key,
                "compatible": compatible,
            },
        )
        return HostCompatibility(host=host, baseline=baseline, compatible=compatible)


__all__ = [
    "EvcComparator",
    "HostCompatibility",
    "selection_mode",
]
