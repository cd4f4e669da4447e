"""
Built-in catalog of well-known EVC modes.

Used by `StaticInventory` for provider entries that do not declare their own
catalog. Tiers ascend with CPU generation inside each vendor lineage.
"""

from __future__ import annotations

from typing import List, Tuple

from evcmode.domain.models import BaselineRecord, Vendor

_INTEL_MODES: Tuple[Tuple[str, str], ...] = (
    ("intel-merom", 'Intel "Merom" Generation'),
    ("intel-penryn", 'Intel "Penryn" Generation'),
    ("intel-nehalem", 'Intel "Nehalem" Generation'),
    ("intel-westmere", 'Intel "Westmere" Generation'),
    ("intel-sandybridge", 'Intel "Sandy Bridge" Generation'),
    ("intel-ivybridge", 'Intel "Ivy Bridge" Generation'),
    ("intel-haswell", 'Intel "Haswell" Generation'),
    ("intel-broadwell", 'Intel "Broadwell" Generation'),
    ("intel-skylake", 'Intel "Skylake" Generation'),
    ("intel-cascadelake", 'Intel "Cascade Lake" Generation'),
    ("intel-icelake", 'Intel "Ice Lake" Generation'),
    ("intel-sapphirerapids", 'Intel "Sapphire Rapids" Generation'),
)

_AMD_MODES: Tuple[Tuple[str, str], ...] = (
    ("amd-rev-e", "AMD Opteron Generation 1"),
    ("amd-rev-f", "AMD Opteron Generation 2"),
    ("amd-greyhound-no3dnow", 'AMD Opteron Gen. 3 (no 3DNow!)'),
    ("amd-greyhound", "AMD Opteron Generation 3"),
    ("amd-bulldozer", 'AMD Opteron Generation 4'),
    ("amd-piledriver", 'AMD Opteron "Piledriver" Generation'),
    ("amd-steamroller", 'AMD Opteron "Steamroller" Generation'),
    ("amd-zen", 'AMD "Zen" Generation'),
    ("amd-zen2", 'AMD "Zen 2" Generation'),
    ("amd-zen3", 'AMD "Zen 3" Generation'),
    ("amd-zen4", 'AMD "Zen 4" Generation'),
)


def builtin_baselines() -> List[BaselineRecord]:
    """
    Return a fresh list of the built-in EVC modes, Intel first then AMD.
    """
    records: List[BaselineRecord] = []
    for vendor, modes in ((Vendor.INTEL, _INTEL_MODES), (Vendor.AMD, _AMD_MODES)):
        for tier, (key, label) in enumerate(modes, start=1):
            records.append(BaselineRecord(key=key, vendor=vendor, tier=tier, label=label))
    return records


__all__ = ["builtin_baselines"]
