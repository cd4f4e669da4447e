"""
EVC mode toolkit - CPU baseline compatibility across virtualization hosts.

This package answers two questions about a group of hosts, given the catalog
of EVC modes (vendor + tier) their management server supports:

- What is the most capable EVC mode every host could run at?
- Which hosts are (in)compatible with a given EVC mode?

It is read-only and advisory. The inventory system supplying hosts and
catalogs is injected through the `InventoryProvider` interface.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from evcmode.comparator import EvcComparator, HostCompatibility, selection_mode
from evcmode.config import Settings, get_settings
from evcmode.domain import (
    BaselineRecord,
    EvcError,
    HostRecord,
    InvalidArgument,
    PreconditionError,
    Vendor,
)
from evcmode.providers import (
    AbstractInventoryProvider,
    InventoryProvider,
    StaticInventory,
    builtin_baselines,
)
from evcmode.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Comparison
    "EvcComparator",
    "HostCompatibility",
    "selection_mode",
    # Domain
    "BaselineRecord",
    "HostRecord",
    "Vendor",
    "EvcError",
    "InvalidArgument",
    "PreconditionError",
    # Providers
    "AbstractInventoryProvider",
    "InventoryProvider",
    "StaticInventory",
    "builtin_baselines",
    # Logging
    "configure_logging",
    "get_logger",
]
