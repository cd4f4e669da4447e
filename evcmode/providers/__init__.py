"""
Providers package for the EVC mode toolkit.

Re-exports the inventory collaborator interface and the bundled static
implementation so downstream code can import from `evcmode.providers` directly.
"""

from evcmode.providers.abstract import AbstractInventoryProvider, InventoryProvider
from evcmode.providers.catalog import builtin_baselines
from evcmode.providers.static import InventoryDocument, ProviderCatalog, StaticInventory

__all__ = [
    # Abstracts
    "AbstractInventoryProvider",
    "InventoryProvider",
    # Concrete providers
    "InventoryDocument",
    "ProviderCatalog",
    "StaticInventory",
    "builtin_baselines",
]
