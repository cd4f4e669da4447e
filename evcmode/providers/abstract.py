"""
Inventory provider interface for the EVC mode toolkit.

The comparator never talks to a virtualization manager directly. Embedding code
supplies an object implementing `InventoryProvider`, which answers two
questions: which EVC modes a provider instance supports, and which provider
instance owns a given host.
"""

from __future__ import annotations

import abc
from typing import Protocol, Sequence, runtime_checkable

from evcmode.domain.models import BaselineRecord, HostRecord


@runtime_checkable
class InventoryProvider(Protocol):
    """
    Read-only view over an external inventory system.

    Implementations may hit the network; errors they raise are propagated to
    the caller unchanged.
    """

    def list_supported_baselines(self, provider_ref: str) -> Sequence[BaselineRecord]:
        """
        Return the EVC modes the provider instance currently supports.

        Parameters
        ----------
        provider_ref : str
            Identifier of the provider instance (e.g. a management server name).

        Returns
        -------
        Sequence[BaselineRecord]
            The catalog in provider order.
        """
        ...

    def resolve_provider_for_host(self, host: HostRecord) -> str:
        """Return the provider instance that owns `host`."""
        ...


class AbstractInventoryProvider(abc.ABC):
    """
    Optional ABC helper for class-based providers.

    Hosts carry their own `provider_ref`, so the default resolution simply
    returns it; subclasses only need to supply the catalog.
    """

    @abc.abstractmethod
    def list_supported_baselines(
        self, provider_ref: str
    ) -> Sequence[BaselineRecord]:  # pragma: no cover - interface only
        """Return the provider catalog."""
        raise NotImplementedError

    def resolve_provider_for_host(self, host: HostRecord) -> str:
        return host.provider_ref


__all__ = [
    "InventoryProvider",
    "AbstractInventoryProvider",
]
