"""
Domain models for the EVC mode toolkit.

Defines the CPU baseline ("EVC mode") records supplied by an inventory provider
and the host records the comparator evaluates. All models are frozen: they are
read-only views of inventory data for the duration of one call.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Vendor(str, Enum):
    """CPU vendor lineage. Baselines from different vendors never compare."""

    INTEL = "intel"
    AMD = "amd"

    def __str__(self) -> str:
        return self.value


class BaselineRecord(BaseModel):
    """
    One CPU feature level known to a provider instance.
    """

    key: str = Field(..., min_length=1, description="Identifier, unique within a provider.")
    vendor: Vendor = Field(..., description="CPU vendor lineage.")
    tier: int = Field(..., ge=0, description="Capability rank within the vendor lineage.")
    label: str = Field("", description="Human-readable name of the mode.")

    model_config = {
        "frozen": True,
    }

    def supports(self, other: BaselineRecord) -> bool:
        """True when a host at this baseline can run at `other`."""
        return self.vendor == other.vendor and self.tier >= other.tier


class HostRecord(BaseModel):
    """
    A virtualization host as seen by the comparator.
    """

    name: str = Field(..., min_length=1, description="Host name in the inventory.")
    max_baseline_key: Optional[str] = Field(
        None, description="Most capable baseline the host CPU supports, if reported."
    )
    provider_ref: str = Field(..., min_length=1, description="Owning provider instance.")

    model_config = {
        "frozen": True,
    }


__all__ = ["BaselineRecord", "HostRecord", "Vendor"]
