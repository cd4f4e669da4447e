"""
Domain package for the EVC mode toolkit.

Exports the baseline/host models and the error taxonomy. Keep this package
focused on data definitions and validation concerns.
"""

from evcmode.domain.errors import EvcError, InvalidArgument, PreconditionError
from evcmode.domain.models import BaselineRecord, HostRecord, Vendor

__all__ = [
    "BaselineRecord",
    "HostRecord",
    "Vendor",
    "EvcError",
    "InvalidArgument",
    "PreconditionError",
]
