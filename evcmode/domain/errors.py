"""
Exceptions raised by the EVC comparator.

Unresolved host baselines and vendor mismatches are not errors; they surface as
`None`/`False` results. Only caller mistakes are raised.
"""
from __future__ import annotations

from typing import Iterable, Tuple


class EvcError(Exception):
    """Base class for all EVC toolkit errors."""


class InvalidArgument(EvcError, ValueError):
    """Raised when a caller-supplied EVC mode key is not in the provider catalog."""

    def __init__(self, key: str, valid_keys: Iterable[str], provider_ref: str | None = None):
        """
        Args:
            key: The key the caller asked for.
            valid_keys: Every key the provider currently supports.
            provider_ref: Optional provider instance the lookup ran against.
        """
        self.key = key
        self.valid_keys: Tuple[str, ...] = tuple(valid_keys)
        self.provider_ref = provider_ref
        message = f"Unsupported EVC mode '{key}'"
        if provider_ref:
            message += f" for provider '{provider_ref}'"
        message += f". Available: {', '.join(self.valid_keys) or '(none)'}"
        super().__init__(message)


class PreconditionError(EvcError, ValueError):
    """Raised when a call violates the caller contract (e.g. an empty host list)."""


__all__ = ["EvcError", "InvalidArgument", "PreconditionError"]
