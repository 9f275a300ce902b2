# estate_http_api/errors.py

"""
Error taxonomy and the explicit ``Result`` value returned by the services.

Creation paths raise one of the exceptions below. Query, verification and
state-change paths return a :class:`Result` instead, so that the outcome of
"the record was missing" versus "something broke while looking" is visible
at the call site rather than hidden in a catch-all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class EstateError(Exception):
    """Base class for all service-level errors."""


class ValidationError(EstateError):
    """Raised when a required input is missing or out of range."""


class DuplicateError(EstateError):
    """Raised when a unique field (content hash, e-mail, number) collides."""

    def __init__(self, field: str, value: object = None) -> None:
        super().__init__(f"A record with the same {field} already exists.")
        self.field = field
        self.value = value


class CryptoError(EstateError):
    """Raised for malformed key, signature or encoding material."""


class SigningError(EstateError):
    """Raised when a signature cannot be produced for a document."""


class NotFoundError(EstateError):
    """Raised when an operation targets a record id that does not exist."""

    def __init__(self, kind: str, record_id: object) -> None:
        super().__init__(f"{kind} with id={record_id} not found.")
        self.kind = kind
        self.record_id = record_id


class ServiceError(EstateError):
    """Wraps an unexpected internal failure caught at a service boundary."""


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a non-creation service call.

    ``value`` always holds something usable: the real answer on success, or
    the safe default (``False``, ``0``) on failure. ``reason`` carries a
    short machine-readable explanation for negative answers such as
    ``"not_found"`` or ``"expired"``.
    """

    value: T
    error: Optional[EstateError] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T, reason: Optional[str] = None) -> "Result[T]":
        return cls(value=value, reason=reason)

    @classmethod
    def failure(cls, default: T, error: EstateError) -> "Result[T]":
        return cls(value=default, error=error, reason="error")

    def unwrap(self) -> T:
        """Return the value, re-raising the captured error on failure."""
        if self.error is not None:
            raise self.error
        return self.value


__all__ = [
    "EstateError",
    "ValidationError",
    "DuplicateError",
    "CryptoError",
    "SigningError",
    "NotFoundError",
    "ServiceError",
    "Result",
]
