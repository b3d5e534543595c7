"""Error taxonomy shared by the token managers, provider clients and sync engine."""

from __future__ import annotations

from datetime import datetime
from typing import Optional


class ScaleSyncError(RuntimeError):
    """Base class for every failure surfaced by scale-sync."""


class ConfigError(ScaleSyncError):
    """Raised when configuration is missing or invalid."""


class TokenIOError(ScaleSyncError):
    """Raised when a credential file cannot be read, written or created."""


class AuthError(ScaleSyncError):
    """Raised when a provider rejects a token grant or refresh."""


class TransportError(ScaleSyncError):
    """Raised on network failures and non-success HTTP responses."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DeserializationError(ScaleSyncError):
    """Raised when a provider response or token file cannot be parsed."""


class PartialWriteError(TransportError):
    """A weight log was written but the matching fat log was not.

    The sink is left holding half a record. ``weight_log_id`` identifies the
    orphaned weight entry when the sink reported one, and ``compensated``
    tells whether it was deleted again.
    """

    def __init__(
        self,
        message: str,
        *,
        phase: str,
        measured_at: datetime,
        weight_log_id: Optional[int] = None,
        compensated: bool = False,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.phase = phase
        self.measured_at = measured_at
        self.weight_log_id = weight_log_id
        self.compensated = compensated


__all__ = [
    "ScaleSyncError",
    "ConfigError",
    "TokenIOError",
    "AuthError",
    "TransportError",
    "DeserializationError",
    "PartialWriteError",
]
