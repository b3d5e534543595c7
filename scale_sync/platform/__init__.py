"""Composition root for scale-sync."""

from .wiring import (
    open_http_client,
    provide_fitbit_auth,
    provide_healthplanet_auth,
    provide_sync_coordinator,
)

__all__ = [
    "open_http_client",
    "provide_fitbit_auth",
    "provide_healthplanet_auth",
    "provide_sync_coordinator",
]
