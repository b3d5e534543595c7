"""Reconciliation of source measurements into the sink."""

from .application import (
    LOOKBACK_DAYS,
    MeasurementSinkPort,
    MeasurementSourcePort,
    MeasurementSyncCoordinator,
)
from .domain import is_already_recorded, same_instant

__all__ = [
    "LOOKBACK_DAYS",
    "MeasurementSinkPort",
    "MeasurementSourcePort",
    "MeasurementSyncCoordinator",
    "is_already_recorded",
    "same_instant",
]
