"""Application layer for measurement reconciliation."""

from .coordinator import LOOKBACK_DAYS, MeasurementSyncCoordinator
from .ports import MeasurementSinkPort, MeasurementSourcePort

__all__ = [
    "LOOKBACK_DAYS",
    "MeasurementSyncCoordinator",
    "MeasurementSinkPort",
    "MeasurementSourcePort",
]
