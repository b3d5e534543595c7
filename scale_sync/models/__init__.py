from .body import MeasurementRecord, SyncReport
from .fitbit import CreatedWeightLog, SinkWeightLog, WeightLogResponse
from .healthplanet import (
    BODY_FAT_TAG,
    WEIGHT_TAG,
    InnerscanReading,
    InnerscanResponse,
)
from .token import Token

__all__ = [
    'MeasurementRecord',
    'SyncReport',
    'SinkWeightLog',
    'WeightLogResponse',
    'CreatedWeightLog',
    'InnerscanReading',
    'InnerscanResponse',
    'WEIGHT_TAG',
    'BODY_FAT_TAG',
    'Token',
]
