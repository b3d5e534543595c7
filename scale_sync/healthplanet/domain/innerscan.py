"""Merge tagged innerscan readings into measurement records."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable
from zoneinfo import ZoneInfo

from ...errors import DeserializationError
from ...models.body import MeasurementRecord
from ...models.healthplanet import BODY_FAT_TAG, WEIGHT_TAG, InnerscanReading

RAW_TIMESTAMP_FORMAT = "%Y%m%d%H%M"


def parse_raw_timestamp(raw: str, timezone: ZoneInfo) -> datetime:
    """Interpret a ``YYYYMMDDHHMM`` key as wall clock time in ``timezone``."""

    try:
        naive = datetime.strptime(raw, RAW_TIMESTAMP_FORMAT)
    except ValueError as exc:
        raise DeserializationError(f"Invalid innerscan timestamp {raw!r}") from exc
    return naive.replace(tzinfo=timezone)


def _parse_value(reading: InnerscanReading) -> float:
    try:
        return float(reading.keydata)
    except ValueError as exc:
        raise DeserializationError(
            f"Invalid innerscan value {reading.keydata!r} for tag {reading.tag}"
        ) from exc


def merge_readings(
    readings: Iterable[InnerscanReading], timezone: ZoneInfo
) -> Dict[str, MeasurementRecord]:
    """Group readings by raw timestamp key, one record per key.

    Weight and body-fat readings sharing a key end up on the same record; a
    key that only carries one of them keeps ``0.0`` for the other. Keys keep
    the order in which they first appear. Unknown tags are ignored.
    """

    merged: Dict[str, MeasurementRecord] = {}
    for reading in readings:
        record = merged.get(reading.date)
        if record is None:
            record = MeasurementRecord(
                measured_at=parse_raw_timestamp(reading.date, timezone)
            )
            merged[reading.date] = record

        if reading.tag == WEIGHT_TAG:
            record.weight_kg = _parse_value(reading)
        elif reading.tag == BODY_FAT_TAG:
            record.body_fat_percent = _parse_value(reading)

    return merged


__all__ = ["RAW_TIMESTAMP_FORMAT", "merge_readings", "parse_raw_timestamp"]
