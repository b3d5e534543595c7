"""Timestamp matching between source and sink records."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Iterable

from ...models.body import MeasurementRecord


def same_instant(left: datetime, right: datetime) -> bool:
    """Exact equality of two absolute instants.

    There is no tolerance window: readings one second apart are different
    measurements. Both values must be timezone-aware.
    """

    if left.tzinfo is None or right.tzinfo is None:
        raise ValueError("same_instant() needs timezone-aware datetimes")
    return left.astimezone(timezone.utc) == right.astimezone(timezone.utc)


def is_already_recorded(
    record: MeasurementRecord, existing: Iterable[MeasurementRecord]
) -> bool:
    """Linear scan of ``existing`` for an entry at the same instant as ``record``."""

    for candidate in existing:
        if same_instant(record.measured_at, candidate.measured_at):
            return True
    return False


__all__ = ["same_instant", "is_already_recorded"]
