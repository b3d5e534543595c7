"""Ports the sync coordinator depends on."""

from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence, runtime_checkable
from zoneinfo import ZoneInfo

from ...models.body import MeasurementRecord


@runtime_checkable
class MeasurementSourcePort(Protocol):
    """Where measurements come from."""

    async def fetch_measurements(self, days: int) -> Mapping[str, MeasurementRecord]:
        """Return records from the last ``days`` days keyed by raw timestamp."""


@runtime_checkable
class MeasurementSinkPort(Protocol):
    """Where measurements should end up."""

    @property
    def timezone(self) -> ZoneInfo:
        """Civil timezone the sink uses for dates and times."""

    async def fetch_day(self, day: date) -> Sequence[MeasurementRecord]:
        """Return the records already stored on ``day`` (sink-local)."""

    async def write_weight_and_fat(self, record: MeasurementRecord) -> Optional[int]:
        """Write weight then body fat for ``record``; not atomic."""


__all__ = ["MeasurementSourcePort", "MeasurementSinkPort"]
