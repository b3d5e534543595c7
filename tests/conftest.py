"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence
from zoneinfo import ZoneInfo

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from scale_sync.errors import PartialWriteError, TransportError
from scale_sync.models.body import MeasurementRecord
from scale_sync.settings import Settings
from scale_sync.sync import MeasurementSinkPort, MeasurementSourcePort, same_instant

TOKYO = ZoneInfo("Asia/Tokyo")


class FrozenClock:
    """Mutable clock handed to components through their ``clock`` argument."""

    def __init__(self, current: datetime) -> None:
        if current.tzinfo is None:
            current = current.replace(tzinfo=timezone.utc)
        self._current = current

    @property
    def current(self) -> datetime:
        return self._current

    def set(self, new_value: datetime) -> None:
        if new_value.tzinfo is None:
            new_value = new_value.replace(tzinfo=timezone.utc)
        self._current = new_value

    def advance(self, **delta: Any) -> None:
        self._current += timedelta(**delta)

    def timestamp(self) -> float:
        return self._current.timestamp()

    def __call__(self) -> float:
        return self.timestamp()


@pytest.fixture
def freeze_time() -> FrozenClock:
    return FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        health_planet={
            "client_id": "hp-client",
            "client_secret": "hp-secret",
            "timezone": "Asia/Tokyo",
            "base_url": "https://hp.example.com",
            "token_file": tmp_path / "hp_token.json",
        },
        fitbit={
            "client_id": "fb-client",
            "client_secret": "fb-secret",
            "timezone": "Asia/Tokyo",
            "base_url": "https://fb.example.com",
            "token_file": tmp_path / "fb_token.json",
        },
        http_timeout_seconds=5,
    )


def record(raw: str, weight: float = 0.0, fat: float = 0.0, tz: ZoneInfo = TOKYO) -> MeasurementRecord:
    """Build a record from a ``YYYYMMDDHHMM[SS]`` string in ``tz``."""

    fmt = "%Y%m%d%H%M%S" if len(raw) == 14 else "%Y%m%d%H%M"
    return MeasurementRecord(
        measured_at=datetime.strptime(raw, fmt).replace(tzinfo=tz),
        weight_kg=weight,
        body_fat_percent=fat,
    )


class SourceFake(MeasurementSourcePort):
    """In-memory source returning a fixed mapping."""

    def __init__(self, records: Optional[Mapping[str, MeasurementRecord]] = None) -> None:
        self.records: Dict[str, MeasurementRecord] = dict(records or {})
        self.requested_days: List[int] = []

    async def fetch_measurements(self, days: int) -> Mapping[str, MeasurementRecord]:
        self.requested_days.append(days)
        return self.records


@dataclass
class SinkFake(MeasurementSinkPort):
    """In-memory sink that stores written records and can inject failures."""

    zone: ZoneInfo = TOKYO
    stored: List[MeasurementRecord] = field(default_factory=list)
    lookups: List[date] = field(default_factory=list)
    calls: List[tuple[str, datetime, float]] = field(default_factory=list)
    fail_lookup_on: Optional[date] = None
    fail_weight_after: Optional[int] = None
    fail_fat_after: Optional[int] = None

    @property
    def timezone(self) -> ZoneInfo:
        return self.zone

    async def fetch_day(self, day: date) -> Sequence[MeasurementRecord]:
        self.lookups.append(day)
        if self.fail_lookup_on == day:
            raise TransportError("lookup failed", status_code=500)
        return [
            item
            for item in self.stored
            if item.measured_at.astimezone(self.zone).date() == day
        ]

    async def write_weight_and_fat(self, record: MeasurementRecord) -> Optional[int]:
        weights = sum(1 for name, *_ in self.calls if name == "weight")
        if self.fail_weight_after is not None and weights >= self.fail_weight_after:
            raise TransportError("weight write failed", status_code=500)
        self.calls.append(("weight", record.measured_at, record.weight_kg))
        self.stored.append(record)

        fats = sum(1 for name, *_ in self.calls if name == "fat")
        if self.fail_fat_after is not None and fats >= self.fail_fat_after:
            raise PartialWriteError(
                "fat write failed",
                phase="fat",
                measured_at=record.measured_at,
            )
        self.calls.append(("fat", record.measured_at, record.body_fat_percent))
        return len(self.stored)

    def has(self, candidate: MeasurementRecord) -> bool:
        return any(same_instant(item.measured_at, candidate.measured_at) for item in self.stored)


@pytest.fixture
def sink_fake() -> SinkFake:
    return SinkFake()
