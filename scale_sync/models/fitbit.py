from __future__ import annotations

from datetime import datetime, time
from typing import List, Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

from .body import MeasurementRecord


class SinkWeightLog(BaseModel):
    """One entry of a Fitbit weight log."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    date: str = Field(..., description="Log date as YYYY-MM-DD")
    time: str = Field(..., description="Log time as HH:MM:SS (or HH:MM)")
    weight: float = 0.0
    fat: float = 0.0
    bmi: float = 0.0
    log_id: Optional[int] = Field(None, alias="logId")
    source: str = ""

    def local_time(self, timezone: ZoneInfo) -> datetime:
        """Interpret ``date``/``time`` as wall clock time in ``timezone``."""

        day = datetime.strptime(self.date, "%Y-%m-%d").date()
        clock = time.fromisoformat(self.time)
        return datetime.combine(day, clock, tzinfo=timezone)

    def to_record(self, timezone: ZoneInfo) -> MeasurementRecord:
        return MeasurementRecord(
            measured_at=self.local_time(timezone),
            weight_kg=self.weight,
            body_fat_percent=self.fat,
        )


class WeightLogResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    weight: List[SinkWeightLog] = Field(default_factory=list)


class CreatedWeightLog(BaseModel):
    """Body of a successful weight log creation."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    weight_log: Optional[SinkWeightLog] = Field(None, alias="weightLog")
