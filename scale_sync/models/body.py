from __future__ import annotations

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class MeasurementRecord(BaseModel):
    """One scale reading: a timestamp plus weight and body-fat values."""

    measured_at: datetime = Field(
        ..., description="Timezone-aware measurement time in the provider's zone"
    )
    weight_kg: float = Field(0.0, description="Body weight in kilograms")
    body_fat_percent: float = Field(0.0, description="Body fat percentage")

    def __str__(self) -> str:
        return (
            f"({self.measured_at.isoformat()}) "
            f"weight: {self.weight_kg:f}kg, fat: {self.body_fat_percent:f}%"
        )

    class Config:
        json_schema_extra = {
            "example": {
                "measured_at": "2024-01-01T08:00:00+09:00",
                "weight_kg": 70.5,
                "body_fat_percent": 21.3,
            }
        }


class SyncReport(BaseModel):
    """Outcome of a single reconciliation pass."""

    dry_run: bool = Field(..., description="True when no sink writes were issued")
    fetched: int = Field(0, description="Number of records returned by the source")
    candidates: List[MeasurementRecord] = Field(
        default_factory=list,
        description="Source records missing from the sink, in source order",
    )
    written: int = Field(0, description="Candidates fully written to the sink")

    @property
    def added(self) -> int:
        return 0 if self.dry_run else self.written
