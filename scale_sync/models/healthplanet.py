from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

WEIGHT_TAG = "6021"
BODY_FAT_TAG = "6022"


class InnerscanReading(BaseModel):
    """A single tagged scalar reading returned by the innerscan endpoint."""

    model_config = ConfigDict(extra="ignore")

    date: str = Field(..., description="Raw measurement time as YYYYMMDDHHMM")
    keydata: str = Field(..., description="Reading value as a decimal string")
    tag: str = Field(..., description="6021 for weight, 6022 for body fat")
    model: str = Field("", description="Scale model identifier")


class InnerscanResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    birth_date: str = ""
    height: str = ""
    sex: str = ""
    data: List[InnerscanReading] = Field(default_factory=list)
