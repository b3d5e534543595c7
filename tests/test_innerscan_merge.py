"""Merging tagged Health Planet readings into measurement records."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

import pytest

# Ensure repository root on path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from scale_sync.errors import DeserializationError
from scale_sync.healthplanet import merge_readings
from scale_sync.models.healthplanet import InnerscanResponse

from tests.builders import make_innerscan_response
from tests.conftest import TOKYO


def readings(*triples):
    return InnerscanResponse.model_validate(make_innerscan_response(triples)).data


def test_weight_and_fat_sharing_a_key_merge_into_one_record() -> None:
    merged = merge_readings(
        readings(("202401010800", "6021", "70.50"), ("202401010800", "6022", "21.30")),
        TOKYO,
    )

    assert list(merged) == ["202401010800"]
    record = merged["202401010800"]
    assert record.measured_at == datetime(2024, 1, 1, 8, 0, tzinfo=TOKYO)
    assert record.weight_kg == pytest.approx(70.5)
    assert record.body_fat_percent == pytest.approx(21.3)


def test_single_tag_leaves_other_field_at_zero() -> None:
    merged = merge_readings(
        readings(("202401010800", "6021", "70.5"), ("202401020800", "6022", "20.0")),
        TOKYO,
    )

    assert merged["202401010800"].body_fat_percent == 0.0
    assert merged["202401020800"].weight_kg == 0.0
    assert merged["202401020800"].body_fat_percent == pytest.approx(20.0)


def test_keys_are_never_aggregated_across_timestamps() -> None:
    merged = merge_readings(
        readings(
            ("202401020730", "6021", "71.0"),
            ("202401010800", "6021", "70.5"),
            ("202401020730", "6022", "22.0"),
        ),
        TOKYO,
    )

    assert list(merged) == ["202401020730", "202401010800"]
    assert merged["202401020730"].weight_kg == pytest.approx(71.0)
    assert merged["202401010800"].weight_kg == pytest.approx(70.5)


def test_unknown_tags_are_ignored() -> None:
    merged = merge_readings(readings(("202401010800", "6023", "12")), TOKYO)

    assert merged["202401010800"].weight_kg == 0.0
    assert merged["202401010800"].body_fat_percent == 0.0


@pytest.mark.parametrize(
    "triple",
    [
        pytest.param(("2024-01-01 08:00", "6021", "70.5"), id="bad-timestamp"),
        pytest.param(("202401010800", "6021", "heavy"), id="bad-value"),
    ],
)
def test_malformed_readings_raise(triple) -> None:
    with pytest.raises(DeserializationError):
        merge_readings(readings(triple), TOKYO)


def test_empty_response_yields_no_records() -> None:
    assert merge_readings(readings(), TOKYO) == {}
