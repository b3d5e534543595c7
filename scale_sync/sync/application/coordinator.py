from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from ...models.body import MeasurementRecord, SyncReport
from ..domain import is_already_recorded
from .ports import MeasurementSinkPort, MeasurementSourcePort

# Only the last week of source data is considered; older gaps are not backfilled.
LOOKBACK_DAYS = 7


class MeasurementSyncCoordinator:
    """Copies source measurements that the sink does not have yet."""

    def __init__(
        self,
        source: MeasurementSourcePort,
        sink: MeasurementSinkPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._source = source
        self._sink = sink
        self._logger = logger or logging.getLogger(__name__)

    async def find_candidates(self) -> Tuple[int, List[MeasurementRecord]]:
        """Return the number of source records and those missing at the sink.

        Sink lookups run one at a time in source order; any failure aborts
        the whole computation.
        """

        records = await self._source.fetch_measurements(LOOKBACK_DAYS)
        candidates: List[MeasurementRecord] = []
        for record in records.values():
            day = record.measured_at.astimezone(self._sink.timezone).date()
            existing = await self._sink.fetch_day(day)
            if is_already_recorded(record, existing):
                self._logger.debug("Already recorded: %s", record)
                continue
            candidates.append(record)
        return len(records), candidates

    async def sync(self, dry_run: bool = False) -> SyncReport:
        fetched, candidates = await self.find_candidates()
        self._logger.info("%d record(s) to add", len(candidates))

        report = SyncReport(dry_run=dry_run, fetched=fetched, candidates=candidates)
        if dry_run:
            for record in candidates:
                self._logger.info("Would add data: %s", record)
            return report

        for record in candidates:
            self._logger.info("Add data: %s", record)
            # A failure here stops the loop; earlier candidates stay written.
            await self._sink.write_weight_and_fat(record)
            report.written += 1
            self._logger.info("Success to add data")

        return report


__all__ = ["LOOKBACK_DAYS", "MeasurementSyncCoordinator"]
