"""HTTP-backed sink for body measurements on Fitbit."""
from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Dict, List, Optional
from zoneinfo import ZoneInfo

import httpx
from pydantic import ValidationError

from ...errors import DeserializationError, PartialWriteError, TransportError
from ...models.body import MeasurementRecord
from ...models.fitbit import CreatedWeightLog, WeightLogResponse
from ...services.http import decode_json, send
from .auth import FitbitAuth


class FitbitClient:
    """Read and create weight/fat logs for the authorised Fitbit user.

    ``compensate_partial_writes`` deletes a freshly written weight log when
    the fat log for the same measurement cannot be created. It is off by
    default, which leaves the half-written entry in place.
    """

    provider_name = "fitbit"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        auth: FitbitAuth,
        *,
        base_url: str,
        timezone: ZoneInfo,
        logger: Optional[logging.Logger] = None,
        compensate_partial_writes: bool = False,
    ) -> None:
        self._http_client = http_client
        self._auth = auth
        self._base_url = base_url.rstrip("/")
        self._timezone = timezone
        self._logger = logger or logging.getLogger(__name__)
        self._compensate = compensate_partial_writes

    @property
    def timezone(self) -> ZoneInfo:
        return self._timezone

    def _user_url(self, path: str) -> str:
        user_id = self._auth.token.user_id or "-"
        return f"{self._base_url}/1/user/{user_id}/{path}"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._auth.token.access_token}",
            "accept": "application/json",
            "accept-language": "ja_JP",
            "accept-locale": "ja_JP",
        }

    def _local(self, measured_at: datetime) -> datetime:
        return measured_at.astimezone(self._timezone)

    async def get_weight_log(self, day: date) -> WeightLogResponse:
        response = await send(
            self._http_client,
            "GET",
            self._user_url(f"body/log/weight/date/{day:%Y-%m-%d}.json"),
            provider=self.provider_name,
            logger=self._logger,
            headers=self._headers(),
        )
        try:
            return WeightLogResponse.model_validate(
                decode_json(response, provider=self.provider_name)
            )
        except ValidationError as exc:
            raise DeserializationError(
                f"[{self.provider_name}] Unexpected weight log response: {exc}"
            ) from exc

    async def fetch_day(self, day: date) -> List[MeasurementRecord]:
        """Records already logged on ``day``, normalised to the sink timezone."""

        try:
            return [
                log.to_record(self._timezone)
                for log in (await self.get_weight_log(day)).weight
            ]
        except ValueError as exc:
            raise DeserializationError(
                f"[{self.provider_name}] Invalid weight log timestamp: {exc}"
            ) from exc

    async def create_weight_log(self, measured_at: datetime, weight: float) -> Optional[int]:
        """Log ``weight`` and return the new log id when Fitbit reports one."""

        local = self._local(measured_at)
        response = await send(
            self._http_client,
            "POST",
            self._user_url("body/log/weight.json"),
            provider=self.provider_name,
            expected_status=(201,),
            logger=self._logger,
            headers=self._headers(),
            params={
                "date": local.strftime("%Y-%m-%d"),
                "time": local.strftime("%H:%M:%S"),
                "weight": f"{weight:f}",
            },
        )
        try:
            created = CreatedWeightLog.model_validate(response.json())
        except (ValueError, ValidationError):
            self._logger.debug("[%s] Weight log created without a readable body", self.provider_name)
            return None
        return created.weight_log.log_id if created.weight_log else None

    async def create_fat_log(self, measured_at: datetime, fat: float) -> None:
        local = self._local(measured_at)
        await send(
            self._http_client,
            "POST",
            self._user_url("body/log/fat.json"),
            provider=self.provider_name,
            expected_status=(201,),
            logger=self._logger,
            headers=self._headers(),
            params={
                "date": local.strftime("%Y-%m-%d"),
                "time": local.strftime("%H:%M:%S"),
                "fat": f"{fat:f}",
            },
        )

    async def delete_weight_log(self, log_id: int) -> None:
        await send(
            self._http_client,
            "DELETE",
            self._user_url(f"body/log/weight/{log_id}.json"),
            provider=self.provider_name,
            expected_status=(200, 204),
            logger=self._logger,
            headers=self._headers(),
        )

    async def write_weight_and_fat(self, record: MeasurementRecord) -> Optional[int]:
        """Write weight, then body fat, for one measurement.

        The two calls are not atomic. A weight failure raises
        :class:`TransportError` with nothing written; a fat failure after a
        successful weight write raises :class:`PartialWriteError`.
        """

        log_id = await self.create_weight_log(record.measured_at, record.weight_kg)

        try:
            await self.create_fat_log(record.measured_at, record.body_fat_percent)
        except TransportError as exc:
            compensated = False
            if self._compensate and log_id is not None:
                compensated = await self._compensate_weight_log(log_id)
            raise PartialWriteError(
                f"[{self.provider_name}] Weight logged but fat log failed for "
                f"{record.measured_at.isoformat()}: {exc}",
                phase="fat",
                measured_at=record.measured_at,
                weight_log_id=log_id,
                compensated=compensated,
                status_code=exc.status_code,
            ) from exc

        return log_id

    async def _compensate_weight_log(self, log_id: int) -> bool:
        try:
            await self.delete_weight_log(log_id)
        except TransportError:
            self._logger.exception(
                "[%s] Failed to delete orphaned weight log %s", self.provider_name, log_id
            )
            return False
        self._logger.warning(
            "[%s] Deleted orphaned weight log %s", self.provider_name, log_id
        )
        return True


__all__ = ["FitbitClient"]
