"""HTTP-backed source of body measurements from Health Planet."""
from __future__ import annotations

import logging
import time
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional
from zoneinfo import ZoneInfo

import httpx
from pydantic import ValidationError

from ...errors import DeserializationError
from ...models.body import MeasurementRecord
from ...models.healthplanet import BODY_FAT_TAG, WEIGHT_TAG, InnerscanResponse
from ...services.http import decode_json, send
from ..domain import merge_readings
from .auth import HealthPlanetAuth

FROM_FORMAT = "%Y%m%d%H%M%S"


class HealthPlanetClient:
    """Read innerscan (weight and body fat) data for the authorised user."""

    provider_name = "HealthPlanet"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        auth: HealthPlanetAuth,
        *,
        base_url: str,
        timezone: ZoneInfo,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._http_client = http_client
        self._auth = auth
        self._base_url = base_url.rstrip("/")
        self._timezone = timezone
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock

    @property
    def timezone(self) -> ZoneInfo:
        return self._timezone

    def _now(self) -> datetime:
        now = self._clock() if self._clock is not None else time.time()
        return datetime.fromtimestamp(now, tz=self._timezone)

    async def fetch_measurements(self, days: int) -> Dict[str, MeasurementRecord]:
        """Return records measured in the last ``days`` days keyed by raw timestamp."""

        since = self._now() - timedelta(days=days)
        params = {
            "access_token": self._auth.token.access_token,
            "from": since.strftime(FROM_FORMAT),
            "tag": f"{WEIGHT_TAG},{BODY_FAT_TAG}",
        }
        response = await send(
            self._http_client,
            "GET",
            f"{self._base_url}/status/innerscan.json",
            provider=self.provider_name,
            logger=self._logger,
            params=params,
        )

        try:
            payload = InnerscanResponse.model_validate(
                decode_json(response, provider=self.provider_name)
            )
        except ValidationError as exc:
            raise DeserializationError(
                f"[{self.provider_name}] Unexpected innerscan response: {exc}"
            ) from exc

        return merge_readings(payload.data, self._timezone)


__all__ = ["HealthPlanetClient"]
