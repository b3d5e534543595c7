"""Construction of token managers, provider clients and the sync coordinator."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import httpx

from ..auth.infrastructure import TokenFileStore
from ..fitbit import FitbitAuth, FitbitClient
from ..healthplanet import HealthPlanetAuth, HealthPlanetClient
from ..settings import Settings
from ..sync import MeasurementSyncCoordinator


@asynccontextmanager
async def open_http_client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    """One shared client; every request is bounded by the configured timeout."""

    async with httpx.AsyncClient(timeout=settings.http_timeout_seconds) as http_client:
        yield http_client


def provide_healthplanet_auth(
    settings: Settings,
    http_client: httpx.AsyncClient,
    logger: Optional[logging.Logger] = None,
) -> HealthPlanetAuth:
    hp = settings.health_planet
    return HealthPlanetAuth(
        http_client=http_client,
        store=TokenFileStore(hp.token_file),
        client_id=hp.client_id,
        client_secret=hp.client_secret,
        base_url=hp.base_url,
        logger=logger,
    )


def provide_fitbit_auth(
    settings: Settings,
    http_client: httpx.AsyncClient,
    logger: Optional[logging.Logger] = None,
) -> FitbitAuth:
    fb = settings.fitbit
    return FitbitAuth(
        http_client=http_client,
        store=TokenFileStore(fb.token_file),
        client_id=fb.client_id,
        client_secret=fb.client_secret,
        base_url=fb.base_url,
        logger=logger,
    )


async def provide_sync_coordinator(
    settings: Settings,
    http_client: httpx.AsyncClient,
    logger: Optional[logging.Logger] = None,
) -> MeasurementSyncCoordinator:
    """Load and refresh both tokens, then assemble the coordinator."""

    hp_auth = provide_healthplanet_auth(settings, http_client, logger)
    hp_auth.load_token()
    await hp_auth.refresh_token()
    source = HealthPlanetClient(
        http_client,
        hp_auth,
        base_url=settings.health_planet.base_url,
        timezone=settings.health_planet.zone,
        logger=logger,
    )

    fb_auth = provide_fitbit_auth(settings, http_client, logger)
    fb_auth.load_token()
    await fb_auth.refresh_token()
    sink = FitbitClient(
        http_client,
        fb_auth,
        base_url=settings.fitbit.base_url,
        timezone=settings.fitbit.zone,
        logger=logger,
        compensate_partial_writes=settings.fitbit.compensate_partial_writes,
    )

    return MeasurementSyncCoordinator(source, sink, logger=logger)


__all__ = [
    "open_http_client",
    "provide_healthplanet_auth",
    "provide_fitbit_auth",
    "provide_sync_coordinator",
]
