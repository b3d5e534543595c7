"""Assembling the coordinator from settings and token files."""

from __future__ import annotations

import json
import sys
import time
from pathlib import Path
from typing import List

import httpx
import pytest

# Ensure repository root on path
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from scale_sync.errors import TokenIOError
from scale_sync.models.token import Token
from scale_sync.platform import open_http_client, provide_sync_coordinator
from scale_sync.settings import Settings

from tests.builders import make_token_response


def seed(path: Path, *, create_date: int, expires_in: int) -> None:
    path.write_text(
        Token(
            access_token="old",
            refresh_token="old-refresh",
            expires_in=expires_in,
            create_date=create_date,
        ).model_dump_json()
    )


@pytest.mark.asyncio
async def test_coordinator_refreshes_only_what_is_due(settings: Settings) -> None:
    now = int(time.time())
    seed(settings.health_planet.token_file, create_date=now, expires_in=30 * 86400)
    seed(settings.fitbit.token_file, create_date=now, expires_in=28800)
    token_calls: List[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        token_calls.append(f"{request.url.host}{request.url.path}")
        return httpx.Response(200, json=make_token_response(user_id="USER1"))

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        coordinator = await provide_sync_coordinator(settings, http_client)

    assert coordinator is not None
    assert token_calls == ["fb.example.com/oauth2/token"]
    assert json.loads(settings.fitbit.token_file.read_text())["user_id"] == "USER1"
    assert json.loads(settings.health_planet.token_file.read_text())["access_token"] == "old"


@pytest.mark.asyncio
async def test_missing_token_file_stops_wiring(settings: Settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - never reached
        raise AssertionError("no HTTP expected")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        with pytest.raises(TokenIOError):
            await provide_sync_coordinator(settings, http_client)


@pytest.mark.asyncio
async def test_http_client_uses_configured_timeout(settings: Settings) -> None:
    async with open_http_client(settings) as http_client:
        assert http_client.timeout.read == settings.http_timeout_seconds
        assert http_client.timeout.connect == settings.http_timeout_seconds


@pytest.mark.asyncio
async def test_compensation_setting_reaches_fitbit_client(settings: Settings) -> None:
    now = int(time.time())
    seed(settings.health_planet.token_file, create_date=now, expires_in=30 * 86400)
    seed(settings.fitbit.token_file, create_date=now, expires_in=28800)
    settings.fitbit.compensate_partial_writes = True

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=make_token_response())

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http_client:
        coordinator = await provide_sync_coordinator(settings, http_client)

    assert coordinator._sink._compensate is True
