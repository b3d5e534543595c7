"""Thin wrappers that map httpx outcomes onto the scale-sync error taxonomy."""

from __future__ import annotations

import logging
from typing import Any, Collection

import httpx

from ..errors import DeserializationError, TransportError


async def send(
    http_client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    provider: str,
    expected_status: Collection[int] = (200,),
    logger: logging.Logger,
    **kwargs: Any,
) -> httpx.Response:
    """Issue one request and raise :class:`TransportError` unless it succeeded."""

    logger.debug("[%s] %s %s", provider, method, url)
    try:
        response = await http_client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        raise TransportError(f"[{provider}] {method} {url} failed: {exc}") from exc

    logger.debug("[%s] Response (%d): %s", provider, response.status_code, response.text)
    if response.status_code not in expected_status:
        raise TransportError(
            f"[{provider}] {method} {url} returned {response.status_code}: {response.text}",
            status_code=response.status_code,
        )
    return response


def decode_json(response: httpx.Response, *, provider: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise DeserializationError(
            f"[{provider}] Response from {response.request.url} is not JSON"
        ) from exc


__all__ = ["send", "decode_json"]
