"""Generic OAuth2 token lifecycle shared by every provider integration."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

import click
import httpx
from pydantic import ValidationError

from ...errors import AuthError, DeserializationError, TokenIOError, TransportError
from ...models.token import Token
from ..application.ports import TokenLifecyclePort
from ..domain import RefreshPolicy, TokenState, is_token_valid, refresh_due, token_state
from .token_store import TokenFileStore

Prompt = Callable[[str], str]
Echo = Callable[[str], None]


@dataclass(frozen=True)
class TokenRequest:
    """A POST to a provider token endpoint."""

    url: str
    data: Dict[str, str]
    auth: Optional[Tuple[str, str]] = None
    headers: Dict[str, str] = field(default_factory=dict)


class OAuthTokenManager(TokenLifecyclePort):
    """Load, refresh and persist one provider's OAuth2 token.

    Subclasses describe their provider through ``provider_name``,
    ``refresh_policy``, :meth:`_refresh_request` and :meth:`_bootstrap`.
    """

    provider_name = "oauth"
    refresh_policy = RefreshPolicy.AHEAD

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        store: TokenFileStore,
        client_id: str,
        client_secret: str,
        base_url: str,
        logger: Optional[logging.Logger] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        self._http_client = http_client
        self._store = store
        self._client_id = client_id
        self._client_secret = client_secret
        self._base_url = base_url.rstrip("/")
        self._logger = logger or logging.getLogger(__name__)
        self._clock = clock
        self._token = Token()

    @property
    def token(self) -> Token:
        return self._token

    def _now(self) -> int:
        return int(self._clock() if self._clock is not None else time.time())

    def state(self) -> TokenState:
        return token_state(self._token, self._now())

    def is_valid(self) -> bool:
        return is_token_valid(self._token, self._now())

    def load_token(self) -> None:
        self._token = self._store.load()
        self._logger.debug(
            "[%s] Loaded token from %s (%s)",
            self.provider_name,
            self._store.path,
            self.state().value,
        )

    def dump_token(self) -> None:
        self._store.dump(self._token)

    async def refresh_token(self) -> bool:
        """Refresh the token when the provider's policy says it is due.

        A rejected refresh raises :class:`AuthError` and leaves the in-memory
        token unchanged. A successful one is persisted before returning.
        """

        if not refresh_due(self._token, self._now(), self.refresh_policy):
            self._logger.debug("[%s] Token does not need refresh", self.provider_name)
            return False

        self._logger.info("[%s] Token needs refresh", self.provider_name)
        payload = await self._request_token(self._refresh_request())
        self._apply_token_payload(payload)
        self.dump_token()
        self._logger.info("[%s] Success to refresh token", self.provider_name)
        return True

    async def init_token(
        self,
        *,
        prompt: Prompt = click.prompt,
        echo: Echo = click.echo,
    ) -> None:
        """Create the token file for the first time.

        Refuses to run when the file already exists so a live session is never
        overwritten by accident.
        """

        if self._store.exists():
            raise TokenIOError(
                f"[{self.provider_name}] Token file {self._store.path} already exists. "
                "If you want to reinitialize, please remove the token file"
            )
        await self._bootstrap(prompt, echo)

    def _refresh_request(self) -> TokenRequest:  # pragma: no cover - abstract hook
        raise NotImplementedError

    async def _bootstrap(
        self, prompt: Prompt, echo: Echo
    ) -> None:  # pragma: no cover - abstract hook
        raise NotImplementedError

    async def _request_token(self, request: TokenRequest) -> Dict[str, Any]:
        try:
            response = await self._http_client.post(
                request.url,
                data=request.data,
                auth=request.auth,
                headers=request.headers,
            )
        except httpx.HTTPError as exc:
            raise TransportError(
                f"[{self.provider_name}] Token request failed: {exc}"
            ) from exc

        if response.status_code != 200:
            raise AuthError(
                f"[{self.provider_name}] Failed to get token "
                f"({response.status_code}): {response.text}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise DeserializationError(
                f"[{self.provider_name}] Token response is not JSON"
            ) from exc
        if not isinstance(data, dict):
            raise DeserializationError(
                f"[{self.provider_name}] Token response is not a JSON object"
            )
        if not data.get("access_token"):
            raise AuthError(
                f"[{self.provider_name}] Token response missing access token"
            )
        return data

    def _apply_token_payload(self, payload: Dict[str, Any]) -> None:
        """Overlay the fields present in ``payload`` and stamp issuance time."""

        fields = {
            name: payload[name]
            for name in Token.model_fields
            if name in payload and name != "create_date"
        }
        try:
            self._token = Token.model_validate(
                {**self._token.model_dump(), **fields, "create_date": self._now()}
            )
        except ValidationError as exc:
            raise DeserializationError(
                f"[{self.provider_name}] Token response has unexpected fields: {exc}"
            ) from exc


__all__ = ["OAuthTokenManager", "TokenRequest"]
