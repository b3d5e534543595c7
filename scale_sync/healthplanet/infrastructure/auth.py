"""OAuth2 integration for Health Planet."""
from __future__ import annotations

from urllib.parse import urlencode

from ...auth.domain import RefreshPolicy
from ...auth.infrastructure import OAuthTokenManager, TokenRequest
from ...auth.infrastructure.manager import Echo, Prompt

REDIRECT_URI = "http://localhost"
SCOPE = "innerscan,sphygmomanometer,pedometer,smug"


class HealthPlanetAuth(OAuthTokenManager):
    """Health Planet tokens live for weeks and are refreshed ahead of expiry."""

    provider_name = "HealthPlanet"
    refresh_policy = RefreshPolicy.AHEAD

    def authorization_url(self) -> str:
        query = urlencode(
            {
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "redirect_uri": REDIRECT_URI,
                "response_type": "code",
                "scope": SCOPE,
            }
        )
        return f"{self._base_url}/oauth/auth?{query}"

    async def exchange_code(self, code: str) -> None:
        """Trade an authorization code for a token and keep it in memory."""

        payload = await self._request_token(
            TokenRequest(
                url=f"{self._base_url}/oauth/token",
                data={
                    "client_id": self._client_id,
                    "client_secret": self._client_secret,
                    "redirect_uri": REDIRECT_URI,
                    "grant_type": "authorization_code",
                    "code": code,
                },
            )
        )
        self._apply_token_payload(payload)

    def _refresh_request(self) -> TokenRequest:
        return TokenRequest(
            url=f"{self._base_url}/oauth/token",
            data={
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "redirect_uri": REDIRECT_URI,
                "grant_type": "refresh_token",
                "refresh_token": self._token.refresh_token,
            },
        )

    async def _bootstrap(self, prompt: Prompt, echo: Echo) -> None:
        echo(f"Access to: {self.authorization_url()}")
        code = prompt("and enter the code").strip()
        await self.exchange_code(code)
        self.dump_token()
        echo("Success to init token")


__all__ = ["HealthPlanetAuth", "REDIRECT_URI", "SCOPE"]
