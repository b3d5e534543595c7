"""OAuth2 integration for Fitbit."""
from __future__ import annotations

from typing import Optional, Tuple
from urllib.parse import urlencode

from ...auth.domain import RefreshPolicy
from ...auth.infrastructure import OAuthTokenManager, TokenRequest
from ...auth.infrastructure.manager import Echo, Prompt
from ...models.token import Token

TUTORIAL_URL = (
    "https://dev.fitbit.com/build/reference/web-api/troubleshooting-guide/oauth2-tutorial/"
)


class FitbitAuth(OAuthTokenManager):
    """Fitbit access tokens last hours, so every run refreshes them."""

    provider_name = "fitbit"
    refresh_policy = RefreshPolicy.ALWAYS

    def _basic_auth(self) -> Optional[Tuple[str, str]]:
        if not self._client_secret:
            return None
        return (self._client_id, self._client_secret)

    def _refresh_request(self) -> TokenRequest:
        return TokenRequest(
            url=f"{self._base_url}/oauth2/token",
            data={
                "client_id": self._client_id,
                "grant_type": "refresh_token",
                "refresh_token": self._token.refresh_token,
            },
            auth=self._basic_auth(),
        )

    def tutorial_url(self) -> str:
        return f"{TUTORIAL_URL}?{urlencode({'clientEncodedId': self._client_id})}"

    async def _bootstrap(self, prompt: Prompt, echo: Echo) -> None:
        # Fitbit has no local redirect flow here; the user pastes tokens
        # obtained from the OAuth2 tutorial page into a template file.
        self._token = Token(
            access_token="PUT_YOUR_ACCESS_TOKEN",
            refresh_token="PUT_YOUR_REFRESH_TOKEN",
            expires_in=0,
            scope="PUT_YOUR_SCOPE",
            token_type="Bearer",
            user_id="",
            create_date=0,
        )
        self.dump_token()

        echo(f"Get Access token from Fitbit tutorial page: {self.tutorial_url()}")
        echo("Application Type: Client")
        echo("Callback URL: http://localhost")
        echo(
            "Next, edit token file(place: access_token, refresh_token, expires_in, "
            f"scope, token_type, user_id): {self._store.path}"
        )


__all__ = ["FitbitAuth", "TUTORIAL_URL"]
