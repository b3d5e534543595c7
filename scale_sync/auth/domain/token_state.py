"""Expiry bookkeeping for OAuth tokens."""

from __future__ import annotations

from enum import Enum

from ...models.token import Token

# Refresh a week before natural expiry so a run close to the deadline still
# works with a freshly issued token.
TOKEN_REFRESH_THRESHOLD = 60 * 60 * 24 * 7


class TokenState(str, Enum):
    UNSET = "unset"
    VALID = "valid"
    NEEDS_REFRESH = "needs_refresh"
    EXPIRED = "expired"


class RefreshPolicy(str, Enum):
    """When ``refresh_token`` actually contacts the provider."""

    AHEAD = "ahead"
    ALWAYS = "always"


def token_state(
    token: Token, now: float, threshold: int = TOKEN_REFRESH_THRESHOLD
) -> TokenState:
    """Classify ``token`` at epoch second ``now``."""

    if token.is_unset:
        return TokenState.UNSET
    if now >= token.expires_at:
        return TokenState.EXPIRED
    if now >= token.expires_at - threshold:
        return TokenState.NEEDS_REFRESH
    return TokenState.VALID


def is_token_valid(token: Token, now: float) -> bool:
    """True when the token was issued and has not reached natural expiry."""

    return token_state(token, now) in (TokenState.VALID, TokenState.NEEDS_REFRESH)


def refresh_due(token: Token, now: float, policy: RefreshPolicy) -> bool:
    if policy is RefreshPolicy.ALWAYS:
        return True
    return token_state(token, now) is not TokenState.VALID


__all__ = [
    "TOKEN_REFRESH_THRESHOLD",
    "TokenState",
    "RefreshPolicy",
    "token_state",
    "is_token_valid",
    "refresh_due",
]
