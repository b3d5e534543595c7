"""Infrastructure helpers for OAuth token handling."""

from .manager import OAuthTokenManager, TokenRequest
from .token_store import TokenFileStore

__all__ = ["OAuthTokenManager", "TokenRequest", "TokenFileStore"]
