"""OAuth2 token lifecycle shared by the provider integrations."""

from .application import TokenLifecyclePort
from .domain import TOKEN_REFRESH_THRESHOLD, RefreshPolicy, TokenState
from .infrastructure import OAuthTokenManager, TokenFileStore, TokenRequest

__all__ = [
    "TokenLifecyclePort",
    "TOKEN_REFRESH_THRESHOLD",
    "RefreshPolicy",
    "TokenState",
    "OAuthTokenManager",
    "TokenFileStore",
    "TokenRequest",
]
