from .token_state import (
    TOKEN_REFRESH_THRESHOLD,
    RefreshPolicy,
    TokenState,
    is_token_valid,
    refresh_due,
    token_state,
)

__all__ = [
    "TOKEN_REFRESH_THRESHOLD",
    "RefreshPolicy",
    "TokenState",
    "is_token_valid",
    "refresh_due",
    "token_state",
]
