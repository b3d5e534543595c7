"""Ports for the token lifecycle."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ...models.token import Token
from ..domain import TokenState


@runtime_checkable
class TokenLifecyclePort(Protocol):
    """Owns one provider credential and keeps its file copy authoritative."""

    @property
    def token(self) -> Token:
        """The in-memory credential."""

    def state(self) -> TokenState:
        """Classify the credential at the current time."""

    def is_valid(self) -> bool:
        """True when the credential was issued and has not expired."""

    def load_token(self) -> None:
        """Replace the in-memory credential with the persisted one."""

    def dump_token(self) -> None:
        """Persist the in-memory credential, overwriting the file."""

    async def refresh_token(self) -> bool:
        """Refresh the credential when due; return whether a refresh happened."""


__all__ = ["TokenLifecyclePort"]
