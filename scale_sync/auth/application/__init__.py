"""Application layer for OAuth token handling."""

from .ports import TokenLifecyclePort

__all__ = ["TokenLifecyclePort"]
