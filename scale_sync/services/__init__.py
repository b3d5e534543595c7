"""Shared helpers for talking to provider APIs."""

from .http import decode_json, send

__all__ = ["decode_json", "send"]
