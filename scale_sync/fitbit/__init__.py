"""Fitbit integration: the measurement sink."""

from .infrastructure import FitbitAuth, FitbitClient

__all__ = ["FitbitAuth", "FitbitClient"]
