"""Infrastructure helpers for Fitbit integration."""

from .auth import FitbitAuth
from .client import FitbitClient

__all__ = ["FitbitAuth", "FitbitClient"]
