"""Infrastructure helpers for Health Planet integration."""

from .auth import HealthPlanetAuth
from .client import HealthPlanetClient

__all__ = ["HealthPlanetAuth", "HealthPlanetClient"]
