"""Health Planet (Tanita) integration: the measurement source."""

from .domain import merge_readings
from .infrastructure import HealthPlanetAuth, HealthPlanetClient

__all__ = ["merge_readings", "HealthPlanetAuth", "HealthPlanetClient"]
