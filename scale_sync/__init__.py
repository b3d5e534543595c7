"""Sync Health Planet body measurements into Fitbit."""

__version__ = "1.0.0"
