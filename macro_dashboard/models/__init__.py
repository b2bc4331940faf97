"""Data models for series observations and fetch state."""

from .series import Observation, SeriesState, TimeRange

__all__ = ["Observation", "SeriesState", "TimeRange"]
