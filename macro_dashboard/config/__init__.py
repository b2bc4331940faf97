"""Dashboard configuration."""

from .settings import (
    ALL_EPOCH,
    DEFAULT_COLOR,
    SERIES_CATALOG,
    SERIES_COLORS,
    Settings,
    get_chart_color,
)

__all__ = [
    "ALL_EPOCH",
    "DEFAULT_COLOR",
    "SERIES_CATALOG",
    "SERIES_COLORS",
    "Settings",
    "get_chart_color",
]
