"""Macroeconomic dashboard backed by the FRED API."""

__version__ = "0.1.0"
