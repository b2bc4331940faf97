"""Data fetching and fetch-round orchestration."""

from .fred_fetcher import FredFetcher
from .orchestrator import SeriesFetchOrchestrator

__all__ = ["FredFetcher", "SeriesFetchOrchestrator"]
