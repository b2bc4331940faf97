"""Data models for FRED series and their fetch state."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from macro_dashboard.config import ALL_EPOCH


@dataclass(frozen=True)
class Observation:
    """Single observation from a FRED series.

    The value is kept as FRED sends it; "." marks a missing observation.
    """

    date: str
    value: str

    @classmethod
    def from_api(cls, payload: dict) -> "Observation":
        return cls(date=str(payload["date"]), value=str(payload["value"]))


@dataclass(frozen=True)
class SeriesState:
    """Fetch state for one indicator."""

    data: tuple[Observation, ...] = field(default_factory=tuple)
    is_loading: bool = False
    error: str | None = None

    @classmethod
    def loading(cls) -> "SeriesState":
        return cls(data=(), is_loading=True, error=None)

    @classmethod
    def ready(cls, data) -> "SeriesState":
        return cls(data=tuple(data), is_loading=False, error=None)

    @classmethod
    def failed(cls, message: str) -> "SeriesState":
        return cls(data=(), is_loading=False, error=message)


def _years_before(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return today.replace(year=today.year - years, day=28)


class TimeRange(str, Enum):
    """Selectable chart time ranges."""

    ONE_YEAR = "1Y"
    FIVE_YEARS = "5Y"
    ALL = "ALL"

    @property
    def label(self) -> str:
        return {"1Y": "1 Year", "5Y": "5 Years", "ALL": "All"}[self.value]

    def start_date(self, today: date | None = None) -> date:
        """First observation date requested for this range."""
        today = today or date.today()
        if self is TimeRange.ONE_YEAR:
            return _years_before(today, 1)
        if self is TimeRange.FIVE_YEARS:
            return _years_before(today, 5)
        return ALL_EPOCH
