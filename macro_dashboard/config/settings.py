"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
import os

from dotenv import load_dotenv

from macro_dashboard.errors import ConfigurationError


load_dotenv()


# Indicator name -> FRED series ID. Order is the fetch order.
SERIES_CATALOG = MappingProxyType({
    "GDP": "GDPC1",                        # Real Gross Domestic Product (Quarterly)
    "UNEMPLOYMENT": "UNRATE",              # Unemployment Rate
    "INFLATION": "CPIAUCSL",               # CPI for All Urban Consumers
    "FEDERAL_FUNDS_RATE": "FEDFUNDS",      # Federal Funds Rate
    "TREASURY_10Y": "DGS10",               # 10-Year Treasury Rate
    "MORTGAGE_30Y": "MORTGAGE30US",        # 30-Year Fixed Rate Mortgage Average
    "SP500": "SP500",                      # S&P 500
    "BITCOIN": "CBBTCUSD",                 # Coinbase Bitcoin-USD Exchange Rate
})

SERIES_COLORS: dict[str, str] = {
    "GDP": "#2B6CB0",
    "UNEMPLOYMENT": "#C53030",
    "INFLATION": "#805AD5",
    "FEDERAL_FUNDS_RATE": "#38A169",
    "TREASURY_10Y": "#DD6B20",
    "MORTGAGE_30Y": "#319795",
    "SP500": "#3182CE",
    "BITCOIN": "#E53E3E",
}

DEFAULT_COLOR = "#2B6CB0"

# Start date used for the "ALL" time range
ALL_EPOCH = date(2020, 1, 1)


def get_chart_color(name: str) -> str:
    """Line color for an indicator."""
    return SERIES_COLORS.get(name, DEFAULT_COLOR)


@dataclass
class Settings:
    """Application settings."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    fred_base_url: str = field(
        default_factory=lambda: os.getenv(
            "FRED_BASE_URL", "https://api.stlouisfed.org/fred"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("FRED_TIMEOUT", "10"))
    )

    def validate(self) -> None:
        """Validate required settings."""
        if not self.fred_api_key:
            raise ConfigurationError(
                "FRED API key not found. Set FRED_API_KEY in your environment "
                "or .env file. Get one at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
