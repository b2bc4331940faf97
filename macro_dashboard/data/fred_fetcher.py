"""FRED API observation fetcher."""

import logging
from datetime import date

import httpx

from macro_dashboard.config import Settings
from macro_dashboard.errors import (
    EmptyResultError,
    MalformedResponseError,
    NetworkError,
    UpstreamError,
)
from macro_dashboard.models import Observation


logger = logging.getLogger(__name__)

# Quarterly series that need an explicit frequency
FREQUENCY_HINTS: dict[str, str] = {
    "GDPC1": "q",
}

# Series queried as of today's vintage
REALTIME_SERIES = frozenset({"DGS10", "MORTGAGE30US", "CBBTCUSD"})

NETWORK_ERROR_MESSAGE = (
    "Network error: Unable to connect to FRED API. Please try again later."
)


class FredFetcher:
    """Fetches series observations from the FRED API."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.request_timeout,
                headers={"Accept": "application/json"},
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "FredFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _redact(self, text: str) -> str:
        return text.replace(self.settings.fred_api_key, "API_KEY_HIDDEN")

    def build_params(
        self, series_id: str, start_date: date, today: date | None = None
    ) -> dict[str, str]:
        """Query parameters for an observations request."""
        params = {
            "series_id": series_id,
            "api_key": self.settings.fred_api_key,
            "file_type": "json",
            "observation_start": start_date.isoformat(),
            "sort_order": "asc",
        }

        if series_id in FREQUENCY_HINTS:
            params["frequency"] = FREQUENCY_HINTS[series_id]

        if series_id in REALTIME_SERIES:
            as_of = (today or date.today()).isoformat()
            params["realtime_start"] = as_of
            params["realtime_end"] = as_of
            params["output_type"] = "1"

        return params

    def fetch_observations(
        self, series_id: str, start_date: date
    ) -> list[Observation]:
        """
        Fetch observations for a series, oldest first.

        Args:
            series_id: FRED series ID
            start_date: First observation date to request

        Returns:
            List of observations with values kept as FRED strings

        Raises:
            NetworkError: FRED could not be reached or the request timed out
            UpstreamError: FRED returned a non-success status
            MalformedResponseError: Payload has no observations list
            EmptyResultError: Payload has zero observations
        """
        logger.info(f"Fetching {series_id} from {start_date}...")
        params = self.build_params(series_id, start_date)

        try:
            response = self.client.get(
                f"{self.settings.fred_base_url}/series/observations",
                params=params,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(
                f"API error for {series_id}: {status} - "
                f"{self._redact(str(e.request.url))}"
            )
            raise UpstreamError(status, _upstream_message(e.response)) from e
        except httpx.RequestError as e:
            logger.error(f"Network error for {series_id}: {e!r}")
            raise NetworkError(NETWORK_ERROR_MESSAGE) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Invalid JSON for {series_id}")
            raise MalformedResponseError(
                f"Invalid response format for {series_id}"
            ) from e

        observations = data.get("observations") if isinstance(data, dict) else None
        if not isinstance(observations, list):
            logger.error(f"Invalid response format for {series_id}: {data!r:.200}")
            raise MalformedResponseError(f"Invalid response format for {series_id}")

        if not observations:
            logger.warning(f"No observations found for {series_id}")
            raise EmptyResultError(f"No data available for {series_id}")

        try:
            result = [Observation.from_api(obs) for obs in observations]
        except (KeyError, TypeError) as e:
            raise MalformedResponseError(
                f"Invalid response format for {series_id}"
            ) from e

        logger.info(f"  Fetched {len(result)} observations for {series_id}")
        return result


def _upstream_message(response: httpx.Response) -> str:
    """FRED's own error message when present, else a status-coded one."""
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict) and payload.get("error_message"):
        return str(payload["error_message"])

    return f"API Error ({response.status_code}): {response.reason_phrase}"
