"""Sequential fetch rounds over the series catalog."""

import logging
from collections.abc import Callable, Mapping
from datetime import date
from types import MappingProxyType

from macro_dashboard.config import SERIES_CATALOG
from macro_dashboard.errors import EmptyResultError, FredError
from macro_dashboard.models import Observation, SeriesState, TimeRange


logger = logging.getLogger(__name__)

EMPTY_RESULT_MESSAGE = "No data available for this indicator"

FetchFn = Callable[[str, date], list[Observation]]
NotifyFn = Callable[[str, str], None]
UpdateFn = Callable[[str, SeriesState], None]


def _log_notification(title: str, message: str) -> None:
    logger.warning(f"{title}: {message}")


class SeriesFetchOrchestrator:
    """Fetches every catalog series one after another and tracks their state.

    A round starts by putting every indicator into the loading state, then
    requests each series in catalog order. Each outcome is written before the
    next request is issued. Writes carry the id of the round that issued them
    and are dropped once a newer round has started.
    """

    def __init__(
        self,
        fetch: FetchFn,
        catalog: Mapping[str, str] = SERIES_CATALOG,
        notify: NotifyFn | None = None,
        today: Callable[[], date] = date.today,
        on_update: UpdateFn | None = None,
    ) -> None:
        self._fetch = fetch
        self.catalog = catalog
        self._notify = notify or _log_notification
        self._today = today
        self.on_update = on_update
        self._states: dict[str, SeriesState] = {}
        self._round_id = 0
        self.time_range: TimeRange | None = None

    @property
    def round_id(self) -> int:
        return self._round_id

    @property
    def states(self) -> Mapping[str, SeriesState]:
        """Read-only view of the state store."""
        return MappingProxyType(self._states)

    def get_state(self, name: str) -> SeriesState:
        """State for one indicator; loading if no round has reached it yet."""
        return self._states.get(name, SeriesState.loading())

    def start_round(self, time_range: TimeRange) -> int:
        """Begin a new round and reset every indicator to loading."""
        self._round_id += 1
        self.time_range = time_range
        self._states = {name: SeriesState.loading() for name in self.catalog}
        logger.info(f"Fetch round {self._round_id} started ({time_range.value})")
        if self.on_update is not None:
            for name, state in self._states.items():
                self.on_update(name, state)
        return self._round_id

    @property
    def is_complete(self) -> bool:
        """True once every indicator of the current round has resolved."""
        return bool(self._states) and not any(
            state.is_loading for state in self._states.values()
        )

    def run_round(self, time_range: TimeRange) -> int:
        """Run a full fetch round for the given time range."""
        round_id = self.start_round(time_range)
        self._fetch_pending(round_id)
        return round_id

    def select_time_range(self, time_range: TimeRange) -> bool:
        """Start a new round only when the range actually changes.

        With an unchanged range, indicators of an interrupted round that are
        still loading are fetched; resolved ones are never requested again.
        Returns True when a new round was started.
        """
        if self._round_id and time_range == self.time_range:
            if not self.is_complete:
                self._fetch_pending(self._round_id)
            return False
        self.run_round(time_range)
        return True

    def _fetch_pending(self, round_id: int) -> None:
        start_date = self.time_range.start_date(self._today())

        for name, series_id in self.catalog.items():
            if round_id != self._round_id:
                logger.info(f"Round {round_id} superseded, stopping")
                break
            if not self._states[name].is_loading:
                continue
            self._apply(
                round_id, name, self._fetch_one(round_id, name, series_id, start_date)
            )

    def _fetch_one(
        self, round_id: int, name: str, series_id: str, start_date: date
    ) -> SeriesState:
        try:
            data = self._fetch(series_id, start_date)
            if not data:
                raise EmptyResultError(EMPTY_RESULT_MESSAGE)
        except EmptyResultError:
            message = EMPTY_RESULT_MESSAGE
        except FredError as e:
            message = e.message
        except Exception as e:
            logger.exception(f"Unexpected error fetching {name}")
            message = str(e) or "Failed to load data"
        else:
            logger.info(f"Loaded {len(data)} points for {name}")
            return SeriesState.ready(data)

        logger.error(f"Error fetching {name} data: {message}")
        if round_id == self._round_id:
            self._notify(f"Error Loading {name}", message)
        return SeriesState.failed(message)

    def _apply(self, round_id: int, name: str, state: SeriesState) -> None:
        if round_id != self._round_id:
            logger.info(f"Discarding stale result for {name} from round {round_id}")
            return
        self._states[name] = state
        if self.on_update is not None:
            self.on_update(name, state)
