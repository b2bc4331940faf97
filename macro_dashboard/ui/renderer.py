"""Turn a series' fetch state into a chart description."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

import pandas as pd
import plotly.graph_objects as go

from macro_dashboard.config import DEFAULT_COLOR
from macro_dashboard.models import Observation, SeriesState


DEFAULT_DOMAIN = (0.0, 100.0)


def _whole(value: float) -> str:
    """Whole number with thousands separators, halves rounded away from zero."""
    rounded = Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{rounded:,f}"


def _dollars(suffix: str = "") -> Callable[[float], str]:
    return lambda value: f"${_whole(value)}{suffix}"


def _percent(decimals: int) -> Callable[[float], str]:
    return lambda value: f"{value:.{decimals}f}%"


@dataclass(frozen=True)
class AxisFormat:
    """Y-axis label, value formatter and padding factor for a series."""

    label: str
    formatter: Callable[[float], str]
    padding_factor: float = 0.1


# Keyed by FRED series ID
AXIS_FORMATS: dict[str, AxisFormat] = {
    "GDPC1": AxisFormat("Billions of Dollars", _dollars("B"), 0.05),
    "UNRATE": AxisFormat("Percent", _percent(1)),
    "CPIAUCSL": AxisFormat(
        "Consumer Price Index\n(1982-1984 Base Period = 100)",
        lambda value: f"{value:.1f}",
    ),
    "FEDFUNDS": AxisFormat("Percent", _percent(2)),
    "DGS10": AxisFormat("Percent", _percent(2)),
    "MORTGAGE30US": AxisFormat("Percent", _percent(2)),
    "SP500": AxisFormat("Index", _whole, 0.15),
    "CBBTCUSD": AxisFormat("USD", _dollars(), 0.15),
}

DEFAULT_AXIS_FORMAT = AxisFormat("Value", lambda value: f"{value:.2f}")


def get_axis_format(series_id: str) -> AxisFormat:
    """Formatting rules for a series, falling back to a plain 2-decimal axis."""
    return AXIS_FORMATS.get(series_id, DEFAULT_AXIS_FORMAT)


def format_value(value: float, series_id: str) -> str:
    return get_axis_format(series_id).formatter(value)


def format_date(value: str) -> str:
    """ISO date -> 'Jan 2024'."""
    return pd.Timestamp(value).strftime("%b %Y")


def calculate_y_axis_domain(
    values: Sequence[float], padding_factor: float = 0.1
) -> tuple[float, float]:
    """
    Padded Y-axis bounds for a set of values.

    The lower bound never drops below zero.

    Args:
        values: Numeric values; missing points must already be removed
        padding_factor: Fraction of the value range added on both sides

    Returns:
        (lower, upper) bounds, or (0, 100) for no values
    """
    if len(values) == 0:
        return DEFAULT_DOMAIN

    low = min(values)
    high = max(values)
    padding = (high - low) * padding_factor

    return (max(0.0, low - padding), high + padding)


@dataclass(frozen=True)
class LoadingPlaceholder:
    title: str


@dataclass(frozen=True)
class ErrorPlaceholder:
    title: str
    message: str


@dataclass(frozen=True)
class ChartSpec:
    """Chart-ready description of one series."""

    title: str
    series_id: str
    color: str
    dates: list[str]
    labels: list[str]
    values: list[float | None]
    y_label: str
    y_domain: tuple[float, float]
    tick_text: list[str]

    @property
    def formatter(self) -> Callable[[float], str]:
        return get_axis_format(self.series_id).formatter


RenderResult = LoadingPlaceholder | ErrorPlaceholder | ChartSpec


def parse_values(data: Sequence[Observation]) -> pd.Series:
    """Observation values as floats; FRED's '.' sentinel becomes NaN."""
    return pd.to_numeric(
        pd.Series([obs.value for obs in data], dtype="object"), errors="coerce"
    ).astype(float)


def render_series(
    state: SeriesState,
    series_id: str,
    color: str = DEFAULT_COLOR,
    title: str = "",
) -> RenderResult:
    """Build a chart description or the matching placeholder."""
    if state.is_loading:
        return LoadingPlaceholder(title)

    if state.error:
        return ErrorPlaceholder(title, state.error)

    axis = get_axis_format(series_id)
    values = parse_values(state.data)
    present = values.dropna()
    domain = calculate_y_axis_domain(present.tolist(), axis.padding_factor)

    return ChartSpec(
        title=title,
        series_id=series_id,
        color=color,
        dates=[obs.date for obs in state.data],
        labels=[format_date(obs.date) for obs in state.data],
        values=[None if pd.isna(v) else float(v) for v in values],
        y_label=axis.label,
        y_domain=domain,
        tick_text=[axis.formatter(v) for v in _tick_values(domain)],
    )


def _tick_values(domain: tuple[float, float], count: int = 5) -> list[float]:
    low, high = domain
    if high == low:
        return [low]
    step = (high - low) / (count - 1)
    return [low + step * i for i in range(count)]


def build_figure(chart: ChartSpec, height: int = 300) -> go.Figure:
    """Plotly line chart for a rendered series."""
    hover = [
        None if v is None else chart.formatter(v) for v in chart.values
    ]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=pd.to_datetime(chart.dates),
        y=chart.values,
        mode="lines",
        line=dict(color=chart.color, width=2),
        name=chart.title,
        customdata=list(zip(chart.labels, hover)),
        hovertemplate="Date: %{customdata[0]}<br>%{customdata[1]}<extra></extra>",
        connectgaps=False,
    ))

    tick_vals = _tick_values(chart.y_domain)
    fig.update_layout(
        height=height,
        margin=dict(l=80, r=20, t=20, b=40),
        showlegend=False,
        hovermode="x unified",
    )
    fig.update_xaxes(tickformat="%b %Y", showgrid=True, griddash="dash")
    fig.update_yaxes(
        title_text=chart.y_label.replace("\n", "<br>"),
        range=list(chart.y_domain),
        tickvals=tick_vals,
        ticktext=chart.tick_text,
        showgrid=True,
        griddash="dash",
    )
    return fig
