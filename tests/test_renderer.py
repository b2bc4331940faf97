"""Tests for chart rendering and axis formatting."""

from __future__ import annotations

import plotly.graph_objects as go
import pytest

from macro_dashboard.models import Observation, SeriesState
from macro_dashboard.ui.renderer import (
    DEFAULT_AXIS_FORMAT,
    ChartSpec,
    ErrorPlaceholder,
    LoadingPlaceholder,
    build_figure,
    calculate_y_axis_domain,
    format_date,
    format_value,
    get_axis_format,
    render_series,
)


def _state(*values: str) -> SeriesState:
    return SeriesState.ready(
        Observation(date=f"2024-{i + 1:02d}-01", value=value)
        for i, value in enumerate(values)
    )


def test_domain_pads_by_factor() -> None:
    assert calculate_y_axis_domain([10, 20, 30], 0.1) == pytest.approx((8.0, 32.0))


def test_domain_floors_at_zero() -> None:
    assert calculate_y_axis_domain([1, 21], 0.1) == pytest.approx((0.0, 23.0))


def test_domain_for_empty_data() -> None:
    assert calculate_y_axis_domain([], 0.15) == (0, 100)


def test_domain_for_flat_series() -> None:
    assert calculate_y_axis_domain([4.5, 4.5], 0.1) == (4.5, 4.5)


@pytest.mark.parametrize(
    ("series_id", "factor"),
    [("GDPC1", 0.05), ("SP500", 0.15), ("CBBTCUSD", 0.15), ("UNRATE", 0.1), ("XYZ", 0.1)],
)
def test_padding_factor_by_series(series_id: str, factor: float) -> None:
    assert get_axis_format(series_id).padding_factor == factor


@pytest.mark.parametrize(
    ("series_id", "value", "expected"),
    [
        ("GDPC1", 22345.67, "$22,346B"),
        ("UNRATE", 3.66, "3.7%"),
        ("CPIAUCSL", 310.326, "310.3"),
        ("FEDFUNDS", 5.333, "5.33%"),
        ("DGS10", 4.2, "4.20%"),
        ("MORTGAGE30US", 6.85, "6.85%"),
        ("SP500", 5123.4, "5,123"),
        ("SP500", 2.5, "3"),
        ("SP500", 5123.5, "5,124"),
        ("CBBTCUSD", 67012.5, "$67,013"),
        ("GDPC1", 22345.5, "$22,346B"),
        ("UNKNOWN", 1.005, "1.00"),
    ],
)
def test_value_formatters(series_id: str, value: float, expected: str) -> None:
    assert format_value(value, series_id) == expected


def test_unknown_series_uses_default_axis() -> None:
    axis = get_axis_format("NOT_A_SERIES")
    assert axis is DEFAULT_AXIS_FORMAT
    assert axis.label == "Value"


def test_format_date() -> None:
    assert format_date("2024-01-01") == "Jan 2024"
    assert format_date("2023-10-15") == "Oct 2023"


def test_loading_state_renders_placeholder() -> None:
    result = render_series(SeriesState.loading(), "UNRATE", title="Unemployment")
    assert result == LoadingPlaceholder("Unemployment")


def test_error_state_renders_message() -> None:
    result = render_series(SeriesState.failed("offline"), "UNRATE", title="Unemployment")
    assert result == ErrorPlaceholder("Unemployment", "offline")


def test_ready_state_renders_chart() -> None:
    result = render_series(_state("10", "20", "30"), "UNRATE", color="#C53030", title="Unemployment")

    assert isinstance(result, ChartSpec)
    assert result.values == [10.0, 20.0, 30.0]
    assert result.labels == ["Jan 2024", "Feb 2024", "Mar 2024"]
    assert result.dates == ["2024-01-01", "2024-02-01", "2024-03-01"]
    assert result.y_label == "Percent"
    assert result.y_domain == pytest.approx((8.0, 32.0))
    assert result.tick_text[0] == "8.0%"
    assert result.tick_text[-1] == "32.0%"
    assert result.color == "#C53030"


def test_missing_sentinel_becomes_gap() -> None:
    result = render_series(_state("100", ".", "200"), "SP500")

    assert isinstance(result, ChartSpec)
    assert result.values == [100.0, None, 200.0]
    assert result.y_domain == pytest.approx((85.0, 215.0))


def test_build_figure() -> None:
    chart = render_series(_state("10", "20", "30"), "GDPC1", color="#2B6CB0", title="GDP")

    fig = build_figure(chart)

    assert isinstance(fig, go.Figure)
    assert len(fig.data) == 1
    assert fig.data[0].line.color == "#2B6CB0"
    assert list(fig.layout.yaxis.range) == pytest.approx([9.0, 31.0])
    assert fig.layout.yaxis.title.text == "Billions of Dollars"
    assert fig.layout.yaxis.ticktext[0] == "$9B"
