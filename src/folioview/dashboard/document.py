"""Display surface: the named regions renderers write into."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Optional

from folioview.dashboard.formatting import PLACEHOLDER

# Region IDs
LAST_UPDATED = "last-updated"
PORTFOLIO_VALUE = "portfolio-value"
DAILY_PNL = "daily-pnl"
TOTAL_RETURN = "total-return"
POSITIONS_COUNT = "positions-count"
CASH_VALUE = "cash-value"
EQUITY_CHART = "equity-chart"
CHART_EMPTY = "chart-empty"
POSITIONS_TABLE = "positions-table"
POSITIONS_EMPTY = "positions-empty"
DECISIONS_TABLE = "decisions-table"
DECISIONS_EMPTY = "decisions-empty"
THESES_LIST = "theses-list"
THESES_EMPTY = "theses-empty"

SUMMARY_FIELDS = (PORTFOLIO_VALUE, DAILY_PNL, TOTAL_RETURN, POSITIONS_COUNT, CASH_VALUE)
EMPTY_MESSAGES = (CHART_EMPTY, POSITIONS_EMPTY, DECISIONS_EMPTY, THESES_EMPTY)

CARD_VALUE_CLASS = "card-value"


@dataclass
class ChartSpec:
    """Single-series line chart of portfolio value over time.

    Attributes:
        labels: X-axis date labels, in published order
        values: Portfolio values aligned with ``labels``
        label: Series name
        max_ticks: Cap on visible x-axis labels
        begin_at_zero: Whether the y axis starts at zero
    """

    labels: list[str]
    values: list[Optional[float]]
    label: str = "Portfolio Value"
    max_ticks: int = 8
    begin_at_zero: bool = False
    border_color: str = "#00d4aa"
    background_color: str = "rgba(0, 212, 170, 0.08)"
    tick_color: str = "#8892a4"
    grid_color: str = "rgba(30, 58, 95, 0.4)"

    def to_config(self) -> dict[str, Any]:
        """Build the Chart.js configuration.

        Tooltip and y-tick formatters are functions, so the page script
        installs them after parsing this config.
        """
        return {
            "type": "line",
            "data": {
                "labels": list(self.labels),
                "datasets": [{
                    "label": self.label,
                    "data": list(self.values),
                    "borderColor": self.border_color,
                    "backgroundColor": self.background_color,
                    "fill": True,
                    "tension": 0.3,
                    "pointRadius": 0,
                    "pointHitRadius": 8,
                    "borderWidth": 2,
                }],
            },
            "options": {
                "responsive": True,
                "plugins": {"legend": {"display": False}},
                "scales": {
                    "x": {
                        "ticks": {"color": self.tick_color, "maxTicksLimit": self.max_ticks},
                        "grid": {"color": self.grid_color},
                    },
                    "y": {
                        "beginAtZero": self.begin_at_zero,
                        "ticks": {"color": self.tick_color},
                        "grid": {"color": self.grid_color},
                    },
                },
            },
        }


@dataclass
class Region:
    """One addressable part of the page.

    ``text`` is plain text and is escaped on output. ``fragments`` are
    pre-escaped HTML (table rows, cards) appended by renderers.
    """

    id: str
    text: str = ""
    class_name: str = ""
    visible: bool = True
    fragments: list[str] = field(default_factory=list)
    chart: Optional[ChartSpec] = None

    def set_text(self, text: str) -> None:
        self.text = text

    def set_class(self, class_name: str) -> None:
        self.class_name = class_name

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def append(self, fragment: str) -> None:
        self.fragments.append(fragment)

    def attach_chart(self, chart: ChartSpec) -> None:
        self.chart = chart


def _initial_regions() -> dict[str, Region]:
    regions = {
        LAST_UPDATED: Region(LAST_UPDATED),
        EQUITY_CHART: Region(EQUITY_CHART),
        POSITIONS_TABLE: Region(POSITIONS_TABLE),
        DECISIONS_TABLE: Region(DECISIONS_TABLE),
        THESES_LIST: Region(THESES_LIST),
    }
    for field_id in SUMMARY_FIELDS:
        regions[field_id] = Region(field_id, text=PLACEHOLDER, class_name=CARD_VALUE_CLASS)
    # Empty-state messages stay hidden until a renderer finds no data
    for empty_id in EMPTY_MESSAGES:
        regions[empty_id] = Region(empty_id, visible=False)
    return regions


class DashboardDocument:
    """The full set of page regions for one dashboard view."""

    def __init__(self) -> None:
        self._regions = _initial_regions()
        self._pristine = copy.deepcopy(self._regions)

    def region(self, region_id: str) -> Region:
        """Get a region by ID.

        Raises:
            KeyError: If the page has no such region
        """
        try:
            return self._regions[region_id]
        except KeyError:
            raise KeyError(f"Unknown region: {region_id}") from None

    def __getitem__(self, region_id: str) -> Region:
        return self.region(region_id)

    def __contains__(self, region_id: object) -> bool:
        return region_id in self._regions

    @property
    def region_ids(self) -> list[str]:
        return list(self._regions)

    def changed_regions(self) -> list[str]:
        """IDs of regions that differ from their initial state."""
        return [
            region_id
            for region_id, region in self._regions.items()
            if region != self._pristine[region_id]
        ]

    @property
    def mutated(self) -> bool:
        return bool(self.changed_regions())
