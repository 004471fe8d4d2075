"""View renderers.

Each renderer projects one data slice onto the regions it is handed and
touches nothing else. An absent or empty slice shows the region's empty
message instead of content.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from folioview.dashboard import document as doc
from folioview.dashboard.document import CARD_VALUE_CLASS, ChartSpec, DashboardDocument, Region
from folioview.dashboard.formatting import (
    PLACEHOLDER,
    escape_html,
    format_currency,
    format_number,
    format_percent,
    pnl_class,
    short_order_id,
)
from folioview.models import Decision, Position, Snapshot, Summary, Thesis

DEFAULT_ACTION = "hold"


@dataclass(frozen=True)
class SummaryRegions:
    """Regions written by the summary renderer."""

    status: Region
    portfolio_value: Region
    daily_pnl: Region
    total_return: Region
    positions_count: Region
    cash: Region

    @classmethod
    def from_document(cls, document: DashboardDocument) -> SummaryRegions:
        return cls(
            status=document.region(doc.LAST_UPDATED),
            portfolio_value=document.region(doc.PORTFOLIO_VALUE),
            daily_pnl=document.region(doc.DAILY_PNL),
            total_return=document.region(doc.TOTAL_RETURN),
            positions_count=document.region(doc.POSITIONS_COUNT),
            cash=document.region(doc.CASH_VALUE),
        )


@dataclass(frozen=True)
class ContentRegions:
    """A content region paired with its empty-state message."""

    content: Region
    empty: Region

    @classmethod
    def from_document(cls, document: DashboardDocument, content_id: str, empty_id: str) -> ContentRegions:
        return cls(content=document.region(content_id), empty=document.region(empty_id))


def _is_empty(items: Optional[Sequence]) -> bool:
    return not items


def _chart_value(value: Optional[float]) -> Optional[float]:
    # Infinity and NaN have no JSON spelling; plot them as gaps
    if value is None or not math.isfinite(value):
        return None
    return value


def _pnl_text(amount: Optional[float], pct: Optional[float]) -> str:
    return f"{format_currency(amount)} ({format_percent(pct)})"


def _write_pnl(region: Region, amount: Optional[float], pct: Optional[float]) -> None:
    # An absent amount leaves the placeholder in place
    if amount is None:
        return
    region.set_text(_pnl_text(amount, pct))
    region.set_class(f"{CARD_VALUE_CLASS} {pnl_class(amount).value}")


def render_summary(summary: Optional[Summary], regions: SummaryRegions) -> None:
    """Populate the summary cards and the status line."""
    if summary is None:
        return

    regions.status.set_text(f"Last updated {summary.last_updated}" if summary.last_updated else "")
    regions.portfolio_value.set_text(format_currency(summary.portfolio_value))
    _write_pnl(regions.daily_pnl, summary.daily_pnl, summary.daily_pnl_pct)
    _write_pnl(regions.total_return, summary.total_pnl, summary.total_pnl_pct)
    regions.positions_count.set_text(
        str(summary.positions_count) if summary.positions_count is not None else PLACEHOLDER
    )
    regions.cash.set_text(format_currency(summary.cash))


def render_equity_curve(
    snapshots: Optional[Sequence[Snapshot]],
    regions: ContentRegions,
    max_ticks: int = 8,
) -> None:
    """Attach the equity curve chart, or show the empty message."""
    if _is_empty(snapshots):
        regions.content.hide()
        regions.empty.show()
        return

    # Published order is chronological; never re-sort
    chart = ChartSpec(
        labels=[s.date or PLACEHOLDER for s in snapshots],
        values=[_chart_value(s.portfolio_value) for s in snapshots],
        max_ticks=max_ticks,
    )
    regions.content.attach_chart(chart)


def position_row(position: Position) -> str:
    return (
        f"<td><strong>{escape_html(position.ticker)}</strong></td>"
        f'<td class="num">{format_number(position.shares)}</td>'
        f'<td class="num">{format_currency(position.avg_cost)}</td>'
    )


def render_positions(positions: Optional[Sequence[Position]], regions: ContentRegions) -> None:
    """One table row per open position."""
    if _is_empty(positions):
        regions.content.hide()
        regions.empty.show()
        return

    for position in positions:
        regions.content.append(f"<tr>{position_row(position)}</tr>")


def badge_class(action: Optional[str]) -> str:
    """Badge class for an action tag; unknown tags pass through verbatim."""
    return f"badge badge-{escape_html(action or DEFAULT_ACTION)}"


def decision_row(decision: Decision) -> str:
    # Zero quantity shows the placeholder too
    quantity = format_number(decision.quantity) if decision.quantity else PLACEHOLDER
    return (
        f"<td>{escape_html(decision.date or PLACEHOLDER)}</td>"
        f"<td><strong>{escape_html(decision.ticker or PLACEHOLDER)}</strong></td>"
        f'<td><span class="{badge_class(decision.action)}">'
        f"{escape_html(decision.action or PLACEHOLDER)}</span></td>"
        f'<td class="num">{quantity}</td>'
        f'<td class="reasoning-cell">{escape_html(decision.reasoning or PLACEHOLDER)}</td>'
        f'<td class="num"><span class="order-id">{escape_html(short_order_id(decision.order_id))}</span></td>'
    )


def render_decisions(decisions: Optional[Sequence[Decision]], regions: ContentRegions) -> None:
    """One table row per decision, in published order."""
    if _is_empty(decisions):
        regions.content.hide()
        regions.empty.show()
        return

    for decision in decisions:
        regions.content.append(f"<tr>{decision_row(decision)}</tr>")


def thesis_card(thesis: Thesis) -> str:
    direction = escape_html(thesis.direction or "")
    return (
        '<div class="thesis-card">'
        '<div class="thesis-header">'
        f'<span class="thesis-ticker">{escape_html(thesis.ticker)}</span>'
        f'<span class="thesis-direction {direction}">{direction}</span>'
        f'<span class="thesis-confidence">{escape_html(thesis.confidence or "")}</span>'
        "</div>"
        f'<p class="thesis-body">{escape_html(thesis.thesis or "")}</p>'
        '<div class="thesis-triggers">'
        f"Entry: {escape_html(thesis.entry_trigger or PLACEHOLDER)}"
        f" &nbsp;|&nbsp; Exit: {escape_html(thesis.exit_trigger or PLACEHOLDER)}"
        "</div>"
        "</div>"
    )


def render_theses(theses: Optional[Sequence[Thesis]], regions: ContentRegions) -> None:
    """One card per thesis. The list itself is never hidden."""
    if _is_empty(theses):
        regions.empty.show()
        return

    for thesis in theses:
        regions.content.append(thesis_card(thesis))
