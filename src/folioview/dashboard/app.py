"""Dashboard orchestration: load once, then render every view."""

from __future__ import annotations

import asyncio
import logging
from functools import partial
from typing import Awaitable, Callable, Optional

from folioview.dashboard import document as doc
from folioview.dashboard.document import DashboardDocument
from folioview.dashboard.loader import fetch_all_data
from folioview.dashboard.renderers import (
    ContentRegions,
    SummaryRegions,
    render_decisions,
    render_equity_curve,
    render_positions,
    render_summary,
    render_theses,
)
from folioview.models import DashboardData, DashboardSettings

logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Failed to load data"

Loader = Callable[[], Awaitable[DashboardData]]


def render_all(document: DashboardDocument, data: DashboardData, max_ticks: int = 8) -> None:
    """Hand every slot, present or absent, to its renderer."""
    render_summary(data.summary, SummaryRegions.from_document(document))
    render_equity_curve(
        data.snapshots,
        ContentRegions.from_document(document, doc.EQUITY_CHART, doc.CHART_EMPTY),
        max_ticks=max_ticks,
    )
    render_positions(
        data.positions,
        ContentRegions.from_document(document, doc.POSITIONS_TABLE, doc.POSITIONS_EMPTY),
    )
    render_decisions(
        data.decisions,
        ContentRegions.from_document(document, doc.DECISIONS_TABLE, doc.DECISIONS_EMPTY),
    )
    render_theses(
        data.theses,
        ContentRegions.from_document(document, doc.THESES_LIST, doc.THESES_EMPTY),
    )


async def run_dashboard(
    document: DashboardDocument,
    loader: Loader,
    max_ticks: int = 8,
) -> Optional[DashboardData]:
    """Load the data once and render it into ``document``.

    If the load step itself fails, only the status line is written and no
    view is rendered.

    Args:
        document: Page regions to populate
        loader: Coroutine factory returning the loaded data
        max_ticks: Cap on chart x-axis labels

    Returns:
        The loaded data, or None if loading failed
    """
    try:
        data = await loader()
    except Exception:
        logger.exception("Failed to load dashboard data")
        document.region(doc.LAST_UPDATED).set_text(LOAD_FAILED_MESSAGE)
        return None

    render_all(document, data, max_ticks=max_ticks)
    return data


def build_dashboard(
    settings: DashboardSettings,
    base: Optional[str] = None,
) -> tuple[DashboardDocument, Optional[DashboardData]]:
    """Synchronous entry point: load from ``base`` and render a new document."""
    base = base or settings.data_base
    logger.info(f"Loading dashboard data from {base}")
    document = DashboardDocument()
    loader = partial(fetch_all_data, base, timeout=settings.request_timeout)
    data = asyncio.run(run_dashboard(document, loader, max_ticks=settings.chart_max_ticks))
    return document, data
