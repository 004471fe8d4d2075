"""Dashboard loading, rendering and page output."""

from folioview.dashboard.app import (
    LOAD_FAILED_MESSAGE,
    build_dashboard,
    render_all,
    run_dashboard,
)
from folioview.dashboard.document import ChartSpec, DashboardDocument, Region
from folioview.dashboard.loader import RESOURCES, fetch_all_data, fetch_json
from folioview.dashboard.page import render_page, write_page

__all__ = [
    # Orchestration
    "build_dashboard",
    "run_dashboard",
    "render_all",
    "LOAD_FAILED_MESSAGE",
    # Display surface
    "DashboardDocument",
    "Region",
    "ChartSpec",
    # Loading
    "fetch_all_data",
    "fetch_json",
    "RESOURCES",
    # Output
    "render_page",
    "write_page",
]
