"""Configuration models for folioview."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CHART_JS_URL = "https://cdn.jsdelivr.net/npm/chart.js@4.4.1/dist/chart.umd.min.js"


class DashboardSettings(BaseSettings):
    """Dashboard configuration.

    Loads configuration from environment variables with FOLIOVIEW_ prefix.

    Attributes:
        data_base: Directory or http(s) URL holding the five JSON documents
        output_path: Where ``fview render`` writes the page
        request_timeout: Total timeout in seconds for HTTP fetches
        chart_max_ticks: Maximum number of date labels on the chart x axis
        title: Page title
        chart_js_url: Script URL for the Chart.js bundle
    """

    data_base: str = Field(default="data/", description="Data directory or base URL")
    output_path: Path = Field(default=Path("dashboard.html"), description="HTML output path")
    request_timeout: float = Field(default=10.0, description="HTTP timeout in seconds", gt=0)
    chart_max_ticks: int = Field(default=8, description="Max x-axis labels", ge=2, le=50)
    title: str = Field(default="Portfolio Dashboard", description="Page title")
    chart_js_url: str = Field(default=DEFAULT_CHART_JS_URL, description="Chart.js bundle URL")

    model_config = SettingsConfigDict(
        env_prefix="FOLIOVIEW_",
        extra="ignore",
    )
