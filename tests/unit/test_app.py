"""End-to-end tests for dashboard orchestration."""

from __future__ import annotations

import asyncio
from functools import partial
from pathlib import Path

import pytest

from folioview.dashboard import document as doc
from folioview.dashboard.app import LOAD_FAILED_MESSAGE, build_dashboard, run_dashboard
from folioview.dashboard.document import DashboardDocument
from folioview.dashboard.formatting import PLACEHOLDER
from folioview.dashboard.loader import fetch_all_data
from folioview.models import DashboardData, DashboardSettings


def _run(base: Path) -> tuple[DashboardDocument, DashboardData]:
    document = DashboardDocument()
    data = asyncio.run(run_dashboard(document, partial(fetch_all_data, str(base))))
    return document, data


class TestScenarios:
    """Whole-page behavior for the load outcomes the dashboard must handle."""

    def test_all_resources_populated(self, data_dir: Path) -> None:
        document, data = _run(data_dir)

        assert data is not None
        for empty_id in doc.EMPTY_MESSAGES:
            assert not document.region(empty_id).visible
        assert document.region(doc.LAST_UPDATED).text.startswith("Last updated")
        assert document.region(doc.PORTFOLIO_VALUE).text == "$104,321.50"
        assert document.region(doc.EQUITY_CHART).chart is not None
        assert len(document.region(doc.POSITIONS_TABLE).fragments) == 3
        assert len(document.region(doc.DECISIONS_TABLE).fragments) == 3
        assert len(document.region(doc.THESES_LIST).fragments) == 2

    def test_missing_summary_only_affects_summary(self, write_data_dir, payloads: dict) -> None:  # noqa: ANN001
        del payloads["summary.json"]
        document, data = _run(write_data_dir(payloads))

        assert data.summary is None
        for field_id in doc.SUMMARY_FIELDS:
            assert document.region(field_id).text == PLACEHOLDER
        assert document.region(doc.LAST_UPDATED).text == ""
        assert document.region(doc.EQUITY_CHART).chart is not None
        assert len(document.region(doc.POSITIONS_TABLE).fragments) == 3
        assert len(document.region(doc.DECISIONS_TABLE).fragments) == 3
        assert len(document.region(doc.THESES_LIST).fragments) == 2

    def test_empty_decisions(self, write_data_dir, payloads: dict) -> None:  # noqa: ANN001
        payloads["decisions.json"] = []
        document, _ = _run(write_data_dir(payloads))

        assert not document.region(doc.DECISIONS_TABLE).visible
        assert document.region(doc.DECISIONS_EMPTY).visible
        assert document.region(doc.POSITIONS_TABLE).visible
        assert not document.region(doc.POSITIONS_EMPTY).visible
        assert len(document.region(doc.THESES_LIST).fragments) == 2

    def test_loader_failure(self, caplog: pytest.LogCaptureFixture) -> None:
        async def _broken() -> DashboardData:
            raise ConnectionError("network unavailable")

        document = DashboardDocument()
        data = asyncio.run(run_dashboard(document, _broken))

        assert data is None
        assert document.region(doc.LAST_UPDATED).text == LOAD_FAILED_MESSAGE
        assert document.changed_regions() == [doc.LAST_UPDATED]
        assert "Failed to load dashboard data" in caplog.text

    def test_unknown_action_badge(self, write_data_dir, payloads: dict) -> None:  # noqa: ANN001
        payloads["decisions.json"] = [{"date": "2026-02-04", "ticker": "TSLA", "action": "short"}]
        document, _ = _run(write_data_dir(payloads))

        row = document.region(doc.DECISIONS_TABLE).fragments[0]
        assert 'class="badge badge-short"' in row
        assert "badge-hold" not in row

    def test_nothing_loaded(self, tmp_path: Path) -> None:
        document, data = _run(tmp_path / "missing")

        assert data is not None
        assert data.missing == ["summary", "snapshots", "positions", "decisions", "theses"]
        assert document.region(doc.CHART_EMPTY).visible
        assert document.region(doc.POSITIONS_EMPTY).visible
        assert document.region(doc.DECISIONS_EMPTY).visible
        assert document.region(doc.THESES_EMPTY).visible

    def test_loader_called_once(self) -> None:
        calls = 0

        async def _loader() -> DashboardData:
            nonlocal calls
            calls += 1
            return DashboardData()

        asyncio.run(run_dashboard(DashboardDocument(), _loader))
        assert calls == 1


class TestBuildDashboard:
    """Tests for the synchronous entry point."""

    def test_uses_settings_base(self, data_dir: Path) -> None:
        settings = DashboardSettings(data_base=str(data_dir), chart_max_ticks=5)
        document, data = build_dashboard(settings)
        assert data is not None
        assert document.region(doc.EQUITY_CHART).chart.max_ticks == 5

    def test_base_override(self, data_dir: Path, tmp_path: Path) -> None:
        settings = DashboardSettings(data_base=str(tmp_path / "elsewhere"))
        _, data = build_dashboard(settings, base=str(data_dir))
        assert data.missing == []
