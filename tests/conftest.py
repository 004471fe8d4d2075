"""Test configuration and fixtures for pytest."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest


@pytest.fixture
def summary_payload() -> dict:
    """A complete summary.json document."""
    return {
        "last_updated": "2026-02-04 16:05 ET",
        "portfolio_value": 104321.5,
        "daily_pnl": 812.25,
        "daily_pnl_pct": 0.78,
        "total_pnl": -1678.5,
        "total_pnl_pct": -1.58,
        "positions_count": 3,
        "cash": 25000,
    }


@pytest.fixture
def snapshots_payload() -> list[dict]:
    """A short equity curve."""
    return [
        {"date": "2026-02-02", "portfolio_value": 103000.0},
        {"date": "2026-02-03", "portfolio_value": 103509.25},
        {"date": "2026-02-04", "portfolio_value": 104321.5},
    ]


@pytest.fixture
def positions_payload() -> list[dict]:
    """Open positions."""
    return [
        {"ticker": "AAPL", "shares": 50, "avg_cost": 182.4},
        {"ticker": "NVDA", "shares": 12.5, "avg_cost": 611.0},
        {"ticker": "SPY", "shares": 40, "avg_cost": 472.15},
    ]


@pytest.fixture
def decisions_payload() -> list[dict]:
    """Decision history, newest first as published."""
    return [
        {
            "date": "2026-02-04",
            "ticker": "NVDA",
            "action": "buy",
            "quantity": 12.5,
            "reasoning": "Data-center demand <strong> after guidance raise",
            "order_id": "9f8e7d6c-5b4a-3210-fedc-ba9876543210",
        },
        {
            "date": "2026-02-03",
            "ticker": "TSLA",
            "action": "sell",
            "quantity": 10,
            "reasoning": "Stop hit",
            "order_id": "ord-123",
        },
        {
            "date": "2026-02-02",
            "ticker": "SPY",
            "action": "hold",
            "reasoning": None,
            "order_id": None,
        },
    ]


@pytest.fixture
def theses_payload() -> list[dict]:
    """Investment theses."""
    return [
        {
            "ticker": "NVDA",
            "direction": "long",
            "confidence": "high",
            "thesis": "AI capex cycle has at least two more years to run.",
            "entry_trigger": "Pullback to 50-day MA",
            "exit_trigger": "Hyperscaler capex guidance cut",
        },
        {
            "ticker": "TSLA",
            "direction": "short",
            "confidence": "medium",
            "thesis": "Margins compressing & deliveries slowing.",
        },
    ]


@pytest.fixture
def payloads(
    summary_payload: dict,
    snapshots_payload: list[dict],
    positions_payload: list[dict],
    decisions_payload: list[dict],
    theses_payload: list[dict],
) -> dict[str, Any]:
    """All five documents keyed by file name."""
    return {
        "summary.json": summary_payload,
        "snapshots.json": snapshots_payload,
        "positions.json": positions_payload,
        "decisions.json": decisions_payload,
        "theses.json": theses_payload,
    }


@pytest.fixture
def write_data_dir(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write documents into a fresh data directory and return its path."""

    def _write(documents: dict[str, Any]) -> Path:
        data_dir = tmp_path / "data"
        data_dir.mkdir(exist_ok=True)
        for name, payload in documents.items():
            if isinstance(payload, str):
                (data_dir / name).write_text(payload, encoding="utf-8")
            else:
                (data_dir / name).write_text(json.dumps(payload), encoding="utf-8")
        return data_dir

    return _write


@pytest.fixture
def data_dir(write_data_dir: Callable[[dict[str, Any]], Path], payloads: dict[str, Any]) -> Path:
    """Data directory holding all five documents."""
    return write_data_dir(payloads)
