"""Pydantic models for data representation."""

from folioview.models.config import DashboardSettings
from folioview.models.dashboard_data import DashboardData
from folioview.models.decision import KNOWN_ACTIONS, Decision
from folioview.models.position import Position
from folioview.models.snapshot import Snapshot
from folioview.models.summary import Summary
from folioview.models.thesis import Thesis

__all__ = [
    # Resource records
    "Summary",
    "Snapshot",
    "Position",
    "Decision",
    "Thesis",
    "KNOWN_ACTIONS",
    # Aggregate
    "DashboardData",
    # Config
    "DashboardSettings",
]
