"""Aggregate of the five dashboard resources."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from folioview.models.decision import Decision
from folioview.models.position import Position
from folioview.models.snapshot import Snapshot
from folioview.models.summary import Summary
from folioview.models.thesis import Thesis


class DashboardData(BaseModel):
    """
    Result of one load. Each slot is ``None`` when its resource was absent.

    Attributes:
        summary: Portfolio summary
        snapshots: Equity curve samples in published order
        positions: Open positions
        decisions: Decision history in published order
        theses: Investment theses
    """

    summary: Optional[Summary] = Field(default=None, description="Portfolio summary")
    snapshots: Optional[list[Snapshot]] = Field(default=None, description="Equity curve samples")
    positions: Optional[list[Position]] = Field(default=None, description="Open positions")
    decisions: Optional[list[Decision]] = Field(default=None, description="Decision history")
    theses: Optional[list[Thesis]] = Field(default=None, description="Investment theses")

    model_config = ConfigDict(frozen=True)

    @property
    def missing(self) -> list[str]:
        """Names of the slots that were not loaded."""
        return [name for name in type(self).model_fields if getattr(self, name) is None]
