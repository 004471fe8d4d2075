"""Portfolio summary model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Summary(BaseModel):
    """
    Portfolio state at a point in time, as published by the trading agent.

    Every field is optional: a missing value renders as a placeholder
    rather than failing the whole summary.

    Attributes:
        last_updated: Human-readable timestamp of the snapshot
        portfolio_value: Total account value
        daily_pnl: Absolute P&L since the previous close
        daily_pnl_pct: Daily P&L as a percentage
        total_pnl: Absolute P&L since inception
        total_pnl_pct: Total P&L as a percentage
        positions_count: Number of open positions
        cash: Available cash balance
    """

    last_updated: Optional[str] = Field(default=None, description="Snapshot timestamp")
    portfolio_value: Optional[float] = Field(default=None, description="Total account value")
    daily_pnl: Optional[float] = Field(default=None, description="Daily P&L")
    daily_pnl_pct: Optional[float] = Field(default=None, description="Daily P&L percent")
    total_pnl: Optional[float] = Field(default=None, description="Total P&L")
    total_pnl_pct: Optional[float] = Field(default=None, description="Total P&L percent")
    positions_count: Optional[int] = Field(default=None, description="Open position count")
    cash: Optional[float] = Field(default=None, description="Cash balance")

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)
