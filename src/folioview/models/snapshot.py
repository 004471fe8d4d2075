"""Equity curve sample model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Snapshot(BaseModel):
    """One historical sample of total portfolio value."""

    date: Optional[str] = Field(default=None, description="Sample date label")
    portfolio_value: Optional[float] = Field(default=None, description="Portfolio value on that date")

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    def __str__(self) -> str:
        return f"Snapshot({self.date}: {self.portfolio_value})"
