"""Open position model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """
    An open holding in a single ticker.

    Attributes:
        ticker: Trading symbol
        shares: Number of shares held
        avg_cost: Average cost per share
    """

    ticker: Optional[str] = Field(default=None, description="Trading symbol")
    shares: Optional[float] = Field(default=None, description="Number of shares")
    avg_cost: Optional[float] = Field(default=None, description="Average cost per share")

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    def __str__(self) -> str:
        return f"Position({self.ticker}: {self.shares} shares @ ${self.avg_cost} avg)"
