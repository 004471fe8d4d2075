"""Trading decision model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# Known action tags. The set is open: any other string is displayed as-is.
KNOWN_ACTIONS = ("buy", "sell", "hold")


class Decision(BaseModel):
    """
    A historical trade action taken by the agent.

    Attributes:
        date: When the decision was made
        ticker: Trading symbol
        action: Action tag (buy, sell, hold or any other value)
        quantity: Shares traded, if any
        reasoning: Free-text rationale
        order_id: Broker order identifier
    """

    date: Optional[str] = Field(default=None, description="Decision date")
    ticker: Optional[str] = Field(default=None, description="Trading symbol")
    action: Optional[str] = Field(default=None, description="Action tag")
    quantity: Optional[float] = Field(default=None, description="Quantity traded")
    reasoning: Optional[str] = Field(default=None, description="Decision rationale")
    order_id: Optional[str] = Field(default=None, description="Broker order ID")

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    @property
    def is_known_action(self) -> bool:
        """Whether the action is one of the predeclared tags."""
        return self.action in KNOWN_ACTIONS
