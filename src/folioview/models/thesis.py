"""Investment thesis model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Thesis(BaseModel):
    """
    Qualitative rationale for holding or avoiding a ticker.

    ``direction`` and ``confidence`` are free-form labels written by the
    agent (typically ``long``/``short`` and ``high``/``medium``/``low``).
    """

    ticker: Optional[str] = Field(default=None, description="Trading symbol")
    direction: Optional[str] = Field(default=None, description="Direction tag, e.g. long or short")
    confidence: Optional[str] = Field(default=None, description="Confidence label")
    thesis: Optional[str] = Field(default=None, description="Thesis body")
    entry_trigger: Optional[str] = Field(default=None, description="Condition for entering")
    exit_trigger: Optional[str] = Field(default=None, description="Condition for exiting")

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)
