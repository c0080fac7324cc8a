"""
Data models for the battery status source.
"""

from pydantic import BaseModel, ConfigDict, Field


class BatteryReading(BaseModel):
    """
    A single reading of the tracked UPS.

    Produced fresh on every run and never persisted.
    """

    model_config = ConfigDict(frozen=True)

    battery_level: int = Field(ge=0, le=100)
    ac_attached: bool
    present: bool
