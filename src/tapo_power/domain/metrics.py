from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class PowerReading(BaseModel):
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    power_watts: float = Field(ge=0)


class SummaryStatistics(BaseModel):
    """Descriptive statistics over a completed set of samples."""

    model_config = ConfigDict(frozen=True)

    minimum: float
    maximum: float
    mean: float
    standard_deviation: float  # population, divisor is the sample count
    sample_count: int
