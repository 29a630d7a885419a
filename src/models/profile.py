"""
Profile models for PCOS type and cycle data.

`PcosProfile` is the stored record; `CycleProfile` is the loose input the
phase calculator validates itself.
"""
from enum import Enum
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Union
from pydantic import BaseModel, Field, field_validator, model_validator

DateLike = Union[date, datetime, str]

class PcosType(str, Enum):
    """
    PCOS subtypes used as suitability lookup keys.
    """
    INSULIN_RESISTANT = "insulin_resistant"
    INFLAMMATORY = "inflammatory"
    ADRENAL = "adrenal"
    POST_PILL = "post_pill"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: Optional[Union["PcosType", str]]) -> "PcosType":
        """Map a stored or missing value onto a PcosType, defaulting to UNKNOWN."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN

@dataclass(frozen=True)
class CycleProfile:
    """
    Cycle data consumed by the phase calculator.

    Attributes:
        last_period_start: First day of the most recent period
        last_period_end: Last day of that period, if known
        cycle_length: Total days in one cycle, 28 when unset
    """
    last_period_start: Optional[DateLike]
    last_period_end: Optional[DateLike] = None
    cycle_length: Optional[int] = None

class PcosProfileInput(BaseModel):
    """
    Profile fields a user may submit. The owner is always the authenticated user.
    """
    pcos_type: PcosType = PcosType.UNKNOWN
    cycle_length: int = Field(28, ge=1, le=90)
    last_period_date: date
    last_period_end: Optional[date] = None
    symptoms: List[str] = Field(default_factory=list)

    @field_validator("pcos_type", mode="before")
    @classmethod
    def _known_type(cls, value):
        return PcosType.coerce(value)

    @model_validator(mode="after")
    def _end_after_start(self):
        if self.last_period_end is not None and self.last_period_end < self.last_period_date:
            raise ValueError("last_period_end must not be before last_period_date")
        return self

class PcosProfile(PcosProfileInput):
    """
    Stored PCOS profile for a user.
    """
    user_id: str
    updated_at: Optional[datetime] = None

    def to_cycle_profile(self) -> CycleProfile:
        """Build the phase calculator input from this profile."""
        return CycleProfile(
            last_period_start=self.last_period_date,
            last_period_end=self.last_period_end,
            cycle_length=self.cycle_length
        )
