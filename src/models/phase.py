"""
Phase model definitions for menstrual cycle phases.
"""
from enum import Enum
from datetime import date
from typing import Optional
from pydantic import BaseModel, Field

class CyclePhase(str, Enum):
    """
    The four menstrual cycle phases, in cycle order.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATORY = "ovulatory"
    LUTEAL = "luteal"

class PhaseSummary(BaseModel):
    """
    Display snapshot of where a user is in their cycle on a given day.
    """
    phase: CyclePhase
    cycle_day: int = Field(..., ge=0)  # 0-based offset returned by the engine
    display_day: int = Field(..., ge=1)
    cycle_length: int
    menstrual_duration: int
    days_until_next_period: int
    next_period_date: date
    guidance: str
    as_of: Optional[date] = None

    @property
    def is_menstruating(self) -> bool:
        """Check if the snapshot falls within the menstrual phase."""
        return self.phase == CyclePhase.MENSTRUAL
