"""
Model definitions for weekly meal planning.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, computed_field

from src.models.phase import CyclePhase
from src.models.profile import PcosType

class Meal(BaseModel):
    """
    A single meal suggestion.
    """
    name: str
    ingredients: List[str] = Field(default_factory=list)
    benefits: str = ""
    prep_time: str = ""

class DayMealPlan(BaseModel):
    """
    Meals for one day, tagged with the cycle phase of that day.
    """
    day: int = Field(..., ge=1, le=7)
    day_label: str
    plan_date: Optional[date] = None
    phase: CyclePhase
    breakfast: Meal
    lunch: Meal
    dinner: Meal
    snacks: List[str] = Field(default_factory=list)

class MealPlanRequest(BaseModel):
    """
    Optional preferences submitted with a meal plan request.
    """
    preferences: List[str] = Field(default_factory=list)
    allergies: List[str] = Field(default_factory=list)

class WeeklyMealPlan(BaseModel):
    """
    Seven-day meal plan starting today.
    """
    pcos_type: PcosType
    current_phase: CyclePhase
    cycle_day: int
    days: List[DayMealPlan]
    hydration: str
    supplements: List[str] = Field(default_factory=list)
    source: str = Field("ai", pattern="^(ai|fallback)$")

    @computed_field
    def phases_covered(self) -> List[CyclePhase]:
        """Distinct phases in plan order."""
        seen = []
        for day in self.days:
            if day.phase not in seen:
                seen.append(day.phase)
        return seen
