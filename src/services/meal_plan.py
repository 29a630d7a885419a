"""
Service module for seven-day meal plans.

Each day of the plan is tagged with the phase the cycle engine projects for
that date. AI-generated plans keep those phase tags regardless of what the
model returns.
"""
from datetime import date
from typing import Any, Dict, List, Optional, Tuple

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.models.meal_plan import DayMealPlan, Meal, MealPlanRequest, WeeklyMealPlan
from src.models.phase import CyclePhase
from src.models.profile import PcosProfile
from src.services.constants import (
    DAY_NAMES,
    DEFAULT_HYDRATION,
    DEFAULT_PHASE_MEALS,
    DEFAULT_SUPPLEMENTS,
    PCOS_TYPE_GUIDELINES,
    PHASE_MEAL_GUIDELINES,
    PHASE_ORDER
)
from src.services.exceptions import AIServiceError
from src.services.phase import project_phases

logger = Logger()

PLAN_DAYS = 7
MAX_TOKENS = 8192

SYSTEM_PROMPT = "You are a PCOS nutrition specialist. Always respond with valid JSON only, no markdown."

MEAL_PLAN_PROMPT = """You are a certified nutritionist specializing in PCOS management and menstrual cycle nutrition.

Create a detailed 7-day weekly meal plan for a woman with:
- PCOS Type: {pcos_type} ({type_guideline})
- Starting Cycle Day: {cycle_day} of {cycle_length}
- Phases for each day: {day_phases}
{extras}
Guidelines by cycle phase:
{phase_guidelines}

Respond ONLY with valid JSON (no markdown):
{{
  "days": [
    {{
      "day": 1,
      "breakfast": {{ "name": "string", "ingredients": ["string"], "benefits": "string", "prep_time": "string" }},
      "lunch": {{ "name": "string", "ingredients": ["string"], "benefits": "string", "prep_time": "string" }},
      "dinner": {{ "name": "string", "ingredients": ["string"], "benefits": "string", "prep_time": "string" }},
      "snacks": ["string"]
    }}
  ],
  "hydration": "string",
  "supplements": ["string"]
}}"""

Projection = List[Tuple[date, int, CyclePhase]]

def day_label(plan_date: date) -> str:
    """Weekday name for a plan date."""
    return DAY_NAMES[plan_date.weekday()]

def contains_allergen(meal: Dict[str, Any], allergies: List[str]) -> bool:
    """True when the meal name or any ingredient mentions an allergy keyword."""
    text = " ".join([meal.get("name", "")] + list(meal.get("ingredients", []))).lower()
    return any(allergy.strip().lower() in text for allergy in allergies if allergy.strip())

def default_meal(phase: CyclePhase, slot: str, allergies: List[str]) -> Meal:
    """
    Default meal for a phase and slot.

    If it contains an allergen, the same slot from another phase is used
    instead when one is allergen free.
    """
    meal = DEFAULT_PHASE_MEALS[phase][slot]
    if contains_allergen(meal, allergies):
        for other in PHASE_ORDER:
            candidate = DEFAULT_PHASE_MEALS[other][slot]
            if other != phase and not contains_allergen(candidate, allergies):
                meal = candidate
                break
    return Meal(**meal)

class MealPlanService:
    """Generate weekly meal plans with per-day cycle phases."""

    def __init__(self, llm=None):
        self._llm = llm

    @property
    def llm(self):
        if self._llm is None:
            from src.utils.clients import get_meal_plan_llm
            self._llm = get_meal_plan_llm()
        return self._llm

    def generate(
        self,
        profile: PcosProfile,
        request: Optional[MealPlanRequest] = None,
        today: Optional[date] = None
    ) -> WeeklyMealPlan:
        """
        Generate a plan for the seven days starting today.

        Args:
            profile: User's stored PCOS profile
            request: Optional preferences and allergies
            today: First day of the plan

        Returns:
            WeeklyMealPlan with source "ai" or "fallback"

        Raises:
            InvalidProfileError: If the profile cannot produce a phase
        """
        request = request or MealPlanRequest()
        today = today or date.today()
        projection = project_phases(profile.to_cycle_profile(), today, PLAN_DAYS)

        try:
            plan = self._from_ai(profile, request, projection)
        except AIServiceError as e:
            logger.warning("Using default meal plan", extra={
                "user_id": profile.user_id,
                "error": str(e)
            })
            plan = self.default_plan(profile, request, projection)

        logger.info("Generated meal plan", extra={
            "user_id": profile.user_id,
            "source": plan.source,
            "phases": [phase.value for phase in plan.phases_covered]
        })
        return plan

    def build_prompt(self, profile: PcosProfile, request: MealPlanRequest, projection: Projection) -> str:
        day_phases = ", ".join(
            f"Day {i + 1} ({day_label(day)}): {phase.value}"
            for i, (day, _, phase) in enumerate(projection)
        )
        extras = ""
        if request.preferences:
            extras += f"- Dietary Preferences: {', '.join(request.preferences)}\n"
        if request.allergies:
            extras += f"- Allergies/Restrictions: {', '.join(request.allergies)}\n"
        phase_guidelines = "\n".join(
            f"- {phase.value.title()}: {PHASE_MEAL_GUIDELINES[phase]}" for phase in PHASE_ORDER
        )
        return MEAL_PLAN_PROMPT.format(
            pcos_type=profile.pcos_type.value,
            type_guideline=PCOS_TYPE_GUIDELINES[profile.pcos_type],
            cycle_day=projection[0][1] + 1,
            cycle_length=profile.cycle_length,
            day_phases=day_phases,
            extras=extras,
            phase_guidelines=phase_guidelines
        )

    def _from_ai(self, profile: PcosProfile, request: MealPlanRequest, projection: Projection) -> WeeklyMealPlan:
        data = self.llm.complete_json(
            self.build_prompt(profile, request, projection),
            system_prompt=SYSTEM_PROMPT,
            max_tokens=MAX_TOKENS
        )
        ai_days = data.get("days") or []
        if len(ai_days) < len(projection):
            raise AIServiceError(f"Meal plan has {len(ai_days)} days, expected {len(projection)}")

        try:
            days = [
                DayMealPlan(
                    day=i + 1,
                    day_label=day_label(plan_date),
                    plan_date=plan_date,
                    phase=phase,
                    breakfast=Meal(**ai_day["breakfast"]),
                    lunch=Meal(**ai_day["lunch"]),
                    dinner=Meal(**ai_day["dinner"]),
                    snacks=ai_day.get("snacks") or []
                )
                for i, ((plan_date, _, phase), ai_day) in enumerate(zip(projection, ai_days))
            ]
            return WeeklyMealPlan(
                pcos_type=profile.pcos_type,
                current_phase=projection[0][2],
                cycle_day=projection[0][1] + 1,
                days=days,
                hydration=data.get("hydration") or DEFAULT_HYDRATION,
                supplements=data.get("supplements") or [],
                source="ai"
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise AIServiceError(f"Unusable meal plan: {str(e)}") from e

    def default_plan(self, profile: PcosProfile, request: MealPlanRequest, projection: Projection) -> WeeklyMealPlan:
        """Plan built from the per-phase default meals."""
        allergies = request.allergies
        days = []
        for i, (plan_date, _, phase) in enumerate(projection):
            snacks = [
                snack for snack in DEFAULT_PHASE_MEALS[phase]["snacks"]
                if not contains_allergen({"name": snack}, allergies)
            ]
            days.append(DayMealPlan(
                day=i + 1,
                day_label=day_label(plan_date),
                plan_date=plan_date,
                phase=phase,
                breakfast=default_meal(phase, "breakfast", allergies),
                lunch=default_meal(phase, "lunch", allergies),
                dinner=default_meal(phase, "dinner", allergies),
                snacks=snacks
            ))

        return WeeklyMealPlan(
            pcos_type=profile.pcos_type,
            current_phase=projection[0][2],
            cycle_day=projection[0][1] + 1,
            days=days,
            hydration=DEFAULT_HYDRATION,
            supplements=list(DEFAULT_SUPPLEMENTS),
            source="fallback"
        )
