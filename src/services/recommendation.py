"""
Service module for generating phase-aware daily recommendations.

The phase always comes from the cycle engine. The AI model only fills in the
advice; when it is unavailable a fallback plan is assembled from per-phase
defaults and the grocery catalog rated for the user.
"""
from datetime import date
from typing import List, Optional

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.models.food import SuitabilityRating
from src.models.phase import CyclePhase
from src.models.profile import PcosProfile
from src.models.recommendation import (
    DailyRecommendation,
    ExerciseAdvice,
    NutritionAdvice
)
from src.services.catalog import GroceryCatalog, get_catalog
from src.services.constants import PHASE_DAILY_DEFAULTS
from src.services.exceptions import AIServiceError
from src.services.phase import compute_phase
from src.services.suitability import rate_items

logger = Logger()

# Number of catalog names listed under foods to eat/avoid in the fallback plan
FALLBACK_FOOD_LIMIT = 6

DAILY_PLAN_PROMPT = """User Profile:
- PCOS Type: {pcos_type}
- Current Cycle Phase: {phase} (Day {cycle_day} of {cycle_length})

Generate a daily plan JSON:
{{
  "nutrition": {{ "focus": "string", "foods_to_eat": ["string"], "foods_to_avoid": ["string"] }},
  "exercise": {{ "focus": "string", "recommended_types": ["string"], "intensity": "low/medium/high" }},
  "lifestyle": "string"
}}"""

class RecommendationService:
    """Build the daily nutrition, exercise and lifestyle plan."""

    def __init__(self, llm=None, catalog: Optional[GroceryCatalog] = None):
        self._llm = llm
        self.catalog = catalog or get_catalog()

    @property
    def llm(self):
        """Model client, built on first use."""
        if self._llm is None:
            from src.utils.clients import get_llm
            self._llm = get_llm()
        return self._llm

    def daily(self, profile: PcosProfile, today: date) -> DailyRecommendation:
        """
        Generate today's plan for a profile.

        Args:
            profile: User's stored PCOS profile
            today: Date to plan for

        Returns:
            DailyRecommendation with source "ai" or "fallback"

        Raises:
            InvalidProfileError: If the profile cannot produce a phase
        """
        offset, phase = compute_phase(profile.to_cycle_profile(), today)
        cycle_day = offset + 1

        try:
            recommendation = self._from_ai(profile, phase, cycle_day)
        except AIServiceError as e:
            logger.warning("Using fallback daily plan", extra={
                "user_id": profile.user_id,
                "phase": phase.value,
                "error": str(e)
            })
            recommendation = self.fallback(profile, phase, cycle_day)

        logger.info("Generated daily recommendation", extra={
            "user_id": profile.user_id,
            "phase": phase.value,
            "cycle_day": cycle_day,
            "source": recommendation.source
        })
        return recommendation

    def _from_ai(self, profile: PcosProfile, phase: CyclePhase, cycle_day: int) -> DailyRecommendation:
        prompt = DAILY_PLAN_PROMPT.format(
            pcos_type=profile.pcos_type.value,
            phase=phase.value,
            cycle_day=cycle_day,
            cycle_length=profile.cycle_length
        )
        data = self.llm.complete_json(prompt)
        try:
            return DailyRecommendation(
                phase=phase,
                cycle_day=cycle_day,
                pcos_type=profile.pcos_type,
                nutrition=NutritionAdvice(**data["nutrition"]),
                exercise=ExerciseAdvice(**data["exercise"]),
                lifestyle=data["lifestyle"],
                source="ai"
            )
        except (KeyError, TypeError, ValidationError) as e:
            raise AIServiceError(f"Unusable daily plan: {str(e)}") from e

    def fallback(self, profile: PcosProfile, phase: CyclePhase, cycle_day: int) -> DailyRecommendation:
        """
        Deterministic plan from phase defaults and the rated catalog.
        """
        defaults = PHASE_DAILY_DEFAULTS[phase]
        rated = rate_items(self.catalog.items, profile.pcos_type, phase)

        return DailyRecommendation(
            phase=phase,
            cycle_day=cycle_day,
            pcos_type=profile.pcos_type,
            nutrition=NutritionAdvice(
                focus=defaults["nutrition_focus"],
                foods_to_eat=_names_with(rated, SuitabilityRating.RECOMMENDED),
                foods_to_avoid=_names_with(rated, SuitabilityRating.AVOID)
            ),
            exercise=ExerciseAdvice(
                focus=defaults["exercise_focus"],
                recommended_types=list(defaults["exercise_types"]),
                intensity=defaults["intensity"]
            ),
            lifestyle=defaults["lifestyle"],
            source="fallback"
        )

def _names_with(rated, rating: SuitabilityRating) -> List[str]:
    names = [item.name for item, verdict in rated if verdict.suitability == rating]
    return names[:FALLBACK_FOOD_LIMIT]
