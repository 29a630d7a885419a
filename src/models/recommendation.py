"""
Models for PCOS analysis and phase-aware daily recommendations.
"""
from enum import Enum
from typing import List
from pydantic import BaseModel, Field, field_validator

from src.models.phase import CyclePhase
from src.models.profile import PcosType

class CycleRegularity(str, Enum):
    REGULAR = "regular"
    IRREGULAR = "irregular"
    ABSENT = "absent"

class PcosAnalysisRequest(BaseModel):
    """
    Symptom questionnaire used to classify a PCOS type.
    """
    symptoms: List[str] = Field(default_factory=list)
    cycle_regularity: CycleRegularity
    weight_concerns: bool = False
    hair_growth: bool = False
    acne: bool = False
    fatigue: bool = False

class PcosAnalysisResult(BaseModel):
    """
    Classification returned by the AI model, normalised.
    """
    detected_type: PcosType = PcosType.UNKNOWN
    confidence: float = 0.0
    explanation: str = ""
    recommendations: List[str] = Field(default_factory=list)

    @field_validator("detected_type", mode="before")
    @classmethod
    def _known_type(cls, value):
        return PcosType.coerce(value)

    @field_validator("confidence", mode="before")
    @classmethod
    def _clamp_confidence(cls, value):
        try:
            value = float(value)
        except (TypeError, ValueError):
            return 0.0
        return min(max(value, 0.0), 1.0)

class Intensity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

class NutritionAdvice(BaseModel):
    focus: str
    foods_to_eat: List[str] = Field(default_factory=list)
    foods_to_avoid: List[str] = Field(default_factory=list)

class ExerciseAdvice(BaseModel):
    focus: str
    recommended_types: List[str] = Field(default_factory=list)
    intensity: Intensity = Intensity.MEDIUM

class DailyRecommendation(BaseModel):
    """
    Daily nutrition, exercise and lifestyle plan for the current phase.
    """
    phase: CyclePhase
    cycle_day: int
    pcos_type: PcosType = PcosType.UNKNOWN
    nutrition: NutritionAdvice
    exercise: ExerciseAdvice
    lifestyle: str
    source: str = Field("ai", pattern="^(ai|fallback)$")
