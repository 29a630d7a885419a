"""
Food catalog models and suitability ratings.
"""
from enum import Enum
from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from src.models.phase import CyclePhase
from src.models.profile import PcosType

class FoodCategory(str, Enum):
    """
    Closed set of grocery categories.
    """
    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    FRUIT = "fruit"
    GRAIN = "grain"
    FAT = "fat"
    SPICE = "spice"
    BEVERAGE = "beverage"
    DAIRY = "dairy"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: Optional[str]) -> "FoodCategory":
        """Map free text from external extractors onto a category."""
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.OTHER

class SuitabilityRating(str, Enum):
    """
    Three-valued suitability tag.
    """
    RECOMMENDED = "recommended"
    NEUTRAL = "neutral"
    AVOID = "avoid"

class FoodItem(BaseModel):
    """
    Catalog entry with per-PCOS-type and per-phase ratings.

    Missing keys in either rating table mean neutral.
    """
    model_config = ConfigDict(frozen=True)

    id: Optional[int] = None
    name: str
    category: FoodCategory
    benefits: Optional[str] = None
    pcos_suitability: Dict[PcosType, SuitabilityRating] = Field(default_factory=dict)
    cycle_phase_suitability: Dict[CyclePhase, SuitabilityRating] = Field(default_factory=dict)
    dietary_tags: List[str] = Field(default_factory=list)

    def pcos_rating(self, pcos_type: PcosType) -> SuitabilityRating:
        """Rating for a PCOS type, neutral when not listed."""
        return self.pcos_suitability.get(pcos_type, SuitabilityRating.NEUTRAL)

    def cycle_rating(self, phase: CyclePhase) -> SuitabilityRating:
        """Rating for a cycle phase, neutral when not listed."""
        return self.cycle_phase_suitability.get(phase, SuitabilityRating.NEUTRAL)

class SuitabilityVerdict(BaseModel):
    """
    Both axis ratings plus the combined tag. Recomputed per request.
    """
    model_config = ConfigDict(frozen=True)

    pcos_rating: SuitabilityRating
    cycle_rating: SuitabilityRating
    suitability: SuitabilityRating

class RatedFoodItem(BaseModel):
    """
    Catalog item flattened with its verdict for API responses.
    """
    id: Optional[int] = None
    name: str
    category: FoodCategory
    benefits: Optional[str] = None
    dietary_tags: List[str] = Field(default_factory=list)
    pcos_rating: SuitabilityRating
    cycle_rating: SuitabilityRating
    suitability: SuitabilityRating

    @property
    def is_recommended(self) -> bool:
        return self.suitability == SuitabilityRating.RECOMMENDED

    @classmethod
    def from_verdict(cls, item: FoodItem, verdict: SuitabilityVerdict) -> "RatedFoodItem":
        return cls(
            id=item.id,
            name=item.name,
            category=item.category,
            benefits=item.benefits,
            dietary_tags=list(item.dietary_tags),
            pcos_rating=verdict.pcos_rating,
            cycle_rating=verdict.cycle_rating,
            suitability=verdict.suitability
        )
