"""
Models for fridge scans and grocery lists.
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from src.models.food import FoodCategory, SuitabilityRating
from src.models.phase import CyclePhase
from src.models.profile import PcosType

class ScannedGrocery(BaseModel):
    """
    Item identified by the external vision extractor.
    """
    name: str = "Unknown Item"
    category: FoodCategory = FoodCategory.OTHER
    quantity: str = "1"

class ScannedItem(BaseModel):
    """
    Scanned item rated for the user's PCOS type and phase.

    matched is False when the item is not in the catalog and its ratings are estimated.
    """
    name: str
    category: FoodCategory
    quantity: str
    pcos_rating: SuitabilityRating
    cycle_rating: SuitabilityRating
    suitability: SuitabilityRating
    benefits: Optional[str] = None
    matched: bool

class FridgeScanResult(BaseModel):
    items: List[ScannedItem]
    phase: CyclePhase
    pcos_type: PcosType
    recommended_count: int = 0
    neutral_count: int = 0
    avoid_count: int = 0

class GroceryList(BaseModel):
    """
    A user's grocery list, tagged with the phase and type it was built for.
    """
    list_id: str
    user_id: str
    name: str
    cycle_phase: CyclePhase
    pcos_type: PcosType
    created_at: int
    updated_at: int

class GroceryListItem(BaseModel):
    item_id: str
    list_id: str
    user_id: str
    name: str
    category: FoodCategory = FoodCategory.OTHER
    quantity: float = Field(1, gt=0)
    unit: str = "each"
    checked: bool = False
    is_recommended: bool = False
    is_warned: bool = False
    reason: Optional[str] = None
    added_at: int

class GroceryListCreate(BaseModel):
    name: str = Field(..., min_length=1)

class GroceryListItemCreate(BaseModel):
    name: str = Field(..., min_length=1)
    category: Optional[FoodCategory] = None
    quantity: float = Field(1, gt=0)
    unit: str = "each"
