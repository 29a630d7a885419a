"""
Service module for rating food items against a PCOS type and cycle phase.

Each item carries two rating tables. The resolver reads both for the user's
PCOS type and current phase and folds them into a single tag: any "avoid"
wins, then any "recommended", otherwise "neutral". Ranking orders rated items
recommended first, avoid last, keeping catalog order within a tag.

Typical usage:
    >>> verdict = resolve_suitability(item, PcosType.INSULIN_RESISTANT, CyclePhase.LUTEAL)
    >>> ranked = rank_by_suitability([(item, verdict), ...])
"""
from typing import Dict, Iterable, List, Optional, Sequence, Tuple, Union

from src.models.food import (
    FoodCategory,
    FoodItem,
    RatedFoodItem,
    SuitabilityRating,
    SuitabilityVerdict
)
from src.models.phase import CyclePhase
from src.models.profile import PcosType
from src.services.constants import CATEGORY_PCOS_ESTIMATES, SUITABILITY_ORDER

RatedPair = Tuple[FoodItem, SuitabilityVerdict]

def combine_ratings(
    pcos_rating: SuitabilityRating,
    cycle_rating: SuitabilityRating
) -> SuitabilityRating:
    """
    Fold two axis ratings into one tag (avoid, then recommended, then neutral).
    """
    if SuitabilityRating.AVOID in (pcos_rating, cycle_rating):
        return SuitabilityRating.AVOID
    if SuitabilityRating.RECOMMENDED in (pcos_rating, cycle_rating):
        return SuitabilityRating.RECOMMENDED
    return SuitabilityRating.NEUTRAL

def resolve_suitability(
    item: FoodItem,
    pcos_type: Optional[Union[PcosType, str]],
    phase: Union[CyclePhase, str]
) -> SuitabilityVerdict:
    """
    Rate a food item for a PCOS type and cycle phase.

    Args:
        item: Catalog item with its rating tables
        pcos_type: User's PCOS type; missing or unrecognised means unknown
        phase: Current cycle phase

    Returns:
        SuitabilityVerdict with both axis ratings and the combined tag

    Example:
        >>> item = FoodItem(name="White Bread", category="grain",
        ...                 pcos_suitability={"insulin_resistant": "avoid"},
        ...                 cycle_phase_suitability={"luteal": "recommended"})
        >>> resolve_suitability(item, "insulin_resistant", "luteal").suitability
        <SuitabilityRating.AVOID: 'avoid'>
    """
    pcos_rating = item.pcos_rating(PcosType.coerce(pcos_type))
    cycle_rating = item.cycle_rating(CyclePhase(phase))

    return SuitabilityVerdict(
        pcos_rating=pcos_rating,
        cycle_rating=cycle_rating,
        suitability=combine_ratings(pcos_rating, cycle_rating)
    )

def rank_by_suitability(items: Sequence[RatedPair]) -> List[RatedPair]:
    """
    Order rated items recommended, neutral, avoid.

    The sort is stable, so items sharing a tag keep their relative order and
    ranking an already ranked sequence changes nothing.
    """
    return sorted(items, key=lambda pair: SUITABILITY_ORDER[pair[1].suitability])

def rate_items(
    items: Iterable[FoodItem],
    pcos_type: Optional[Union[PcosType, str]],
    phase: Union[CyclePhase, str]
) -> List[RatedPair]:
    """Resolve every item and return them ranked."""
    return rank_by_suitability([
        (item, resolve_suitability(item, pcos_type, phase))
        for item in items
    ])

def to_rated_items(pairs: Iterable[RatedPair]) -> List[RatedFoodItem]:
    """Flatten rated pairs for API responses, preserving order."""
    return [RatedFoodItem.from_verdict(item, verdict) for item, verdict in pairs]

def estimate_item(name: str, category: Union[FoodCategory, str, None]) -> FoodItem:
    """
    Build a stand-in catalog item for something the catalog does not know.

    PCOS ratings come from per-category estimates; no phase ratings are assumed.
    """
    food_category = category if isinstance(category, FoodCategory) else FoodCategory.coerce(category)
    return FoodItem(
        name=name,
        category=food_category,
        pcos_suitability=dict(CATEGORY_PCOS_ESTIMATES.get(food_category, {}))
    )

def filter_by_suitability(
    rated: Iterable[RatedFoodItem],
    suitability: Optional[Union[SuitabilityRating, str]]
) -> List[RatedFoodItem]:
    """Keep items with the given tag; None or "all" keeps everything."""
    if suitability in (None, "", "all"):
        return list(rated)
    wanted = SuitabilityRating(suitability)
    return [item for item in rated if item.suitability == wanted]

def count_by_suitability(verdicts: Iterable[SuitabilityRating]) -> Dict[SuitabilityRating, int]:
    """Count combined tags, with every tag present in the result."""
    counts = {rating: 0 for rating in SuitabilityRating}
    for rating in verdicts:
        counts[rating] += 1
    return counts
