"""
Fridge scan service.

Items extracted from a photo are matched against the grocery catalog and rated
for the user's PCOS type and current phase. Items the catalog does not know
are rated from per-category estimates.
"""
from datetime import date
from typing import Iterable, List, Optional, Union

from aws_lambda_powertools import Logger

from src.models.food import FoodItem, SuitabilityRating
from src.models.grocery import FridgeScanResult, ScannedGrocery, ScannedItem
from src.models.phase import CyclePhase
from src.models.profile import PcosProfile, PcosType
from src.services.catalog import GroceryCatalog, get_catalog
from src.services.phase import compute_phase
from src.services.suitability import (
    count_by_suitability,
    estimate_item,
    rank_by_suitability,
    resolve_suitability
)

logger = Logger()

MAX_IMAGE_BYTES = 10 * 1024 * 1024

def validate_image(image: bytes, mime_type: Optional[str]) -> None:
    """
    Reject uploads the extractor cannot take.

    Raises:
        ValueError: If the image is empty, larger than 10 MB or not an image type
    """
    if not image:
        raise ValueError("No image provided")
    if len(image) > MAX_IMAGE_BYTES:
        raise ValueError("Image exceeds the 10 MB limit")
    if not (mime_type or "").lower().startswith("image/"):
        raise ValueError("Only image uploads are allowed")

class FridgeScanService:
    def __init__(self, bem=None, catalog: Optional[GroceryCatalog] = None):
        if bem is None:
            from src.utils.clients import get_bem
            bem = get_bem()
        self.bem = bem
        self.catalog = catalog or get_catalog()

    def scan(
        self,
        image: bytes,
        mime_type: str,
        profile: PcosProfile,
        today: date
    ) -> FridgeScanResult:
        """
        Scan a fridge photo and rate what was found.

        Raises:
            ValueError: If the image is rejected
            FridgeScanError: If extraction fails
            InvalidProfileError: If the profile cannot produce a phase
        """
        validate_image(image, mime_type)
        _, phase = compute_phase(profile.to_cycle_profile(), today)

        scanned = self.bem.scan_fridge(image, mime_type)
        result = self.rate_scanned(scanned, profile.pcos_type, phase)

        logger.info("Fridge scan rated", extra={
            "user_id": profile.user_id,
            "phase": phase.value,
            "item_count": len(result.items),
            "recommended": result.recommended_count,
            "avoid": result.avoid_count
        })
        return result

    def rate_scanned(
        self,
        items: Iterable[ScannedGrocery],
        pcos_type: Optional[Union[PcosType, str]],
        phase: Union[CyclePhase, str]
    ) -> FridgeScanResult:
        """
        Rate scanned items and rank them recommended first.

        Args:
            items: Items identified in the image
            pcos_type: User's PCOS type
            phase: Current cycle phase

        Returns:
            FridgeScanResult with ranked items and per-tag counts
        """
        pairs = []
        for scanned in items:
            match: Optional[FoodItem] = self.catalog.match(scanned.name)
            food = match or estimate_item(scanned.name, scanned.category)
            pairs.append(((scanned, food, match is not None), resolve_suitability(food, pcos_type, phase)))

        ranked = rank_by_suitability(pairs)
        rated = [
            ScannedItem(
                name=scanned.name,
                category=food.category,
                quantity=scanned.quantity,
                pcos_rating=verdict.pcos_rating,
                cycle_rating=verdict.cycle_rating,
                suitability=verdict.suitability,
                benefits=food.benefits,
                matched=matched
            )
            for (scanned, food, matched), verdict in ranked
        ]
        counts = count_by_suitability(item.suitability for item in rated)

        return FridgeScanResult(
            items=rated,
            phase=CyclePhase(phase),
            pcos_type=PcosType.coerce(pcos_type),
            recommended_count=counts[SuitabilityRating.RECOMMENDED],
            neutral_count=counts[SuitabilityRating.NEUTRAL],
            avoid_count=counts[SuitabilityRating.AVOID]
        )
