"""
Tests for fridge scan rating.
"""
from datetime import date
from unittest.mock import Mock

import pytest

from src.models.food import SuitabilityRating
from src.models.grocery import ScannedGrocery
from src.models.phase import CyclePhase
from src.services.fridge import MAX_IMAGE_BYTES, FridgeScanService, validate_image

@pytest.fixture
def bem():
    bem = Mock()
    bem.scan_fridge.return_value = [
        ScannedGrocery(name="white bread", category="grain", quantity="1 loaf"),
        ScannedGrocery(name="Organic Spinach", category="vegetable", quantity="1 bag"),
        ScannedGrocery(name="Pickles", category="other", quantity="1 jar"),
        ScannedGrocery(name="Kale", category="vegetable", quantity="1 bunch"),
    ]
    return bem

def test_scan_rates_and_ranks_items(bem, catalog, pcos_profile):
    result = FridgeScanService(bem, catalog).scan(b"img", "image/jpeg", pcos_profile, date(2024, 1, 2))

    bem.scan_fridge.assert_called_once_with(b"img", "image/jpeg")
    assert result.phase == CyclePhase.MENSTRUAL
    assert [item.name for item in result.items] == ["Organic Spinach", "Kale", "Pickles", "white bread"]
    assert [item.suitability for item in result.items] == [
        SuitabilityRating.RECOMMENDED,
        SuitabilityRating.RECOMMENDED,
        SuitabilityRating.NEUTRAL,
        SuitabilityRating.AVOID
    ]
    assert (result.recommended_count, result.neutral_count, result.avoid_count) == (2, 1, 1)

def test_matched_flag_and_benefits(bem, catalog, pcos_profile):
    result = FridgeScanService(bem, catalog).scan(b"img", "image/png", pcos_profile, date(2024, 1, 2))
    by_name = {item.name: item for item in result.items}

    assert by_name["Organic Spinach"].matched
    assert by_name["Organic Spinach"].benefits == "Iron and folate to replenish blood loss"
    assert by_name["Organic Spinach"].quantity == "1 bag"
    assert not by_name["Kale"].matched
    assert not by_name["Pickles"].matched

def test_rate_scanned_unknown_pcos_type(catalog):
    result = FridgeScanService(Mock(), catalog).rate_scanned(
        [ScannedGrocery(name="Sugary Soda", category="beverage")], None, "luteal"
    )

    assert result.items[0].suitability == SuitabilityRating.AVOID
    assert result.pcos_type.value == "unknown"

def test_rate_scanned_empty(catalog):
    result = FridgeScanService(Mock(), catalog).rate_scanned([], "adrenal", "follicular")
    assert result.items == []
    assert result.recommended_count == 0

@pytest.mark.parametrize("image,mime_type", [
    (b"", "image/png"),
    (b"x" * (MAX_IMAGE_BYTES + 1), "image/png"),
    (b"data", "application/pdf"),
    (b"data", None),
])
def test_validate_image_rejects(image, mime_type):
    with pytest.raises(ValueError):
        validate_image(image, mime_type)

def test_validate_image_accepts():
    validate_image(b"x" * MAX_IMAGE_BYTES, "image/heic")
