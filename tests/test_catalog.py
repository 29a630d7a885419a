"""
Tests for the grocery catalog.
"""
from src.models.food import FoodCategory
from src.services.catalog import GroceryCatalog, get_catalog

def test_seed_items_have_sequential_ids(catalog):
    ids = [item.id for item in catalog.items]
    assert ids == list(range(1, len(ids) + 1))
    assert catalog.items[0].name == "Wild Salmon"

def test_search_without_query_returns_first_items(catalog):
    assert len(catalog.search()) == 20
    assert [item.name for item in catalog.search(limit=3)] == ["Wild Salmon", "Spinach", "Berries"]

def test_search_matches_name_case_insensitively(catalog):
    results = catalog.search("TEA")
    assert {item.name for item in results} == {"Green Tea", "Chamomile Tea"}

def test_search_matches_category(catalog):
    results = catalog.search("dairy")
    assert results
    assert all(item.category == FoodCategory.DAIRY for item in results)

def test_search_with_dietary_tag(catalog):
    results = catalog.search(dietary_tag="vegan")
    assert results
    assert all("vegan" in item.dietary_tags for item in results)
    assert len(catalog.search(dietary_tag="all")) == 20

def test_search_no_match(catalog):
    assert catalog.search("unobtainium") == []

def test_match_prefers_exact_name(catalog):
    assert catalog.match("green tea").name == "Green Tea"

def test_match_whole_words_either_way(catalog):
    assert catalog.match("Organic Wild Salmon Fillet").name == "Wild Salmon"
    assert catalog.match("yogurt").name == "Greek Yogurt"
    assert catalog.match("rocket fuel") is None
    assert catalog.match("") is None

def test_match_ignores_partial_words(catalog):
    assert catalog.match("Goats Milk") is None
    assert catalog.match("eggplant") is None
    assert catalog.match("oat") is None

def test_items_are_copied(catalog):
    catalog.items.clear()
    assert catalog.items

def test_custom_items():
    custom = GroceryCatalog([])
    assert custom.items == []
    assert custom.match("anything") is None

def test_get_catalog_is_shared():
    assert get_catalog() is get_catalog()
