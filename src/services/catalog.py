"""
Grocery catalog service.

The catalog is a static seed of FoodItem records. Items are created once and
never modified; callers rate them per request through the suitability service.

Typical usage:
    catalog = get_catalog()
    items = catalog.search("salmon")
    item = catalog.match("wild salmon fillet")
"""
import re
from typing import Iterable, List, Optional

from aws_lambda_powertools import Logger

from src.models.food import FoodItem
from src.services.constants import SEED_GROCERY_ITEMS

logger = Logger()

DEFAULT_SEARCH_LIMIT = 20

_WORD = re.compile(r"[a-z0-9]+")

def _words(text: str) -> List[str]:
    return _WORD.findall(text.lower())

def _contains_phrase(words: List[str], phrase: List[str]) -> bool:
    """True when phrase occurs in words as a run of whole words."""
    size = len(phrase)
    return any(words[i:i + size] == phrase for i in range(len(words) - size + 1))

class GroceryCatalog:
    """Read-only lookup over seeded food items."""

    def __init__(self, items: Optional[Iterable[FoodItem]] = None):
        if items is None:
            items = [
                FoodItem(id=index, **record)
                for index, record in enumerate(SEED_GROCERY_ITEMS, start=1)
            ]
        self._items: List[FoodItem] = list(items)

    @property
    def items(self) -> List[FoodItem]:
        return list(self._items)

    def search(
        self,
        query: Optional[str] = None,
        limit: int = DEFAULT_SEARCH_LIMIT,
        dietary_tag: Optional[str] = None
    ) -> List[FoodItem]:
        """
        Search items by name or category.

        Args:
            query: Case-insensitive substring; empty returns the first `limit` items
            limit: Cap applied only when no query is given
            dietary_tag: Optional tag every result must carry

        Returns:
            Matching items in catalog order
        """
        candidates = self._items
        if dietary_tag and dietary_tag != "all":
            candidates = [item for item in candidates if dietary_tag in item.dietary_tags]

        needle = (query or "").strip().lower()
        if not needle:
            return candidates[:limit]

        results = [
            item for item in candidates
            if needle in item.name.lower() or needle in item.category.value
        ]
        logger.debug("Catalog search", extra={
            "query": needle,
            "dietary_tag": dietary_tag,
            "result_count": len(results)
        })
        return results

    def match(self, name: str) -> Optional[FoodItem]:
        """
        Find the catalog item for a free-text name.

        Exact case-insensitive match first, then the first item whose name
        contains the text, or is contained in it, as whole words.
        """
        needle = (name or "").strip().lower()
        if not needle:
            return None

        for item in self._items:
            if item.name.lower() == needle:
                return item
        needle_words = _words(needle)
        if not needle_words:
            return None
        for item in self._items:
            candidate = _words(item.name)
            if candidate and (_contains_phrase(needle_words, candidate) or _contains_phrase(candidate, needle_words)):
                return item
        return None

_catalog: Optional[GroceryCatalog] = None

def get_catalog() -> GroceryCatalog:
    """Get or create the shared catalog instance."""
    global _catalog
    if _catalog is None:
        _catalog = GroceryCatalog()
    return _catalog
