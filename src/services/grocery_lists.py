"""
Grocery list service.

Lists are stored under their owner (USER#<id> / GLIST#<list_id>) and their items
under the list (GLIST#<list_id> / ITEM#<item_id>). Each list remembers the
phase and PCOS type it was built for; items added to it are rated against
those through the suitability service.

Typical usage:
    service = GroceryListService()
    grocery_list = service.create_list(user_id, "This week", phase, profile.pcos_type)
    item = service.add_item(user_id, grocery_list.list_id, GroceryListItemCreate(name="Spinach"))
"""
import time
import uuid
from decimal import Decimal
from typing import List, Optional, Union

from aws_lambda_powertools import Logger

from src.models.food import FoodItem, SuitabilityRating, SuitabilityVerdict
from src.models.grocery import GroceryList, GroceryListItem, GroceryListItemCreate
from src.models.phase import CyclePhase
from src.models.profile import PcosType
from src.services.catalog import GroceryCatalog, get_catalog
from src.services.exceptions import GroceryListNotFoundError
from src.services.suitability import estimate_item, resolve_suitability
from src.utils.dynamo import (
    get_dynamo,
    create_pk,
    create_grocery_list_pk,
    create_grocery_list_sk,
    create_list_item_sk,
    strip_keys
)

logger = Logger()

def now_ms() -> int:
    """Current time as epoch milliseconds."""
    return int(time.time() * 1000)

def item_reason(
    food: FoodItem,
    verdict: SuitabilityVerdict,
    pcos_type: PcosType,
    phase: CyclePhase
) -> Optional[str]:
    """
    Short explanation shown next to a list item.

    Recommended items show their benefits; avoided items name the axis that
    rules them out. Neutral items have no reason.
    """
    if verdict.suitability == SuitabilityRating.RECOMMENDED:
        return food.benefits or f"Good choice for the {phase.value} phase"
    if verdict.suitability == SuitabilityRating.AVOID:
        if verdict.pcos_rating == SuitabilityRating.AVOID:
            return f"Best limited with {pcos_type.value.replace('_', ' ')} PCOS"
        return f"Best limited during the {phase.value} phase"
    return None

class GroceryListService:
    """CRUD for a user's grocery lists and their items."""

    def __init__(self, dynamo=None, catalog: Optional[GroceryCatalog] = None):
        self.dynamo = dynamo or get_dynamo()
        self.catalog = catalog or get_catalog()

    def create_list(
        self,
        user_id: str,
        name: str,
        phase: Union[CyclePhase, str],
        pcos_type: Optional[Union[PcosType, str]]
    ) -> GroceryList:
        """
        Create an empty list tagged with the phase and PCOS type it is for.
        """
        now = now_ms()
        grocery_list = GroceryList(
            list_id=uuid.uuid4().hex,
            user_id=user_id,
            name=name,
            cycle_phase=CyclePhase(phase),
            pcos_type=PcosType.coerce(pcos_type),
            created_at=now,
            updated_at=now
        )
        self.dynamo.put_item({
            "PK": create_pk(user_id),
            "SK": create_grocery_list_sk(grocery_list.list_id),
            **grocery_list.model_dump(mode="json")
        })
        logger.info("Created grocery list", extra={
            "user_id": user_id,
            "list_id": grocery_list.list_id,
            "cycle_phase": grocery_list.cycle_phase.value
        })
        return grocery_list

    def get_list(self, user_id: str, list_id: str) -> GroceryList:
        """
        Get one of the user's lists.

        Raises:
            GroceryListNotFoundError: If the user has no list with this ID
        """
        item = self.dynamo.get_item({
            "PK": create_pk(user_id),
            "SK": create_grocery_list_sk(list_id)
        })
        if not item:
            raise GroceryListNotFoundError(f"Grocery list {list_id} not found")
        return GroceryList(**strip_keys(item))

    def get_user_lists(self, user_id: str) -> List[GroceryList]:
        """List the user's grocery lists, newest first."""
        items = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_pk(user_id),
            sort_key_prefix="GLIST#"
        )
        lists = [GroceryList(**strip_keys(item)) for item in items]
        return sorted(lists, key=lambda grocery_list: grocery_list.created_at, reverse=True)

    def get_list_items(self, user_id: str, list_id: str) -> List[GroceryListItem]:
        """
        Items on a list in the order they were added.

        Raises:
            GroceryListNotFoundError: If the user has no list with this ID
        """
        self.get_list(user_id, list_id)
        return self._list_items(list_id)

    def _list_items(self, list_id: str) -> List[GroceryListItem]:
        records = self.dynamo.query_items(
            partition_key="PK",
            partition_value=create_grocery_list_pk(list_id),
            sort_key_prefix="ITEM#"
        )
        items = [GroceryListItem(**strip_keys(record)) for record in records]
        return sorted(items, key=lambda item: item.added_at)

    def _get_item(self, list_id: str, item_id: str) -> GroceryListItem:
        record = self.dynamo.get_item({
            "PK": create_grocery_list_pk(list_id),
            "SK": create_list_item_sk(item_id)
        })
        if not record:
            raise GroceryListNotFoundError(f"Item {item_id} not found on list {list_id}")
        return GroceryListItem(**strip_keys(record))

    def _touch(self, user_id: str, list_id: str) -> None:
        self.dynamo.update_item(
            key={"PK": create_pk(user_id), "SK": create_grocery_list_sk(list_id)},
            update_expression="SET updated_at = :now",
            expression_values={":now": now_ms()}
        )

    def add_item(self, user_id: str, list_id: str, data: GroceryListItemCreate) -> GroceryListItem:
        """
        Add an item and flag it against the list's PCOS type and phase.

        Catalog matches use their stored ratings; unknown items are estimated
        from their category.

        Raises:
            GroceryListNotFoundError: If the user has no list with this ID
        """
        grocery_list = self.get_list(user_id, list_id)

        food = self.catalog.match(data.name) or estimate_item(data.name, data.category)
        verdict = resolve_suitability(food, grocery_list.pcos_type, grocery_list.cycle_phase)

        item = GroceryListItem(
            item_id=uuid.uuid4().hex,
            list_id=list_id,
            user_id=user_id,
            name=data.name,
            category=data.category or food.category,
            quantity=data.quantity,
            unit=data.unit,
            is_recommended=verdict.suitability == SuitabilityRating.RECOMMENDED,
            is_warned=verdict.suitability == SuitabilityRating.AVOID,
            reason=item_reason(food, verdict, grocery_list.pcos_type, grocery_list.cycle_phase),
            added_at=now_ms()
        )

        record = item.model_dump(mode="json")
        # DynamoDB rejects float attributes
        record["quantity"] = Decimal(str(item.quantity))
        self.dynamo.put_item({
            "PK": create_grocery_list_pk(list_id),
            "SK": create_list_item_sk(item.item_id),
            **record
        })
        self._touch(user_id, list_id)

        logger.info("Added grocery list item", extra={
            "user_id": user_id,
            "list_id": list_id,
            "suitability": verdict.suitability.value
        })
        return item

    def toggle_item(self, user_id: str, list_id: str, item_id: str) -> GroceryListItem:
        """
        Flip an item's checked flag.

        Raises:
            GroceryListNotFoundError: If the list or item does not exist
        """
        self.get_list(user_id, list_id)
        item = self._get_item(list_id, item_id)
        checked = not item.checked
        self.dynamo.update_item(
            key={"PK": create_grocery_list_pk(list_id), "SK": create_list_item_sk(item_id)},
            update_expression="SET checked = :checked",
            expression_values={":checked": checked}
        )
        return item.model_copy(update={"checked": checked})

    def remove_item(self, user_id: str, list_id: str, item_id: str) -> None:
        """
        Remove an item and refresh the list's updated_at.

        Raises:
            GroceryListNotFoundError: If the list or item does not exist
        """
        self.get_list(user_id, list_id)
        self._get_item(list_id, item_id)
        self.dynamo.delete_item({
            "PK": create_grocery_list_pk(list_id),
            "SK": create_list_item_sk(item_id)
        })
        self._touch(user_id, list_id)

    def delete_list(self, user_id: str, list_id: str) -> None:
        """
        Delete a list together with its items.

        Raises:
            GroceryListNotFoundError: If the user has no list with this ID
        """
        self.get_list(user_id, list_id)
        items = self._list_items(list_id)
        for item in items:
            self.dynamo.delete_item({
                "PK": create_grocery_list_pk(list_id),
                "SK": create_list_item_sk(item.item_id)
            })
        self.dynamo.delete_item({
            "PK": create_pk(user_id),
            "SK": create_grocery_list_sk(list_id)
        })
        logger.info("Deleted grocery list", extra={
            "user_id": user_id,
            "list_id": list_id,
            "item_count": len(items)
        })
