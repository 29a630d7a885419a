"""
Lambda handler for grocery lists.

Routes:
    GET    /api/grocery-lists
    POST   /api/grocery-lists
    DELETE /api/grocery-lists/{list_id}
    GET    /api/grocery-lists/{list_id}/items
    POST   /api/grocery-lists/{list_id}/items
    POST   /api/grocery-lists/{list_id}/items/{item_id}/toggle
    DELETE /api/grocery-lists/{list_id}/items/{item_id}
"""
from datetime import date
from typing import Dict

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.grocery import GroceryListCreate, GroceryListItemCreate
from src.services.grocery_lists import GroceryListService
from src.services.phase import compute_phase
from src.services.profile import ProfileService
from src.utils.http import (
    error_response,
    json_response,
    no_content,
    parse_body,
    path_param,
    route_key
)
from src.utils.middleware import require_auth

logger = Logger()
tracer = Tracer()

LISTS = "/api/grocery-lists"
LIST = "/api/grocery-lists/{list_id}"
ITEMS = "/api/grocery-lists/{list_id}/items"
ITEM = "/api/grocery-lists/{list_id}/items/{item_id}"
TOGGLE = "/api/grocery-lists/{list_id}/items/{item_id}/toggle"

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
def handler(event: Dict, context: LambdaContext, user_id: str) -> Dict:
    """
    Handle grocery list requests.

    New lists are tagged with the user's PCOS type and today's phase.
    """
    try:
        route = route_key(event)
        list_id = path_param(event, "list_id")
        item_id = path_param(event, "item_id")
        service = GroceryListService()

        if route == f"GET {LISTS}":
            lists = service.get_user_lists(user_id)
            return json_response(200, [grocery_list.model_dump(mode="json") for grocery_list in lists])

        if route == f"POST {LISTS}":
            data = GroceryListCreate(**parse_body(event))
            profile = ProfileService().require_profile(user_id)
            _, phase = compute_phase(profile.to_cycle_profile(), date.today())
            grocery_list = service.create_list(user_id, data.name, phase, profile.pcos_type)
            return json_response(201, grocery_list.model_dump(mode="json"))

        if route == f"DELETE {LIST}":
            service.delete_list(user_id, list_id)
            return no_content()

        if route == f"GET {ITEMS}":
            items = service.get_list_items(user_id, list_id)
            return json_response(200, [item.model_dump(mode="json") for item in items])

        if route == f"POST {ITEMS}":
            data = GroceryListItemCreate(**parse_body(event))
            item = service.add_item(user_id, list_id, data)
            return json_response(201, item.model_dump(mode="json"))

        if route == f"POST {TOGGLE}":
            item = service.toggle_item(user_id, list_id, item_id)
            return json_response(200, item.model_dump(mode="json"))

        if route == f"DELETE {ITEM}":
            service.remove_item(user_id, list_id, item_id)
            return no_content()

        return json_response(404, {"message": "Not found"})

    except Exception as e:
        return error_response(e)
