"""
Lambda handler for grocery search rated for the user.

Route:
    GET /api/groceries/search?query=&suitability=&diet=
"""
from datetime import date
from typing import Dict

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.food import SuitabilityRating
from src.services.catalog import get_catalog
from src.services.phase import compute_phase
from src.services.profile import ProfileService
from src.services.suitability import filter_by_suitability, rate_items, to_rated_items
from src.utils.http import (
    BadRequestError,
    error_response,
    json_response,
    query_param,
    route_key
)
from src.utils.middleware import require_auth

logger = Logger()
tracer = Tracer()

SUITABILITY_FILTERS = {"all"} | {rating.value for rating in SuitabilityRating}

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
def handler(event: Dict, context: LambdaContext, user_id: str) -> Dict:
    """
    Search the catalog and rate results for the user's PCOS type and phase.

    Results are ranked recommended, neutral, avoid.
    """
    try:
        if route_key(event) != "GET /api/groceries/search":
            return json_response(404, {"message": "Not found"})

        suitability = query_param(event, "suitability", "all")
        if suitability not in SUITABILITY_FILTERS:
            raise BadRequestError(f"suitability must be one of {sorted(SUITABILITY_FILTERS)}")

        profile = ProfileService().require_profile(user_id)
        _, phase = compute_phase(profile.to_cycle_profile(), date.today())

        items = get_catalog().search(
            query=query_param(event, "query"),
            dietary_tag=query_param(event, "diet")
        )
        rated = filter_by_suitability(
            to_rated_items(rate_items(items, profile.pcos_type, phase)),
            suitability
        )

        return json_response(200, {
            "phase": phase.value,
            "pcos_type": profile.pcos_type.value,
            "items": [
                {**item.model_dump(mode="json"), "is_recommended": item.is_recommended}
                for item in rated
            ]
        })

    except Exception as e:
        return error_response(e)
