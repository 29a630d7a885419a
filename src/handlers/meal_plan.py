"""
Lambda handler for weekly meal plan generation.
"""
from datetime import date
from typing import Dict

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.meal_plan import MealPlanRequest
from src.services.meal_plan import MealPlanService
from src.services.profile import ProfileService
from src.utils.http import error_response, json_response, parse_body, route_key
from src.utils.middleware import require_auth

logger = Logger()
tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
def handler(event: Dict, context: LambdaContext, user_id: str) -> Dict:
    """
    Handle POST /api/meal-plan/generate.

    Body (optional): {"preferences": [...], "allergies": [...]}
    """
    try:
        if route_key(event) != "POST /api/meal-plan/generate":
            return json_response(404, {"message": "Not found"})

        request = MealPlanRequest(**parse_body(event))
        profile = ProfileService().require_profile(user_id)
        plan = MealPlanService().generate(profile, request, date.today())
        return json_response(200, plan.model_dump(mode="json"))

    except Exception as e:
        return error_response(e)
