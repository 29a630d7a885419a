"""
Lambda handler for today's phase-aware recommendations.
"""
from datetime import date
from typing import Dict

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.services.profile import ProfileService
from src.services.recommendation import RecommendationService
from src.utils.http import error_response, json_response, route_key
from src.utils.middleware import require_auth

logger = Logger()
tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
def handler(event: Dict, context: LambdaContext, user_id: str) -> Dict:
    """
    Handle GET /api/recommendations/today.

    Answers 404 until the user has created a PCOS profile.
    """
    try:
        if route_key(event) != "GET /api/recommendations/today":
            return json_response(404, {"message": "Not found"})

        profile = ProfileService().require_profile(user_id)
        recommendation = RecommendationService().daily(profile, date.today())
        return json_response(200, recommendation.model_dump(mode="json"))

    except Exception as e:
        return error_response(e)
