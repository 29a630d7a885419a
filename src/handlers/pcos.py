"""
Lambda handler for PCOS analysis and profile management.

Routes:
    POST /api/pcos/analyze
    GET  /api/pcos/profile
    POST /api/pcos/profile
"""
from typing import Dict

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.profile import PcosProfileInput
from src.models.recommendation import PcosAnalysisRequest
from src.services.analysis import PcosAnalysisService
from src.services.exceptions import AIServiceError
from src.services.profile import ProfileService
from src.utils.http import error_response, json_response, parse_body, route_key
from src.utils.logging import log_exception
from src.utils.middleware import require_auth

logger = Logger()
tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
def handler(event: Dict, context: LambdaContext, user_id: str) -> Dict:
    """
    Handle PCOS analysis and profile requests.

    Args:
        event: API Gateway Lambda proxy event
        context: Lambda context
        user_id: Authenticated user ID

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        route = route_key(event)

        if route == "POST /api/pcos/analyze":
            request = PcosAnalysisRequest(**parse_body(event))
            try:
                result = PcosAnalysisService().analyze(request)
            except AIServiceError:
                log_exception(logger, "PCOS analysis failed", extra={"user_id": user_id})
                return json_response(500, {"message": "Failed to analyze data"})
            return json_response(200, result.model_dump(mode="json"))

        if route == "GET /api/pcos/profile":
            profile = ProfileService().get_profile(user_id)
            if profile is None:
                return json_response(404, {"message": "Profile not found"})
            return json_response(200, profile.model_dump(mode="json"))

        if route == "POST /api/pcos/profile":
            data = PcosProfileInput(**parse_body(event))
            profile = ProfileService().save_profile(user_id, data)
            return json_response(200, profile.model_dump(mode="json"))

        return json_response(404, {"message": "Not found"})

    except Exception as e:
        return error_response(e)
