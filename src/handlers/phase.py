"""
Lambda handler for the current cycle phase.
"""
from datetime import date
from typing import Dict

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.services.phase import summarize_phase
from src.services.profile import ProfileService
from src.utils.http import BadRequestError, error_response, json_response, query_param, route_key
from src.utils.middleware import require_auth

logger = Logger()
tracer = Tracer()

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
def handler(event: Dict, context: LambdaContext, user_id: str) -> Dict:
    """
    Handle GET /api/cycle/phase.

    An optional ?date=YYYY-MM-DD evaluates another day; otherwise today is used.

    Returns:
        PhaseSummary as JSON
    """
    try:
        if route_key(event) != "GET /api/cycle/phase":
            return json_response(404, {"message": "Not found"})

        profile = ProfileService().require_profile(user_id)
        requested = query_param(event, "date")
        if requested is None:
            target = date.today()
        else:
            try:
                target = date.fromisoformat(requested)
            except ValueError as e:
                raise BadRequestError(f"date must be YYYY-MM-DD, got {requested!r}") from e
        summary = summarize_phase(profile.to_cycle_profile(), target)

        logger.info("Phase summary", extra={
            "user_id": user_id,
            "phase": summary.phase.value,
            "display_day": summary.display_day
        })
        return json_response(200, summary.model_dump(mode="json"))

    except Exception as e:
        return error_response(e)
