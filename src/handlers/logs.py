"""
Lambda handler for daily symptom logs.

Routes:
    GET  /api/logs
    POST /api/logs
    POST /api/logs/voice
"""
from datetime import date
from typing import Dict

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.models.daily_log import DailyLogInput, VoiceLogRequest
from src.services.daily_log import DailyLogService
from src.services.profile import ProfileService
from src.utils.http import error_response, json_response, parse_body, route_key
from src.utils.middleware import require_auth
from src.utils.transcript_parser import parse_transcript

logger = Logger()
tracer = Tracer()

def _create(user_id: str, data: DailyLogInput) -> Dict:
    profile = None
    if data.cycle_day is None:
        profile = ProfileService().get_profile(user_id)
    log = DailyLogService().create_log(user_id, data, profile)
    return log.model_dump(mode="json")

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
def handler(event: Dict, context: LambdaContext, user_id: str) -> Dict:
    """
    Handle daily log requests.

    Voice logs carry an already transcribed text; symptoms and mood are
    extracted from it and the log is dated today.
    """
    try:
        route = route_key(event)

        if route == "GET /api/logs":
            logs = DailyLogService().list_logs(user_id)
            return json_response(200, [log.model_dump(mode="json") for log in logs])

        if route == "POST /api/logs":
            data = DailyLogInput(**parse_body(event))
            return json_response(201, _create(user_id, data))

        if route == "POST /api/logs/voice":
            request = VoiceLogRequest(**parse_body(event))
            parsed = parse_transcript(request.text)
            data = DailyLogInput(
                date=date.today(),
                symptoms=parsed.symptoms,
                mood=parsed.mood or None,
                notes=parsed.notes
            )
            logger.info("Parsed voice log", extra={
                "user_id": user_id,
                "symptom_count": len(parsed.symptoms),
                "mood": parsed.mood
            })
            return json_response(201, _create(user_id, data))

        return json_response(404, {"message": "Not found"})

    except Exception as e:
        return error_response(e)
