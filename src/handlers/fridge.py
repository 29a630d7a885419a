"""
Lambda handler for fridge photo scans.

The image is either the raw (base64-encoded by API Gateway) request body with
an image Content-Type, or a JSON body {"image": <base64>, "mime_type": ...}.
"""
import base64
import binascii
from datetime import date
from typing import Dict, Tuple

from aws_lambda_powertools import Logger, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from src.services.exceptions import FridgeScanError
from src.services.fridge import FridgeScanService, validate_image
from src.services.profile import ProfileService
from src.utils.http import (
    BadRequestError,
    error_response,
    header,
    json_response,
    parse_body,
    raw_body,
    route_key
)
from src.utils.middleware import require_auth

logger = Logger()
tracer = Tracer()

def read_image(event: Dict) -> Tuple[bytes, str]:
    """
    Extract image bytes and MIME type from the request.

    Raises:
        BadRequestError: If no usable image is present
    """
    content_type = (header(event, "content-type") or "").split(";")[0].strip().lower()
    if content_type.startswith("image/"):
        image, mime_type = raw_body(event), content_type
    else:
        body = parse_body(event)
        encoded = body.get("image") or ""
        if not isinstance(encoded, str):
            raise BadRequestError("image must be a base64 string")
        try:
            image = base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as e:
            raise BadRequestError("image must be base64 encoded") from e
        mime_type = str(body.get("mime_type") or "")

    try:
        validate_image(image, mime_type)
    except ValueError as e:
        raise BadRequestError(str(e)) from e
    return image, mime_type

@logger.inject_lambda_context
@tracer.capture_lambda_handler
@require_auth
def handler(event: Dict, context: LambdaContext, user_id: str) -> Dict:
    """
    Handle POST /api/fridge/scan.

    Returns:
        FridgeScanResult as JSON; 502 when the extractor fails
    """
    try:
        if route_key(event) != "POST /api/fridge/scan":
            return json_response(404, {"message": "Not found"})

        image, mime_type = read_image(event)
        profile = ProfileService().require_profile(user_id)

        try:
            result = FridgeScanService().scan(image, mime_type, profile, date.today())
        except FridgeScanError as e:
            logger.warning("Fridge scan failed", extra={"user_id": user_id, "error": str(e)})
            return json_response(502, {"message": "Failed to scan fridge image"})

        return json_response(200, result.model_dump(mode="json"))

    except Exception as e:
        return error_response(e)
