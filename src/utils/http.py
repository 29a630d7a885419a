"""
Helpers for API Gateway proxy requests and responses.
"""
import base64
import binascii
import json
from typing import Any, Dict, Optional

from pydantic import ValidationError

from src.services.exceptions import (
    GroceryListNotFoundError,
    InvalidProfileError,
    ProfileNotFoundError
)
from src.utils.logging import logger as error_logger

def json_response(status_code: int, body: Any) -> Dict[str, Any]:
    """Build an API Gateway proxy response with a JSON body."""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str)
    }

class BadRequestError(ValueError):
    """Raised when a request body or parameter cannot be used."""
    pass

def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Decode a JSON request body; an empty body is an empty dict.

    Raises:
        BadRequestError: If the body is not a JSON object
    """
    body = event.get("body")
    if body is None or body == "":
        return {}
    if isinstance(body, dict):
        return body
    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        parsed = json.loads(body)
    except (binascii.Error, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise BadRequestError(f"Invalid JSON body: {str(e)}") from e
    if not isinstance(parsed, dict):
        raise BadRequestError("Request body must be a JSON object")
    return parsed

def raw_body(event: Dict[str, Any]) -> bytes:
    """Request body as bytes, base64-decoded when API Gateway encoded it."""
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body)
        except (ValueError, TypeError) as e:
            raise BadRequestError("Body is not valid base64") from e
    return body.encode("utf-8") if isinstance(body, str) else bytes(body)

def query_param(event: Dict[str, Any], name: str, default: Optional[str] = None) -> Optional[str]:
    params = event.get("queryStringParameters") or {}
    value = params.get(name)
    return value if value not in (None, "") else default

def path_param(event: Dict[str, Any], name: str) -> Optional[str]:
    return (event.get("pathParameters") or {}).get(name)

def header(event: Dict[str, Any], name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    headers = event.get("headers") or {}
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None

def route_key(event: Dict[str, Any]) -> str:
    """'<METHOD> <resource>' for the matched API Gateway route."""
    method = event.get("httpMethod", "GET").upper()
    resource = event.get("resource") or event.get("path") or ""
    return f"{method} {resource}"

def error_response(error: Exception) -> Dict[str, Any]:
    """
    Map an exception raised while handling a request to a response.

    Unexpected errors are logged with their trace and answered with 500.
    """
    if isinstance(error, ValidationError):
        return json_response(400, {
            "message": "Invalid request",
            "errors": json.loads(error.json(include_url=False))
        })
    if isinstance(error, BadRequestError):
        return json_response(400, {"message": str(error)})
    if isinstance(error, (ProfileNotFoundError, GroceryListNotFoundError)):
        return json_response(404, {"message": str(error)})
    if isinstance(error, InvalidProfileError):
        return json_response(422, {"message": str(error)})

    error_logger.exception("Unhandled error processing request", exc_info=(type(error), error, error.__traceback__), extra={
        "error": str(error),
        "error_type": error.__class__.__name__
    })
    return json_response(500, {"message": "Internal server error"})

def no_content() -> Dict[str, Any]:
    return {"statusCode": 204, "headers": {"Content-Type": "application/json"}, "body": ""}
