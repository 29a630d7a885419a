"""
Middleware functions for request processing.
"""
from functools import wraps
from typing import Any, Callable, Dict

from aws_lambda_powertools import Logger
from src.utils.auth import AuthorizationError, require_user_id
from src.utils.http import json_response

logger = Logger()

def require_auth(f: Callable) -> Callable:
    """
    Decorator to require an authenticated user for handlers.

    The wrapped handler is called as f(event, context, user_id). Requests
    without a user get a 401 response and never reach the handler.

    Args:
        f: Handler function to wrap

    Returns:
        Wrapped handler function
    """
    @wraps(f)
    def wrapped(event: Dict[str, Any], context: Any = None, *args: Any, **kwargs: Any) -> Dict[str, Any]:
        try:
            user_id = require_user_id(event)
        except AuthorizationError as e:
            logger.warning("Unauthenticated request", extra={
                "path": event.get("path") if isinstance(event, dict) else None,
                "error": str(e)
            })
            return json_response(401, {"message": "Unauthorized"})
        return f(event, context, user_id, *args, **kwargs)

    return wrapped
