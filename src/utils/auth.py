"""
Authentication helpers for API Gateway events.

Sign-in happens upstream; API Gateway's authorizer verifies the caller and
places the subject on the request context. Handlers only read it.
"""
from typing import Any, Dict, Optional

from aws_lambda_powertools import Logger

logger = Logger()

class AuthorizationError(Exception):
    """Raised when a request carries no authenticated user."""
    pass

def get_user_id(event: Dict[str, Any]) -> Optional[str]:
    """
    Read the authenticated user ID from an API Gateway proxy event.

    Checks requestContext.authorizer.claims.sub (Cognito user pool
    authorizer), then requestContext.authorizer.principalId (Lambda
    authorizer).

    Args:
        event: API Gateway proxy event

    Returns:
        User ID, or None when the request is unauthenticated
    """
    if not isinstance(event, dict):
        return None
    authorizer = (event.get("requestContext") or {}).get("authorizer") or {}

    claims = authorizer.get("claims") or {}
    user_id = claims.get("sub") or authorizer.get("principalId")
    if not user_id:
        logger.debug("No authenticated user on request", extra={
            "has_authorizer": bool(authorizer),
            "path": event.get("path")
        })
        return None
    return str(user_id)

def require_user_id(event: Dict[str, Any]) -> str:
    """
    Read the authenticated user ID or fail.

    Raises:
        AuthorizationError: If the request is unauthenticated
    """
    user_id = get_user_id(event)
    if not user_id:
        raise AuthorizationError("Could not determine user ID")
    return user_id
