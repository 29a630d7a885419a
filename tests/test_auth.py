"""
Tests for authentication helpers and middleware.
"""
from unittest.mock import Mock

import pytest

from src.utils.auth import AuthorizationError, get_user_id, require_user_id
from src.utils.middleware import require_auth

def test_user_id_from_cognito_claims(api_event):
    assert get_user_id(api_event("GET", "/api/logs", user_id="abc")) == "abc"

def test_user_id_from_lambda_authorizer():
    event = {"requestContext": {"authorizer": {"principalId": "principal-1"}}}
    assert get_user_id(event) == "principal-1"

@pytest.mark.parametrize("event", [
    {},
    {"requestContext": {}},
    {"requestContext": {"authorizer": {"claims": {}}}},
    None,
])
def test_missing_user_id(event):
    assert get_user_id(event) is None

def test_require_user_id_raises():
    with pytest.raises(AuthorizationError):
        require_user_id({})

def test_require_auth_passes_user_id(api_event):
    inner = Mock(return_value={"statusCode": 200})
    wrapped = require_auth(inner)
    event = api_event("GET", "/api/logs")

    response = wrapped(event, "context")

    assert response == {"statusCode": 200}
    inner.assert_called_once_with(event, "context", "user-123")

def test_require_auth_rejects_anonymous(api_event):
    inner = Mock()
    wrapped = require_auth(inner)

    response = wrapped(api_event("GET", "/api/logs", user_id=None), None)

    assert response["statusCode"] == 401
    inner.assert_not_called()
