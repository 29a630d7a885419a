"""
Pytest configuration and shared fixtures.
"""
import os

os.environ.setdefault("TRACKER_TABLE_NAME", "TrackerTable-test")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "pcos_tracker")

import json
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Optional
from unittest.mock import Mock

import pytest

from src.models.food import FoodItem
from src.models.profile import CycleProfile, PcosProfile, PcosType
from src.services.catalog import GroceryCatalog

@pytest.fixture
def cycle_profile() -> CycleProfile:
    """28-day cycle starting 2024-01-01 with no recorded period end."""
    return CycleProfile(last_period_start=date(2024, 1, 1), cycle_length=28)

@pytest.fixture
def pcos_profile() -> PcosProfile:
    """Stored profile for an insulin resistant user."""
    return PcosProfile(
        user_id="user-123",
        pcos_type=PcosType.INSULIN_RESISTANT,
        cycle_length=28,
        last_period_date=date(2024, 1, 1),
        symptoms=["Fatigue", "Acne"]
    )

@pytest.fixture
def catalog() -> GroceryCatalog:
    """Fresh seeded catalog."""
    return GroceryCatalog()

@pytest.fixture
def white_bread() -> FoodItem:
    return FoodItem(
        name="White Bread",
        category="grain",
        pcos_suitability={"insulin_resistant": "avoid"},
        cycle_phase_suitability={"luteal": "recommended"}
    )

@pytest.fixture
def mock_dynamo() -> Mock:
    """DynamoDB client double with empty results."""
    dynamo = Mock()
    dynamo.get_item.return_value = None
    dynamo.query_items.return_value = []
    return dynamo

@pytest.fixture
def mock_llm() -> Mock:
    return Mock()

@dataclass
class FakeLambdaContext:
    function_name: str = "test-function"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test-function"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"

@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    return FakeLambdaContext()

@pytest.fixture
def api_event():
    """Factory for API Gateway proxy events from an authenticated user."""
    def _make(
        method: str,
        resource: str,
        body: Optional[Any] = None,
        user_id: Optional[str] = "user-123",
        query: Optional[Dict[str, str]] = None,
        path_params: Optional[Dict[str, str]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        authorizer = {"claims": {"sub": user_id}} if user_id else {}
        return {
            "httpMethod": method,
            "resource": resource,
            "path": resource,
            "headers": headers or {"Content-Type": "application/json"},
            "queryStringParameters": query,
            "pathParameters": path_params,
            "requestContext": {"authorizer": authorizer},
            "body": json.dumps(body) if isinstance(body, (dict, list)) else body,
            "isBase64Encoded": False
        }
    return _make
