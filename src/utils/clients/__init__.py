"""
Centralized client initialization module.

This module provides lazy-loaded shared clients for the application.
"""
from aws_lambda_powertools import Logger

from src.utils.dynamo import get_dynamo
from src.utils.llm import LLMClient
from src.utils.bem import BemClient
from src.services.catalog import get_catalog

logger = Logger()

# Initialize shared clients (lazy loading)
_llm = None
_meal_plan_llm = None
_bem = None

def get_llm() -> LLMClient:
    """Get or create the OpenAI client used for analysis and daily advice."""
    global _llm
    if _llm is None:
        _llm = LLMClient.from_env("OPENAI", default_model="gpt-4.1-mini")
    return _llm

def get_meal_plan_llm() -> LLMClient:
    """Get or create the Minimax client used for weekly meal plans."""
    global _meal_plan_llm
    if _meal_plan_llm is None:
        _meal_plan_llm = LLMClient.from_env(
            "MINIMAX",
            default_model="MiniMax-Text-01",
            default_base_url="https://api.minimax.chat/v1",
            json_mode=False
        )
    return _meal_plan_llm

def get_bem() -> BemClient:
    """Get or create the fridge scanning client."""
    global _bem
    if _bem is None:
        _bem = BemClient.from_env()
    return _bem

__all__ = ["get_dynamo", "get_llm", "get_meal_plan_llm", "get_bem", "get_catalog"]
