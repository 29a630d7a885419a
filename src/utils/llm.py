"""
Client for OpenAI-compatible chat completion APIs.

Used for PCOS classification and daily recommendations (OpenAI) and for
meal plans (Minimax, which exposes the same API shape).
"""
import json
import os
import re
from typing import Any, Dict, Optional

from aws_lambda_powertools import Logger
from openai import OpenAI, OpenAIError

from src.services.exceptions import AIServiceError

logger = Logger()

_FENCE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)

def parse_llm_json(raw_text: str) -> Dict[str, Any]:
    """
    Parse a JSON object out of model output.

    Markdown code fences are removed; if the remainder is not valid JSON the
    outermost {...} span is tried.

    Raises:
        ValueError: If no JSON object can be recovered
    """
    cleaned = _FENCE.sub("", raw_text or "").strip()
    try:
        parsed = json.loads(cleaned)
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        try:
            parsed = json.loads(cleaned[start:end + 1])
            if isinstance(parsed, dict):
                return parsed
        except json.JSONDecodeError:
            pass
    raise ValueError("Invalid JSON response from LLM")

class LLMClient:
    """Thin wrapper returning parsed JSON from a chat completion."""

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: Optional[str] = None,
        client: Optional[OpenAI] = None,
        json_mode: bool = True
    ):
        self.model = model
        self.json_mode = json_mode
        self.client = client or OpenAI(api_key=api_key, base_url=base_url)

    @classmethod
    def from_env(
        cls,
        prefix: str = "OPENAI",
        default_model: str = "gpt-4.1-mini",
        default_base_url: Optional[str] = None,
        json_mode: bool = True
    ) -> "LLMClient":
        """
        Build a client from <PREFIX>_API_KEY, <PREFIX>_BASE_URL and <PREFIX>_MODEL.

        Raises:
            AIServiceError: If the API key variable is not set
        """
        api_key = os.environ.get(f"{prefix}_API_KEY")
        if not api_key:
            raise AIServiceError(f"{prefix}_API_KEY environment variable not set")
        return cls(
            api_key=api_key,
            model=os.environ.get(f"{prefix}_MODEL", default_model),
            base_url=os.environ.get(f"{prefix}_BASE_URL") or default_base_url,
            json_mode=json_mode
        )

    def complete_json(
        self,
        user_prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: Optional[int] = None
    ) -> Dict[str, Any]:
        """
        Run a chat completion and parse the reply as a JSON object.

        Args:
            user_prompt: Request text
            system_prompt: Optional system message
            max_tokens: Optional output cap

        Returns:
            Parsed JSON object

        Raises:
            AIServiceError: If the request fails or the reply is not JSON
        """
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        kwargs: Dict[str, Any] = {"model": self.model, "messages": messages}
        if self.json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        if max_tokens:
            kwargs["max_tokens"] = max_tokens

        try:
            response = self.client.chat.completions.create(**kwargs)
            content = response.choices[0].message.content or "{}"
            return parse_llm_json(content)
        except (OpenAIError, ValueError, IndexError) as e:
            logger.warning("LLM completion failed", extra={
                "model": self.model,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise AIServiceError(f"AI completion failed: {str(e)}") from e
