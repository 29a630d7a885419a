"""
bem.ai client used to extract grocery items from fridge photos.
"""
import base64
import os
import time
from typing import Any, Callable, Dict, List, Optional

import requests
from aws_lambda_powertools import Logger

from src.models.grocery import ScannedGrocery
from src.models.food import FoodCategory
from src.services.exceptions import FridgeScanError

logger = Logger()

BEM_API_BASE = "https://api.bem.ai"
FUNCTION_NAME = "fridge-grocery-extractor"
WORKFLOW_NAME = "fridge-scanner"
REQUEST_TIMEOUT = 30

FRIDGE_CONTENTS_SCHEMA = {
    "type": "object",
    "required": ["items"],
    "properties": {
        "items": {
            "type": "array",
            "description": "All grocery/food items identified in the fridge or pantry image",
            "items": {
                "type": "object",
                "required": ["name", "category", "quantity"],
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Specific name of the food item (e.g. 'Greek Yogurt', 'Wild Salmon', 'Spinach')."
                    },
                    "category": {
                        "type": "string",
                        "enum": [category.value for category in FoodCategory],
                        "description": "Food category"
                    },
                    "quantity": {
                        "type": "string",
                        "description": "Estimated quantity visible (e.g. '1 bag', '3 pieces', '~500g')"
                    }
                }
            }
        }
    }
}

def input_type_for(mime_type: str) -> str:
    """Map an image MIME type to the extractor's input type, defaulting to jpeg."""
    mime_type = (mime_type or "").lower()
    for kind in ("png", "webp", "heic", "heif"):
        if kind in mime_type:
            return kind
    return "jpeg"

class BemClient:
    """Client for the bem.ai functions, workflows and calls API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = BEM_API_BASE,
        max_attempts: int = 30,
        poll_interval: float = 2.0,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.max_attempts = max_attempts
        self.poll_interval = poll_interval
        self.sleep = sleep
        self._setup_done = False

    @classmethod
    def from_env(cls) -> "BemClient":
        api_key = os.environ.get("BEM_AI_API_KEY")
        if not api_key:
            raise FridgeScanError("BEM_AI_API_KEY is not configured")
        return cls(api_key)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-api-key": self.api_key
        }

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> requests.Response:
        try:
            return requests.request(
                method,
                f"{self.base_url}{path}",
                headers=self.headers,
                json=payload,
                timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as e:
            raise FridgeScanError(f"bem.ai request failed: {str(e)}") from e

    def _json(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = self._request(method, path, payload)
        if not response.ok:
            raise FridgeScanError(f"bem.ai API error ({response.status_code}): {response.text}")
        return response.json()

    def _ensure(self, check_path: str, create_path: str, payload: Dict[str, Any]) -> None:
        if self._request("GET", check_path).ok:
            return
        response = self._request("POST", create_path, payload)
        # 409 means another container created it first
        if not response.ok and response.status_code != 409:
            raise FridgeScanError(
                f"Failed to create {create_path} ({response.status_code}): {response.text}"
            )
        logger.info("Created bem.ai resource", extra={"path": create_path, "status": response.status_code})

    def ensure_setup(self) -> None:
        """Create the extraction function and workflow if they do not exist yet."""
        if self._setup_done:
            return
        self._ensure(f"/v2/functions/{FUNCTION_NAME}", "/v2/functions", {
            "functionName": FUNCTION_NAME,
            "type": "transform",
            "displayName": "Fridge Grocery Extractor",
            "outputSchemaName": "FridgeContents",
            "outputSchema": FRIDGE_CONTENTS_SCHEMA
        })
        self._ensure(f"/v2/workflows/{WORKFLOW_NAME}", "/v2/workflows", {
            "name": WORKFLOW_NAME,
            "displayName": "Fridge Scanner Workflow",
            "tags": ["fridge", "grocery", "pcos"],
            "mainFunction": {"name": FUNCTION_NAME}
        })
        self._setup_done = True

    def submit(self, image: bytes, mime_type: str) -> str:
        """
        Submit an image for extraction.

        Returns:
            The call ID to poll
        """
        response = self._json("POST", "/v2/calls", {
            "calls": [{
                "workflowName": WORKFLOW_NAME,
                "callReferenceID": f"fridge-{int(time.time() * 1000)}",
                "input": {
                    "singleFile": {
                        "inputType": input_type_for(mime_type),
                        "inputContent": base64.b64encode(image).decode("ascii")
                    }
                }
            }]
        })
        calls = response.get("calls") or [{}]
        call_id = calls[0].get("callID")
        if not call_id:
            raise FridgeScanError("Failed to create bem.ai processing call")
        return call_id

    def wait_for_items(self, call_id: str) -> List[ScannedGrocery]:
        """
        Poll a call until it completes.

        Raises:
            FridgeScanError: If the call fails or does not finish in time
        """
        for attempt in range(self.max_attempts):
            self.sleep(self.poll_interval)
            call = self._json("GET", f"/v2/calls/{call_id}").get("call")
            if not call:
                logger.warning("Unexpected bem.ai call response", extra={"call_id": call_id, "attempt": attempt})
                continue

            status = call.get("status")
            if status == "completed":
                function_calls = call.get("functionCalls") or [{}]
                items = (function_calls[0].get("transformedContent") or {}).get("items")
                if not isinstance(items, list):
                    logger.warning("bem.ai call completed without items", extra={"call_id": call_id})
                    return []
                return [
                    ScannedGrocery(
                        name=str(item.get("name") or "Unknown Item"),
                        category=FoodCategory.coerce(item.get("category")),
                        quantity=str(item.get("quantity") or "1")
                    )
                    for item in items if isinstance(item, dict)
                ]
            if status in ("failed", "error"):
                message = call.get("error") or call.get("message") or "Unknown error"
                raise FridgeScanError(f"bem.ai processing failed: {message}")

        raise FridgeScanError(
            f"bem.ai processing timed out after {self.max_attempts * self.poll_interval:g} seconds"
        )

    def scan_fridge(self, image: bytes, mime_type: str) -> List[ScannedGrocery]:
        """
        Extract grocery items from a fridge or pantry photo.

        Args:
            image: Raw image bytes
            mime_type: Image MIME type

        Returns:
            Items identified in the image
        """
        self.ensure_setup()
        call_id = self.submit(image, mime_type)
        logger.info("Submitted fridge scan", extra={"call_id": call_id, "bytes": len(image)})
        return self.wait_for_items(call_id)
