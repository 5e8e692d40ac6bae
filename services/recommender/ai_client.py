"""
AI Client for tool recommendations

Handles the structured-generation call to Claude. The model is forced to
answer through a single tool whose input schema is the expected output, so
the response arrives as a JSON object rather than free text.
"""

import json
import time
import uuid
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any

import httpx

from core.exceptions import AIProcessingFailedError
from core.logging_config import get_logger, get_llm_logger

logger = get_logger(__name__)
llm_logger = get_llm_logger(__name__)


class StructuredGenerator(ABC):
    """Prompt in, JSON object matching a schema out"""

    @abstractmethod
    async def generate_object(
        self,
        prompt: str,
        schema: Dict[str, Any],
        schema_name: str,
        description: str = "",
    ) -> Dict[str, Any]:
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        pass


class AnthropicStructuredClient(StructuredGenerator):
    """
    Client for structured output from the Claude Messages API.

    Responsibilities:
    - Making Claude API calls with a forced tool choice
    - Managing API authentication
    - Extracting the tool input from the response
    - Mapping transport and protocol failures to AIProcessingFailedError
    """

    def __init__(
        self,
        api_key: Optional[str],
        model: str = "claude-sonnet-4-5",
        base_url: str = "https://api.anthropic.com/v1/messages",
        max_tokens: int = 2000,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.base_url = base_url
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.transport = transport

        if not self.api_key:
            logger.warning("No Anthropic API key provided - recommendations will be refused")

    @classmethod
    def from_settings(cls, settings) -> "AnthropicStructuredClient":
        return cls(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            base_url=settings.anthropic_base_url,
            max_tokens=settings.anthropic_max_tokens,
            timeout=settings.llm_timeout_seconds,
        )

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_model_info(self) -> Dict[str, Any]:
        """Model configuration, without the key itself"""
        return {
            "model": self.model,
            "base_url": self.base_url,
            "max_tokens": self.max_tokens,
            "configured": self.is_configured(),
        }

    def build_payload(
        self,
        prompt: str,
        schema: Dict[str, Any],
        schema_name: str,
        description: str = "",
    ) -> Dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": 0,
            "tools": [
                {
                    "name": schema_name,
                    "description": description or f"Return the result as {schema_name}",
                    "input_schema": schema,
                }
            ],
            "tool_choice": {"type": "tool", "name": schema_name},
            "messages": [
                {
                    "role": "user",
                    "content": prompt
                }
            ]
        }

    @staticmethod
    def extract_tool_input(result: Dict[str, Any], schema_name: str) -> Dict[str, Any]:
        for block in result.get("content") or []:
            if block.get("type") == "tool_use" and block.get("name") == schema_name:
                tool_input = block.get("input")
                if isinstance(tool_input, dict):
                    return tool_input
        raise AIProcessingFailedError(details=f"Response did not contain a {schema_name} tool call")

    async def generate_object(
        self,
        prompt: str,
        schema: Dict[str, Any],
        schema_name: str,
        description: str = "",
    ) -> Dict[str, Any]:
        """Call Claude once and return the forced tool call's input"""
        if not self.api_key:
            raise AIProcessingFailedError(details="Anthropic API key is required for Claude access")

        request_id = str(uuid.uuid4())[:8]
        llm_logger.log_llm_request(model=self.model, prompt=prompt, request_id=request_id)

        headers = {
            "Content-Type": "application/json",
            "x-api-key": self.api_key,
            "anthropic-version": "2023-06-01"
        }
        payload = self.build_payload(prompt, schema, schema_name, description)

        start_time = time.time()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.base_url, headers=headers, json=payload)
                response.raise_for_status()
                result = response.json()
        except httpx.HTTPStatusError as e:
            llm_logger.log_llm_error(model=self.model, error=str(e), request_id=request_id)
            raise AIProcessingFailedError(details=f"HTTP error from Claude API: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            llm_logger.log_llm_error(model=self.model, error=str(e), request_id=request_id)
            raise AIProcessingFailedError(details=f"Failed to reach Claude API: {e}") from e
        except ValueError as e:
            llm_logger.log_llm_error(model=self.model, error=str(e), request_id=request_id)
            raise AIProcessingFailedError(details=f"Invalid JSON from Claude API: {e}") from e

        tool_input = self.extract_tool_input(result, schema_name)

        llm_logger.log_llm_response(
            model=self.model,
            response=json.dumps(tool_input),
            request_id=request_id,
            duration_ms=(time.time() - start_time) * 1000
        )
        return tool_input
