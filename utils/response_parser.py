"""
ResponseParser for parsing LLM responses into structured data.
"""

import json
import re
from typing import Any, Dict

from models.errors import StructuredOutputError


class ResponseParser:
    """Parses LLM responses into structured data."""

    FENCE_PATTERN = re.compile(r'^```(?:json)?\s*(.*?)\s*```$', re.DOTALL)

    @staticmethod
    def strip_code_fence(response: str) -> str:
        """Remove a surrounding markdown code block if present."""
        response = response.strip()
        match = ResponseParser.FENCE_PATTERN.match(response)
        return match.group(1) if match else response

    @staticmethod
    def parse_json_object(response: str) -> Dict[str, Any]:
        """Decode a JSON object; anything else is a structured output error."""
        text = ResponseParser.strip_code_fence(response or "")
        if not text:
            raise StructuredOutputError("Empty response where a JSON object was expected")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise StructuredOutputError(f"Response is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise StructuredOutputError(f"Expected a JSON object, got {type(data).__name__}")
        return data
