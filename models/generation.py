"""
Generation request variants accepted by the Gemini client.

Free-form text requests never fail to parse; structured requests carry a
response schema and their output must decode as a JSON object.
"""

from typing import Any, Dict, Literal, Union
from pydantic import BaseModel, Field

from config import FIELD_TEMPERATURE, JSON_MIME_TYPE


class TextGenerationRequest(BaseModel):
    """Free-form prose request."""
    kind: Literal["text"] = "text"
    prompt: str
    temperature: float = Field(default=FIELD_TEMPERATURE, ge=0.0, le=2.0)


class StructuredGenerationRequest(BaseModel):
    """Schema-constrained request decoded as JSON data."""
    kind: Literal["structured"] = "structured"
    prompt: str
    temperature: float = Field(default=FIELD_TEMPERATURE, ge=0.0, le=2.0)
    response_schema: Dict[str, Any]
    response_mime_type: str = JSON_MIME_TYPE


GenerationRequest = Union[TextGenerationRequest, StructuredGenerationRequest]
