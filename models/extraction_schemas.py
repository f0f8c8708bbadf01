"""
Pydantic schemas for structured LLM extraction outputs.
"""

from typing import List
from pydantic import BaseModel, ConfigDict, Field


class IdentifiedEntities(BaseModel):
    """Schema for character and location identification."""
    characters: List[str] = Field(description="Protagonist, antagonist and key supporting character names")
    locations: List[str] = Field(description="Most important and frequently mentioned settings")

    model_config = ConfigDict(extra="forbid")


# Gemini response schema mirroring IdentifiedEntities (OpenAPI subset accepted by the API)
ENTITY_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "characters": {"type": "array", "items": {"type": "string"}},
        "locations": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["characters", "locations"],
}
