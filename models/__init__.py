"""
Pydantic models for structured data representation.
Contains all data models and error types used throughout the checklist pipeline.
"""

from models.extraction_schemas import IdentifiedEntities, ENTITY_RESPONSE_SCHEMA
from models.generation import (
    GenerationRequest,
    StructuredGenerationRequest,
    TextGenerationRequest
)
from models.state import FieldGenerationState, RunState
from models.errors import (
    ChecklistGenerationError,
    EntityExtractionError,
    FieldGenerationError,
    MissingConfigurationError,
    StructuredOutputError
)


__all__ = [
    "IdentifiedEntities",
    "ENTITY_RESPONSE_SCHEMA",
    "GenerationRequest",
    "StructuredGenerationRequest",
    "TextGenerationRequest",
    "FieldGenerationState",
    "RunState",
    "ChecklistGenerationError",
    "EntityExtractionError",
    "FieldGenerationError",
    "MissingConfigurationError",
    "StructuredOutputError"
]
