"""
Domain exceptions for checklist generation and entity extraction.

Each exception carries a stable `error_code` so callers (the CLI, or any
host application) can branch on the failure kind without parsing messages.
"""

from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from models.state import RunState


class ChecklistGenerationError(Exception):
    """Base class for pipeline errors."""

    error_code = "generation_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.run_state: Optional['RunState'] = None
        self.report: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return self.message


class MissingConfigurationError(ChecklistGenerationError):
    """Raised before any request when no API key is configured."""

    error_code = "missing_configuration"

    def __init__(self, message: str = "Gemini API key is not configured."):
        super().__init__(message)


class EntityExtractionError(ChecklistGenerationError):
    """Normalized failure of the character/location extraction call."""

    error_code = "extraction_failed"

    def __init__(self, message: str = "Failed to identify characters and locations from the document."):
        super().__init__(message)


class FieldGenerationError(ChecklistGenerationError):
    """A single checklist field failed; the run stopped at that field."""

    error_code = "field_generation_failed"

    def __init__(self, field_path: str, message: str, completed_count: int = 0):
        super().__init__(message)
        self.field_path = field_path
        self.completed_count = completed_count


class StructuredOutputError(ChecklistGenerationError):
    """Schema-constrained output could not be decoded into a JSON object."""

    error_code = "invalid_structured_output"
