"""
Run state models: the observable RunState handle and the LangGraph state
carried across field-generation steps.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict


class RunState(BaseModel):
    """Observable outcome of one field-generation run."""
    active: bool = False
    last_error: Optional[str] = None
    completed_fields: List[str] = []
    current_field: Optional[str] = None

    @property
    def is_analyzing(self) -> bool:
        return self.active

    @property
    def error(self) -> Optional[str]:
        return self.last_error

    def start(self) -> None:
        self.active = True
        self.last_error = None
        self.completed_fields = []
        self.current_field = None

    def mark_completed(self, field_path: str) -> None:
        self.completed_fields.append(field_path)
        self.current_field = None

    def fail(self, message: str) -> None:
        self.active = False
        self.last_error = message

    def finish(self) -> None:
        self.active = False
        self.last_error = None
        self.current_field = None


class FieldGenerationState(BaseModel):
    """State maintained across the graph."""
    document_text: str = ""
    contract_text: str = ""
    field_paths: List[str] = []
    field_rules: Any = None
    current_index: int = 0

    # Run collaborators (not serialized)
    llm: Any = None
    prompt_builder: Any = None
    on_field_completed: Any = None
    run_state: Any = None

    model_config = ConfigDict(arbitrary_types_allowed=True)
