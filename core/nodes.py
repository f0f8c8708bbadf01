"""
Graph nodes for the field generation workflow.
One node generates one checklist field; the conditional edge loops it over the field list.
"""

import logging

from config import FIELD_TEMPERATURE
from models import FieldGenerationError, FieldGenerationState

logger = logging.getLogger(__name__)


def field_error_message(field_path: str, error: Exception) -> str:
    """Failure message naming the field, with the provider's text when it has one."""
    detail = str(error).strip()
    if detail:
        return f"Error on field {field_path}: {detail}"
    return f"Error on field {field_path}."


async def generate_field_node(state: FieldGenerationState) -> dict:
    """Generate the next pending field and report it before moving on."""
    index = state.current_index
    field_path = state.field_paths[index]
    logger.info("Generating field %d/%d: %s", index + 1, len(state.field_paths), field_path)

    if state.run_state is not None:
        state.run_state.current_field = field_path

    try:
        prompt = state.prompt_builder(field_path, state.document_text, state.contract_text, state.field_rules)
        content = await state.llm.generate(prompt, temperature=FIELD_TEMPERATURE)
        content = (content or "").strip()
        state.on_field_completed(field_path, content)
    except Exception as e:
        logger.exception("Error processing field %s", field_path)
        raise FieldGenerationError(field_path, field_error_message(field_path, e), completed_count=index) from e

    # Counted only once the callback has accepted the content
    if state.run_state is not None:
        state.run_state.mark_completed(field_path)

    return {"current_index": index + 1}


def has_pending_fields(state: FieldGenerationState) -> str:
    """Conditional edge: keep generating until every field is done."""
    if state.current_index < len(state.field_paths):
        return "generate"
    return "done"
