"""
End-to-end checklist pipeline: optional entity identification, then field generation,
assembled into a single report.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

from models import ChecklistGenerationError, IdentifiedEntities, RunState
from utils import JSONAssembler, build_field_prompt
from extractors import EntityExtractor
from core.llm import GeminiLLM
from core.workflow import FieldCallback, FieldOrchestrator, PromptBuilder

logger = logging.getLogger(__name__)


async def run_checklist_pipeline(
    document_text: str,
    field_paths: Sequence[str],
    contract_text: str = "",
    field_rules: Any = None,
    *,
    llm: Optional[GeminiLLM] = None,
    identify_entities: bool = False,
    prompt_builder: PromptBuilder = build_field_prompt,
    on_field_completed: Optional[FieldCallback] = None
) -> Dict[str, Any]:
    """
    Main function to run the checklist pipeline on a document.

    Args:
        document_text: The source document to process
        field_paths: Ordered checklist fields to generate (may be empty)
        contract_text: Canon text embedded in every prompt
        field_rules: Rules handed to the prompt builder
        llm: Gemini client; one is built from config when omitted
        identify_entities: Also identify characters and locations first
        prompt_builder: Field prompt builder
        on_field_completed: Extra progress callback per completed field

    Returns:
        Report dictionary (see JSONAssembler.assemble)

    Raises:
        ChecklistGenerationError: Any pipeline failure; `error.report` holds the
            partial report assembled up to the failure
    """
    llm = llm if llm is not None else GeminiLLM()
    paths = list(field_paths)

    completed: List[Tuple[str, str]] = []
    entities: Optional[IdentifiedEntities] = None
    run_state: Optional[RunState] = None

    def record_field(field_path: str, content: str) -> None:
        if on_field_completed is not None:
            on_field_completed(field_path, content)
        completed.append((field_path, content))

    try:
        if identify_entities:
            entities = await EntityExtractor(llm).identify_entities(document_text, contract_text)

        # Runs even for an empty field list so a missing key is always reported
        run_state = RunState()
        orchestrator = FieldOrchestrator(llm, prompt_builder)
        await orchestrator.generate_all_fields(
            document_text, paths, contract_text, field_rules, record_field, run_state=run_state
        )
    except ChecklistGenerationError as e:
        logger.error("Checklist pipeline failed (%s): %s", e.error_code, e.message)
        e.report = JSONAssembler.assemble(paths, completed, run_state or e.run_state, entities)
        raise

    return JSONAssembler.assemble(paths, completed, run_state, entities)
