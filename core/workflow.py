"""
Workflow construction and field orchestration.
Builds the LangGraph workflow and drives one checklist run through it.
"""

import logging
from typing import Any, Callable, Optional, Sequence, TYPE_CHECKING

from langgraph.graph import StateGraph, START, END

from models import (
    ChecklistGenerationError,
    FieldGenerationState,
    MissingConfigurationError,
    RunState
)
from utils import build_field_prompt
from core.nodes import generate_field_node, has_pending_fields

if TYPE_CHECKING:
    from core.llm import GeminiLLM

logger = logging.getLogger(__name__)

FieldCallback = Callable[[str, str], None]
PromptBuilder = Callable[[str, str, str, Any], str]

# Graph steps beyond one per field
RECURSION_HEADROOM = 5


def create_field_generation_graph() -> Any:
    """Create the field generation graph: a single node looping over the field list."""
    workflow = StateGraph(FieldGenerationState)

    workflow.add_node("generate_field", generate_field_node)

    routes = {
        "generate": "generate_field",
        "done": END
    }
    workflow.add_conditional_edges(START, has_pending_fields, routes)
    workflow.add_conditional_edges("generate_field", has_pending_fields, routes)

    return workflow.compile()


class FieldOrchestrator:
    """
    Generates checklist fields one at a time, in order, stopping at the first failure.

    Each run gets its own RunState handle. The orchestrator keeps a reference
    to the most recent one so callers can observe `is_analyzing` / `last_error`
    without catching the propagated error.
    """

    def __init__(self, llm: Optional['GeminiLLM'], prompt_builder: PromptBuilder = build_field_prompt):
        self.llm = llm
        self.prompt_builder = prompt_builder
        self.graph = create_field_generation_graph()
        self.run_state = RunState()

    @property
    def is_analyzing(self) -> bool:
        return self.run_state.is_analyzing

    @property
    def last_error(self) -> Optional[str]:
        return self.run_state.last_error

    async def generate_all_fields(
        self,
        document_text: str,
        field_paths: Sequence[str],
        contract_text: str,
        field_rules: Any,
        on_field_completed: FieldCallback,
        run_state: Optional[RunState] = None
    ) -> RunState:
        """
        Generate every field in order, calling on_field_completed after each one.

        Args:
            document_text: Source document embedded in every field prompt
            field_paths: Ordered field identifiers; order is generation order
            contract_text: Canon text embedded verbatim in every prompt
            field_rules: Opaque rules handed to the prompt builder
            on_field_completed: Called with (field_path, content) per completed field
            run_state: Optional handle to observe; a fresh one is created otherwise

        Returns:
            The finished RunState

        Raises:
            MissingConfigurationError: No API key; raised before any field
            FieldGenerationError: A field failed; later fields were not attempted
        """
        run_state = run_state if run_state is not None else RunState()
        self.run_state = run_state
        run_state.start()

        if self.llm is None or not self.llm.is_configured:
            error = MissingConfigurationError()
            logger.error(error.message)
            run_state.fail(error.message)
            error.run_state = run_state
            raise error

        paths = list(field_paths)
        initial_state = FieldGenerationState(
            document_text=document_text,
            contract_text=contract_text,
            field_paths=paths,
            field_rules=field_rules,
            llm=self.llm,
            prompt_builder=self.prompt_builder,
            on_field_completed=on_field_completed,
            run_state=run_state
        )

        logger.info("Generating %d checklist fields", len(paths))
        try:
            await self.graph.ainvoke(
                initial_state,
                config={"recursion_limit": len(paths) + RECURSION_HEADROOM}
            )
        except ChecklistGenerationError as e:
            run_state.fail(e.message)
            e.run_state = run_state
            raise
        except Exception as e:
            run_state.fail(str(e) or f"{type(e).__name__} during field generation")
            raise
        else:
            run_state.finish()
        finally:
            # Cancellation and interrupts bypass the handlers above
            if run_state.active:
                field = run_state.current_field or "unknown field"
                run_state.fail(f"Field generation interrupted on field {field}.")

        logger.info("Generated %d checklist fields", len(run_state.completed_fields))
        return run_state
