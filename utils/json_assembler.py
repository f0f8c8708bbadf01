"""
JSONAssembler for assembling the final checklist report.
"""

from typing import Any, Dict, List, Optional, Tuple

from models import IdentifiedEntities, RunState


class JSONAssembler:
    """Assembles final hierarchical JSON output."""

    @staticmethod
    def assemble(field_paths: List[str], completed: List[Tuple[str, str]],
                 run_state: Optional[RunState] = None,
                 entities: Optional[IdentifiedEntities] = None) -> Dict[str, Any]:
        """Assemble generated field content, entities and run outcome into one report."""

        if run_state is None:
            status = "not_run"
            last_error = None
        elif run_state.last_error:
            status = "failed"
            last_error = run_state.last_error
        elif run_state.active:
            status = "running"
            last_error = None
        else:
            status = "completed"
            last_error = None

        completed_paths = {path for path, _ in completed}

        output = {
            "summary": {
                "total_fields": len(field_paths),
                "completed_fields": len(completed),
                "pending_fields": [p for p in field_paths if p not in completed_paths],
                "status": status,
                "last_error": last_error
            },
            "fields": [{"field": path, "content": content} for path, content in completed]
        }

        if entities is not None:
            output["entities"] = entities.model_dump()
            output["summary"]["total_characters"] = len(entities.characters)
            output["summary"]["total_locations"] = len(entities.locations)

        return output
