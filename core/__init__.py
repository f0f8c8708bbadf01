"""
Core pipeline components including the Gemini wrapper, graph nodes, workflow and orchestration.
"""

from core.llm import GeminiLLM, StructuredLLM
from core.workflow import FieldOrchestrator, create_field_generation_graph
from core.pipeline import run_checklist_pipeline

__all__ = [
    "GeminiLLM",
    "StructuredLLM",
    "FieldOrchestrator",
    "create_field_generation_graph",
    "run_checklist_pipeline",
]
