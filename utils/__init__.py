"""
Utility classes for prompts, response parsing and report assembly.
"""

from utils.response_parser import ResponseParser
from utils.prompt_templates import PromptTemplates
from utils.prompt_builder import build_field_prompt, lookup_field_rules
from utils.json_assembler import JSONAssembler

__all__ = [
    "ResponseParser",
    "PromptTemplates",
    "build_field_prompt",
    "lookup_field_rules",
    "JSONAssembler",
]
