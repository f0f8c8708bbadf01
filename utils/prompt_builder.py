"""
Default field prompt builder.

Any callable with the signature
``(field_path, document_text, contract_text, field_rules) -> str``
can replace `build_field_prompt`; the orchestrator never inspects the rules.
"""

import json
import re
from typing import Any, List, Mapping, Optional

from utils.prompt_templates import PromptTemplates

WILDCARD_RULE_KEY = "*"


def _parent_paths(field_path: str) -> List[str]:
    """'a.b.c' -> ['a.b.c', 'a.b', 'a'] (also splits on '/')."""
    parts = [p for p in re.split(r'[./]', field_path) if p]
    candidates = [field_path]
    for end in range(len(parts) - 1, 0, -1):
        candidates.append('.'.join(parts[:end]))
        candidates.append('/'.join(parts[:end]))
    return list(dict.fromkeys(candidates))


def lookup_field_rules(field_path: str, field_rules: Any) -> Optional[Any]:
    """Find the rules that apply to a field, falling back to parents then the wildcard."""
    if not isinstance(field_rules, Mapping):
        return None

    for candidate in _parent_paths(field_path):
        if candidate in field_rules:
            return field_rules[candidate]

    return field_rules.get(WILDCARD_RULE_KEY)


def format_rules(rules: Any) -> str:
    if rules is None:
        return ""
    if isinstance(rules, str):
        return rules.strip()
    if isinstance(rules, (list, tuple)):
        return "\n".join(f"- {rule}" for rule in rules)
    return json.dumps(rules, indent=2, ensure_ascii=False, default=str)


def build_field_prompt(field_path: str, document_text: str, contract_text: str, field_rules: Any) -> str:
    rules = lookup_field_rules(field_path, field_rules)
    return PromptTemplates.field_generation(field_path, document_text, contract_text, format_rules(rules))
