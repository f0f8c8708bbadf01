"""
PromptTemplates for centralized prompt templates for all generation tasks.
"""

from config import MAX_ENTITY_SOURCE_CHARS


class PromptTemplates:
    """Centralized prompt templates for entity extraction and field generation."""

    @staticmethod
    def truncate_source(document_text: str, limit: int = MAX_ENTITY_SOURCE_CHARS) -> str:
        return document_text[:limit]

    @staticmethod
    def entity_identification(document_text: str, contract_text: str) -> str:
        source = PromptTemplates.truncate_source(document_text)
        return f"""
{contract_text}

**TASK:**
Analyze the provided source document and identify the primary characters and locations.
- For characters, list the names of the main protagonist, antagonist, and key supporting characters.
- For locations, list the names of the most important and frequently mentioned settings.
- Return ONLY a JSON object with two keys: "characters" and "locations", each containing an array of strings.

**SOURCE OF TRUTH (Hard Canon):**
---
{source}
---

Respond ONLY with the specified JSON object.
"""

    @staticmethod
    def field_generation(field_path: str, document_text: str, contract_text: str, rules_text: str) -> str:
        rules_block = rules_text if rules_text else "No field-specific rules. Follow the contract."
        return f"""
{contract_text}

**TASK:**
Write the content for the checklist field "{field_path}".
- Base every statement on the source document below; do not invent facts it does not support.
- Follow the field rules exactly.
- Return ONLY the field content, with no headings, labels or commentary.

**FIELD RULES ({field_path}):**
{rules_block}

**SOURCE OF TRUTH (Hard Canon):**
---
{document_text}
---

Content for "{field_path}":
"""
