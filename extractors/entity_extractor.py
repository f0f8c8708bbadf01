"""
EntityExtractor for identifying characters and locations using structured outputs.
"""

import logging
from typing import TYPE_CHECKING

from config import EXTRACTION_TEMPERATURE
from models import (
    ENTITY_RESPONSE_SCHEMA,
    EntityExtractionError,
    IdentifiedEntities,
    MissingConfigurationError
)
from utils import PromptTemplates

if TYPE_CHECKING:
    from core import GeminiLLM

logger = logging.getLogger(__name__)


class EntityExtractor:
    """Handles character and location identification with one structured request."""

    def __init__(self, llm: 'GeminiLLM'):
        self.llm = llm

    async def identify_entities(self, document_text: str, contract_text: str) -> IdentifiedEntities:
        """Identify main characters and locations. The document is truncated, the contract is not."""
        if self.llm is None or not self.llm.is_configured:
            raise MissingConfigurationError()

        prompt = PromptTemplates.entity_identification(document_text, contract_text)
        structured_llm = self.llm.with_structured_output(IdentifiedEntities, ENTITY_RESPONSE_SCHEMA)

        try:
            result = await structured_llm.ainvoke(prompt, temperature=EXTRACTION_TEMPERATURE)
        except Exception as e:
            logger.exception("Error identifying entities: %s", e)
            raise EntityExtractionError() from e

        logger.info(
            "Identified %d characters and %d locations",
            len(result.characters), len(result.locations)
        )
        return result
