"""
GeminiLLM wrapper using LangChain for free-form and structured outputs.
"""

import json
import logging
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from config import API_KEY, MODEL_NAME, LLM_TIMEOUT, LLM_MAX_RETRIES, FIELD_TEMPERATURE
from models import (
    GenerationRequest,
    MissingConfigurationError,
    StructuredGenerationRequest,
    TextGenerationRequest
)
from utils.response_parser import ResponseParser

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=BaseModel)


class GeminiLLM:
    """Wrapper for Gemini using the LangChain chat interface with structured output support."""

    def __init__(self, api_key: Optional[str] = None, model_name: Optional[str] = None,
                 timeout: Optional[float] = None, max_retries: Optional[int] = None):
        self.api_key = API_KEY if api_key is None else api_key
        self.model_name = model_name or MODEL_NAME
        self.timeout = LLM_TIMEOUT if timeout is None else timeout
        self.max_retries = LLM_MAX_RETRIES if max_retries is None else max_retries
        self._chat_models: Dict[Tuple[Any, ...], BaseChatModel] = {}

        if not self.api_key:
            logger.warning("Gemini API key not set. Generation requests will fail.")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _build_chat_model(self, request: GenerationRequest) -> BaseChatModel:
        """Create a chat model carrying the request's generation options."""
        params: Dict[str, Any] = {
            "model": self.model_name,
            "google_api_key": self.api_key,
            "temperature": request.temperature,
            "timeout": self.timeout,
            "max_retries": self.max_retries,
        }
        if isinstance(request, StructuredGenerationRequest):
            params["response_mime_type"] = request.response_mime_type
            params["response_schema"] = request.response_schema

        return ChatGoogleGenerativeAI(**params)

    def _chat_model_for(self, request: GenerationRequest) -> BaseChatModel:
        """Reuse one chat model per distinct set of generation options."""
        key: Tuple[Any, ...] = (request.kind, request.temperature)
        if isinstance(request, StructuredGenerationRequest):
            key += (request.response_mime_type, json.dumps(request.response_schema, sort_keys=True))

        chat_model = self._chat_models.get(key)
        if chat_model is None:
            chat_model = self._build_chat_model(request)
            self._chat_models[key] = chat_model
        return chat_model

    async def agenerate(self, request: GenerationRequest) -> Union[str, Dict[str, Any]]:
        """Send one request. Text requests return raw text, structured ones a decoded JSON object."""
        if not self.is_configured:
            raise MissingConfigurationError()

        chat_model = self._chat_model_for(request)
        message = await chat_model.ainvoke([HumanMessage(content=request.prompt)])
        text = self.message_text(message)

        if isinstance(request, StructuredGenerationRequest):
            return ResponseParser.parse_json_object(text)
        return text

    async def generate(self, prompt: str, temperature: float = FIELD_TEMPERATURE) -> str:
        """Generate free-form text from prompt."""
        return await self.agenerate(TextGenerationRequest(prompt=prompt, temperature=temperature))

    def with_structured_output(self, schema: Type[T], response_schema: Dict[str, Any]) -> 'StructuredLLM':
        """Return a structured output version that returns Pydantic models."""
        return StructuredLLM(self, schema, response_schema)

    @staticmethod
    def message_text(message: Union[BaseMessage, str]) -> str:
        """Flatten chat message content (plain string or list of parts) into text."""
        content = getattr(message, "content", message)
        if content is None:
            return ""
        if isinstance(content, str):
            return content

        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)


class StructuredLLM:
    """Wrapper for schema-constrained generation validated into Pydantic models."""

    def __init__(self, llm: GeminiLLM, schema: Type[T], response_schema: Dict[str, Any]):
        self.llm = llm
        self.schema = schema
        self.response_schema = response_schema

    async def ainvoke(self, prompt: str, temperature: float = FIELD_TEMPERATURE) -> T:
        """Generate structured output matching the Pydantic schema."""
        request = StructuredGenerationRequest(
            prompt=prompt,
            temperature=temperature,
            response_schema=self.response_schema
        )
        data = await self.llm.agenerate(request)
        return self.schema.model_validate(data)
