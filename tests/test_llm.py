"""Tests for the GeminiLLM client wrapper and its request variants."""

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from core import GeminiLLM
from models import (
    IdentifiedEntities,
    MissingConfigurationError,
    StructuredGenerationRequest,
    StructuredOutputError,
    TextGenerationRequest
)


SCHEMA = {"type": "object", "properties": {"name": {"type": "string"}}, "required": ["name"]}


class TestConfiguration:

    def test_configured_with_key(self):
        assert GeminiLLM(api_key="k").is_configured is True

    def test_empty_key_is_not_configured(self):
        assert GeminiLLM(api_key="").is_configured is False

    def test_warns_without_key(self, caplog):
        GeminiLLM(api_key="")
        assert "API key not set" in caplog.text

    @pytest.mark.asyncio
    async def test_request_without_key_fails_before_model_is_built(self, monkeypatch):
        llm = GeminiLLM(api_key="")
        built = []
        monkeypatch.setattr(llm, "_build_chat_model", lambda request: built.append(request))

        with pytest.raises(MissingConfigurationError):
            await llm.generate("hello")

        assert built == []


class TestTextRequests:

    @pytest.mark.asyncio
    async def test_generate_returns_raw_text(self, make_gemini):
        llm, chat_model, requests = make_gemini(reply="  Raw prose.\n")

        text = await llm.generate("Write it.", temperature=0.2)

        assert text == "  Raw prose.\n"
        assert isinstance(requests[0], TextGenerationRequest)
        assert requests[0].temperature == 0.2

    @pytest.mark.asyncio
    async def test_single_user_message(self, make_gemini):
        llm, chat_model, _ = make_gemini(reply="ok")

        await llm.generate("The prompt.")

        (messages,) = chat_model.messages
        assert len(messages) == 1
        assert isinstance(messages[0], HumanMessage)
        assert messages[0].content == "The prompt."

    @pytest.mark.asyncio
    async def test_provider_error_propagates(self, make_gemini):
        llm, _, _ = make_gemini(error=RuntimeError("quota"))

        with pytest.raises(RuntimeError, match="quota"):
            await llm.generate("x")

    @pytest.mark.asyncio
    async def test_langchain_fake_chat_model(self, monkeypatch):
        llm = GeminiLLM(api_key="test-key")
        fake = FakeListChatModel(responses=["first", "second"])
        monkeypatch.setattr(llm, "_build_chat_model", lambda request: fake)

        assert await llm.generate("a") == "first"
        assert await llm.generate("b") == "second"


class TestStructuredRequests:

    @pytest.mark.asyncio
    async def test_structured_returns_decoded_object(self, make_gemini):
        llm, _, requests = make_gemini(reply='{"name": "Alice"}')
        request = StructuredGenerationRequest(prompt="p", temperature=0.1, response_schema=SCHEMA)

        data = await llm.agenerate(request)

        assert data == {"name": "Alice"}
        assert requests[0].response_mime_type == "application/json"

    @pytest.mark.asyncio
    async def test_structured_rejects_non_json(self, make_gemini):
        llm, _, _ = make_gemini(reply="Alice")
        request = StructuredGenerationRequest(prompt="p", response_schema=SCHEMA)

        with pytest.raises(StructuredOutputError):
            await llm.agenerate(request)

    @pytest.mark.asyncio
    async def test_with_structured_output_validates_model(self, make_gemini):
        llm, _, requests = make_gemini(reply='{"characters": ["Alice"], "locations": []}')
        structured = llm.with_structured_output(IdentifiedEntities, {"type": "object"})

        result = await structured.ainvoke("p", temperature=0.1)

        assert result == IdentifiedEntities(characters=["Alice"], locations=[])
        assert requests[0].response_schema == {"type": "object"}


class TestMessageText:

    def test_string_content(self):
        assert GeminiLLM.message_text(AIMessage(content="hi")) == "hi"

    def test_list_content_parts(self):
        message = AIMessage(content=[{"type": "text", "text": "Hello, "}, "world", {"type": "image_url", "image_url": "x"}])
        assert GeminiLLM.message_text(message) == "Hello, world"


class TestChatModelBuild:

    def test_builds_gemini_chat_model_with_options(self):
        llm = GeminiLLM(api_key="test-key", model_name="gemini-2.5-flash")

        chat_model = llm._build_chat_model(TextGenerationRequest(prompt="p", temperature=0.2))

        assert isinstance(chat_model, ChatGoogleGenerativeAI)
        assert chat_model.temperature == 0.2

    @pytest.mark.asyncio
    async def test_chat_model_reused_for_same_options(self, make_gemini):
        llm, chat_model, requests = make_gemini(reply="ok")

        for field in ["summary", "theme", "resolution"]:
            await llm.generate(field, temperature=0.2)

        assert len(requests) == 1
        assert len(chat_model.messages) == 3

    @pytest.mark.asyncio
    async def test_new_chat_model_for_different_options(self, make_gemini):
        llm, _, requests = make_gemini(reply='{"name": "Alice"}')

        await llm.generate("a", temperature=0.2)
        await llm.generate("b", temperature=0.1)
        await llm.agenerate(StructuredGenerationRequest(prompt="c", temperature=0.1, response_schema=SCHEMA))
        await llm.agenerate(StructuredGenerationRequest(prompt="d", temperature=0.1, response_schema=SCHEMA))

        assert [(r.kind, r.temperature) for r in requests] == [("text", 0.2), ("text", 0.1), ("structured", 0.1)]

    def test_cached_model_keeps_real_options(self):
        llm = GeminiLLM(api_key="test-key", model_name="gemini-2.5-flash")
        request = TextGenerationRequest(prompt="p", temperature=0.2)

        first = llm._chat_model_for(request)
        second = llm._chat_model_for(TextGenerationRequest(prompt="q", temperature=0.2))

        assert first is second
        assert isinstance(first, ChatGoogleGenerativeAI)
