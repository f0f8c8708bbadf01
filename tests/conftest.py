"""Shared fixtures for the checklist generation test suite."""

import pytest
from langchain_core.messages import AIMessage

from core import GeminiLLM


# ═══════════════════════════════════════════════════
# Stub clients
# ═══════════════════════════════════════════════════

class StubFieldLLM:
    """Deterministic stand-in for GeminiLLM.generate.

    Prompts are the field path itself (see `echo_prompt_builder`), so
    `responses` maps field path -> text, or -> an exception to raise for that field.
    """

    def __init__(self, responses=None, configured=True):
        self.responses = responses or {}
        self.configured = configured
        self.calls = []

    @property
    def is_configured(self):
        return self.configured

    async def generate(self, prompt, temperature=0.2):
        self.calls.append((prompt, temperature))
        response = self.responses.get(prompt, f"content for {prompt}")
        if isinstance(response, BaseException):
            raise response
        return response


class RecordingChatModel:
    """Fake LangChain chat model: records messages, replies with fixed text or raises."""

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.messages = []

    async def ainvoke(self, messages):
        self.messages.append(messages)
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


def echo_prompt_builder(field_path, document_text, contract_text, field_rules):
    return field_path


@pytest.fixture
def prompt_builder():
    return echo_prompt_builder


@pytest.fixture
def make_gemini(monkeypatch):
    """Build a configured GeminiLLM whose chat model is a RecordingChatModel.

    Returns (llm, chat_model, requests) where requests collects every
    GenerationRequest the client turned into a chat model.
    """

    def _make(reply="", error=None):
        llm = GeminiLLM(api_key="test-key", model_name="gemini-test")
        chat_model = RecordingChatModel(reply=reply, error=error)
        requests = []

        def build(request):
            requests.append(request)
            return chat_model

        monkeypatch.setattr(llm, "_build_chat_model", build)
        return llm, chat_model, requests

    return _make


@pytest.fixture
def collector():
    """Callback that records (field, content) pairs in call order."""

    class Collector:
        def __init__(self):
            self.calls = []

        def __call__(self, field_path, content):
            self.calls.append((field_path, content))

    return Collector()


@pytest.fixture
def make_stub_llm():
    return StubFieldLLM
