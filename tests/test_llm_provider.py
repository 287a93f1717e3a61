import inspect
import pytest
from pivotpath import llm_provider
from pivotpath.schema import ROADMAP_SCHEMA


class RecordingChatModel:
    def __init__(self, **kwargs):
        self.kwargs = kwargs


@pytest.fixture
def no_secrets(monkeypatch):
    monkeypatch.setattr(llm_provider, "_read_secrets", lambda: {})
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "GEMINI_MODEL"):
        # setenv first so the original value is restored even after build_gemini writes it
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_build_gemini_takes_no_arguments():
    assert inspect.signature(llm_provider.build_gemini).parameters == {}


def test_build_gemini_uses_roadmap_schema(monkeypatch, no_secrets):
    monkeypatch.setattr(llm_provider, "ChatGoogleGenerativeAI", RecordingChatModel)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    model = llm_provider.build_gemini()
    assert model.kwargs["response_schema"] is ROADMAP_SCHEMA
    assert model.kwargs["response_mime_type"] == "application/json"
    assert model.kwargs["model"] == llm_provider.DEFAULT_MODEL
    assert model.kwargs["google_api_key"] == "test-key"
    assert model.kwargs["max_retries"] == 1
    assert "temperature" not in model.kwargs


def test_model_name_from_env(monkeypatch, no_secrets):
    monkeypatch.setattr(llm_provider, "ChatGoogleGenerativeAI", RecordingChatModel)
    monkeypatch.setenv("GOOGLE_API_KEY", "fallback-key")
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    model = llm_provider.build_gemini()
    assert model.kwargs["model"] == "gemini-2.5-pro"
    assert model.kwargs["google_api_key"] == "fallback-key"


def test_missing_key(no_secrets):
    with pytest.raises(RuntimeError, match="GEMINI_API_KEY"):
        llm_provider.build_gemini()
