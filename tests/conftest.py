from __future__ import annotations
import json
from types import SimpleNamespace
from typing import Any, List
import pytest
from pivotpath.profile import Profile
from pivotpath.sample import SAMPLE_ROADMAP


class FakeLLM:
    """Stands in for the chat model: records every call, replies with canned content."""

    def __init__(self, content: Any = "", error: Exception | None = None):
        self.content = content
        self.error = error
        self.calls: List[list] = []

    def invoke(self, messages: list) -> Any:
        self.calls.append(messages)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(content=self.content)


@pytest.fixture
def roadmap_json() -> str:
    return SAMPLE_ROADMAP.model_dump_json(by_alias=True)


@pytest.fixture
def roadmap_dict(roadmap_json) -> dict:
    return json.loads(roadmap_json)


@pytest.fixture
def profile() -> Profile:
    return Profile(
        current_role="Marketing Coordinator",
        target_role="UX Designer",
        target_industry="SaaS / Tech",
        top_skills=["Graphic Design", "Empathy"],
        learning_style="Visual",
    ).with_resume_text("Sample Resume")


@pytest.fixture
def fake_llm():
    return FakeLLM
