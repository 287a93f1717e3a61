from __future__ import annotations
import logging
from typing import Any, Callable, Optional
from ..llm_provider import build_gemini
from ..profile import Profile
from ..schema import RoadmapResult
from ..state import PipelineState
from ..graph.workflow import build_graph

GENERIC_ERROR_MESSAGE = (
    "We couldn't generate your roadmap. Please check your connection or try entering more detailed info."
)


class GenerationError(RuntimeError):
    """The model call failed, replied with nothing, or replied with an unusable roadmap."""


class RoadmapClient:
    """Turns a Profile into a RoadmapResult with a single model call.

    The chat model is built on first use so the UI can start (and show the
    sample roadmap) without an API key. There is no retry, caching or timeout
    here; each ``generate`` is one request to the model.
    """

    def __init__(self, llm: Any = None, llm_factory: Optional[Callable[[], Any]] = None):
        self._llm = llm
        self._llm_factory = llm_factory or build_gemini

    @property
    def llm(self) -> Any:
        if self._llm is None:
            self._llm = self._llm_factory()
        return self._llm

    def generate(self, profile: Profile) -> RoadmapResult:
        try:
            llm = self.llm
        except Exception as e:
            logging.error(f"LLM init error: {e}")
            raise GenerationError(f"LLM init error: {e}") from e

        try:
            run = build_graph(llm)
            final = run(PipelineState(profile=profile))
        except Exception as e:
            logging.error(f"Roadmap pipeline error: {e!r}")
            raise GenerationError(f"Roadmap pipeline error: {e!r}") from e
        if final.errors or final.roadmap is None:
            raise GenerationError("; ".join(final.errors) or "No roadmap produced")
        return final.roadmap
