from __future__ import annotations
import logging
from typing import Any, Callable, Dict
from langgraph.graph import StateGraph, END
from ..state import PipelineState
from ..prompt import build_messages
from ..schema import parse_roadmap


def _content_text(resp: Any) -> str:
    content = getattr(resp, "content", "")
    if isinstance(content, str):
        return content
    # Multimodal replies come back as a list of content blocks
    chunks = []
    for block in content or []:
        if isinstance(block, str):
            chunks.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            chunks.append(block.get("text", ""))
    return "".join(chunks)


def build_graph(llm: Any) -> Callable[[PipelineState], PipelineState]:
    """Compile the prompt -> generate -> parse pipeline around one chat model.

    Each node records its failure in ``state.errors`` and later nodes skip,
    so a run makes at most one model call and never returns a partial roadmap.
    """

    def prompt_node(state: PipelineState) -> Dict[str, Any]:
        return {"messages": build_messages(state.profile)}

    def generate_node(state: PipelineState) -> Dict[str, Any]:
        if state.errors:
            return {}
        try:
            resp = llm.invoke(state.messages)
            text = _content_text(resp).strip()
        except Exception as e:
            logging.error(f"Gemini API error: {e}")
            return {"errors": state.errors + [f"Model call failed: {e}"]}
        if not text:
            logging.error("Gemini API returned an empty reply")
            return {"errors": state.errors + ["No response from AI"]}
        return {"raw_text": text}

    def parse_node(state: PipelineState) -> Dict[str, Any]:
        if state.errors:
            return {}
        try:
            return {"roadmap": parse_roadmap(state.raw_text or "")}
        except Exception as e:
            logging.error(f"Roadmap reply did not match the schema: {e}")
            return {"errors": state.errors + [f"Roadmap parse error: {e}"]}

    g = StateGraph(PipelineState)
    g.add_node("prompt", prompt_node)
    g.add_node("generate", generate_node)
    g.add_node("parse", parse_node)

    g.set_entry_point("prompt")
    g.add_edge("prompt", "generate")
    g.add_edge("generate", "parse")
    g.add_edge("parse", END)

    app = g.compile()

    def runner(state: PipelineState) -> PipelineState:
        final = app.invoke(state)
        # LangGraph returns a plain dict of channel values
        if isinstance(final, dict):
            final = PipelineState.model_validate(final)
        return final

    return runner
