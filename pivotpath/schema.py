from __future__ import annotations
import json
import re
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _string_list(description: str) -> Dict[str, Any]:
    return {"type": "array", "items": {"type": "string"}, "description": description}


# Response shape handed to the model as a constraint. Kept as plain data so any
# reply can be checked against it regardless of which SDK produced it.
RESOURCE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "type": {"type": "string", "enum": ["Course", "Book", "Article", "Tool"]},
        "provider": {"type": "string"},
        "url": {"type": "string"},
        "duration": {"type": "string"},
    },
    "required": ["title", "type"],
}

MILESTONE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "title": {"type": "string", "description": "Milestone title (e.g., 'Foundational Learning')"},
        "duration": {"type": "string", "description": "Duration (e.g., 'Weeks 1-4')"},
        "description": {"type": "string", "description": "Goal of this phase."},
        "keyActions": _string_list("3-4 specific actionable bullet points."),
        "resources": {"type": "array", "items": RESOURCE_SCHEMA},
    },
    "required": ["title", "duration", "description", "keyActions", "resources"],
}

ATS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "score": {
            "type": "integer",
            "description": "ATS compatibility score from 0-100 based on keyword matching and formatting.",
        },
        "matchLevel": {"type": "string", "enum": ["Low", "Medium", "High"]},
        "missingKeywords": _string_list(
            "Crucial hard skills and keywords for the target role that are missing from the resume."
        ),
        "formattingIssues": _string_list(
            "Potential formatting problems that might confuse an ATS (e.g. columns, graphics, complex headers)."
        ),
        "tips": _string_list("Specific, actionable tips to improve the resume for this specific target role."),
    },
    "required": ["score", "matchLevel", "missingKeywords", "formattingIssues", "tips"],
}

ROADMAP_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "summary": {"type": "string", "description": "A motivating executive summary of the career pivot strategy."},
        "currentAnalysis": {"type": "string", "description": "Brief analysis of current transferable skills."},
        "gapAnalysis": _string_list("List of specific skill or experience gaps to bridge."),
        "estimatedTotalTime": {"type": "string", "description": "Estimated time to be job-ready (e.g., '3-6 months')."},
        "atsAnalysis": ATS_SCHEMA,
        "timeline": {"type": "array", "items": MILESTONE_SCHEMA},
    },
    "required": ["summary", "currentAnalysis", "gapAnalysis", "timeline", "estimatedTotalTime", "atsAnalysis"],
}


def schema_fields(schema: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    """Flatten the top level of an object schema into name -> {type, required, enum}."""
    required = set(schema.get("required", []))
    out: Dict[str, Dict[str, Any]] = {}
    for name, prop in schema.get("properties", {}).items():
        out[name] = {
            "type": prop.get("type"),
            "required": name in required,
            "enum": list(prop["enum"]) if "enum" in prop else None,
        }
    return out


# -------- Data models --------
class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class Resource(_Record):
    title: str
    type: Literal["Course", "Book", "Article", "Tool"]
    provider: Optional[str] = None
    url: Optional[str] = None
    duration: Optional[str] = None


class Milestone(_Record):
    title: str
    duration: str
    description: str
    key_actions: List[str]
    resources: List[Resource]


class ATSAnalysis(_Record):
    score: int = Field(ge=0, le=100)
    match_level: Literal["Low", "Medium", "High"]
    missing_keywords: List[str]
    formatting_issues: List[str]
    tips: List[str]


class RoadmapResult(_Record):
    summary: str
    current_analysis: str
    gap_analysis: List[str]
    timeline: List[Milestone]
    estimated_total_time: str
    ats_analysis: ATSAnalysis


# -------- Parsing --------
def _extract_json_block(text: str) -> str:
    t = text.strip()
    # Strip code fences if any
    t = re.sub(r"^```[a-zA-Z]*\n|```$", "", t, flags=re.MULTILINE)
    # Find first {...}
    m = re.search(r"\{[\s\S]*\}", t)
    if m:
        return t[m.start():m.end()]
    return t


def parse_roadmap(text: str) -> RoadmapResult:
    """Parse a model reply into a RoadmapResult.

    Raises ValueError on empty text, invalid JSON or a shape that does not
    match the roadmap schema (pydantic's ValidationError is a ValueError).
    """
    if not text or not text.strip():
        raise ValueError("Empty reply")
    data = json.loads(_extract_json_block(text))
    return RoadmapResult.model_validate(data)
