from __future__ import annotations
from typing import Any, Dict, List
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage
from .profile import Profile

RESUME_CHAR_LIMIT = 10_000

SYSTEM_INSTRUCTION = (
    "You are PivotPath AI. You provide brutal but constructive honesty regarding resume ATS compatibility, "
    "followed by an encouraging and strategic career pivot roadmap."
)

ATTACHMENT_INSTRUCTION = (
    "Analyze the attached resume file to understand the user's background, experience, and transferable skills."
)
NO_RESUME_TEXT = "No resume provided."
RESUME_PREFIX = "Resume Context: "

INSTRUCTION_TEMPLATE = """
Act as an expert career coach and ATS (Applicant Tracking System) specialist.

User Profile:
- Current Role/Background: {current_role}
- Target Role: {target_role}
- Target Industry: {target_industry}
- Self-identified Skills: {skills}
- Learning Style: {learning_style}

Task 1: Create a detailed, step-by-step career pivot roadmap.
- Break it down into logical milestones.
- Suggest specific real-world resources.

Task 2: Perform a strict ATS Scan on the provided resume content against the Target Role ("{target_role}").
- Calculate a compatibility score (0-100).
- Identify CRITICAL missing keywords (hard skills, tools, methodologies) that an ATS would look for.
- Check for formatting red flags.
- Provide specific tips to pass the screen.
"""


def text_part(text: str) -> Dict[str, Any]:
    return {"type": "text", "text": text}


def media_part(mime_type: str, data: str) -> Dict[str, Any]:
    return {"type": "media", "mime_type": mime_type, "data": data}


def build_resume_parts(profile: Profile) -> List[Dict[str, Any]]:
    attachment = profile.resume_attachment
    if attachment is not None:
        return [media_part(attachment.mime_type, attachment.data), text_part(ATTACHMENT_INSTRUCTION)]
    if profile.resume_text:
        # Longer resumes are cut silently
        return [text_part(RESUME_PREFIX + profile.resume_text[:RESUME_CHAR_LIMIT])]
    return [text_part(NO_RESUME_TEXT)]


def build_instruction(profile: Profile) -> str:
    return INSTRUCTION_TEMPLATE.format(
        current_role=profile.current_role,
        target_role=profile.target_role,
        target_industry=profile.target_industry,
        skills=", ".join(profile.top_skills),
        learning_style=profile.learning_style,
    )


def build_parts(profile: Profile) -> List[Dict[str, Any]]:
    """Ordered content parts for one roadmap request: resume first, instruction last."""
    return build_resume_parts(profile) + [text_part(build_instruction(profile))]


def build_messages(profile: Profile) -> List[BaseMessage]:
    return [
        SystemMessage(content=SYSTEM_INSTRUCTION),
        HumanMessage(content=build_parts(profile)),
    ]
