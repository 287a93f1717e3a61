from __future__ import annotations
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


LearningStyle = Literal["Visual", "Hands-on", "Reading", "Mixed"]
LEARNING_STYLES: tuple[str, ...] = ("Visual", "Hands-on", "Reading", "Mixed")


class ResumeText(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str


class ResumeAttachment(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    kind: Literal["attachment"] = "attachment"
    mime_type: str
    data: str  # base64


ResumeInput = Annotated[Union[ResumeText, ResumeAttachment], Field(discriminator="kind")]


class Profile(BaseModel):
    """Career background collected by the wizard.

    The resume is a single tagged value so a text resume and an uploaded
    attachment can never be held together. Fields are not validated for
    completeness; whatever the user typed is passed on to the prompt.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    resume: Optional[ResumeInput] = None
    resume_file_name: Optional[str] = None
    current_role: str = ""
    target_role: str = ""
    target_industry: str = ""
    top_skills: List[str] = Field(default_factory=list)
    learning_style: LearningStyle = "Mixed"

    @property
    def resume_text(self) -> str:
        if isinstance(self.resume, ResumeText):
            return self.resume.text
        return ""

    @property
    def resume_attachment(self) -> ResumeAttachment | None:
        if isinstance(self.resume, ResumeAttachment):
            return self.resume
        return None

    def with_resume_text(self, text: str, file_name: str | None = None) -> "Profile":
        # Pasted text has no file label; an uploaded text file keeps its name
        resume = ResumeText(text=text) if text else None
        return self.model_copy(update={"resume": resume, "resume_file_name": file_name if resume else None})

    def with_attachment(self, mime_type: str, data: str, file_name: str | None = None) -> "Profile":
        resume = ResumeAttachment(mime_type=mime_type, data=data)
        return self.model_copy(update={"resume": resume, "resume_file_name": file_name})

    def without_resume(self) -> "Profile":
        return self.model_copy(update={"resume": None, "resume_file_name": None})

    def with_skill(self, skill: str) -> "Profile":
        skill = (skill or "").strip()
        if not skill:
            return self
        return self.model_copy(update={"top_skills": [*self.top_skills, skill]})

    def without_skill(self, skill: str) -> "Profile":
        return self.model_copy(update={"top_skills": [s for s in self.top_skills if s != skill]})
