from __future__ import annotations
from enum import Enum
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field
from .profile import Profile
from .schema import RoadmapResult


class PipelineState(BaseModel):
    # Input
    profile: Profile

    # Intermediate
    messages: List[Any] = Field(default_factory=list)
    raw_text: Optional[str] = None

    # Output
    roadmap: Optional[RoadmapResult] = None
    errors: List[str] = Field(default_factory=list)


class Screen(str, Enum):
    HOME = "home"
    WIZARD = "wizard"
    PROCESSING = "processing"
    RESULTS = "results"
    EXPORT = "export"
    ERROR = "error"


class Session(BaseModel):
    """Everything one user session holds between screens."""

    model_config = ConfigDict(frozen=True)

    screen: Screen = Screen.HOME
    profile: Optional[Profile] = None
    roadmap: Optional[RoadmapResult] = None
    error_message: Optional[str] = None
