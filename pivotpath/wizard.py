from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from .profile import Profile

STEPS: Tuple[str, ...] = ("Resume", "Current Role", "Pivot Goal", "Skills", "Style")

# Profile fields each step is allowed to write
STEP_FIELDS: Dict[str, Tuple[str, ...]] = {
    "Resume": ("resume", "resume_file_name"),
    "Current Role": ("current_role",),
    "Pivot Goal": ("target_role", "target_industry"),
    "Skills": ("top_skills",),
    "Style": ("learning_style",),
}


class Outcome(str, Enum):
    COMPLETE = "complete"
    CANCEL = "cancel"
    EXIT = "exit"


class WizardState(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: int = 0
    profile: Profile = Profile()
    # True when re-entered from results with an existing profile
    editing: bool = False

    @property
    def title(self) -> str:
        return STEPS[self.step]

    @property
    def is_last(self) -> bool:
        return self.step == len(STEPS) - 1


def start_wizard(profile: Optional[Profile] = None) -> WizardState:
    if profile is None:
        return WizardState()
    return WizardState(profile=profile, editing=True)


def update(wizard: WizardState, **fields: Any) -> WizardState:
    """Write profile fields owned by the current step."""
    allowed = STEP_FIELDS[wizard.title]
    foreign = sorted(set(fields) - set(allowed))
    if foreign:
        raise ValueError(f"Step '{wizard.title}' cannot set {', '.join(foreign)}")
    profile = Profile.model_validate({**wizard.profile.model_dump(), **fields})
    return wizard.model_copy(update={"profile": profile})


def apply(wizard: WizardState, profile: Profile) -> WizardState:
    """Take a modified profile, keeping only the current step's fields from it."""
    fields = {name: getattr(profile, name) for name in STEP_FIELDS[wizard.title]}
    return update(wizard, **fields)


def next_step(wizard: WizardState) -> Tuple[WizardState, Optional[Outcome]]:
    if wizard.is_last:
        return wizard, Outcome.COMPLETE
    return wizard.model_copy(update={"step": wizard.step + 1}), None


def previous_step(wizard: WizardState) -> Tuple[WizardState, Optional[Outcome]]:
    if wizard.step > 0:
        return wizard.model_copy(update={"step": wizard.step - 1}), None
    return wizard, Outcome.EXIT if wizard.editing else Outcome.CANCEL


def progress(wizard: WizardState) -> float:
    return (wizard.step + 1) / len(STEPS)
