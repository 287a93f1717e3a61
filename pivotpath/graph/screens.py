from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from enum import Enum
from typing import Any, Callable, List, Optional
from ..agents.roadmap_agent import GENERIC_ERROR_MESSAGE, GenerationError
from ..profile import Profile
from ..sample import SAMPLE_PROFILE, SAMPLE_ROADMAP
from ..schema import RoadmapResult
from ..state import Screen, Session


class Event(str, Enum):
    START = "start"
    VIEW_SAMPLE = "view_sample"
    CANCEL = "cancel"
    EXIT = "exit"
    COMPLETE = "complete"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    RETRY = "retry"
    BACK = "back"
    EXPORT = "export"
    EDIT = "edit"


class InvalidTransitionError(ValueError):
    def __init__(self, screen: Screen, event: Event):
        super().__init__(f"'{event.value}' is not allowed on the {screen.value} screen")
        self.screen = screen
        self.event = event


STATUS_MESSAGES: List[str] = [
    "Scanning resume...",
    "Analyzing skill gaps...",
    "Checking ATS compatibility...",
    "Generating milestones...",
    "Curating resources...",
    "Finalizing roadmap...",
]


def status_message(tick: int) -> str:
    # Cosmetic only; unrelated to request progress
    return STATUS_MESSAGES[tick % len(STATUS_MESSAGES)]


def transition(
    session: Session,
    event: Event,
    profile: Optional[Profile] = None,
    roadmap: Optional[RoadmapResult] = None,
    error: Optional[str] = None,
) -> Session:
    """Return the session after ``event``; the input session is left untouched.

    Results of a request that was abandoned (the user left ``processing``)
    are dropped. Any other event the current screen does not accept raises
    InvalidTransitionError, including a second ``complete`` while processing.
    """
    screen = session.screen

    def go(target: Screen, **changes: Any) -> Session:
        return session.model_copy(update={"screen": target, **changes})

    if event in (Event.SUCCEEDED, Event.FAILED) and screen != Screen.PROCESSING:
        logging.info(f"Ignoring '{event.value}' for an abandoned request (screen: {screen.value})")
        return session

    if screen == Screen.HOME:
        if event == Event.START:
            return go(Screen.WIZARD)
        if event == Event.VIEW_SAMPLE:
            return go(Screen.RESULTS, profile=SAMPLE_PROFILE, roadmap=SAMPLE_ROADMAP, error_message=None)

    elif screen == Screen.WIZARD:
        if event == Event.CANCEL:
            return go(Screen.HOME, profile=None, roadmap=None, error_message=None)
        if event == Event.EXIT:
            # Leaving an edit of an existing roadmap goes back to it
            if session.roadmap is not None and session.profile is not None:
                return go(Screen.RESULTS)
            return go(Screen.HOME, profile=None, roadmap=None, error_message=None)
        if event == Event.COMPLETE:
            if profile is None:
                raise ValueError("'complete' needs the finished profile")
            return go(Screen.PROCESSING, profile=profile, roadmap=None, error_message=None)

    elif screen == Screen.PROCESSING:
        if event == Event.SUCCEEDED:
            if roadmap is None:
                raise ValueError("'succeeded' needs the generated roadmap")
            return go(Screen.RESULTS, roadmap=roadmap, error_message=None)
        if event == Event.FAILED:
            return go(Screen.ERROR, roadmap=None, error_message=error or GENERIC_ERROR_MESSAGE)
        if event == Event.CANCEL:
            return go(Screen.WIZARD)

    elif screen == Screen.ERROR:
        if event == Event.RETRY:
            if session.profile is not None:
                return go(Screen.PROCESSING, error_message=None)
            return go(Screen.WIZARD, error_message=None)
        if event == Event.BACK:
            return go(Screen.HOME, profile=None, roadmap=None, error_message=None)

    elif screen == Screen.RESULTS:
        if event == Event.EXPORT:
            return go(Screen.EXPORT)
        if event == Event.EDIT:
            return go(Screen.WIZARD)

    elif screen == Screen.EXPORT:
        if event == Event.BACK:
            return go(Screen.RESULTS)

    raise InvalidTransitionError(screen, event)


def run_generation(session: Session, client: Any) -> Session:
    """Resolve a ``processing`` session by calling the roadmap client once."""
    if session.screen != Screen.PROCESSING or session.profile is None:
        raise InvalidTransitionError(session.screen, Event.COMPLETE)
    try:
        roadmap = client.generate(session.profile)
    except GenerationError as e:
        logging.warning(f"Roadmap generation failed: {e}")
        return transition(session, Event.FAILED, error=GENERIC_ERROR_MESSAGE)
    return transition(session, Event.SUCCEEDED, roadmap=roadmap)


def retry(session: Session, client: Any) -> Session:
    session = transition(session, Event.RETRY)
    if session.screen == Screen.PROCESSING:
        return run_generation(session, client)
    return session


def run_generation_with_status(
    session: Session,
    client: Any,
    on_tick: Callable[[str], None],
    interval: float = 1.5,
) -> Session:
    """Run ``run_generation`` in a worker while ``on_tick`` shows rotating status text.

    If ``on_tick`` raises (the UI moved on), the worker is abandoned rather
    than waited for; its outcome is never applied.
    """
    pool = ThreadPoolExecutor(max_workers=1)
    try:
        future = pool.submit(run_generation, session, client)
        tick = 0
        while True:
            on_tick(status_message(tick))
            try:
                return future.result(timeout=interval)
            except FutureTimeout:
                tick += 1
    finally:
        pool.shutdown(wait=False)
