# core/session.py
"""
Explicit per-user session state.

The UI keeps one AppSession in st.session_state and hands it to every
screen. Nothing here imports Streamlit, so the flow is testable as plain
Python.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional, Tuple

from core.checkin_store import CheckInStore, StorageError
from core.insight_engine import classify
from core.models import CheckIn, Insight, Notice, Sleep

logger = logging.getLogger(__name__)

CHECKIN_STEPS = (
    ("How's your mood?", "Tap the emoji that matches how you feel"),
    ("Energy level?", "Slide to show your energy today"),
    ("Sleep quality?", "How did you sleep last night?"),
)


class Screen(str, Enum):
    WELCOME = "welcome"
    MEDICAL_UPLOAD = "medical-upload"
    WEARABLE_SETUP = "wearable-setup"
    CHECKIN = "checkin"
    INSIGHT = "insight"
    EXPLANATION = "explanation"
    HISTORY = "history"


@dataclass
class AppSession:
    screen: Screen = Screen.WELCOME

    # check-in wizard
    checkin_step: int = 0
    draft_mood: int = 5
    draft_energy: int = 5
    draft_sleep: Sleep = Sleep.OKAY

    check_in: Optional[CheckIn] = None
    insight: Optional[Insight] = None
    report_analysis: Optional[str] = None
    connected_devices: Tuple[str, ...] = ()
    feedback: Optional[bool] = None
    notices: List[Notice] = field(default_factory=list)


# ==================================================
# NAVIGATION
# ==================================================
def navigate(session: AppSession, screen: Screen) -> None:
    if screen == Screen.CHECKIN and session.screen != Screen.CHECKIN:
        reset_checkin(session)
    if screen == Screen.EXPLANATION and session.screen != Screen.EXPLANATION:
        session.feedback = None
    session.screen = screen


def reset_checkin(session: AppSession) -> None:
    session.checkin_step = 0
    session.draft_mood = 5
    session.draft_energy = 5
    session.draft_sleep = Sleep.OKAY


def is_last_checkin_step(session: AppSession) -> bool:
    return session.checkin_step >= len(CHECKIN_STEPS) - 1


def next_checkin_step(session: AppSession) -> None:
    if not is_last_checkin_step(session):
        session.checkin_step += 1


def previous_checkin_step(session: AppSession) -> None:
    """Step back; from the first step, leave the wizard."""
    if session.checkin_step > 0:
        session.checkin_step -= 1
    else:
        navigate(session, Screen.WELCOME)


def draft_check_in(session: AppSession, today: Optional[date] = None) -> CheckIn:
    return CheckIn(
        mood=session.draft_mood,
        energy=session.draft_energy,
        sleep=session.draft_sleep,
        date=today or date.today(),
    )


# ==================================================
# FLOW
# ==================================================
def complete_checkin(
    session: AppSession,
    store: CheckInStore,
    today: Optional[date] = None,
) -> Insight:
    """
    classify -> remember -> persist -> show.
    A storage failure becomes a notice; the insight is still shown.
    """
    check_in = draft_check_in(session, today)
    insight = classify(check_in)

    session.check_in = check_in
    session.insight = insight

    try:
        store.append(check_in, insight)
    except StorageError as exc:
        logger.error("Error saving check-in: %s", exc)
        session.notices.append(Notice(
            title="Couldn't save this check-in",
            description="Your insight is below, but it won't appear in history.",
            variant="destructive",
        ))

    navigate(session, Screen.INSIGHT)
    return insight


def record_feedback(session: AppSession, helpful: bool) -> None:
    session.feedback = helpful


def pop_notices(session: AppSession) -> List[Notice]:
    notices, session.notices = session.notices, []
    return notices
