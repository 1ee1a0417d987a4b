# tests/test_session_flow.py

from datetime import date

from core.checkin_store import CheckInStore, MemoryStorage
from core.models import Phase, Sleep
from core.session import (
    AppSession,
    Screen,
    complete_checkin,
    navigate,
    next_checkin_step,
    pop_notices,
    previous_checkin_step,
    record_feedback,
)

TODAY = date(2024, 3, 1)


def test_checkin_flow_classifies_stores_and_shows_insight():
    """
    Regression test:
    check-in -> insight screen, entry in history
    """
    session = AppSession()
    store = CheckInStore(MemoryStorage())

    navigate(session, Screen.CHECKIN)
    session.draft_mood = 2
    next_checkin_step(session)
    session.draft_energy = 3
    next_checkin_step(session)
    session.draft_sleep = Sleep.POOR

    insight = complete_checkin(session, store, today=TODAY)

    assert insight.phase == Phase.LATE_LUTEAL
    assert session.screen == Screen.INSIGHT
    assert session.insight == insight
    assert session.check_in.date == TODAY
    assert [e.mood for e in store.list_entries()] == [2]
    assert pop_notices(session) == []


def test_storage_failure_still_shows_insight():
    session = AppSession()
    store = CheckInStore(MemoryStorage(capacity=5))

    insight = complete_checkin(session, store, today=TODAY)

    assert session.screen == Screen.INSIGHT
    assert session.insight == insight

    notices = pop_notices(session)
    assert len(notices) == 1
    assert notices[0].is_error
    assert pop_notices(session) == []


def test_wizard_steps_are_bounded():
    session = AppSession()
    navigate(session, Screen.CHECKIN)

    for _ in range(5):
        next_checkin_step(session)
    assert session.checkin_step == 2

    previous_checkin_step(session)
    previous_checkin_step(session)
    assert session.checkin_step == 0
    assert session.screen == Screen.CHECKIN

    previous_checkin_step(session)
    assert session.screen == Screen.WELCOME


def test_entering_checkin_resets_draft():
    session = AppSession(draft_mood=9, checkin_step=2)

    navigate(session, Screen.CHECKIN)

    assert session.draft_mood == 5
    assert session.checkin_step == 0
    assert session.draft_sleep == Sleep.OKAY


def test_feedback_resets_on_each_explanation_visit():
    session = AppSession(screen=Screen.INSIGHT)

    navigate(session, Screen.EXPLANATION)
    record_feedback(session, True)
    assert session.feedback is True

    navigate(session, Screen.INSIGHT)
    navigate(session, Screen.EXPLANATION)
    assert session.feedback is None
