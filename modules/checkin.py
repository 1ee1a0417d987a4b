# modules/checkin.py
"""
Daily check-in wizard: mood -> energy -> sleep.
"""

import streamlit as st

from core.checkin_store import CheckInStore
from core.display import MOOD_EMOJIS, SLEEP_OPTIONS, energy_label, mood_emoji, mood_label
from core.session import (
    CHECKIN_STEPS,
    AppSession,
    complete_checkin,
    is_last_checkin_step,
    next_checkin_step,
    previous_checkin_step,
)
from modules.theme import header


def _mood_step(session: AppSession):
    st.markdown(
        f"<div style='text-align:center; font-size:3rem;'>"
        f"{mood_emoji(session.draft_mood)}</div>"
        f"<p class='hh-muted' style='text-align:center;'>{mood_label(session.draft_mood)}</p>",
        unsafe_allow_html=True,
    )

    # 2 rows of 5 emoji buttons
    for row in range(2):
        cols = st.columns(5)
        for i in range(5):
            value = row * 5 + i + 1
            selected = value == session.draft_mood
            if cols[i].button(
                MOOD_EMOJIS[value - 1],
                key=f"mood_{value}",
                type="primary" if selected else "secondary",
                use_container_width=True,
            ):
                session.draft_mood = value
                st.rerun()


def _energy_step(session: AppSession):
    session.draft_energy = st.slider(
        "Energy",
        min_value=1,
        max_value=10,
        value=session.draft_energy,
        label_visibility="collapsed",
    )
    st.markdown(
        f"<p style='text-align:center; font-size:1.5rem;'>⚡ {session.draft_energy}/10</p>"
        f"<p class='hh-muted' style='text-align:center;'>{energy_label(session.draft_energy)}</p>",
        unsafe_allow_html=True,
    )


def _sleep_step(session: AppSession):
    for value, emoji, label, description in SLEEP_OPTIONS:
        selected = value == session.draft_sleep
        if st.button(
            f"{emoji}  {label} · {description}",
            key=f"sleep_{value.value}",
            type="primary" if selected else "secondary",
            use_container_width=True,
        ):
            session.draft_sleep = value
            st.rerun()


STEP_RENDERERS = (_mood_step, _energy_step, _sleep_step)


def render_checkin(session: AppSession, store: CheckInStore):
    if st.button("← Back"):
        previous_checkin_step(session)
        st.rerun()

    step = session.checkin_step
    title, subtitle = CHECKIN_STEPS[step]

    st.progress((step + 1) / len(CHECKIN_STEPS))
    header(title, subtitle)
    st.markdown("")

    STEP_RENDERERS[step](session)

    st.markdown("---")
    if is_last_checkin_step(session):
        if st.button("Get My Insight ✨", type="primary", use_container_width=True):
            complete_checkin(session, store)
            st.rerun()
    else:
        if st.button("Next →", type="primary", use_container_width=True):
            next_checkin_step(session)
            st.rerun()
