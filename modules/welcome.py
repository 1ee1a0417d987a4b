# modules/welcome.py
import streamlit as st

from core.checkin_store import CheckInStore
from core.session import AppSession, Screen, navigate
from modules.theme import header

FEATURES = [
    ("💗", "Daily Check-ins", "Quick mood, energy & sleep tracking"),
    ("📈", "AI Insights", "Personalized cycle phase predictions"),
    ("📅", "Trend Tracking", "Visualize patterns over time"),
]


def render_welcome(session: AppSession, store: CheckInStore):
    header("💗 Hormonal Health", "Hi there!")

    st.markdown(
        """
        <div style="text-align:center; margin-top:1.5rem;">
            <div class="hh-orb" style="background:linear-gradient(90deg,#a855f7,#ec4899);">✨</div>
            <h2 style="margin-bottom:0.25rem;">Track Your Hormonal Journey</h2>
            <p class="hh-muted">
                Get AI-powered insights about your cycle phases by tracking your
                daily mood, energy, and sleep patterns.
            </p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    for icon, title, text in FEATURES:
        st.markdown(
            f"""
            <div class="hh-card">
                <strong>{icon} {title}</strong><br/>
                <span class="hh-muted">{text}</span>
            </div>
            """,
            unsafe_allow_html=True,
        )

    if st.button("Start Daily Check-In", type="primary", use_container_width=True):
        navigate(session, Screen.MEDICAL_UPLOAD)
        st.rerun()

    # returning users can skip setup
    if store.has_history():
        if st.button("Quick Check-In (Skip Setup)", use_container_width=True):
            navigate(session, Screen.CHECKIN)
            st.rerun()

    if st.button("View History & Trends", use_container_width=True):
        navigate(session, Screen.HISTORY)
        st.rerun()
