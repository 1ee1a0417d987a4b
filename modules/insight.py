# modules/insight.py
import streamlit as st

from core.display import phase_color, phase_emoji
from core.session import AppSession, Screen, navigate
from modules.theme import header


def render_insight(session: AppSession):
    insight = session.insight
    if insight is None:
        navigate(session, Screen.WELCOME)
        st.rerun()

    header("✨ Your AI Insight", "Based on today's check-in")

    start, end = phase_color(insight.phase)

    st.markdown(
        f"""
        <div class="hh-card" style="text-align:center;">
            <div class="hh-orb" style="background:linear-gradient(90deg,{start},{end});">
                {phase_emoji(insight.phase)}
            </div>
            <h2 style="margin-bottom:0.25rem;">{insight.phase.value} Phase</h2>
            <p class="hh-muted">Confidence: {insight.confidence}%</p>
        </div>
        """,
        unsafe_allow_html=True,
    )
    st.progress(insight.confidence)

    st.markdown(f"#### {insight.message}")

    st.markdown("**📈 Quick Tips**")
    for rec in insight.recommendations[:2]:
        st.markdown(f"- {rec}")

    extra = len(insight.recommendations) - 2
    if extra > 0:
        st.caption(f"+{extra} more tips available")

    if st.button("❓ Why this insight?", use_container_width=True):
        navigate(session, Screen.EXPLANATION)
        st.rerun()

    if st.button("↺ Back to Home", use_container_width=True):
        navigate(session, Screen.WELCOME)
        st.rerun()
