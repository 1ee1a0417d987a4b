# modules/explanation.py
import streamlit as st

from core.display import phase_emoji
from core.session import AppSession, Screen, navigate, record_feedback
from modules.theme import header


def render_explanation(session: AppSession):
    insight = session.insight
    if insight is None:
        navigate(session, Screen.WELCOME)
        st.rerun()

    if st.button("← Back"):
        navigate(session, Screen.INSIGHT)
        st.rerun()

    header("How We Know", "Understanding your insight")

    # --------------------------------------------------
    # The science
    # --------------------------------------------------
    st.markdown("### 🧬 The Science")
    st.markdown(
        f"""
        <div class="hh-card">
            {insight.explanation}
            <p style="color:#7c3aed; font-weight:600; margin-top:0.75rem;">
                {phase_emoji(insight.phase)} {insight.phase.value} · {insight.confidence}% confidence
            </p>
        </div>
        """,
        unsafe_allow_html=True,
    )

    if session.check_in is not None:
        c = session.check_in
        st.caption(
            f"Based on mood {c.mood}/10, energy {c.energy}/10 and {c.sleep.value} sleep."
        )

    # --------------------------------------------------
    # Recommendations
    # --------------------------------------------------
    st.markdown("### 💡 Recommendations")
    for i, rec in enumerate(insight.recommendations, start=1):
        st.markdown(f"{i}. {rec}")

    # --------------------------------------------------
    # Feedback
    # --------------------------------------------------
    st.markdown("---")
    st.markdown("#### Was this insight helpful?")

    if session.feedback is not None:
        st.success("Thank you for your feedback! It helps us improve your insights.")
    else:
        c1, c2 = st.columns(2)
        if c1.button("👍 Helpful", use_container_width=True):
            record_feedback(session, True)
            st.rerun()
        if c2.button("👎 Not helpful", use_container_width=True):
            record_feedback(session, False)
            st.rerun()

    if st.button("↺ Back to Home", use_container_width=True):
        navigate(session, Screen.WELCOME)
        st.rerun()
