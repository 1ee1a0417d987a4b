# modules/theme.py
"""
Shared look & feel for the mobile-styled screens.
"""

import streamlit as st

from core.session import AppSession, pop_notices

# ==================================================
# THEME
# ==================================================
CSS = """
<style>
.block-container {
    max-width: 480px;
    padding-top: 1.5rem;
}
.stApp {
    background: linear-gradient(135deg, #faf5ff 0%, #fdf2f8 50%, #eef2ff 100%);
}
.hh-card {
    padding: 1.25rem;
    border-radius: 20px;
    background: rgba(255, 255, 255, 0.9);
    box-shadow: 0 10px 30px rgba(124, 58, 237, 0.08);
    margin-bottom: 1rem;
}
.hh-title {
    font-size: 1.3rem;
    font-weight: 700;
    color: #1f2937;
    margin-bottom: 0;
}
.hh-muted {
    color: #6b7280;
    font-size: 0.9rem;
}
.hh-orb {
    width: 80px;
    height: 80px;
    margin: 0 auto 1rem auto;
    border-radius: 50%;
    display: flex;
    align-items: center;
    justify-content: center;
    font-size: 2rem;
}
.hh-badge {
    padding: 0.15rem 0.6rem;
    border-radius: 999px;
    font-size: 0.8rem;
    font-weight: 600;
}
</style>
"""


def apply_theme():
    st.markdown(CSS, unsafe_allow_html=True)


def header(title: str, subtitle: str = ""):
    st.markdown(
        f"""
        <div>
            <div class="hh-title">{title}</div>
            <div class="hh-muted">{subtitle}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def show_notices(session: AppSession):
    """
    Flush pending notices as toasts (errors also inline).
    """
    for notice in pop_notices(session):
        text = f"**{notice.title}**"
        if notice.description:
            text += f" {notice.description}"

        if notice.is_error:
            st.error(text)
            st.toast(text, icon="⚠️")
        else:
            st.toast(text, icon="✅")
