# modules/medical_upload.py
"""
Medical report upload UI.
Reads & writes only through core.report_analyzer.
"""

import streamlit as st

from core import checkin_store
from core.ai_client import build_generator
from core.report_analyzer import (
    LocalUploadStorage,
    ReportTextExtractor,
    UploadRejected,
    analyze_report,
    describe_failure,
)
from core.session import AppSession, Screen, navigate
from modules.theme import header

UPLOAD_TYPES = ["pdf", "jpg", "jpeg", "png", "docx", "txt"]


def render_medical_upload(session: AppSession):
    if st.button("← Back"):
        navigate(session, Screen.WELCOME)
        st.rerun()

    header("Medical Report Analysis", "Upload your lab results for AI insights")

    st.markdown(
        """
        <div class="hh-card">
            <strong>🔬 What we analyze</strong><br/>
            <span class="hh-muted">
                Hormone levels, thyroid function, and reproductive health markers.
            </span>
            <br/><br/>
            <strong>✨ AI-powered insights</strong><br/>
            <span class="hh-muted">
                A friendly summary of what your results mean for your cycle.
            </span>
        </div>
        """,
        unsafe_allow_html=True,
    )

    uploaded = st.file_uploader(
        "PDF, JPG, PNG, DOCX or TXT (max 10MB)",
        type=UPLOAD_TYPES,
    )

    if uploaded is not None and st.button("Analyze report", type="primary", use_container_width=True):
        try:
            with st.spinner("Uploading and analyzing your report..."):
                result = analyze_report(
                    uploaded.name,
                    uploaded.type,
                    uploaded.getvalue(),
                    uploader=LocalUploadStorage(checkin_store.DATA_DIR),
                    extractor=ReportTextExtractor(),
                    generator=build_generator(),
                )
            session.report_analysis = result.text
            session.notices.append(result.notice)
        except UploadRejected as e:
            session.notices.append(e.notice)
        except Exception as e:
            session.notices.append(describe_failure(e))
        st.rerun()

    if session.report_analysis:
        st.markdown("### 🧾 Your analysis")
        with st.container(border=True):
            st.markdown(session.report_analysis)

    st.markdown("---")
    label = "Continue" if session.report_analysis else "Skip for now"
    if st.button(label, use_container_width=True):
        navigate(session, Screen.WEARABLE_SETUP)
        st.rerun()
