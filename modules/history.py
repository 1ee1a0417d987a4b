# modules/history.py
"""
History UI.
Read-only view over core.checkin_store.
"""

import streamlit as st

from core.checkin_store import CheckInStore, is_sample_history
from core.display import history_mood_emoji, phase_badge
from core.history_exporter import export_history_docx, export_history_pdf
from core.session import AppSession, Screen, navigate
from core.trends import averages, history_frame, trend_frame
from modules.theme import header
from utils.dates import short_day


def render_history(session: AppSession, store: CheckInStore):
    if st.button("← Back"):
        navigate(session, Screen.WELCOME)
        st.rerun()

    header("📊 Your Health Trends", "Mood, energy and phase over time")

    entries = list(store.list_entries())
    avg_mood, avg_energy = averages(entries)

    # --------------------------------------------------
    # Summary
    # --------------------------------------------------
    c1, c2 = st.columns(2)
    c1.metric("Avg Mood", f"{avg_mood:.1f}")
    c2.metric("Avg Energy", f"{avg_energy:.1f}")

    if not entries:
        st.info("No check-ins yet. Your trends will appear here after your first check-in.")
        return

    if is_sample_history(entries):
        st.caption("Saved history could not be read. Showing sample entries.")

    view = st.radio("View", ["Chart", "List"], horizontal=True, label_visibility="collapsed")

    # --------------------------------------------------
    # Chart view
    # --------------------------------------------------
    if view == "Chart":
        st.markdown("### 📈 Mood & Energy Trends")
        st.line_chart(trend_frame(entries))

    # --------------------------------------------------
    # List view
    # --------------------------------------------------
    else:
        for e in entries:
            bg, fg = phase_badge(e.phase_label)
            st.markdown(
                f"""
                <div class="hh-card">
                    <strong>{history_mood_emoji(e.mood)} {short_day(e.date)}</strong>
                    <span class="hh-badge" style="background:{bg}; color:{fg}; float:right;">
                        {e.phase_label}
                    </span>
                    <div class="hh-muted">
                        Mood {e.mood}/10 · Energy {e.energy}/10 · Sleep {e.sleep.value}
                        · {e.confidence}% confidence
                    </div>
                </div>
                """,
                unsafe_allow_html=True,
            )

        with st.expander("Table"):
            st.dataframe(history_frame(entries), use_container_width=True, hide_index=True)

    # --------------------------------------------------
    # Export
    # --------------------------------------------------
    st.markdown("---")
    c1, c2 = st.columns(2)

    with c1:
        if st.button("⬇️ Export PDF"):
            try:
                path = export_history_pdf(entries)
                st.download_button(
                    "Download PDF file",
                    data=path.read_bytes(),
                    file_name=path.name,
                    mime="application/pdf",
                    key="download_pdf_history",
                )
            except Exception as e:
                st.error(f"PDF export failed: {e}")

    with c2:
        if st.button("⬇️ Export DOCX"):
            try:
                path = export_history_docx(entries)
                st.download_button(
                    "Download DOCX file",
                    data=path.read_bytes(),
                    file_name=path.name,
                    mime="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
                    key="download_docx_history",
                )
            except Exception as e:
                st.error(f"DOCX export failed: {e}")
