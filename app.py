import logging

import streamlit as st

from core.checkin_store import default_store
from core.session import AppSession, Screen
from core.settings import get_log_level
from modules.checkin import render_checkin
from modules.explanation import render_explanation
from modules.history import render_history
from modules.insight import render_insight
from modules.medical_upload import render_medical_upload
from modules.theme import apply_theme, show_notices
from modules.wearables import render_wearables
from modules.welcome import render_welcome

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

st.set_page_config(page_title="Hormonal Health", page_icon="💗", layout="centered")
apply_theme()

if "app_session" not in st.session_state:
    st.session_state.app_session = AppSession()

session = st.session_state.app_session
store = default_store()

show_notices(session)

if session.screen == Screen.WELCOME:
    render_welcome(session, store)
elif session.screen == Screen.MEDICAL_UPLOAD:
    render_medical_upload(session)
elif session.screen == Screen.WEARABLE_SETUP:
    render_wearables(session)
elif session.screen == Screen.CHECKIN:
    render_checkin(session, store)
elif session.screen == Screen.INSIGHT:
    render_insight(session)
elif session.screen == Screen.EXPLANATION:
    render_explanation(session)
elif session.screen == Screen.HISTORY:
    render_history(session, store)
