# modules/wearables.py
import streamlit as st

from core.session import AppSession, Screen, navigate
from core.wearables import (
    DEVICES,
    connect_device,
    connected_summary,
    continue_label,
    disconnect_device,
)
from modules.theme import header


def render_wearables(session: AppSession):
    if st.button("← Back"):
        navigate(session, Screen.MEDICAL_UPLOAD)
        st.rerun()

    header("Connect Your Devices", "Sync wearable data for better insights")

    for device in DEVICES:
        connected = device.id in session.connected_devices

        with st.container(border=True):
            c1, c2 = st.columns([3, 1])
            c1.markdown(f"**{device.icon} {device.name}**")
            c1.caption(device.description)

            if connected:
                c1.caption("Syncing data: " + ", ".join(device.data_types))
                if c2.button("Disconnect", key=f"disconnect_{device.id}"):
                    session.connected_devices, notice = disconnect_device(
                        session.connected_devices, device.id
                    )
                    session.notices.append(notice)
                    st.rerun()
            else:
                if c2.button("Connect", key=f"connect_{device.id}"):
                    with st.spinner(f"Connecting {device.name}..."):
                        session.connected_devices, notice = connect_device(
                            session.connected_devices, device.id
                        )
                    session.notices.append(notice)
                    st.rerun()

    count = len(session.connected_devices)
    if count:
        st.success(f"✅ {connected_summary(count)}")

    if st.button(continue_label(count), type="primary", use_container_width=True):
        navigate(session, Screen.CHECKIN)
        st.rerun()

    if st.button("Skip for now", use_container_width=True):
        navigate(session, Screen.CHECKIN)
        st.rerun()
