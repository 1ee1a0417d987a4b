# tests/test_wearables.py

import pytest

from core.wearables import (
    DEVICES,
    connect_device,
    connected_summary,
    continue_label,
    disconnect_device,
)


def test_catalogue_has_five_devices():
    assert [d.id for d in DEVICES] == [
        "apple-health",
        "oura-ring",
        "fitbit",
        "garmin",
        "samsung-health",
    ]


def test_connect_waits_then_adds_device():
    sleeps = []

    connected, notice = connect_device((), "oura-ring", delay=2.0, sleep=sleeps.append)

    assert connected == ("oura-ring",)
    assert sleeps == [2.0]
    assert notice.title == "Connected successfully!"
    assert "Oura Ring" in notice.description


def test_connect_twice_is_noop():
    sleeps = []

    connected, notice = connect_device(("garmin",), "garmin", sleep=sleeps.append)

    assert connected == ("garmin",)
    assert sleeps == []
    assert notice.title == "Already connected"


def test_disconnect_removes_only_that_device():
    connected, notice = disconnect_device(("fitbit", "garmin"), "fitbit")

    assert connected == ("garmin",)
    assert notice.title == "Disconnected"


def test_unknown_device_raises():
    with pytest.raises(KeyError):
        connect_device((), "pebble", sleep=lambda s: None)


def test_footer_copy():
    assert connected_summary(1) == "1 device connected"
    assert connected_summary(2) == "2 devices connected"
    assert continue_label(0) == "Continue to Daily Check-In"
    assert continue_label(3) == "Continue with Connected Devices"
