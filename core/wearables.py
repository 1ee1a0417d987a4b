# core/wearables.py
"""
Wearable pairing (mocked).

Nothing talks to a real device: connecting just waits a moment and marks the
device as connected. Connected devices live on the session, not on disk.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from core import settings
from core.models import Notice

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WearableDevice:
    id: str
    name: str
    icon: str
    description: str
    data_types: Tuple[str, ...]


DEVICES: Tuple[WearableDevice, ...] = (
    WearableDevice(
        id="apple-health",
        name="Apple Health",
        icon="📱",
        description="Heart rate, sleep, activity data",
        data_types=("Heart Rate", "Sleep Analysis", "Steps", "Workout Data"),
    ),
    WearableDevice(
        id="oura-ring",
        name="Oura Ring",
        icon="💍",
        description="Sleep, HRV, temperature tracking",
        data_types=("Sleep Score", "HRV", "Body Temperature", "Readiness Score"),
    ),
    WearableDevice(
        id="fitbit",
        name="Fitbit",
        icon="🏃",
        description="Activity, heart rate, sleep data",
        data_types=("Heart Rate", "Sleep Stages", "Activity", "Stress Score"),
    ),
    WearableDevice(
        id="garmin",
        name="Garmin",
        icon="⌚",
        description="Comprehensive health metrics",
        data_types=("Heart Rate", "Sleep", "Stress", "Body Battery"),
    ),
    WearableDevice(
        id="samsung-health",
        name="Samsung Health",
        icon="❤️",
        description="Health and fitness tracking",
        data_types=("Heart Rate", "Sleep", "Steps", "Stress Level"),
    ),
)

_BY_ID: Dict[str, WearableDevice] = {d.id: d for d in DEVICES}


def get_device(device_id: str) -> WearableDevice:
    """Raises KeyError for unknown ids."""
    return _BY_ID[device_id]


def connect_device(
    connected: Tuple[str, ...],
    device_id: str,
    delay: float = settings.PAIRING_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> Tuple[Tuple[str, ...], Notice]:
    """
    Simulate pairing.
    Returns the new connected tuple and a toast notice.
    """
    device = get_device(device_id)

    if device_id in connected:
        return connected, Notice(
            title="Already connected",
            description=f"{device.name} is already syncing your health data.",
        )

    sleep(delay)
    logger.info("Paired %s (simulated)", device.name)

    return connected + (device_id,), Notice(
        title="Connected successfully!",
        description=f"{device.name} is now syncing your health data.",
    )


def disconnect_device(
    connected: Tuple[str, ...],
    device_id: str,
) -> Tuple[Tuple[str, ...], Notice]:
    device = get_device(device_id)
    remaining = tuple(d for d in connected if d != device_id)

    return remaining, Notice(
        title="Disconnected",
        description=f"{device.name} has been disconnected.",
    )


def connected_summary(count: int) -> str:
    return f"{count} device{'s' if count > 1 else ''} connected"


def continue_label(count: int) -> str:
    if count > 0:
        return "Continue with Connected Devices"
    return "Continue to Daily Check-In"
