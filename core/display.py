# core/display.py
"""
Lookup tables shared by the screens.
Anything not in a table falls back to the "Unknown" style.
"""

from typing import Dict, Tuple

from core.models import UNKNOWN_PHASE, Sleep

PHASE_COLORS: Dict[str, Tuple[str, str]] = {
    "Follicular": ("#4ade80", "#10b981"),
    "Ovulation": ("#f472b6", "#f43f5e"),
    "Early Luteal": ("#fb923c", "#f59e0b"),
    "Late Luteal": ("#c084fc", "#8b5cf6"),
    "Transition": ("#60a5fa", "#6366f1"),
    UNKNOWN_PHASE: ("#9ca3af", "#64748b"),
}

PHASE_EMOJIS: Dict[str, str] = {
    "Follicular": "🌱",
    "Ovulation": "🌸",
    "Early Luteal": "🍂",
    "Late Luteal": "🌑",
    "Transition": "🌀",
    UNKNOWN_PHASE: "❓",
}

# History badges (background, text); keyed lower-case
PHASE_BADGES: Dict[str, Tuple[str, str]] = {
    "menstrual": ("#fee2e2", "#b91c1c"),
    "follicular": ("#dcfce7", "#15803d"),
    "ovulation": ("#fef9c3", "#a16207"),
    "early luteal": ("#dbeafe", "#1d4ed8"),
    "late luteal": ("#f3e8ff", "#7e22ce"),
}
DEFAULT_BADGE = ("#f3f4f6", "#374151")

MOOD_EMOJIS = ("😢", "😔", "😐", "🙂", "😊", "😄", "🤩", "🥰", "😍", "🤗")

SLEEP_OPTIONS = (
    (Sleep.POOR, "😴", "Poor", "Restless, tired"),
    (Sleep.OKAY, "😌", "Okay", "Some rest"),
    (Sleep.GOOD, "😊", "Good", "Well-rested"),
)


def _phase_key(phase) -> str:
    return getattr(phase, "value", phase)


def phase_color(phase) -> Tuple[str, str]:
    return PHASE_COLORS.get(_phase_key(phase), PHASE_COLORS[UNKNOWN_PHASE])


def phase_emoji(phase) -> str:
    return PHASE_EMOJIS.get(_phase_key(phase), PHASE_EMOJIS[UNKNOWN_PHASE])


def phase_badge(phase) -> Tuple[str, str]:
    return PHASE_BADGES.get(str(_phase_key(phase)).lower(), DEFAULT_BADGE)


def mood_emoji(mood: int) -> str:
    """Emoji for a 1-10 mood, as picked on the check-in screen."""
    index = min(max(mood, 1), len(MOOD_EMOJIS)) - 1
    return MOOD_EMOJIS[index]


def history_mood_emoji(mood: int) -> str:
    if mood <= 2:
        return "😢"
    if mood <= 4:
        return "😐"
    if mood <= 6:
        return "🙂"
    return "😊"


def mood_label(mood: int) -> str:
    if mood <= 3:
        return "Low mood"
    if mood <= 6:
        return "Neutral"
    return "Great mood!"


def energy_label(energy: int) -> str:
    if energy <= 3:
        return "Low energy"
    if energy <= 7:
        return "Moderate energy"
    return "High energy!"
