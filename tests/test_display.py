# tests/test_display.py

from core.display import (
    PHASE_COLORS,
    PHASE_EMOJIS,
    energy_label,
    history_mood_emoji,
    mood_emoji,
    mood_label,
    phase_badge,
    phase_color,
    phase_emoji,
)
from core.models import Phase


def test_every_phase_has_style():
    for phase in Phase:
        assert phase_color(phase) == PHASE_COLORS[phase.value]
        assert phase_emoji(phase) == PHASE_EMOJIS[phase.value]


def test_unknown_labels_use_unknown_style():
    assert phase_emoji("Menstrual") == "❓"
    assert phase_color("") == PHASE_COLORS["Unknown"]


def test_history_badge_is_case_insensitive():
    assert phase_badge("Late Luteal") == phase_badge("late luteal")
    assert phase_badge("Transition") == ("#f3f4f6", "#374151")


def test_mood_and_energy_labels():
    assert [mood_label(m) for m in (3, 4, 6, 7)] == [
        "Low mood", "Neutral", "Neutral", "Great mood!",
    ]
    assert [energy_label(e) for e in (3, 4, 7, 8)] == [
        "Low energy", "Moderate energy", "Moderate energy", "High energy!",
    ]
    assert mood_emoji(1) == "😢"
    assert mood_emoji(10) == "🤗"
    assert history_mood_emoji(2) == "😢"
    assert history_mood_emoji(7) == "😊"
