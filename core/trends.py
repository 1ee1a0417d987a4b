# core/trends.py
"""
History shaped for display.
Input is what CheckInStore.list_entries() yields (most recent first).
"""

from typing import Iterable, Tuple

import pandas as pd

from core.models import HistoryEntry
from utils.dates import short_day

HISTORY_COLUMNS = ["Date", "Mood", "Energy", "Sleep", "Phase", "Confidence"]


def averages(entries: Iterable[HistoryEntry]) -> Tuple[float, float]:
    """(mean mood, mean energy); 0.0 for both when there are no entries."""
    entries = list(entries)
    if not entries:
        return 0.0, 0.0
    return (
        sum(e.mood for e in entries) / len(entries),
        sum(e.energy for e in entries) / len(entries),
    )


def trend_frame(entries: Iterable[HistoryEntry], limit: int = 5) -> pd.DataFrame:
    """
    Most recent `limit` entries, oldest first, indexed by day label.
    """
    recent = list(entries)[:limit][::-1]

    df = pd.DataFrame(
        [{"Day": short_day(e.date), "Mood": e.mood, "Energy": e.energy} for e in recent],
        columns=["Day", "Mood", "Energy"],
    )
    return df.set_index("Day")


def history_frame(entries: Iterable[HistoryEntry]) -> pd.DataFrame:
    rows = [
        {
            "Date": short_day(e.date),
            "Mood": e.mood,
            "Energy": e.energy,
            "Sleep": e.sleep.value.capitalize(),
            "Phase": e.phase_label,
            "Confidence": f"{e.confidence}%",
        }
        for e in entries
    ]
    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)
