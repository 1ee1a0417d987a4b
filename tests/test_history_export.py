# tests/test_history_export.py

from datetime import date

from docx import Document

from core.checkin_store import CheckInStore, MemoryStorage, sample_entries
from core.history_exporter import export_history_docx, export_history_pdf, history_lines
from core.insight_engine import classify
from core.models import CheckIn, HistoryEntry, Sleep
from core.trends import averages, history_frame, trend_frame
from utils.dates import short_day


def _store_with(n):
    store = CheckInStore(MemoryStorage())
    for i in range(n):
        check_in = CheckIn(mood=i % 10 + 1, energy=5, sleep=Sleep.OKAY, date=date(2024, 2, i + 1))
        store.append(check_in, classify(check_in))
    return store


def test_trend_frame_is_last_five_oldest_first():
    entries = list(_store_with(7).list_entries())

    df = trend_frame(entries)

    assert list(df.index) == ["Feb 3", "Feb 4", "Feb 5", "Feb 6", "Feb 7"]
    assert list(df["Mood"]) == [3, 4, 5, 6, 7]
    assert list(df.columns) == ["Mood", "Energy"]


def test_history_frame_columns():
    df = history_frame(sample_entries())

    assert list(df.columns) == ["Date", "Mood", "Energy", "Sleep", "Phase", "Confidence"]
    assert df.iloc[0]["Date"] == "Jan 15"
    assert df.iloc[2]["Phase"] == "Late Luteal"


def test_history_frame_shows_unknown_phase_for_entry_without_insight():
    entry = HistoryEntry(
        id="1", mood=4, energy=8, sleep=Sleep.GOOD, date=date(2024, 1, 15),
        timestamp="2024-01-15T10:00:00Z",
    )

    df = history_frame([entry])

    assert df.iloc[0]["Phase"] == "Unknown"
    assert df.iloc[0]["Confidence"] == "0%"
    assert history_lines([entry])[-1].endswith("Unknown (0%)")


def test_averages_match_store_averages():
    store = _store_with(4)

    assert averages(store.list_entries()) == (store.average_mood(), store.average_energy())
    assert averages([]) == (0.0, 0.0)


def test_empty_frames():
    assert trend_frame([]).empty
    assert history_frame([]).empty


def test_history_lines_include_averages():
    lines = history_lines(sample_entries())

    assert "Average mood: 5.7" in lines
    assert "Average energy: 6.7" in lines
    assert lines[-1].startswith("Jan 13 2024")


def test_exports_write_files(tmp_path, monkeypatch):
    monkeypatch.setattr("core.history_exporter.EXPORT_DIR", tmp_path / "exports")

    pdf = export_history_pdf(sample_entries())
    docx_path = export_history_docx(sample_entries())

    assert pdf.exists() and pdf.read_bytes().startswith(b"%PDF")
    assert docx_path.exists()
    texts = [p.text for p in Document(docx_path).paragraphs]
    assert "Check-ins: 3" in texts


def test_short_day():
    assert short_day("2024-01-05") == "Jan 5"
    assert short_day(date(2024, 12, 25)) == "Dec 25"
