# core/history_exporter.py
"""
History Exporter
Exports check-in history to PDF and DOCX.

PDF  -> reportlab
DOCX -> python-docx
"""

from datetime import datetime
from pathlib import Path
from typing import Iterable, List

from docx import Document
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer

from core import settings
from core.models import HistoryEntry
from core.trends import averages
from utils.dates import short_day

# ==================================================
# PATHS
# ==================================================
EXPORT_DIR = settings.get_data_dir() / "exports"


def _timestamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def _export_path(suffix: str) -> Path:
    EXPORT_DIR.mkdir(parents=True, exist_ok=True)
    return EXPORT_DIR / f"health_history_{_timestamp()}.{suffix}"


def history_lines(entries: Iterable[HistoryEntry]) -> List[str]:
    """
    Plain-text report: averages first, then one line per entry.
    """
    entries = list(entries)
    avg_mood, avg_energy = averages(entries)

    lines = [
        "Your Health Trends",
        f"Check-ins: {len(entries)}",
        f"Average mood: {avg_mood:.1f}",
        f"Average energy: {avg_energy:.1f}",
        "",
    ]

    for e in entries:
        lines.append(
            f"{short_day(e.date)} {e.date.year} - mood {e.mood}, energy {e.energy}, "
            f"sleep {e.sleep.value} - {e.phase_label} "
            f"({e.confidence}%)"
        )

    return lines


# ==================================================
# PDF EXPORT
# ==================================================
def export_history_pdf(entries: Iterable[HistoryEntry]) -> Path:
    """
    Export history to PDF.
    Returns generated file path.
    """
    path = _export_path("pdf")

    styles = getSampleStyleSheet()
    lines = history_lines(entries)
    story = [Paragraph(lines[0], styles["Title"])]

    for line in lines[1:]:
        if line.strip():
            story.append(Paragraph(line, styles["Normal"]))
        story.append(Spacer(1, 6))

    doc = SimpleDocTemplate(
        str(path),
        pagesize=A4,
        rightMargin=36,
        leftMargin=36,
        topMargin=36,
        bottomMargin=36,
    )

    doc.build(story)
    return path


# ==================================================
# DOCX EXPORT
# ==================================================
def export_history_docx(entries: Iterable[HistoryEntry]) -> Path:
    path = _export_path("docx")
    lines = history_lines(entries)

    doc = Document()
    doc.add_heading(lines[0], level=1)

    for line in lines[1:]:
        doc.add_paragraph(line)

    doc.save(path)
    return path
