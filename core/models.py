# core/models.py
"""
Data models for the check-in flow.

CheckIn      -> what the user reports for a day
Insight      -> what the classifier derives from it
HistoryEntry -> what the store keeps
"""

from datetime import date as date_type
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator


class Sleep(str, Enum):
    POOR = "poor"
    OKAY = "okay"
    GOOD = "good"


class Phase(str, Enum):
    FOLLICULAR = "Follicular"
    OVULATION = "Ovulation"
    EARLY_LUTEAL = "Early Luteal"
    LATE_LUTEAL = "Late Luteal"
    TRANSITION = "Transition"


# Display-only label for records whose phase cannot be looked up.
UNKNOWN_PHASE = "Unknown"


class CheckIn(BaseModel):
    """A single day's self-reported mood, energy and sleep."""

    mood: int = Field(..., ge=1, le=10, description="Mood, 1 (low) to 10 (great)")
    energy: int = Field(..., ge=1, le=10, description="Energy, 1 (low) to 10 (high)")
    sleep: Sleep = Field(..., description="Sleep quality last night")
    date: date_type = Field(..., description="Day the check-in applies to")

    model_config = {"frozen": True}


class Insight(BaseModel):
    """Classifier output for one check-in."""

    phase: Phase
    confidence: int = Field(..., ge=0, le=100)
    message: str
    explanation: str
    recommendations: Tuple[str, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}


class HistoryEntry(BaseModel):
    """
    A persisted check-in with its insight.
    Older records may lack a usable insight; those keep `insight=None`
    and display as the Unknown phase with 0% confidence.
    """

    id: str
    mood: int = Field(..., ge=1, le=10)
    energy: int = Field(..., ge=1, le=10)
    sleep: Sleep
    date: date_type
    insight: Optional[Insight] = None
    timestamp: str

    model_config = {"frozen": True}

    @field_validator("insight", mode="wrap")
    @classmethod
    def drop_unreadable_insight(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            return None

    @property
    def phase_label(self) -> str:
        return self.insight.phase.value if self.insight else UNKNOWN_PHASE

    @property
    def confidence(self) -> int:
        return self.insight.confidence if self.insight else 0

    @property
    def check_in(self) -> CheckIn:
        return CheckIn(
            mood=self.mood,
            energy=self.energy,
            sleep=self.sleep,
            date=self.date,
        )


class Notice(BaseModel):
    """Short toast-style message for the UI."""

    title: str
    description: str = ""
    variant: str = "default"  # "default" | "destructive"

    model_config = {"frozen": True}

    @property
    def is_error(self) -> bool:
        return self.variant == "destructive"
