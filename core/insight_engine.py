# core/insight_engine.py
"""
Insight engine for daily check-ins.

Pure logic only.
No UI. No storage. No randomness.

Maps (mood, energy, sleep) to one of five cycle-phase labels using a fixed,
ordered rule table. First matching rule wins, so the order below matters:
the ranges overlap.

The thresholds and copy are product choices, not physiology.
"""

from typing import Dict

from core.models import CheckIn, Insight, Phase, Sleep


# ==================================================
# PHASE COPY
# ==================================================
PHASE_COPY: Dict[Phase, Dict] = {
    Phase.LATE_LUTEAL: {
        "confidence": 85,
        "message": (
            "You may be in your late luteal phase - "
            "PMS symptoms are common right now."
        ),
        "explanation": (
            "Your low mood, energy, and poor sleep align with the hormonal dip "
            "that happens 5-7 days before menstruation. Estrogen and "
            "progesterone are both declining."
        ),
        "recommendations": (
            "Prioritize rest and gentle movement",
            "Eat magnesium-rich foods",
            "Practice stress-reduction techniques",
        ),
    },
    Phase.FOLLICULAR: {
        "confidence": 90,
        "message": (
            "You seem to be in your follicular phase - "
            "energy and mood are naturally elevated!"
        ),
        "explanation": (
            "Rising estrogen levels during this phase boost serotonin and "
            "energy. This is typically the most productive time of your cycle."
        ),
        "recommendations": (
            "Take advantage of high energy for important tasks",
            "Try new activities or challenges",
            "Focus on creative projects",
        ),
    },
    Phase.OVULATION: {
        "confidence": 75,
        "message": (
            "You might be approaching or in ovulation - "
            "feeling confident and social?"
        ),
        "explanation": (
            "Peak estrogen around ovulation enhances mood, energy, and social "
            "confidence. Many women feel most attractive and outgoing during "
            "this time."
        ),
        "recommendations": (
            "Schedule important meetings or social events",
            "Consider high-intensity workouts",
            "Great time for networking",
        ),
    },
    Phase.EARLY_LUTEAL: {
        "confidence": 70,
        "message": (
            "You may be in your early luteal phase - "
            "energy is starting to shift inward."
        ),
        "explanation": (
            "After ovulation, progesterone rises while estrogen drops, leading "
            "to a more introspective, calmer energy state."
        ),
        "recommendations": (
            "Focus on completing existing projects",
            "Prioritize self-care routines",
            "Listen to your body's need for rest",
        ),
    },
    Phase.TRANSITION: {
        "confidence": 60,
        "message": (
            "Your hormones seem to be in transition - "
            "this is completely normal!"
        ),
        "explanation": (
            "Hormonal fluctuations can create mixed signals. Your body is "
            "constantly adjusting throughout your cycle."
        ),
        "recommendations": (
            "Stay hydrated and maintain regular sleep",
            "Track patterns over time for better insights",
            "Be patient with yourself",
        ),
    },
}


# ==================================================
# RULES
# ==================================================
def detect_phase(check_in: CheckIn) -> Phase:
    mood, energy, sleep = check_in.mood, check_in.energy, check_in.sleep

    if mood <= 3 and energy <= 4 and sleep == Sleep.POOR:
        return Phase.LATE_LUTEAL

    if mood >= 7 and energy >= 7 and sleep == Sleep.GOOD:
        return Phase.FOLLICULAR

    if mood >= 6 and energy >= 6:
        return Phase.OVULATION

    if mood <= 5 and energy <= 5:
        return Phase.EARLY_LUTEAL

    return Phase.TRANSITION


def insight_for_phase(phase: Phase) -> Insight:
    """
    Fixed insight copy for a phase.
    """
    copy = PHASE_COPY[phase]
    return Insight(
        phase=phase,
        confidence=copy["confidence"],
        message=copy["message"],
        explanation=copy["explanation"],
        recommendations=copy["recommendations"],
    )


def classify(check_in: CheckIn) -> Insight:
    """
    Derive today's insight from a check-in.
    Total for any valid CheckIn; never raises.
    """
    return insight_for_phase(detect_phase(check_in))
