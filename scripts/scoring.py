# scripts/scoring.py
# Drive percentage and the server-side mood table.

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class Mood:
    label: str
    emoji: str
    color: str

ENERGIZED = Mood("Energized", "😄", "#10b981")
CONTENT   = Mood("Content",   "😌", "#6366f1")
POSITIVE  = Mood("Positive",  "🙂", "#8b5cf6")
STRESSED  = Mood("Stressed",  "😤", "#ef4444")
LOW       = Mood("Low",       "😔", "#64748b")
NEUTRAL   = Mood("Neutral",   "😐", "#94a3b8")

# No emotional state on disk
UNKNOWN_MOOD = Mood("Unknown", "🧠", "#8b5cf6")


def scaled_int(value) -> int:
    """
    value * 100 truncated toward zero, computed in decimal so that 0.57 gives 57
    rather than 56 (binary 0.57 * 100 == 56.99999999999999).
    """
    try:
        return int(Decimal(str(value)) * 100)
    except (InvalidOperation, ValueError, TypeError, OverflowError):
        raise ValueError(f"not a number: {value!r}") from None

def drive_percent(drive) -> int:
    """Drive level as an integer percentage, clamped to 0..100."""
    return max(0, min(100, scaled_int(drive)))

def classify_mood(valence, arousal) -> Mood:
    """
    Six-way mood table on the x100 integer values, first match wins.
    Independent of the quadrant highlight the page script computes.
    """
    v = scaled_int(valence)
    a = scaled_int(arousal)
    if v > 70 and a > 60:
        return ENERGIZED
    if v > 50 and a <= 40:
        return CONTENT
    if v > 50:
        return POSITIVE
    if v < -10 and a > 60:
        return STRESSED
    if v < -10:
        return LOW
    return NEUTRAL
