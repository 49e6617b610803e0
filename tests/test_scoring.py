"""
Drive percentage and mood table.
"""
import pytest

from scoring import (CONTENT, ENERGIZED, LOW, NEUTRAL, POSITIVE, STRESSED,
                     classify_mood, drive_percent, scaled_int)


# ── scaled_int / drive_percent ────────────────────────────────────────────────

class TestDrivePercent:
    def test_example_value(self):
        assert drive_percent(0.73) == 73

    def test_truncates_not_rounds(self):
        assert drive_percent(0.999) == 99

    def test_decimal_scaling_avoids_float_artefacts(self):
        # 0.57 * 100 == 56.99999999999999 in binary floating point
        assert scaled_int(0.57) == 57
        assert drive_percent(0.29) == 29

    def test_bounds(self):
        assert drive_percent(0) == 0
        assert drive_percent(1) == 100

    def test_clamped_above(self):
        assert drive_percent(1.5) == 100

    def test_clamped_below(self):
        assert drive_percent(-0.2) == 0

    def test_negative_truncates_toward_zero(self):
        assert scaled_int(-0.105) == -10

    def test_non_numeric_rejected(self):
        with pytest.raises(ValueError):
            scaled_int("lots")


# ── classify_mood ─────────────────────────────────────────────────────────────

class TestClassifyMood:
    @pytest.mark.parametrize("valence,arousal,expected", [
        (0.71,  0.61, ENERGIZED),
        (0.70,  0.61, POSITIVE),    # valence must be strictly above 70
        (0.71,  0.60, POSITIVE),    # arousal must be strictly above 60
        (0.51,  0.40, CONTENT),     # arousal <= 40 is inclusive
        (0.51,  0.41, POSITIVE),
        (0.50,  0.20, NEUTRAL),     # valence must be strictly above 50
        (-0.11, 0.61, STRESSED),
        (-0.11, 0.60, LOW),
        (-0.10, 0.90, NEUTRAL),     # valence must be strictly below -10
        (-0.105, 0.90, NEUTRAL),    # -10.5 truncates to -10
        (-0.90, 0.10, LOW),
        (0.0,   0.3,  NEUTRAL),
    ])
    def test_table(self, valence, arousal, expected):
        assert classify_mood(valence, arousal) == expected

    def test_first_match_wins(self):
        # Satisfies both the Energized and Positive rows
        assert classify_mood(0.9, 0.9).label == "Energized"

    def test_mood_fields(self):
        m = classify_mood(0.8, 0.2)
        assert (m.label, m.emoji, m.color) == ("Content", "😌", "#6366f1")

    def test_total_over_a_grid(self):
        labels = {"Energized", "Content", "Positive", "Stressed", "Low", "Neutral"}
        for v in range(-100, 101, 5):
            for a in range(0, 101, 5):
                assert classify_mood(v / 100, a / 100).label in labels
