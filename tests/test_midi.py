"""
Tests for MIDI helpers.
"""

import math

import pytest

from chuk_mcp_tonal.core.midi import (
    freq_to_midi,
    is_midi,
    midi_to_freq,
    midi_to_note_name,
    to_midi,
)

FLATS = "C4 Db4 D4 Eb4 E4 F4 Gb4 G4 Ab4 A4 Bb4 B4 C5".split(" ")
SHARPS = "C4 C#4 D4 D#4 E4 F4 F#4 G4 G#4 A4 A#4 B4 C5".split(" ")
PITCH_CLASSES = "C Db D Eb E F Gb G Ab A Bb B C".split(" ")


class TestToMidi:
    """Tests for to_midi()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (100, 100),
            ("C4", 60),
            ("60", 60),
            (0, 0),
            ("0", 0),
            (-1, None),
            (128, None),
            ("blah", None),
        ],
    )
    def test_values(self, value: int | str, expected: int | None) -> None:
        """Ints, numeric strings and note names."""
        assert to_midi(value) == expected

    def test_floats_round_half_away(self) -> None:
        """Fractional values round half away from zero."""
        assert to_midi(60.4) == 60
        assert to_midi(60.5) == 61
        assert to_midi(127.5) is None

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, None, "", "C", "+-5"])
    def test_invalid(self, value: object) -> None:
        """Non-finite, missing and octave-less values are invalid."""
        assert to_midi(value) is None  # type: ignore[arg-type]

    def test_is_midi(self) -> None:
        """Only integers in 0-127."""
        assert is_midi(0)
        assert is_midi(127)
        assert not is_midi(128)
        assert not is_midi(60.0)


class TestFrequency:
    """Tests for midi_to_freq() and freq_to_midi()."""

    @pytest.mark.parametrize(
        ("freq", "expected", "tolerance"),
        [(220.0, 57.0, 0.001), (261.62, 60.0, 0.02), (261.0, 59.96, 0.05)],
    )
    def test_freq_to_midi(self, freq: float, expected: float, tolerance: float) -> None:
        """Frequencies map to fractional MIDI numbers."""
        assert freq_to_midi(freq) == pytest.approx(expected, abs=tolerance)

    @pytest.mark.parametrize("freq", [0.0, -440.0, math.nan, math.inf])
    def test_freq_to_midi_invalid(self, freq: float) -> None:
        """Non-positive and non-finite frequencies have no MIDI number."""
        assert freq_to_midi(freq) is None

    def test_midi_to_freq(self) -> None:
        """MIDI numbers map to frequencies under a tuning."""
        assert midi_to_freq(60) == pytest.approx(261.6255653005986, abs=0.0001)
        assert midi_to_freq(69, 443.0) == pytest.approx(443.0, abs=0.0001)


class TestMidiToNoteName:
    """Tests for midi_to_note_name()."""

    def test_flats(self) -> None:
        """Default spelling uses flats."""
        assert [midi_to_note_name(m) for m in range(60, 73)] == FLATS

    def test_sharps(self) -> None:
        """sharps=True spells black keys with sharps."""
        assert [midi_to_note_name(m, sharps=True) for m in range(60, 73)] == SHARPS

    def test_pitch_class(self) -> None:
        """pitch_class=True drops the octave."""
        assert [midi_to_note_name(m, pitch_class=True) for m in range(60, 73)] == PITCH_CLASSES

    def test_extremes(self) -> None:
        """MIDI 0 is C-1, 127 is G9."""
        assert midi_to_note_name(0) == "C-1"
        assert midi_to_note_name(127) == "G9"
        assert midi_to_note_name(61.4) == "Db4"

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf, None, -1, 128])
    def test_invalid(self, value: object) -> None:
        """Invalid input gives an empty string."""
        assert midi_to_note_name(value) == ""  # type: ignore[arg-type]
