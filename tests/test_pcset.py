"""
Tests for pitch class sets.
"""

import pytest

from chuk_mcp_tonal.core.pcset import (
    NearestPitch,
    ScaleDegrees,
    ScaleSteps,
    chroma,
    pcset,
    pcset_degrees,
    pcset_nearest,
    pcset_steps,
)

MAJOR = "101011010101"


class TestPcset:
    """Tests for chroma() and pcset()."""

    def test_chroma(self) -> None:
        """Chroma is MIDI mod 12."""
        assert chroma(60) == 0
        assert chroma(61) == 1
        assert chroma(71) == 11

    def test_from_chroma_string(self) -> None:
        """Indices of '1' characters."""
        assert pcset("100100100101") == (0, 3, 6, 9, 11)

    def test_from_short_string(self) -> None:
        """Short strings use the available prefix, long ones the first 12."""
        assert pcset("101") == (0, 2)
        assert pcset("0000000000011111") == (11,)

    def test_from_midi(self) -> None:
        """Distinct chromas, ascending."""
        assert pcset([62, 63, 60, 65, 70, 72]) == (0, 2, 3, 5, 10)

    def test_empty(self) -> None:
        """Empty input gives an empty set."""
        assert pcset([]) == ()
        assert pcset("") == ()


class TestNearest:
    """Tests for NearestPitch and pcset_nearest()."""

    def test_find_nearest_upwards(self) -> None:
        """Ties resolve upward."""
        nearest = pcset_nearest([0, 5, 7])
        assert [nearest(m) for m in range(13)] == [0, 0, 0, 5, 5, 5, 7, 7, 7, 7, 12, 12, 12]

    def test_chromatic_to_minor_pentatonic(self) -> None:
        """Snap a chromatic run to C minor pentatonic."""
        nearest = pcset_nearest("100101010010")
        assert [nearest(m) for m in range(36, 48)] == [
            36, 36, 39, 39, 41, 41, 43, 43, 43, 46, 46, 48,
        ]  # fmt: skip

    def test_chromatic_to_half_octave(self) -> None:
        """Snap a chromatic run to a tritone set."""
        nearest = pcset_nearest("100000100000")
        assert [nearest(m) for m in range(36, 48)] == [
            36, 36, 36, 42, 42, 42, 42, 42, 42, 48, 48, 48,
        ]  # fmt: skip

    def test_empty_pcset(self) -> None:
        """An empty set has no nearest pitch."""
        nearest = pcset_nearest([])
        assert [nearest(m) for m in (10, 30, 40)] == [None, None, None]

    def test_value_object(self) -> None:
        """NearestPitch compares by value."""
        assert pcset_nearest([60, 64, 67]) == NearestPitch((0, 4, 7))


class TestSteps:
    """Tests for ScaleSteps and pcset_steps()."""

    def test_major_from_c4(self) -> None:
        """Step 0 is the tonic, positive steps walk up."""
        steps = pcset_steps(MAJOR, 60)
        assert [steps(s) for s in range(8)] == [60, 62, 64, 65, 67, 69, 71, 72]

    def test_negative_steps(self) -> None:
        """Negative steps walk down, wrapping into the octave below."""
        steps = pcset_steps(MAJOR, 60)
        assert [steps(s) for s in range(-1, -9, -1)] == [59, 57, 55, 53, 52, 50, 48, 47]

    def test_relative_to_tonic(self) -> None:
        """The set is read relative to the tonic."""
        steps = ScaleSteps((0, 2, 4, 5, 7, 9, 11), tonic=62)
        assert steps(2) == 66

    def test_empty(self) -> None:
        """An empty set has no steps."""
        assert pcset_steps([], 60)(3) is None


class TestDegrees:
    """Tests for ScaleDegrees and pcset_degrees()."""

    def test_positive_degrees(self) -> None:
        """Degree 1 is the tonic."""
        degrees = pcset_degrees(MAJOR, 60)
        assert [degrees(d) for d in range(1, 9)] == [60, 62, 64, 65, 67, 69, 71, 72]

    def test_zero_degree(self) -> None:
        """There is no degree 0."""
        assert pcset_degrees(MAJOR, 60)(0) is None

    def test_negative_degrees(self) -> None:
        """Degree -1 is one step below the tonic."""
        degrees = ScaleDegrees((0, 2, 4, 5, 7, 9, 11), tonic=60)
        assert [degrees(d) for d in (-1, -2, -7, -8)] == [59, 57, 48, 47]

    @pytest.mark.parametrize("degree", [1, 2, 5, 9, -3])
    def test_matches_steps(self, degree: int) -> None:
        """Degrees are steps shifted by one on the positive side."""
        degrees = pcset_degrees(MAJOR, 57)
        steps = pcset_steps(MAJOR, 57)
        expected = steps(degree - 1 if degree > 0 else degree)
        assert degrees(degree) == expected
