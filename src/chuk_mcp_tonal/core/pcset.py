"""
Pitch class set primitives - scale-constrained MIDI queries.

A pcset is an ascending tuple of distinct chromas (0-11). It can be built
from MIDI numbers or from a 12-character membership string ("101011010101").

The query objects are immutable values with a single __call__:
- NearestPitch: snap any MIDI number to the closest member of the set
- ScaleSteps: walk the set from a tonic by step index
- ScaleDegrees: the same walk, 1-indexed like scale degrees
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


def chroma(midi: int) -> int:
    """Pitch class (0-11) of a MIDI number."""
    return midi % 12


def pcset(notes: Sequence[int] | str) -> tuple[int, ...]:
    """
    Build a pitch class set.

    Args:
        notes: MIDI numbers, or a membership string whose index is the
            semitone offset from C (only the first 12 characters count)

    Returns:
        Ascending tuple of distinct chromas

    Example:
        pcset([62, 63, 60, 65, 70, 72])  # (0, 2, 3, 5, 10)
        pcset("100100100101")            # (0, 3, 6, 9, 11)
    """
    if isinstance(notes, str):
        return tuple(index for index, flag in enumerate(notes[:12]) if flag == "1")
    return tuple(sorted({chroma(midi) for midi in notes}))


@dataclass(frozen=True)
class NearestPitch:
    """
    Snap MIDI numbers to the nearest pitch of a set.

    The search widens one semitone at a time and checks above before below,
    so exact ties resolve upward.

    Example:
        nearest = NearestPitch((0, 5, 7))
        nearest(3)   # 5
        nearest(10)  # 12
    """

    pcset: tuple[int, ...]

    def __call__(self, midi: int) -> int | None:
        if not self.pcset:
            return None

        members = frozenset(self.pcset)
        base = chroma(midi)
        for radius in range(12):
            if (base + radius) % 12 in members:
                return midi + radius
            if (base - radius) % 12 in members:
                return midi - radius
        return None


def pcset_nearest(notes: Sequence[int] | str) -> NearestPitch:
    """Nearest-pitch lookup for the pcset of some notes."""
    return NearestPitch(pcset(notes))


@dataclass(frozen=True)
class ScaleSteps:
    """
    Map scale step indices to MIDI numbers.

    The pcset is read relative to the tonic. Step 0 is the first member above
    the tonic (the tonic itself when the set contains 0); every len(pcset)
    steps wraps one octave, in both directions.

    Example:
        major = ScaleSteps((0, 2, 4, 5, 7, 9, 11), tonic=60)
        major(0)   # 60
        major(7)   # 72
        major(-1)  # 59
    """

    pcset: tuple[int, ...]
    tonic: int

    def __call__(self, step: int) -> int | None:
        if not self.pcset:
            return None
        # Floor semantics: step -1 lands in the octave below, not on index -1 of this one
        octaves, index = divmod(step, len(self.pcset))
        return self.pcset[index] + 12 * octaves + self.tonic


def pcset_steps(notes: Sequence[int] | str, tonic: int) -> ScaleSteps:
    """Step lookup for the pcset of some notes, rooted at a tonic."""
    return ScaleSteps(pcset(notes), tonic)


@dataclass(frozen=True)
class ScaleDegrees:
    """
    Map scale degrees to MIDI numbers.

    Degrees count from 1 and have no 0th degree: degree 1 is step 0,
    degree -1 is step -1 (one step below the tonic).

    Example:
        major = ScaleDegrees((0, 2, 4, 5, 7, 9, 11), tonic=60)
        major(1)   # 60
        major(-1)  # 59
        major(0)   # None
    """

    pcset: tuple[int, ...]
    tonic: int

    def __call__(self, degree: int) -> int | None:
        if degree == 0:
            return None
        steps = ScaleSteps(self.pcset, self.tonic)
        return steps(degree - 1 if degree > 0 else degree)


def pcset_degrees(notes: Sequence[int] | str, tonic: int) -> ScaleDegrees:
    """Degree lookup for the pcset of some notes, rooted at a tonic."""
    return ScaleDegrees(pcset(notes), tonic)
