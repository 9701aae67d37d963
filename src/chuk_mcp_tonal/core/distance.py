"""
Distance primitives - the bridge between notes and intervals.

transpose() adds an interval's coordinates to a note's coordinates.
distance() subtracts two notes' coordinates and names the resulting interval.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_tonal.core import interval as _interval
from chuk_mcp_tonal.core import note as _note
from chuk_mcp_tonal.core.coordinates import (
    NoteCoordinates,
    PitchClassCoordinates,
    decode,
)
from chuk_mcp_tonal.models.descriptors import NoteInfo


def transpose(note_name: str | NoteInfo, interval_name: str) -> str:
    """
    Transpose a note by an interval.

    Pitch classes only move along the line of fifths; notes also move
    by octaves.

    Args:
        note_name: The note or pitch class to transpose
        interval_name: The interval, in tonal or shorthand form

    Returns:
        The transposed note name, or "" if either name is invalid

    Example:
        transpose("D", "3M")    # "F#"
        transpose("C4", "-5P")  # "F3"
        transpose("E4", "m2")   # "F4"
    """
    note = _note.get(note_name)
    ivl = _interval.get(interval_name)
    if note.empty or ivl.empty or note.coord is None or ivl.coord is None:
        return ""

    coord = note.coord
    if isinstance(coord, NoteCoordinates):
        moved: NoteCoordinates | PitchClassCoordinates = NoteCoordinates(
            fifths=coord.fifths + ivl.coord.fifths,
            octaves=coord.octaves + ivl.coord.octaves,
        )
    else:
        moved = PitchClassCoordinates(fifths=coord.fifths + ivl.coord.fifths)
    return decode(moved).name


def distance(from_note: str | NoteInfo, to_note: str | NoteInfo) -> str:
    """
    Find the interval between two notes.

    Pitch classes are measured as the ascending interval within one octave.
    When both notes sound the same pitch in the same octave but the first has
    the higher letter (Dbb4 to C4), the interval is reported as descending.

    Args:
        from_note: The note to measure from
        to_note: The note to measure to

    Returns:
        The interval name, or "" if either note is invalid

    Example:
        distance("C4", "G4")  # "5P"
        distance("C", "D")    # "2M"
        distance("G4", "C4")  # "-5P"
    """
    start = _note.get(from_note)
    end = _note.get(to_note)
    if start.empty or end.empty or start.coord is None or end.coord is None:
        return ""

    fifths = end.coord.fifths - start.coord.fifths
    if isinstance(start.coord, NoteCoordinates) and isinstance(end.coord, NoteCoordinates):
        octaves = end.coord.octaves - start.coord.octaves
    else:
        octaves = -(fifths * 7 // 12)

    force_descending = (
        end.height == start.height
        and end.midi is not None
        and start.octave == end.octave
        and start.step > end.step
    )
    return _interval.coord_to_interval(
        NoteCoordinates(fifths=fifths, octaves=octaves), force_descending
    ).name


@dataclass(frozen=True)
class TransposeBy:
    """
    A fixed interval to transpose any note by.

    Example:
        up_fifth = TransposeBy("5P")
        up_fifth("C")  # "G"
    """

    interval: str

    def __call__(self, note_name: str) -> str:
        return transpose(note_name, self.interval)


@dataclass(frozen=True)
class TransposeFrom:
    """
    A fixed note to transpose by any interval.

    Example:
        from_c = TransposeFrom("C")
        from_c("5P")  # "G"
    """

    note: str

    def __call__(self, interval_name: str) -> str:
        return transpose(self.note, interval_name)
