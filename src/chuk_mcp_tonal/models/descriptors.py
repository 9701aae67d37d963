"""
Descriptor models - parsed notes and intervals.

Descriptors are immutable values computed from a name string.
Invalid names resolve to an empty descriptor (empty=True) instead of raising,
so callers can compose operations without try/except.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from chuk_mcp_tonal.constants import Direction, IntervalType
from chuk_mcp_tonal.core.coordinates import (
    IntervalCoordinates,
    NoteCoordinates,
    PitchClassCoordinates,
)


class NoteInfo(BaseModel):
    """
    A parsed note or pitch class.

    Two descriptors are the same note iff their names match:
    C#4 and Db4 share chroma and midi but are different notes.
    """

    name: str = Field("", description="Canonical note name (e.g., 'C#4', 'Bb')")
    pitch_class: str = Field("", description="Letter plus accidentals, no octave")
    letter: str = Field("", description="Natural letter (C-B)")
    step: int = Field(0, ge=0, le=6, description="Letter index, C = 0")
    accidentals: str = Field("", description="Accidental string of '#' or 'b'")
    alteration: int = Field(0, description="Sharps minus flats")
    octave: int | None = Field(None, description="Octave, absent for pitch classes")
    chroma: int = Field(0, ge=0, le=11, description="Pitch class as 0-11")
    midi: int | None = Field(None, ge=0, le=127, description="MIDI number if in range")
    height: int = Field(0, description="Absolute semitone ordering key")
    frequency: float | None = Field(None, description="Frequency in Hz (A4 = 440)")
    coord: PitchClassCoordinates | NoteCoordinates | None = Field(
        None, description="Line-of-fifths coordinates"
    )
    empty: bool = Field(False, description="True when the name did not parse")

    model_config = {"frozen": True}


class IntervalInfo(BaseModel):
    """
    A parsed interval.

    The name is always in tonal form (number then quality): "P4" parses to "4P".
    """

    name: str = Field("", description="Canonical interval name (e.g., '4P', '-3m')")
    num: int = Field(0, description="Signed diatonic number, never 0 when valid")
    q: str = Field("", description="Quality (dddd..d, m, M, P, A..AAAA)")
    type: IntervalType | None = Field(None, description="Perfectable or majorable")
    step: int = Field(0, ge=0, le=6, description="Simple diatonic step, (|num| - 1) mod 7")
    alt: int = Field(0, description="Semitone alteration implied by quality")
    dir: Direction = Field(Direction.ASCENDING, description="Ascending or descending")
    simple: int = Field(0, description="Octave-reduced number, sign kept, 8 stays 8")
    semitones: int = Field(0, description="Signed size in semitones")
    chroma: int = Field(0, ge=0, le=11, description="Semitones mod 12")
    coord: IntervalCoordinates | None = Field(None, description="Line-of-fifths coordinates")
    oct: int = Field(0, ge=0, description="Extra octaves beyond the first")
    empty: bool = Field(False, description="True when the name did not parse")

    model_config = {"frozen": True}


NO_NOTE = NoteInfo(empty=True)
NO_INTERVAL = IntervalInfo(empty=True)
