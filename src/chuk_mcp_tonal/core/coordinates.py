"""
Coordinate primitives - the line-of-fifths algebra.

Pitch classes, notes and intervals share one numeric encoding:
- PitchClassCoordinates: position on the line of fifths (octave-agnostic)
- NoteCoordinates: fifths plus octaves (an absolute pitch)
- IntervalCoordinates: fifths, octaves and a direction (a signed displacement)

PitchInfo is the (step, alteration, octave, direction) view of the same value.
encode() and decode() convert between the two losslessly; every note and
interval operation funnels through this pair.
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_tonal.constants import (
    FIFTHS,
    FIFTHS_TO_STEPS,
    LETTERS,
    MIDI_MAX,
    MIDI_MIN,
    SIZES,
    STEPS_TO_OCTS,
    Direction,
)


@dataclass(frozen=True)
class PitchClassCoordinates:
    """Coordinates of a pitch class: fifths from C."""

    fifths: int


@dataclass(frozen=True)
class NoteCoordinates:
    """Coordinates of a note: fifths from C plus octave offset."""

    fifths: int
    octaves: int


@dataclass(frozen=True)
class IntervalCoordinates:
    """
    Coordinates of an interval.

    Fifths and octaves are signed: a descending interval stores the negated
    coordinates of its ascending counterpart.
    """

    fifths: int
    octaves: int
    direction: Direction = Direction.ASCENDING


Coordinates = PitchClassCoordinates | NoteCoordinates | IntervalCoordinates


@dataclass(frozen=True)
class PitchInfo:
    """
    A pitch as step, alteration, octave and direction.

    step is 0-6 (C to B). alt is signed semitones: +1 = sharp, -1 = flat.
    Which optional fields are present decides what the pitch is:
    - pitch class: no oct, no dir
    - note: oct, no dir
    - interval: oct and dir

    Immutable and hashable.
    """

    step: int
    alt: int
    oct: int | None = None
    dir: Direction | None = None

    @property
    def name(self) -> str:
        """Note-style name: letter, accidentals and octave if present."""
        if not 0 <= self.step <= 6:
            return ""
        accidentals = "b" * -self.alt if self.alt < 0 else "#" * self.alt
        pitch_class = LETTERS[self.step] + accidentals
        return pitch_class if self.oct is None else f"{pitch_class}{self.oct}"

    @property
    def chroma(self) -> int:
        """Semitone residue 0-11, ignoring octave and direction."""
        return (SIZES[self.step] + self.alt + 120) % 12

    @property
    def height(self) -> int:
        """
        Signed absolute semitone position.

        Pitch classes sit 100 octaves down so they sort below every note.
        """
        direction = Direction.ASCENDING if self.dir is None else self.dir
        octave = -100 if self.oct is None else self.oct
        return direction * (SIZES[self.step] + self.alt + 12 * octave)

    @property
    def midi(self) -> int | None:
        """MIDI number, or None for pitch classes and out-of-range notes."""
        if self.oct is None:
            return None
        value = self.height + 12
        return value if MIDI_MIN <= value <= MIDI_MAX else None

    def to_coordinates(self) -> Coordinates:
        """Encode this pitch as coordinates."""
        return encode(self)

    def __str__(self) -> str:
        return self.name


def _unaltered(fifths: int) -> int:
    """Index into FIFTHS_TO_STEPS of the natural letter a fifths value belongs to."""
    return (fifths + 1) % 7


def encode(pitch: PitchInfo) -> Coordinates:
    """
    Get the coordinates of a pitch.

    Args:
        pitch: The pitch to encode

    Returns:
        PitchClassCoordinates if the pitch has no octave,
        IntervalCoordinates if it has a direction, NoteCoordinates otherwise

    Example:
        encode(PitchInfo(step=5, alt=0, oct=4))  # NoteCoordinates(fifths=3, octaves=3)
    """
    fifths = FIFTHS[pitch.step] + 7 * pitch.alt
    if pitch.oct is None:
        direction = Direction.ASCENDING if pitch.dir is None else pitch.dir
        return PitchClassCoordinates(fifths=direction * fifths)

    octaves = pitch.oct - STEPS_TO_OCTS[pitch.step] - 4 * pitch.alt
    if pitch.dir is not None:
        return IntervalCoordinates(
            fifths=pitch.dir * fifths,
            octaves=pitch.dir * octaves,
            direction=pitch.dir,
        )
    return NoteCoordinates(fifths=fifths, octaves=octaves)


def decode(coord: Coordinates) -> PitchInfo:
    """
    Get the pitch of a coordinates value.

    Interval coordinates are unsigned first, so that
    decode(encode(p)) == p holds for descending intervals too.

    Raises:
        TypeError: If coord is not one of the three coordinate variants
    """
    if isinstance(coord, IntervalCoordinates):
        direction: Direction | None = coord.direction
        fifths = coord.direction * coord.fifths
        octaves: int | None = coord.direction * coord.octaves
    elif isinstance(coord, NoteCoordinates):
        direction = None
        fifths = coord.fifths
        octaves = coord.octaves
    elif isinstance(coord, PitchClassCoordinates):
        direction = None
        fifths = coord.fifths
        octaves = None
    else:
        raise TypeError(f"Unknown coordinates type: {type(coord).__name__}")

    step = FIFTHS_TO_STEPS[_unaltered(fifths)]
    # Floor division: -8 // 7 == -2, flats must round down
    alt = (fifths + 1) // 7
    if octaves is None:
        return PitchInfo(step=step, alt=alt)

    octave = octaves + 4 * alt + STEPS_TO_OCTS[step]
    return PitchInfo(step=step, alt=alt, oct=octave, dir=direction)
