"""
Interval primitives - interval name parsing and interval arithmetic.

Intervals are named by number and quality, in tonal form ("4P", "-3m")
or shorthand form ("P4", "m-3"). Parsed intervals carry line-of-fifths
coordinates, so addition, subtraction and fifths transposition are integer
arithmetic followed by a decode back to a name.

Every function here is total: an invalid name resolves to NO_INTERVAL and the
operation returns "" (or None for add/subtract).
"""

from __future__ import annotations

from dataclasses import dataclass

from chuk_mcp_tonal.constants import (
    INTERVAL_TYPES,
    NATURAL_INTERVAL_NAMES,
    SEMITONE_NUMBERS,
    SEMITONE_QUALITIES,
    SIZES,
    Direction,
    IntervalType,
)
from chuk_mcp_tonal.core.coordinates import (
    Coordinates,
    IntervalCoordinates,
    NoteCoordinates,
    PitchClassCoordinates,
    PitchInfo,
    decode,
    encode,
)
from chuk_mcp_tonal.core.tokenize import tokenize_interval
from chuk_mcp_tonal.models.descriptors import NO_INTERVAL, IntervalInfo


def _interval_type(step: int) -> IntervalType:
    """Perfectable or majorable family of a simple step (0-6)."""
    return IntervalType.MAJORABLE if INTERVAL_TYPES[step] == "M" else IntervalType.PERFECTABLE


def _quality_fits(interval_type: IntervalType, quality: str) -> bool:
    """P only qualifies perfectable numbers; M and m only majorable ones."""
    if quality == "P":
        return interval_type == IntervalType.PERFECTABLE
    if quality in ("M", "m"):
        return interval_type == IntervalType.MAJORABLE
    return True


def _quality_to_alt(interval_type: IntervalType, quality: str) -> int:
    """
    Semitone alteration implied by a quality.

    Diminished goes one semitone further on majorable intervals:
    a diminished third is a minor third lowered once more.
    """
    if quality in ("M", "P"):
        return 0
    if quality == "m":
        return -1
    if quality.startswith("A"):
        return len(quality)
    if interval_type == IntervalType.PERFECTABLE:
        return -len(quality)
    return -(len(quality) + 1)


def _alt_to_quality(interval_type: IntervalType, alt: int) -> str:
    """Quality for an alteration. Inverse of _quality_to_alt."""
    if alt == 0:
        return "M" if interval_type == IntervalType.MAJORABLE else "P"
    if alt == -1 and interval_type == IntervalType.MAJORABLE:
        return "m"
    if alt > 0:
        return "A" * alt
    if interval_type == IntervalType.PERFECTABLE:
        return "d" * -alt
    return "d" * -(alt + 1)


def parse(interval_name: str) -> IntervalInfo:
    """
    Parse an interval name.

    Args:
        interval_name: Interval in tonal ("5P") or shorthand ("P5") form

    Returns:
        The parsed IntervalInfo, or NO_INTERVAL if the name does not match
        either grammar, has number 0, or pairs a quality with the wrong
        family (e.g. "3P", "5M")
    """
    if not isinstance(interval_name, str):
        return NO_INTERVAL

    num_str, quality = tokenize_interval(interval_name)
    if not num_str:
        return NO_INTERVAL

    num = int(num_str)
    if num == 0:
        return NO_INTERVAL

    step = (abs(num) - 1) % 7
    interval_type = _interval_type(step)
    if not _quality_fits(interval_type, quality):
        return NO_INTERVAL

    direction = Direction.DESCENDING if num < 0 else Direction.ASCENDING
    alt = _quality_to_alt(interval_type, quality)
    octave = (abs(num) - 1) // 7
    coord = encode(PitchInfo(step=step, alt=alt, oct=octave, dir=direction))

    return IntervalInfo(
        name=f"{num}{quality}",
        num=num,
        q=quality,
        type=interval_type,
        step=step,
        alt=alt,
        dir=direction,
        simple=num if abs(num) == 8 else direction * (step + 1),
        semitones=direction * (SIZES[step] + alt + 12 * octave),
        chroma=(direction * (SIZES[step] + alt)) % 12,
        coord=coord,
        oct=octave,
    )


def pitch_name(pitch: PitchInfo) -> str:
    """
    Interval name of a pitch with octave and direction.

    Returns "" for pitches that are not intervals.

    Example:
        pitch_name(PitchInfo(step=4, alt=0, oct=0, dir=Direction.DESCENDING))  # "-5P"
    """
    if pitch.dir is None or pitch.oct is None or not 0 <= pitch.step <= 6:
        return ""

    num = pitch.step + 1 + 7 * pitch.oct
    # Descending pitch-class unison: there is no 0th degree
    if num == 0:
        num = pitch.step + 1
    sign = "-" if pitch.dir < 0 else ""
    return f"{sign}{num}{_alt_to_quality(_interval_type(pitch.step), pitch.alt)}"


def get(src: str | PitchInfo | IntervalInfo) -> IntervalInfo:
    """
    Get the properties of an interval.

    Args:
        src: An interval name, an interval PitchInfo, or an IntervalInfo
            (returned unchanged)

    Returns:
        The IntervalInfo, or NO_INTERVAL if invalid

    Example:
        get("P4").name       # "4P"
        get("P4").semitones  # 5
        get("3P").empty      # True
    """
    if isinstance(src, IntervalInfo):
        return src
    if isinstance(src, PitchInfo):
        return parse(pitch_name(src))
    return parse(src)


def name(interval_name: str) -> str:
    """Normalized interval name ("P4" -> "4P"), "" if invalid."""
    return get(interval_name).name


def num(interval_name: str) -> int:
    """Interval number ("4P" -> 4), 0 if invalid."""
    return get(interval_name).num


def quality(interval_name: str) -> str:
    """Interval quality ("4P" -> "P"), "" if invalid."""
    return get(interval_name).q


def semitones(interval_name: str) -> int:
    """Interval size in semitones ("P4" -> 5), 0 if invalid."""
    return get(interval_name).semitones


def names() -> list[str]:
    """The natural intervals from C: 1P 2M 3M 4P 5P 6m 7m."""
    return list(NATURAL_INTERVAL_NAMES)


def coord_to_interval(coord: Coordinates, force_descending: bool = False) -> IntervalInfo:
    """
    Get the interval of a signed coordinate.

    The direction is derived from the coordinate itself: descending when the
    position 7 * fifths + 12 * octaves is negative (or when forced), so it is
    never inherited from the operands that produced it.
    """
    fifths = coord.fifths
    octaves = 0 if isinstance(coord, PitchClassCoordinates) else coord.octaves
    descending = force_descending or fifths * 7 + octaves * 12 < 0
    direction = Direction.DESCENDING if descending else Direction.ASCENDING
    return get(decode(IntervalCoordinates(fifths=fifths, octaves=octaves, direction=direction)))


def simplify(interval_name: str) -> str:
    """
    Reduce a compound interval to a simple one. Octaves stay octaves.

    Example:
        simplify("9M")   # "2M"
        simplify("-9M")  # "-2M"
        simplify("8P")   # "8P"
        simplify("15P")  # "1P"
    """
    interval = get(interval_name)
    return "" if interval.empty else f"{interval.simple}{interval.q}"


def invert(interval_name: str) -> str:
    """
    Get the inversion of an interval, keeping octaves and direction.

    Example:
        invert("3m")  # "6M"
        invert("2M")  # "7m"
        invert("9M")  # "14m"
    """
    interval = get(interval_name)
    if interval.empty:
        return ""

    step = (7 - interval.step) % 7
    if interval.type == IntervalType.PERFECTABLE:
        alt = -interval.alt
    else:
        alt = -(interval.alt + 1)
    return get(PitchInfo(step=step, alt=alt, oct=interval.oct, dir=interval.dir)).name


def from_semitones(semitone_count: int) -> str:
    """
    Get an interval name from a number of semitones.

    Several names share a size, so the spelling is canonical, not unique:
    6 semitones is always "5d", never "4A".

    Example:
        from_semitones(7)   # "5P"
        from_semitones(-7)  # "-5P"
        from_semitones(18)  # "12d"
    """
    sign = -1 if semitone_count < 0 else 1
    octaves, chroma = divmod(abs(semitone_count), 12)
    return f"{sign * (SEMITONE_NUMBERS[chroma] + 7 * octaves)}{SEMITONE_QUALITIES[chroma]}"


def _combine(first: str, second: str, sign: int) -> str | None:
    """Add (sign=1) or subtract (sign=-1) the coordinates of two intervals."""
    a = get(first)
    b = get(second)
    if a.empty or b.empty or a.coord is None or b.coord is None:
        return None

    combined = NoteCoordinates(
        fifths=a.coord.fifths + sign * b.coord.fifths,
        octaves=a.coord.octaves + sign * b.coord.octaves,
    )
    return coord_to_interval(combined).name


def add(first: str, second: str) -> str | None:
    """
    Add two intervals.

    Returns:
        The sum, or None if either interval is invalid

    Example:
        add("3m", "5P")  # "7m"
        add("5P", "4P")  # "8P"
    """
    return _combine(first, second, 1)


def subtract(minuend: str, subtrahend: str) -> str | None:
    """
    Subtract an interval from another.

    Returns:
        The difference, or None if either interval is invalid

    Example:
        subtract("5P", "3M")  # "3m"
        subtract("3M", "5P")  # "-3m"
    """
    return _combine(minuend, subtrahend, -1)


@dataclass(frozen=True)
class AddTo:
    """
    An interval waiting for a second operand.

    Example:
        [AddTo("5P")(n) for n in ["1P", "2M", "3M"]]  # ["5P", "6M", "7M"]
    """

    interval: str

    def __call__(self, other: str) -> str | None:
        return add(self.interval, other)


def transpose_fifths(interval_name: str, fifths: int) -> str:
    """
    Move an interval along the line of fifths, keeping its octave coordinate.

    The direction is re-derived, so shifting through zero flips it.

    Example:
        transpose_fifths("4P", 1)   # "8P"
        transpose_fifths("1P", 2)   # "9M"
        transpose_fifths("1P", -1)  # "-5P"
    """
    interval = get(interval_name)
    if interval.empty or interval.coord is None:
        return ""

    shifted = NoteCoordinates(
        fifths=interval.coord.fifths + fifths,
        octaves=interval.coord.octaves,
    )
    return coord_to_interval(shifted).name
