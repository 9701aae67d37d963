"""
Constants and enums for the tonal system.

No magic strings - use enums for constrained values.
Tables are tuples so they cannot be mutated at runtime.
"""

from enum import Enum, IntEnum


class Direction(IntEnum):
    """Direction of an interval. The value is the sign applied to coordinates."""

    ASCENDING = 1
    DESCENDING = -1


class IntervalType(str, Enum):
    """
    The two families of diatonic interval numbers.

    Perfectable numbers (1, 4, 5, 8...) are unaltered when "perfect".
    Majorable numbers (2, 3, 6, 7...) are unaltered when "major".
    """

    PERFECTABLE = "perfectable"
    MAJORABLE = "majorable"


# Natural letters, indexed by step (C = 0)
LETTERS = "CDEFGAB"

# Position of each natural letter on the line of fifths (C D E F G A B)
FIFTHS: tuple[int, ...] = (0, 2, 4, -1, 1, 3, 5)

# Octave correction per letter: floor(fifths * 7 / 12)
STEPS_TO_OCTS: tuple[int, ...] = tuple(fifths * 7 // 12 for fifths in FIFTHS)

# Inverse of FIFTHS after shifting by +1 mod 7: F C G D A E B -> steps
FIFTHS_TO_STEPS: tuple[int, ...] = (3, 0, 4, 1, 5, 2, 6)

# Semitones from C of each natural letter (also the size of each unaltered step)
SIZES: tuple[int, ...] = (0, 2, 4, 5, 7, 9, 11)

# Interval family per step: P = perfectable, M = majorable
INTERVAL_TYPES = "PMMPPMM"

# Canonical spelling per semitone class (number and quality)
SEMITONE_NUMBERS: tuple[int, ...] = (1, 2, 2, 3, 3, 4, 5, 5, 6, 6, 7, 7)
SEMITONE_QUALITIES: tuple[str, ...] = ("P", "m", "M", "m", "M", "P", "d", "P", "m", "M", "m", "M")

NATURAL_NOTE_NAMES: tuple[str, ...] = ("C", "D", "E", "F", "G", "A", "B")
NATURAL_INTERVAL_NAMES: tuple[str, ...] = ("1P", "2M", "3M", "4P", "5P", "6m", "7m")

# Display name mappings by chroma
SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")
FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

# MIDI range and tuning
MIDI_MIN = 0
MIDI_MAX = 127
A4_MIDI = 69
DEFAULT_TUNING = 440.0

# Height base for notes without octave: sorts below every real note
PITCH_CLASS_HEIGHT_BASE = -12 * 99


class ErrorMessages:
    """Standardized error messages."""

    INVALID_NOTE = "Invalid note name: '{name}'."
    INVALID_INTERVAL = "Invalid interval name: '{name}'."
    INVALID_MIDI = "Invalid MIDI value: {value}. Must be between 0 and 127."
    INVALID_PCSET = "Invalid pitch class set: '{pcset}'. Expected a 12-character string of 0 and 1."
    NO_RESULT = "No result for {operation} of '{first}' and '{second}'."
