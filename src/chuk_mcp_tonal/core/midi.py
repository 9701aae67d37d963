"""
MIDI primitives - MIDI numbers, frequencies and note names.

MIDI validity is the closed integer range 0-127. Fractional input is rounded
half away from zero before range-checking; non-finite input is invalid.
Invalid input yields None (numbers) or "" (names), never an exception.
"""

from __future__ import annotations

import math
import re

from chuk_mcp_tonal.constants import (
    A4_MIDI,
    DEFAULT_TUNING,
    FLAT_NAMES,
    LETTERS,
    MIDI_MAX,
    MIDI_MIN,
    SHARP_NAMES,
    SIZES,
)
from chuk_mcp_tonal.core.tokenize import tokenize_note

INTEGER_REGEX = re.compile(r"[-+]?\d+", re.ASCII)


def is_midi(value: object) -> bool:
    """Check if a value is an integer MIDI number (0-127)."""
    return isinstance(value, int) and MIDI_MIN <= value <= MIDI_MAX


def _round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def to_midi(value: int | float | str | None) -> int | None:
    """
    Convert a value to a MIDI number.

    Args:
        value: An int, a float (rounded), a numeric string or a note name
            with octave ("C4")

    Returns:
        The MIDI number, or None if the value is not a valid MIDI note

    Example:
        to_midi(60)      # 60
        to_midi("C4")    # 60
        to_midi(128)     # None
        to_midi("blah")  # None
    """
    if isinstance(value, int):
        return value if is_midi(value) else None

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return to_midi(_round_half_away(value))

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if INTEGER_REGEX.fullmatch(text):
            return to_midi(int(text))

        letter, accidentals, octave, rest = tokenize_note(text)
        if not letter or not octave or rest:
            return None
        alt = accidentals.count("#") - accidentals.count("b")
        return to_midi((int(octave) + 1) * 12 + SIZES[LETTERS.index(letter)] + alt)

    return None


def midi_to_freq(midi: float, tuning: float = DEFAULT_TUNING) -> float:
    """
    Convert a MIDI number to a frequency in Hz.

    Example:
        midi_to_freq(69)         # 440.0
        midi_to_freq(69, 443.0)  # 443.0
    """
    return tuning * 2 ** ((midi - A4_MIDI) / 12)


def freq_to_midi(freq: float, tuning: float = DEFAULT_TUNING) -> float | None:
    """
    Convert a frequency in Hz to a (possibly fractional) MIDI number.

    Returns None for non-positive or non-finite frequencies.

    Example:
        freq_to_midi(220.0)  # 57.0
    """
    if not math.isfinite(freq) or freq <= 0:
        return None
    return A4_MIDI + 12 * math.log2(freq / tuning)


def midi_to_note_name(
    midi: float | None,
    sharps: bool = False,
    pitch_class: bool = False,
) -> str:
    """
    Convert a MIDI number to a note name.

    Args:
        midi: MIDI number (fractional values are rounded)
        sharps: Spell black keys with sharps instead of flats
        pitch_class: Return only the pitch class (no octave)

    Returns:
        The note name, or "" for invalid input

    Example:
        midi_to_note_name(61)               # "Db4"
        midi_to_note_name(61, sharps=True)  # "C#4"
    """
    if midi is None:
        return ""
    if isinstance(midi, float):
        if not math.isfinite(midi):
            return ""
        midi = _round_half_away(midi)
    if not is_midi(midi):
        return ""

    names = SHARP_NAMES if sharps else FLAT_NAMES
    name = names[midi % 12]
    if pitch_class:
        return name
    return f"{name}{midi // 12 - 1}"
