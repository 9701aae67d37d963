"""
Name lexers for notes and intervals.

The lexers only split a string into tokens; they do not validate
musical meaning. A failed match is reported as empty tokens, never raised.
"""

from __future__ import annotations

import re

# letter, accidentals (x = double sharp), optional signed octave, trailing text
NOTE_REGEX = re.compile(r"^([a-gA-G]?)([#b]+|x+|)(-?\d+)?\s*(.*)$", re.ASCII | re.DOTALL)

# tonal notation: number then quality ("4P", "-2m")
INTERVAL_TONAL_REGEX = r"([-+]?\d+)(d{1,4}|m|M|P|A{1,4})"
# shorthand notation: quality then number ("P4", "m-2")
INTERVAL_SHORTHAND_REGEX = r"(AA|A|P|M|m|d|dd)([-+]?\d+)"

INTERVAL_REGEX = re.compile(
    rf"^(?:{INTERVAL_TONAL_REGEX}|{INTERVAL_SHORTHAND_REGEX})$",
    re.ASCII,
)


def tokenize_note(text: str) -> tuple[str, str, str, str]:
    """
    Split a note name into (letter, accidentals, octave, trailing).

    The letter is upper-cased and every "x" is expanded to "##".
    On failure the letter is the empty string.

    Example:
        tokenize_note("fx4")   # ("F", "##", "4", "")
        tokenize_note("C4 hi") # ("C", "", "4", "hi")
    """
    match = NOTE_REGEX.match(text)
    if match is None:
        return ("", "", "", "")

    letter, accidentals, octave, rest = match.groups()
    return (letter.upper(), accidentals.replace("x", "##"), octave or "", rest)


def tokenize_interval(text: str) -> tuple[str, str]:
    """
    Split an interval name into (number, quality).

    Both the tonal ("4P") and the shorthand ("P4") forms are accepted.
    Returns ("", "") when neither grammar matches.
    """
    if not text:
        return ("", "")

    match = INTERVAL_REGEX.match(text)
    if match is None:
        return ("", "")

    tonal_num, tonal_quality, shorthand_quality, shorthand_num = match.groups()
    if tonal_num is not None:
        return (tonal_num, tonal_quality)
    return (shorthand_num, shorthand_quality)
