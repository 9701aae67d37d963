"""
Note primitives - note name parsing and spelling operations.

get() parses a name like "C#4", "fx4" or "Bb" into a NoteInfo and memoizes
the result in a NoteCache. Every operation here is total: an invalid name
resolves to NO_NOTE and the operation returns "" or None.
"""

from __future__ import annotations

import logging
import math
import threading
from collections.abc import Callable, Iterable

from chuk_mcp_tonal.constants import (
    LETTERS,
    MIDI_MAX,
    MIDI_MIN,
    NATURAL_NOTE_NAMES,
    PITCH_CLASS_HEIGHT_BASE,
    SIZES,
)
from chuk_mcp_tonal.core.coordinates import (
    NoteCoordinates,
    PitchClassCoordinates,
    PitchInfo,
    decode,
    encode,
)
from chuk_mcp_tonal.core.midi import freq_to_midi, midi_to_freq, midi_to_note_name
from chuk_mcp_tonal.core.tokenize import tokenize_note
from chuk_mcp_tonal.models.descriptors import NO_NOTE, NoteInfo

logger = logging.getLogger(__name__)


class NoteCache:
    """
    Append-only cache of parsed note names.

    Keys are the exact input strings: "c4" and "C4" are cached separately
    even though they parse to the same note. Entries are never invalidated.

    Reads are plain dict lookups. First writes are serialized with a lock and
    setdefault, so two threads parsing the same name concurrently both get
    the single stored value.
    """

    def __init__(self) -> None:
        self._entries: dict[str, NoteInfo] = {}
        self._lock = threading.Lock()

    def get_or_compute(self, name: str, compute: Callable[[str], NoteInfo]) -> NoteInfo:
        """
        Get the cached descriptor for a name, computing and storing it on a miss.

        Args:
            name: The exact note name string
            compute: Parser called on a miss

        Returns:
            The cached descriptor
        """
        cached = self._entries.get(name)
        if cached is not None:
            return cached

        value = compute(name)
        with self._lock:
            stored = self._entries.setdefault(name, value)
        if stored is value:
            logger.debug(f"Cached note {name!r} -> {value.name!r}")
        return stored

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# Process-wide cache, created once at import
NOTE_CACHE = NoteCache()


def _frequency(height: int) -> float | None:
    """Frequency of a note height at the default tuning, None if not representable."""
    try:
        value = midi_to_freq(height)
    except OverflowError:
        return None
    return value if math.isfinite(value) else None


def parse(note_name: str) -> NoteInfo:
    """
    Parse a note name without touching the cache.

    Args:
        note_name: Note name like "C4", "F##", "eb-1", "Gx5"

    Returns:
        The parsed NoteInfo, or NO_NOTE if the name is invalid
    """
    if not isinstance(note_name, str):
        return NO_NOTE

    letter, accidentals, octave_str, rest = tokenize_note(note_name)
    if not letter or rest:
        return NO_NOTE

    step = LETTERS.index(letter)
    offset = SIZES[step]
    alt = accidentals.count("#") - accidentals.count("b")
    octave = int(octave_str) if octave_str else None

    chroma = (offset + alt + 120) % 12
    if octave is None:
        height = (offset + alt) % 12 + PITCH_CLASS_HEIGHT_BASE
    else:
        height = offset + alt + 12 * (octave + 1)
    midi = height if MIDI_MIN <= height <= MIDI_MAX else None
    frequency = None if octave is None else _frequency(height)

    pitch_class = letter + accidentals
    return NoteInfo(
        name=pitch_class + octave_str,
        pitch_class=pitch_class,
        letter=letter,
        step=step,
        accidentals=accidentals,
        alteration=alt,
        octave=octave,
        chroma=chroma,
        midi=midi,
        height=height,
        frequency=frequency,
        coord=encode(PitchInfo(step=step, alt=alt, oct=octave)),
    )


def get(note_name: str | NoteInfo, cache: NoteCache | None = None) -> NoteInfo:
    """
    Get the properties of a note name.

    Args:
        note_name: The note name (a NoteInfo is returned unchanged)
        cache: Cache to use (default: the process-wide NOTE_CACHE)

    Returns:
        The NoteInfo, or NO_NOTE if the name is invalid

    Example:
        get("C4").midi        # 60
        get("fx4").name       # "F##4"
        get("hello").empty    # True
    """
    if isinstance(note_name, NoteInfo):
        return note_name
    if not isinstance(note_name, str):
        return NO_NOTE
    store = NOTE_CACHE if cache is None else cache
    return store.get_or_compute(note_name, parse)


def name(note_name: str) -> str:
    """Normalized note name ("fx4" -> "F##4"), "" if invalid."""
    return get(note_name).name


def pitch_class(note_name: str) -> str:
    """Pitch class of a note ("Ab5" -> "Ab"), "" if invalid."""
    return get(note_name).pitch_class


def accidentals(note_name: str) -> str:
    """Accidentals of a note ("Eb" -> "b")."""
    return get(note_name).accidentals


def octave(note_name: str) -> int | None:
    """Octave of a note, None if absent or invalid."""
    return get(note_name).octave


def midi(note_name: str) -> int | None:
    """MIDI number of a note ("A4" -> 69), None if absent or out of range."""
    return get(note_name).midi


def freq(note_name: str) -> float | None:
    """Frequency of a note in Hz ("A4" -> 440.0), None without octave."""
    return get(note_name).frequency


def chroma(note_name: str) -> int | None:
    """Chroma (0-11) of a note, None if invalid."""
    note = get(note_name)
    return None if note.empty else note.chroma


def from_midi(midi_number: float) -> str:
    """Note name of a MIDI number, flat spelling (61 -> "Db4")."""
    return midi_to_note_name(midi_number)


def from_midi_sharps(midi_number: float) -> str:
    """Note name of a MIDI number, sharp spelling (61 -> "C#4")."""
    return midi_to_note_name(midi_number, sharps=True)


def from_freq(frequency: float) -> str:
    """Nearest note name of a frequency, flat spelling (440.0 -> "A4")."""
    return midi_to_note_name(freq_to_midi(frequency))


def from_freq_sharps(frequency: float) -> str:
    """Nearest note name of a frequency, sharp spelling (554.37 -> "C#5")."""
    return midi_to_note_name(freq_to_midi(frequency), sharps=True)


def simplify(note_name: str) -> str:
    """
    Respell a note with the fewest accidentals.

    Sharps are kept for sharp notes, flats otherwise. Pitch classes stay
    pitch classes.

    Example:
        simplify("C###")  # "D#"
        simplify("B#4")   # "C5"
        simplify("Fbb")   # "Eb"
    """
    note = get(note_name)
    if note.empty:
        return ""

    value = note.chroma if note.midi is None else note.midi
    return midi_to_note_name(value, sharps=note.alteration > 0, pitch_class=note.midi is None)


def enharmonic(note_name: str, dest_name: str | None = None) -> str:
    """
    Get the enharmonic equivalent of a note.

    Args:
        note_name: The note to respell
        dest_name: Target pitch class spelling (default: the simplest
            spelling with the opposite accidental)

    Returns:
        The respelled note, or "" if either name is invalid or the target
        is not enharmonic with the note

    Example:
        enharmonic("C#")        # "Db"
        enharmonic("C#4")       # "Db4"
        enharmonic("F2", "E#")  # "E#2"
        enharmonic("B#4")       # "C5"
    """
    src = get(note_name)
    if src.empty:
        return ""

    if dest_name is None:
        value = src.chroma if src.midi is None else src.midi
        dest_name = midi_to_note_name(value, sharps=src.alteration < 0, pitch_class=True)
    dest = get(dest_name)
    if dest.empty or dest.chroma != src.chroma:
        return ""
    if src.octave is None:
        return dest.pitch_class

    # Unwrapped chroma crosses the B/C boundary when the letter changes octave
    src_chroma = src.chroma - src.alteration
    dest_chroma = dest.chroma - dest.alteration
    if src_chroma > 11 or dest_chroma < 0:
        offset = -1
    elif src_chroma < 0 or dest_chroma > 11:
        offset = 1
    else:
        offset = 0
    return f"{dest.pitch_class}{src.octave + offset}"


def transpose_fifths(note_name: str, fifths: int) -> str:
    """
    Transpose a note by a number of perfect fifths, keeping its octave offset.

    Example:
        transpose_fifths("G", 3)   # "E"
        transpose_fifths("C4", 1)  # "G4"
    """
    note = get(note_name)
    if note.empty:
        return ""

    coord = note.coord
    if isinstance(coord, NoteCoordinates):
        shifted: NoteCoordinates | PitchClassCoordinates = NoteCoordinates(
            fifths=coord.fifths + fifths, octaves=coord.octaves
        )
    else:
        shifted = PitchClassCoordinates(fifths=coord.fifths + fifths)
    return decode(shifted).name


def names(items: Iterable[object] | None = None) -> list[str]:
    """
    Get the normalized names of the valid notes in a collection.

    Without arguments, returns the seven natural pitch classes.

    Example:
        names(["fx", "bb", 12])  # ["F##", "Bb"]
    """
    if items is None:
        return list(NATURAL_NOTE_NAMES)
    notes = [get(item) for item in items if isinstance(item, str)]
    return [note.name for note in notes if not note.empty]


def sorted_names(items: Iterable[object], reverse: bool = False) -> list[str]:
    """
    Sort note names by height. Invalid names are dropped.

    Example:
        sorted_names(["c2", "c5", "c1", "c0", "c6", "c"])
        # ["C", "C0", "C1", "C2", "C5", "C6"]
    """
    notes = [get(item) for item in items if isinstance(item, str)]
    valid = [note for note in notes if not note.empty]
    return [note.name for note in sorted(valid, key=lambda n: n.height, reverse=reverse)]


def sorted_uniq_names(items: Iterable[object]) -> list[str]:
    """
    Sort note names ascending and remove duplicates.

    Example:
        sorted_uniq_names(["C4", "c4", "E4"])  # ["C4", "E4"]
    """
    result: list[str] = []
    for note_name in sorted_names(items):
        if not result or result[-1] != note_name:
            result.append(note_name)
    return result
