"""
Core tonal primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- coordinates: Line-of-fifths encoding shared by notes and intervals
- tokenize: Note and interval name lexers
- midi: MIDI numbers, frequencies and note names
- pcset: Pitch class sets and scale-constrained MIDI queries

The resolvers build on these and on the descriptor models, so they are
imported from their own modules:
- chuk_mcp_tonal.core.note: Note parsing, spelling and sorting
- chuk_mcp_tonal.core.interval: Interval parsing and interval arithmetic
- chuk_mcp_tonal.core.distance: Transposition and the distance between notes
"""

from chuk_mcp_tonal.core.coordinates import (
    Coordinates,
    IntervalCoordinates,
    NoteCoordinates,
    PitchClassCoordinates,
    PitchInfo,
    decode,
    encode,
)
from chuk_mcp_tonal.core.midi import (
    freq_to_midi,
    is_midi,
    midi_to_freq,
    midi_to_note_name,
    to_midi,
)
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

__all__ = [
    # Coordinates
    "Coordinates",
    "PitchClassCoordinates",
    "NoteCoordinates",
    "IntervalCoordinates",
    "PitchInfo",
    "encode",
    "decode",
    # MIDI
    "is_midi",
    "to_midi",
    "midi_to_freq",
    "freq_to_midi",
    "midi_to_note_name",
    # Pcset
    "chroma",
    "pcset",
    "NearestPitch",
    "pcset_nearest",
    "ScaleSteps",
    "pcset_steps",
    "ScaleDegrees",
    "pcset_degrees",
]
