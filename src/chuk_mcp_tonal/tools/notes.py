"""
Note tools - MCP tools for note names.

Tools for parsing, transposing, measuring and respelling notes.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tonal.constants import ErrorMessages
from chuk_mcp_tonal.core import note
from chuk_mcp_tonal.core.distance import distance, transpose
from chuk_mcp_tonal.core.midi import midi_to_note_name, to_midi

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _invalid_note(name: str) -> str:
    return json.dumps({"status": "error", "message": ErrorMessages.INVALID_NOTE.format(name=name)})


def register_note_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_note_info(name: str) -> str:
        """
        Get the properties of a note.

        Accepts letters A-G in either case, any number of '#' or 'b',
        'x' for double sharp, and an optional (possibly negative) octave.

        Args:
            name: Note name (e.g., 'C4', 'Bb', 'fx3', 'Eb-1')

        Returns:
            JSON string with the note name, pitch class, octave, chroma,
            MIDI number and frequency

        Example:
            tonal_note_info(name="C#4")
        """
        try:
            info = note.get(name)
            if info.empty:
                return _invalid_note(name)

            return json.dumps(
                {
                    "status": "success",
                    "note": info.model_dump(mode="json", exclude={"coord", "empty"}),
                }
            )
        except Exception as e:
            logger.exception("Failed to get note info")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_note_info"] = tonal_note_info

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_note_transpose(notes: list[str], interval: str) -> str:
        """
        Transpose notes by an interval.

        Args:
            notes: Note names to transpose (e.g., ['C4', 'E4', 'G4'])
            interval: Interval in tonal ('3M', '-5P') or shorthand ('M3') form

        Returns:
            JSON string with the transposed notes, in input order

        Example:
            tonal_note_transpose(notes=["C4", "E4", "G4"], interval="5P")
        """
        try:
            transposed = [transpose(n, interval) for n in notes]
            invalid = [n for n, result in zip(notes, transposed, strict=True) if not result]
            if invalid:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"Cannot transpose {invalid} by '{interval}'",
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "interval": interval,
                    "notes": transposed,
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_note_transpose"] = tonal_note_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_note_distance(from_note: str, to_note: str) -> str:
        """
        Get the interval between two notes.

        Pitch classes (no octave) give the ascending interval within an octave.

        Args:
            from_note: Starting note (e.g., 'C4')
            to_note: Target note (e.g., 'G4')

        Returns:
            JSON string with the interval name and its size in semitones

        Example:
            tonal_note_distance(from_note="C4", to_note="G4")
        """
        try:
            result = distance(from_note, to_note)
            if not result:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.NO_RESULT.format(
                            operation="distance", first=from_note, second=to_note
                        ),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "from": note.name(from_note),
                    "to": note.name(to_note),
                    "interval": result,
                }
            )
        except Exception as e:
            logger.exception("Failed to get note distance")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_note_distance"] = tonal_note_distance

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_note_enharmonic(name: str, target: str | None = None) -> str:
        """
        Respell a note enharmonically.

        Args:
            name: Note to respell (e.g., 'C#4')
            target: Optional pitch class to spell it as (e.g., 'Db').
                Default: the simplest spelling with the opposite accidental

        Returns:
            JSON string with the respelled note

        Example:
            tonal_note_enharmonic(name="F2", target="E#")
        """
        try:
            if note.get(name).empty:
                return _invalid_note(name)

            result = note.enharmonic(name, target)
            if not result:
                return json.dumps(
                    {
                        "status": "error",
                        "message": f"'{target}' is not enharmonic with '{name}'",
                    }
                )

            return json.dumps({"status": "success", "note": note.name(name), "enharmonic": result})
        except Exception as e:
            logger.exception("Failed to respell note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_note_enharmonic"] = tonal_note_enharmonic

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_note_simplify(name: str) -> str:
        """
        Respell a note with the fewest accidentals.

        Args:
            name: Note to simplify (e.g., 'C###', 'B#4')

        Returns:
            JSON string with the simplified note

        Example:
            tonal_note_simplify(name="C###")
        """
        try:
            result = note.simplify(name)
            if not result:
                return _invalid_note(name)

            return json.dumps({"status": "success", "note": note.name(name), "simplified": result})
        except Exception as e:
            logger.exception("Failed to simplify note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_note_simplify"] = tonal_note_simplify

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_note_sort(
        notes: list[str],
        descending: bool = False,
        unique: bool = False,
    ) -> str:
        """
        Sort notes by pitch.

        Invalid names are dropped. Pitch classes sort below every note
        with an octave.

        Args:
            notes: Note names to sort
            descending: Sort from highest to lowest
            unique: Remove duplicate names (ascending only)

        Returns:
            JSON string with the sorted note names

        Example:
            tonal_note_sort(notes=["G4", "c4", "E4"])
        """
        try:
            if unique:
                result = note.sorted_uniq_names(notes)
                if descending:
                    result.reverse()
            else:
                result = note.sorted_names(notes, reverse=descending)

            return json.dumps(
                {
                    "status": "success",
                    "notes": result,
                    "dropped": len(notes) - len(note.names(notes)),
                }
            )
        except Exception as e:
            logger.exception("Failed to sort notes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_note_sort"] = tonal_note_sort

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_midi_to_note(
        midi: float,
        sharps: bool = False,
        pitch_class: bool = False,
    ) -> str:
        """
        Convert a MIDI number to a note name.

        Args:
            midi: MIDI number 0-127 (fractional values are rounded)
            sharps: Spell black keys with sharps (default: flats)
            pitch_class: Return only the pitch class, without octave

        Returns:
            JSON string with the note name

        Example:
            tonal_midi_to_note(midi=61, sharps=True)
        """
        try:
            name = midi_to_note_name(midi, sharps=sharps, pitch_class=pitch_class)
            if not name:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_MIDI.format(value=midi)}
                )

            return json.dumps({"status": "success", "midi": to_midi(midi), "note": name})
        except Exception as e:
            logger.exception("Failed to convert MIDI number")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_midi_to_note"] = tonal_midi_to_note

    return tools
