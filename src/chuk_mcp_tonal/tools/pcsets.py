"""
Pcset tools - MCP tools for pitch class sets.

Tools for building pitch class sets and snapping or indexing MIDI notes
against them.
"""

from __future__ import annotations

import json
import logging
import re
from typing import TYPE_CHECKING, Any

from chuk_mcp_tonal.constants import ErrorMessages
from chuk_mcp_tonal.core.pcset import pcset, pcset_degrees, pcset_nearest, pcset_steps

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)

CHROMA_REGEX = re.compile(r"[01]{1,12}")


def _resolve(notes: list[int] | str) -> list[int] | str | None:
    """Validate tool input: a chroma string of 0/1, or a list of MIDI numbers."""
    if isinstance(notes, str):
        return notes if CHROMA_REGEX.fullmatch(notes) else None
    return list(notes)


def _invalid_pcset(notes: object) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.INVALID_PCSET.format(pcset=notes)}
    )


def register_pcset_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch class set tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_pcset(notes: list[int] | str) -> str:
        """
        Get the pitch class set of some notes.

        Args:
            notes: MIDI numbers (e.g., [60, 64, 67]) or a chroma string
                where position i is '1' if pitch class i is present
                (e.g., '101011010101' for C major)

        Returns:
            JSON string with the ascending distinct chromas (0-11)

        Example:
            tonal_pcset(notes=[62, 63, 60, 65, 70, 72])
        """
        try:
            source = _resolve(notes)
            if source is None:
                return _invalid_pcset(notes)

            chromas = pcset(source)
            return json.dumps(
                {
                    "status": "success",
                    "pcset": list(chromas),
                    "chroma": "".join("1" if i in chromas else "0" for i in range(12)),
                }
            )
        except Exception as e:
            logger.exception("Failed to build pcset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_pcset"] = tonal_pcset

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_pcset_nearest(notes: list[int] | str, midi: list[int]) -> str:
        """
        Snap MIDI notes to the nearest pitch in a pitch class set.

        Ties between a pitch above and a pitch below resolve upward.

        Args:
            notes: The set, as MIDI numbers or a chroma string
            midi: MIDI numbers to snap

        Returns:
            JSON string with one snapped MIDI number per input
            (null for every input when the set is empty)

        Example:
            tonal_pcset_nearest(notes="101011010101", midi=[61, 66, 70])
        """
        try:
            source = _resolve(notes)
            if source is None:
                return _invalid_pcset(notes)

            nearest = pcset_nearest(source)
            return json.dumps(
                {
                    "status": "success",
                    "pcset": list(nearest.pcset),
                    "midi": [nearest(m) for m in midi],
                }
            )
        except Exception as e:
            logger.exception("Failed to snap to pcset")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_pcset_nearest"] = tonal_pcset_nearest

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_pcset_steps(notes: list[int] | str, tonic: int, steps: list[int]) -> str:
        """
        Walk a pitch class set from a tonic by step index.

        Step 0 is the tonic; each len(pcset) steps moves an octave,
        negative steps go down.

        Args:
            notes: The set relative to the tonic, as MIDI numbers or a chroma string
            tonic: MIDI number of the tonic
            steps: Step indices to resolve

        Returns:
            JSON string with one MIDI number per step

        Example:
            tonal_pcset_steps(notes="101011010101", tonic=60, steps=[0, 2, 4, 7, -1])
        """
        try:
            source = _resolve(notes)
            if source is None:
                return _invalid_pcset(notes)

            walk = pcset_steps(source, tonic)
            return json.dumps(
                {
                    "status": "success",
                    "tonic": tonic,
                    "midi": [walk(step) for step in steps],
                }
            )
        except Exception as e:
            logger.exception("Failed to walk pcset steps")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_pcset_steps"] = tonal_pcset_steps

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_pcset_degrees(notes: list[int] | str, tonic: int, degrees: list[int]) -> str:
        """
        Resolve scale degrees of a pitch class set from a tonic.

        Degrees count from 1; there is no degree 0 (it resolves to null).
        Degree -1 is one step below the tonic.

        Args:
            notes: The set relative to the tonic, as MIDI numbers or a chroma string
            tonic: MIDI number of the tonic
            degrees: Scale degrees to resolve

        Returns:
            JSON string with one MIDI number (or null) per degree

        Example:
            tonal_pcset_degrees(notes="101011010101", tonic=60, degrees=[1, 3, 5, 8])
        """
        try:
            source = _resolve(notes)
            if source is None:
                return _invalid_pcset(notes)

            lookup = pcset_degrees(source, tonic)
            return json.dumps(
                {
                    "status": "success",
                    "tonic": tonic,
                    "midi": [lookup(degree) for degree in degrees],
                }
            )
        except Exception as e:
            logger.exception("Failed to resolve pcset degrees")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_pcset_degrees"] = tonal_pcset_degrees

    return tools
