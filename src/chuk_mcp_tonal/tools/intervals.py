"""
Interval tools - MCP tools for interval names and interval arithmetic.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_tonal.constants import ErrorMessages
from chuk_mcp_tonal.core import interval as ivl

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _invalid_interval(name: str) -> str:
    return json.dumps(
        {"status": "error", "message": ErrorMessages.INVALID_INTERVAL.format(name=name)}
    )


def register_interval_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register interval tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_interval_info(name: str) -> str:
        """
        Get the properties of an interval.

        Intervals are written as number then quality ('5P', '-3m') or
        quality then number ('P5', 'm-3'). Qualities: d (diminished),
        m (minor), M (major), P (perfect), A (augmented), repeated for
        doubly altered intervals ('dd', 'AA').

        Args:
            name: Interval name (e.g., '3M', 'P4', '-9m')

        Returns:
            JSON string with number, quality, type, semitones, chroma
            and the octave-reduced number

        Example:
            tonal_interval_info(name="P4")
        """
        try:
            info = ivl.get(name)
            if info.empty:
                return _invalid_interval(name)

            return json.dumps(
                {
                    "status": "success",
                    "interval": info.model_dump(mode="json", exclude={"coord", "empty"}),
                }
            )
        except Exception as e:
            logger.exception("Failed to get interval info")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_interval_info"] = tonal_interval_info

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_interval_add(first: str, second: str) -> str:
        """
        Add two intervals.

        Args:
            first: First interval (e.g., '3M')
            second: Second interval (e.g., '3m')

        Returns:
            JSON string with the sum

        Example:
            tonal_interval_add(first="3M", second="3m")
        """
        try:
            result = ivl.add(first, second)
            if result is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.NO_RESULT.format(
                            operation="add", first=first, second=second
                        ),
                    }
                )

            return json.dumps({"status": "success", "interval": result})
        except Exception as e:
            logger.exception("Failed to add intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_interval_add"] = tonal_interval_add

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_interval_subtract(minuend: str, subtrahend: str) -> str:
        """
        Subtract an interval from another.

        A larger subtrahend gives a descending result.

        Args:
            minuend: Interval to subtract from (e.g., '5P')
            subtrahend: Interval to subtract (e.g., '3M')

        Returns:
            JSON string with the difference

        Example:
            tonal_interval_subtract(minuend="5P", subtrahend="3M")
        """
        try:
            result = ivl.subtract(minuend, subtrahend)
            if result is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.NO_RESULT.format(
                            operation="subtract", first=minuend, second=subtrahend
                        ),
                    }
                )

            return json.dumps({"status": "success", "interval": result})
        except Exception as e:
            logger.exception("Failed to subtract intervals")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_interval_subtract"] = tonal_interval_subtract

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_interval_invert(name: str) -> str:
        """
        Invert an interval (3M becomes 6m), keeping octaves and direction.

        Args:
            name: Interval to invert

        Returns:
            JSON string with the inversion

        Example:
            tonal_interval_invert(name="3M")
        """
        try:
            result = ivl.invert(name)
            if not result:
                return _invalid_interval(name)

            return json.dumps({"status": "success", "interval": ivl.name(name), "inverted": result})
        except Exception as e:
            logger.exception("Failed to invert interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_interval_invert"] = tonal_interval_invert

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_interval_simplify(name: str) -> str:
        """
        Reduce a compound interval to a simple one (9M becomes 2M).

        Args:
            name: Interval to simplify

        Returns:
            JSON string with the simple interval

        Example:
            tonal_interval_simplify(name="-9M")
        """
        try:
            result = ivl.simplify(name)
            if not result:
                return _invalid_interval(name)

            return json.dumps(
                {"status": "success", "interval": ivl.name(name), "simplified": result}
            )
        except Exception as e:
            logger.exception("Failed to simplify interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_interval_simplify"] = tonal_interval_simplify

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_interval_from_semitones(semitones: int) -> str:
        """
        Get the canonical interval name for a number of semitones.

        Args:
            semitones: Signed number of semitones (e.g., 7, -14)

        Returns:
            JSON string with the interval name

        Example:
            tonal_interval_from_semitones(semitones=7)
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "semitones": semitones,
                    "interval": ivl.from_semitones(semitones),
                }
            )
        except Exception as e:
            logger.exception("Failed to name interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_interval_from_semitones"] = tonal_interval_from_semitones

    @mcp.tool  # type: ignore[arg-type]
    async def tonal_interval_transpose_fifths(name: str, fifths: int) -> str:
        """
        Move an interval along the line of fifths.

        Args:
            name: Interval to move
            fifths: Number of perfect fifths (negative moves down)

        Returns:
            JSON string with the resulting interval

        Example:
            tonal_interval_transpose_fifths(name="1P", fifths=2)
        """
        try:
            result = ivl.transpose_fifths(name, fifths)
            if not result:
                return _invalid_interval(name)

            return json.dumps({"status": "success", "fifths": fifths, "interval": result})
        except Exception as e:
            logger.exception("Failed to transpose interval")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tonal_interval_transpose_fifths"] = tonal_interval_transpose_fifths

    return tools
