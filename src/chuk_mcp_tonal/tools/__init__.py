"""
MCP tool implementations.

Tools are organized by domain:
- notes - Note info, transposition, distance and respelling
- intervals - Interval info and interval arithmetic
- pcsets - Pitch class sets and scale-constrained MIDI queries
"""

from chuk_mcp_tonal.tools.intervals import register_interval_tools
from chuk_mcp_tonal.tools.notes import register_note_tools
from chuk_mcp_tonal.tools.pcsets import register_pcset_tools

__all__ = [
    "register_interval_tools",
    "register_note_tools",
    "register_pcset_tools",
]
