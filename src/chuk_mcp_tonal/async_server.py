#!/usr/bin/env python3
"""
Async Tonal MCP Server using chuk-mcp-server

This server provides MCP tools for tonal music theory: note names,
intervals and pitch class sets, all computed on the line of fifths.

The server provides tools for:
- Parsing notes and intervals and reporting their properties
- Transposing notes and measuring the distance between them
- Interval arithmetic (add, subtract, invert, simplify)
- Snapping and indexing MIDI notes against pitch class sets
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tonal.constants import DEFAULT_TUNING
from chuk_mcp_tonal.tools import (
    register_interval_tools,
    register_note_tools,
    register_pcset_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tonal")

# Register all tools
note_tools = register_note_tools(mcp)
interval_tools = register_interval_tools(mcp)
pcset_tools = register_pcset_tools(mcp)

# Export tool functions for direct access
tonal_note_info = note_tools["tonal_note_info"]
tonal_note_transpose = note_tools["tonal_note_transpose"]
tonal_note_distance = note_tools["tonal_note_distance"]
tonal_note_enharmonic = note_tools["tonal_note_enharmonic"]
tonal_note_simplify = note_tools["tonal_note_simplify"]
tonal_note_sort = note_tools["tonal_note_sort"]
tonal_midi_to_note = note_tools["tonal_midi_to_note"]

tonal_interval_info = interval_tools["tonal_interval_info"]
tonal_interval_add = interval_tools["tonal_interval_add"]
tonal_interval_subtract = interval_tools["tonal_interval_subtract"]
tonal_interval_invert = interval_tools["tonal_interval_invert"]
tonal_interval_simplify = interval_tools["tonal_interval_simplify"]
tonal_interval_from_semitones = interval_tools["tonal_interval_from_semitones"]
tonal_interval_transpose_fifths = interval_tools["tonal_interval_transpose_fifths"]

tonal_pcset = pcset_tools["tonal_pcset"]
tonal_pcset_nearest = pcset_tools["tonal_pcset_nearest"]
tonal_pcset_steps = pcset_tools["tonal_pcset_steps"]
tonal_pcset_degrees = pcset_tools["tonal_pcset_degrees"]

logger.info("CHUK Tonal MCP Server initialized")
logger.info(f"  Tools: {len(note_tools) + len(interval_tools) + len(pcset_tools)}")
logger.info(f"  Tuning: A4 = {DEFAULT_TUNING} Hz")
