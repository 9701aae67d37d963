"""
Pydantic models for the tonal system.

This module provides:
- NoteInfo: A parsed note or pitch class
- IntervalInfo: A parsed interval
- NO_NOTE / NO_INTERVAL: The empty descriptors returned for invalid names
"""

from chuk_mcp_tonal.models.descriptors import NO_INTERVAL, NO_NOTE, IntervalInfo, NoteInfo

__all__ = [
    "IntervalInfo",
    "NoteInfo",
    "NO_INTERVAL",
    "NO_NOTE",
]
