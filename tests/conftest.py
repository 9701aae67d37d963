"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_tonal.core.note import NoteCache


@pytest.fixture
def note_cache() -> NoteCache:
    """A fresh, empty note cache."""
    return NoteCache()


@pytest.fixture
def interval_names() -> list[str]:
    """The simple ascending major/perfect intervals."""
    return ["1P", "2M", "3M", "4P", "5P", "6M", "7M"]
