"""
Tests for MCP tools.

Tests the MCP tool implementations for notes, intervals and pitch class sets.
"""

import json

import pytest

from chuk_mcp_tonal.tools.intervals import register_interval_tools
from chuk_mcp_tonal.tools.notes import register_note_tools
from chuk_mcp_tonal.tools.pcsets import register_pcset_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def note_tools():
    """Registered note tools."""
    return register_note_tools(MockMCPServer("test"))


@pytest.fixture
def interval_tools():
    """Registered interval tools."""
    return register_interval_tools(MockMCPServer("test"))


@pytest.fixture
def pcset_tools():
    """Registered pcset tools."""
    return register_pcset_tools(MockMCPServer("test"))


class TestRegistration:
    """Tests for tool registration."""

    def test_all_tools_registered(self) -> None:
        """Every tool is registered on the server and returned."""
        mcp = MockMCPServer("test")
        tools = {
            **register_note_tools(mcp),
            **register_interval_tools(mcp),
            **register_pcset_tools(mcp),
        }
        assert set(tools) == set(mcp.tools)
        assert len(tools) == 18
        assert all(name.startswith("tonal_") for name in tools)


class TestNoteTools:
    """Tests for note tools."""

    @pytest.mark.asyncio
    async def test_note_info(self, note_tools):
        """Note info reports the parsed note."""
        data = json.loads(await note_tools["tonal_note_info"](name="c#4"))
        assert data["status"] == "success"
        assert data["note"]["name"] == "C#4"
        assert data["note"]["midi"] == 61
        assert "coord" not in data["note"]

    @pytest.mark.asyncio
    async def test_note_info_invalid(self, note_tools):
        """Invalid names give an error payload."""
        data = json.loads(await note_tools["tonal_note_info"](name="H4"))
        assert data["status"] == "error"
        assert "H4" in data["message"]

    @pytest.mark.asyncio
    async def test_transpose(self, note_tools):
        """Transpose several notes."""
        data = json.loads(
            await note_tools["tonal_note_transpose"](notes=["C4", "E4", "G4"], interval="5P")
        )
        assert data["status"] == "success"
        assert data["notes"] == ["G4", "B4", "D5"]

    @pytest.mark.asyncio
    async def test_transpose_invalid(self, note_tools):
        """Any invalid note fails the call."""
        data = json.loads(
            await note_tools["tonal_note_transpose"](notes=["C4", "nope"], interval="5P")
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_distance(self, note_tools):
        """Distance between notes."""
        data = json.loads(await note_tools["tonal_note_distance"](from_note="C4", to_note="G4"))
        assert data["status"] == "success"
        assert data["interval"] == "5P"

    @pytest.mark.asyncio
    async def test_distance_invalid(self, note_tools):
        """Invalid notes give an error payload."""
        data = json.loads(await note_tools["tonal_note_distance"](from_note="C4", to_note="X"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_enharmonic(self, note_tools):
        """Enharmonic respelling with and without a target."""
        data = json.loads(await note_tools["tonal_note_enharmonic"](name="C#4"))
        assert data["enharmonic"] == "Db4"

        data = json.loads(await note_tools["tonal_note_enharmonic"](name="F2", target="E#"))
        assert data["enharmonic"] == "E#2"

        data = json.loads(await note_tools["tonal_note_enharmonic"](name="F2", target="Eb"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_simplify(self, note_tools):
        """Simplify a note."""
        data = json.loads(await note_tools["tonal_note_simplify"](name="B#4"))
        assert data["simplified"] == "C5"

    @pytest.mark.asyncio
    async def test_sort(self, note_tools):
        """Sort notes, dropping invalid ones."""
        data = json.loads(
            await note_tools["tonal_note_sort"](notes=["G4", "c4", "E4", "nope", "C4"])
        )
        assert data["notes"] == ["C4", "C4", "E4", "G4"]
        assert data["dropped"] == 1

        data = json.loads(
            await note_tools["tonal_note_sort"](
                notes=["G4", "c4", "E4", "C4"], descending=True, unique=True
            )
        )
        assert data["notes"] == ["G4", "E4", "C4"]

    @pytest.mark.asyncio
    async def test_midi_to_note(self, note_tools):
        """MIDI number to note name."""
        data = json.loads(await note_tools["tonal_midi_to_note"](midi=61, sharps=True))
        assert data["note"] == "C#4"

        data = json.loads(await note_tools["tonal_midi_to_note"](midi=128))
        assert data["status"] == "error"


class TestIntervalTools:
    """Tests for interval tools."""

    @pytest.mark.asyncio
    async def test_interval_info(self, interval_tools):
        """Interval info reports the parsed interval."""
        data = json.loads(await interval_tools["tonal_interval_info"](name="P4"))
        assert data["status"] == "success"
        assert data["interval"]["name"] == "4P"
        assert data["interval"]["semitones"] == 5
        assert data["interval"]["type"] == "perfectable"

    @pytest.mark.asyncio
    async def test_interval_info_invalid(self, interval_tools):
        """Mismatched qualities are rejected."""
        data = json.loads(await interval_tools["tonal_interval_info"](name="3P"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_add_and_subtract(self, interval_tools):
        """Interval arithmetic."""
        data = json.loads(await interval_tools["tonal_interval_add"](first="3m", second="5P"))
        assert data["interval"] == "7m"

        data = json.loads(
            await interval_tools["tonal_interval_subtract"](minuend="3M", subtrahend="5P")
        )
        assert data["interval"] == "-3m"

        data = json.loads(await interval_tools["tonal_interval_add"](first="3P", second="5P"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_invert_and_simplify(self, interval_tools):
        """Invert and simplify."""
        data = json.loads(await interval_tools["tonal_interval_invert"](name="3M"))
        assert data["inverted"] == "6m"

        data = json.loads(await interval_tools["tonal_interval_simplify"](name="-9M"))
        assert data["simplified"] == "-2M"

    @pytest.mark.asyncio
    async def test_from_semitones(self, interval_tools):
        """Name an interval from its size."""
        data = json.loads(await interval_tools["tonal_interval_from_semitones"](semitones=-7))
        assert data["interval"] == "-5P"

    @pytest.mark.asyncio
    async def test_transpose_fifths(self, interval_tools):
        """Move an interval along the line of fifths."""
        data = json.loads(
            await interval_tools["tonal_interval_transpose_fifths"](name="1P", fifths=2)
        )
        assert data["interval"] == "9M"


class TestPcsetTools:
    """Tests for pcset tools."""

    @pytest.mark.asyncio
    async def test_pcset(self, pcset_tools):
        """Build a pcset from MIDI numbers."""
        data = json.loads(await pcset_tools["tonal_pcset"](notes=[62, 63, 60, 65, 70, 72]))
        assert data["pcset"] == [0, 2, 3, 5, 10]
        assert data["chroma"] == "101101000010"

    @pytest.mark.asyncio
    async def test_pcset_invalid_string(self, pcset_tools):
        """Strings other than 0/1 are rejected."""
        data = json.loads(await pcset_tools["tonal_pcset"](notes="10x1"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_nearest(self, pcset_tools):
        """Snap MIDI notes to a set."""
        data = json.loads(
            await pcset_tools["tonal_pcset_nearest"](notes=[0, 5, 7], midi=[2, 3, 10])
        )
        assert data["midi"] == [0, 5, 12]

    @pytest.mark.asyncio
    async def test_steps_and_degrees(self, pcset_tools):
        """Walk a major scale from C4."""
        data = json.loads(
            await pcset_tools["tonal_pcset_steps"](
                notes="101011010101", tonic=60, steps=[0, 2, 4, 7, -1]
            )
        )
        assert data["midi"] == [60, 64, 67, 72, 59]

        data = json.loads(
            await pcset_tools["tonal_pcset_degrees"](
                notes="101011010101", tonic=60, degrees=[1, 0, -1]
            )
        )
        assert data["midi"] == [60, None, 59]
