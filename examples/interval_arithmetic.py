#!/usr/bin/env python3
"""
Example: Tonal arithmetic on the line of fifths.

This demonstrates the core primitives without the MCP server:
note parsing, transposition, interval arithmetic and scale snapping.

Usage:
    python examples/interval_arithmetic.py
"""

from chuk_mcp_tonal.core import interval, note
from chuk_mcp_tonal.core.distance import TransposeBy, distance, transpose
from chuk_mcp_tonal.core.pcset import pcset_degrees, pcset_nearest

C_MAJOR = "101011010101"


def main() -> None:
    """Run the examples."""
    # Example 1: Notes keep their spelling
    print("Notes:")
    for name in ["C#4", "Db4", "fx3", "B#4"]:
        info = note.get(name)
        print(f"  {name:5} -> {info.name:5} midi={info.midi} freq={info.frequency:.2f}")

    # Example 2: Transposition spells by interval, not by semitone
    print("\nA major triad from each root:")
    for root in ["C4", "Eb4", "F#4"]:
        triad = [transpose(root, ivl) for ivl in ["1P", "3M", "5P"]]
        print(f"  {root:4} -> {' '.join(triad)}")

    print("\nA circle of fifths:")
    up_fifth = TransposeBy("5P")
    current = "C"
    circle = [current]
    for _ in range(11):
        current = up_fifth(current)
        circle.append(current)
    print(f"  {' '.join(circle)}")

    # Example 3: Interval arithmetic
    print("\nIntervals:")
    print(f"  3m + 5P = {interval.add('3m', '5P')}")
    print(f"  5P - 3M = {interval.subtract('5P', '3M')}")
    print(f"  invert(3M) = {interval.invert('3M')}")
    print(f"  simplify(-9M) = {interval.simplify('-9M')}")
    print(f"  distance(Dbb4, C4) = {distance('Dbb4', 'C4')}")

    # Example 4: Snap a chromatic run to C major
    print("\nChromatic run snapped to C major:")
    nearest = pcset_nearest(C_MAJOR)
    run = list(range(60, 73))
    print(f"  {run}")
    print(f"  {[nearest(m) for m in run]}")

    # Example 5: Scale degrees from A3
    degrees = pcset_degrees(C_MAJOR, 57)
    names = [note.from_midi(degrees(d)) for d in range(1, 9)]
    print(f"\nDegrees 1-8 of the set from A3: {' '.join(names)}")

    print("\nDone!")


if __name__ == "__main__":
    main()
