"""Built-ins that report positions and extract buffer text."""

from __future__ import annotations

from typing import Any, Sequence

from texted.core import Buffer, BuiltinError, expect_no_args
from texted.docs import ExampleDoc, FunctionDoc, ParameterDoc, register_documentation

__all__ = [
    "point",
    "mark",
    "point_min",
    "point_max",
    "buffer_size",
    "buffer_substring",
]


def point(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the current point (1-based)."""
    expect_no_args("point", args)
    return buffer.point


def mark(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the current mark (1-based)."""
    expect_no_args("mark", args)
    return buffer.mark


def point_min(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the smallest valid point, always 1."""
    expect_no_args("point-min", args)
    return 1


def point_max(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the largest valid point: buffer size plus one."""
    expect_no_args("point-max", args)
    return len(buffer.content) + 1


def buffer_size(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the number of characters in the buffer."""
    expect_no_args("buffer-size", args)
    return len(buffer.content)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def buffer_substring(args: Sequence[Any], buffer: Buffer) -> str:
    """Return text from START (inclusive) to END (exclusive); END -1 means end of buffer."""
    if len(args) != 2:
        raise BuiltinError(f"buffer-substring expects 2 arguments, got {len(args)}")
    if not all(_is_number(arg) for arg in args):
        raise BuiltinError("buffer-substring expects number arguments")

    content = buffer.content
    start, end = int(args[0]), int(args[1])
    if end == -1:
        end = len(content) + 1

    start = max(start - 1, 0)
    end = min(end - 1, len(content))
    if start >= end:
        return ""
    return content[start:end]


register_documentation(FunctionDoc(
    name="point",
    category="position",
    summary="Return the current position of the point (cursor) in the buffer",
    description="Returns the current cursor position in the buffer. The point is 1-based, where 1 is before the first character. When the point equals point-max, it is positioned after the last character. The point is fundamental for buffer navigation and editing operations.",
    examples=(
        ExampleDoc(description="Get point at beginning", input="point", buffer="Hello world", output="1"),
        ExampleDoc(description="Get point after moving", input="goto-char 5; point", buffer="Hello world", output="5"),
        ExampleDoc(description="Get point at end", input="goto-char 12; point", buffer="Hello world", output="12"),
    ),
    see_also=("mark", "goto-char", "point-min", "point-max"),
))

register_documentation(FunctionDoc(
    name="mark",
    category="position",
    summary="Return the current position of the mark in the buffer",
    description="Returns the current mark position in the buffer. The mark is a secondary position that works with the point to define text regions. Like the point, it is 1-based and can be anywhere from point-min to point-max. The mark is typically set using set-mark or set-mark-command.",
    examples=(
        ExampleDoc(description="Get mark position", input="set-mark 5; mark", buffer="Hello world", output="5"),
        ExampleDoc(description="Get mark after set-mark-command", input="goto-char 3; set-mark-command; mark", buffer="Hello world", output="3"),
    ),
    see_also=("point", "set-mark", "set-mark-command", "region-beginning", "region-end", "exchange-point-and-mark"),
))

register_documentation(FunctionDoc(
    name="point-min",
    category="position",
    summary="Return the minimum valid position for the point in the buffer",
    description="Returns the minimum valid point position, which is always 1. This represents the position just before the first character in the buffer. The point-min is constant regardless of buffer content or size, providing the start boundary for all position-based operations.",
    examples=(
        ExampleDoc(description="Get point-min of any buffer", input="point-min", buffer="Hello world", output="1"),
        ExampleDoc(description="Get point-min of empty buffer", input="point-min", buffer="", output="1"),
        ExampleDoc(description="Move to beginning and verify", input="beginning-of-buffer; point; point-min", buffer="Hello", output="1; 1"),
    ),
    see_also=("point-max", "buffer-size", "point", "beginning-of-buffer"),
))

register_documentation(FunctionDoc(
    name="point-max",
    category="position",
    summary="Return the maximum valid position for the point in the buffer",
    description="Returns the position just after the last character in the buffer (buffer-size + 1). This is the furthest position the point can be moved to, representing the end of the buffer. Useful for determining buffer boundaries and validating positions.",
    examples=(
        ExampleDoc(description="Get point-max of buffer", input="point-max", buffer="Hello world test", output="17"),
        ExampleDoc(description="Get point-max of empty buffer", input="point-max", buffer="", output="1"),
        ExampleDoc(description="Move to end and verify", input="end-of-buffer; point; point-max", buffer="Hello", output="6; 6"),
    ),
    see_also=("point-min", "buffer-size", "point", "end-of-buffer"),
))

register_documentation(FunctionDoc(
    name="buffer-size",
    category="buffer",
    summary="Return the total number of characters in the buffer",
    description="Calculates the size of the buffer content in characters (bytes). The size includes all characters including newlines, spaces, and special characters. This is useful for determining buffer boundaries or calculating buffer statistics.",
    examples=(
        ExampleDoc(description="Get size of buffer with content", input="buffer-size", buffer="Hello world test buffer", output="23"),
        ExampleDoc(description="Get size of empty buffer", input="buffer-size", buffer="", output="0"),
    ),
    see_also=("point-max", "point-min", "point"),
))

register_documentation(FunctionDoc(
    name="buffer-substring",
    category="buffer",
    summary="Extract a portion of the buffer content between two positions",
    description="Extracts text from the buffer between the specified START and END positions. Positions are 1-based, where 1 is the first character. The extracted substring includes the character at START but excludes the character at END. If END is -1, extracts to the end of the buffer. Positions are automatically bounded to stay within the buffer.",
    parameters=(
        ParameterDoc(name="start", type="number", description="The starting position (1-based, inclusive)"),
        ParameterDoc(name="end", type="number", description="The ending position (1-based, exclusive), or -1 for end of buffer"),
    ),
    examples=(
        ExampleDoc(description="Extract first 5 characters", input="buffer-substring 1 6", buffer="Hello world", output='"Hello"'),
        ExampleDoc(description="Extract from position to end", input="buffer-substring 7 -1", buffer="Hello world", output='"world"'),
        ExampleDoc(description="Extract empty range", input="buffer-substring 5 5", buffer="Hello world", output='""'),
    ),
    see_also=("buffer-size", "substring", "region-beginning", "region-end"),
))