"""Built-ins that set, inspect and build the region between point and mark."""

from __future__ import annotations

from typing import Any, Sequence

from texted.core import Buffer, expect_no_args, optional_count
from texted.docs import ExampleDoc, FunctionDoc, ParameterDoc, register_documentation

__all__ = [
    "set_mark",
    "exchange_point_and_mark",
    "region_beginning",
    "region_end",
    "mark_line",
    "mark_whole_buffer",
    "mark_word",
]


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def set_mark(args: Sequence[Any], buffer: Buffer) -> str:
    """Set the mark at the current point."""
    expect_no_args("set-mark", args)
    buffer.mark = buffer.point
    return ""


def exchange_point_and_mark(args: Sequence[Any], buffer: Buffer) -> str:
    """Swap the positions of point and mark."""
    expect_no_args("exchange-point-and-mark", args)
    buffer.point, buffer.mark = buffer.mark, buffer.point
    return ""


def region_beginning(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the smaller of point and mark."""
    expect_no_args("region-beginning", args)
    return min(buffer.mark, buffer.point)


def region_end(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the larger of point and mark."""
    expect_no_args("region-end", args)
    return max(buffer.mark, buffer.point)


def mark_line(args: Sequence[Any], buffer: Buffer) -> str:
    """Mark COUNT whole lines from the current one, newlines included."""
    count = optional_count("mark-line", args)
    content = buffer.content
    pos = buffer.point - 1

    line_start = content.rfind("\n", 0, max(pos, 0)) + 1 if pos > 0 else pos

    line_end = pos
    for _ in range(count):
        newline = content.find("\n", line_end)
        line_end = len(content) if newline == -1 else newline + 1

    buffer.mark = line_start + 1
    buffer.point = line_end + 1
    return ""


def mark_whole_buffer(args: Sequence[Any], buffer: Buffer) -> str:
    """Put the mark at the start of the buffer and point at its end."""
    expect_no_args("mark-whole-buffer", args)
    buffer.mark = 1
    buffer.point = len(buffer.content) + 1
    return ""


def mark_word(args: Sequence[Any], buffer: Buffer) -> str:
    """Mark the word around point: mark at its start, point at its end."""
    expect_no_args("mark-word", args)
    content = buffer.content
    pos = buffer.point - 1
    if pos < 0 or pos >= len(content):
        return ""

    start = pos
    while start > 0 and _is_letter(content[start - 1]):
        start -= 1

    end = pos
    while end < len(content) and _is_letter(content[end]):
        end += 1

    buffer.mark = start + 1
    buffer.point = end + 1
    return ""


register_documentation(FunctionDoc(
    name="set-mark",
    summary="Set mark at current point position",
    description="Sets the mark at the current point position. The mark serves as a secondary position that, together with point, defines a region. This function takes no arguments and always sets the mark to the current point location.",
    category="mark",
    examples=(
        ExampleDoc(
            description="Set mark at current position",
            input="goto-char 7; set-mark; mark",
            buffer="Hello world, this is a test buffer.",
            output="Mark is set to position 7, same as current point",
        ),
    ),
    see_also=("set-mark-command", "mark", "region-beginning", "region-end"),
))

register_documentation(FunctionDoc(
    name="exchange-point-and-mark",
    summary="Swap the positions of point and mark",
    description="Exchanges the current point position with the mark position, effectively moving the cursor to where the mark was while setting the mark to where the cursor was. This is useful for quickly moving between the two ends of a region or for reversing the direction of a region selection.",
    category="region",
    examples=(
        ExampleDoc(
            description="Exchange point and mark positions",
            input="goto-char 5; set-mark; goto-char 10; exchange-point-and-mark; point",
            buffer="Hello world test",
            output="Point moves from 10 to 5, mark moves from 5 to 10",
        ),
    ),
    see_also=("set-mark", "mark", "point", "region-beginning", "region-end"),
))

register_documentation(FunctionDoc(
    name="region-beginning",
    summary="Return the position of the beginning of the current region",
    description="Returns the position of the beginning of the current region. The region is defined by the point and mark positions. This function returns the smaller of the two positions, ensuring that the beginning is always the leftmost position regardless of whether point is before or after mark.",
    category="region",
    examples=(
        ExampleDoc(
            description="Get region beginning when mark is before point",
            input="goto-char 5; set-mark; goto-char 10; region-beginning",
            buffer="Hello world test",
            output="Returns 5 (mark position, which is smaller)",
        ),
        ExampleDoc(
            description="Get region beginning when point is before mark",
            input="goto-char 10; set-mark; goto-char 5; region-beginning",
            buffer="Hello world test",
            output="Returns 5 (point position, which is smaller)",
        ),
    ),
    see_also=("region-end", "mark", "point", "buffer-substring"),
))

register_documentation(FunctionDoc(
    name="region-end",
    summary="Return the position of the end of the current region",
    description="Returns the position of the end of the current region. The region is defined by the point and mark positions. This function returns the larger of the two positions, ensuring that the end is always the rightmost position regardless of whether point is before or after mark.",
    category="region",
    examples=(
        ExampleDoc(
            description="Get region end when point is after mark",
            input="goto-char 5; set-mark; goto-char 10; region-end",
            buffer="Hello world test",
            output="Returns 10 (point position, which is larger)",
        ),
        ExampleDoc(
            description="Get region end when mark is after point",
            input="goto-char 10; set-mark; goto-char 5; region-end",
            buffer="Hello world test",
            output="Returns 10 (mark position, which is larger)",
        ),
    ),
    see_also=("region-beginning", "mark", "point", "buffer-substring"),
))

register_documentation(FunctionDoc(
    name="mark-line",
    summary="Mark one or more complete lines",
    description="Marks one or more lines starting from the current line. This function creates a region that encompasses complete lines, including their newline characters. The mark is positioned at the beginning of the current line, and the point is moved to the end of the specified number of lines.",
    category="mark",
    parameters=(
        ParameterDoc(
            name="count",
            type="number",
            description="Number of lines to mark, starting from current line. Defaults to 1",
            optional=True,
        ),
    ),
    examples=(
        ExampleDoc(
            description="Mark current line (default behavior)",
            input='search-forward "Second"; mark-line; buffer-substring (region-beginning) (region-end)',
            buffer="First line\nSecond line\nThird line",
            output="Marks 'Second line\\n'",
        ),
        ExampleDoc(
            description="Mark multiple lines",
            input="goto-char 15; mark-line 2",
            buffer="First line\nSecond line\nThird line\nFourth line",
            output="Marks 'Second line\\nThird line\\n'",
        ),
    ),
    see_also=("mark-word", "mark-whole-buffer", "beginning-of-line", "end-of-line"),
))

register_documentation(FunctionDoc(
    name="mark-whole-buffer",
    summary="Mark the entire buffer contents",
    description="Marks the entire buffer contents by setting the mark at the beginning of the buffer (position 1) and moving the point to the end of the buffer. This creates a region that encompasses all text in the buffer.",
    category="mark",
    examples=(
        ExampleDoc(
            description="Mark entire buffer",
            input="mark-whole-buffer; mark; point",
            buffer="Hello world test buffer content",
            output="Mark at position 1, point at end of buffer",
        ),
    ),
    see_also=("mark-line", "mark-word", "beginning-of-buffer", "end-of-buffer"),
))

register_documentation(FunctionDoc(
    name="mark-word",
    summary="Mark the word at or after current position",
    description="Marks the word at or after the current point position. This function identifies word boundaries using letter characters and sets up a region that encompasses the entire word. The mark is positioned at the beginning of the word, and the point is moved to the end of the word.",
    category="mark",
    examples=(
        ExampleDoc(
            description="Mark word from within the word",
            input="goto-char 7; mark-word; region-beginning; region-end",
            buffer="Hello world, this is a test buffer.",
            output="Marks 'world' - mark at position 7, point at position 12",
        ),
    ),
    see_also=("mark-line", "mark-whole-buffer", "forward-word", "backward-word"),
))