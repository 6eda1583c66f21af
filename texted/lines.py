"""Built-ins that report the line and column of point."""

from __future__ import annotations

from typing import Any, Sequence

from texted.core import Buffer, expect_no_args
from texted.docs import ExampleDoc, FunctionDoc, register_documentation

__all__ = ["current_column", "line_number_at_pos"]


def current_column(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the column of point, counted back to the previous newline.

    The character at point is included in the count; point on a newline
    gives column 0. Point past the end counts as on the last character.
    """
    expect_no_args("current-column", args)
    content = buffer.content
    pos = buffer.point - 1
    if pos < 0:
        return 0
    pos = min(pos, len(content) - 1)

    segment = content[: pos + 1]
    return len(segment) - (segment.rfind("\n") + 1)


def line_number_at_pos(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the 1-based line number of point."""
    expect_no_args("line-number-at-pos", args)
    content = buffer.content
    pos = min(max(buffer.point - 1, 0), len(content))
    return content.count("\n", 0, pos) + 1


register_documentation(FunctionDoc(
    name="current-column",
    category="position",
    summary="Return the column number of the current point position",
    description="Returns the horizontal position of the point within the current line. The column is 0-based, where column 0 is the first character of the line. Calculated by counting characters from the beginning of the current line (after the last newline) to the point position.",
    examples=(
        ExampleDoc(description="Get column at beginning of line", input="beginning-of-line; current-column", buffer="Hello world", output="0"),
        ExampleDoc(description="Get column in middle of multi-line", input="goto-char 25; current-column", buffer="First line\nSecond line with content\nThird line", output="14"),
        ExampleDoc(description="Get column in single line", input="goto-char 6; current-column", buffer="Hello world", output="5"),
    ),
    see_also=("line-number-at-pos", "point", "beginning-of-line", "end-of-line"),
))

register_documentation(FunctionDoc(
    name="line-number-at-pos",
    category="position",
    summary="Return the line number of the current point position",
    description="Returns the vertical position of the point within the buffer. Line numbers are 1-based, where line 1 is the first line. Lines are separated by newline characters. Calculated by counting newlines from the beginning of the buffer to the current point position.",
    examples=(
        ExampleDoc(description="Get line number at beginning", input="line-number-at-pos", buffer="Hello world", output="1"),
        ExampleDoc(description="Get line number on second line", input="goto-char 15; line-number-at-pos", buffer="First line\nSecond line\nThird line", output="2"),
        ExampleDoc(description="Get line number on third line", input="goto-char 25; line-number-at-pos", buffer="First line\nSecond line\nThird line", output="3"),
    ),
    see_also=("current-column", "point", "goto-line", "beginning-of-line", "end-of-line"),
))