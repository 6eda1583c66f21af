"""Built-ins that move point by characters, words, lines and buffer ends."""

from __future__ import annotations

from typing import Any, Sequence

from texted.core import Buffer, expect_no_args, expect_number, optional_count
from texted.docs import ExampleDoc, FunctionDoc, ParameterDoc, register_documentation

__all__ = [
    "backward_char",
    "forward_char",
    "backward_word",
    "forward_word",
    "beginning_of_buffer",
    "end_of_buffer",
    "beginning_of_line",
    "end_of_line",
    "goto_char",
    "goto_line",
]


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def backward_char(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point back COUNT characters (default 1), not before the start."""
    count = optional_count("backward-char", args)
    buffer.point = max(buffer.point - count, 1)
    return ""


def forward_char(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point forward COUNT characters (default 1), within the buffer."""
    count = optional_count("forward-char", args)
    buffer.point = min(max(buffer.point + count, 1), len(buffer.content) + 1)
    return ""


def backward_word(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point to the start of the COUNTth word before it (default 1)."""
    count = optional_count("backward-word", args)
    content = buffer.content
    pos = min(buffer.point - 1, len(content))

    for _ in range(count):
        if pos <= 0:
            break
        while pos > 0 and not _is_letter(content[pos - 1]):
            pos -= 1
        while pos > 0 and _is_letter(content[pos - 1]):
            pos -= 1

    buffer.point = pos + 1
    return ""


def forward_word(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point to the end of the COUNTth word after it (default 1)."""
    count = optional_count("forward-word", args)
    content = buffer.content
    pos = max(buffer.point - 1, 0)

    for _ in range(count):
        if pos >= len(content):
            break
        while pos < len(content) and not _is_letter(content[pos]):
            pos += 1
        while pos < len(content) and _is_letter(content[pos]):
            pos += 1

    buffer.point = pos + 1
    return ""


def beginning_of_buffer(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point to position 1."""
    expect_no_args("beginning-of-buffer", args)
    buffer.point = 1
    return ""


def end_of_buffer(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point past the last character."""
    expect_no_args("end-of-buffer", args)
    buffer.point = len(buffer.content) + 1
    return ""


def beginning_of_line(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point to the start of the current line."""
    expect_no_args("beginning-of-line", args)
    content = buffer.content
    pos = buffer.point - 1

    if pos < 0:
        buffer.point = 1
        return ""
    if pos >= len(content):
        pos = max(len(content) - 1, 0)

    while pos > 0 and content[pos - 1] != "\n":
        pos -= 1

    buffer.point = pos + 1
    return ""


def end_of_line(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point to just before the next newline, or to the buffer end."""
    expect_no_args("end-of-line", args)
    content = buffer.content
    pos = max(buffer.point - 1, 0)

    if pos >= len(content):
        buffer.point = len(content) + 1
        return ""

    newline = content.find("\n", pos)
    buffer.point = (len(content) if newline == -1 else newline) + 1
    return ""


def goto_char(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point to POSITION, clamped to the buffer."""
    position = expect_number("goto-char", args)
    buffer.point = min(max(position, 1), len(buffer.content) + 1)
    return ""


def goto_line(args: Sequence[Any], buffer: Buffer) -> str:
    """Move point to the start of LINE, clamped to the existing lines."""
    line_number = expect_number("goto-line", args)
    lines = buffer.content.split("\n")
    line_number = min(max(line_number, 1), len(lines))

    buffer.point = 1 + sum(len(line) + 1 for line in lines[: line_number - 1])
    return ""


_COUNT_PARAM = "number"

register_documentation(FunctionDoc(
    name="backward-char",
    summary="Move point backward by a specified number of characters",
    description="Moves the point backward by the specified number of characters. If no count is provided, moves backward by 1 character. The point is constrained to stay within buffer bounds - it cannot move before the beginning of the buffer.",
    category="movement",
    parameters=(
        ParameterDoc(name="count", type=_COUNT_PARAM, description="Number of characters to move backward (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Move backward by default amount (1 character)", input="goto-char 6; backward-char; point", buffer="Hello world", output="5"),
        ExampleDoc(description="Move backward by specific count", input="goto-char 8; backward-char 3; point", buffer="Hello world", output="5"),
    ),
    see_also=("forward-char", "backward-word", "goto-char"),
))

register_documentation(FunctionDoc(
    name="forward-char",
    summary="Move point forward by a specified number of characters",
    description="Moves the point forward by the specified number of characters. If no count is provided, moves forward by 1 character. The point is constrained to stay within buffer bounds - it cannot move beyond the end of the buffer or before the beginning.",
    category="movement",
    parameters=(
        ParameterDoc(name="count", type=_COUNT_PARAM, description="Number of characters to move forward (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Move forward by default amount (1 character)", input="goto-char 5; forward-char; point", buffer="Hello world", output="6"),
        ExampleDoc(description="Move forward by specific count", input="goto-char 1; forward-char 3; point", buffer="Hello world", output="4"),
    ),
    see_also=("backward-char", "forward-word", "goto-char"),
))

register_documentation(FunctionDoc(
    name="backward-word",
    summary="Move point backward by a specified number of words",
    description="Moves the point backward by the specified number of words. A word is defined as a sequence of letter characters. The function skips over non-word characters to find the end of each word, then moves to the beginning of that word. If no count is provided, moves backward by 1 word. The point cannot move before the beginning of the buffer.",
    category="movement",
    parameters=(
        ParameterDoc(name="count", type=_COUNT_PARAM, description="Number of words to move backward (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Move backward by default amount (1 word)", input="goto-char 15; backward-word; point", buffer="Hello world test", output="13"),
        ExampleDoc(description="Move backward by specific count", input="goto-char 20; backward-word 2; point", buffer="Hello world test buffer", output="13"),
    ),
    see_also=("forward-word", "backward-char", "backward-kill-word", "mark-word"),
))

register_documentation(FunctionDoc(
    name="forward-word",
    summary="Move point forward by a specified number of words",
    description="Moves the point forward by the specified number of words. A word is defined as a sequence of letter characters. The function skips over non-word characters to find the start of each word, then moves to the end of that word. If no count is provided, moves forward by 1 word. The point cannot move beyond the end of the buffer.",
    category="movement",
    parameters=(
        ParameterDoc(name="count", type=_COUNT_PARAM, description="Number of words to move forward (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Move forward by default amount (1 word)", input="goto-char 3; forward-word; point", buffer="Hello world test", output="6"),
        ExampleDoc(description="Move forward by specific count", input="goto-char 1; forward-word 2; point", buffer="Hello world test buffer", output="12"),
    ),
    see_also=("backward-word", "forward-char", "kill-word", "mark-word"),
))

register_documentation(FunctionDoc(
    name="beginning-of-buffer",
    summary="Move point to the very beginning of the buffer",
    description="Moves the point to the very beginning of the buffer, which is always position 1. This is a simple navigation command that provides a quick way to jump to the start of any buffer content.",
    category="movement",
    examples=(
        ExampleDoc(description="Move to beginning from any position", input="goto-char 20; beginning-of-buffer; point", buffer="Hello world\nSecond line\nThird line", output="1"),
        ExampleDoc(description="Move to beginning of empty buffer", input="beginning-of-buffer; point", buffer="", output="1"),
    ),
    see_also=("end-of-buffer", "beginning-of-line", "goto-char"),
))

register_documentation(FunctionDoc(
    name="end-of-buffer",
    summary="Move point to the very end of the buffer",
    description="Moves the point to the very end of the buffer, which is one position past the last character. This position allows for inserting text at the end of the buffer content.",
    category="movement",
    examples=(
        ExampleDoc(description="Move to end from any position", input="goto-char 1; end-of-buffer; point", buffer="Hello world", output="12"),
        ExampleDoc(description="Move to end of empty buffer", input="end-of-buffer; point", buffer="", output="1"),
    ),
    see_also=("beginning-of-buffer", "end-of-line", "goto-char"),
))

register_documentation(FunctionDoc(
    name="beginning-of-line",
    summary="Move point to the beginning of the current line",
    description="Moves the point to the beginning of the current line. The beginning of a line is defined as the position immediately after a newline character, or the start of the buffer if on the first line. This function takes no arguments.",
    category="movement",
    examples=(
        ExampleDoc(description="Move to beginning of second line", input='search-forward "5"; beginning-of-line; point', buffer="1\n3 5\n7", output="3"),
        ExampleDoc(description="Move to beginning from middle of line", input="goto-char 5; beginning-of-line; point", buffer="Hello world", output="1"),
    ),
    see_also=("end-of-line", "beginning-of-buffer", "goto-line"),
))

register_documentation(FunctionDoc(
    name="end-of-line",
    summary="Move point to the end of the current line",
    description="Moves the point to the end of the current line. The end of a line is defined as the position just before a newline character, or the end of the buffer if on the last line. This function takes no arguments.",
    category="movement",
    examples=(
        ExampleDoc(description="Move to end of current line", input='search-forward "T"; end-of-line; point', buffer="One\nTwo\nThree", output="8"),
        ExampleDoc(description="Move to end from beginning of line", input="beginning-of-line; end-of-line; point", buffer="Hello world", output="12"),
    ),
    see_also=("beginning-of-line", "end-of-buffer", "goto-line"),
))

register_documentation(FunctionDoc(
    name="goto-char",
    summary="Move point to specified character position",
    description="Moves the point to the specified character position in the buffer. The position is 1-based, where position 1 is the beginning of the buffer. If the position is less than 1, the point moves to the beginning. If the position is greater than the buffer size plus 1, the point moves to the end. This function provides precise cursor positioning for text editing operations.",
    category="movement",
    parameters=(
        ParameterDoc(name="position", type="number", description="1-based character position to move to"),
    ),
    examples=(
        ExampleDoc(description="Move to specific position in buffer", input="goto-char 7", buffer="Hello world, this is a test buffer.", output="Point moves to position 7 (after 'world')"),
        ExampleDoc(description="Move to beginning of buffer", input="goto-char 1", buffer="Hello world", output="Point moves to position 1 (beginning)"),
        ExampleDoc(description="Move beyond buffer end (clamped)", input="goto-char 100", buffer="Hello world", output="Point moves to position 12 (end of buffer)"),
        ExampleDoc(description="Use with column calculation", input="goto-char 25; current-column", buffer="First line\nSecond line with content\nThird line", output="Returns column 14 on second line"),
    ),
    see_also=("point", "goto-line", "beginning-of-buffer", "end-of-buffer", "current-column"),
))

register_documentation(FunctionDoc(
    name="goto-line",
    summary="Move point to the beginning of a specific line",
    description="Moves the point to the beginning of the specified line number. Line numbers are 1-based. If the line number is less than 1, moves to line 1. If the line number is greater than the total number of lines, moves to the last line. The point is positioned at the beginning of the target line.",
    category="movement",
    parameters=(
        ParameterDoc(name="line-number", type="number", description="The line number to move to (1-based)"),
    ),
    examples=(
        ExampleDoc(description="Move to line 3 in a multi-line buffer", input="goto-line 3", buffer="Line 1: First line of text\nLine 2: Second line of text\nLine 3: Third line of text\nLine 4: Fourth line of text", output="Point moves to beginning of line 3 (position 51)"),
        ExampleDoc(description="Move to line beyond buffer end", input="goto-line 10", buffer="Line 1\nLine 2\nLine 3", output="Point moves to beginning of last line (line 3)"),
        ExampleDoc(description="Move to line number less than 1", input="goto-line 0", buffer="Line 1\nLine 2\nLine 3", output="Point moves to beginning of first line (line 1)"),
    ),
    see_also=("goto-char", "beginning-of-line", "end-of-line", "line-number-at-pos"),
))