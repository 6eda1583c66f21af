"""Built-ins that insert, delete, kill and replace buffer text."""

from __future__ import annotations

from typing import Any, Sequence

from texted.core import Buffer, expect_no_args, expect_string, optional_count
from texted.docs import ExampleDoc, FunctionDoc, ParameterDoc, register_documentation

__all__ = [
    "insert",
    "delete_char",
    "delete_backward_char",
    "delete_line",
    "delete_region",
    "kill_line",
    "kill_word",
    "backward_kill_word",
    "replace_region",
]


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _line_start(content: str, pos: int) -> int:
    """Return the 0-based index of the start of the line holding ``pos``."""
    pos = min(max(pos, 0), len(content))
    if pos == 0:
        return 0
    return content.rfind("\n", 0, pos) + 1


def _lines_end(content: str, pos: int, count: int) -> int:
    """Return the index just past the newline ending the COUNTth line from ``pos``."""
    end = max(pos, 0)
    for _ in range(count):
        newline = content.find("\n", end)
        end = len(content) if newline == -1 else newline + 1
    return end


def _region(buffer: Buffer) -> tuple[int, int]:
    """Return the region as clamped 0-based (start, end) indexes."""
    start, end = sorted((buffer.mark, buffer.point))
    return max(start - 1, 0), min(end - 1, len(buffer.content))


def insert(args: Sequence[Any], buffer: Buffer) -> str:
    """Insert TEXT at point and move point after it."""
    buffer.insert(expect_string("insert", args))
    return ""


def delete_char(args: Sequence[Any], buffer: Buffer) -> str:
    """Delete COUNT characters (default 1) at point; point stays put."""
    count = optional_count("delete-char", args)
    content = buffer.content
    pos = buffer.point
    if pos < 1 or pos > len(content):
        return ""

    start = pos - 1
    end = max(min(start + count, len(content)), start)
    buffer.content = content[:start] + content[end:]
    return ""


def delete_backward_char(args: Sequence[Any], buffer: Buffer) -> str:
    """Delete COUNT characters (default 1) before point; point moves back."""
    count = optional_count("delete-backward-char", args)
    content = buffer.content
    end = buffer.point - 1
    start = max(end - count, 0)
    if start >= end:
        return ""

    buffer.content = content[:start] + content[end:]
    buffer.point = start + 1
    return ""


def delete_line(args: Sequence[Any], buffer: Buffer) -> str:
    """Delete COUNT whole lines (default 1) from the current one."""
    count = optional_count("delete-line", args)
    content = buffer.content
    pos = buffer.point - 1

    start = _line_start(content, pos)
    end = _lines_end(content, pos, count)
    buffer.content = content[:start] + content[max(end, start):]
    buffer.point = start + 1
    return ""


def delete_region(args: Sequence[Any], buffer: Buffer) -> str:
    """Delete the text between mark and point; point goes to its start."""
    expect_no_args("delete-region", args)
    start, end = _region(buffer)
    if start >= end:
        return ""

    buffer.content = buffer.content[:start] + buffer.content[end:]
    buffer.point = start + 1
    return ""


def kill_line(args: Sequence[Any], buffer: Buffer) -> str:
    """Delete to the end of the line after point, or COUNT whole lines from point."""
    count = optional_count("kill-line", args)
    content = buffer.content
    pos = buffer.point - 1
    if pos < 0 or pos >= len(content):
        return ""

    if count == 1:
        start = pos + 1
        newline = content.find("\n", start)
        end = len(content) if newline == -1 else newline
    else:
        start = pos
        end = _lines_end(content, start, count)

    buffer.content = content[:start] + content[max(end, start):]
    return ""


def kill_word(args: Sequence[Any], buffer: Buffer) -> str:
    """Delete forward over COUNT words (default 1); point stays put."""
    count = optional_count("kill-word", args)
    content = buffer.content
    start = max(buffer.point - 1, 0)
    pos = start

    for _ in range(count):
        if pos >= len(content):
            break
        while pos < len(content) and not _is_letter(content[pos]):
            pos += 1
        while pos < len(content) and _is_letter(content[pos]):
            pos += 1

    buffer.content = content[:start] + content[max(pos, start):]
    return ""


def backward_kill_word(args: Sequence[Any], buffer: Buffer) -> str:
    """Delete backward over COUNT words (default 1), including the character at point."""
    count = optional_count("backward-kill-word", args)
    content = buffer.content
    start = buffer.point - 1
    pos = min(max(start, 0), len(content))

    for _ in range(count):
        if pos <= 0:
            break
        while pos > 0 and not _is_letter(content[pos - 1]):
            pos -= 1
        while pos > 0 and _is_letter(content[pos - 1]):
            pos -= 1

    end = max(min(start + 1, len(content)), pos)
    buffer.content = content[:pos] + content[end:]
    buffer.point = pos + 1
    return ""


def replace_region(args: Sequence[Any], buffer: Buffer) -> str:
    """Replace the text between mark and point; point goes after the new text."""
    text = expect_string("replace-region", args)
    start, end = _region(buffer)
    if start >= end:
        return ""

    buffer.content = buffer.content[:start] + text + buffer.content[end:]
    buffer.point = start + len(text) + 1
    return ""


register_documentation(FunctionDoc(
    name="insert",
    summary="Insert text at the current point position",
    description="Inserts the given string at the current point position. The point is moved to after the inserted text. This is the basic function for adding text to the buffer.",
    category="editing",
    parameters=(
        ParameterDoc(name="text", type="string", description="Text to insert into the buffer"),
    ),
    examples=(
        ExampleDoc(description="Insert text into empty buffer", input='insert "hello, world"', buffer="", output="hello, world"),
        ExampleDoc(description="Insert text at specific position", input='goto-char 6; insert " beautiful"', buffer="hello world", output="hello beautiful world"),
    ),
    see_also=("delete-char", "replace-region", "kill-line"),
))

register_documentation(FunctionDoc(
    name="delete-char",
    summary="Delete characters starting at the current point position",
    description="Deletes the specified number of characters starting at the current point position. By default, deletes one character forward from the point. The point position remains unchanged after deletion. If the count exceeds the available characters, deletes up to the end of the buffer.",
    category="editing",
    parameters=(
        ParameterDoc(name="count", type="number", description="Number of characters to delete (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Delete one character at point", input="goto-char 6; delete-char", buffer="Hello world", output="Helloworld"),
        ExampleDoc(description="Delete multiple characters", input="delete-char 3", buffer="Hello", output="lo"),
    ),
    see_also=("delete-backward-char", "delete-region", "kill-line", "insert"),
))

register_documentation(FunctionDoc(
    name="delete-backward-char",
    summary="Delete characters backward from the current point position",
    description="Deletes the specified number of characters backward from the current point position. By default, deletes one character backward from the point. The point is moved to the beginning of the deleted region after deletion. If the count exceeds the available characters before the point, deletes up to the beginning of the buffer.",
    category="editing",
    parameters=(
        ParameterDoc(name="count", type="number", description="Number of characters to delete backward (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Delete one character backward", input="forward-char; delete-backward-char", buffer="123", output="23"),
        ExampleDoc(description="Delete multiple characters backward", input="forward-char 2; delete-backward-char 2", buffer="Hello", output="llo"),
    ),
    see_also=("delete-char", "backward-char", "delete-region", "kill-line"),
))

register_documentation(FunctionDoc(
    name="delete-line",
    summary="Delete entire lines starting from the line containing the point",
    description="Deletes the specified number of complete lines starting from the line containing the current point. By default, deletes one line. When deleting multiple lines, includes the newline characters. After deletion, the point is positioned at the beginning of the line where deletion started.",
    category="editing",
    parameters=(
        ParameterDoc(name="count", type="number", description="Number of lines to delete (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Delete one line", input="goto-char 15; delete-line", buffer="First line\nSecond line\nThird line", output="First line\nThird line"),
        ExampleDoc(description="Delete multiple lines", input="goto-char 15; delete-line 2", buffer="First line\nSecond line\nThird line\nFourth line", output="First line\nFourth line"),
    ),
    see_also=("kill-line", "delete-region", "beginning-of-line", "end-of-line"),
))

register_documentation(FunctionDoc(
    name="delete-region",
    summary="Delete the text between the mark and point",
    description="Deletes the text between the current mark and point positions. The region is defined by the mark and point, with the smaller position used as the start and the larger as the end. After deletion, the point is positioned at the beginning of the deleted region. If no mark is set, the behavior is undefined.",
    category="editing",
    examples=(
        ExampleDoc(description="Delete selected region", input="goto-char 7; set-mark; goto-char 10; delete-region", buffer="Hello old world, this is a test.", output="Hello  world, this is a test."),
    ),
    see_also=("set-mark", "mark", "point", "replace-region", "kill-line"),
))

register_documentation(FunctionDoc(
    name="kill-line",
    summary="Delete text from the point to the end of line(s)",
    description="Deletes text from the current point to the end of the specified number of lines. For a single line (count=1), deletes from after the current point to the end of the line, preserving the character at the point. For multiple lines, deletes entire lines starting from the current point. The point position remains unchanged after the operation.",
    category="editing",
    parameters=(
        ParameterDoc(name="count", type="number", description="Number of lines to kill (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Kill to end of current line", input="goto-char 8; kill-line", buffer="First line content\nSecond line content\nThird line", output="First li\nSecond line content\nThird line"),
        ExampleDoc(description="Kill multiple lines", input="goto-char 1; kill-line 2", buffer="First line\nSecond line\nThird line\nFourth line", output="Third line\nFourth line"),
    ),
    see_also=("delete-line", "delete-region", "end-of-line", "kill-word"),
))

register_documentation(FunctionDoc(
    name="kill-word",
    summary="Delete text forward by a specified number of words",
    description="Deletes text from the current point forward by the specified number of words. A word is defined as a sequence of letter characters. The function follows the same word boundary logic as forward-word: it skips over non-word characters to find the start of each word, then deletes to the end of that word. If no count is provided, deletes forward by 1 word. The point remains at its original position after deletion.",
    category="editing",
    parameters=(
        ParameterDoc(name="count", type="number", description="Number of words to delete forward (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Delete one word forward from middle of word", input="goto-char 3; kill-word; buffer-substring 1 -1", buffer="Hello world test", output="He world test"),
        ExampleDoc(description="Delete multiple words forward", input="goto-char 1; kill-word 2; buffer-substring 1 -1", buffer="Hello world test buffer content", output=" test buffer content"),
    ),
    see_also=("backward-kill-word", "forward-word", "delete-region", "kill-line"),
))

register_documentation(FunctionDoc(
    name="backward-kill-word",
    summary="Delete text backward by a specified number of words",
    description="Deletes text from the current point backward by the specified number of words. A word is defined as a sequence of letter characters. The function follows the same word boundary logic as backward-word: it skips over non-word characters to find the end of each word, then deletes from the beginning of that word to the current point. If no count is provided, deletes backward by 1 word. The point moves to the beginning of the deleted region.",
    category="editing",
    parameters=(
        ParameterDoc(name="count", type="number", description="Number of words to delete backward (default: 1)", optional=True),
    ),
    examples=(
        ExampleDoc(description="Delete one word backward", input="goto-char 17; backward-kill-word; buffer-substring 1 -1", buffer="Hello world test", output="Hello world "),
        ExampleDoc(description="Delete multiple words backward", input="goto-char 25; backward-kill-word 2; buffer-substring 1 -1", buffer="Hello world test buffer content", output="Hello world ontent"),
    ),
    see_also=("kill-word", "backward-word", "delete-region", "kill-line"),
))

register_documentation(FunctionDoc(
    name="replace-region",
    summary="Replace text between mark and point with new text",
    description="Replaces the text between mark and point with the given string. The region is automatically normalized so it doesn't matter which of mark or point comes first. After replacement, point is positioned at the end of the new text. This is useful for making targeted edits to specific parts of the buffer.",
    category="editing",
    parameters=(
        ParameterDoc(name="replacement", type="string", description="Text to replace the selected region with"),
    ),
    examples=(
        ExampleDoc(description="Replace selected text", input='goto-char 7; set-mark; goto-char 10; replace-region "new"', buffer="Hello old world, this is a test.", output="Hello new world, this is a test."),
        ExampleDoc(description="Replace with empty string (delete region)", input='mark-word; replace-region ""', buffer="delete this word", output=" this word (first word deleted)"),
    ),
    see_also=("set-mark", "mark-word", "mark-line", "delete-region", "insert"),
))