"""Built-ins that search the buffer, test text around point and replace matches."""

from __future__ import annotations

import re
from typing import Any, Sequence

from texted.core import Buffer, BuiltinError, Symbol, expect_string
from texted.docs import ExampleDoc, FunctionDoc, ParameterDoc, register_documentation

__all__ = [
    "search_forward",
    "search_backward",
    "re_search_forward",
    "re_search_backward",
    "replace_match",
    "looking_at",
    "looking_back",
]

_T = Symbol("t")
_NIL = Symbol("nil")


def _compile(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise BuiltinError(f"invalid regexp: {exc}") from exc


def _try_compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error:
        return None


def search_forward(args: Sequence[Any], buffer: Buffer) -> str:
    """Find TEXT after point and move point to the end of the match."""
    text = expect_string("search-forward", args)
    content = buffer.content
    start = max(buffer.point - 1, 0)
    if start >= len(content):
        raise BuiltinError("search failed")

    index = content.find(text, start)
    if index == -1:
        raise BuiltinError("search failed")

    match_start = index + 1
    match_end = match_start + len(text)
    buffer.point = match_end
    buffer.record_match(match_start, match_end, text)
    return ""


def search_backward(args: Sequence[Any], buffer: Buffer) -> str:
    """Find the last TEXT before point and move point to the end of the match."""
    text = expect_string("search-backward", args)
    content = buffer.content
    end = min(buffer.point - 1, len(content))
    if end < 0:
        raise BuiltinError("search failed")

    index = content.rfind(text, 0, end)
    if index == -1:
        raise BuiltinError("search failed")

    match_start = index + 1
    match_end = match_start + len(text)
    buffer.point = match_end
    buffer.record_match(match_start, match_end, text)
    return ""


def re_search_forward(args: Sequence[Any], buffer: Buffer) -> str:
    """Find REGEXP after point and move point to the end of the match."""
    pattern = expect_string("re-search-forward", args)
    content = buffer.content
    start = max(buffer.point - 1, 0)
    if start >= len(content):
        raise BuiltinError("search failed")

    match = _compile(pattern).search(content[start:])
    if match is None:
        raise BuiltinError("search failed")

    match_start = start + match.start() + 1
    match_end = start + match.end() + 1
    buffer.point = match_end
    buffer.record_match(match_start, match_end, match.group(0))
    return ""


def re_search_backward(args: Sequence[Any], buffer: Buffer) -> str:
    """Find the rightmost REGEXP match before point; point goes to its end."""
    pattern = expect_string("re-search-backward", args)
    content = buffer.content
    end = min(buffer.point - 1, len(content))
    if end < 0:
        raise BuiltinError("search failed")

    compiled = _compile(pattern)
    last = None
    for last in compiled.finditer(content[:end]):
        pass
    if last is None:
        raise BuiltinError("search failed")

    match_start = last.start() + 1
    match_end = last.end() + 1
    buffer.point = match_end
    buffer.record_match(match_start, match_end, last.group(0))
    return ""


def replace_match(args: Sequence[Any], buffer: Buffer) -> str:
    """Replace the text of the last search match; point goes after the new text."""
    text = expect_string("replace-match", args)
    if not buffer.last_search_match:
        raise BuiltinError("no previous search")

    content = buffer.content
    start = buffer.last_search_start - 1
    end = buffer.last_search_end - 1
    if start < 0 or end > len(content) or start >= end:
        raise BuiltinError("invalid search match positions")

    buffer.content = content[:start] + text + content[end:]
    buffer.point = start + len(text) + 1
    return ""


def looking_at(args: Sequence[Any], buffer: Buffer) -> Symbol:
    """Return t if PATTERN matches at point, nil otherwise."""
    pattern = expect_string("looking-at", args)
    content = buffer.content
    pos = buffer.point - 1
    if pos < 0 or pos >= len(content):
        return _NIL

    rest = content[pos:]
    compiled = _try_compile(pattern)
    if compiled is None:
        return _T if rest.startswith(pattern) else _NIL
    return _T if compiled.match(rest) else _NIL


def looking_back(args: Sequence[Any], buffer: Buffer) -> Symbol:
    """Return t if PATTERN matches text ending exactly at point, nil otherwise."""
    pattern = expect_string("looking-back", args)
    content = buffer.content
    pos = buffer.point - 1
    if pos <= 0:
        return _NIL

    before = content[:pos]
    compiled = _try_compile(pattern)
    if compiled is None:
        return _T if pos >= len(pattern) and before.endswith(pattern) else _NIL

    match = compiled.search(before)
    return _T if match is not None and match.end() == len(before) else _NIL


register_documentation(FunctionDoc(
    name="search-forward",
    summary="Search for text forward from current position",
    description="Searches for the given string forward from the current point. If found, moves point to the end of the match and stores match information for use with replace-match. If not found, returns an error and leaves point unchanged.",
    category="search",
    parameters=(
        ParameterDoc(name="pattern", type="string", description="Text pattern to search for"),
    ),
    examples=(
        ExampleDoc(description="Basic text search", input='search-forward "test"', buffer="Hello world, this is a test buffer.", output="Point moves to position after 'test' (position 28)"),
        ExampleDoc(description="Search that fails", input='search-forward "missing"', buffer="Hello world", output="Error: search failed"),
    ),
    see_also=("search-backward", "re-search-forward", "replace-match"),
))

register_documentation(FunctionDoc(
    name="search-backward",
    summary="Search for text backward from current position",
    description="Searches for the given string backward from the current point. If found, moves point to the end of the match and stores match information for use with replace-match. If not found, returns an error and leaves point unchanged. The search examines text before the current point position.",
    category="search",
    parameters=(
        ParameterDoc(name="pattern", type="string", description="Text pattern to search for"),
    ),
    examples=(
        ExampleDoc(
            description="Basic backward text search",
            input='end-of-buffer search-backward "test"',
            buffer='Hello world, this is a test buffer.\nThe word "test" appears twice here.\nAnother line with test content.',
            output="Point moves to position after the last 'test' (position 95)",
        ),
        ExampleDoc(description="Search that fails", input='beginning-of-buffer search-backward "missing"', buffer="Hello world", output="Error: search failed"),
    ),
    see_also=("search-forward", "re-search-backward", "replace-match"),
))

register_documentation(FunctionDoc(
    name="re-search-forward",
    summary="Search for regular expression pattern forward from current position",
    description="Searches for the given regular expression pattern forward from the current point. If found, moves point to the end of the match and stores match information for use with replace-match. If not found, returns an error and leaves point unchanged. If the pattern is invalid, returns a compilation error.",
    category="search",
    parameters=(
        ParameterDoc(name="regexp", type="string", description="Regular expression pattern to search for"),
    ),
    examples=(
        ExampleDoc(description="Search for word followed by digits", input='re-search-forward "[a-z]+[0-9]+"', buffer="The function foo123 is defined here.", output="Point moves to position 20 (after 'foo123')"),
        ExampleDoc(description="Search for digit pattern", input='re-search-forward "[0-9]+"', buffer="Hello 123 world", output="Point moves to position after first number match"),
    ),
    see_also=("re-search-backward", "search-forward", "replace-match", "looking-at"),
))

register_documentation(FunctionDoc(
    name="re-search-backward",
    summary="Search for regular expression pattern backward from current position",
    description="Searches for the given regular expression pattern backward from the current point. Finds all matches before the current position and selects the rightmost (closest to point) match. If found, moves point to the end of the match and stores match information for use with replace-match. If not found, returns an error and leaves point unchanged. If the pattern is invalid, returns a compilation error.",
    category="search",
    parameters=(
        ParameterDoc(name="regexp", type="string", description="Regular expression pattern to search for"),
    ),
    examples=(
        ExampleDoc(description="Search backward for literal text", input='end-of-buffer; re-search-backward "two"', buffer="One two three", output="Point moves to position 8 (after 'two')"),
        ExampleDoc(description="Search backward for pattern", input='end-of-buffer; re-search-backward "[a-z]+"', buffer="Hello 123 world", output="Point moves to position after rightmost word match"),
    ),
    see_also=("re-search-forward", "search-backward", "replace-match", "looking-back"),
))

register_documentation(FunctionDoc(
    name="replace-match",
    summary="Replace text of last search match with new text",
    description="Replaces the text of the last successful search match with new text. Takes one argument: the replacement string. This function requires that a search operation (search-forward, search-backward, re-search-forward, or re-search-backward) has been performed previously to establish match boundaries. Replaces the matched text with the provided replacement string and moves point to the end of the replacement text. Returns an empty string on success. If no previous search has been performed, returns an error.",
    category="search",
    parameters=(
        ParameterDoc(name="replacement", type="string", description="Text to replace the last search match with"),
    ),
    examples=(
        ExampleDoc(description="Replace matched text after search", input='search-forward "old"; replace-match "new"', buffer="Hello old world, this is a test.", output="Buffer becomes 'Hello new world, this is a test.' and point moves to end of replacement"),
        ExampleDoc(description="Replace regex match", input='re-search-forward "[0-9]+"; replace-match "NUM"', buffer="Version 123 released", output="Buffer becomes 'Version NUM released' and point moves after 'NUM'"),
    ),
    see_also=("search-forward", "search-backward", "re-search-forward", "re-search-backward", "replace-regexp-in-string"),
))

register_documentation(FunctionDoc(
    name="looking-at",
    summary="Check if text at current position matches a pattern",
    description="Checks if the text at the current point matches the given pattern. Returns the symbol 't' if the pattern matches at the current position, 'nil' otherwise. The pattern can be either a literal string or a regular expression. If the pattern is a valid regular expression, it uses regexp matching starting at the current position. If the pattern is not a valid regexp, it falls back to literal string matching. Does not move the point or modify the buffer in any way.",
    category="search",
    parameters=(
        ParameterDoc(name="pattern", type="string", description="Pattern to match (literal string or regular expression)"),
    ),
    examples=(
        ExampleDoc(description="Check literal string match", input='goto-char 7; looking-at "world"', buffer="Hello world test buffer", output="Returns 't' (pattern matches at position 7)"),
        ExampleDoc(description="Check regex pattern match", input='goto-char 7; looking-at "[0-9]+"', buffer="Hello 123 world", output="Returns 't' (digits match at position 7)"),
        ExampleDoc(description="Pattern does not match", input='goto-char 7; looking-at "test"', buffer="Hello world test", output="Returns 'nil' (pattern not at position 7)"),
    ),
    see_also=("looking-back", "re-search-forward", "string-match"),
))

register_documentation(FunctionDoc(
    name="looking-back",
    summary="Check if text before current position matches a pattern",
    description="Checks if the text before the current point matches the given pattern ending at the current position. Returns the symbol 't' if the pattern matches, 'nil' otherwise. The pattern can be either a literal string or a regular expression. For literal strings, checks if the text before point ends with the given string. For regular expressions, checks if there's a match that ends exactly at the current point. Does not move the point or modify the buffer in any way.",
    category="search",
    parameters=(
        ParameterDoc(name="pattern", type="string", description="Pattern to match (literal string or regular expression)"),
    ),
    examples=(
        ExampleDoc(description="Check literal string match before point", input='goto-char 12; looking-back "world"', buffer="Hello world test buffer", output="Returns 't' (text before position 12 ends with 'world')"),
        ExampleDoc(description="Check regex pattern match before point", input='goto-char 10; looking-back "[0-9]+"', buffer="Hello 123 world", output="Returns 't' (digits end at position 10)"),
        ExampleDoc(description="Pattern does not match before point", input='goto-char 8; looking-back "test"', buffer="Hello world test", output="Returns 'nil' (text before position 8 doesn't end with 'test')"),
    ),
    see_also=("looking-at", "re-search-backward", "string-match"),
))