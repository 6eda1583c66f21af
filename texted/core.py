"""Core editor values: the buffer, symbols and argument checks for built-ins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

__all__ = [
    "Symbol",
    "BuiltinError",
    "Buffer",
    "optional_count",
    "expect_no_args",
    "expect_string",
    "expect_number",
]


@dataclass(frozen=True)
class Symbol:
    """A named symbol value such as ``t`` or ``nil``."""

    name: str

    def __str__(self) -> str:
        return self.name


class BuiltinError(Exception):
    """Raised when a built-in function is called wrongly or fails."""


@dataclass
class Buffer:
    """Text with a 1-based point and mark, plus the last search match."""

    content: str = ""
    point: int = 1
    mark: int = 1
    last_search_match: str = ""
    last_search_start: int = 0
    last_search_end: int = 0

    def __str__(self) -> str:
        return self.content

    def __len__(self) -> int:
        return len(self.content)

    def insert(self, text: str) -> None:
        """Insert ``text`` at point and move point past it."""
        index = min(max(self.point - 1, 0), len(self.content))
        self.content = self.content[:index] + text + self.content[index:]
        self.point = index + 1 + len(text)

    def record_match(self, start: int, end: int, text: str) -> None:
        """Remember a search match spanning 1-based ``start`` to ``end``."""
        self.last_search_start = start
        self.last_search_end = end
        self.last_search_match = text


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def optional_count(name: str, args: Sequence[Any]) -> int:
    """Return the optional numeric count argument, defaulting to 1."""
    if len(args) > 1:
        raise BuiltinError(f"{name} expects at most 1 argument, got {len(args)}")
    if not args:
        return 1
    if not _is_number(args[0]):
        raise BuiltinError(f"{name} expects a number argument")
    return int(args[0])


def expect_no_args(name: str, args: Sequence[Any]) -> None:
    """Raise unless ``args`` is empty."""
    if args:
        raise BuiltinError(f"{name} expects 0 arguments, got {len(args)}")


def expect_string(name: str, args: Sequence[Any]) -> str:
    """Return the single string argument."""
    if len(args) != 1:
        raise BuiltinError(f"{name} expects 1 argument, got {len(args)}")
    if not isinstance(args[0], str):
        raise BuiltinError(f"{name} expects a string argument")
    return args[0]


def expect_number(name: str, args: Sequence[Any]) -> int:
    """Return the single numeric argument, truncated to an integer."""
    if len(args) != 1:
        raise BuiltinError(f"{name} expects 1 argument, got {len(args)}")
    if not _is_number(args[0]):
        raise BuiltinError(f"{name} expects a number argument")
    return int(args[0])