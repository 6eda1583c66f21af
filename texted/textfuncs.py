"""Built-ins that operate on string values."""

from __future__ import annotations

from typing import Any, Sequence

from texted.core import Buffer, BuiltinError, expect_string
from texted.docs import ExampleDoc, FunctionDoc, ParameterDoc, register_documentation

__all__ = ["capitalize", "concat", "downcase", "length"]


def capitalize(args: Sequence[Any], buffer: Buffer) -> str:
    """Upper-case the first character and lower-case the rest."""
    text = expect_string("capitalize", args)
    if not text:
        return ""
    return text[0].upper() + text[1:].lower()


def concat(args: Sequence[Any], buffer: Buffer) -> str:
    """Join all string arguments in order."""
    for position, arg in enumerate(args, start=1):
        if not isinstance(arg, str):
            raise BuiltinError(
                f"concat expects string arguments, got non-string at position {position}"
            )
    return "".join(args)


def downcase(args: Sequence[Any], buffer: Buffer) -> str:
    """Return the string in lower case."""
    return expect_string("downcase", args).lower()


def length(args: Sequence[Any], buffer: Buffer) -> int:
    """Return the number of characters in the string."""
    return len(expect_string("length", args))


register_documentation(FunctionDoc(
    name="capitalize",
    category="string",
    summary="Capitalize the first character of a string",
    description="Converts the first character of STRING to uppercase and all remaining characters to lowercase. Returns an empty string if STRING is empty.",
    parameters=(ParameterDoc(name="string", type="string", description="The string to capitalize"),),
    examples=(
        ExampleDoc(description="Capitalize lowercase text", input='capitalize "hello world"', output='"Hello world"'),
        ExampleDoc(description="Capitalize uppercase text", input='capitalize "HELLO WORLD"', output='"Hello world"'),
    ),
    see_also=("upcase", "downcase"),
))

register_documentation(FunctionDoc(
    name="concat",
    category="string",
    summary="Concatenate multiple strings",
    description="Concatenates zero or more strings into a single string. All arguments must be strings. Returns an empty string if no arguments are provided.",
    parameters=(ParameterDoc(name="strings", type="string", description="Zero or more strings to concatenate"),),
    examples=(
        ExampleDoc(description="Concatenate two strings", input='concat "Hello" " world"', output='"Hello world"'),
        ExampleDoc(
            description="Concatenate multiple strings",
            input='concat "Hello" " " "beautiful" " " "world"',
            output='"Hello beautiful world"',
        ),
    ),
    see_also=("substring", "length"),
))

register_documentation(FunctionDoc(
    name="downcase",
    category="string",
    summary="Convert string to lowercase",
    description="Converts all alphabetic characters in STRING to lowercase. Non-alphabetic characters remain unchanged.",
    parameters=(ParameterDoc(name="string", type="string", description="The string to convert to lowercase"),),
    examples=(
        ExampleDoc(description="Convert mixed case to lowercase", input='downcase "Hello World"', output='"hello world"'),
        ExampleDoc(description="Convert with numbers", input='downcase "TEST123"', output='"test123"'),
    ),
    see_also=("upcase", "capitalize"),
))

register_documentation(FunctionDoc(
    name="length",
    category="string",
    summary="Get the length of a string",
    description="Returns the number of characters (bytes) in STRING. For empty strings, returns 0.",
    parameters=(ParameterDoc(name="string", type="string", description="The string whose length to calculate"),),
    examples=(
        ExampleDoc(description="Get length of text", input='length "Hello world"', output="11"),
        ExampleDoc(description="Get length of empty string", input='length ""', output="0"),
    ),
    see_also=("substring", "concat"),
))