import pytest

from texted.core import Buffer, BuiltinError, Symbol
from texted.docs import get_documentation
from texted.search import (
    looking_at,
    looking_back,
    re_search_backward,
    re_search_forward,
    replace_match,
    search_backward,
    search_forward,
)

BACKWARD_TEXT = (
    'Hello world, this is a test buffer.\n'
    'The word "test" appears twice here.\n'
    'Another line with test content.'
)


def test_search_forward_documented_example():
    buffer = Buffer(content="Hello world, this is a test buffer.")
    assert search_forward(["test"], buffer) == ""
    assert buffer.point == 28
    assert buffer.last_search_match == "test"
    assert buffer.content[buffer.last_search_start - 1:buffer.last_search_end - 1] == "test"


def test_search_forward_fails_and_keeps_point():
    buffer = Buffer(content="Hello world", point=3)
    with pytest.raises(BuiltinError, match="search failed"):
        search_forward(["missing"], buffer)
    assert buffer.point == 3


def test_search_forward_at_end_fails():
    buffer = Buffer(content="abc", point=4)
    with pytest.raises(BuiltinError, match="search failed"):
        search_forward(["a"], buffer)


def test_search_forward_starts_at_point():
    buffer = Buffer(content="abab")
    search_forward(["ab"], buffer)
    first = buffer.point
    search_forward(["ab"], buffer)
    assert buffer.point > first
    assert buffer.point == len(buffer.content) + 1


def test_search_forward_wrong_args():
    with pytest.raises(BuiltinError, match="expects 1 argument, got 0"):
        search_forward([], Buffer(content="x"))
    with pytest.raises(BuiltinError, match="expects a string argument"):
        search_forward([3], Buffer(content="x"))


def test_search_backward_documented_example():
    buffer = Buffer(content=BACKWARD_TEXT, point=len(BACKWARD_TEXT) + 1)
    search_backward(["test"], buffer)
    assert buffer.point == 95
    assert buffer.last_search_end == 95


def test_search_backward_fails_at_start():
    buffer = Buffer(content="Hello world", point=1)
    with pytest.raises(BuiltinError, match="search failed"):
        search_backward(["missing"], buffer)


def test_search_backward_only_looks_before_point():
    buffer = Buffer(content="one two", point=4)
    with pytest.raises(BuiltinError, match="search failed"):
        search_backward(["two"], buffer)


def test_re_search_forward_documented_example():
    buffer = Buffer(content="The function foo123 is defined here.")
    re_search_forward(["[a-z]+[0-9]+"], buffer)
    assert buffer.point == 20
    assert buffer.last_search_match == "foo123"


def test_re_search_forward_invalid_regexp():
    with pytest.raises(BuiltinError, match="invalid regexp"):
        re_search_forward(["("], Buffer(content="abc"))


def test_re_search_forward_no_match():
    buffer = Buffer(content="Hello world")
    with pytest.raises(BuiltinError, match="search failed"):
        re_search_forward(["[0-9]+"], buffer)
    assert buffer.point == 1


def test_re_search_backward_documented_example():
    buffer = Buffer(content="One two three", point=14)
    re_search_backward(["two"], buffer)
    assert buffer.point == 8
    assert buffer.last_search_match == "two"


def test_re_search_backward_picks_rightmost_match():
    content = "Hello 123 world"
    buffer = Buffer(content=content, point=len(content) + 1)
    re_search_backward(["[a-z]+"], buffer)
    assert buffer.last_search_match == "world"
    assert buffer.point == len(content) + 1


def test_re_search_backward_failure():
    with pytest.raises(BuiltinError, match="search failed"):
        re_search_backward(["[0-9]"], Buffer(content="abc", point=4))


def test_replace_match_after_search():
    buffer = Buffer(content="Hello old world, this is a test.")
    search_forward(["old"], buffer)
    replace_match(["new"], buffer)
    assert buffer.content == "Hello new world, this is a test."
    assert buffer.content[:buffer.point - 1].endswith("new")


def test_replace_match_after_regex_search():
    buffer = Buffer(content="Version 123 released")
    re_search_forward(["[0-9]+"], buffer)
    replace_match(["NUM"], buffer)
    assert buffer.content == "Version NUM released"
    assert buffer.content[:buffer.point - 1] == "Version NUM"


def test_replace_match_without_search():
    with pytest.raises(BuiltinError, match="no previous search"):
        replace_match(["x"], Buffer(content="abc"))


def test_replace_match_invalid_positions():
    buffer = Buffer(content="abc")
    buffer.record_match(2, 10, "bc")
    with pytest.raises(BuiltinError, match="invalid search match positions"):
        replace_match(["x"], buffer)


def test_looking_at_examples():
    assert looking_at(["world"], Buffer(content="Hello world test buffer", point=7)) == Symbol("t")
    assert looking_at(["[0-9]+"], Buffer(content="Hello 123 world", point=7)) == Symbol("t")
    assert looking_at(["test"], Buffer(content="Hello world test", point=7)) == Symbol("nil")


def test_looking_at_does_not_move_point():
    buffer = Buffer(content="Hello world", point=7)
    looking_at(["world"], buffer)
    assert buffer.point == 7
    assert buffer.content == "Hello world"


def test_looking_at_literal_fallback_and_end():
    assert looking_at(["("], Buffer(content="(abc")) == Symbol("t")
    assert looking_at(["a"], Buffer(content="abc", point=4)) == Symbol("nil")


def test_looking_back_examples():
    assert looking_back(["world"], Buffer(content="Hello world test buffer", point=12)) == Symbol("t")
    assert looking_back(["[0-9]+"], Buffer(content="Hello 123 world", point=10)) == Symbol("t")
    assert looking_back(["test"], Buffer(content="Hello world test", point=8)) == Symbol("nil")


def test_looking_back_at_start_and_literal_fallback():
    assert looking_back(["a"], Buffer(content="abc", point=1)) == Symbol("nil")
    assert looking_back(["a("], Buffer(content="a(bc", point=3)) == Symbol("t")


def test_search_functions_are_documented():
    doc = get_documentation("re-search-backward")
    assert doc is not None
    assert doc.category == "search"
    assert "re-search-forward" in doc.see_also