import pytest

from texted.core import (
    Buffer,
    BuiltinError,
    Symbol,
    expect_no_args,
    expect_number,
    expect_string,
    optional_count,
)


def test_new_buffer_defaults():
    buffer = Buffer("Hello world")
    assert str(buffer) == "Hello world"
    assert (buffer.point, buffer.mark) == (1, 1)
    assert buffer.last_search_match == ""


def test_insert_into_empty_buffer():
    buffer = Buffer("")
    buffer.insert("hello, world")
    assert buffer.content == "hello, world"
    assert buffer.point == 1 + len("hello, world")


def test_insert_at_position():
    buffer = Buffer("hello world", point=6)
    buffer.insert(" beautiful")
    assert buffer.content == "hello beautiful world"
    assert buffer.point == 6 + len(" beautiful")


def test_insert_twice_is_sequential():
    buffer = Buffer("")
    buffer.insert("ab")
    buffer.insert("cd")
    assert buffer.content == "abcd"
    assert buffer.point == len(buffer) + 1


def test_record_match():
    buffer = Buffer("Hello old world")
    buffer.record_match(7, 10, "old")
    assert (buffer.last_search_start, buffer.last_search_end, buffer.last_search_match) == (7, 10, "old")


def test_symbol_equality_and_str():
    assert Symbol("t") == Symbol("t")
    assert Symbol("t") != Symbol("nil")
    assert str(Symbol("nil")) == "nil"


def test_optional_count_default_and_value():
    assert optional_count("forward-char", []) == 1
    assert optional_count("forward-char", [3.0]) == 3
    assert optional_count("forward-char", [2]) == 2


def test_optional_count_errors():
    with pytest.raises(BuiltinError, match="forward-char expects at most 1 argument, got 2"):
        optional_count("forward-char", [1, 2])
    with pytest.raises(BuiltinError, match="forward-char expects a number argument"):
        optional_count("forward-char", ["x"])
    with pytest.raises(BuiltinError, match="expects a number argument"):
        optional_count("forward-char", [True])


def test_expect_no_args():
    expect_no_args("point", [])
    with pytest.raises(BuiltinError, match="point expects 0 arguments, got 1"):
        expect_no_args("point", [1])


def test_expect_string():
    assert expect_string("insert", ["abc"]) == "abc"
    with pytest.raises(BuiltinError, match="insert expects 1 argument, got 2"):
        expect_string("insert", ["a", "b"])
    with pytest.raises(BuiltinError, match="insert expects a string argument"):
        expect_string("insert", [5])


def test_expect_number():
    assert expect_number("goto-char", [7.9]) == 7
    with pytest.raises(BuiltinError, match="goto-char expects 1 argument, got 0"):
        expect_number("goto-char", [])
    with pytest.raises(BuiltinError, match="goto-char expects a number argument"):
        expect_number("goto-char", ["7"])