import pytest

from texted.core import Buffer, BuiltinError
from texted.docs import get_documentation
from texted.position import (
    buffer_size,
    buffer_substring,
    mark,
    point,
    point_max,
    point_min,
)


def test_point_reports_buffer_point():
    buffer = Buffer("Hello world", point=5)
    assert point([], buffer) == 5


def test_mark_reports_buffer_mark():
    buffer = Buffer("Hello world", mark=3)
    assert mark([], buffer) == 3


@pytest.mark.parametrize("text", ["Hello world", ""])
def test_point_min_is_one(text):
    assert point_min([], Buffer(text)) == 1


def test_point_max_examples():
    assert point_max([], Buffer("Hello world test")) == 17
    assert point_max([], Buffer("")) == 1


def test_buffer_size_examples():
    assert buffer_size([], Buffer("Hello world test buffer")) == 23
    assert buffer_size([], Buffer("")) == 0


@pytest.mark.parametrize("text", ["", "a", "line\nline\n", "Hello world"])
def test_point_max_is_size_plus_one(text):
    buffer = Buffer(text)
    assert point_max([], buffer) == buffer_size([], buffer) + 1


@pytest.mark.parametrize(
    "start, end, expected",
    [(1, 6, "Hello"), (7, -1, "world"), (5, 5, "")],
)
def test_buffer_substring_examples(start, end, expected):
    assert buffer_substring([start, end], Buffer("Hello world")) == expected


def test_buffer_substring_whole_buffer_and_clamping():
    buffer = Buffer("Hello world")
    assert buffer_substring([1, -1], buffer) == "Hello world"
    assert buffer_substring([-10, 1000], buffer) == "Hello world"
    assert buffer_substring([8, 3], buffer) == ""


def test_buffer_substring_does_not_modify_buffer():
    buffer = Buffer("Hello world", point=4, mark=2)
    buffer_substring([2, 5], buffer)
    assert (buffer.content, buffer.point, buffer.mark) == ("Hello world", 4, 2)


def test_buffer_substring_errors():
    with pytest.raises(BuiltinError, match="buffer-substring expects 2 arguments, got 1"):
        buffer_substring([1], Buffer("abc"))
    with pytest.raises(BuiltinError, match="buffer-substring expects number arguments"):
        buffer_substring([1, "2"], Buffer("abc"))


@pytest.mark.parametrize(
    "func, name",
    [(point, "point"), (mark, "mark"), (point_min, "point-min"), (point_max, "point-max"), (buffer_size, "buffer-size")],
)
def test_no_argument_builtins_reject_arguments(func, name):
    with pytest.raises(BuiltinError, match=f"{name} expects 0 arguments, got 1"):
        func([1], Buffer("abc"))


def test_documentation_registered():
    doc = get_documentation("buffer-substring")
    assert doc.category == "buffer"
    assert [p.name for p in doc.parameters] == ["start", "end"]
    assert get_documentation("point-max").category == "position"