import pytest

from texted.core import Buffer, BuiltinError
from texted.docs import get_documentation
from texted.region import (
    exchange_point_and_mark,
    mark_line,
    mark_whole_buffer,
    mark_word,
    region_beginning,
    region_end,
    set_mark,
)


def _region_text(buffer):
    return buffer.content[min(buffer.mark, buffer.point) - 1:max(buffer.mark, buffer.point) - 1]


def test_set_mark_uses_point():
    buffer = Buffer(content="Hello world, this is a test buffer.", point=7)
    assert set_mark([], buffer) == ""
    assert buffer.mark == 7
    assert buffer.point == 7


def test_set_mark_rejects_arguments():
    with pytest.raises(BuiltinError, match="set-mark expects 0 arguments, got 1"):
        set_mark([1], Buffer(content="abc"))


def test_exchange_point_and_mark():
    buffer = Buffer(content="Hello world test", point=10, mark=5)
    assert exchange_point_and_mark([], buffer) == ""
    assert (buffer.point, buffer.mark) == (5, 10)


def test_exchange_twice_restores():
    buffer = Buffer(content="Hello world test", point=3, mark=9)
    exchange_point_and_mark([], buffer)
    exchange_point_and_mark([], buffer)
    assert (buffer.point, buffer.mark) == (3, 9)


@pytest.mark.parametrize("point, mark", [(10, 5), (5, 10)])
def test_region_bounds_independent_of_order(point, mark):
    buffer = Buffer(content="Hello world test", point=point, mark=mark)
    assert region_beginning([], buffer) == 5
    assert region_end([], buffer) == 10


def test_region_functions_reject_arguments():
    with pytest.raises(BuiltinError, match="region-beginning expects 0 arguments"):
        region_beginning([1], Buffer())
    with pytest.raises(BuiltinError, match="region-end expects 0 arguments"):
        region_end([1], Buffer())


def test_mark_line_current_line():
    content = "First line\nSecond line\nThird line"
    buffer = Buffer(content=content, point=content.index("Second") + len("Second") + 1)
    assert mark_line([], buffer) == ""
    assert _region_text(buffer) == "Second line\n"


def test_mark_line_multiple_lines():
    buffer = Buffer(content="First line\nSecond line\nThird line\nFourth line", point=15)
    mark_line([2], buffer)
    assert _region_text(buffer) == "Second line\nThird line\n"


def test_mark_line_last_line_reaches_end():
    content = "First line\nSecond line\nThird line"
    buffer = Buffer(content=content, point=len(content) - 2)
    mark_line([], buffer)
    assert buffer.point == len(content) + 1
    assert _region_text(buffer) == "Third line"


def test_mark_line_errors():
    with pytest.raises(BuiltinError, match="mark-line expects a number argument"):
        mark_line(["x"], Buffer(content="abc"))
    with pytest.raises(BuiltinError, match="mark-line expects at most 1 argument, got 2"):
        mark_line([1, 2], Buffer(content="abc"))


def test_mark_whole_buffer():
    content = "Hello world test buffer content"
    buffer = Buffer(content=content, point=5, mark=9)
    assert mark_whole_buffer([], buffer) == ""
    assert buffer.mark == 1
    assert buffer.point == len(content) + 1
    assert _region_text(buffer) == content


def test_mark_word_inside_word():
    buffer = Buffer(content="Hello world, this is a test buffer.", point=9)
    mark_word([], buffer)
    assert buffer.mark == 7
    assert buffer.point == 12
    assert _region_text(buffer) == "world"


def test_mark_word_at_point_past_end_does_nothing():
    buffer = Buffer(content="Hello", point=6, mark=2)
    assert mark_word([], buffer) == ""
    assert (buffer.point, buffer.mark) == (6, 2)


def test_mark_word_rejects_arguments():
    with pytest.raises(BuiltinError, match="mark-word expects 0 arguments"):
        mark_word([1], Buffer(content="abc"))


def test_documentation_registered():
    doc = get_documentation("mark-line")
    assert doc.category == "mark"
    assert doc.parameters[0].optional is True
    assert get_documentation("exchange-point-and-mark").category == "region"