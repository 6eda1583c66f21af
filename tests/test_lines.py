import pytest

from texted.core import Buffer, BuiltinError
from texted.lines import current_column, line_number_at_pos

THREE_LINES = "First line\nSecond line\nThird line"


def test_line_number_at_beginning_is_one():
    assert line_number_at_pos([], Buffer("Hello world")) == 1


@pytest.mark.parametrize("point, expected", [(15, 2), (25, 3)])
def test_line_number_documented_examples(point, expected):
    assert line_number_at_pos([], Buffer(THREE_LINES, point=point)) == expected


def test_line_number_matches_newlines_before_point():
    for point in range(1, len(THREE_LINES) + 2):
        buffer = Buffer(THREE_LINES, point=point)
        assert line_number_at_pos([], buffer) == THREE_LINES[: point - 1].count("\n") + 1


def test_line_number_clamps_point_outside_buffer():
    last = line_number_at_pos([], Buffer(THREE_LINES, point=len(THREE_LINES) + 1))
    assert line_number_at_pos([], Buffer(THREE_LINES, point=1000)) == last
    assert line_number_at_pos([], Buffer(THREE_LINES, point=-5)) == line_number_at_pos(
        [], Buffer(THREE_LINES, point=1)
    )


def test_line_number_rejects_arguments():
    with pytest.raises(BuiltinError, match="line-number-at-pos expects 0 arguments, got 1"):
        line_number_at_pos([1], Buffer(THREE_LINES))


def test_column_on_newline_is_zero():
    newline_point = THREE_LINES.index("\n") + 1
    assert current_column([], Buffer(THREE_LINES, point=newline_point)) == 0


def test_column_of_empty_buffer_is_zero():
    assert current_column([], Buffer("")) == 0


def test_column_before_buffer_start_is_zero():
    assert current_column([], Buffer("Hello", point=0)) == 0


def test_column_grows_by_one_within_a_line():
    start = THREE_LINES.index("\n") + 2
    end = THREE_LINES.index("\n", start)
    columns = [current_column([], Buffer(THREE_LINES, point=p)) for p in range(start, end + 1)]
    assert all(b - a == 1 for a, b in zip(columns, columns[1:]))


def test_column_restarts_on_each_line():
    second_start = THREE_LINES.index("\n") + 2
    third_start = THREE_LINES.index("\n", second_start) + 2
    first = current_column([], Buffer(THREE_LINES, point=1))
    assert current_column([], Buffer(THREE_LINES, point=second_start)) == first
    assert current_column([], Buffer(THREE_LINES, point=third_start)) == first


def test_column_past_end_equals_column_at_last_character():
    last = current_column([], Buffer(THREE_LINES, point=len(THREE_LINES)))
    assert current_column([], Buffer(THREE_LINES, point=len(THREE_LINES) + 1)) == last
    assert current_column([], Buffer(THREE_LINES, point=500)) == last


def test_column_does_not_move_point():
    buffer = Buffer(THREE_LINES, point=7)
    current_column([], buffer)
    assert buffer.point == 7
    assert buffer.content == THREE_LINES


def test_column_rejects_arguments():
    with pytest.raises(BuiltinError, match="current-column expects 0 arguments, got 2"):
        current_column(["a", "b"], Buffer(THREE_LINES))