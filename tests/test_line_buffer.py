"""Tests for the line buffer: wrapping, scroll eviction and degenerate sizes."""

import pytest

from hackertype.buffer import Cell, LineBuffer, new_buffer


def _row_widths(buffer):
    return [sum(cell.width for cell in row) for row in buffer.rows()]


def test_new_buffer_has_height_empty_rows():
    b = new_buffer(3, 10)
    assert b.rows() == [(), (), ()]
    assert (b.row_index, b.column) == (0, 0)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        new_buffer(-1, 5)
    with pytest.raises(ValueError):
        new_buffer(5, -1)


def test_cells_record_character_and_width():
    b = new_buffer(1, 10)
    b.append("a中")
    assert b.rows() == [(Cell("a", 1), Cell("中", 2))]
    assert b.column == 3


def test_wrap_then_newline():
    """"AB\\nCDE" in a 3x2 buffer fills both rows exactly."""
    b = new_buffer(2, 3)
    b.append("AB\nCDE")
    assert b.lines() == ["AB", "CDE"]


def test_full_row_followed_by_newline_does_not_leave_blank_row():
    b = new_buffer(3, 3)
    b.append("ABC\nD")
    assert b.lines() == ["ABC", "D", ""]


def test_long_run_wraps_mid_word():
    b = new_buffer(3, 4)
    b.append("abcdefghij")
    assert b.lines() == ["abcd", "efgh", "ij"]


def test_scroll_evicts_oldest_row():
    b = new_buffer(1, 2)
    b.append("AB")
    assert b.lines() == ["AB"]
    b.append("CD")
    assert b.lines() == ["CD"]


def test_newline_past_bottom_scrolls_one_row():
    b = new_buffer(2, 5)
    b.append("one\ntwo\nthree")
    assert b.lines() == ["two", "three"]
    assert b.row_index == 1


def test_consecutive_newlines_each_scroll():
    b = new_buffer(2, 5)
    b.append("a\nb\n\n\n")
    assert b.lines() == ["", ""]
    assert (b.row_index, b.column) == (1, 0)


def test_wide_character_wraps_when_one_column_left():
    b = new_buffer(2, 3)
    b.append("ab中")
    assert b.lines() == ["ab", "中"]
    assert _row_widths(b) == [2, 2]


def test_wide_character_fits_exactly():
    b = new_buffer(2, 4)
    b.append("中文字")
    assert b.lines() == ["中文", "字"]


def test_zero_width_drops_characters():
    b = new_buffer(1, 0)
    b.append("A")
    assert b.rows() == [()]
    b.append("BCD")
    assert b.rows() == [()]


def test_zero_width_newline_still_advances():
    b = new_buffer(3, 0)
    b.append("\n")
    assert b.row_index == 1
    assert b.rows() == [(), (), ()]


def test_wide_character_in_single_column_buffer_is_dropped():
    b = new_buffer(3, 1)
    b.append("a中b")
    assert b.lines() == ["a", "", "b"]
    assert all(w <= 1 for w in _row_widths(b))


def test_zero_height_accepts_writes_without_storing():
    b = new_buffer(0, 5)
    b.append("hello\nworld and more text\n\n")
    assert b.rows() == []
    assert b.row_index == 0


def test_zero_by_zero():
    b = new_buffer(0, 0)
    b.append("abc\n中")
    assert b.rows() == []


def test_append_accepts_any_iterable():
    b = new_buffer(1, 5)
    b.append(iter(["x", "y"]))
    assert b.lines() == ["xy"]


def test_rows_returns_snapshot():
    b = new_buffer(1, 5)
    b.append("ab")
    snapshot = b.rows()
    b.append("c")
    assert snapshot == [(Cell("a", 1), Cell("b", 1))]


def test_row_invariants_hold_for_many_shapes():
    text = "int main(void) {\n\tprintf(\"你好, world\");\n\treturn 0;\n}\n" * 3
    for height in range(0, 5):
        for width in range(0, 9):
            b = new_buffer(height, width)
            for ch in text:
                b.append(ch)
                assert len(b.rows()) == height
                assert all(w <= width for w in _row_widths(b))


def test_equality_compares_content_and_cursor():
    a = new_buffer(2, 3)
    b = new_buffer(2, 3)
    a.append("ab")
    b.append("ab")
    assert a == b
    b.append("\n")
    assert a != b
    assert a != new_buffer(2, 4)
    assert a != "ab"


def test_repr_shows_lines():
    b = LineBuffer(1, 4)
    b.append("hi")
    assert "'hi'" in repr(b)
