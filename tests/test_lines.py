import io

import pytest

from solong.lines import LineReader, read_lines


DATA = b"1111\n1PCE\n\n1X01"


@pytest.mark.parametrize("size", [1, 2, 3, 5, 42, 1000])
def test_lines_rejoin_to_input(size):
    lines = list(read_lines(io.BytesIO(DATA), size))
    assert b"".join(lines) == DATA
    assert all(line.endswith(b"\n") for line in lines[:-1])
    assert all(line.count(b"\n") <= 1 for line in lines)


def test_lines_match_splitlines():
    lines = list(read_lines(io.BytesIO(DATA)))
    assert lines == DATA.splitlines(keepends=True)


def test_next_line_returns_none_at_end():
    reader = LineReader(io.BytesIO(b"ab\ncd\n"), 4)
    assert reader.next_line() == b"ab\n"
    assert reader.next_line() == b"cd\n"
    assert reader.next_line() is None
    assert reader.next_line() is None


def test_last_line_without_newline():
    reader = LineReader(io.BytesIO(b"ab\ncd"), 3)
    assert list(reader) == [b"ab\n", b"cd"]


def test_empty_stream_has_no_lines():
    assert list(read_lines(io.BytesIO(b""))) == []


def test_text_stream():
    text = "10P\nC0E\n"
    assert list(read_lines(io.StringIO(text), 2)) == text.splitlines(keepends=True)


def test_non_positive_buffer_size_raises():
    with pytest.raises(ValueError):
        LineReader(io.BytesIO(DATA), 0)


class _Failing:
    def read(self, size):
        raise OSError("read failed")


def test_read_error_propagates_and_reader_stops():
    reader = LineReader(_Failing(), 8)
    with pytest.raises(OSError):
        reader.next_line()
    assert reader.next_line() is None