import io

import pytest

from gold_digger.textutil import BUFFER_SIZE, has_extension, read_lines


@pytest.mark.parametrize(
    "path",
    ["maps/level.ber", "a.ber", ".ber", "dir.with.dots/x.ber"],
)
def test_has_extension_accepts(path):
    assert has_extension(path, ".ber") is True


@pytest.mark.parametrize(
    "path",
    ["map.txt", "ber", "level.be", "level.ber.txt", "", "level.BER"],
)
def test_has_extension_rejects(path):
    assert has_extension(path, ".ber") is False


def test_read_lines_matches_splitlines():
    text = "1111\n1P01\n1CE1\n1111"
    lines = list(read_lines(io.StringIO(text)))
    assert lines == text.splitlines(keepends=True)


def test_read_lines_keeps_trailing_newline():
    text = "111\n101\n111\n"
    lines = list(read_lines(io.StringIO(text)))
    assert lines == text.splitlines(keepends=True)
    assert all(line.endswith("\n") for line in lines)


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_read_lines_long_lines_span_chunks():
    long_line = "1" * (BUFFER_SIZE * 3 + 7)
    text = f"{long_line}\n{long_line}\nend"
    lines = list(read_lines(io.StringIO(text)))
    assert lines == [long_line + "\n", long_line + "\n", "end"]
    assert "".join(lines) == text


def test_read_lines_blank_lines_preserved():
    text = "\n\nabc\n\n"
    lines = list(read_lines(io.StringIO(text)))
    assert lines == text.splitlines(keepends=True)


def test_read_lines_is_lazy_generator():
    stream = io.StringIO("a\nb\n")
    gen = read_lines(stream)
    assert next(gen) == "a\n"
    assert next(gen) == "b\n"
    with pytest.raises(StopIteration):
        next(gen)