from pathlib import Path

import pytest

from aoc2022.core import inputs
from aoc2022.core.inputs import read_lines, stream_blocks, stream_file_blocks, stream_items


def test_input_path_uses_configured_dir(monkeypatch, tmp_path):
    monkeypatch.setattr(inputs, "INPUT_DIR", tmp_path)
    assert inputs.input_path(7) == tmp_path / "day07.txt"


def test_resolve_input_dir_env_and_cli(monkeypatch):
    monkeypatch.setenv("AOC_INPUT_DIR", "from-env")
    monkeypatch.setattr("sys.argv", ["prog"])
    assert inputs.resolve_input_dir() == Path("from-env")
    monkeypatch.setattr("sys.argv", ["prog", "--input-dir=from-cli"])
    assert inputs.resolve_input_dir() == Path("from-cli")


def test_resolve_input_dir_default(monkeypatch):
    monkeypatch.delenv("AOC_INPUT_DIR", raising=False)
    monkeypatch.setattr("sys.argv", ["prog"])
    assert inputs.resolve_input_dir() == Path("input")


def test_read_lines_strips_newlines(example_file):
    path = example_file("a\r\nb\n\nc", dedent=False)
    assert list(read_lines(path)) == ["a", "b", "", "c"]


def test_stream_items_skips_bad_lines(example_file):
    path = example_file("""
        1
        two
        3
    """)
    assert list(stream_items(path, int)) == [1, 3]


def test_stream_items_strict_propagates(example_file):
    path = example_file("""
        1
        two
    """)
    with pytest.raises(ValueError):
        list(stream_items(path, int, strict=True))


def test_stream_blocks():
    lines = ["1", "2", "", "3", "", "", "4"]
    assert list(stream_blocks(iter(lines))) == [["1", "2"], ["3"], [], ["4"]]


def test_stream_file_blocks_without_trailing_group(example_file):
    path = example_file("""
        a
        b

        c
    """)
    assert list(stream_file_blocks(path)) == [["a", "b"], ["c"]]


def test_missing_file_raises():
    with pytest.raises(FileNotFoundError):
        list(read_lines("does/not/exist.txt"))
