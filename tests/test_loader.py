"""Tests for utils/loader.py"""

import pytest

from constants import DATA
from utils.loader import path_to_lines, resolve_path


class TestResolvePath:
    def test_bundled_corpus(self):
        assert resolve_path("tinyTale.txt") == DATA / "tinyTale.txt"

    def test_existing_path_used_as_given(self, tmp_path):
        corpus = tmp_path / "words.txt"
        corpus.write_text("one two\n")
        assert resolve_path(corpus) == corpus

    def test_missing(self):
        with pytest.raises(FileNotFoundError, match="nope.txt"):
            resolve_path("nope.txt")


class TestPathToLines:
    def test_tiny_tale(self):
        lines = list(path_to_lines("tinyTale.txt"))
        assert len(lines) == 5
        assert lines[0].startswith("it was the best of times")

    def test_lazy_missing_file(self):
        lines = path_to_lines("nope.txt")
        with pytest.raises(FileNotFoundError):
            next(lines)
