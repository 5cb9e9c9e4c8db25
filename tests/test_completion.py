"""Tests for path completion."""

import os

import pytest

from completion import common_prefix, complete_path


@pytest.fixture
def tree(tmp_path, monkeypatch):
    """A small directory tree; the cwd is its root."""
    (tmp_path / "hello_world").mkdir()
    (tmp_path / "hello_there").write_text("x")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.py").write_text("x")
    (tmp_path / "notes.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCompletePath:
    """Test complete_path()."""

    def test_empty_input(self, tree):
        assert complete_path("") is None

    def test_directory_gains_separator(self, tree):
        assert complete_path(str(tree / "src")) == str(tree / "src") + os.sep

    def test_directory_with_separator_is_done(self, tree):
        assert complete_path(str(tree / "src") + os.sep) is None

    def test_single_file_match(self, tree):
        assert complete_path(str(tree / "no")) == str(tree / "notes.txt")

    def test_single_directory_match(self, tree):
        """A lone directory match gets a trailing separator."""
        assert complete_path(str(tree / "sr")) == str(tree / "src") + os.sep

    def test_relative_prefix_uses_cwd(self, tree):
        """A bare prefix lists the current directory and stays relative."""
        assert complete_path("sr") == "src" + os.sep
        assert complete_path("not") == "notes.txt"

    def test_relative_nested(self, tree):
        assert complete_path(os.path.join("src", "ma")) == os.path.join("src", "main.py")

    def test_multiple_matches_common_prefix(self, tree):
        assert complete_path(str(tree / "he")) == str(tree / "hello_")

    def test_multiple_matches_no_progress(self, tree):
        """Nothing is returned when the common prefix is what was typed."""
        assert complete_path(str(tree / "hello_")) is None

    def test_no_matches(self, tree):
        assert complete_path(str(tree / "zzz")) is None

    def test_missing_parent(self, tree):
        assert complete_path(str(tree / "missing" / "fi")) is None

    def test_parent_is_a_file(self, tree):
        """Listing a file fails and degrades to no completion."""
        assert complete_path(str(tree / "notes.txt" / "x")) is None

    def test_unreadable_directory(self, tree, monkeypatch):
        def deny(path):
            raise PermissionError(13, "Permission denied", path)

        monkeypatch.setattr(os, "listdir", deny)
        assert complete_path(str(tree / "he")) is None


class TestCommonPrefix:
    """Test common_prefix()."""

    def test_empty(self):
        assert common_prefix([]) == ""

    def test_single(self):
        assert common_prefix(["abc"]) == "abc"

    def test_shared_prefix(self):
        assert common_prefix(["hello_world", "hello_there"]) == "hello_"

    def test_order_independent(self):
        words = ["/a/hello_world", "/a/hello_there", "/a/hello_"]
        assert common_prefix(words) == common_prefix(list(reversed(words))) == "/a/hello_"

    def test_nothing_shared(self):
        assert common_prefix(["abc", "xyz"]) == ""
