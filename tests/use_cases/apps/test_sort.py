"""
Tests for the SortApplication and its comparator.
"""

import pytest

from minishell.exceptions import SortError
from minishell.use_cases.apps.sort import SortApplication, compare_lines, get_chunk, sort_lines


class TestSortHelpers:
    """Test cases for chunking and line comparison."""

    def test_get_chunk(self):
        """Test leading digit and non digit runs."""
        assert get_chunk("123abc") == "123"
        assert get_chunk("abc123") == "abc"
        assert get_chunk("7") == "7"

    def test_numeric_chunks_compare_by_value(self):
        """Test that 10 sorts after 5 in numeric mode."""
        assert compare_lines("10 b", "5 c", True, False) > 0
        assert compare_lines("10 b", "5 c", False, False) < 0

    def test_numbers_after_words(self):
        """Test that numeric chunks sort after non numeric ones."""
        assert sort_lines(["b", "2", "10", "a"], True, False, False) == ["a", "b", "2", "10"]

    def test_numeric_tie_uses_remainder(self):
        """Test that equal numbers fall back to the rest of the line."""
        assert sort_lines(["1 b", "01 a"], True, False, False) == ["01 a", "1 b"]

    def test_numeric_tie_compares_remainder_as_text(self):
        """Test that the remainder after an equal number is not chunked again."""
        assert sort_lines(["1 9", "1 10"], True, False, False) == ["1 10", "1 9"]
        assert compare_lines("2a10", "2a9", True, False) < 0

    def test_case_independent(self):
        """Test that -f folds case and keeps equal lines stable."""
        assert sort_lines(["b", "A", "a", "B"], False, False, True) == ["A", "a", "b", "B"]

    def test_case_independent_ignored_when_numeric(self):
        """Test that -f has no effect under -n."""
        assert sort_lines(["a", "B"], True, False, True) == ["B", "a"]

    def test_sort_is_idempotent(self):
        """Test that sorting sorted output changes nothing."""
        lines = ["b2", "10 x", "a", "2", "B", "10 a"]
        once = sort_lines(lines, True, False, False)

        assert sort_lines(once, True, False, False) == once

    def test_reverse_matches_reversed_sort(self):
        """Test that -r is the reverse of the plain order."""
        lines = ["b", "a", "c", "a"]

        assert sort_lines(lines, False, True, False) == sort_lines(lines, False, False, False)[::-1]

    def test_sort_is_permutation(self):
        """Test that sorting keeps every line exactly once."""
        lines = ["x", "10", "b2", "", "2", "B", "x"]

        for flags in [(False, False, False), (True, True, False), (False, True, True)]:
            assert sorted(sort_lines(lines, *flags)) == sorted(lines)


class TestSortApplication:
    """Test cases for the SortApplication."""

    def test_sort_numeric(self, file_system, run_app):
        """Test sort -n on a small input."""
        result = run_app(SortApplication(file_system), ["-n"], "10 b\n5 c\n1 a\n")

        assert result == "1 a\n5 c\n10 b\n"

    def test_sort_plain(self, file_system, run_app):
        """Test the default lexicographic order."""
        result = run_app(SortApplication(file_system), [], "10 b\n5 c\n1 a\n")

        assert result == "1 a\n10 b\n5 c\n"

    def test_sort_reverse(self, file_system, run_app):
        """Test the -r flag."""
        assert run_app(SortApplication(file_system), ["-r"], "a\nc\nb\n") == "c\nb\na\n"

    def test_sort_combines_files(self, file_system, run_app, make_file):
        """Test that all inputs are sorted together."""
        make_file("one.txt", "z\nm\n")

        result = run_app(SortApplication(file_system), ["one.txt", "-"], "a\n")

        assert result == "a\nm\nz\n"

    def test_sort_missing_file(self, file_system, run_app):
        """Test a missing file."""
        with pytest.raises(SortError, match="sort: 'missing': No such file or directory"):
            run_app(SortApplication(file_system), ["missing"])

    def test_sort_empty_input(self, file_system, run_app):
        """Test sorting nothing."""
        assert run_app(SortApplication(file_system), []) == ""
