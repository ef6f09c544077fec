"""
Tests for the UniqApplication.
"""

import os

import pytest

from minishell.exceptions import UniqError
from minishell.use_cases.apps.uniq import UniqApplication, uniq_lines

LINES = ["a", "a", "b", "c", "c", "c", "a"]


class TestUniqLines:
    """Test cases for duplicate group handling."""

    def test_default(self):
        """Test collapsing adjacent duplicates only."""
        assert uniq_lines(LINES, False, False, False) == ["a", "b", "c", "a"]

    def test_count(self):
        """Test the group size prefix."""
        assert uniq_lines(LINES, True, False, False) == ["2 a", "1 b", "3 c", "1 a"]

    def test_repeated(self):
        """Test keeping one line per repeated group."""
        assert uniq_lines(LINES, False, True, False) == ["a", "c"]

    def test_all_repeated(self):
        """Test keeping every line of repeated groups."""
        assert uniq_lines(LINES, False, False, True) == ["a", "a", "c", "c", "c"]

    def test_repeated_with_count(self):
        """Test combining -c and -d."""
        assert uniq_lines(LINES, True, True, False) == ["2 a", "3 c"]

    def test_count_with_all_repeated(self):
        """Test that -c and -D cannot be combined."""
        with pytest.raises(UniqError, match="meaningless"):
            uniq_lines(LINES, True, False, True)


class TestUniqApplication:
    """Test cases for the UniqApplication."""

    def test_uniq_stdin(self, file_system, run_app):
        """Test filtering stdin."""
        assert run_app(UniqApplication(file_system), [], "x\nx\ny\n") == "x\ny\n"

    def test_uniq_input_file(self, file_system, run_app, make_file):
        """Test reading an input file."""
        make_file("dups.txt", "1\n1\n2\n")

        assert run_app(UniqApplication(file_system), ["-c", "dups.txt"]) == "2 1\n1 2\n"

    def test_uniq_output_file(self, file_system, run_app, make_file, temp_directory):
        """Test writing to an output file instead of stdout."""
        make_file("dups.txt", "1\n1\n2\n")

        assert run_app(UniqApplication(file_system), ["dups.txt", "result.txt"]) == ""

        with open(os.path.join(temp_directory, "result.txt")) as f:
            assert f.read() == "1\n2\n"

    def test_uniq_count_all_repeated(self, file_system, run_app):
        """Test the -c -D conflict."""
        with pytest.raises(
            UniqError,
            match="uniq: printing all duplicated lines and repeat counts is meaningless",
        ):
            run_app(UniqApplication(file_system), ["-cD"], "a\n")

    def test_uniq_missing_file(self, file_system, run_app):
        """Test a missing input file."""
        with pytest.raises(UniqError, match="uniq: 'missing': No such file or directory"):
            run_app(UniqApplication(file_system), ["missing"])

    def test_uniq_extra_operand(self, file_system, run_app):
        """Test more than two operands."""
        with pytest.raises(UniqError, match="uniq: extra operand 'c'"):
            run_app(UniqApplication(file_system), ["a", "b", "c"])
