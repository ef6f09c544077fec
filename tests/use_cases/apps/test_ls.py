"""
Tests for the LsApplication.
"""

import os
from unittest.mock import patch

import pytest

from minishell.exceptions import LsError
from minishell.use_cases.apps.helpers.ls_helper import extension_of, sort_entries
from minishell.use_cases.apps.ls import LsApplication


class TestLsHelper:
    """Test cases for the ls sorting helpers."""

    def test_extension_of(self):
        """Test extension extraction."""
        assert extension_of("a.tar.gz") == "gz"
        assert extension_of("Makefile") == ""
        assert extension_of(".bashrc") == ""

    def test_sort_by_extension(self):
        """Test that extensionless names come first."""
        names = ["b.txt", "a.py", "c", "a.txt"]

        assert sort_entries(names, True) == ["c", "a.py", "a.txt", "b.txt"]
        assert sort_entries(names, False) == ["a.py", "a.txt", "b.txt", "c"]


class TestLsApplication:
    """Test cases for the LsApplication."""

    def test_ls_current_directory(self, file_system, run_app):
        """Test listing the current directory."""
        assert run_app(LsApplication(file_system), []) == "subdir\ntest1.txt\ntest2.py\n"

    def test_ls_hides_dot_files(self, file_system, run_app, make_file):
        """Test that hidden entries are not listed."""
        make_file(".hidden", "x")

        assert ".hidden" not in run_app(LsApplication(file_system), [])

    def test_ls_sort_by_extension(self, file_system, run_app):
        """Test the -X flag."""
        assert run_app(LsApplication(file_system), ["-X"]) == "subdir\ntest2.py\ntest1.txt\n"

    def test_ls_single_directory(self, file_system, run_app):
        """Test that one directory operand has no header."""
        assert run_app(LsApplication(file_system), ["subdir"]) == "test3.md\n"

    def test_ls_recursive(self, file_system, run_app):
        """Test the -R flag."""
        result = run_app(LsApplication(file_system), ["-R"])

        assert result == ".:\nsubdir\ntest1.txt\ntest2.py\n\n./subdir:\ntest3.md\n"

    def test_ls_mixed_operands(self, file_system, run_app):
        """Test that errors come first, then files, then directory blocks."""
        result = run_app(LsApplication(file_system), ["subdir", "missing", "test1.txt"])

        assert result == (
            "ls: cannot access 'missing': No such file or directory\n"
            "test1.txt\n"
            "subdir:\n"
            "test3.md\n"
        )

    def test_ls_empty_directory(self, file_system, run_app, temp_directory):
        """Test listing an empty directory."""
        os.mkdir(os.path.join(temp_directory, "empty"))

        assert run_app(LsApplication(file_system), ["empty"]) == ""

    def test_ls_unreadable_directory(self, file_system, run_app):
        """Test listing a directory without permission."""
        with patch("os.listdir", side_effect=PermissionError):
            result = run_app(LsApplication(file_system), ["subdir"])

        assert result == "ls: cannot open directory 'subdir': Permission denied\n"

    def test_ls_illegal_flag(self, file_system, run_app):
        """Test an unknown flag."""
        with pytest.raises(LsError, match="ls: illegal option -- a"):
            run_app(LsApplication(file_system), ["-a"])
