"""
Tests for the ArgsParser family.
"""

import pytest

from minishell.exceptions import ParserError
from minishell.parsers.cat_args_parser import CatArgsParser
from minishell.parsers.cut_args_parser import CutArgsParser
from minishell.parsers.grep_args_parser import GrepArgsParser
from minishell.parsers.mv_args_parser import MvArgsParser
from minishell.parsers.rm_args_parser import RmArgsParser
from minishell.parsers.sort_args_parser import SortArgsParser
from minishell.parsers.uniq_args_parser import UniqArgsParser
from minishell.parsers.wc_args_parser import WcArgsParser


class TestArgsParser:
    """Test cases for flag and operand splitting."""

    def test_flags_and_operands(self):
        """Test separate flags and ordered operands."""
        parser = SortArgsParser()
        parser.parse("b.txt", "-n", "a.txt", "-r")

        assert parser.is_first_word_number()
        assert parser.is_reverse_order()
        assert not parser.is_case_independent()
        assert parser.get_files() == ["b.txt", "a.txt"]

    def test_combined_flags(self):
        """Test that -rd sets both flags."""
        parser = RmArgsParser()
        parser.parse("-rd", "x")

        assert parser.is_recursive()
        assert parser.is_empty_folder()
        assert parser.get_files() == ["x"]

    def test_dash_is_an_operand(self):
        """Test that a lone dash means stdin, not a flag."""
        parser = CatArgsParser()
        parser.parse("-", "file")

        assert not parser.is_line_number()
        assert parser.get_files() == ["-", "file"]

    def test_illegal_flag(self):
        """Test the first illegal flag is reported."""
        parser = CatArgsParser()

        with pytest.raises(ParserError, match="illegal option -- z"):
            parser.parse("-nz")

    def test_no_arguments(self):
        """Test parsing an empty vector."""
        parser = WcArgsParser()
        parser.parse()

        assert parser.flags == set()
        assert parser.get_files() == []


class TestCommandParsers:
    """Test cases for command specific accessors."""

    def test_cut_requires_list(self):
        """Test cut without LIST."""
        with pytest.raises(ParserError, match="insufficient arguments"):
            CutArgsParser().parse("-c")

    def test_cut_list_and_files(self):
        """Test cut's first operand is the LIST."""
        parser = CutArgsParser()
        parser.parse("-b", "1-3", "a.txt", "-")

        assert parser.is_byte_po()
        assert not parser.is_char_po()
        assert parser.get_range_list() == "1-3"
        assert parser.get_files() == ["a.txt", "-"]

    def test_grep_flags_only_before_pattern(self):
        """Test that tokens after the pattern are files even with a dash."""
        parser = GrepArgsParser()
        parser.parse("-i", "-cH", "foo", "-x", "b.txt")

        assert parser.is_case_insensitive()
        assert parser.is_count_lines()
        assert parser.is_prefix_file_name()
        assert parser.get_pattern() == "foo"
        assert parser.get_files() == ["-x", "b.txt"]

    def test_grep_without_pattern(self):
        """Test that a missing pattern is reported as None."""
        parser = GrepArgsParser()
        parser.parse("-i")

        assert parser.get_pattern() is None

    def test_mv_sources_and_target(self):
        """Test that the last operand is the target."""
        parser = MvArgsParser()
        parser.parse("-n", "a", "b", "dir")

        assert not parser.is_overwrite()
        assert parser.get_sources() == ["a", "b"]
        assert parser.get_target() == "dir"

    def test_uniq_operands(self):
        """Test uniq's optional input and output files."""
        parser = UniqArgsParser()
        parser.parse("-c", "in.txt", "out.txt")

        assert parser.is_count()
        assert parser.get_input_file() == "in.txt"
        assert parser.get_output_file() == "out.txt"

    def test_uniq_extra_operand(self):
        """Test uniq with more than two operands."""
        with pytest.raises(ParserError, match="extra operand 'c'"):
            UniqArgsParser().parse("a", "b", "c")

    def test_wc_defaults_to_all_counts(self):
        """Test that wc without flags shows every count."""
        parser = WcArgsParser()
        parser.parse("file")

        assert parser.is_line_count()
        assert parser.is_word_count()
        assert parser.is_byte_count()

    def test_wc_single_flag(self):
        """Test that one wc flag disables the others."""
        parser = WcArgsParser()
        parser.parse("-l")

        assert parser.is_line_count()
        assert not parser.is_word_count()
        assert not parser.is_byte_count()
