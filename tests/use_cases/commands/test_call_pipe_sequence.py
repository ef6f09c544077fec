"""
Tests for CallCommand, PipeCommand and SequenceCommand evaluation.
"""

import io
from unittest.mock import MagicMock

import pytest

from minishell.exceptions import CatError, ExitSignal, ShellError
from minishell.use_cases.commands.pipe_command import PipeCommand
from minishell.use_cases.commands.sequence_command import SequenceCommand


@pytest.fixture
def builder(dependency_container):
    return dependency_container.get_command_builder()


def run(command, stdin_text=""):
    stdout = io.BytesIO()
    command.evaluate(io.BytesIO(stdin_text.encode()), stdout)
    return stdout.getvalue().decode()


class TestCallCommand:
    """Test cases for CallCommand."""

    def test_resolves_arguments(self, builder):
        """Test quoting and globbing before dispatch."""
        assert run(builder.parse_command("echo 'a  b' test*")) == "a  b test1.txt test2.py\n"

    def test_output_redirection(self, builder, temp_directory):
        """Test that output goes to the file, not stdout."""
        assert run(builder.parse_command("echo hi > out.txt")) == ""

        with open(f"{temp_directory}/out.txt") as f:
            assert f.read() == "hi\n"

    def test_application_error_propagates(self, builder):
        """Test that a failing application raises."""
        with pytest.raises(CatError):
            run(builder.parse_command("cat -z"))

    def test_redirected_file_closed_after_error(self, builder, temp_directory):
        """Test that opened files are closed when the application fails."""
        with pytest.raises(ShellError):
            run(builder.parse_command("nope > out.txt"))

        with open(f"{temp_directory}/out.txt") as f:
            assert f.read() == ""

    def test_substitution_only_empty(self, builder):
        """Test that a call whose arguments vanish does nothing."""
        assert run(builder.parse_command("`cat`")) == ""


class TestPipeCommand:
    """Test cases for PipeCommand."""

    def test_output_feeds_next_stage(self, builder):
        """Test chaining three stages."""
        command = builder.parse_command("echo b a c | sort | cat")

        assert run(command) == "b a c\n"

    def test_stages_share_lines(self, builder):
        """Test a multi line pipeline."""
        command = builder.parse_command("cat | sort -r | uniq -c")

        assert run(command, "a\nb\nb\n") == "2 b\n1 a\n"

    def test_failure_stops_pipeline(self):
        """Test that later stages do not run after an error."""
        first, second = MagicMock(), MagicMock()
        first.evaluate.side_effect = ShellError("boom")

        with pytest.raises(ShellError):
            PipeCommand([first, second]).evaluate(io.BytesIO(), io.BytesIO())

        second.evaluate.assert_not_called()


class TestSequenceCommand:
    """Test cases for SequenceCommand."""

    def test_errors_written_inline(self, builder):
        """Test that each failure becomes an output line."""
        command = builder.parse_command("echo 1; nope; cat -z; echo 2")

        assert run(command) == "1\nshell: nope: Invalid app\ncat: illegal option -- z\n2\n"

    def test_exit_raised_after_all_commands(self, mock_logger):
        """Test that exit is deferred until the sequence ends."""
        exiting, following = MagicMock(), MagicMock()
        exiting.evaluate.side_effect = ExitSignal(2)

        with pytest.raises(ExitSignal) as exc_info:
            SequenceCommand([exiting, following], mock_logger).evaluate(
                io.BytesIO(), io.BytesIO()
            )

        assert exc_info.value.code == 2
        following.evaluate.assert_called_once()
