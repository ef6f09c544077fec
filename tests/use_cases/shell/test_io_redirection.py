"""
Tests for the IORedirectionHandler.
"""

import io
import os

import pytest

from minishell.exceptions import ShellError
from minishell.use_cases.shell.io_redirection import IORedirectionHandler


@pytest.fixture
def make_handler(dependency_container):
    resolver = dependency_container.get_command_builder().argument_resolver
    file_system = dependency_container.get_file_system()

    def _make(args, stdin=None, stdout=None):
        return IORedirectionHandler(
            args,
            stdin or io.BytesIO(),
            stdout or io.BytesIO(),
            resolver,
            file_system,
        )

    return _make


class TestIORedirectionHandler:
    """Test cases for redirection extraction."""

    def test_no_redirection(self, make_handler):
        """Test that the caller's streams are kept."""
        stdin, stdout = io.BytesIO(), io.BytesIO()
        handler = make_handler(["echo", "hi"], stdin, stdout)

        handler.extract_redir_options()

        assert handler.get_no_redir_args_list() == ["echo", "hi"]
        assert handler.get_input_stream() is stdin
        assert handler.get_output_stream() is stdout

    def test_input_redirection(self, make_handler):
        """Test reading from a file."""
        handler = make_handler(["cat", "<", "test1.txt"])

        handler.extract_redir_options()

        assert handler.get_no_redir_args_list() == ["cat"]
        assert handler.get_input_stream().read().startswith(b"This is")
        handler.close()

    def test_output_redirection(self, make_handler, temp_directory):
        """Test writing to a file and closing it."""
        handler = make_handler(["echo", ">", "out.txt", "hi"])

        handler.extract_redir_options()
        stream = handler.get_output_stream()
        stream.write(b"data")
        handler.close()

        assert handler.get_no_redir_args_list() == ["echo", "hi"]
        assert stream.closed
        with open(os.path.join(temp_directory, "out.txt"), "rb") as f:
            assert f.read() == b"data"

    def test_last_redirection_wins(self, make_handler, temp_directory):
        """Test that earlier targets are created but not used."""
        handler = make_handler(["echo", ">", "a.txt", ">", "b.txt"])

        handler.extract_redir_options()
        handler.get_output_stream().write(b"x")
        handler.close()

        assert os.path.getsize(os.path.join(temp_directory, "a.txt")) == 0
        assert os.path.getsize(os.path.join(temp_directory, "b.txt")) == 1

    def test_close_keeps_caller_streams_open(self, make_handler):
        """Test that only opened streams are closed."""
        stdout = io.BytesIO()
        handler = make_handler(["echo"], stdout=stdout)

        handler.extract_redir_options()
        handler.close()

        assert not stdout.closed

    def test_quoted_file_name(self, make_handler, temp_directory):
        """Test that the file token is resolved."""
        handler = make_handler(["echo", ">", "'my file.txt'"])

        handler.extract_redir_options()
        handler.close()

        assert os.path.exists(os.path.join(temp_directory, "my file.txt"))

    @pytest.mark.parametrize(
        "args",
        [[], ["cat", "<"], ["cat", "<", ">", "x"], ["echo", ">", ">"]],
    )
    def test_invalid_syntax(self, make_handler, args):
        """Test missing or invalid file tokens."""
        with pytest.raises(ShellError, match="shell: Invalid syntax"):
            make_handler(args).extract_redir_options()

    def test_ambiguous_redirect(self, make_handler):
        """Test a glob expanding to several files."""
        with pytest.raises(ShellError, match=r"shell: test\*: ambiguous redirect"):
            make_handler(["cat", "<", "test*"]).extract_redir_options()

    def test_missing_input_file(self, make_handler):
        """Test redirecting from a missing file."""
        with pytest.raises(ShellError, match="shell: missing: No such file or directory"):
            make_handler(["cat", "<", "missing"]).extract_redir_options()

    def test_output_to_directory(self, make_handler):
        """Test redirecting into a directory."""
        with pytest.raises(ShellError, match="shell: subdir: Is a directory"):
            make_handler(["echo", ">", "subdir"]).extract_redir_options()
