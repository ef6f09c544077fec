"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest

from minishell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from minishell.container import DependencyContainer
from minishell.entities.environment import Environment


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.\nSecond line\n")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')\n")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.\n")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def environment(temp_directory):
    """
    Create a session environment rooted at the temporary directory.

    Returns:
        Environment instance
    """
    return Environment(temp_directory)


@pytest.fixture
def file_system(environment, mock_logger):
    """
    Create a file system adapter bound to the test environment.

    Returns:
        LocalFileSystemAdapter instance
    """
    return LocalFileSystemAdapter(environment, mock_logger)


@pytest.fixture
def dependency_container(temp_directory, mock_logger):
    """
    Create a dependency container for a session in the temporary directory.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(home_directory=temp_directory)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def run_app():
    """
    Run an application against in-memory streams.

    Returns:
        Function taking (application, args, stdin_text) and returning stdout text
    """

    def _run(application, args, stdin_text=""):
        stdout = io.BytesIO()
        application.run(list(args), io.BytesIO(stdin_text.encode()), stdout)
        return stdout.getvalue().decode()

    return _run


@pytest.fixture
def make_file(temp_directory):
    """
    Create text files inside the temporary directory.

    Returns:
        Function taking (name, content) and returning the file path
    """

    def _make(name, content):
        path = os.path.join(temp_directory, name)
        with open(path, "w") as f:
            f.write(content)
        return path

    return _make
