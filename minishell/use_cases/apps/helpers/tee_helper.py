"""
File writing used by the tee application.
"""

import logging

from minishell.adapters.files.local_fs_adapter import encode
from minishell.exceptions import FileSystemError
from minishell.ports.files.file_system_port import FileSystemPort


def write_to_files(
    file_system: FileSystemPort,
    files: list[str],
    text: str,
    is_append: bool,
    logger: logging.Logger,
) -> list[str]:
    """
    Write text to every file, continuing past failures.

    Returns:
        One ``tee: <file>: <reason>`` line per file that could not be written
    """
    errors: list[str] = []
    data = encode(text)
    for name in files:
        try:
            file_system.write_bytes(name, data, append=is_append)
            logger.info(f"tee wrote {len(data)} bytes to {name}")
        except FileSystemError as e:
            logger.warning(f"tee could not write {name}: {e.reason}")
            errors.append(f"tee: {name}: {e.reason}")
    return errors
