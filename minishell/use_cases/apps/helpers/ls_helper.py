"""
Directory listing and formatting used by the ls application.
"""

import logging
import os
from typing import Optional

from minishell.exceptions import ERR_FILE_NOT_FOUND, ERR_NO_PERM, FileSystemError
from minishell.ports.files.file_system_port import FileSystemPort

CURRENT_DIR = "."


def extension_of(name: str) -> str:
    """Extension after the last dot, empty when the name has none."""
    dot = name.rfind(".")
    return name[dot + 1 :] if dot > 0 else ""


def sort_entries(names: list[str], is_sort_by_ext: bool) -> list[str]:
    """Sort by name, or by extension then name (extensionless entries first)."""
    if is_sort_by_ext:
        return sorted(names, key=lambda n: (extension_of(n), n))
    return sorted(names)


def child_header(header: str, name: str) -> str:
    return f"{header.rstrip('/')}/{name}" if header != "/" else f"/{name}"


class LsHelper:
    """Builds ls output for a set of path operands."""

    def __init__(
        self, file_system: FileSystemPort, logger: Optional[logging.Logger] = None
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def list_folder_content(
        self, is_recursive: bool, is_sort_by_ext: bool, folders: list[str]
    ) -> str:
        """
        List the given operands, or the current directory when there are none.

        Missing operands are reported first, then file operands by name, then
        one block per directory. Blocks carry a ``<name>:`` header when
        listing recursively or when more than one operand was given.

        Returns:
            Listing text terminated by a newline, or an empty string
        """
        if not folders:
            if is_recursive:
                result = self._build_block(CURRENT_DIR, CURRENT_DIR, is_sort_by_ext, True)
            else:
                result = self._list_entries(CURRENT_DIR, CURRENT_DIR, is_sort_by_ext)
            return self._finish(result)

        errors: list[str] = []
        files: list[str] = []
        directories: list[str] = []
        for folder in folders:
            if not self._file_system.exists(folder):
                errors.append(f"ls: cannot access '{folder}': {ERR_FILE_NOT_FOUND}")
            elif self._file_system.is_dir(folder):
                directories.append(folder)
            else:
                files.append(folder)

        with_header = is_recursive or len(folders) > 1
        sections: list[str] = []
        if errors:
            sections.append("\n".join(errors))
        if files:
            sections.append("\n".join(sort_entries(files, is_sort_by_ext)))
        for directory in directories:
            if with_header:
                sections.append(
                    self._build_block(directory, directory, is_sort_by_ext, is_recursive)
                )
            else:
                sections.append(self._list_entries(directory, directory, is_sort_by_ext))

        return self._finish("\n".join(s for s in sections if s))

    def _list_entries(self, path: str, header: str, is_sort_by_ext: bool) -> str:
        try:
            names = self._file_system.list_directory(path)
        except FileSystemError as e:
            return self._access_error(header, e)
        return "\n".join(sort_entries(names, is_sort_by_ext))

    def _build_block(
        self, path: str, header: str, is_sort_by_ext: bool, is_recursive: bool
    ) -> str:
        """Header line, entries, blank line; then the blocks of subdirectories."""
        try:
            names = sort_entries(self._file_system.list_directory(path), is_sort_by_ext)
        except FileSystemError as e:
            return self._access_error(header, e) + "\n"

        lines = [f"{header}:"] + names
        block = "\n".join(lines) + "\n\n"
        if not is_recursive:
            return block

        for name in names:
            child = os.path.join(path, name)
            if self._file_system.is_dir(child):
                self._logger.debug(f"ls descending into {child}")
                block += self._build_block(
                    child, child_header(header, name), is_sort_by_ext, True
                )
        return block

    def _access_error(self, header: str, error: FileSystemError) -> str:
        if error.reason == ERR_NO_PERM:
            return f"ls: cannot open directory '{header}': {ERR_NO_PERM}"
        return f"ls: cannot access '{header}': {error.reason}"

    def _finish(self, result: str) -> str:
        result = result.strip()
        return f"{result}\n" if result else ""
