import io
import sys
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from minishell.cli_shell import main


def test_single_command(tmp_path: Path, capsys):
    _ = (tmp_path / "notes.txt").write_text("b\na\n")

    code = main(["--cwd", str(tmp_path), "--no-color", "-c", "sort notes.txt | wc -l"])

    assert code == 0
    assert capsys.readouterr().out == "       2\n"


def test_single_command_error(tmp_path: Path, capsys):
    code = main(["--cwd", str(tmp_path), "--no-color", "-c", "nope"])

    assert code == 1
    captured = capsys.readouterr()
    assert "shell: nope: Invalid app\n" in captured.err
    assert captured.out == ""


def test_single_command_exit_code(tmp_path: Path):
    assert main(["--cwd", str(tmp_path), "-c", "exit 5"]) == 5


def test_invalid_cwd(tmp_path: Path, capsys):
    code = main(["--cwd", str(tmp_path / "missing"), "--no-color", "-c", "echo hi"])

    assert code == 2
    assert f"minishell: {tmp_path / 'missing'}: not a directory\n" in capsys.readouterr().err


def test_repl_until_end_of_input(tmp_path: Path, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"")))

    with patch.object(Console, "input", side_effect=["echo a", "mkdir d", EOFError()]):
        code = main(["--cwd", str(tmp_path), "--no-color"])

    assert code == 0
    assert capsys.readouterr().out == "a\n"
    assert (tmp_path / "d").is_dir()


def test_repl_exit(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"")))

    with patch.object(Console, "input", side_effect=["exit 7", "echo never"]):
        assert main(["--cwd", str(tmp_path)]) == 7


def test_long_error_is_not_wrapped(tmp_path: Path, capsys):
    name = "x" * 300

    assert main(["--cwd", str(tmp_path), "--no-color", "-c", name]) == 1

    assert f"shell: {name}: Invalid app\n" in capsys.readouterr().err


def test_repl_errors_go_to_stderr(tmp_path: Path, capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"")))

    with patch.object(Console, "input", side_effect=["echo a", "nope", EOFError()]):
        assert main(["--cwd", str(tmp_path), "--no-color"]) == 0

    captured = capsys.readouterr()
    assert captured.out == "a\n"
    assert "shell: nope: Invalid app\n" in captured.err
