"""File and pipe helpers used when opening, saving and creating documents."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Iterator

from .strutil import replace_all_char, replace_all_str, str_str

LINE_MARKER = "@"
EDITOR_PROGRAM = "kkeditqt"
EDITOR_NEW_INSTANCE_FLAG = "-m"


def run_pipe_and_capture(command: str) -> str:
    """Run *command* in a shell and return everything it wrote to stdout.

    A command that cannot be started gives an empty string.
    """
    try:
        completed = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            check=False,
        )
    except OSError:
        return ""
    return completed.stdout.decode("utf-8", errors="replace")


def iter_pipe_output(command: str) -> Iterator[str]:
    """Run *command* in a shell and yield its stdout line by line as it arrives."""
    try:
        process = subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError:
        return
    with process:
        assert process.stdout is not None
        yield from process.stdout


def hexdump_command(path: str | os.PathLike[str]) -> str:
    """Shell command producing a canonical hex dump of *path*."""
    return f"hexdump -C '{os.fspath(path)}'"


def _to_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return 0


def split_line_suffix(path: str) -> tuple[str, int]:
    """Split a ``file@line`` argument into the file path and line number.

    Without a marker the path is returned unchanged with line 0; an
    unreadable line number also gives 0.
    """
    tail = str_str(path, LINE_MARKER)
    if not tail:
        return path, 0
    corrected = replace_all_str(path, tail, erase=True)
    line = replace_all_char(tail, LINE_MARKER, erase=True)
    return corrected, _to_int(line)


def untitled_name(number: int) -> str:
    """Name given to the *number*-th new, unsaved document."""
    return f"Untitled-{number}"


def admin_editor_command(root_command: str) -> list[str]:
    """Argument list that starts a new editor through the run-as-root command."""
    parts = root_command.split()
    if not parts:
        raise ValueError("the run-as-root command is empty")
    return [*parts, EDITOR_PROGRAM, EDITOR_NEW_INSTANCE_FLAG]


def read_text(path: str | os.PathLike[str]) -> str:
    """Read a document as UTF-8 text; raises OSError if it cannot be read."""
    with open(path, encoding="utf-8", errors="replace") as handle:
        return handle.read()


def save_text(
    path: str | os.PathLike[str], text: str, trailing_newline: bool = False
) -> Path:
    """Write *text* to *path*, optionally ending with a newline.

    Returns the canonical path of the written file; raises OSError if it
    cannot be written.
    """
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)
        if trailing_newline:
            handle.write("\n")
    return Path(path).resolve()