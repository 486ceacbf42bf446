"""External tool definitions: reading, checking and interpreting tool files."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

KEY_ALWAYS_IN_POPUP = "alwayspopup"
KEY_CLEAR_VIEW = "clearview"
KEY_COMMAND = "command"
KEY_COMMENT = "comment"
KEY_FLAGS = "flags"
KEY_IN_POPUP = "inpopup"
KEY_IN_TERM = "interm"
KEY_NAME = "name"
KEY_RUN_AS_ROOT = "runasroot"
KEY_SHORTCUT = "shortcutkey"
KEY_USE_BAR = "usebar"

# Positions of each key once a tool file's lines are sorted case-insensitively.
TOOL_ALWAYS_IN_POPUP = 0
TOOL_CLEAR_VIEW = 1
TOOL_COMMAND = 2
TOOL_COMMENT = 3
TOOL_FLAGS = 4
TOOL_INPOPUP = 5
TOOL_IN_TERM = 6
TOOL_NAME = 7
TOOL_RUN_AS_ROOT = 8
TOOL_SHORTCUT_KEY = 9
TOOL_USE_BAR = 10
TOOL_END = 11

PADDING_LINE = "XXX"

TOOL_PASTE_OP = 1
TOOL_REPLACE_OP = 2
TOOL_SHOW_DOC = 4
TOOL_ASYNC = 8
TOOL_VIEW_OP = 16
TOOL_INSERT_MASK = TOOL_PASTE_OP | TOOL_REPLACE_OP | TOOL_VIEW_OP

_REQUIRED = (re.compile(r"^name.*$"), re.compile(r"^command.*$"), re.compile(r"^flags.*$"))


class OutputMode(IntEnum):
    """What happens to a synchronous tool's output."""

    IGNORE = 0
    PASTE = TOOL_PASTE_OP
    REPLACE = TOOL_REPLACE_OP
    VIEW = TOOL_VIEW_OP


def _sorted_lines(lines: list[str]) -> list[str]:
    return sorted(lines, key=str.lower)


def verify_tool(path: str | os.PathLike[str]) -> list[str]:
    """Read a tool file into its sorted, padded lines.

    Returns an empty list when the file cannot be read or has none of the
    name, command or flags lines.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            lines = [line for line in handle.read().split("\n") if line]
    except OSError:
        lines = []
    lines = _sorted_lines(lines)
    lines.extend([PADDING_LINE] * (TOOL_END - len(lines)))
    if not any(pattern.fullmatch(line) for pattern in _REQUIRED for line in lines):
        return []
    return lines


def new_tool_lines() -> list[str]:
    """The lines of a fresh, unsaved tool."""
    return [
        f"{KEY_ALWAYS_IN_POPUP}\t0",
        f"{KEY_CLEAR_VIEW}\t0",
        f"{KEY_COMMAND}\t",
        f"{KEY_COMMENT}\t",
        f"{KEY_FLAGS}\t0",
        f"{KEY_IN_POPUP}\t0",
        f"{KEY_IN_TERM}\t0",
        f"{KEY_NAME}\tNew Tool",
        f"{KEY_RUN_AS_ROOT}\t0",
        f"{KEY_SHORTCUT}\t",
        f"{KEY_USE_BAR}\t0",
    ]


def _value(line: str, key: str) -> str:
    parts = line.split(key)
    return parts[1] if len(parts) > 1 else ""


def _int_value(line: str, key: str) -> int:
    try:
        return int(_value(line, key).strip())
    except ValueError:
        return 0


@dataclass
class ToolSpec:
    """A parsed external tool definition."""

    name: str
    command: str
    comment: str = ""
    shortcut: str = ""
    flags: int = 0
    run_in_term: bool = False
    run_as_root: bool = False
    use_bar: bool = False
    in_popup: bool = False
    always_in_popup: bool = False
    clear_view: bool = False
    file_name: str = ""
    path: str = ""

    @classmethod
    def from_lines(cls, lines: list[str]) -> "ToolSpec":
        """Build a tool from lines as returned by verify_tool."""
        if len(lines) < TOOL_END:
            raise ValueError(f"a tool needs {TOOL_END} lines, got {len(lines)}")
        return cls(
            name=_value(lines[TOOL_NAME], KEY_NAME).strip(),
            command=_value(lines[TOOL_COMMAND], KEY_COMMAND).strip(),
            comment=_value(lines[TOOL_COMMENT], KEY_COMMENT).strip(),
            shortcut=_value(lines[TOOL_SHORTCUT_KEY], KEY_SHORTCUT).strip(),
            flags=_int_value(lines[TOOL_FLAGS], KEY_FLAGS),
            run_in_term=bool(_int_value(lines[TOOL_IN_TERM], KEY_IN_TERM)),
            run_as_root=bool(_int_value(lines[TOOL_RUN_AS_ROOT], KEY_RUN_AS_ROOT)),
            use_bar=bool(_int_value(lines[TOOL_USE_BAR], KEY_USE_BAR)),
            in_popup=bool(_int_value(lines[TOOL_INPOPUP], KEY_IN_POPUP)),
            always_in_popup=bool(_int_value(lines[TOOL_ALWAYS_IN_POPUP], KEY_ALWAYS_IN_POPUP)),
            clear_view=bool(_int_value(lines[TOOL_CLEAR_VIEW], KEY_CLEAR_VIEW)),
        )

    @property
    def run_async(self) -> bool:
        return (self.flags & TOOL_ASYNC) == TOOL_ASYNC

    @property
    def show_doc(self) -> bool:
        return (self.flags & TOOL_SHOW_DOC) == TOOL_SHOW_DOC

    @property
    def output(self) -> OutputMode:
        try:
            return OutputMode(self.flags & TOOL_INSERT_MASK)
        except ValueError:
            return OutputMode.IGNORE

    def radios_enabled(self) -> bool:
        """Whether an output mode can be chosen: only for synchronous, non-terminal tools."""
        return not self.run_async and not self.run_in_term


def list_tools(folder: str | os.PathLike[str]) -> list[ToolSpec]:
    """Valid tools among the visible files of *folder*, ordered by file name."""
    base = Path(folder)
    try:
        names = [
            entry.name
            for entry in base.iterdir()
            if entry.is_file() and not entry.name.startswith(".")
        ]
    except OSError:
        return []
    tools = []
    for name in sorted(names, key=lambda n: (n.lower(), n)):
        path = base / name
        lines = verify_tool(path)
        if (
            len(lines) >= TOOL_END
            and lines[TOOL_NAME].startswith(KEY_NAME)
            and lines[TOOL_COMMAND].startswith(KEY_COMMAND)
            and lines[TOOL_COMMENT].startswith(KEY_COMMENT)
        ):
            tool = ToolSpec.from_lines(lines)
            tool.file_name = name
            tool.path = str(path)
            tools.append(tool)
    return tools