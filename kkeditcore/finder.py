"""Directory listing with type detection, filtering and sorting."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Iterator

from .strutil import has_suffix, str_tok

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

NAV_LINK = ".."


class FileKind(IntEnum):
    """Kind of a directory entry; a link kind is one less than its target kind."""

    BROKEN_LINK = 0
    ANY = 1
    FILE_LINK = 2
    FILE = 3
    FOLDER_LINK = 4
    FOLDER = 5


@dataclass
class Entry:
    """One entry found in a directory."""

    name: str
    path: str
    kind: FileKind


_FILE_MODES = (stat.S_IFREG, stat.S_IFBLK, stat.S_IFCHR, stat.S_IFIFO, stat.S_IFSOCK)


def real_type(path: str | os.PathLike[str]) -> FileKind:
    """Classify *path*, following symbolic links.

    A link whose target cannot be reached is BROKEN_LINK. Raises OSError if
    *path* itself does not exist.
    """
    is_link = stat.S_ISLNK(os.lstat(path).st_mode)
    try:
        mode = os.stat(path).st_mode
    except OSError:
        if is_link:
            return FileKind.BROKEN_LINK
        raise
    fmt = stat.S_IFMT(mode)
    if fmt == stat.S_IFDIR:
        kind = FileKind.FOLDER
    elif fmt in _FILE_MODES:
        kind = FileKind.FILE
    else:
        kind = FileKind.ANY
    if is_link:
        kind = FileKind(kind - 1)
    return kind


def _is_hidden(name: str) -> bool:
    return len(name) > 2 and name[0] == "." and name[1] != "."


@dataclass
class FileFinder:
    """Lists a directory's entries according to its settings."""

    min_depth: int = -1
    max_depth: int = 10000
    find_type: FileKind = FileKind.ANY
    follow_links: bool = True
    include_hidden: bool = False
    full_path: bool = False
    sort_descending: bool = False
    ignore_broken: bool = False
    file_types: str = ""
    ignore_nav_links: bool = False
    case_sensitive: bool = True
    data: list[Entry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.data)

    def matches_kind(self, kind: FileKind) -> bool:
        """Whether an entry of *kind* fits the configured find type."""
        if self.find_type == FileKind.ANY:
            return True
        if self.find_type == FileKind.FOLDER:
            return kind in (FileKind.FOLDER, FileKind.FOLDER_LINK)
        if self.find_type == FileKind.FILE:
            return kind in (FileKind.FILE, FileKind.FILE_LINK)
        return False

    def _suffix_allowed(self, name: str) -> bool:
        if not self.file_types:
            return True
        return any(has_suffix(name, suffix) for suffix in str_tok(self.file_types, ";"))

    def _accepts(self, name: str, kind: FileKind) -> bool:
        if kind == FileKind.BROKEN_LINK and self.ignore_broken:
            return False
        if self.find_type in (FileKind.FOLDER, FileKind.FOLDER_LINK):
            return kind in (FileKind.FOLDER, FileKind.FOLDER_LINK)
        is_file = kind in (FileKind.FILE, FileKind.FILE_LINK)
        if is_file or (not self.ignore_broken and kind == FileKind.BROKEN_LINK):
            return self._suffix_allowed(name)
        return True

    def find_files(self, directory: str | os.PathLike[str], append: bool = False) -> None:
        """Collect the entries of *directory*; replace earlier results unless *append*.

        An unreadable directory adds nothing.
        """
        if not append:
            self.data.clear()
        directory = os.fspath(directory)
        try:
            names = os.listdir(directory)
        except OSError:
            return
        for name in [NAV_LINK, *names]:
            if not self.include_hidden and _is_hidden(name):
                continue
            path = os.path.join(directory, name)
            try:
                kind = real_type(path)
            except OSError:
                continue
            if not self._accepts(name, kind):
                continue
            if self.ignore_nav_links and name == NAV_LINK:
                continue
            self.data.append(Entry(name=name, path=path, kind=kind))

    def _move_nav_item(self) -> None:
        if self.ignore_nav_links:
            return
        for index, entry in enumerate(self.data):
            if entry.name == NAV_LINK:
                self.data.insert(0, self.data.pop(index))
                return

    def sort_by_name(self) -> None:
        """Sort by name, honouring case_sensitive and sort_descending."""
        def key(entry: Entry) -> str:
            if self.case_sensitive:
                return entry.name
            return entry.name.translate(_ASCII_UPPER)

        self.data.sort(key=key, reverse=self.sort_descending)
        self._move_nav_item()

    def sort_by_path(self) -> None:
        """Sort by path; sort_descending set gives ascending order."""
        self.data.sort(key=lambda e: e.path, reverse=not self.sort_descending)
        self._move_nav_item()

    def sort_by_type(self) -> None:
        """Sort by kind; sort_descending set gives ascending order."""
        self.data.sort(key=lambda e: int(e.kind), reverse=not self.sort_descending)
        self._move_nav_item()

    def sort_by_type_and_name(self) -> None:
        """Sort by kind (as sort_by_type), then by name ascending."""
        sign = 1 if self.sort_descending else -1
        self.data.sort(key=lambda e: (sign * int(e.kind), e.name))
        self._move_nav_item()

    def find_named(self, name: str, suffix: str = "") -> Entry | None:
        """First entry whose name equals *name* + *suffix*."""
        wanted = name + suffix
        return next((entry for entry in self.data if entry.name == wanted), None)