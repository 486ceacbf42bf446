"""Documentation token search, result pages and find/replace helpers."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass, replace
from typing import Iterable, Iterator

_HTML_HEAD = (
    '<!DOCTYPE html PUBLIC "-//W3C//DTD HTML 4.01 Transitional//EN">',
    "<html>",
    "<head>",
    '<meta http-equiv="Content-Type" content="text/html; charset=UTF-8">',
    "</head>",
    "<style>",
    "tab0  {position:absolute;left:80px;}",
    "</style>",
    "<body>",
)
_HTML_TAIL = ("</body>", "</html>")


@dataclass
class DocToken:
    """One documented symbol from a generated Tokens.xml index.

    In search results *path* holds the full link to the symbol's page and
    *anchor* is empty.
    """

    name: str = ""
    type: str = ""
    path: str = ""
    anchor: str = ""


def _text(element: ET.Element) -> str:
    return "".join(element.itertext())


def read_tokens(path: str | os.PathLike[str]) -> list[DocToken]:
    """Read the Token entries of a Tokens.xml file.

    Fields missing from a token keep the value of the previous token.
    Raises OSError if the file cannot be read and ValueError if it is not a
    token index.
    """
    with open(path, "rb") as handle:
        data = handle.read()
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ValueError(f"malformed token index: {exc}") from exc
    if root.tag != "Tokens":
        raise ValueError("Incorrect file")

    tokens: list[DocToken] = []
    current = DocToken()
    for token in root:
        if token.tag != "Token":
            continue
        for child in token:
            if child.tag == "TokenIdentifier":
                for part in child:
                    if part.tag == "Name":
                        current = replace(current, name=_text(part))
                    elif part.tag == "Type":
                        current = replace(current, type=_text(part))
            elif child.tag == "Path":
                current = replace(current, path=_text(child))
            elif child.tag == "Anchor":
                current = replace(current, anchor=_text(child))
        tokens.append(current)
    return tokens


def search_tokens(
    tokens: Iterable[DocToken], text: str, base_dir: str | os.PathLike[str]
) -> list[DocToken]:
    """Tokens whose name contains *text*, ignoring case, with their full links.

    The link is ``<base_dir>/html/<path>#<anchor>``. Blank search text
    finds nothing.
    """
    wanted = text.strip()
    if not wanted:
        return []
    folded = wanted.casefold()
    base = os.fspath(base_dir)
    return [
        DocToken(
            name=token.name,
            type=token.type,
            path=f"{base}/html/{token.path}#{token.anchor}",
        )
        for token in tokens
        if folded in token.name.casefold()
    ]


def write_results_html(results: Iterable[DocToken], path: str | os.PathLike[str]) -> None:
    """Write a page linking to every result."""
    with open(path, "w", encoding="utf-8", newline="\n") as out:
        for line in _HTML_HEAD:
            out.write(line + "\n")
        for result in results:
            out.write(
                f'<div align="left">{result.type}<tab0>'
                f'<a href="{result.path}">{result.name}</a></div>\n\n'
            )
        for line in _HTML_TAIL:
            out.write(line + "\n")


def results_uri(results: list[DocToken], html_path: str | os.PathLike[str]) -> str:
    """URI to show for a search.

    Several results are written to *html_path* and that page is shown; a
    single result is shown directly; no result gives a bare ``file://``.
    """
    if len(results) > 1:
        write_results_html(results, html_path)
        return "file://" + os.fspath(html_path)
    if results:
        return "file://" + results[0].path
    return "file://"


def unescape_search_text(text: str) -> str:
    """Turn typed ``\\n`` and ``\\t`` sequences into newline and tab."""
    return text.replace("\\n", "\n").replace("\\t", "\t")


def tab_search_order(current: int, count: int, backwards: bool = False) -> Iterator[int]:
    """Tabs to try, in order, after a search in tab *current* runs out of matches.

    Moving away from *current* with wrap-around, the starting tab is passed
    through once and searched again; the walk ends on reaching it a second
    time.
    """
    if count <= 0:
        raise ValueError("there are no tabs to search")
    if not 0 <= current < count:
        raise ValueError(f"tab {current} is out of range for {count} tabs")
    step = -1 if backwards else 1
    tab = current
    passed_start = False
    while True:
        tab = (tab + step) % count
        if tab == current:
            if passed_start:
                return
            passed_start = True
        yield tab