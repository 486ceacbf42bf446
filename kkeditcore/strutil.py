"""String helpers and a small desktop-file reader."""

from __future__ import annotations

import re
from pathlib import Path

DEFAULT_WHITESPACE = "\t \r\n"
DEFAULT_FALLBACK_GROUP = "Desktop Entry"

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_HASH_MASK = (1 << 64) - 1


def _upper(text: str) -> str:
    return text.translate(_ASCII_UPPER)


def str_tok(text: str, delimiters: str) -> list[str]:
    """Split *text* on any character in *delimiters*, keeping empty fields."""
    if not delimiters:
        return [text]
    return re.split("[" + re.escape(delimiters) + "]", text)


def str_str(haystack: str, needle: str, case_insensitive: bool = False) -> str:
    """Return the tail of *haystack* starting at *needle*, or "" if absent."""
    found = haystack.find(needle)
    if found == -1 and case_insensitive:
        found = _upper(haystack).find(_upper(needle))
    return haystack[found:] if found != -1 else ""


def str_strip(text: str, whitespace: str = DEFAULT_WHITESPACE) -> str:
    """Trim any of the *whitespace* characters from both ends."""
    return text.strip(whitespace)


def replace_all_str(
    haystack: str, needle: str, replacement: str = "", erase: bool = False
) -> str:
    """Repeatedly replace (or erase) the first occurrence of *needle* until none remain."""
    if not needle:
        raise ValueError("needle must not be empty")
    if not erase and needle in replacement:
        raise ValueError("replacement contains the needle; replacing would never end")
    result = haystack
    while (found := result.find(needle)) != -1:
        insert = "" if erase else replacement
        result = result[:found] + insert + result[found + len(needle):]
    return result


def replace_all_char(
    haystack: str, chars: str, replacement: str = "", erase: bool = False
) -> str:
    """Replace (or erase) every character of *haystack* that appears in *chars*."""
    if erase:
        return "".join(c for c in haystack if c not in chars)
    if any(c in chars for c in replacement):
        raise ValueError("replacement contains a target character; replacing would never end")
    return "".join(replacement if c in chars else c for c in haystack)


def hash_from_key(key: str) -> int:
    """Hash a key string as 31*h + byte over its signed UTF-8 bytes, 64-bit wrapping."""
    value = 0
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        value = (31 * value + signed) & _HASH_MASK
    return value


def has_suffix(text: str, suffix: str) -> bool:
    """Case-insensitive test for *suffix* at the end of *text*."""
    if len(suffix) > len(text):
        return False
    return _upper(text).endswith(_upper(suffix))


def read_desktop_file(path: str | Path) -> dict[int, list[str]]:
    """Read an ini-style file into lines grouped by the hash of their section name.

    Lines before any section are stored under key 0. A missing file gives an
    empty mapping.
    """
    sections: dict[int, list[str]] = {}
    current = 0
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            for raw in handle:
                line = str_strip(raw.rstrip("\n"))
                if not line or line.startswith("#"):
                    continue
                if line.startswith("["):
                    current = hash_from_key(replace_all_char(line, "[]", erase=True))
                else:
                    sections.setdefault(current, []).append(line)
    except OSError:
        return {}
    return sections


def _lookup(lines: list[str], key: str) -> str | None:
    for line in lines:
        if str_str(line, key):
            parts = str_tok(str_strip(line), "=")
            if len(parts) < 2:
                raise ValueError(f"entry {line!r} has no value")
            return str_strip(parts[1])
    return None


def get_full_entry(
    group: str,
    key: str,
    sections: dict[int, list[str]],
    fallback: bool = False,
    fallback_group: str = DEFAULT_FALLBACK_GROUP,
) -> str:
    """Find the value of the first line in *group* containing *key*, or ""."""
    found = _lookup(sections.get(hash_from_key(group), []), key)
    if found is None and fallback:
        found = _lookup(sections.get(hash_from_key(fallback_group), []), key)
    return found if found is not None else ""