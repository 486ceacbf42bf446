import pytest

from kkeditcore.strutil import (
    get_full_entry,
    has_suffix,
    hash_from_key,
    read_desktop_file,
    replace_all_char,
    replace_all_str,
    str_str,
    str_strip,
    str_tok,
)


def test_str_tok_splits_on_any_delimiter():
    assert str_tok("a;b,c", ";,") == ["a", "b", "c"]


def test_str_tok_keeps_empty_fields():
    assert str_tok("a;;b;", ";") == ["a", "", "b", ""]


def test_str_tok_without_delimiter_present():
    assert str_tok("abc", ";") == ["abc"]
    assert str_tok("abc", "") == ["abc"]


def test_str_str_returns_tail():
    assert str_str("file.cpp@12", "@") == "@12"


def test_str_str_missing():
    assert str_str("hello", "x") == ""


def test_str_str_case_insensitive():
    assert str_str("Hello World", "world") == ""
    assert str_str("Hello World", "world", True) == "World"


def test_str_strip_default_and_custom():
    assert str_strip("\t  key=value \r\n") == "key=value"
    assert str_strip("xxabcxx", "x") == "abc"


def test_replace_all_str_replace_and_erase():
    assert replace_all_str("a-b-c", "-", "+") == "a+b+c"
    assert replace_all_str("a-b-c", "-", erase=True) == "abc"


def test_replace_all_str_repeats_until_gone():
    result = replace_all_str("aaaa", "aa", "a")
    assert "aa" not in result
    assert result == "a"


def test_replace_all_str_errors():
    with pytest.raises(ValueError):
        replace_all_str("abc", "", "x")
    with pytest.raises(ValueError):
        replace_all_str("abc", "b", "bb")


def test_replace_all_char():
    assert replace_all_char("[Desktop Entry]", "[]", erase=True) == "Desktop Entry"
    assert replace_all_char("a b c", " ", "_") == "a_b_c"
    assert replace_all_char("abc", "", "_") == "abc"


def test_replace_all_char_error():
    with pytest.raises(ValueError):
        replace_all_char("abc", "b", "b")


def test_hash_from_key_invariants():
    assert hash_from_key("") == 0
    assert hash_from_key("Desktop Entry") == hash_from_key("Desktop Entry")
    assert hash_from_key("ab") != hash_from_key("ba")
    assert 0 <= hash_from_key("x" * 500) < 2**64


def test_has_suffix():
    assert has_suffix("main.CPP", ".cpp")
    assert not has_suffix("main.c", ".cpp")
    assert not has_suffix("c", ".cpp")
    assert has_suffix("anything", "")


def test_read_desktop_file_groups(tmp_path):
    path = tmp_path / "app.desktop"
    path.write_text(
        "top=1\n# comment\n\n[Desktop Entry]\n  Name = Editor \nExec=kkeditqt %U\n[Other]\nName=Other\n"
    )
    sections = read_desktop_file(path)
    assert sections[0] == ["top=1"]
    assert sections[hash_from_key("Desktop Entry")] == ["Name = Editor", "Exec=kkeditqt %U"]
    assert sections[hash_from_key("Other")] == ["Name=Other"]


def test_read_desktop_file_missing(tmp_path):
    assert read_desktop_file(tmp_path / "nope") == {}


def test_get_full_entry(tmp_path):
    path = tmp_path / "app.desktop"
    path.write_text("[Desktop Entry]\nName = Editor\nIcon=edit\n[Extra]\nComment=hi\n")
    sections = read_desktop_file(path)
    assert get_full_entry("Desktop Entry", "Name", sections) == "Editor"
    assert get_full_entry("Extra", "Icon", sections) == ""
    assert get_full_entry("Extra", "Icon", sections, True) == "edit"
    assert get_full_entry("Extra", "Icon", sections, True, "Extra") == ""


def test_get_full_entry_splits_on_every_equals():
    sections = {hash_from_key("G"): ["Exec=run --a=b"]}
    assert get_full_entry("G", "Exec", sections) == "run --a"


def test_get_full_entry_without_value():
    sections = {hash_from_key("G"): ["Broken"]}
    with pytest.raises(ValueError):
        get_full_entry("G", "Broken", sections)