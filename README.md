# kkeditcore

The logic behind a programmer's text editor, with no GUI toolkit. It is a library of plain Python functions and classes, and needs nothing beyond the standard library.

## Modules

- `kkeditcore.strutil` holds string helpers:
  - `str_tok` splits on any of a set of delimiter characters and keeps empty fields.
  - `str_str` returns the tail of a string from the first match, with an optional case-insensitive retry.
  - `str_strip`, `replace_all_str` and `replace_all_char` trim and replace text. The two replace functions raise `ValueError` when a replacement would never end.
  - `has_suffix` tests for a suffix without regard to case.
  - `hash_from_key` is a 31-multiplier string hash with 64-bit wrap-around.
  - `read_desktop_file` reads an INI/desktop-style file into lines grouped by the hash of their section name. `get_full_entry` looks up a key in one group, with an optional fallback group.
- `kkeditcore.menus` keeps menu items:
  - `MenuRegistry.make_item` creates a `MenuItem`, files it under its `MenuKind` and records the name of the handler it triggers, as given by `menu_handler`.
  - `MenuRegistry.items_in` lists the items of one menu in the order they were made.
- `kkeditcore.finder` lists directories:
  - `FileFinder.find_files` lists a directory, including the `..` entry. It classifies each entry with `real_type` as a `FileKind` (file, folder, their link forms, or a broken link) and can filter by find type, hidden names, broken links and `;`-separated suffixes.
  - The results are `Entry` objects in `FileFinder.data`. The finder also supports `len()` and iteration.
  - The results can be sorted by name, path, type, or type and name. `..` is kept first unless nav links are ignored.
  - `find_named` looks up one entry by name.
- `kkeditcore.tools` handles external-tool definition files:
  - `verify_tool` reads a tool file into lines sorted without regard to case. It pads the lines to the expected count and returns `[]` for a file that is unreadable or not a tool.
  - `ToolSpec.from_lines` parses those lines. The flags are exposed as `run_async`, `show_doc` and `output` (an `OutputMode`), and `radios_enabled` tells whether an output mode can be chosen.
  - `new_tool_lines` gives the lines of a blank tool.
  - `list_tools` returns the valid tools in a folder, ordered by file name.
- `kkeditcore.search` searches documentation indexes:
  - `read_tokens` parses a Doxygen `Tokens.xml` into `DocToken` objects.
  - `search_tokens` finds names that contain the search text, ignoring case, and builds the full link of each.
  - `write_results_html` writes a page of links, and `results_uri` picks the URI to show for a search.
  - Two find/replace helpers: `unescape_search_text` turns typed `\n` and `\t` into real characters, and `tab_search_order` gives the order in which to try tabs when a search wraps across open documents.
- `kkeditcore.files` handles shell commands and documents:
  - `run_pipe_and_capture` runs a shell command and returns its output. `iter_pipe_output` yields the output line by line as it arrives.
  - `hexdump_command` builds a `hexdump -C` command for a file.
  - `split_line_suffix` splits a `path@line` argument into the path and the line number.
  - `untitled_name` names new, unsaved documents.
  - `admin_editor_command` builds the argument list that starts a new editor through a run-as-root command.
  - `read_text` and `save_text` read and write UTF-8 documents. `save_text` returns the canonical path of the file it wrote.

`finder` and `files` use `strutil`. The other modules stand alone.

## Install

```
pip install .
pip install ".[test]"
```

## Examples

```python
from kkeditcore.strutil import str_tok, has_suffix
from kkeditcore.files import split_line_suffix
from kkeditcore.finder import FileFinder

str_tok("a;b;c", ";")                 # ['a', 'b', 'c']
has_suffix("main.CPP", ".cpp")        # True
split_line_suffix("src/main.c@42")    # ('src/main.c', 42)

finder = FileFinder(file_types=".py;.txt")
finder.find_files(".")
finder.sort_by_type_and_name()
for entry in finder:
    print(entry.kind.name, entry.name)
```

## What it does not do

This package has no editor window, no document tabs and no command-line program. `MenuRegistry` only records items and the names of their handlers; it draws no menus and calls nothing. Tool definitions are read and interpreted, but the package does not run tools. It has no plugin system, spell checker or session storage.

## Tests

```
pytest
```