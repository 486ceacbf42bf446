import pytest

from kkeditcore.menus import MenuItem, MenuKind, MenuRegistry, menu_handler


def test_menu_handler_per_kind():
    assert menu_handler(MenuKind.FILE) == "do_file_menu_items"
    assert menu_handler(MenuKind.SAVE_SESSIONS) == menu_handler(MenuKind.RESTORE_SESSIONS)
    assert menu_handler("none") == "do_odd_menu_items"


def test_menu_handler_unknown_kind():
    with pytest.raises(ValueError):
        menu_handler("bogus")


def test_make_item_fields():
    registry = MenuRegistry()
    item = registry.make_item(MenuKind.FILE, "Save As", "Ctrl+Shift+S", "document-save-as", "saveas", 7)
    assert isinstance(item, MenuItem)
    assert item.name == "Save As"
    assert item.shortcut == "Ctrl+Shift+S"
    assert item.icon == "document-save-as"
    assert item.object_name == "saveas"
    assert item.menu_id == 7
    assert item.kind is MenuKind.FILE
    assert item.handler == menu_handler(MenuKind.FILE)


def test_empty_shortcut_means_none():
    registry = MenuRegistry()
    item = registry.make_item(MenuKind.EDIT, "Undo All", 0)
    assert item.shortcut is None
    item2 = registry.make_item(MenuKind.EDIT, "Redo All", "")
    assert item2.shortcut is None


def test_items_kept_in_order_per_menu():
    registry = MenuRegistry()
    first = registry.make_item(MenuKind.TOOLS, "one")
    second = registry.make_item(MenuKind.TOOLS, "two")
    other = registry.make_item(MenuKind.HELP, "About")
    assert registry.items_in(MenuKind.TOOLS) == [first, second]
    assert registry.items_in("help") == [other]
    assert registry.items_in(MenuKind.VIEW) == []


def test_detached_items():
    registry = MenuRegistry()
    item = registry.make_item(MenuKind.NONE, "Go To Definition In This Page")
    assert registry.items_in(MenuKind.NONE) == [item]
    assert all(item not in registry.items_in(k) for k in MenuKind if k is not MenuKind.NONE)


def test_items_in_returns_copy():
    registry = MenuRegistry()
    registry.make_item(MenuKind.FILE, "New")
    listing = registry.items_in(MenuKind.FILE)
    listing.clear()
    assert len(registry.items_in(MenuKind.FILE)) == 1


def test_make_item_rejects_unknown_kind():
    registry = MenuRegistry()
    with pytest.raises(ValueError):
        registry.make_item("nowhere", "x")