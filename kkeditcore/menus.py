"""Menu items and the registry that files them under their menus."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class MenuKind(Enum):
    """The menus an item can be placed in."""

    FILE = "file"
    EDIT = "edit"
    VIEW = "view"
    NAV = "nav"
    BOOKMARKS = "bookmarks"
    HELP = "help"
    TOOLS = "tools"
    SAVE_SESSIONS = "save_sessions"
    RESTORE_SESSIONS = "restore_sessions"
    NONE = "none"


_HANDLERS = {
    MenuKind.FILE: "do_file_menu_items",
    MenuKind.EDIT: "do_edit_menu_items",
    MenuKind.VIEW: "do_view_menu_items",
    MenuKind.NAV: "do_nav_menu_items",
    MenuKind.BOOKMARKS: "do_bookmark_menu_items",
    MenuKind.HELP: "do_help_menu_items",
    MenuKind.TOOLS: "do_tools_menu_items",
    MenuKind.SAVE_SESSIONS: "do_sessions_menu_items",
    MenuKind.RESTORE_SESSIONS: "do_sessions_menu_items",
    MenuKind.NONE: "do_odd_menu_items",
}


def menu_handler(kind: MenuKind | str) -> str:
    """Name of the handler that items of this menu kind trigger."""
    return _HANDLERS[MenuKind(kind)]


@dataclass
class MenuItem:
    """A single menu entry."""

    name: str
    kind: MenuKind
    menu_id: int = 0
    icon: str | None = None
    shortcut: str | None = None
    object_name: str = ""
    handler: str = ""
    menu_string: str = ""
    in_popup: bool = False
    always_in_popup: bool = False
    checkable: bool = False
    checked: bool = False


@dataclass
class MenuRegistry:
    """Creates menu items and keeps them in order per menu."""

    menus: dict[MenuKind, list[MenuItem]] = field(
        default_factory=lambda: {kind: [] for kind in MenuKind}
    )

    def make_item(
        self,
        kind: MenuKind | str,
        name: str,
        shortcut: str | None = None,
        icon: str | None = None,
        object_name: str = "",
        menu_id: int = 0,
    ) -> MenuItem:
        """Create an item, wire it to its menu's handler and file it.

        Items of kind NONE belong to no visible menu but are still kept,
        so they can be triggered from elsewhere.
        """
        menu_kind = MenuKind(kind)
        item = MenuItem(
            name=name,
            kind=menu_kind,
            menu_id=menu_id,
            icon=icon or None,
            shortcut=shortcut or None,
            object_name=object_name,
            handler=menu_handler(menu_kind),
        )
        self.menus.setdefault(menu_kind, []).append(item)
        return item

    def items_in(self, kind: MenuKind | str) -> list[MenuItem]:
        """Items of one menu, in the order they were made."""
        return list(self.menus.get(MenuKind(kind), []))