"""Key bindings and key-to-action dispatch.

Decoded key tokens are looked up in a ``KeyMap`` to get a ``KeyAction``;
``apply_action`` then runs the matching navigation transition.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..content.model import AppData
from ..navigation import (
    UrlOpener,
    jump_to_bottom,
    jump_to_top,
    move_selection,
    open_selected,
    scroll_content,
    switch_tab,
)
from ..state import NavigationState

PAGE_SCROLL_ROWS = 10
TAB_HOTKEY_COUNT = 6


@dataclass(frozen=True)
class KeyAction:
    """One navigation request; ``amount`` is a tab index or a delta."""

    name: str
    amount: int = 0


QUIT = KeyAction("quit")
SWITCH_TO_LAST_TAB = KeyAction("switch_last_tab")
SELECT_PREVIOUS = KeyAction("move_selection", -1)
SELECT_NEXT = KeyAction("move_selection", 1)
PAGE_UP = KeyAction("scroll_content", -PAGE_SCROLL_ROWS)
PAGE_DOWN = KeyAction("scroll_content", PAGE_SCROLL_ROWS)
CONTENT_TOP = KeyAction("jump_top")
CONTENT_BOTTOM = KeyAction("jump_bottom")
OPEN_SELECTED = KeyAction("open_selected")


def switch_to_tab(index: int) -> KeyAction:
    return KeyAction("switch_tab", index)


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single action."""

    combos: tuple[str, ...]
    action: KeyAction


class KeyMap:
    """Small key lookup table, last registration wins."""

    def __init__(self) -> None:
        self._actions: dict[str, KeyAction] = {}

    def register_binding(self, binding: KeyBinding) -> KeyMap:
        for combo in binding.combos:
            self._actions[combo] = binding.action
        return self

    def register_bindings(self, *bindings: KeyBinding) -> KeyMap:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> KeyAction | None:
        return self._actions.get(key)


def default_key_map() -> KeyMap:
    """Build the viewer's key table."""
    key_map = KeyMap().register_bindings(
        KeyBinding(("q", "ESC", "CTRL_C"), QUIT),
        KeyBinding(("g",), SWITCH_TO_LAST_TAB),
        KeyBinding(("UP", "k"), SELECT_PREVIOUS),
        KeyBinding(("DOWN", "j"), SELECT_NEXT),
        KeyBinding(("PAGE_UP",), PAGE_UP),
        KeyBinding(("PAGE_DOWN",), PAGE_DOWN),
        KeyBinding(("HOME", "t"), CONTENT_TOP),
        KeyBinding(("G",), CONTENT_BOTTOM),
        KeyBinding(("o", "ENTER"), OPEN_SELECTED),
    )
    for index in range(TAB_HOTKEY_COUNT):
        key_map.register_binding(KeyBinding((str(index + 1),), switch_to_tab(index)))
    return key_map


def apply_action(
    action: KeyAction,
    data: AppData,
    state: NavigationState,
    open_url: UrlOpener,
) -> bool:
    """Run ``action`` against ``state``; return ``True`` when it asks to quit."""
    if action.name == "quit":
        return True
    if action.name == "switch_tab":
        switch_tab(data, state, action.amount)
    elif action.name == "switch_last_tab":
        switch_tab(data, state, len(data.tabs) - 1)
    elif action.name == "move_selection":
        move_selection(data, state, action.amount)
    elif action.name == "scroll_content":
        scroll_content(state, action.amount)
    elif action.name == "jump_top":
        jump_to_top(state)
    elif action.name == "jump_bottom":
        jump_to_bottom(state)
    elif action.name == "open_selected":
        open_selected(data, state, open_url)
    return False
