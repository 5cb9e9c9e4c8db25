"""Key binding tables for the session controller.

Keys are Textual key names ("ctrl+s", "tab", "shift+tab", "a", ...). The
tables are plain data so the transition function stays a lookup plus a
match, and the help bar can be generated from the same source.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING

from model.rsync_options import RsyncOptions
from model.session import Panel

if TYPE_CHECKING:
    from textual import events

# Prefixes Textual puts on modified key names
MODIFIER_PREFIXES = ("ctrl+", "alt+", "meta+", "super+", "hyper+")


@dataclass(frozen=True)
class KeyPress:
    """A key event reduced to what the controller needs."""

    key: str
    character: str | None = None

    @classmethod
    def from_event(cls, event: events.Key) -> KeyPress:
        return cls(key=event.key, character=event.character if event.is_printable else None)

    @property
    def is_modified(self) -> bool:
        """True for ctrl/alt style combos (shift alone does not count)."""
        return any(prefix in self.key for prefix in MODIFIER_PREFIXES)

    @property
    def text(self) -> str | None:
        """The character to insert, or None if this key is not text input."""
        if self.is_modified or not self.character:
            return None
        if not self.character.isprintable():
            return None
        return self.character


class Action(Enum):
    QUIT = auto()
    RUN = auto()
    DRY_RUN = auto()
    NEXT_PANEL = auto()
    PREV_PANEL = auto()
    ENTER_INSERT = auto()
    EXIT_INSERT = auto()
    COMPLETE = auto()
    BACKSPACE = auto()
    NEXT_FIELD = auto()


# Work in both modes and every panel
GLOBAL_KEYS: dict[str, Action] = {
    "ctrl+c": Action.QUIT,
    "ctrl+q": Action.QUIT,
    "ctrl+s": Action.RUN,
    "ctrl+n": Action.DRY_RUN,
}

NORMAL_KEYS: dict[str, Action] = {
    "q": Action.QUIT,
    "tab": Action.NEXT_PANEL,
    "j": Action.NEXT_PANEL,
    "shift+tab": Action.PREV_PANEL,
    "k": Action.PREV_PANEL,
    "i": Action.ENTER_INSERT,
}

PANEL_KEYS: dict[str, Panel] = {
    "1": Panel.SOURCE,
    "2": Panel.DESTINATION,
    "3": Panel.OPTIONS,
    "4": Panel.LOGS,
    "5": Panel.PROGRESS,
}

# Toggle key -> option index, taken from the option declarations
TOGGLE_KEYS: dict[str, int] = {
    field.key: index for index, field in enumerate(RsyncOptions.get_ui_fields().values())
}

INSERT_KEYS: dict[str, Action] = {
    "escape": Action.EXIT_INSERT,
    "tab": Action.COMPLETE,
    "backspace": Action.BACKSPACE,
    "enter": Action.NEXT_FIELD,
}


def help_text(insert_mode: bool, on_logs_panel: bool) -> str:
    """Help bar text for the current mode and panel."""
    toggles = "/".join(TOGGLE_KEYS)
    if insert_mode:
        return "[Esc] Normal  [Enter] Next  [Tab] Autocomplete  [Ctrl+s] Sync  [Ctrl+n] Dry-run"
    if on_logs_panel:
        return f"[1-5/j/k] Panels  [Enter] Run  [i] Insert  [{toggles}] Options  [q] Quit"
    return f"[1-5/j/k] Panels  [i] Insert  [{toggles}] Options  [Ctrl+s] Sync  [q] Quit"
