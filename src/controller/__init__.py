"""Controller layer: key routing and run supervision.

This package contains:
- keymap: key binding tables and the KeyPress value
- transitions: the total key -> session transition function
- execute: the mixin that runs rsync on a worker thread
"""

from controller.keymap import (
    GLOBAL_KEYS,
    INSERT_KEYS,
    NORMAL_KEYS,
    PANEL_KEYS,
    TOGGLE_KEYS,
    Action,
    KeyPress,
    help_text,
)
from controller.transitions import handle_key, request_run
from controller.execute import ExecuteEventsMixin

__all__ = [
    # Key tables
    "GLOBAL_KEYS",
    "INSERT_KEYS",
    "NORMAL_KEYS",
    "PANEL_KEYS",
    "TOGGLE_KEYS",
    "Action",
    "KeyPress",
    "help_text",
    # Transitions
    "handle_key",
    "request_run",
    # Event mixins
    "ExecuteEventsMixin",
]
