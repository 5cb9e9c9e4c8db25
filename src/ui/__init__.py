"""UI module containing the screen, panel renderers and styles."""

from ui.screen import SyncScreen
from ui.helpers import format_option, wrap_command
from ui import ids

__all__ = [
    # Screens
    "SyncScreen",
    # Helpers
    "format_option",
    "wrap_command",
]
