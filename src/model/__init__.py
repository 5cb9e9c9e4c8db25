"""Model classes for rsync-tui."""

from model.ui_field import ConfigBase, Field, UIField
from model.rsync_options import RsyncOptions
from model.session import (
    LOG_DISPLAY_LINES,
    OUTPUT_DISPLAY_LINES,
    PANEL_RING,
    Mode,
    Panel,
    SessionSnapshot,
    SessionState,
)
from model.run_request import RunRequest

__all__ = [
    "ConfigBase",
    "Field",
    "UIField",
    "RsyncOptions",
    "LOG_DISPLAY_LINES",
    "OUTPUT_DISPLAY_LINES",
    "PANEL_RING",
    "Mode",
    "Panel",
    "SessionSnapshot",
    "SessionState",
    "RunRequest",
]
