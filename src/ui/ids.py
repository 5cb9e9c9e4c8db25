"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""

from model.session import Panel


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, HELP_BAR
        self.query_one(css(HELP_BAR), Static)
    """
    return f"#{widget_id}"


# Header / footer
TITLE_BAR = "title-bar"
HELP_BAR = "help-bar"

# Panels
SOURCE_PANEL = "source-panel"
DESTINATION_PANEL = "destination-panel"
OPTIONS_PANEL = "options-panel"
LOGS_PANEL = "logs-panel"
PROGRESS_PANEL = "progress-panel"

# Progress panel contents
PROGRESS_GAUGE = "progress-gauge"
TRANSFER_LABEL = "transfer-label"
PROGRESS_OUTPUT = "progress-output"

PANEL_IDS: dict[Panel, str] = {
    Panel.SOURCE: SOURCE_PANEL,
    Panel.DESTINATION: DESTINATION_PANEL,
    Panel.OPTIONS: OPTIONS_PANEL,
    Panel.LOGS: LOGS_PANEL,
    Panel.PROGRESS: PROGRESS_PANEL,
}

PANEL_TITLES: dict[Panel, str] = {
    Panel.SOURCE: "[1] Source",
    Panel.DESTINATION: "[2] Destination",
    Panel.OPTIONS: "[3] Options",
    Panel.LOGS: "[4] Preview / Logs",
    Panel.PROGRESS: "[5] Progress",
}
