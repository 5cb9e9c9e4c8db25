"""Render functions: session snapshot -> panel text.

Pure functions of a SessionSnapshot so they can be tested without an app.
"""

from __future__ import annotations

from model.rsync_options import RsyncOptions
from model.session import Mode, SessionSnapshot
from ui.helpers import format_option, wrap_command

SOURCE_PLACEHOLDER = "<enter source path>"
DESTINATION_PLACEHOLDER = "<enter destination path>"

# Options shown on the first row; the rest go on the second
FIRST_ROW_OPTIONS = 6
OPTION_SEPARATOR = "  "

PREVIEW_PREFIX = "> "
DEFAULT_WIDTH = 80


def title_text(snapshot: SessionSnapshot) -> str:
    mode = "INSERT" if snapshot.mode is Mode.INSERT else "NORMAL"
    title = f"rsync TUI [{mode}]"
    if snapshot.running:
        title += " running..."
    return title


def path_text(value: str, placeholder: str) -> str:
    return value or placeholder


def options_text(options: RsyncOptions) -> str:
    """Two rows of `[x]a Archive` style entries."""
    entries = [
        format_option(field.key, field.label, getattr(options, name))
        for name, field in options.get_ui_fields().items()
    ]
    rows = [entries[:FIRST_ROW_OPTIONS], entries[FIRST_ROW_OPTIONS:]]
    text = "\n".join(OPTION_SEPARATOR.join(row) for row in rows if row)
    if options.exclude:
        text += "\nExclude: " + ", ".join(options.exclude)
    return text


def logs_text(snapshot: SessionSnapshot, width: int = DEFAULT_WIDTH) -> str:
    """Wrapped command preview, a blank line, then the newest log lines."""
    if width <= len(PREVIEW_PREFIX):
        width = DEFAULT_WIDTH
    preview = wrap_command(snapshot.command_preview, width - len(PREVIEW_PREFIX))
    lines = [PREVIEW_PREFIX + preview[0]]
    lines.extend(" " * len(PREVIEW_PREFIX) + line for line in preview[1:])
    lines.append("")
    lines.extend(snapshot.recent_logs)
    return "\n".join(lines)


def gauge_label(snapshot: SessionSnapshot) -> str:
    label = f"{snapshot.progress_percent:.0f}%"
    if snapshot.transfer_info:
        label += f" - {snapshot.transfer_info}"
    return label


def output_text(snapshot: SessionSnapshot) -> str:
    return "\n".join(snapshot.recent_output)
