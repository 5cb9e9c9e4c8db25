"""Session state: everything the controller mutates and the renderer reads."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from model.rsync_options import RsyncOptions
from rsync import RSYNC_PROGRAM, format_command

LOG_DISPLAY_LINES = 20
OUTPUT_DISPLAY_LINES = 10


class Panel(Enum):
    """Focus regions, in ring order."""

    SOURCE = "source"
    DESTINATION = "destination"
    OPTIONS = "options"
    LOGS = "logs"
    PROGRESS = "progress"


PANEL_RING: list[Panel] = list(Panel)

# Panels whose content is a free-text path
PATH_PANELS = (Panel.SOURCE, Panel.DESTINATION)


class Mode(Enum):
    NORMAL = "normal"
    INSERT = "insert"


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session handed to the renderer."""

    source: str
    destination: str
    active_panel: Panel
    mode: Mode
    options: RsyncOptions
    command_preview: str
    recent_logs: tuple[str, ...]
    running: bool
    progress_percent: float
    transfer_info: str
    recent_output: tuple[str, ...]


@dataclass
class SessionState:
    """Mutable model of one interactive session.

    Owned by the app and passed explicitly to every transition; there is no
    module-level session.
    """

    source: str = ""
    destination: str = ""
    options: RsyncOptions = field(default_factory=RsyncOptions)
    program: str = RSYNC_PROGRAM
    active_panel: Panel = Panel.SOURCE
    mode: Mode = Mode.NORMAL
    logs: list[str] = field(default_factory=list)
    running: bool = False
    progress_percent: float = 0.0
    transfer_info: str = ""
    progress_output: list[str] = field(default_factory=list)
    should_quit: bool = False

    # =========================================================================
    # Navigation
    # =========================================================================

    def next_panel(self) -> None:
        index = PANEL_RING.index(self.active_panel)
        self.active_panel = PANEL_RING[(index + 1) % len(PANEL_RING)]

    def prev_panel(self) -> None:
        index = PANEL_RING.index(self.active_panel)
        self.active_panel = PANEL_RING[(index - 1) % len(PANEL_RING)]

    def enter_insert(self) -> bool:
        """Switch to Insert mode if the active panel holds a path.

        Returns True if the mode changed.
        """
        if self.active_panel not in PATH_PANELS:
            return False
        self.mode = Mode.INSERT
        return True

    # =========================================================================
    # Path fields
    # =========================================================================

    def active_field(self) -> str | None:
        """The path string of the active panel, or None for other panels."""
        if self.active_panel is Panel.SOURCE:
            return self.source
        if self.active_panel is Panel.DESTINATION:
            return self.destination
        return None

    def set_active_field(self, value: str) -> None:
        if self.active_panel is Panel.SOURCE:
            self.source = value
        elif self.active_panel is Panel.DESTINATION:
            self.destination = value

    # =========================================================================
    # Log and snapshot
    # =========================================================================

    def log(self, message: str) -> None:
        self.logs.append(message)

    def command_preview(self) -> str:
        return format_command(self.source, self.destination, self.options, self.program)

    def snapshot(self) -> SessionSnapshot:
        """Copy out what the renderer needs, newest log lines first."""
        return SessionSnapshot(
            source=self.source,
            destination=self.destination,
            active_panel=self.active_panel,
            mode=self.mode,
            options=self.options.clone(),
            command_preview=self.command_preview(),
            recent_logs=tuple(reversed(self.logs[-LOG_DISPLAY_LINES:])),
            running=self.running,
            progress_percent=self.progress_percent,
            transfer_info=self.transfer_info,
            recent_output=tuple(reversed(self.progress_output[-OUTPUT_DISPLAY_LINES:])),
        )
