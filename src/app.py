"""Main TUI application for rtui."""

import logging
import os
import shutil
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from commandoutput import missing_program_message
from controller import ExecuteEventsMixin, KeyPress, handle_key
from model import SessionState
from ui import SyncScreen

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "rtui"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "rtui.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()

# Seconds between redraws while output streams in
REFRESH_INTERVAL = 0.1


class RsyncTUI(ExecuteEventsMixin, App):
    """TUI for composing and running rsync transfers."""

    TITLE = "rsync TUI"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    # Priority bindings fire before SyncScreen.on_key sees the key
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: SessionState | None = None, version: str = "0.0") -> None:
        super().__init__()
        self.version = version
        self.session = session if session is not None else SessionState()
        self._sync_screen: SyncScreen | None = None

    def on_mount(self) -> None:
        log.info(f"rtui {self.version} started: {self.session.command_preview()}")
        self._check_program()
        self._sync_screen = SyncScreen()
        self.push_screen(self._sync_screen)
        self.set_interval(REFRESH_INTERVAL, self._refresh_view)

    def _check_program(self) -> None:
        """Warn in the log panel if the rsync binary cannot be found."""
        if shutil.which(self.session.program) is None:
            log.warning(f"{self.session.program} not found in PATH")
            self.session.log(missing_program_message(self.session.program))

    # =========================================================================
    # Key handling
    # =========================================================================

    def handle_key_press(self, key: KeyPress) -> None:
        """Apply a key to the session and act on the result."""
        request = handle_key(self.session, key)
        if request is not None:
            self.start_run(request)
        if self.session.should_quit:
            log.info("Quit requested")
            self.quit_session()
            return
        self._refresh_view()

    async def action_quit(self) -> None:
        """Quit through the session so a running rsync is stopped first."""
        log.info("Quit requested via binding")
        self.session.should_quit = True
        self.quit_session()

    def _refresh_view(self) -> None:
        if self._sync_screen is None:
            return
        self._sync_screen.render_snapshot(self.session.snapshot())
