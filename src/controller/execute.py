"""Run/quit handlers: launching rsync in a worker and shutting down."""

from __future__ import annotations

import logging
import subprocess
from typing import TYPE_CHECKING, Callable

from textual import work

from command_execution import begin_run, supervise_run

if TYPE_CHECKING:
    from model import RunRequest, SessionState

log = logging.getLogger(__name__)


class ExecuteEventsMixin:
    """Mixin that runs rsync off the UI thread.

    The worker never touches the session directly: every update is sent
    back to the UI thread with `call_from_thread`.
    """

    # Expected from App class
    session: SessionState
    call_from_thread: Callable
    exit: Callable
    _refresh_view: Callable

    _active_process: subprocess.Popen | None = None

    def start_run(self, request: RunRequest) -> None:
        """Start a run; `running` is set before this returns."""
        log.info(f"Starting run: {request.display}")
        begin_run(self.session, request)
        self._refresh_view()
        self._run_in_worker(request)

    @work(thread=True, exit_on_error=False, group="rsync")
    def _run_in_worker(self, request: RunRequest) -> None:
        try:
            supervise_run(
                self.session,
                request,
                post=self.call_from_thread,
                on_spawn=self._remember_process,
            )
        finally:
            self._active_process = None

    def _remember_process(self, process: subprocess.Popen) -> None:
        self._active_process = process

    def quit_session(self) -> None:
        """Exit the app, stopping a running rsync first."""
        process = self._active_process
        if process is not None and process.poll() is None:
            log.warning("Quit requested during a run; terminating rsync")
            process.terminate()
        self.exit()
