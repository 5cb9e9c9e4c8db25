"""Session controller: the key -> state transition function.

`handle_key` is total. Every key either performs a defined transition or is
ignored; it never raises on unexpected input. Runs are not started here:
the transition returns a `RunRequest` and the caller hands it to the
process supervisor.
"""

from __future__ import annotations

import logging

from commandoutput import busy_message
from completion import complete_path
from controller.keymap import (
    GLOBAL_KEYS,
    INSERT_KEYS,
    NORMAL_KEYS,
    PANEL_KEYS,
    TOGGLE_KEYS,
    Action,
    KeyPress,
)
from model.run_request import RunRequest
from model.session import Mode, Panel, SessionState

log = logging.getLogger(__name__)


def request_run(session: SessionState, dry_run: bool = False) -> RunRequest | None:
    """Build a run request, or refuse if a run is already in progress."""
    if session.running:
        log.info("Run requested while another is in progress; rejected")
        session.log(busy_message())
        return None
    return RunRequest.from_session(session, dry_run=dry_run)


def handle_key(session: SessionState, key: KeyPress) -> RunRequest | None:
    """Apply one key press to the session.

    Returns a RunRequest when the key asks for a sync to start.
    """
    action = GLOBAL_KEYS.get(key.key)
    if action is Action.QUIT:
        session.should_quit = True
        return None
    if action is Action.RUN:
        return request_run(session, dry_run=False)
    if action is Action.DRY_RUN:
        return request_run(session, dry_run=True)

    if session.mode is Mode.INSERT:
        _handle_insert(session, key)
        return None
    return _handle_normal(session, key)


def _handle_normal(session: SessionState, key: KeyPress) -> RunRequest | None:
    if key.key == "enter" and session.active_panel is Panel.LOGS:
        return request_run(session, dry_run=False)

    action = NORMAL_KEYS.get(key.key)
    if action is Action.QUIT:
        session.should_quit = True
    elif action is Action.NEXT_PANEL:
        session.next_panel()
    elif action is Action.PREV_PANEL:
        session.prev_panel()
    elif action is Action.ENTER_INSERT:
        session.enter_insert()
    elif key.key in PANEL_KEYS:
        session.active_panel = PANEL_KEYS[key.key]
    elif key.key in TOGGLE_KEYS:
        session.options.toggle(TOGGLE_KEYS[key.key])
    return None


def _handle_insert(session: SessionState, key: KeyPress) -> None:
    action = INSERT_KEYS.get(key.key)
    if action is Action.EXIT_INSERT:
        session.mode = Mode.NORMAL
        return

    current = session.active_field()
    if current is None:
        # Insert only exists on path panels; nothing to edit elsewhere
        return

    if action is Action.COMPLETE:
        completed = complete_path(current)
        if completed is not None:
            session.set_active_field(completed)
    elif action is Action.BACKSPACE:
        session.set_active_field(current[:-1])
    elif action is Action.NEXT_FIELD:
        if session.active_panel is Panel.SOURCE:
            session.active_panel = Panel.DESTINATION
        else:
            session.mode = Mode.NORMAL
    elif key.text is not None:
        session.set_active_field(current + key.text)
