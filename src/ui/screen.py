"""The single full-screen layout: five panels, a title and a help bar."""

from __future__ import annotations

import logging

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import ProgressBar, Static

from controller.keymap import KeyPress, help_text
from model.session import Mode, Panel, SessionSnapshot
from ui import ids
from ui.ids import css
from ui.panels import (
    DESTINATION_PLACEHOLDER,
    SOURCE_PLACEHOLDER,
    gauge_label,
    logs_text,
    options_text,
    output_text,
    path_text,
    title_text,
)

log = logging.getLogger(__name__)


class SyncScreen(Screen):
    """Main screen. All keys go to the app's key handler."""

    def compose(self) -> ComposeResult:
        yield Static("", id=ids.TITLE_BAR, markup=False)
        with Horizontal(id="paths-row"):
            yield Static("", id=ids.SOURCE_PANEL, classes="panel", markup=False)
            yield Static("", id=ids.DESTINATION_PANEL, classes="panel", markup=False)
        yield Static("", id=ids.OPTIONS_PANEL, classes="panel", markup=False)
        yield Static("", id=ids.LOGS_PANEL, classes="panel", markup=False)
        with Vertical(id=ids.PROGRESS_PANEL, classes="panel"):
            yield ProgressBar(
                total=100, show_eta=False, show_percentage=False, id=ids.PROGRESS_GAUGE
            )
            yield Static("", id=ids.TRANSFER_LABEL, markup=False)
            yield Static("", id=ids.PROGRESS_OUTPUT, markup=False)
        yield Static("", id=ids.HELP_BAR, markup=False)

    def on_mount(self) -> None:
        for panel, widget_id in ids.PANEL_IDS.items():
            self.query_one(css(widget_id)).border_title = ids.PANEL_TITLES[panel]
        self.app._refresh_view()

    def on_key(self, event: events.Key) -> None:
        # Keep app-level bindings (focus cycling, ctrl+c) out of the way
        event.stop()
        event.prevent_default()
        self.app.handle_key_press(KeyPress.from_event(event))

    def render_snapshot(self, snapshot: SessionSnapshot) -> None:
        """Redraw every panel from a snapshot."""
        try:
            self.query_one(css(ids.TITLE_BAR), Static).update(title_text(snapshot))
            self.query_one(css(ids.SOURCE_PANEL), Static).update(
                path_text(snapshot.source, SOURCE_PLACEHOLDER)
            )
            self.query_one(css(ids.DESTINATION_PANEL), Static).update(
                path_text(snapshot.destination, DESTINATION_PLACEHOLDER)
            )
            self.query_one(css(ids.OPTIONS_PANEL), Static).update(options_text(snapshot.options))

            logs = self.query_one(css(ids.LOGS_PANEL), Static)
            logs.update(logs_text(snapshot, logs.content_size.width))

            self.query_one(css(ids.PROGRESS_GAUGE), ProgressBar).update(
                progress=snapshot.progress_percent
            )
            self.query_one(css(ids.TRANSFER_LABEL), Static).update(gauge_label(snapshot))
            self.query_one(css(ids.PROGRESS_OUTPUT), Static).update(output_text(snapshot))

            self.query_one(css(ids.HELP_BAR), Static).update(
                help_text(
                    insert_mode=snapshot.mode is Mode.INSERT,
                    on_logs_panel=snapshot.active_panel is Panel.LOGS,
                )
            )
        except NoMatches:
            log.debug("render_snapshot called before compose finished")
            return

        for panel, widget_id in ids.PANEL_IDS.items():
            widget = self.query_one(css(widget_id))
            widget.set_class(panel is snapshot.active_panel, "active")
