"""Shared fixtures for rsync-tui tests."""

import sys

import pytest

from controller import KeyPress
from model import RsyncOptions, SessionState


@pytest.fixture
def session():
    """Fresh session with default options and empty paths."""
    return SessionState()


@pytest.fixture
def filled_session():
    """Session with both paths set, as if typed by the user."""
    return SessionState(source="/data/photos/", destination="backup:/srv/photos/")


@pytest.fixture
def all_disabled():
    """RsyncOptions with every flag switched off."""
    options = RsyncOptions()
    for name in RsyncOptions.flag_names():
        setattr(options, name, False)
    return options


@pytest.fixture
def python_child(session):
    """Build a session whose program is the running interpreter.

    The returned function takes a Python script and returns the session; the
    script sees the source and destination as sys.argv[-2:].
    """

    def make(script: str) -> SessionState:
        session.program = sys.executable
        session.options = RsyncOptions()
        for name in RsyncOptions.flag_names():
            setattr(session.options, name, False)
        # The flags list is empty, so argv is [python, source, destination]
        session.source = "-c"
        session.destination = script
        return session

    return make


@pytest.fixture
def keys():
    """Turn Textual key names into KeyPress values; single characters are text."""

    def make(*names: str) -> list[KeyPress]:
        return [KeyPress(key=name, character=name if len(name) == 1 else None) for name in names]

    return make
