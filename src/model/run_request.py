"""A single invocation of rsync, computed fresh from the session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from model.rsync_options import RsyncOptions
from rsync import RSYNC_PROGRAM, build_command, format_command

if TYPE_CHECKING:
    from model.session import SessionState


@dataclass(frozen=True)
class RunRequest:
    """Source, destination and the effective options of one run."""

    source: str
    destination: str
    options: RsyncOptions
    program: str = RSYNC_PROGRAM
    dry_run: bool = False

    @classmethod
    def from_session(cls, session: SessionState, dry_run: bool = False) -> RunRequest:
        """Snapshot the session into a request.

        A dry run forces `dry_run` on a copy of the options; the session's
        own options are left untouched.
        """
        options = session.options.clone()
        if dry_run:
            options.dry_run = True
        return cls(
            source=session.source,
            destination=session.destination,
            options=options,
            program=session.program,
            dry_run=dry_run,
        )

    @property
    def argv(self) -> list[str]:
        return build_command(self.source, self.destination, self.options, self.program)

    @property
    def display(self) -> str:
        return format_command(self.source, self.destination, self.options, self.program)
