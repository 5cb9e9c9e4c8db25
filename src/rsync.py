"""Rsync command serialization.

Turns a source, a destination and an option set into the argv handed to
the rsync process, and into the single line shown in the preview panel.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from model.rsync_options import RsyncOptions


RSYNC_PROGRAM = "rsync"


def build_command(
    source: str,
    destination: str,
    options: RsyncOptions,
    program: str = RSYNC_PROGRAM,
) -> list[str]:
    """Build the rsync argv.

    Order: program, flag tokens in canonical option order, one
    `--exclude <pattern>` pair per exclusion, then source and destination.
    The two paths are always the last two tokens, even when empty.
    """
    args = [program]
    args.extend(options.to_rsync_args())
    args.append(source)
    args.append(destination)
    return args


def format_command(
    source: str,
    destination: str,
    options: RsyncOptions,
    program: str = RSYNC_PROGRAM,
) -> str:
    """Format the command for display - space-joined, no quoting."""
    return " ".join(build_command(source, destination, options, program))
