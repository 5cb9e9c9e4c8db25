"""Command-line interface for rtui."""

import argparse
import logging
from dataclasses import dataclass, field

from app import RsyncTUI
from model import RsyncOptions, SessionState
from rsync import RSYNC_PROGRAM

RTUI_VERSION = "0.3.0"

log = logging.getLogger(__name__)


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    source: str = ""
    destination: str = ""
    excludes: list[str] = field(default_factory=list)
    program: str = RSYNC_PROGRAM


class RtuiHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "rsync TUI - An interactive front-end for composing and running rsync.",
            f"Version: {RTUI_VERSION}",
            "",
            "Usage:",
            "  rtui [SOURCE [DESTINATION]]            Open the TUI, optionally pre-filled",
            "",
            "Options:",
            "  --exclude <pattern>                    Add an --exclude pattern (repeatable)",
            "  --rsync <binary>                       rsync executable to run (default: rsync)",
            "  --version                              Show version and exit",
            "",
            "Keys:",
            "  1-5, Tab/j, Shift+Tab/k                Select panel",
            "  i / Esc                                Insert / Normal mode on a path panel",
            "  Tab (insert)                           Complete the path",
            "  a v z n p d h e r x f                  Toggle options",
            "  Ctrl+s / Ctrl+n                        Run / dry run",
            "  q, Ctrl+c                              Quit",
            "",
            "Examples:",
            "  rtui ~/photos/ backup:/srv/photos/",
            "  rtui --exclude '*.tmp' --exclude .cache src/ /mnt/usb/src/",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for rtui CLI."""
    parser = argparse.ArgumentParser(
        prog="rtui",
        formatter_class=RtuiHelpFormatter,
        add_help=True,
    )
    parser.add_argument("source", nargs="?", default="", help=argparse.SUPPRESS)
    parser.add_argument("destination", nargs="?", default="", help=argparse.SUPPRESS)
    parser.add_argument(
        "--exclude", metavar="PATTERN", action="append", default=[], help=argparse.SUPPRESS
    )
    parser.add_argument("--rsync", metavar="BINARY", default=RSYNC_PROGRAM, help=argparse.SUPPRESS)
    parser.add_argument(
        "--version", action="version", version=f"rtui {RTUI_VERSION}", help=argparse.SUPPRESS
    )
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Args:
        argv: Arguments without the program name; defaults to sys.argv[1:]
    """
    args = create_parser().parse_args(argv)
    return ParsedArgs(
        source=args.source,
        destination=args.destination,
        excludes=list(args.exclude),
        program=args.rsync,
    )


def build_session(args: ParsedArgs) -> SessionState:
    """Create the initial session from parsed arguments."""
    options = RsyncOptions()
    options.exclude = list(args.excludes)
    return SessionState(
        source=args.source,
        destination=args.destination,
        options=options,
        program=args.program,
    )


def main() -> None:
    """Main entry point."""
    args = parse_args()
    session = build_session(args)
    log.info(f"Launching TUI: {session.command_preview()}")

    app = RsyncTUI(session, version=RTUI_VERSION)
    app.run()

    if app.session.running:
        log.warning("Exited while a sync was still running")


if __name__ == "__main__":
    main()
