"""Process supervision for rsync runs.

`stream_command` spawns the child and streams its output line by line.
`execute_run` and its helpers apply that output to a session: progress
lines move the gauge, every line lands in the scrollback, and the exit
status is reported when the child is gone.
"""

from __future__ import annotations

import logging
import re
import subprocess
import threading
from dataclasses import dataclass
from typing import IO, TYPE_CHECKING, Any, Callable, Iterator

from commandoutput import (
    dry_run_message,
    error_line,
    failure_message,
    running_message,
    spawn_error_message,
    success_message,
)
from progress import MAX_PERCENT, parse_progress_line

if TYPE_CHECKING:
    from model.run_request import RunRequest
    from model.session import SessionState

log = logging.getLogger(__name__)

READ_SIZE = 4096

# rsync redraws progress with a bare CR, so CR also ends a line
_LINE_BREAK = re.compile(rb"\r\n|\r|\n")

# Runs `fn(*args)` somewhere appropriate (immediately, or on the UI thread)
Post = Callable[..., Any]


@dataclass(frozen=True)
class OutputLine:
    """One line of child output."""

    text: str
    is_error: bool = False
    undecodable: bool = False


@dataclass(frozen=True)
class ExitOutcome:
    """How a run ended: an exit code, or the reason the child never started."""

    returncode: int | None = None
    spawn_error: str | None = None

    @property
    def success(self) -> bool:
        return self.spawn_error is None and self.returncode == 0


# =============================================================================
# Streaming
# =============================================================================


def iter_raw_lines(stream: IO[bytes]) -> Iterator[bytes]:
    """Yield lines from a binary stream as soon as their terminator arrives.

    Terminators (LF, CRLF, lone CR) are stripped. Each read is scanned once,
    so a long unterminated line costs linear time.
    """
    buffer = bytearray()
    # Next position to search for a terminator
    scan = 0
    while True:
        chunk = stream.read1(READ_SIZE)
        if not chunk:
            break
        buffer += chunk
        start = 0
        while True:
            match = _LINE_BREAK.search(buffer, scan)
            if match is None:
                scan = len(buffer)
                break
            if match.group() == b"\r" and match.end() == len(buffer):
                # May be the first half of a CRLF split across reads
                scan = match.start()
                break
            yield bytes(buffer[start : match.start()])
            start = scan = match.end()
        if start:
            del buffer[:start]
            scan -= start

    if buffer.endswith(b"\r"):
        yield bytes(buffer[:-1])
    elif buffer:
        yield bytes(buffer)


def decode_lines(stream: IO[bytes], is_error: bool = False) -> Iterator[OutputLine]:
    """Decode lines as UTF-8, replacing each undecodable one with a notice."""
    for raw in iter_raw_lines(stream):
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            log.warning(f"Skipping undecodable output line ({len(raw)} bytes): {e}")
            yield OutputLine(
                text=f"skipped undecodable output line ({len(raw)} bytes)",
                is_error=True,
                undecodable=True,
            )
            continue
        yield OutputLine(text=text, is_error=is_error)


def stream_command(
    argv: list[str],
    on_line: Callable[[OutputLine], None],
    on_spawn: Callable[[subprocess.Popen], None] | None = None,
) -> ExitOutcome:
    """Run `argv` and feed its output to `on_line`.

    Stdout is read on the calling thread. Stderr is drained concurrently so
    the child can never block on a full stderr pipe, and its lines are
    delivered after stdout is exhausted.

    Args:
        argv: Program followed by its arguments
        on_line: Called once per output line
        on_spawn: Called with the live process right after it starts

    Returns:
        ExitOutcome with the exit code, or the spawn error if the program
        could not be started
    """
    log.info(f"Spawning: {argv}")
    try:
        process = subprocess.Popen(
            argv,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except (OSError, ValueError) as e:
        log.error(f"Failed to spawn {argv[0]!r}: {e}")
        return ExitOutcome(spawn_error=str(e))

    stderr_lines: list[OutputLine] = []
    drain = threading.Thread(
        target=lambda: stderr_lines.extend(decode_lines(process.stderr, is_error=True)),
        name="stderr-drain",
        daemon=True,
    )
    drain.start()

    try:
        if on_spawn is not None:
            on_spawn(process)
        for line in decode_lines(process.stdout):
            on_line(line)
    except BaseException:
        process.kill()
        raise
    finally:
        process.stdout.close()
        drain.join()
        process.stderr.close()
        returncode = process.wait()

    for line in stderr_lines:
        on_line(line)

    log.info(f"Process exited with code {returncode}")
    return ExitOutcome(returncode=returncode)


# =============================================================================
# Applying a run to a session
# =============================================================================


def begin_run(session: SessionState, request: RunRequest) -> None:
    """Mark the session busy and announce the command.

    The gauge keeps its last value until the child has actually started.
    """
    session.running = True
    announce = dry_run_message if request.dry_run else running_message
    session.log(announce(request.display))


def reset_progress(session: SessionState) -> None:
    session.progress_percent = 0.0
    session.transfer_info = ""


def record_output(session: SessionState, line: OutputLine) -> None:
    """Append one output line; progress lines also move the gauge."""
    if line.undecodable:
        session.log(error_line(line.text))
        return
    if line.is_error:
        tagged = error_line(line.text)
        session.log(tagged)
        session.progress_output.append(tagged)
        return

    parsed = parse_progress_line(line.text)
    if parsed is not None:
        session.progress_percent, session.transfer_info = parsed
    session.log(line.text)
    session.progress_output.append(line.text)


def finish_run(session: SessionState, request: RunRequest, outcome: ExitOutcome) -> None:
    """Log the outcome of a run."""
    if outcome.spawn_error is not None:
        session.log(spawn_error_message(request.program, outcome.spawn_error))
    elif outcome.success:
        session.progress_percent = MAX_PERCENT
        session.log(success_message())
    else:
        session.log(failure_message(outcome.returncode))


def end_run(session: SessionState) -> None:
    session.running = False


def _apply_now(fn: Callable[..., Any], *args: Any) -> Any:
    return fn(*args)


def supervise_run(
    session: SessionState,
    request: RunRequest,
    post: Post | None = None,
    on_spawn: Callable[[subprocess.Popen], None] | None = None,
) -> ExitOutcome:
    """Stream a started run into the session and report how it ended.

    Expects `begin_run` to have been applied already. Every session update
    goes through `post`, so this can run on a worker thread while the UI
    thread owns the session. `running` is cleared on every exit path.
    """
    post = post or _apply_now

    def spawned(process: subprocess.Popen) -> None:
        post(reset_progress, session)
        if on_spawn is not None:
            on_spawn(process)

    try:
        outcome = stream_command(
            request.argv,
            lambda line: post(record_output, session, line),
            spawned,
        )
        post(finish_run, session, request, outcome)
    finally:
        post(end_run, session)
    return outcome


def execute_run(
    session: SessionState,
    request: RunRequest,
    post: Post | None = None,
    on_spawn: Callable[[subprocess.Popen], None] | None = None,
) -> ExitOutcome:
    """Run a request to completion, blocking the caller."""
    post = post or _apply_now
    post(begin_run, session, request)
    return supervise_run(session, request, post, on_spawn)
