"""Scrollback messages written around an rsync run."""

from __future__ import annotations

ERROR_MARKER = "[ERR]"


def running_message(command: str) -> str:
    return f"Running: {command}"


def dry_run_message(command: str) -> str:
    return f"Running (dry run): {command}"


def success_message() -> str:
    return "Sync completed successfully"


def failure_message(returncode: int | None) -> str:
    """Failure line; the exit code is omitted when the OS did not report one."""
    if returncode is None:
        return "Sync failed (exit code unavailable)"
    return f"Sync failed with exit code: {returncode}"


def spawn_error_message(program: str, error: str) -> str:
    return f"Failed to execute {program}: {error}"


def error_line(text: str) -> str:
    """Tag a line that came from the child's stderr."""
    return f"{ERROR_MARKER} {text}"


def busy_message() -> str:
    return "A sync is already running; wait for it to finish"


def missing_program_message(program: str) -> str:
    return f"Warning: '{program}' not found in PATH. Install rsync or pass --rsync."
