"""Text helpers for panel rendering."""

from __future__ import annotations

CONTINUATION = " \\"
INDENT = "  "


def format_option(key: str, label: str, enabled: bool) -> str:
    """Render one option as `[x]a Archive` / `[ ]z Compress`."""
    check = "x" if enabled else " "
    return f"[{check}]{key} {label}"


def wrap_command(cmd: str, max_width: int) -> list[str]:
    """Wrap a command line to `max_width` columns, shell-continuation style.

    Breaks at the last space that fits; segments that continue end with
    ` \\` and every segment after the first is indented two spaces. A token
    longer than the width is split mid-token.
    """
    # Leave room for the continuation marker
    limit = max(1, max_width - len(CONTINUATION))
    result = []

    for line in cmd.split("\n"):
        line = line.lstrip()
        if len(line) <= max_width:
            result.append(line)
            continue

        remaining = line
        first = True
        while remaining:
            if len(remaining) > max_width:
                cut = remaining.rfind(" ", 0, limit) + 1 or limit
            else:
                cut = len(remaining)
            chunk, rest = remaining[:cut].rstrip(), remaining[cut:]
            prefix = "" if first else INDENT
            if rest.strip():
                result.append(f"{prefix}{chunk}{CONTINUATION}")
            else:
                result.append(f"{prefix}{chunk}")
            remaining = rest.lstrip()
            first = False

    return result
