"""Parsing of rsync progress lines.

rsync reports progress as whitespace-separated columns, e.g.::

       1,234,567  45%   12.34MB/s    0:01:23

The first column ending in ``%`` drives the gauge; the two columns after it
(rate and elapsed/remaining time) become the gauge label.
"""

from __future__ import annotations

import math
import re

MAX_PERCENT = 100.0
INFO_TOKENS = 2

# Plain decimal or exponent notation; no underscores or non-ASCII digits
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_percent_token(token: str) -> float | None:
    """Return the numeric value of a ``NN%`` token, or None."""
    stem = token[:-1]
    if not token.endswith("%") or not _NUMBER.fullmatch(stem):
        return None
    value = float(stem)
    if not math.isfinite(value):
        return None
    return value


def parse_progress_line(line: str) -> tuple[float, str] | None:
    """Extract (percent, info) from one line of rsync output.

    Returns None when the line carries no percentage marker. The percent is
    capped at 100.0 but never raised; info is up to two tokens after the
    marker joined by a space (empty if there are none).
    """
    tokens = line.split()
    for i, token in enumerate(tokens):
        percent = parse_percent_token(token)
        if percent is None:
            continue
        info = " ".join(tokens[i + 1 : i + 1 + INFO_TOKENS])
        return min(percent, MAX_PERCENT), info
    return None
