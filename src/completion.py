"""Path completion for the Source and Destination fields."""

from __future__ import annotations

import logging
import os

log = logging.getLogger(__name__)


def complete_path(partial: str) -> str | None:
    """Complete a partially typed path against the filesystem.

    Returns the completed string, or None when there is nothing to add:
    - an existing directory gains a trailing separator;
    - a single matching entry is completed fully (directories get a
      trailing separator);
    - several matches complete to their longest common prefix, but only
      if that is longer than what was typed.

    Unreadable or missing directories degrade to None.
    """
    if not partial:
        return None

    if os.path.isdir(partial):
        if partial.endswith(os.sep):
            return None
        return partial + os.sep

    parent, prefix = os.path.split(partial)
    listing_dir = parent or "."

    try:
        names = os.listdir(listing_dir)
    except OSError as e:
        log.debug(f"Cannot list {listing_dir!r} for completion: {e}")
        return None

    # Keep the parent exactly as typed so the result extends the input
    matches = [os.path.join(parent, name) for name in names if name.startswith(prefix)]

    if not matches:
        return None
    if len(matches) == 1:
        match = matches[0]
        if os.path.isdir(match):
            return match + os.sep
        return match

    common = common_prefix(matches)
    if len(common) > len(partial):
        return common
    return None


def common_prefix(strings: list[str]) -> str:
    """Longest character-wise prefix shared by all strings.

    Independent of the order of `strings`.
    """
    if not strings:
        return ""
    shortest = min(strings, key=len)
    for i, char in enumerate(shortest):
        if any(s[i] != char for s in strings):
            return shortest[:i]
    return shortest
