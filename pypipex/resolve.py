"""Locating a command in the directories listed by PATH."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pypipex.textutil import find_within, split, substring


def search_dirs(env: Mapping[str, str]) -> list[str]:
    """Return the directories of the first entry whose name starts with PATH.

    The entry is read as ``NAME=VALUE`` with its first five characters
    dropped, then split on ``:`` with empty pieces discarded. Without such
    an entry there is nowhere to search.
    """
    for key, value in env.items():
        entry = f"{key}={value}"
        if find_within(entry, "PATH", 4) is not None:
            return split(substring(entry, 5, len(entry)), ":")
    return []


def find_executable(name: str, env: Mapping[str, str]) -> str | None:
    """Return ``dir/name`` for the first search directory where it is executable."""
    for directory in search_dirs(env):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None