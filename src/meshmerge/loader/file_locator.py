"""
File Locator

Expands the user-supplied input list into concrete file paths.
"""

from __future__ import annotations

import glob
import os
from typing import Iterable, List

from meshmerge.logging import get_logger

log = get_logger(__name__)

GLOB_CHARS = ("*", "?")


def has_glob(pattern: str) -> bool:
    return any(ch in pattern for ch in GLOB_CHARS)


def expand_pattern(pattern: str) -> List[str]:
    """
    Expand one shell-style pattern (``~`` included) into sorted matches.

    A pattern that matches nothing contributes nothing.
    """
    matches = sorted(glob.glob(os.path.expanduser(pattern)))
    if not matches:
        log.warning(f"Pattern matched no files: {pattern}")
    else:
        log.debug(f"Pattern {pattern} expanded to {len(matches)} file(s)")
    return matches


def expand_inputs(paths: Iterable[str]) -> List[str]:
    """
    Expand the input list, keeping order.

    Plain names pass through untouched (a missing file is reported when it
    is opened); names containing ``*`` or ``?`` are glob-expanded in place.
    """
    result: List[str] = []
    for path in paths:
        if has_glob(path):
            result.extend(expand_pattern(path))
        else:
            result.append(path)
    return result
