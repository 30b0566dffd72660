"""
Strip-level helpers for mapping patch paths onto working-tree paths.

A strip level is the number of leading path segments removed from a patch
path, as in ``git apply -p<n>``.
"""

from typing import List

from patchmate.core.text import split_lines

MAX_STRIP_CANDIDATE = 3


def guess_preferred_strip_level(patch_text: str) -> int:
    """
    Guess the strip level from the first ``diff --git`` header.

    Returns:
        1 when the header uses git's a/ and b/ prefixes (or there is no
        header at all), 0 otherwise
    """
    for line in split_lines(patch_text):
        if line.startswith('diff --git '):
            parts = line.split(' ')
            left = parts[2] if len(parts) > 2 else ''
            right = parts[3] if len(parts) > 3 else ''
            if left.startswith('a/') or right.startswith('b/'):
                return 1
            return 0
    return 1


def get_strip_candidates(preferred_strip: int) -> List[int]:
    """Strip levels to try, preferred first, then 0 through 3, without repeats."""
    candidates: List[int] = []
    for strip in [preferred_strip] + list(range(MAX_STRIP_CANDIDATE + 1)):
        if strip not in candidates:
            candidates.append(strip)
    return candidates


def strip_path(path: str, level: int) -> str:
    """
    Remove leading path segments.

    Args:
        path: A patch path such as ``a/src/main.py``
        level: Number of leading segments to drop

    Returns:
        The remaining path, or an empty string if nothing is left
    """
    if level < 0:
        raise ValueError(f"Strip level must not be negative: {level}")
    segments = [s for s in path.split('/') if s]
    return '/'.join(segments[level:])
