"""
Hunk application utilities.
"""

from typing import List, Optional, Tuple

from patchmate.logging_utils import logger
from patchmate.core.config import get_search_window
from patchmate.parsing.models import Hunk, KIND_CONTEXT, KIND_DEL


def matches_at(source: List[str], pos: int, expected: List[str]) -> bool:
    """Check whether expected occurs verbatim in source starting at pos."""
    if pos < 0 or pos + len(expected) > len(source):
        return False
    return source[pos:pos + len(expected)] == expected


def find_hunk_position(
    source: List[str],
    expected: List[str],
    preferred_pos: int,
    lower_bound: int,
    window: Optional[int] = None,
) -> Optional[int]:
    """
    Find where a hunk's pre-image occurs in the source.

    Scans a window around the declared position first, then the rest of the
    source. The first exact match at or after lower_bound wins in both passes.

    Args:
        source: The source lines
        expected: The context and deleted lines of the hunk, in order
        preferred_pos: 0-based position declared by the hunk header
        lower_bound: Earliest position allowed (end of the previous hunk)
        window: Lines to scan on either side of preferred_pos

    Returns:
        The 0-based position, or None if the pre-image does not occur
    """
    lower_bound = max(0, lower_bound)

    # Pure insertion, nothing to anchor on
    if not expected:
        return max(lower_bound, preferred_pos)

    if window is None:
        window = get_search_window()

    last = len(source) - len(expected)
    start = max(lower_bound, preferred_pos - window)
    end = min(last, preferred_pos + window)
    for pos in range(start, end + 1):
        if matches_at(source, pos, expected):
            return pos

    for pos in range(lower_bound, last + 1):
        if matches_at(source, pos, expected):
            logger.debug(f"Hunk found at line {pos + 1} outside the {window} line window around {preferred_pos + 1}")
            return pos

    return None


def apply_hunk_at(source: List[str], hunk: Hunk, position: int) -> Optional[Tuple[List[str], int]]:
    """
    Apply a single hunk to the source at a given position.

    Nothing is modified in place: the post-image is built in a new list and
    only returned if every context and deleted line matched.

    Args:
        source: The source lines
        hunk: The hunk to apply
        position: 0-based position of the hunk's first source line

    Returns:
        A tuple of (post-image lines, position after the consumed source
        lines), or None on the first mismatch
    """
    cursor = position
    output: List[str] = []

    for line in hunk.lines:
        if line.kind == KIND_CONTEXT:
            if cursor >= len(source) or source[cursor] != line.text:
                logger.debug(f"Context mismatch at line {cursor + 1}: expected {line.text!r}")
                return None
            output.append(source[cursor])
            cursor += 1
        elif line.kind == KIND_DEL:
            if cursor >= len(source) or source[cursor] != line.text:
                logger.debug(f"Deletion mismatch at line {cursor + 1}: expected {line.text!r}")
                return None
            cursor += 1
        else:
            output.append(line.text)

    return output, cursor
