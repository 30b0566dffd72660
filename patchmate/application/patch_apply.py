"""
Apply the hunks of one file's unified diff to a text buffer.

Patches are often applied to text that has drifted from the exact revision
they were made against, so each hunk is located by searching for its
context rather than trusting the declared line number. Each hunk is atomic:
it is either applied in full or leaves the output and the source cursor
exactly as they were.
"""

from typing import List, Optional

from patchmate.logging_utils import logger
from patchmate.core.config import is_strict_counts_enabled
from patchmate.core.text import split_text, join_text
from patchmate.parsing.models import ApplyResult, UnifiedDiffFile
from patchmate.validation.validators import hunk_count_mismatch
from .hunk_applier import find_hunk_position, apply_hunk_at


def apply_unified_diff_to_text(
    original_text: str,
    diff_file: UnifiedDiffFile,
    strict_counts: Optional[bool] = None,
) -> ApplyResult:
    """
    Apply a file's hunks to its baseline text.

    Args:
        original_text: The baseline content of the file
        diff_file: The parsed hunks for that file
        strict_counts: Reject hunks whose body disagrees with the counts in
            their header; defaults to the PATCHMATE_STRICT_COUNTS setting

    Returns:
        The patched text with the number of applied and rejected hunks
    """
    if strict_counts is None:
        strict_counts = is_strict_counts_enabled()

    original = split_text(original_text)
    source = original.lines

    src_pos = 0
    out: List[str] = []
    applied = 0
    rejected = 0

    for number, hunk in enumerate(diff_file.hunks, 1):
        if strict_counts:
            mismatch = hunk_count_mismatch(hunk)
            if mismatch:
                logger.warning(f"Rejecting hunk #{number} {hunk.describe()} in {diff_file.new_path}: {mismatch}")
                rejected += 1
                continue

        expected = hunk.expected_source()
        preferred_pos = max(0, hunk.old_start - 1)
        found_pos = find_hunk_position(source, expected, preferred_pos, src_pos)

        if found_pos is None:
            logger.warning(f"Rejecting hunk #{number} {hunk.describe()} in {diff_file.new_path}: context not found")
            rejected += 1
            continue

        applied_hunk = apply_hunk_at(source, hunk, found_pos)
        if applied_hunk is None:
            logger.warning(f"Rejecting hunk #{number} {hunk.describe()} in {diff_file.new_path}: mismatch at line {found_pos + 1}")
            rejected += 1
            continue

        # Commit the untouched gap and the hunk together
        hunk_output, end_pos = applied_hunk
        out.extend(source[src_pos:found_pos])
        out.extend(hunk_output)
        src_pos = end_pos
        applied += 1

        offset = found_pos - preferred_pos
        if offset:
            logger.debug(f"Applied hunk #{number} {hunk.describe()} with offset {offset:+d}")
        else:
            logger.debug(f"Applied hunk #{number} {hunk.describe()}")

    out.extend(source[src_pos:])

    text = join_text(out, original.eol, original.ends_with_newline)
    return ApplyResult(text=text, applied_hunks=applied, rejected_hunks=rejected)
