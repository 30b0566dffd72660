"""
Utilities for parsing unified diff hunks out of multi-file git patches.
"""

import re
from typing import List, Optional, Tuple

from patchmate.logging_utils import logger
from patchmate.core.text import split_lines
from .header_parser import DIFF_GIT_PREFIX, parse_diff_git_header, parse_file_edits
from .models import (
    DiffLine, Hunk, PatchEntry, UnifiedDiffFile,
    KIND_ADD, KIND_CONTEXT, KIND_DEL,
)

# @@ -l,s +l,s @@ optional section heading
HUNK_HEADER_RE = re.compile(r'^@@\s+-(\d+)(?:,(\d+))?\s+\+(\d+)(?:,(\d+))?\s+@@')
NO_NEWLINE_MARKER = '\\ No newline at end of file'

_KINDS = {' ': KIND_CONTEXT, '+': KIND_ADD, '-': KIND_DEL}


def parse_hunk_header(line: str) -> Optional[Tuple[int, int, int, int]]:
    """
    Parse a hunk header line.

    Args:
        line: A line starting with ``@@``

    Returns:
        (old_start, old_lines, new_start, new_lines), with a missing count
        defaulting to 1, or None if the header is malformed
    """
    match = HUNK_HEADER_RE.match(line)
    if not match:
        return None
    old_start = int(match.group(1))
    old_lines = int(match.group(2)) if match.group(2) else 1
    new_start = int(match.group(3))
    new_lines = int(match.group(4)) if match.group(4) else 1
    return old_start, old_lines, new_start, new_lines


def parse_unified_diff_files(patch_text: str) -> List[UnifiedDiffFile]:
    """
    Parse the hunks of every file in a git patch.

    Unrecognized lines are skipped rather than treated as errors. Lines
    before the first hunk of a file (``---``/``+++`` markers, ``index`` lines)
    are header metadata and are ignored here.

    Args:
        patch_text: The patch content (LF or CRLF line endings)

    Returns:
        One UnifiedDiffFile per recognizable ``diff --git`` block, in order
    """
    files: List[UnifiedDiffFile] = []
    current: Optional[UnifiedDiffFile] = None
    current_hunk: Optional[Hunk] = None

    def push_hunk():
        nonlocal current_hunk
        if current is not None and current_hunk is not None:
            current.hunks.append(current_hunk)
        current_hunk = None

    def push_file():
        nonlocal current
        push_hunk()
        if current is not None:
            files.append(current)
        current = None

    for line in split_lines(patch_text):
        if line.startswith(DIFF_GIT_PREFIX):
            push_file()
            paths = parse_diff_git_header(line)
            if paths is not None:
                current = UnifiedDiffFile(old_path=paths[0], new_path=paths[1])
            continue

        if current is None:
            continue

        if line.startswith('@@'):
            push_hunk()
            header = parse_hunk_header(line)
            if header is None:
                logger.debug(f"Skipping malformed hunk header in {current.new_path}: {line!r}")
                continue
            current_hunk = Hunk(*header, lines=[], header=line)
            continue

        # Not in a hunk yet
        if current_hunk is None:
            continue

        if line.startswith(NO_NEWLINE_MARKER):
            continue

        kind = _KINDS.get(line[:1])
        if kind is not None:
            current_hunk.lines.append(DiffLine(kind, line[1:]))

    push_file()

    logger.debug(f"Parsed {sum(len(f.hunks) for f in files)} hunks across {len(files)} files")
    return files


def parse_patch(patch_text: str) -> List[PatchEntry]:
    """
    Parse headers and hunks together, one entry per ``diff --git`` block.

    Both passes recognize exactly the same header lines, so their results
    line up by position.
    """
    edits = parse_file_edits(patch_text)
    diffs = parse_unified_diff_files(patch_text)
    return [
        PatchEntry(edit=edit, diff=diffs[i] if i < len(diffs) else None)
        for i, edit in enumerate(edits)
    ]
