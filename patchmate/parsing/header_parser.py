"""
Per-file metadata from git patch headers.

Only the header lines of each ``diff --git`` block are looked at; hunk bodies
are left to the unified diff parser.
"""

import re
from dataclasses import replace
from typing import List, Optional

from patchmate.logging_utils import logger
from patchmate.core.text import split_lines
from .models import FileEdit, STATUS_ADDED, STATUS_DELETED, STATUS_MODIFIED, STATUS_RENAMED

DIFF_GIT_PREFIX = 'diff --git '
# The old path ends at the first " b/", so paths may contain spaces
DIFF_GIT_RE = re.compile(r'^diff --git a/(.+?) b/(.+)$')
# index 83db48f..f735c2a 100644
INDEX_RE = re.compile(r'^index\s+([0-9a-fA-F]+)\.\.([0-9a-fA-F]+)(?:\s|$)')

NEW_FILE_PREFIX = 'new file mode '
DELETED_FILE_PREFIX = 'deleted file mode '
RENAME_FROM_PREFIX = 'rename from '
RENAME_TO_PREFIX = 'rename to '


def parse_diff_git_header(line: str) -> Optional[tuple]:
    """
    Split a ``diff --git a/<old> b/<new>`` line into its two paths.

    Returns:
        (old_path, new_path), or None if the line does not follow the a/ b/ convention
    """
    match = DIFF_GIT_RE.match(line)
    if not match:
        return None
    return match.group(1), match.group(2)


def parse_file_edits(patch_text: str) -> List[FileEdit]:
    """
    List the files a patch touches and how, in header order.

    Args:
        patch_text: The patch content (LF or CRLF line endings)

    Returns:
        One FileEdit per recognizable ``diff --git`` block
    """
    edits: List[FileEdit] = []
    current: Optional[FileEdit] = None

    for line in split_lines(patch_text):
        if line.startswith(DIFF_GIT_PREFIX):
            if current is not None:
                edits.append(current)
                current = None
            paths = parse_diff_git_header(line)
            if paths is None:
                logger.debug(f"Skipping unrecognized diff header: {line!r}")
                continue
            current = FileEdit(old_path=paths[0], new_path=paths[1], status=STATUS_MODIFIED)
            continue

        # Not inside a file block yet
        if current is None:
            continue

        if line.startswith(NEW_FILE_PREFIX):
            current = replace(current, status=STATUS_ADDED)
        elif line.startswith(DELETED_FILE_PREFIX):
            current = replace(current, status=STATUS_DELETED)
        elif line.startswith('index '):
            match = INDEX_RE.match(line)
            if match:
                current = replace(current, old_object_id=match.group(1), new_object_id=match.group(2))
        elif line.startswith(RENAME_FROM_PREFIX):
            current = replace(current, status=STATUS_RENAMED,
                              old_path=line[len(RENAME_FROM_PREFIX):].strip())
        elif line.startswith(RENAME_TO_PREFIX):
            current = replace(current, status=STATUS_RENAMED,
                              new_path=line[len(RENAME_TO_PREFIX):].strip())

    if current is not None:
        edits.append(current)

    logger.debug(f"Parsed {len(edits)} file edits from patch headers")
    return edits
