"""
Validation utilities for hunks and patch baselines.
"""

import hashlib
from typing import Optional, Union

from patchmate.logging_utils import logger
from patchmate.parsing.models import FileEdit, Hunk

BASELINE_OLD = 'old'
BASELINE_NEW = 'new'
BASELINE_NEITHER = 'neither'
BASELINE_UNKNOWN = 'unknown'


def hunk_count_mismatch(hunk: Hunk) -> Optional[str]:
    """
    Compare the counts declared in a hunk header with its body.

    Args:
        hunk: The hunk to check

    Returns:
        A description of the mismatch, or None if the counts agree
    """
    old_count, new_count = hunk.counts()
    problems = []
    if old_count != hunk.old_lines:
        problems.append(f"header declares {hunk.old_lines} old lines, body has {old_count}")
    if new_count != hunk.new_lines:
        problems.append(f"header declares {hunk.new_lines} new lines, body has {new_count}")
    return '; '.join(problems) or None


def is_null_object_id(object_id: Optional[str]) -> bool:
    """True for the all-zero id git uses for the missing side of an add or delete."""
    return bool(object_id) and set(object_id) == {'0'}


def git_blob_id(content: Union[bytes, str]) -> str:
    """
    Compute the object id git assigns to a blob with this content.

    Same value ``git hash-object`` prints, without running git.
    """
    if isinstance(content, str):
        content = content.encode('utf-8')
    header = f"blob {len(content)}\0".encode('ascii')
    return hashlib.sha1(header + content).hexdigest()


def classify_baseline(edit: FileEdit, content: Union[bytes, str]) -> str:
    """
    Tell whether some file content is the pre-image or post-image of an edit.

    The patch ``index`` line carries abbreviated ids, so the full blob id is
    compared by prefix.

    Returns:
        'old' if the content is the pre-image (the patch should apply),
        'new' if it is the post-image (the patch looks already applied),
        'neither' if it matches no side, 'unknown' if the patch has no ids
    """
    if not edit.old_object_id or not edit.new_object_id:
        return BASELINE_UNKNOWN

    blob_id = git_blob_id(content)
    if blob_id.startswith(edit.old_object_id.lower()):
        result = BASELINE_OLD
    elif blob_id.startswith(edit.new_object_id.lower()):
        result = BASELINE_NEW
    else:
        result = BASELINE_NEITHER

    logger.debug(f"Baseline for {edit.new_path}: {blob_id[:12]} matches {result}")
    return result
