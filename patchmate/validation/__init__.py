"""
Validation utilities for patchmate.

This module provides checks on hunk headers and on the baselines a patch is applied to.
"""

from .validators import (
    hunk_count_mismatch, is_null_object_id, git_blob_id, classify_baseline,
    BASELINE_OLD, BASELINE_NEW, BASELINE_NEITHER, BASELINE_UNKNOWN,
)
