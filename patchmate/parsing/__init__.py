"""
Parsing utilities for patchmate.

This module provides functionality for parsing git patches into file edits and hunks.
"""

from .models import (
    FileEdit, DiffLine, Hunk, UnifiedDiffFile, ApplyResult, PatchEntry,
    STATUS_MODIFIED, STATUS_ADDED, STATUS_DELETED, STATUS_RENAMED,
    KIND_CONTEXT, KIND_ADD, KIND_DEL,
)
from .header_parser import parse_file_edits
from .diff_parser import parse_unified_diff_files, parse_hunk_header, parse_patch
