"""
Application utilities for patchmate.

This module provides functionality for applying parsed diffs to text.
"""

from .patch_apply import apply_unified_diff_to_text
from .hunk_applier import find_hunk_position, apply_hunk_at
from .multi_file import apply_patch_to_texts, PatchApplyReport, FileApplyOutcome
from .strip_level import guess_preferred_strip_level, get_strip_candidates, strip_path
