"""
patchmate - a unified diff engine.

Parses multi-file git patches and applies their hunks to text with fuzzy
positional matching and all-or-nothing hunk semantics.
"""

__version__ = "0.1.0"

# Core utilities
from .core import PatchApplicationError, MissingBaselineError

# Parsing utilities
from .parsing import parse_file_edits, parse_unified_diff_files, parse_hunk_header, parse_patch
from .parsing import FileEdit, DiffLine, Hunk, UnifiedDiffFile, ApplyResult, PatchEntry

# Application utilities
from .application import apply_unified_diff_to_text, apply_patch_to_texts, PatchApplyReport
from .application import guess_preferred_strip_level, get_strip_candidates, strip_path

# Validation utilities
from .validation import classify_baseline, git_blob_id, hunk_count_mismatch
