"""
Core utilities shared by parsing and application.
"""

from .exceptions import PatchApplicationError, MissingBaselineError
from .text import SplitText, split_lines, split_text, join_text, detect_line_ending
