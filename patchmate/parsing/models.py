"""
Records produced by the patch parsers and consumed by the applier.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# FileEdit.status values
STATUS_MODIFIED = 'modified'
STATUS_ADDED = 'added'
STATUS_DELETED = 'deleted'
STATUS_RENAMED = 'renamed'

# DiffLine.kind values
KIND_CONTEXT = 'context'
KIND_ADD = 'add'
KIND_DEL = 'del'

_PREFIXES = {KIND_CONTEXT: ' ', KIND_ADD: '+', KIND_DEL: '-'}


@dataclass(frozen=True)
class FileEdit:
    """One file touched by a patch, as described by its git header block."""
    old_path: str
    new_path: str
    status: str = STATUS_MODIFIED
    old_object_id: Optional[str] = None
    new_object_id: Optional[str] = None

    @property
    def is_content_change(self) -> bool:
        return self.old_object_id is not None and self.new_object_id is not None


@dataclass(frozen=True)
class DiffLine:
    kind: str  # context, add, del
    text: str  # without the leading prefix char

    def render(self) -> str:
        return _PREFIXES[self.kind] + self.text


@dataclass
class Hunk:
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: List[DiffLine] = field(default_factory=list)
    header: str = ''

    def expected_source(self) -> List[str]:
        """Lines that must be present in the pre-image, in order."""
        return [line.text for line in self.lines if line.kind != KIND_ADD]

    def result_lines(self) -> List[str]:
        """Lines the hunk leaves behind in the post-image, in order."""
        return [line.text for line in self.lines if line.kind != KIND_DEL]

    def counts(self) -> Tuple[int, int]:
        """(old, new) line counts actually present in the body."""
        return len(self.expected_source()), len(self.result_lines())

    def describe(self) -> str:
        return self.header or f"@@ -{self.old_start},{self.old_lines} +{self.new_start},{self.new_lines} @@"


@dataclass
class UnifiedDiffFile:
    old_path: str
    new_path: str
    hunks: List[Hunk] = field(default_factory=list)

    def summary(self) -> Tuple[int, int, int]:
        """
        Return (additions, deletions, hunk_count) for this file.
        """
        adds = dels = 0
        for hunk in self.hunks:
            for line in hunk.lines:
                if line.kind == KIND_ADD:
                    adds += 1
                elif line.kind == KIND_DEL:
                    dels += 1
        return adds, dels, len(self.hunks)


@dataclass(frozen=True)
class ApplyResult:
    text: str
    applied_hunks: int
    rejected_hunks: int

    @property
    def total_hunks(self) -> int:
        return self.applied_hunks + self.rejected_hunks


@dataclass(frozen=True)
class PatchEntry:
    """A FileEdit paired with the hunks parsed from the same header block."""
    edit: FileEdit
    diff: Optional[UnifiedDiffFile]

    @property
    def hunks(self) -> List[Hunk]:
        return self.diff.hunks if self.diff is not None else []
