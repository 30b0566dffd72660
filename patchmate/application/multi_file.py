"""
Apply every file of a multi-file patch to in-memory baselines.

Callers supply the "before" text of each touched file keyed by its
repository-relative path and receive the "after" text per file. Each file is
patched independently of the others.
"""

from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from patchmate.logging_utils import logger
from patchmate.core.exceptions import MissingBaselineError
from patchmate.parsing.diff_parser import parse_patch
from patchmate.parsing.models import STATUS_ADDED, STATUS_DELETED
from .patch_apply import apply_unified_diff_to_text


@dataclass(frozen=True)
class FileApplyOutcome:
    path: str
    status: str
    text: str
    applied_hunks: int = 0
    rejected_hunks: int = 0
    old_path: Optional[str] = None


@dataclass
class PatchApplyReport:
    files: List[FileApplyOutcome] = field(default_factory=list)

    @property
    def applied_hunks(self) -> int:
        return sum(f.applied_hunks for f in self.files)

    @property
    def rejected_hunks(self) -> int:
        return sum(f.rejected_hunks for f in self.files)

    @property
    def applied_any(self) -> bool:
        return self.applied_hunks > 0

    @property
    def is_clean(self) -> bool:
        """True when no hunk in any file was rejected."""
        return self.rejected_hunks == 0

    def get(self, path: str) -> Optional[FileApplyOutcome]:
        for outcome in self.files:
            if outcome.path == path:
                return outcome
        return None


def apply_patch_to_texts(
    patch_text: str,
    baselines: Mapping[str, str],
    strict_counts: Optional[bool] = None,
) -> PatchApplyReport:
    """
    Apply a multi-file patch to baseline texts.

    Args:
        patch_text: The patch content
        baselines: Original text per old path; entries for added files are ignored
        strict_counts: Passed through to apply_unified_diff_to_text

    Returns:
        A report with one outcome per file block, in patch order. Deleted
        files come back as empty text; files with no hunks (pure renames,
        mode changes) come back unchanged under their new path.

    Raises:
        MissingBaselineError: If a file that needs a baseline has none
    """
    report = PatchApplyReport()

    for entry in parse_patch(patch_text):
        edit = entry.edit

        if edit.status == STATUS_DELETED:
            report.files.append(FileApplyOutcome(path=edit.old_path, status=edit.status, text=''))
            continue

        if edit.status == STATUS_ADDED:
            # New files always start empty, whatever the caller passed
            baseline = ''
        elif edit.old_path in baselines:
            baseline = baselines[edit.old_path]
        else:
            raise MissingBaselineError(edit.old_path)

        if not entry.hunks:
            report.files.append(FileApplyOutcome(
                path=edit.new_path, status=edit.status, text=baseline, old_path=edit.old_path))
            continue

        result = apply_unified_diff_to_text(baseline, entry.diff, strict_counts=strict_counts)
        if result.rejected_hunks:
            logger.warning(f"{edit.new_path}: {result.rejected_hunks} of {result.total_hunks} hunks rejected")

        report.files.append(FileApplyOutcome(
            path=edit.new_path,
            status=edit.status,
            text=result.text,
            applied_hunks=result.applied_hunks,
            rejected_hunks=result.rejected_hunks,
            old_path=edit.old_path,
        ))

    logger.info(f"Applied {report.applied_hunks} hunks, rejected {report.rejected_hunks}, across {len(report.files)} files")
    return report
