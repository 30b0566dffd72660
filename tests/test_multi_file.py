"""
Tests for applying multi-file patches to in-memory baselines.
"""

import pytest

from patchmate.application.multi_file import apply_patch_to_texts
from patchmate.core.exceptions import MissingBaselineError, PatchApplicationError
from patchmate.parsing.models import STATUS_ADDED, STATUS_DELETED, STATUS_MODIFIED, STATUS_RENAMED


@pytest.fixture
def baselines():
    return {
        'src/app.py': 'import os\nDEBUG = False\n\nmain()\n',
        'old/name.txt': 'unchanged\r\n',
        'obsolete.txt': 'gone\n',
    }


def test_every_file_gets_an_outcome(multi_file_patch, baselines):
    report = apply_patch_to_texts(multi_file_patch, baselines)

    assert [(f.status, f.path) for f in report.files] == [
        (STATUS_MODIFIED, 'src/app.py'),
        (STATUS_ADDED, 'docs/new guide.md'),
        (STATUS_RENAMED, 'new/name.txt'),
        (STATUS_DELETED, 'obsolete.txt'),
    ]
    assert report.applied_hunks == 2
    assert report.rejected_hunks == 0
    assert report.is_clean
    assert report.applied_any


def test_file_texts(multi_file_patch, baselines):
    report = apply_patch_to_texts(multi_file_patch, baselines)

    assert report.get('src/app.py').text == 'import os\nDEBUG = True\n\nmain()\n'
    assert report.get('docs/new guide.md').text == '# Guide\nRead me.'
    assert report.get('new/name.txt').text == 'unchanged\r\n'
    assert report.get('new/name.txt').old_path == 'old/name.txt'
    assert report.get('obsolete.txt').text == ''
    assert report.get('missing.txt') is None


def test_rejections_are_reported_per_file(multi_file_patch, baselines):
    baselines['src/app.py'] = 'import sys\nDEBUG = False\n'

    report = apply_patch_to_texts(multi_file_patch, baselines)

    outcome = report.get('src/app.py')
    assert (outcome.applied_hunks, outcome.rejected_hunks) == (0, 1)
    assert outcome.text == 'import sys\nDEBUG = False\n'
    assert report.get('docs/new guide.md').applied_hunks == 1
    assert not report.is_clean


def test_missing_baseline_raises(multi_file_patch, baselines):
    del baselines['src/app.py']

    with pytest.raises(MissingBaselineError) as excinfo:
        apply_patch_to_texts(multi_file_patch, baselines)

    assert isinstance(excinfo.value, PatchApplicationError)
    assert excinfo.value.details == {'path': 'src/app.py'}


def test_files_are_independent():
    patch = '\n'.join([
        'diff --git a/a.txt b/a.txt',
        '@@ -1 +1 @@',
        '-same',
        '+A',
        'diff --git a/b.txt b/b.txt',
        '@@ -1 +1 @@',
        '-same',
        '+B',
    ])

    report = apply_patch_to_texts(patch, {'a.txt': 'same\n', 'b.txt': 'same\n'})

    assert report.get('a.txt').text == 'A\n'
    assert report.get('b.txt').text == 'B\n'


def test_empty_patch():
    report = apply_patch_to_texts('', {})
    assert report.files == []
    assert report.is_clean
    assert not report.applied_any


def test_added_file_ignores_supplied_baseline(multi_file_patch, baselines):
    baselines['docs/new guide.md'] = 'stale\n'

    report = apply_patch_to_texts(multi_file_patch, baselines)

    outcome = report.get('docs/new guide.md')
    assert outcome.text == '# Guide\nRead me.'
    assert (outcome.applied_hunks, outcome.rejected_hunks) == (1, 0)
