"""
Pytest configuration and shared fixtures.
"""

import difflib
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def make_git_diff(old: str, new: str, path: str = 'file.txt', context: int = 3) -> str:
    """Build a git-style patch for one file with difflib."""
    body = difflib.unified_diff(
        old.splitlines(), new.splitlines(),
        f'a/{path}', f'b/{path}', n=context, lineterm='',
    )
    return '\n'.join([f'diff --git a/{path} b/{path}', *body]) + '\n'


@pytest.fixture
def git_diff():
    """Factory fixture producing single-file patches from two texts."""
    return make_git_diff


@pytest.fixture
def six_lines():
    return "one\ntwo\nthree\nfour\nfive\nsix\n"


@pytest.fixture
def multi_file_patch():
    return '\n'.join([
        'diff --git a/src/app.py b/src/app.py',
        'index 481b05b2d065..444f412501c4 100644',
        '--- a/src/app.py',
        '+++ b/src/app.py',
        '@@ -1,3 +1,3 @@',
        ' import os',
        '-DEBUG = False',
        '+DEBUG = True',
        ' ',
        'diff --git a/docs/new guide.md b/docs/new guide.md',
        'new file mode 100644',
        'index 000000000000..0fc198303625',
        '--- /dev/null',
        '+++ b/docs/new guide.md',
        '@@ -0,0 +1,2 @@',
        '+# Guide',
        '+Read me.',
        'diff --git a/old/name.txt b/new/name.txt',
        'similarity index 100%',
        'rename from old/name.txt',
        'rename to new/name.txt',
        'diff --git a/obsolete.txt b/obsolete.txt',
        'deleted file mode 100644',
        'index 0123456789ab..000000000000',
        '--- a/obsolete.txt',
        '+++ /dev/null',
        '@@ -1 +0,0 @@',
        '-gone',
        '',
    ])
