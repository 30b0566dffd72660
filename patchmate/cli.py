"""
Command line front end for patchmate.

Reads a patch and the files it names, applies it in memory and reports the
outcome per file. Nothing is written unless --write is given.
"""

import argparse
import os
import sys
from typing import Dict, List

from patchmate import __version__
from patchmate.logging_utils import logger, set_log_level
from patchmate.core.exceptions import PatchApplicationError
from patchmate.parsing.diff_parser import parse_patch
from patchmate.parsing.header_parser import parse_file_edits
from patchmate.parsing.models import FileEdit, STATUS_ADDED, STATUS_DELETED
from patchmate.application.multi_file import apply_patch_to_texts
from patchmate.application.strip_level import guess_preferred_strip_level, strip_path
from patchmate.validation.validators import classify_baseline

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ERROR = 2


# ============================================================================
# File helpers
# ============================================================================

def read_patch(source: str) -> str:
    """Read patch text from a file, or from stdin when source is '-'."""
    if source == '-':
        return sys.stdin.read()
    with open(source, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def working_path(root: str, patch_path: str, prefix: str, strip: int) -> str:
    """Map a parsed patch path to a file under root, git apply -p style."""
    return os.path.join(root, strip_path(f"{prefix}/{patch_path}", strip))


def read_text(path: str) -> str:
    # newline='' keeps CRLF so the applier can preserve it
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return f.read()


def write_text(path: str, text: str):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(text)


def load_baselines(edits: List[FileEdit], root: str, strip: int) -> Dict[str, str]:
    baselines = {}
    for edit in edits:
        if edit.status in (STATUS_ADDED, STATUS_DELETED):
            continue
        path = working_path(root, edit.old_path, 'a', strip)
        if not os.path.isfile(path):
            raise PatchApplicationError(f"File not found: {path}", {"path": edit.old_path})
        baselines[edit.old_path] = read_text(path)
    return baselines


def _resolve_strip(args, patch_text: str) -> int:
    if args.strip is not None:
        return args.strip
    strip = guess_preferred_strip_level(patch_text)
    logger.debug(f"Using guessed strip level {strip}")
    return strip


# ============================================================================
# Commands
# ============================================================================

def cmd_files(args) -> int:
    """List the files a patch touches."""
    patch_text = read_patch(args.patch)
    for entry in parse_patch(patch_text):
        edit = entry.edit
        path = edit.new_path if edit.old_path == edit.new_path else f"{edit.old_path} -> {edit.new_path}"
        ids = f" [{edit.old_object_id}..{edit.new_object_id}]" if edit.is_content_change else ""
        hunks = len(entry.hunks)
        print(f"{edit.status:<9} {path}{ids} ({hunks} hunk{'s' if hunks != 1 else ''})")
    return EXIT_OK


def cmd_check(args) -> int:
    """Compare working files against the blob ids recorded in the patch."""
    patch_text = read_patch(args.patch)
    strip = _resolve_strip(args, patch_text)
    for edit in parse_file_edits(patch_text):
        if edit.status in (STATUS_ADDED, STATUS_DELETED):
            print(f"{edit.status:<9} {edit.new_path}")
            continue
        path = working_path(args.root, edit.old_path, 'a', strip)
        if not os.path.isfile(path):
            print(f"{'missing':<9} {edit.old_path}")
            continue
        with open(path, 'rb') as f:
            matches = classify_baseline(edit, f.read())
        print(f"{matches:<9} {edit.old_path}")
    return EXIT_OK


def cmd_apply(args) -> int:
    """Apply a patch to the files under --root."""
    patch_text = read_patch(args.patch)
    strip = _resolve_strip(args, patch_text)
    baselines = load_baselines(parse_file_edits(patch_text), args.root, strip)

    report = apply_patch_to_texts(patch_text, baselines, strict_counts=args.strict_counts or None)

    for outcome in report.files:
        print(f"{outcome.status:<9} {outcome.path}: "
              f"{outcome.applied_hunks} applied, {outcome.rejected_hunks} rejected")

        if not args.write:
            continue
        if outcome.status == STATUS_DELETED:
            print(f"          not deleting {outcome.path}")
            continue
        write_text(working_path(args.root, outcome.path, 'b', strip), outcome.text)
        if outcome.old_path is not None and outcome.old_path != outcome.path:
            print(f"          not removing {outcome.old_path}")

    print(f"total: {report.applied_hunks} applied, {report.rejected_hunks} rejected")
    return EXIT_OK if report.is_clean else EXIT_REJECTED


# ============================================================================
# Argument parsing
# ============================================================================

def create_parser():
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog='patchmate',
        description='Apply git-style unified diffs with fuzzy hunk placement',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  patchmate files change.patch             List touched files
  patchmate check change.patch --root .    Compare files with the patch blob ids
  patchmate apply change.patch --root .    Dry run, print per-file results
  git diff | patchmate apply - --write     Apply piped diff in place
"""
    )

    # Global options
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # files
    files_parser = subparsers.add_parser('files', help='List files touched by a patch')
    files_parser.add_argument('patch', help="Patch file, or '-' for stdin")
    files_parser.set_defaults(func=cmd_files)

    # check
    check_parser = subparsers.add_parser('check', help='Match working files against patch blob ids')
    check_parser.add_argument('patch', help="Patch file, or '-' for stdin")
    check_parser.add_argument('--root', default='.', help='Root directory (default: cwd)')
    check_parser.add_argument('--strip', '-p', type=int, help='Leading path segments to strip')
    check_parser.set_defaults(func=cmd_check)

    # apply
    apply_parser = subparsers.add_parser('apply', help='Apply a patch')
    apply_parser.add_argument('patch', help="Patch file, or '-' for stdin")
    apply_parser.add_argument('--root', default='.', help='Root directory (default: cwd)')
    apply_parser.add_argument('--strip', '-p', type=int, help='Leading path segments to strip')
    apply_parser.add_argument('--strict-counts', action='store_true',
                              help='Reject hunks whose body disagrees with their header counts')
    apply_parser.add_argument('--write', '-w', action='store_true', help='Write patched files')
    apply_parser.set_defaults(func=cmd_apply)

    return parser


def main(argv=None) -> int:
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level('DEBUG')

    if args.command is None:
        # No command - show help
        parser.print_help()
        return EXIT_OK

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print()
        return EXIT_ERROR
    except (PatchApplicationError, OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == '__main__':
    sys.exit(main())
