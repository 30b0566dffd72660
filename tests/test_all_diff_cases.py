import unittest
import os
import json

from patchmate.application.patch_apply import apply_unified_diff_to_text
from patchmate.parsing.diff_parser import parse_unified_diff_files


class TestAllDiffCases(unittest.TestCase):
    """Test all diff test cases individually"""

    # Directory containing test cases
    TEST_CASES_DIR = os.path.join(os.path.dirname(__file__), 'diff_test_cases')

    def setUp(self):
        self.maxDiff = None  # Show full diffs

    def read_case_file(self, case_dir, name):
        # newline='' keeps CRLF and a missing final newline intact
        with open(os.path.join(case_dir, name), encoding='utf-8', newline='') as f:
            return f.read()

    def run_diff_test(self, case_name):
        """Run a single diff test case"""
        case_dir = os.path.join(self.TEST_CASES_DIR, case_name)

        if not os.path.isdir(case_dir):
            self.skipTest(f"{case_name} is not a directory")

        metadata_path = os.path.join(case_dir, 'metadata.json')
        if not os.path.exists(metadata_path):
            self.skipTest(f"{case_name} is missing metadata.json")

        with open(metadata_path) as f:
            metadata = json.load(f)

        for name in ('original.py', 'changes.diff', 'expected.py'):
            if not os.path.exists(os.path.join(case_dir, name)):
                self.skipTest(f"{case_name} is missing {name}")

        original = self.read_case_file(case_dir, 'original.py')
        diff = self.read_case_file(case_dir, 'changes.diff')
        expected = self.read_case_file(case_dir, 'expected.py')

        files = parse_unified_diff_files(diff)
        self.assertEqual(len(files), 1, f"{case_name} should describe exactly one file")
        self.assertEqual(files[0].new_path, metadata['target_file'])

        result = apply_unified_diff_to_text(original, files[0])

        self.assertEqual(result.text, expected,
                         f"Diff application for {case_name} did not produce expected result")
        self.assertEqual(result.applied_hunks, metadata.get('applied_hunks', len(files[0].hunks)))
        self.assertEqual(result.rejected_hunks, metadata.get('rejected_hunks', 0))

    def test_drifted_function_edit(self):
        self.run_diff_test('drifted_function_edit')

    def test_partial_rejection(self):
        self.run_diff_test('partial_rejection')

    def test_new_file_creation(self):
        self.run_diff_test('new_file_creation')


if __name__ == '__main__':
    unittest.main()
