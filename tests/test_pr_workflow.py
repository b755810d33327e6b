"""Tests for pull request workflows.

Tests cover:
- PR URL validation before any provider call
- Combined diff layout (placeholders, manifest, per-file diffs)
- Empty and failing PR diffs
- PR creation
"""

import unittest
from unittest.mock import MagicMock

from prdiff.domain.file_change import FileChange
from prdiff.domain.pull_request import PullRequestRef, RepositoryRef
from prdiff.domain.validation import ErrorKind
from prdiff.infrastructure.diff_provider.base import DiffProvider, ProviderError
from prdiff.services.pr_workflow import create_pr, get_pr_diff

PR_URL = "https://github.com/acme/widgets/pull/42"


class TestGetPrDiff(unittest.TestCase):
    """Tests for get_pr_diff with a mocked provider."""

    def setUp(self):
        self.mock_provider = MagicMock(spec=DiffProvider)

    def test_invalid_url(self):
        result = get_pr_diff(self.mock_provider, "https://github.com/acme/widgets")

        self.assertFalse(result.is_valid)
        self.assertEqual(result.error_kind, ErrorKind.INVALID_URL)
        self.assertEqual(result.error_message, "Invalid GitHub PR URL")
        self.mock_provider.list_changed_files.assert_not_called()

    def test_combined_diff_scenario(self):
        """Large files become placeholders, ignored files vanish, normal files get diffs."""
        normal = FileChange.from_counts("src/a.py", 1, 1)
        self.mock_provider.list_changed_files.return_value = [
            normal,
            FileChange.from_counts("big.json", 5000, 0),
            FileChange.from_counts("yarn.lock", 3, 0),
        ]
        self.mock_provider.get_file_patches.return_value = {
            "src/a.py": "@@ -1 +1 @@\n-x\n+y",
        }

        result = get_pr_diff(self.mock_provider, PR_URL, ignore_patterns=["*.lock"])

        self.assertTrue(result.is_valid)
        self.assertEqual(
            result.data,
            "Large files (changes > 1000) that were skipped:\n"
            "diff --git a/big.json b/big.json\n"
            "@@ File too large to display (5000 changes) @@\n\n"
            "CHANGE_FILES= src/a.py\n"
            "diff --git a/src/a.py b/src/a.py\n"
            "@@ -1 +1 @@\n-x\n+y\n",
        )
        self.mock_provider.get_file_patches.assert_called_once_with(
            PullRequestRef.from_url(PR_URL), [normal]
        )

    def test_only_large_files(self):
        self.mock_provider.list_changed_files.return_value = [
            FileChange.from_counts("big.json", 5000, 0),
        ]
        self.mock_provider.get_file_patches.return_value = {}

        result = get_pr_diff(self.mock_provider, PR_URL)

        self.assertTrue(result.is_valid)
        self.assertIn("big.json", result.data)

    def test_no_files_is_empty_diff(self):
        self.mock_provider.list_changed_files.return_value = []

        result = get_pr_diff(self.mock_provider, PR_URL)

        self.assertEqual(result.error_kind, ErrorKind.EMPTY_DIFF)
        self.assertEqual(result.error_message, "No differences found in PR or invalid PR URL")
        self.mock_provider.get_file_patches.assert_not_called()

    def test_all_files_ignored_is_empty_diff(self):
        self.mock_provider.list_changed_files.return_value = [
            FileChange.from_counts("yarn.lock", 3, 0),
        ]

        result = get_pr_diff(self.mock_provider, PR_URL, ignore_patterns=["*.lock"])

        self.assertEqual(result.error_kind, ErrorKind.EMPTY_DIFF)

    def test_custom_threshold(self):
        self.mock_provider.list_changed_files.return_value = [
            FileChange.from_counts("a.py", 60, 0),
        ]
        self.mock_provider.get_file_patches.return_value = {}

        result = get_pr_diff(self.mock_provider, PR_URL, threshold=50)

        self.assertIn("Large files (changes > 50) that were skipped:", result.data)

    def test_provider_failure(self):
        self.mock_provider.list_changed_files.side_effect = ProviderError("HTTP 502")

        result = get_pr_diff(self.mock_provider, PR_URL)

        self.assertEqual(result.error_kind, ErrorKind.TRANSPORT_FAILURE)
        self.assertEqual(result.error_message, "Error occurred while getting PR diff: HTTP 502")


class TestCreatePr(unittest.TestCase):
    """Tests for create_pr."""

    def setUp(self):
        self.mock_provider = MagicMock(spec=DiffProvider)

    def test_creates_pr(self):
        self.mock_provider.create_pull_request.return_value = (
            "https://github.com/acme/widgets/pull/43"
        )

        result = create_pr(
            self.mock_provider,
            "https://github.com/acme/widgets",
            "Add login",
            "Body",
            "main",
            "feature/login",
            draft=True,
        )

        self.assertTrue(result.is_valid)
        self.assertEqual(
            result.data, "Successfully created PR: https://github.com/acme/widgets/pull/43"
        )
        self.mock_provider.create_pull_request.assert_called_once_with(
            RepositoryRef("acme", "widgets"),
            "Add login",
            "Body",
            "main",
            "feature/login",
            draft=True,
        )

    def test_invalid_repo_url(self):
        result = create_pr(self.mock_provider, "not a url", "T", "B", "main", "feature")

        self.assertEqual(result.error_kind, ErrorKind.INVALID_URL)
        self.mock_provider.create_pull_request.assert_not_called()

    def test_provider_failure(self):
        self.mock_provider.create_pull_request.side_effect = ProviderError("already exists")

        result = create_pr(
            self.mock_provider, "https://github.com/acme/widgets", "T", "B", "main", "feature"
        )

        self.assertEqual(result.error_kind, ErrorKind.TRANSPORT_FAILURE)
        self.assertIn("already exists", result.error_message)


if __name__ == "__main__":
    unittest.main()
