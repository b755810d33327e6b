"""Tests for CLI commands and the entry point dispatcher.

Tests cover:
- Exit codes and stdout/stderr output of each command
- JSON comment file loading
- Argument routing in main()
"""

import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from prdiff.__main__ import main
from prdiff.commands import (
    cmd_create_pr,
    cmd_line_comment,
    cmd_line_comments,
    cmd_local_diff,
    cmd_pr_diff,
    cmd_summary_comment,
)
from prdiff.domain.file_change import FileChange
from prdiff.domain.validation import ErrorKind, ValidationResult
from prdiff.infrastructure.diff_provider.base import DiffProvider, ProviderError
from prdiff.settings import Settings

PR_URL = "https://github.com/acme/widgets/pull/42"


class CommandTestCase(unittest.TestCase):
    """Captures stdout/stderr and provides a mocked provider."""

    def setUp(self):
        self.settings = Settings()
        self.mock_provider = MagicMock(spec=DiffProvider)
        self.mock_provider.get_head_sha.return_value = "abc123"

        stdout_patcher = patch("sys.stdout", new_callable=io.StringIO)
        stderr_patcher = patch("sys.stderr", new_callable=io.StringIO)
        self.stdout = stdout_patcher.start()
        self.stderr = stderr_patcher.start()
        self.addCleanup(stdout_patcher.stop)
        self.addCleanup(stderr_patcher.stop)


class TestPrDiffCommand(CommandTestCase):

    def test_prints_annotated_diff(self):
        self.mock_provider.list_changed_files.return_value = [FileChange.from_counts("a.py", 1, 1)]
        self.mock_provider.get_file_patches.return_value = {"a.py": "@@ -1 +1 @@\n-x\n+y"}

        exit_code = cmd_pr_diff(PR_URL, settings=self.settings, provider=self.mock_provider)

        self.assertEqual(exit_code, 0)
        self.assertIn("Line: 1 -x", self.stdout.getvalue())
        self.assertIn("Line: 1 +y", self.stdout.getvalue())

    def test_invalid_url(self):
        exit_code = cmd_pr_diff("nope", settings=self.settings, provider=self.mock_provider)

        self.assertEqual(exit_code, 1)
        self.assertIn("Error: Invalid GitHub PR URL", self.stderr.getvalue())

    def test_uses_settings_for_provider_selection(self):
        self.mock_provider.list_changed_files.return_value = []
        with patch(
            "prdiff.commands.pr_diff.get_diff_provider", return_value=self.mock_provider
        ) as mock_get:
            exit_code = cmd_pr_diff(PR_URL, settings=self.settings)

        self.assertEqual(exit_code, 1)
        mock_get.assert_called_once_with(self.settings)


class TestLocalDiffCommand(CommandTestCase):

    @patch("prdiff.commands.local_diff.LocalDiffEngine")
    def test_prints_diff(self, mock_engine_cls):
        mock_engine_cls.return_value.get_local_diff.return_value = ValidationResult.valid("DIFF")
        settings = Settings(ignore_patterns_raw="*.lock", large_file_threshold=50)

        exit_code = cmd_local_diff("/repo", "main", settings=settings)

        self.assertEqual(exit_code, 0)
        self.assertEqual(self.stdout.getvalue(), "DIFF\n")
        kwargs = mock_engine_cls.call_args.kwargs
        self.assertEqual(kwargs["ignore_patterns"], ["*.lock"])
        self.assertEqual(kwargs["threshold"], 50)
        mock_engine_cls.return_value.get_local_diff.assert_called_once_with("main")

    @patch("prdiff.commands.local_diff.LocalDiffEngine")
    def test_reports_error(self, mock_engine_cls):
        mock_engine_cls.return_value.get_local_diff.return_value = ValidationResult.invalid(
            "You are in detached HEAD state.", ErrorKind.DETACHED_HEAD
        )

        exit_code = cmd_local_diff("/repo", "main", settings=self.settings)

        self.assertEqual(exit_code, 1)
        self.assertIn("Error: You are in detached HEAD state.", self.stderr.getvalue())


class TestCommentCommands(CommandTestCase):

    def test_summary_comment(self):
        self.mock_provider.post_issue_comment.return_value = "https://github.com/c/1"

        exit_code = cmd_summary_comment(PR_URL, "Looks good", provider=self.mock_provider)

        self.assertEqual(exit_code, 0)
        self.assertIn("https://github.com/c/1", self.stdout.getvalue())

    def test_line_comment_failure(self):
        self.mock_provider.post_review_comment.side_effect = ProviderError("422")

        exit_code = cmd_line_comment(PR_URL, "a.py", 3, "Fix", provider=self.mock_provider)

        self.assertEqual(exit_code, 1)
        self.assertIn("Error:", self.stderr.getvalue())

    def _write_comments(self, data) -> str:
        temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(temp_dir.cleanup)
        path = Path(temp_dir.name) / "comments.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    def test_line_comments_partial_failure(self):
        comments_file = self._write_comments([
            {"filePath": "a.py", "line": 10, "commentMessage": "first"},
            {"filePath": "b.py", "line": 20, "commentMessage": "second"},
            {"filePath": "c.py", "line": 30, "commentMessage": "third"},
        ])
        self.mock_provider.post_review_comment.side_effect = [
            "https://github.com/c/1",
            ProviderError("boom"),
            "https://github.com/c/3",
        ]

        exit_code = cmd_line_comments(PR_URL, comments_file, provider=self.mock_provider)

        self.assertEqual(exit_code, 1)
        self.assertIn("https://github.com/c/3", self.stdout.getvalue())
        self.assertIn("b.py:20", self.stderr.getvalue())
        self.assertIn("(2 of 3 succeeded)", self.stderr.getvalue())

    def test_line_comments_all_succeed(self):
        comments_file = self._write_comments([
            {"filePath": "a.py", "line": 10, "commentMessage": "first"},
        ])
        self.mock_provider.post_review_comment.return_value = "https://github.com/c/1"

        exit_code = cmd_line_comments(PR_URL, comments_file, provider=self.mock_provider)

        self.assertEqual(exit_code, 0)
        self.assertIn("Successfully added 1 comments", self.stdout.getvalue())

    def test_line_comments_missing_file(self):
        exit_code = cmd_line_comments(PR_URL, "/nonexistent/comments.json", provider=self.mock_provider)

        self.assertEqual(exit_code, 1)
        self.assertIn("Comments file not found", self.stderr.getvalue())

    def test_line_comments_not_a_list(self):
        comments_file = self._write_comments({"filePath": "a.py"})

        exit_code = cmd_line_comments(PR_URL, comments_file, provider=self.mock_provider)

        self.assertEqual(exit_code, 1)
        self.mock_provider.post_review_comment.assert_not_called()

    def test_line_comments_empty_list(self):
        comments_file = self._write_comments([])

        exit_code = cmd_line_comments(PR_URL, comments_file, provider=self.mock_provider)

        self.assertEqual(exit_code, 1)
        self.assertIn("at least one comment", self.stderr.getvalue())
        self.assertNotIn("Successfully", self.stdout.getvalue())
        self.mock_provider.get_head_sha.assert_not_called()

    def test_line_comments_entry_missing_fields(self):
        comments_file = self._write_comments([
            {"filePath": "a.py", "line": 10, "commentMessage": "first"},
            {"filePath": "b.py", "commentMessage": "no line"},
        ])

        exit_code = cmd_line_comments(PR_URL, comments_file, provider=self.mock_provider)

        self.assertEqual(exit_code, 1)
        self.assertIn("Invalid comment entry: line is required for b.py", self.stderr.getvalue())
        self.mock_provider.post_review_comment.assert_not_called()

    def test_line_comments_entry_empty_message(self):
        comments_file = self._write_comments([
            {"filePath": "a.py", "line": 10, "commentMessage": ""},
        ])

        exit_code = cmd_line_comments(PR_URL, comments_file, provider=self.mock_provider)

        self.assertEqual(exit_code, 1)
        self.assertIn("commentMessage is required for a.py", self.stderr.getvalue())
        self.mock_provider.post_review_comment.assert_not_called()


class TestCreatePrCommand(CommandTestCase):

    def test_create_pr(self):
        self.mock_provider.create_pull_request.return_value = "https://github.com/acme/widgets/pull/43"

        exit_code = cmd_create_pr(
            "https://github.com/acme/widgets",
            "Title",
            "Body",
            "main",
            "feature",
            provider=self.mock_provider,
        )

        self.assertEqual(exit_code, 0)
        self.assertIn("Successfully created PR: https://github.com/acme/widgets/pull/43", self.stdout.getvalue())


class TestMain(CommandTestCase):
    """Tests for argument routing in main()."""

    def test_no_command_prints_help(self):
        with patch("sys.argv", ["prdiff"]):
            self.assertEqual(main(), 1)

    @patch("prdiff.__main__.cmd_line_comment", return_value=0)
    def test_routes_line_comment(self, mock_cmd):
        argv = [
            "prdiff", "line-comment",
            "--url", PR_URL,
            "--file-path", "a.py",
            "--line", "7",
            "--message", "Fix",
        ]
        with patch("sys.argv", argv):
            self.assertEqual(main(), 0)

        mock_cmd.assert_called_once_with(
            pr_url=PR_URL, file_path="a.py", line=7, message="Fix"
        )

    @patch("prdiff.__main__.cmd_create_pr", return_value=0)
    def test_routes_create_pr_draft(self, mock_cmd):
        argv = [
            "prdiff", "create-pr",
            "--repo-url", "https://github.com/acme/widgets",
            "--title", "T",
            "--base-branch", "main",
            "--current-branch", "feature",
            "--draft",
        ]
        with patch("sys.argv", argv):
            main()

        self.assertTrue(mock_cmd.call_args.kwargs["draft"])
        self.assertEqual(mock_cmd.call_args.kwargs["body"], "")

    @patch("prdiff.__main__.cmd_local_diff", return_value=1)
    def test_routes_local_diff(self, mock_cmd):
        argv = ["prdiff", "local-diff", "--folder-path", ".", "--base-branch", "main"]
        with patch("sys.argv", argv):
            self.assertEqual(main(), 1)

        mock_cmd.assert_called_once_with(folder_path=".", base_branch="main")


if __name__ == "__main__":
    unittest.main()
