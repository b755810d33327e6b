"""GitHub comment service.

Core service that posts review feedback (summary and inline comments) on
GitHub PRs through any DiffProvider.
"""

from __future__ import annotations

from dataclasses import dataclass

from prdiff.domain.pull_request import LineComment
from prdiff.domain.validation import BatchFailure, BatchResult, ErrorKind, ValidationResult
from prdiff.infrastructure.diff_provider.base import DiffProvider, ProviderError
from prdiff.services.pr_workflow import parse_pr_url

REVIEW_COMMENT_PREFIX = "🤖AI Review:\n\n"


def add_review_prefix(comment: str) -> str:
    """Mark a comment as automated review feedback."""
    return f"{REVIEW_COMMENT_PREFIX}{comment}"


@dataclass
class GitHubCommentService:
    """Service for posting review comments to GitHub PRs.

    Core service with single responsibility: GitHub comment operations.
    Uses a DiffProvider for actual API calls (dependency injection).
    """

    provider: DiffProvider

    # ============================================================
    # Public API - Comment Operations
    # ============================================================

    def add_pr_summary_comment(self, pr_url: str, comment_message: str) -> ValidationResult[str]:
        """Post a PR-level summary comment.

        Args:
            pr_url: Full GitHub PR URL
            comment_message: Comment body (markdown supported)

        Returns:
            ValidationResult with the posted comment's URL
        """
        parsed = parse_pr_url(pr_url)
        if not parsed.is_valid:
            return parsed

        try:
            comment_url = self.provider.post_issue_comment(
                parsed.data, add_review_prefix(comment_message)
            )
        except ProviderError as e:
            return ValidationResult.invalid(
                f"Error occurred while adding PR comment: {e}",
                ErrorKind.TRANSPORT_FAILURE,
            )
        return ValidationResult.valid(comment_url)

    def add_pr_line_comment(
        self,
        pr_url: str,
        file_path: str,
        line: int,
        comment_message: str,
    ) -> ValidationResult[str]:
        """Post a comment on one line of a file at the PR's head commit.

        Only single-line anchors are supported.

        Args:
            pr_url: Full GitHub PR URL
            file_path: Path of the file to comment on
            line: Line number in the new version of the file
            comment_message: Comment body

        Returns:
            ValidationResult with the posted comment's URL
        """
        parsed = parse_pr_url(pr_url)
        if not parsed.is_valid:
            return parsed
        pr = parsed.data

        try:
            commit_sha = self.provider.get_head_sha(pr)
            comment_url = self.provider.post_review_comment(
                pr, commit_sha, file_path, line, add_review_prefix(comment_message)
            )
        except ProviderError as e:
            return ValidationResult.invalid(
                f"Error occurred while adding PR line comment: {e}",
                ErrorKind.TRANSPORT_FAILURE,
            )
        return ValidationResult.valid(comment_url)

    # ============================================================
    # Public API - Composite Operations
    # ============================================================

    def add_pr_line_comments(
        self,
        pr_url: str,
        comments: list[LineComment],
    ) -> BatchResult[str]:
        """Post several line comments, one after another.

        A failing comment does not stop the loop; it is recorded with its
        file:line location and the rest are still posted.

        Returns:
            BatchResult with the URLs of posted comments and every failure
        """
        batch: BatchResult[str] = BatchResult()

        for comment in comments:
            result = self.add_pr_line_comment(
                pr_url, comment.file_path, comment.line, comment.comment_message
            )
            if result.is_valid:
                batch.successes.append(result.data)
            else:
                batch.failures.append(BatchFailure(comment.location, result.error_message))

        return batch
