"""Local branch diff engine.

Computes the diff between two local refs the same way PR diffs are built:
numstat listing, large/normal classification, per-file diffs for normal
files, then line-number annotation.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field

from prdiff.domain.validation import ErrorKind, ValidationResult
from prdiff.services.branch_resolver import validate_base_branch, validate_current_branch
from prdiff.services.diff_formatter import format_diff_with_line_numbers
from prdiff.services.file_classifier import (
    categorize_files,
    generate_change_files_list,
    generate_large_files_diff_message,
)
from prdiff.services.git_operations import GitDiffError, GitError, GitOperationsService
from prdiff.settings import DEFAULT_LARGE_FILE_THRESHOLD


@dataclass
class LocalDiffEngine:
    """Builds annotated diffs between branches of a local repository.

    Uses GitOperationsService for every git call (dependency injection).
    """

    git_service: GitOperationsService
    ignore_patterns: list[str] = field(default_factory=list)
    threshold: int = DEFAULT_LARGE_FILE_THRESHOLD

    # ============================================================
    # Public API
    # ============================================================

    def get_local_diff(self, base_branch: str) -> ValidationResult[str]:
        """Diff the checked-out branch against base_branch.

        Validates the current branch, resolves the base branch (locally, then
        on the remote) and runs perform_git_diff.

        Args:
            base_branch: Branch to compare against

        Returns:
            ValidationResult with the annotated diff text
        """
        if not base_branch:
            return ValidationResult.invalid(
                "Please provide a base branch name. This is required to perform "
                "a git diff operation.",
                ErrorKind.BRANCH_NOT_FOUND,
            )

        current = validate_current_branch(self.git_service)
        if not current.is_valid:
            return current

        base = validate_base_branch(self.git_service, base_branch)
        if not base.is_valid:
            return base

        return self.perform_git_diff(base.data, current.data)

    def perform_git_diff(self, base_branch: str, current_branch: str) -> ValidationResult[str]:
        """Compute the annotated diff between two refs.

        Large files are replaced by placeholders; each normal file's diff is
        fetched on its own, and a failure on one file only drops that file.

        Args:
            base_branch: Resolved base ref
            current_branch: Current branch name

        Returns:
            Valid result with the annotated diff, or with a "No differences
            found" message when nothing changed. TRANSPORT_FAILURE when the
            change listing fails.
        """
        try:
            files = self.git_service.get_numstat(base_branch, current_branch)
        except GitError as e:
            return ValidationResult.invalid(
                f"Error running git diff: {e}", ErrorKind.TRANSPORT_FAILURE
            )

        categories = categorize_files(files, self.ignore_patterns, self.threshold)
        if categories.is_empty:
            return ValidationResult.valid(
                f"No differences found between current branch ({current_branch}) "
                f"and base branch ({base_branch})."
            )

        combined = generate_large_files_diff_message(categories.large_files, self.threshold)
        combined += generate_change_files_list(categories.normal_files)
        for file in categories.normal_files:
            combined += self._get_file_diff(base_branch, current_branch, file.path)

        return ValidationResult.valid(
            f"Comparing changes between current branch ({current_branch}) "
            f"and base branch ({base_branch}):\n\n"
            f"{format_diff_with_line_numbers(combined)}"
        )

    # ============================================================
    # Private Helpers
    # ============================================================

    def _get_file_diff(self, base_branch: str, current_branch: str, file_path: str) -> str:
        try:
            diff = self.git_service.get_file_diff(base_branch, current_branch, file_path)
        except GitDiffError as e:
            print(f"Warning: Failed to get diff for {file_path}: {e}", file=sys.stderr)
            return ""
        if diff and not diff.endswith("\n"):
            diff += "\n"
        return diff


def perform_git_diff(
    repo_path: str,
    base_branch: str,
    current_branch: str,
    ignore_patterns: list[str] | None = None,
    threshold: int = DEFAULT_LARGE_FILE_THRESHOLD,
) -> ValidationResult[str]:
    """Compute the annotated diff between two refs of the repository at repo_path."""
    engine = LocalDiffEngine(
        git_service=GitOperationsService(repo_path),
        ignore_patterns=list(ignore_patterns or []),
        threshold=threshold,
    )
    return engine.perform_git_diff(base_branch, current_branch)


def get_local_diff(
    repo_path: str,
    base_branch: str,
    ignore_patterns: list[str] | None = None,
    threshold: int = DEFAULT_LARGE_FILE_THRESHOLD,
) -> ValidationResult[str]:
    """Diff the branch checked out at repo_path against base_branch."""
    engine = LocalDiffEngine(
        git_service=GitOperationsService(repo_path),
        ignore_patterns=list(ignore_patterns or []),
        threshold=threshold,
    )
    return engine.get_local_diff(base_branch)
