"""Diff provider protocol.

A DiffProvider performs the backend-specific steps of the pull request
workflows. The workflows themselves (URL validation, classification,
combination, error conversion) live in prdiff.services and work with any
provider.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from prdiff.domain.file_change import FileChange
from prdiff.domain.provider_kind import ProviderKind
from prdiff.domain.pull_request import PullRequestRef, RepositoryRef


class ProviderError(Exception):
    """Raised when a provider cannot complete a GitHub operation.

    The message always embeds the underlying cause (gh stderr, HTTP error,
    malformed response).
    """

    pass


@runtime_checkable
class DiffProvider(Protocol):
    """Backend for GitHub pull request operations.

    All implementations must return identical shapes so the workflows can
    treat them interchangeably. Every method raises ProviderError on failure.
    """

    kind: ProviderKind

    def list_changed_files(self, pr: PullRequestRef) -> list[FileChange]:
        """List every file changed by the PR with its additions/deletions."""
        ...

    def get_file_patches(self, pr: PullRequestRef, files: list[FileChange]) -> dict[str, str]:
        """Get the patch text of each requested file.

        Returns:
            Mapping of path to patch (hunks only, no diff header). Files
            without a patch (binary, too large for GitHub) are absent.
        """
        ...

    def post_issue_comment(self, pr: PullRequestRef, body: str) -> str:
        """Post a PR-level comment and return its URL."""
        ...

    def get_head_sha(self, pr: PullRequestRef) -> str:
        """Get the head commit SHA of the PR."""
        ...

    def post_review_comment(
        self,
        pr: PullRequestRef,
        commit_sha: str,
        file_path: str,
        line: int,
        body: str,
    ) -> str:
        """Post a comment anchored to one line of a file and return its URL."""
        ...

    def create_pull_request(
        self,
        repository: RepositoryRef,
        title: str,
        body: str,
        base_branch: str,
        head_branch: str,
        draft: bool = False,
    ) -> str:
        """Open a pull request and return its URL."""
        ...
