"""gh CLI diff provider.

Provides pull request operations by shelling out to the gh CLI via
GhCommandRunner. File listing and patch retrieval are separate calls: one
listing call, then one patch call per requested file.
"""

from __future__ import annotations

import json

from prdiff.domain.file_change import FileChange
from prdiff.domain.provider_kind import ProviderKind
from prdiff.domain.pull_request import PullRequestRef, RepositoryRef

from ..github.runner import GhCommandRunner
from .base import ProviderError


class CliDiffProvider:
    """Implementation of DiffProvider using the gh CLI."""

    kind = ProviderKind.CLI

    def __init__(self, gh_runner: GhCommandRunner | None = None):
        """Initialize with dependencies.

        Args:
            gh_runner: GitHub CLI runner (injected; defaults to a real runner)
        """
        self.gh_runner = gh_runner or GhCommandRunner()

    # --------------------------------------------------------
    # Diff
    # --------------------------------------------------------

    def list_changed_files(self, pr: PullRequestRef) -> list[FileChange]:
        """List changed files with `gh pr view <url> --json files`.

        Raises:
            ProviderError: If gh fails or returns malformed JSON
        """
        output = self._run_or_raise(
            self.gh_runner.pr_view(pr.url, ["files"]), "Failed to fetch PR files"
        )
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise ProviderError(f"Failed to parse PR files: {e}") from e
        return [FileChange.from_dict(item) for item in data.get("files") or []]

    def get_file_patches(self, pr: PullRequestRef, files: list[FileChange]) -> dict[str, str]:
        """Fetch each file's patch with its own `gh api` call.

        Raises:
            ProviderError: If any gh call fails
        """
        patches = {}
        for file in files:
            # json.dumps yields a valid jq string literal for any path
            jq_filter = f".[] | select(.filename == {json.dumps(file.path)}) | .patch"
            patch = self._run_or_raise(
                self.gh_runner.api_get(f"{pr.api_path}/files", jq_filter, paginate=True),
                f"Failed to fetch patch for {file.path}",
            )
            if patch.strip():
                patches[file.path] = patch
        return patches

    # --------------------------------------------------------
    # Comments
    # --------------------------------------------------------

    def post_issue_comment(self, pr: PullRequestRef, body: str) -> str:
        return self._run_or_raise(
            self.gh_runner.pr_comment(pr.url, body), "Failed to add PR comment"
        ).strip()

    def get_head_sha(self, pr: PullRequestRef) -> str:
        sha = self._run_or_raise(
            self.gh_runner.pr_view(pr.url, ["headRefOid"], jq_filter=".headRefOid"),
            "Failed to fetch PR head commit",
        ).strip()
        if not sha:
            raise ProviderError(f"PR head commit not found for {pr.url}")
        return sha

    def post_review_comment(
        self,
        pr: PullRequestRef,
        commit_sha: str,
        file_path: str,
        line: int,
        body: str,
    ) -> str:
        return self._run_or_raise(
            self.gh_runner.api_post_with_int(
                f"{pr.api_path}/comments",
                string_fields={
                    "body": body,
                    "commit_id": commit_sha,
                    "path": file_path,
                    "side": "RIGHT",
                },
                int_fields={"line": line},
                jq_filter=".html_url",
            ),
            f"Failed to add comment to {file_path}:{line}",
        ).strip()

    # --------------------------------------------------------
    # Pull Requests
    # --------------------------------------------------------

    def create_pull_request(
        self,
        repository: RepositoryRef,
        title: str,
        body: str,
        base_branch: str,
        head_branch: str,
        draft: bool = False,
    ) -> str:
        return self._run_or_raise(
            self.gh_runner.pr_create(
                repository.full_name, title, body, base_branch, head_branch, draft=draft
            ),
            "Failed to create PR",
        ).strip()

    # --------------------------------------------------------
    # Private Helpers
    # --------------------------------------------------------

    @staticmethod
    def _run_or_raise(result: tuple[bool, str], context: str) -> str:
        success, output = result
        if not success:
            raise ProviderError(f"{context}: {output}")
        return output
