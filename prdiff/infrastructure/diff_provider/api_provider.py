"""GitHub API diff provider.

Provides pull request operations through the authenticated GitHub API.
File changes are listed with cursor-paginated GraphQL queries, and every patch is
retrieved from one paginated REST listing instead of one call per file.
"""

from __future__ import annotations

from prdiff.domain.file_change import FileChange
from prdiff.domain.provider_kind import ProviderKind
from prdiff.domain.pull_request import PullRequestRef, RepositoryRef

from ..github.api_client import GitHubApiClient, GitHubApiError
from .base import ProviderError

_FILES_QUERY = """
query($owner: String!, $repo: String!, $prNumber: Int!, $cursor: String) {
  repository(owner: $owner, name: $repo) {
    pullRequest(number: $prNumber) {
      files(first: 100, after: $cursor) {
        nodes {
          path
          additions
          deletions
        }
        pageInfo {
          hasNextPage
          endCursor
        }
      }
    }
  }
}
"""


class ApiDiffProvider:
    """Implementation of DiffProvider using the GitHub REST/GraphQL API."""

    kind = ProviderKind.API

    def __init__(self, client: GitHubApiClient):
        """Initialize with dependencies.

        Args:
            client: Authenticated API client (injected)
        """
        self.client = client

    @classmethod
    def from_token(cls, github_token: str, base_url: str) -> ApiDiffProvider:
        """Build a provider with its own API client.

        Raises:
            ValueError: If github_token is empty
        """
        return cls(GitHubApiClient(github_token, base_url=base_url))

    # --------------------------------------------------------
    # Diff
    # --------------------------------------------------------

    def list_changed_files(self, pr: PullRequestRef) -> list[FileChange]:
        """List changed files with GraphQL, 100 per round trip.

        Follows pageInfo cursors until every file has been listed.

        Raises:
            ProviderError: If a query fails or the PR does not exist
        """
        files: list[FileChange] = []
        cursor = None

        while True:
            try:
                data = self.client.graphql(
                    _FILES_QUERY,
                    {
                        "owner": pr.owner,
                        "repo": pr.repo,
                        "prNumber": pr.number,
                        "cursor": cursor,
                    },
                )
            except GitHubApiError as e:
                raise ProviderError(f"Failed to fetch PR files: {e}") from e

            pull_request = (data.get("repository") or {}).get("pullRequest")
            if pull_request is None:
                raise ProviderError(f"Pull request not found: {pr.url}")

            connection = pull_request.get("files") or {}
            files.extend(FileChange.from_dict(node) for node in connection.get("nodes") or [])

            page_info = connection.get("pageInfo") or {}
            if not page_info.get("hasNextPage") or not page_info.get("endCursor"):
                return files
            cursor = page_info["endCursor"]

    def get_file_patches(self, pr: PullRequestRef, files: list[FileChange]) -> dict[str, str]:
        """List every file's patch once and pick out the requested files.

        Raises:
            ProviderError: If the listing fails
        """
        if not files:
            return {}

        try:
            pr_files = self.client.get_paginated(f"{pr.api_path}/files")
        except GitHubApiError as e:
            raise ProviderError(f"Failed to fetch PR patches: {e}") from e

        patches_by_path = {
            item.get("filename", ""): item.get("patch") or "" for item in pr_files
        }
        return {
            file.path: patches_by_path[file.path]
            for file in files
            if patches_by_path.get(file.path)
        }

    # --------------------------------------------------------
    # Comments
    # --------------------------------------------------------

    def post_issue_comment(self, pr: PullRequestRef, body: str) -> str:
        try:
            response = self.client.post(
                f"repos/{pr.owner}/{pr.repo}/issues/{pr.number}/comments",
                {"body": body},
            )
        except GitHubApiError as e:
            raise ProviderError(f"Failed to add PR comment: {e}") from e
        return response.get("html_url", "")

    def get_head_sha(self, pr: PullRequestRef) -> str:
        try:
            response = self.client.get(pr.api_path)
        except GitHubApiError as e:
            raise ProviderError(f"Failed to fetch PR head commit: {e}") from e
        sha = (response.get("head") or {}).get("sha", "")
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
        try:
            response = self.client.post(
                f"{pr.api_path}/comments",
                {
                    "body": body,
                    "commit_id": commit_sha,
                    "path": file_path,
                    "line": line,
                    "side": "RIGHT",
                },
            )
        except GitHubApiError as e:
            raise ProviderError(f"Failed to add comment to {file_path}:{line}: {e}") from e
        return response.get("html_url", "")

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
        try:
            response = self.client.post(
                f"repos/{repository.full_name}/pulls",
                {
                    "title": title,
                    "body": body,
                    "base": base_branch,
                    "head": head_branch,
                    "draft": draft,
                },
            )
        except GitHubApiError as e:
            raise ProviderError(f"Failed to create PR: {e}") from e
        return response.get("html_url", "")
