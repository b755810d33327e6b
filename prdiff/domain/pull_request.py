"""Domain models for GitHub pull request references.

PR and repository URLs are parsed once into typed references. Parsing
raises ValueError on a malformed URL; operations catch it immediately and
convert it into an INVALID_URL result.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_PR_URL_PATTERN = re.compile(r"^https?://github\.com/[^/]+/[^/]+/pull/\d+")
_PR_NUMBER_PATTERN = re.compile(r"/pull/(\d+)($|/)")
_REPO_INFO_PATTERN = re.compile(r"github\.com/([^/]+)/([^/]+)")


# ============================================================
# URL Parsing
# ============================================================


def is_valid_pr_url(url: str) -> bool:
    """Check whether url looks like https://github.com/<owner>/<repo>/pull/<n>."""
    return bool(_PR_URL_PATTERN.match(url))


def get_pr_number_from_url(url: str) -> str:
    """Extract the PR number from a GitHub PR URL.

    Examples:
        >>> get_pr_number_from_url("https://github.com/acme/widgets/pull/42")
        '42'

    Raises:
        ValueError: If the URL has no /pull/<number> segment
    """
    match = _PR_NUMBER_PATTERN.search(url)
    if not match:
        raise ValueError(f"Could not extract PR number from URL: {url}")
    return match.group(1)


def get_repo_info_from_url(url: str) -> RepositoryRef:
    """Extract the repository owner and name from a GitHub URL.

    Examples:
        >>> get_repo_info_from_url("https://github.com/acme/widgets/pull/42")
        RepositoryRef(owner='acme', repo='widgets')

    Raises:
        ValueError: If the URL does not contain github.com/<owner>/<repo>
    """
    match = _REPO_INFO_PATTERN.search(url)
    if not match:
        raise ValueError(f"Could not extract repository information from URL: {url}")
    repo = match.group(2)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    return RepositoryRef(owner=match.group(1), repo=repo)


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class RepositoryRef:
    """A GitHub repository identified by owner and name."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        """Repository in owner/name format."""
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True)
class PullRequestRef:
    """A GitHub pull request identified by owner, repo and number."""

    owner: str
    repo: str
    number: int
    url: str = ""

    @classmethod
    def from_url(cls, url: str) -> PullRequestRef:
        """Parse a PR URL into a reference.

        Raises:
            ValueError: If the URL is not a GitHub PR URL
        """
        if not is_valid_pr_url(url):
            raise ValueError(f"Invalid GitHub PR URL: {url}")
        repository = get_repo_info_from_url(url)
        number = int(get_pr_number_from_url(url))
        return cls(owner=repository.owner, repo=repository.repo, number=number, url=url)

    @property
    def repository(self) -> RepositoryRef:
        return RepositoryRef(owner=self.owner, repo=self.repo)

    @property
    def api_path(self) -> str:
        """REST path prefix for this PR, e.g. repos/acme/widgets/pulls/42."""
        return f"repos/{self.owner}/{self.repo}/pulls/{self.number}"


@dataclass(frozen=True)
class LineComment:
    """A review comment anchored to a single line of a file."""

    file_path: str
    line: int
    comment_message: str

    @classmethod
    def from_dict(cls, data: dict) -> LineComment:
        """Parse a comment from JSON input.

        Accepts "line" as either int or numeric string.

        Raises:
            ValueError: If the file path or message is missing or empty,
                or the line is missing or not a positive number
        """
        if not isinstance(data, dict):
            raise ValueError(f"Comment entry must be an object, got: {data!r}")

        file_path = data.get("filePath", data.get("file_path"))
        if not isinstance(file_path, str) or not file_path.strip():
            raise ValueError(f"filePath is required: {data}")

        comment_message = data.get("commentMessage", data.get("comment_message"))
        if not isinstance(comment_message, str) or not comment_message.strip():
            raise ValueError(f"commentMessage is required for {file_path}")

        if data.get("line") is None:
            raise ValueError(f"line is required for {file_path}")
        line = int(data["line"])
        if line < 1:
            raise ValueError(f"line must be positive for {file_path}, got {line}")

        return cls(file_path=file_path, line=line, comment_message=comment_message)

    @property
    def location(self) -> str:
        return f"{self.file_path}:{self.line}"
