"""Git operations service.

Runs the git commands behind local diffs (branch lookup, fetch, numstat and
per-file diffs) and raises a typed GitError subclass on failure.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from prdiff.domain.file_change import FileChange


class GitError(Exception):
    """Base class for git command failures."""

    pass


class GitRepositoryError(GitError):
    """Raised when directory is not a git repository."""

    pass


class GitBranchError(GitError):
    """Raised when branch information cannot be read."""

    pass


class GitFetchError(GitError):
    """Raised when git fetch fails."""

    pass


class GitDiffError(GitError):
    """Raised when git diff command fails."""

    pass


class GitOperationsService:
    """Runs git in one repository directory.

    Numstat output is parsed into FileChange; other commands return text.
    """

    def __init__(self, repo_path: str = "."):
        """Initialize with repository path.

        Args:
            repo_path: Path to git repository (default: current directory)
        """
        self.repo_path = Path(repo_path)

    # --------------------------------------------------------
    # Branches
    # --------------------------------------------------------

    def get_current_branch(self) -> str:
        """Get the name of the checked-out branch.

        Returns:
            Branch name, or "HEAD" when in detached HEAD state

        Raises:
            GitBranchError: If the branch cannot be determined
            GitRepositoryError: If not in a git repository
        """
        return self._run(
            ["rev-parse", "--abbrev-ref", "HEAD"], GitBranchError
        ).strip()

    def list_local_branches(self, branch_name: str) -> str:
        """List local branches matching branch_name.

        Returns:
            Raw `git branch --list` output; empty when no branch matches

        Raises:
            GitBranchError: If the listing fails
            GitRepositoryError: If not in a git repository
        """
        return self._run(["branch", "--list", branch_name], GitBranchError).strip()

    def list_remote_branches(self, branch_name: str) -> str:
        """List remote-tracking branches named branch_name on any remote.

        Returns:
            Raw `git branch -r --list "*/<name>"` output, one ref per line

        Raises:
            GitBranchError: If the listing fails
            GitRepositoryError: If not in a git repository
        """
        return self._run(
            ["branch", "-r", "--list", f"*/{branch_name}"], GitBranchError
        ).strip()

    def fetch_branch(self, branch_name: str, remote: str = "origin") -> None:
        """Fetch branch from remote.

        Args:
            branch_name: Branch to fetch
            remote: Remote name (default: origin)

        Raises:
            GitFetchError: If fetch fails
            GitRepositoryError: If not in a git repository
        """
        self._run(["fetch", remote, branch_name], GitFetchError)

    # --------------------------------------------------------
    # Diffs
    # --------------------------------------------------------

    def get_numstat(self, base_branch: str, current_branch: str) -> list[FileChange]:
        """Get per-file added/deleted line counts between two refs.

        Renames are reported as a delete plus an add so every path is plain.
        Records are NUL-terminated (-z) so paths arrive unquoted.

        Returns:
            FileChange list in git's output order

        Raises:
            GitDiffError: If diff command fails
            GitRepositoryError: If not in a git repository
        """
        output = self._run(
            ["diff", "--numstat", "-z", "--no-renames", f"{base_branch}..{current_branch}"],
            GitDiffError,
        )
        files = []
        for record in output.split("\0"):
            file = FileChange.from_numstat_line(record)
            if file is not None:
                files.append(file)
        return files

    def get_file_diff(self, base_branch: str, current_branch: str, file_path: str) -> str:
        """Get the unified diff of a single file between two refs.

        Raises:
            GitDiffError: If diff command fails
            GitRepositoryError: If not in a git repository
        """
        return self._run(
            ["diff", "--no-renames", f"{base_branch}..{current_branch}", "--", file_path],
            GitDiffError,
        )

    # --------------------------------------------------------
    # Repository
    # --------------------------------------------------------

    def is_git_repository(self) -> bool:
        """Check if repo_path is a git repository.

        Returns:
            True if valid git repo, False otherwise
        """
        try:
            subprocess.run(
                ["git", "rev-parse", "--git-dir"],
                cwd=self.repo_path,
                capture_output=True,
                check=True,
            )
            return True
        except (subprocess.CalledProcessError, OSError):
            return False

    # --------------------------------------------------------
    # Private Helpers
    # --------------------------------------------------------

    def _run(self, args: list[str], error_cls: type[GitError]) -> str:
        """Run a git subcommand in repo_path and return its stdout."""
        if not self.is_git_repository():
            raise GitRepositoryError(
                f"Not a git repository: {self.repo_path}\n"
                "Make sure the folder path points at a git repository."
            )

        try:
            result = subprocess.run(
                ["git", "-c", "core.quotePath=false", *args],
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            raise error_cls(f"git {' '.join(args)} failed: {e.stderr.strip()}") from e
        return result.stdout
