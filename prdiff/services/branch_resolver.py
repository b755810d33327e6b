"""Branch resolution for local diffs.

Validates the checked-out branch and resolves the base branch name, falling
back to remote-tracking branches when the base branch is not local.
"""

from __future__ import annotations

import sys

from prdiff.domain.validation import ErrorKind, ValidationResult
from prdiff.services.git_operations import GitError, GitFetchError, GitOperationsService


def validate_current_branch(git_service: GitOperationsService) -> ValidationResult[str]:
    """Resolve the checked-out branch name.

    Returns:
        Valid result with the branch name; DETACHED_HEAD when not on a named
        branch; TRANSPORT_FAILURE when git fails
    """
    try:
        current_branch = git_service.get_current_branch()
    except GitError as e:
        return ValidationResult.invalid(
            f"Failed to get current branch: {e}", ErrorKind.TRANSPORT_FAILURE
        )

    if current_branch == "HEAD":
        return ValidationResult.invalid(
            "You are in detached HEAD state. Cannot perform git diff as branch "
            "information is missing.",
            ErrorKind.DETACHED_HEAD,
        )

    return ValidationResult.valid(current_branch)


def validate_base_branch(
    git_service: GitOperationsService,
    base_branch: str,
    remote: str = "origin",
) -> ValidationResult[str]:
    """Resolve base_branch to a ref usable in `git diff`.

    Resolution order:
    1. A local branch with exactly this name wins and is returned unchanged.
    2. Otherwise the branch is fetched from remote and the first
       remote-tracking match (e.g. "origin/main") is returned.

    Remote lookup is best-effort: a failed fetch or remote listing counts
    as "not found" instead of an error.

    Args:
        git_service: Git service bound to the repository
        base_branch: Branch name supplied by the caller
        remote: Remote to fetch from (default: origin)

    Returns:
        Valid result with the resolved name; BRANCH_NOT_FOUND when neither
        lookup succeeds; TRANSPORT_FAILURE when local listing fails
    """
    try:
        if git_service.list_local_branches(base_branch):
            return ValidationResult.valid(base_branch)
    except GitError as e:
        return ValidationResult.invalid(
            f"Error resolving base branch: {e}", ErrorKind.TRANSPORT_FAILURE
        )

    try:
        git_service.fetch_branch(base_branch, remote=remote)
    except GitFetchError as e:
        # TODO: decide whether network failures here should surface as
        # TRANSPORT_FAILURE instead of BRANCH_NOT_FOUND.
        print(f"Warning: Failed to fetch branch {base_branch}: {e}", file=sys.stderr)

    try:
        remote_branches = git_service.list_remote_branches(base_branch)
    except GitError as e:
        print(f"Warning: Failed to list remote branches: {e}", file=sys.stderr)
        remote_branches = ""

    if remote_branches:
        return ValidationResult.valid(remote_branches.splitlines()[0].strip())

    return ValidationResult.invalid(
        f"Could not find base branch: '{base_branch}'. "
        "Please check if the branch name is correct.",
        ErrorKind.BRANCH_NOT_FOUND,
    )
