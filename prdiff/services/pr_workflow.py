"""Pull request workflows.

Backend-independent workflows parameterized over a DiffProvider: validate
the URL, call the provider's steps, and convert every failure into a
ValidationResult.
"""

from __future__ import annotations

from prdiff.domain.pull_request import PullRequestRef, get_repo_info_from_url
from prdiff.domain.validation import ErrorKind, ValidationResult
from prdiff.infrastructure.diff_provider.base import DiffProvider, ProviderError
from prdiff.services.diff_formatter import format_git_diff_output
from prdiff.services.file_classifier import (
    categorize_files,
    generate_change_files_list,
    generate_large_files_diff_message,
)
from prdiff.settings import DEFAULT_LARGE_FILE_THRESHOLD

INVALID_PR_URL_MESSAGE = "Invalid GitHub PR URL"
EMPTY_PR_DIFF_MESSAGE = "No differences found in PR or invalid PR URL"


def parse_pr_url(pr_url: str) -> ValidationResult[PullRequestRef]:
    """Parse a PR URL, converting a malformed URL into INVALID_URL."""
    try:
        return ValidationResult.valid(PullRequestRef.from_url(pr_url))
    except ValueError:
        return ValidationResult.invalid(INVALID_PR_URL_MESSAGE, ErrorKind.INVALID_URL)


def get_pr_diff(
    provider: DiffProvider,
    pr_url: str,
    ignore_patterns: list[str] | None = None,
    threshold: int = DEFAULT_LARGE_FILE_THRESHOLD,
) -> ValidationResult[str]:
    """Build the combined diff of a pull request.

    The output starts with placeholders for skipped large files, followed by
    the CHANGE_FILES manifest and one `diff --git` section per normal file.

    Args:
        provider: Backend used to list files and fetch patches
        pr_url: Full GitHub PR URL
        ignore_patterns: Globs of paths to leave out entirely
        threshold: Files with more changes than this are skipped

    Returns:
        ValidationResult with the combined diff text. INVALID_URL for a
        malformed URL, EMPTY_DIFF when nothing is left to show,
        TRANSPORT_FAILURE when the provider fails.
    """
    parsed = parse_pr_url(pr_url)
    if not parsed.is_valid:
        return parsed
    pr = parsed.data

    try:
        files = provider.list_changed_files(pr)
        categories = categorize_files(files, ignore_patterns or [], threshold)
        if categories.is_empty:
            return ValidationResult.invalid(EMPTY_PR_DIFF_MESSAGE, ErrorKind.EMPTY_DIFF)

        combined = generate_large_files_diff_message(categories.large_files, threshold)
        combined += generate_change_files_list(categories.normal_files)

        patches = provider.get_file_patches(pr, categories.normal_files)
        for file in categories.normal_files:
            patch = patches.get(file.path, "")
            if patch.strip():
                combined += format_git_diff_output(file.path, patch)
    except ProviderError as e:
        return ValidationResult.invalid(
            f"Error occurred while getting PR diff: {e}", ErrorKind.TRANSPORT_FAILURE
        )

    if not combined.strip():
        return ValidationResult.invalid(EMPTY_PR_DIFF_MESSAGE, ErrorKind.EMPTY_DIFF)

    return ValidationResult.valid(combined)


def create_pr(
    provider: DiffProvider,
    repo_url: str,
    title: str,
    body: str,
    base_branch: str,
    current_branch: str,
    draft: bool = False,
) -> ValidationResult[str]:
    """Open a pull request from current_branch into base_branch.

    Args:
        provider: Backend used to create the PR
        repo_url: Repository URL, e.g. https://github.com/acme/widgets
        title: PR title
        body: PR description
        base_branch: Branch to merge into
        current_branch: Branch to merge from
        draft: Open as a draft PR (default: False)

    Returns:
        ValidationResult with a message containing the new PR's URL
    """
    try:
        repository = get_repo_info_from_url(repo_url)
    except ValueError:
        return ValidationResult.invalid(
            f"Invalid GitHub repository URL: {repo_url}", ErrorKind.INVALID_URL
        )

    try:
        pr_link = provider.create_pull_request(
            repository, title, body, base_branch, current_branch, draft=draft
        )
    except ProviderError as e:
        return ValidationResult.invalid(
            f"Error creating PR: {e}", ErrorKind.TRANSPORT_FAILURE
        )

    return ValidationResult.valid(f"Successfully created PR: {pr_link}")
