"""Services for prdiff.

Services encapsulate business logic and orchestrate domain models.
They receive dependencies via constructor injection or explicit arguments.
"""

from prdiff.services.branch_resolver import validate_base_branch, validate_current_branch
from prdiff.services.diff_formatter import format_diff_with_line_numbers, format_git_diff_output
from prdiff.services.file_classifier import (
    categorize_files,
    generate_change_files_list,
    generate_large_files_diff_message,
    parse_ignore_patterns,
    should_ignore_file,
)
from prdiff.services.git_operations import (
    GitBranchError,
    GitDiffError,
    GitError,
    GitFetchError,
    GitOperationsService,
    GitRepositoryError,
)
from prdiff.services.github_comment import GitHubCommentService
from prdiff.services.local_diff import LocalDiffEngine, get_local_diff, perform_git_diff
from prdiff.services.pr_workflow import create_pr, get_pr_diff

__all__ = [
    "GitBranchError",
    "GitDiffError",
    "GitError",
    "GitFetchError",
    "GitHubCommentService",
    "GitOperationsService",
    "GitRepositoryError",
    "LocalDiffEngine",
    "categorize_files",
    "create_pr",
    "format_diff_with_line_numbers",
    "format_git_diff_output",
    "generate_change_files_list",
    "generate_large_files_diff_message",
    "get_local_diff",
    "get_pr_diff",
    "parse_ignore_patterns",
    "perform_git_diff",
    "should_ignore_file",
    "validate_base_branch",
    "validate_current_branch",
]
