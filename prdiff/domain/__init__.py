"""Domain models for prdiff."""

from prdiff.domain.file_change import FileCategories, FileChange
from prdiff.domain.provider_kind import ProviderKind
from prdiff.domain.pull_request import (
    LineComment,
    PullRequestRef,
    RepositoryRef,
    get_pr_number_from_url,
    get_repo_info_from_url,
    is_valid_pr_url,
)
from prdiff.domain.validation import (
    BatchFailure,
    BatchResult,
    ErrorKind,
    ValidationResult,
)

__all__ = [
    "BatchFailure",
    "BatchResult",
    "ErrorKind",
    "FileCategories",
    "FileChange",
    "LineComment",
    "ProviderKind",
    "PullRequestRef",
    "RepositoryRef",
    "ValidationResult",
    "get_pr_number_from_url",
    "get_repo_info_from_url",
    "is_valid_pr_url",
]
