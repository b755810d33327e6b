"""Infrastructure components for prdiff.

This layer handles external system interactions:
- GitHub via the gh CLI
- GitHub via the REST/GraphQL API

Organized into subdirectories:
- github/ - gh CLI runner and API client
- diff_provider/ - Pull request backends built on them, plus the factory
"""

# GitHub transports
from .github import GhCommandRunner, GitHubApiClient, GitHubApiError

# Diff providers
from .diff_provider import (
    ApiDiffProvider,
    CliDiffProvider,
    DiffProvider,
    ProviderError,
    clear_provider_cache,
    create_diff_provider,
    get_diff_provider,
)

__all__ = [
    # Diff providers
    "ApiDiffProvider",
    "CliDiffProvider",
    "DiffProvider",
    "ProviderError",
    "clear_provider_cache",
    "create_diff_provider",
    "get_diff_provider",
    # GitHub transports
    "GhCommandRunner",
    "GitHubApiClient",
    "GitHubApiError",
]
