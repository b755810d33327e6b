"""GitHub transports - gh CLI runner and API client."""

from .api_client import GitHubApiClient, GitHubApiError
from .runner import GhCommandRunner

__all__ = [
    "GhCommandRunner",
    "GitHubApiClient",
    "GitHubApiError",
]
