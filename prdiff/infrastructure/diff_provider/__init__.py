"""Diff providers - GitHub pull request backends (gh CLI vs API)."""

from .api_provider import ApiDiffProvider
from .base import DiffProvider, ProviderError
from .cli_provider import CliDiffProvider
from .factory import clear_provider_cache, create_diff_provider, get_diff_provider

__all__ = [
    "ApiDiffProvider",
    "CliDiffProvider",
    "DiffProvider",
    "ProviderError",
    "clear_provider_cache",
    "create_diff_provider",
    "get_diff_provider",
]
