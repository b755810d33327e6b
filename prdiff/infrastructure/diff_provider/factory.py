"""Factory for creating diff providers.

This module selects the provider backend from settings: the API provider
when a GitHub token is configured, otherwise the gh CLI provider.
"""

from __future__ import annotations

import sys
from functools import lru_cache

from prdiff.settings import Settings

from ..github.runner import GhCommandRunner
from .api_provider import ApiDiffProvider
from .base import DiffProvider
from .cli_provider import CliDiffProvider


def create_diff_provider(settings: Settings) -> DiffProvider:
    """Create a diff provider for the given settings.

    Args:
        settings: Runtime settings; only github_token is consulted

    Returns:
        ApiDiffProvider when a token is present and the provider can be
        built, otherwise CliDiffProvider

    Note:
        A failure to build the API provider is not an error: a warning is
        printed and the CLI provider is returned instead.

    Examples:
        >>> provider = create_diff_provider(Settings(github_token=None))
        >>> provider.kind
        <ProviderKind.CLI: 'cli'>
    """
    if settings.has_github_token:
        try:
            return ApiDiffProvider.from_token(settings.github_token, settings.github_api_url)
        except Exception as e:
            print(f"Warning: Unable to create API provider: {e}", file=sys.stderr)
            print("Warning: Falling back to gh CLI provider", file=sys.stderr)
            return CliDiffProvider(GhCommandRunner())

    return CliDiffProvider(GhCommandRunner())


@lru_cache(maxsize=None)
def get_diff_provider(settings: Settings) -> DiffProvider:
    """Return the provider for settings, creating it on first use.

    Repeated calls with equal settings reuse the same instance.
    """
    return create_diff_provider(settings)


def clear_provider_cache() -> None:
    get_diff_provider.cache_clear()
