"""Create PR command."""

from __future__ import annotations

import sys

from prdiff.infrastructure import DiffProvider, get_diff_provider
from prdiff.services import create_pr
from prdiff.settings import Settings


def cmd_create_pr(
    repo_url: str,
    title: str,
    body: str,
    base_branch: str,
    current_branch: str,
    draft: bool = False,
    settings: Settings | None = None,
    provider: DiffProvider | None = None,
) -> int:
    """Open a pull request and print its URL.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    settings = settings or Settings.from_env()
    provider = provider or get_diff_provider(settings)

    result = create_pr(
        provider,
        repo_url,
        title,
        body,
        base_branch,
        current_branch,
        draft=draft,
    )

    if not result.is_valid:
        print(f"Error: {result.error_message}", file=sys.stderr)
        return 1

    print(result.data)
    return 0
