"""PR diff command.

Thin command: resolves the provider, runs the PR diff workflow and prints
the line-annotated diff.
"""

from __future__ import annotations

import sys

from prdiff.infrastructure import DiffProvider, get_diff_provider
from prdiff.services import format_diff_with_line_numbers, get_pr_diff
from prdiff.settings import Settings


def cmd_pr_diff(
    pr_url: str,
    settings: Settings | None = None,
    provider: DiffProvider | None = None,
) -> int:
    """Print the annotated diff of a GitHub pull request.

    Args:
        pr_url: Full GitHub PR URL
        settings: Runtime settings (default: read from the environment)
        provider: Backend to use (default: selected from settings)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    settings = settings or Settings.from_env()
    provider = provider or get_diff_provider(settings)

    result = get_pr_diff(
        provider,
        pr_url,
        ignore_patterns=settings.ignore_patterns,
        threshold=settings.large_file_threshold,
    )

    if not result.is_valid:
        print(f"Error: {result.error_message}", file=sys.stderr)
        return 1

    print(format_diff_with_line_numbers(result.data))
    return 0
