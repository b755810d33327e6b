"""Local diff command.

Thin command: builds the engine from settings and prints its result.
"""

from __future__ import annotations

import sys

from prdiff.services import GitOperationsService, LocalDiffEngine
from prdiff.settings import Settings


def cmd_local_diff(
    folder_path: str,
    base_branch: str,
    settings: Settings | None = None,
) -> int:
    """Print the annotated diff between the checked-out branch and base_branch.

    Args:
        folder_path: Path of the local git repository
        base_branch: Branch to compare against
        settings: Runtime settings (default: read from the environment)

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    settings = settings or Settings.from_env()

    engine = LocalDiffEngine(
        git_service=GitOperationsService(folder_path),
        ignore_patterns=settings.ignore_patterns,
        threshold=settings.large_file_threshold,
    )
    result = engine.get_local_diff(base_branch)

    if not result.is_valid:
        print(f"Error: {result.error_message}", file=sys.stderr)
        return 1

    print(result.data)
    return 0
