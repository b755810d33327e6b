"""Comment commands.

Thin commands that post summary and line comments through
GitHubCommentService. No business logic - just wiring and coordination.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from prdiff.domain import LineComment, ValidationResult
from prdiff.infrastructure import DiffProvider, get_diff_provider
from prdiff.services import GitHubCommentService
from prdiff.settings import Settings


def cmd_summary_comment(
    pr_url: str,
    message: str,
    settings: Settings | None = None,
    provider: DiffProvider | None = None,
) -> int:
    """Post a summary comment on a PR.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    service = _build_service(settings, provider)
    result = service.add_pr_summary_comment(pr_url, message)
    return _report(result, "Successfully added summary comment: ")


def cmd_line_comment(
    pr_url: str,
    file_path: str,
    line: int,
    message: str,
    settings: Settings | None = None,
    provider: DiffProvider | None = None,
) -> int:
    """Post a comment on one line of a file in a PR.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    service = _build_service(settings, provider)
    result = service.add_pr_line_comment(pr_url, file_path, line, message)
    return _report(result, f"Successfully added comment to {file_path}:{line}: ")


def cmd_line_comments(
    pr_url: str,
    comments_file: str,
    settings: Settings | None = None,
    provider: DiffProvider | None = None,
) -> int:
    """Post every line comment listed in a JSON file.

    The file holds a list of objects with filePath, line and commentMessage.
    Comments are posted one by one; failures are reported together at the end.

    Args:
        pr_url: Full GitHub PR URL
        comments_file: Path to the JSON file
        settings: Runtime settings (default: read from the environment)
        provider: Backend to use (default: selected from settings)

    Returns:
        Exit code (0 when every comment was posted, 1 otherwise)
    """
    # --------------------------------------------------------
    # 1. Load and parse into domain model
    # --------------------------------------------------------
    try:
        raw_comments = json.loads(Path(comments_file).read_text(encoding="utf-8"))
    except FileNotFoundError:
        print(f"Error: Comments file not found: {comments_file}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Failed to parse comments file: {e}", file=sys.stderr)
        return 1

    if not isinstance(raw_comments, list):
        print("Error: Comments file must contain a JSON list", file=sys.stderr)
        return 1

    if not raw_comments:
        print("Error: Comments file must contain at least one comment", file=sys.stderr)
        return 1

    try:
        comments = [LineComment.from_dict(item) for item in raw_comments]
    except (KeyError, TypeError, ValueError) as e:
        print(f"Error: Invalid comment entry: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 2. Post comments
    # --------------------------------------------------------
    service = _build_service(settings, provider)
    batch = service.add_pr_line_comments(pr_url, comments)

    for url in batch.successes:
        print(f"  Posted: {url}")

    return _report(batch.to_validation_result(f"Successfully added {batch.total} comments"))


# ============================================================
# Private Helpers
# ============================================================


def _build_service(
    settings: Settings | None,
    provider: DiffProvider | None,
) -> GitHubCommentService:
    if provider is None:
        provider = get_diff_provider(settings or Settings.from_env())
    return GitHubCommentService(provider)


def _report(result: ValidationResult[str], prefix: str = "") -> int:
    if not result.is_valid:
        print(f"Error: {result.error_message}", file=sys.stderr)
        return 1
    print(f"{prefix}{result.data}")
    return 0
