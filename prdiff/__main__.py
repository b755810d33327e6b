#!/usr/bin/env python3
"""CLI entry point for prdiff.

Usage:
    python -m prdiff <command> [options]

Commands:
    local-diff       Diff the checked-out branch against a base branch
    pr-diff          Print the annotated diff of a GitHub pull request
    summary-comment  Post a summary comment on a pull request
    line-comment     Post a comment on one line of a pull request file
    line-comments    Post every line comment listed in a JSON file
    create-pr        Open a pull request
"""

import argparse
import sys

from prdiff.commands import (
    cmd_create_pr,
    cmd_line_comment,
    cmd_line_comments,
    cmd_local_diff,
    cmd_pr_diff,
    cmd_summary_comment,
)


def main() -> int:
    parser = argparse.ArgumentParser(
        prog="prdiff",
        description="Branch and pull request diffs for code review",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  local-diff       Diff the checked-out branch against a base branch
  pr-diff          Print the annotated diff of a GitHub pull request
  summary-comment  Post a summary comment on a pull request
  line-comment     Post a comment on one line of a pull request file
  line-comments    Post every line comment listed in a JSON file
  create-pr        Open a pull request

Environment:
  GITHUB_TOKEN          Use the GitHub API instead of the gh CLI
  IGNORE_PATTERNS       Comma-separated globs of files to leave out
  LARGE_FILE_THRESHOLD  Skip files with more changes than this (default: 1000)
  GITHUB_API_URL        REST API base URL (default: https://api.github.com)

Examples:
  prdiff local-diff --folder-path . --base-branch main
  prdiff pr-diff --url https://github.com/acme/widgets/pull/42
  prdiff line-comments --url https://github.com/acme/widgets/pull/42 --comments-file comments.json
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # local-diff command
    parser_local_diff = subparsers.add_parser(
        "local-diff",
        help="Diff the checked-out branch against a base branch",
    )
    parser_local_diff.add_argument(
        "--folder-path",
        required=True,
        help="Path of the local git repository",
    )
    parser_local_diff.add_argument(
        "--base-branch",
        required=True,
        help="Branch to compare against (local, or fetched from origin)",
    )

    # pr-diff command
    parser_pr_diff = subparsers.add_parser(
        "pr-diff",
        help="Print the annotated diff of a GitHub pull request",
    )
    parser_pr_diff.add_argument(
        "--url",
        required=True,
        help="Full GitHub PR URL",
    )

    # summary-comment command
    parser_summary = subparsers.add_parser(
        "summary-comment",
        help="Post a summary comment on a pull request",
    )
    parser_summary.add_argument("--url", required=True, help="Full GitHub PR URL")
    parser_summary.add_argument("--message", required=True, help="Comment body (markdown)")

    # line-comment command
    parser_line = subparsers.add_parser(
        "line-comment",
        help="Post a comment on one line of a pull request file",
    )
    parser_line.add_argument("--url", required=True, help="Full GitHub PR URL")
    parser_line.add_argument("--file-path", required=True, help="Path of the file to comment on")
    parser_line.add_argument(
        "--line",
        required=True,
        type=int,
        help="Line number in the new version of the file",
    )
    parser_line.add_argument("--message", required=True, help="Comment body")

    # line-comments command
    parser_lines = subparsers.add_parser(
        "line-comments",
        help="Post every line comment listed in a JSON file",
    )
    parser_lines.add_argument("--url", required=True, help="Full GitHub PR URL")
    parser_lines.add_argument(
        "--comments-file",
        required=True,
        help="JSON list of {filePath, line, commentMessage} objects",
    )

    # create-pr command
    parser_create = subparsers.add_parser(
        "create-pr",
        help="Open a pull request",
    )
    parser_create.add_argument(
        "--repo-url",
        required=True,
        help="Repository URL (e.g., https://github.com/owner/repo)",
    )
    parser_create.add_argument("--title", required=True, help="PR title")
    parser_create.add_argument("--body", default="", help="PR description")
    parser_create.add_argument("--base-branch", required=True, help="Branch to merge into")
    parser_create.add_argument("--current-branch", required=True, help="Branch to merge from")
    parser_create.add_argument(
        "--draft",
        action="store_true",
        help="Open the PR as a draft",
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    # Route to command implementations with explicit parameters
    if args.command == "local-diff":
        return cmd_local_diff(
            folder_path=args.folder_path,
            base_branch=args.base_branch,
        )

    elif args.command == "pr-diff":
        return cmd_pr_diff(pr_url=args.url)

    elif args.command == "summary-comment":
        return cmd_summary_comment(
            pr_url=args.url,
            message=args.message,
        )

    elif args.command == "line-comment":
        return cmd_line_comment(
            pr_url=args.url,
            file_path=args.file_path,
            line=args.line,
            message=args.message,
        )

    elif args.command == "line-comments":
        return cmd_line_comments(
            pr_url=args.url,
            comments_file=args.comments_file,
        )

    elif args.command == "create-pr":
        return cmd_create_pr(
            repo_url=args.repo_url,
            title=args.title,
            body=args.body,
            base_branch=args.base_branch,
            current_branch=args.current_branch,
            draft=args.draft,
        )

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
