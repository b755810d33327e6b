"""CLI command implementations."""

from prdiff.commands.comment import cmd_line_comment, cmd_line_comments, cmd_summary_comment
from prdiff.commands.create_pr import cmd_create_pr
from prdiff.commands.local_diff import cmd_local_diff
from prdiff.commands.pr_diff import cmd_pr_diff

__all__ = [
    "cmd_create_pr",
    "cmd_line_comment",
    "cmd_line_comments",
    "cmd_local_diff",
    "cmd_pr_diff",
    "cmd_summary_comment",
]
