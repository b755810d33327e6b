"""Diff text formatting.

Builds combined multi-file diff text and annotates changed lines with their
line numbers so reviewers can reference exact lines in inline comments.
"""

from __future__ import annotations

import re

# Example: @@ -33,7 +33,8 @@ class Foo:  (lengths are optional: @@ -3 +3 @@)
_HUNK_HEADER_PATTERN = re.compile(r"^@@ -(\d+)(?:,\d+)? \+(\d+)(?:,\d+)? @@")


def format_git_diff_output(file_path: str, patch: str) -> str:
    """Prefix a raw patch with a synthetic `diff --git` header.

    Args:
        file_path: Repository-relative path of the patched file
        patch: Patch body as returned by GitHub (hunks only, no header)

    Returns:
        Header plus patch, always ending in a newline
    """
    formatted = f"diff --git a/{file_path} b/{file_path}\n{patch}"
    if not patch.endswith("\n"):
        formatted += "\n"
    return formatted


def format_diff_with_line_numbers(diff_text: str) -> str:
    """Prefix added and removed lines with their line numbers.

    Walks the diff line by line. Outside a hunk every line passes through
    unchanged. A hunk header `@@ -a,b +c,d @@` enters a hunk and resets the
    counters to a-1 / c-1. Inside a hunk:

    - "-" lines advance the old counter and become "Line: <old> -..."
    - "+" lines advance the new counter and become "Line: <new> +..."
    - " " context lines advance both counters and stay unchanged
    - anything else stays unchanged

    A `diff --git` line leaves the hunk and zeroes both counters, so numbering
    never carries over from one file to the next.

    Args:
        diff_text: Raw or combined unified diff text

    Returns:
        Annotated diff text with the same number of lines
    """
    old_line = 0
    new_line = 0
    in_hunk = False
    formatted_lines = []

    for line in diff_text.split("\n"):
        if line.startswith("diff --git"):
            in_hunk = False
            old_line = new_line = 0
            formatted_lines.append(line)
            continue

        match = _HUNK_HEADER_PATTERN.match(line)
        if match:
            in_hunk = True
            old_line = int(match.group(1)) - 1
            new_line = int(match.group(2)) - 1
            formatted_lines.append(line)
            continue

        if not in_hunk:
            formatted_lines.append(line)
        elif line.startswith("-"):
            old_line += 1
            formatted_lines.append(f"Line: {old_line} {line}")
        elif line.startswith("+"):
            new_line += 1
            formatted_lines.append(f"Line: {new_line} {line}")
        elif line.startswith(" "):
            old_line += 1
            new_line += 1
            formatted_lines.append(line)
        else:
            formatted_lines.append(line)

    return "\n".join(formatted_lines)
