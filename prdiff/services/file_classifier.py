"""File change classification.

Splits changed files into "large" and "normal" buckets, drops files matching
user-configured ignore globs, and renders the text that stands in for
skipped large files.
"""

from __future__ import annotations

from typing import Iterable

from wcmatch import glob

from prdiff.domain.file_change import FileCategories, FileChange
from prdiff.settings import DEFAULT_LARGE_FILE_THRESHOLD

# `**` crosses directories; `*` stays within one path segment.
_GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB


# ============================================================
# Ignore Patterns
# ============================================================


def parse_ignore_patterns(raw: str) -> list[str]:
    """Parse a comma-separated glob list.

    Whitespace is trimmed, empty entries are dropped and patterns the glob
    matcher rejects (e.g. brace expansions past its pattern limit) are
    skipped so the rest still apply.

    Examples:
        >>> parse_ignore_patterns("*.lock, dist/*,,")
        ['*.lock', 'dist/*']
    """
    if not raw:
        return []

    patterns = []
    for pattern in (p.strip() for p in raw.split(",")):
        if not pattern:
            continue
        try:
            glob.translate(pattern, flags=_GLOB_FLAGS)
        except Exception:
            continue
        patterns.append(pattern)
    return patterns


def should_ignore_file(file_path: str, ignore_patterns: Iterable[str]) -> bool:
    """Whether file_path matches any ignore glob.

    Examples:
        >>> should_ignore_file("yarn.lock", ["**/*.lock"])
        True
        >>> should_ignore_file("sub/x.lock", ["*.lock"])
        False
    """
    patterns = list(ignore_patterns)
    if not patterns:
        return False
    return glob.globmatch(file_path, patterns, flags=_GLOB_FLAGS)


# ============================================================
# Categorization
# ============================================================


def categorize_files(
    files: Iterable[FileChange],
    ignore_patterns: Iterable[str],
    threshold: int = DEFAULT_LARGE_FILE_THRESHOLD,
) -> FileCategories:
    """Partition files into large and normal buckets.

    Args:
        files: Changed files, in the order they should be reported
        ignore_patterns: Globs; matching files are dropped from both buckets
        threshold: Files with changes strictly greater than this are large

    Returns:
        FileCategories preserving input order within each bucket
    """
    patterns = list(ignore_patterns)
    categories = FileCategories()

    for file in files:
        if should_ignore_file(file.path, patterns):
            continue
        if file.changes > threshold:
            categories.large_files.append(file)
        else:
            categories.normal_files.append(file)

    return categories


# ============================================================
# Rendering
# ============================================================


def generate_large_files_diff_message(
    large_files: Iterable[FileChange],
    threshold: int = DEFAULT_LARGE_FILE_THRESHOLD,
) -> str:
    """Render a placeholder diff entry for every skipped large file.

    Each file keeps its `diff --git` header so it stays visible to readers,
    followed by a pseudo-hunk giving its change count.

    Returns:
        Placeholder text, or "" when there are no large files
    """
    large_files = list(large_files)
    if not large_files:
        return ""

    lines = [f"Large files (changes > {threshold}) that were skipped:\n"]
    for file in large_files:
        lines.append(f"diff --git a/{file.path} b/{file.path}\n")
        lines.append(f"@@ File too large to display ({file.changes} changes) @@\n\n")
    return "".join(lines)


def generate_change_files_list(files: Iterable[FileChange]) -> str:
    """Render the manifest line listing the files whose diffs follow.

    Examples:
        >>> generate_change_files_list([FileChange("a.py"), FileChange("b.py")])
        'CHANGE_FILES= a.py,\\nb.py\\n'
    """
    paths = [file.path for file in files]
    if not paths:
        return ""
    return "CHANGE_FILES= " + ",\n".join(paths) + "\n"
