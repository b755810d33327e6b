"""Domain models for changed files.

Parse-once pattern: gh JSON, GraphQL nodes and git numstat lines are parsed
into FileChange at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class FileChange:
    """A file changed between two refs, with its line counts."""

    path: str
    additions: int = 0
    deletions: int = 0
    changes: int = 0

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_counts(cls, path: str, additions: int, deletions: int) -> FileChange:
        return cls(
            path=path,
            additions=additions,
            deletions=deletions,
            changes=additions + deletions,
        )

    @classmethod
    def from_dict(cls, data: dict) -> FileChange:
        """Parse a file entry from gh JSON or a GraphQL node.

        Args:
            data: Dictionary with "path", "additions" and "deletions"

        Returns:
            FileChange with changes = additions + deletions
        """
        return cls.from_counts(
            path=data.get("path", ""),
            additions=int(data.get("additions") or 0),
            deletions=int(data.get("deletions") or 0),
        )

    @classmethod
    def from_numstat_line(cls, line: str) -> FileChange | None:
        """Parse one record of `git diff --numstat` output.

        Example: "12\\t3\\tsrc/app.py". Binary files report "-" for both
        counts and are parsed with zero counts.

        Returns:
            Parsed FileChange, or None for blank/malformed lines
        """
        parts = line.split("\t", 2)
        if len(parts) != 3 or not parts[2]:
            return None
        added, deleted, path = parts
        return cls.from_counts(
            path=path,
            additions=int(added) if added.isdigit() else 0,
            deletions=int(deleted) if deleted.isdigit() else 0,
        )


@dataclass
class FileCategories:
    """Partition of changed files by size.

    Every non-ignored input file is in exactly one bucket; ignored files
    are in neither.
    """

    large_files: list[FileChange] = field(default_factory=list)
    normal_files: list[FileChange] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.large_files and not self.normal_files
