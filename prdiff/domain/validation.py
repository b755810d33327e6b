"""Domain models for operation results.

Every public operation returns a ValidationResult instead of raising.
Batch operations collect per-item outcomes into a BatchResult.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


# ============================================================
# Domain Models
# ============================================================


class ErrorKind(Enum):
    """Category of a failed operation."""

    DETACHED_HEAD = "detached_head"
    BRANCH_NOT_FOUND = "branch_not_found"
    INVALID_URL = "invalid_url"
    EMPTY_DIFF = "empty_diff"
    TRANSPORT_FAILURE = "transport_failure"
    PARTIAL_BATCH_FAILURE = "partial_batch_failure"


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Either a valid result carrying data, or an invalid one carrying an error.

    Use the valid() / invalid() factory methods rather than the constructor.
    """

    is_valid: bool
    data: T | None = None
    error_message: str = ""
    error_kind: ErrorKind | None = None

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def valid(cls, data: T) -> ValidationResult[T]:
        return cls(is_valid=True, data=data)

    @classmethod
    def invalid(cls, error_message: str, error_kind: ErrorKind) -> ValidationResult[T]:
        return cls(is_valid=False, error_message=error_message, error_kind=error_kind)


@dataclass(frozen=True)
class BatchFailure:
    """A single failed item of a batch operation."""

    label: str
    message: str

    def describe(self) -> str:
        return f"{self.label}: {self.message}"


@dataclass
class BatchResult(Generic[T]):
    """Outcome of a sequential batch where each item may fail independently."""

    successes: list[T] = field(default_factory=list)
    failures: list[BatchFailure] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.successes) + len(self.failures)

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def error_summary(self) -> str:
        """Aggregate every failure into one human-readable message."""
        details = "; ".join(failure.describe() for failure in self.failures)
        return (
            f"Error adding some comments: {details} "
            f"({len(self.successes)} of {self.total} succeeded)"
        )

    def to_validation_result(self, success_message: str) -> ValidationResult[str]:
        """Collapse the batch into a single ValidationResult.

        Args:
            success_message: Message returned when every item succeeded

        Returns:
            Valid result with success_message, or PARTIAL_BATCH_FAILURE
            listing every failing item
        """
        if self.has_failures:
            return ValidationResult.invalid(
                self.error_summary(), ErrorKind.PARTIAL_BATCH_FAILURE
            )
        return ValidationResult.valid(success_message)
