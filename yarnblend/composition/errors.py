"""
Batch validation errors and the empty-batch signal.

ValidationError subclasses describe a problem with user input in one batch
entry. They are raised by ``aggregate`` on the first bad entry and carry the
data a caller needs to point at the offending row. They are never retried.

EmptyTotal is not an error: it is returned when a batch has nothing to weigh,
so the caller can show a neutral state instead of a table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


class ValidationError(ValueError):
    """Base class for rejected batch entries.

    Attributes:
        entry_index: Position of the offending entry in the batch.
        share_index: Position of the offending share inside the entry, or
            None when the problem concerns the entry as a whole.
    """

    def __init__(self, message: str, entry_index: int, share_index: Optional[int] = None) -> None:
        super().__init__(message)
        self.entry_index = entry_index
        self.share_index = share_index


class NegativeGramsError(ValidationError):
    def __init__(self, entry_index: int, grams: float) -> None:
        super().__init__("Grams must not be negative.", entry_index)
        self.grams = grams


class PercentSumMismatchError(ValidationError):
    """The entry's percentages do not total 100 within tolerance."""

    def __init__(self, entry_index: int, actual_sum: float) -> None:
        super().__init__(
            f"Percentages for a yarn do not equal 100% (but {actual_sum:.2f}%).", entry_index
        )
        self.actual_sum = actual_sum


class EmptyFiberNameError(ValidationError):
    def __init__(self, entry_index: int, share_index: int) -> None:
        super().__init__("Fiber name must not be empty.", entry_index, share_index)


class NegativePercentError(ValidationError):
    def __init__(self, entry_index: int, share_index: int, percentage: float) -> None:
        super().__init__("Percentage must not be negative.", entry_index, share_index)
        self.percentage = percentage


@dataclass(frozen=True)
class EmptyTotal:
    """Signal returned when the batch's total weight is zero."""

    total_weight: float = 0.0

    def __bool__(self) -> bool:
        return False


EMPTY_TOTAL = EmptyTotal()
