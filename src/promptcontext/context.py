"""Data models for extracted prompt context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class GenericKey(str, Enum):
    """Semantic tags recognised in a prompt.

    The value doubles as the dictionary category name for the tag.
    """

    OBJECT = "object"
    DOCUMENT = "document"
    DESCRIPTION = "description"
    COMPARISON = "comparison"
    LAST = "last"
    NEW = "new"
    ALL = "all"
    PERIOD = "period"
    AMOUNT = "amount"


class Period(str, Enum):
    """Time period referenced by a prompt.

    Member order must match the order of the ``period`` dictionary entry of
    every language: pattern index 0 is DAY, 1 is WEEK, and so on.
    """

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"

    @classmethod
    def nth(cls, index: int) -> Period | None:
        """Return the period at ordinal ``index``, or None when out of range."""
        members = list(cls)
        if 0 <= index < len(members):
            return members[index]
        return None


@dataclass(frozen=True)
class PromptContext:
    """Structured facts extracted from a single prompt.

    Attributes:
        keys: Detected generic keys in ``GenericKey`` order, without duplicates.
        period: Referenced time period, if any.
        amount: Referenced non-negative amount, if any.
    """

    keys: tuple[GenericKey, ...] = ()
    period: Period | None = None
    amount: int | None = None

    def has_key(self, key: GenericKey) -> bool:
        return key in self.keys

    @property
    def is_empty(self) -> bool:
        """True when nothing was recognised."""
        return not self.keys and self.period is None and self.amount is None

    def to_dict(self) -> dict[str, Any]:
        """Convert the context to a JSON-friendly dictionary."""
        return {
            "keys": [key.value for key in self.keys],
            "period": self.period.value if self.period else None,
            "amount": self.amount,
        }
