#!/usr/bin/env python3
"""Trigger categories and classification results."""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Category",
    "FIXED_CATEGORIES",
    "DEFAULT_TRIGGER_KEYWORDS",
    "TriggerConfigError",
    "TriggerResult",
]


class Category(str, Enum):
    """Command categories a phrase can resolve to.

    Inherits from str so categories compare equal to their config names.
    """

    ADVANCE = "advance"
    RETREAT = "retreat"
    LIKE = "like"
    DISLIKE = "dislike"
    EXPAND = "expand"
    DYNAMIC = "dynamic"  # Item titles, replaced at runtime
    NONE = "none"  # No match

    def __str__(self) -> str:
        return self.value

    @property
    def is_fixed(self) -> bool:
        return self not in (Category.DYNAMIC, Category.NONE)


FIXED_CATEGORIES: tuple[Category, ...] = tuple(c for c in Category if c.is_fixed)

# Vocabulary of the voice-controlled movie list demo
DEFAULT_TRIGGER_KEYWORDS: dict[str, list[str]] = {
    "advance": ["down", "next", "forward"],
    "retreat": ["up", "last", "previous", "back"],
    "like": ["like", "favourite", "heart"],
    "dislike": ["dislike", "dont like", "do not like"],
    "expand": ["expand", "details", "open"],
}


class TriggerConfigError(ValueError):
    """Raised when fixed trigger keywords are missing or malformed."""


@dataclass(frozen=True)
class TriggerResult:
    """Outcome of classifying one phrase."""

    category: Category
    keyword: str
    matched: bool

    def __post_init__(self):
        if self.matched:
            if self.category == Category.NONE or not self.keyword:
                raise ValueError(
                    f"Matched result needs a real category and keyword, got {self.category}:{self.keyword!r}"
                )
        elif self.category != Category.NONE or self.keyword:
            raise ValueError(
                f"Unmatched result must be none:'', got {self.category}:{self.keyword!r}"
            )

    @classmethod
    def no_match(cls) -> "TriggerResult":
        return cls(category=Category.NONE, keyword="", matched=False)

    def to_payload(self) -> dict[str, str]:
        return {"category": self.category.value, "keyword": self.keyword}
