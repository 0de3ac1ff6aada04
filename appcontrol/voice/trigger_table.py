#!/usr/bin/env python3
"""Immutable keyword table snapshots.

A table is never modified after construction. Replacing the dynamic titles
produces a new table, so a reader holding a snapshot always sees a complete
keyword set.
"""

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType

from appcontrol.voice.normalizer import normalize
from appcontrol.voice.triggers import FIXED_CATEGORIES, Category, TriggerConfigError


def _ordered_unique(keywords: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(keywords))


def _coerce_category(key: Category | str) -> Category:
    if isinstance(key, Category):
        return key
    try:
        return Category(str(key).strip().lower())
    except ValueError:
        raise TriggerConfigError(f"Unknown trigger category: {key!r}") from None


class TriggerTable:
    """Category -> keywords mapping used by the matcher."""

    def __init__(self, keywords: Mapping[Category, tuple[str, ...]]):
        self._keywords = MappingProxyType(dict(keywords))

    @classmethod
    def from_fixed_keywords(cls, fixed_keywords: Mapping[Category | str, Sequence[str]]) -> "TriggerTable":
        """Build a table from caller-supplied fixed keywords.

        Every fixed category needs at least one keyword that survives
        normalization. The dynamic category starts out empty.

        Args:
            fixed_keywords: Category (or category name) -> keyword list

        Returns:
            New TriggerTable

        Raises:
            TriggerConfigError: If the mapping violates the category invariants
        """
        table: dict[Category, tuple[str, ...]] = {}

        for key, raw_keywords in fixed_keywords.items():
            category = _coerce_category(key)
            if not category.is_fixed:
                raise TriggerConfigError(
                    f"Keywords cannot be configured for the '{category}' category"
                )
            if category in table:
                raise TriggerConfigError(f"Category '{category}' configured more than once")
            if isinstance(raw_keywords, str) or not isinstance(raw_keywords, Iterable):
                raise TriggerConfigError(f"Keywords for '{category}' must be a list of strings")

            keywords = []
            for raw in raw_keywords:
                if not isinstance(raw, str):
                    raise TriggerConfigError(f"Keyword {raw!r} for '{category}' is not a string")
                keyword = normalize(raw)
                if not keyword:
                    raise TriggerConfigError(f"Keyword {raw!r} for '{category}' is empty after cleaning")
                keywords.append(keyword)

            if not keywords:
                raise TriggerConfigError(f"Category '{category}' needs at least one keyword")
            table[category] = _ordered_unique(keywords)

        missing = [str(c) for c in FIXED_CATEGORIES if c not in table]
        if missing:
            raise TriggerConfigError(f"Missing keywords for categories: {', '.join(missing)}")

        table[Category.DYNAMIC] = ()
        return cls(table)

    def with_dynamic(self, titles: Iterable[str]) -> "TriggerTable":
        """Return a copy whose dynamic keywords are exactly the normalized titles."""
        if isinstance(titles, str):
            raise TypeError("Titles must be a list of strings, not a single string")
        table = dict(self._keywords)
        table[Category.DYNAMIC] = _ordered_unique(normalize(title) for title in titles)
        return TriggerTable(table)

    def keywords(self, category: Category) -> tuple[str, ...]:
        return self._keywords.get(category, ())

    def match_order(self) -> list[Category]:
        """Categories in tie-break order: fixed ones by name, then dynamic."""
        return sorted(self._keywords, key=lambda c: (not c.is_fixed, c.value))

    def __contains__(self, category: object) -> bool:
        return category in self._keywords

    def __repr__(self) -> str:
        sizes = ", ".join(f"{c}={len(k)}" for c, k in self._keywords.items())
        return f"TriggerTable({sizes})"
