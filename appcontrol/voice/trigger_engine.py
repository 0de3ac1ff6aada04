#!/usr/bin/env python3
"""Trigger detection engine.

Resolves a transcribed phrase to at most one trigger. The longest keyword
contained in the normalized phrase wins across all categories. Containment is
a plain substring test, so "down" also matches inside "downtown".
"""

import threading
from collections.abc import Iterable, Mapping, Sequence

from appcontrol.core.logging_utils import setup_logger
from appcontrol.voice.normalizer import normalize
from appcontrol.voice.trigger_table import TriggerTable
from appcontrol.voice.triggers import DEFAULT_TRIGGER_KEYWORDS, Category, TriggerResult

logger = setup_logger(__name__)


def find_longest_match(phrase: str, keywords: Iterable[str]) -> str:
    """Return the longest keyword contained in phrase, or "" if none is.

    Among keywords of equal length the first one wins.
    """
    best_match = ""
    for keyword in keywords:
        if len(keyword) > len(best_match) and keyword in phrase:
            best_match = keyword
    return best_match


class TriggerEngine:
    """Owns the trigger table and classifies phrases against it.

    Registration and classification may be called from different threads.
    The table is swapped as a whole under a lock, so classify() always sees
    either the old or the new dynamic keywords, never a mix.

    Ties between equal-length matches in different categories go to fixed
    categories before dynamic, then to the alphabetically first category name.
    """

    def __init__(self, fixed_keywords: Mapping[Category | str, Sequence[str]] | None = None):
        """Initialize engine.

        Args:
            fixed_keywords: Category (or name) -> keywords for every fixed
                category. Defaults to DEFAULT_TRIGGER_KEYWORDS.

        Raises:
            TriggerConfigError: If a fixed category is missing or has no keywords
        """
        if fixed_keywords is None:
            fixed_keywords = DEFAULT_TRIGGER_KEYWORDS
        self._table = TriggerTable.from_fixed_keywords(fixed_keywords)
        self._lock = threading.Lock()

        self._classifications = 0
        self._matches = 0
        self._registrations = 0

        logger.info(f"Trigger engine initialized: {self._table!r}")

    def register_dynamic_keywords(self, titles: Iterable[str]):
        """Replace the dynamic keywords with the normalized titles.

        Not additive: titles from earlier calls are dropped.

        Args:
            titles: Addressable item titles

        Raises:
            TypeError: If titles is a single string
        """
        if isinstance(titles, str):
            raise TypeError("Titles must be a list of strings, not a single string")
        titles = list(titles)
        with self._lock:
            self._table = self._table.with_dynamic(titles)
            self._registrations += 1
        logger.info(f"Registered {len(titles)} dynamic keywords")

    def classify(self, raw_phrase: str) -> TriggerResult:
        """Classify a transcribed phrase.

        Never raises; a phrase without a known keyword yields the no-match result.

        Args:
            raw_phrase: Text from the speech-to-text stage

        Returns:
            TriggerResult for the longest contained keyword
        """
        with self._lock:
            table = self._table

        phrase = normalize(raw_phrase)
        best_category = Category.NONE
        best_keyword = ""

        for category in table.match_order():
            match = find_longest_match(phrase, table.keywords(category))
            if len(match) > len(best_keyword):
                best_category = category
                best_keyword = match

        if best_keyword:
            result = TriggerResult(category=best_category, keyword=best_keyword, matched=True)
        else:
            result = TriggerResult.no_match()

        with self._lock:
            self._classifications += 1
            if result.matched:
                self._matches += 1

        logger.debug(f"Classified {phrase!r} -> {result.category}:{result.keyword!r}")
        return result

    def keywords(self, category: Category | str) -> tuple[str, ...]:
        """Current keywords of a category (empty for 'none' and unknown names)."""
        with self._lock:
            table = self._table
        try:
            return table.keywords(Category(category))
        except ValueError:
            return ()

    def get_metrics(self) -> dict[str, int]:
        """Get engine counters.

        Returns:
            Dictionary of metrics
        """
        with self._lock:
            return {
                "classifications": self._classifications,
                "matches": self._matches,
                "registrations": self._registrations,
                "dynamic_keywords": len(self._table.keywords(Category.DYNAMIC)),
            }
