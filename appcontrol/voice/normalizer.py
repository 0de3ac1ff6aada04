#!/usr/bin/env python3
"""Text normalization applied to transcriptions and keywords before matching."""

import re
import unicodedata

# [text], (text), *text* - non-greedy up to the next closing delimiter
_ANNOTATION_PATTERN = re.compile(r"\[[^\]]*\]|\([^)]*\)|\*[^*]*\*")


def strip_annotations(text: str) -> str:
    """Remove bracketed stage directions such as '[laughs]' or '*pause*'."""
    return _ANNOTATION_PATTERN.sub("", text)


def strip_punctuation(text: str) -> str:
    """Delete every Unicode punctuation character (category P*).

    Characters are deleted, not replaced, so "don't" becomes "dont".
    """
    return "".join(ch for ch in text if not unicodedata.category(ch).startswith("P"))


def normalize(text: str) -> str:
    """Clean a phrase for keyword comparison.

    Annotations are removed first, then the text is trimmed, lowercased and
    stripped of punctuation. Punctuation removal can expose outer whitespace
    ("! hi"), so the result is trimmed once more to keep normalize idempotent.

    Args:
        text: Raw transcription or keyword

    Returns:
        Normalized text, possibly empty

    Examples:
        >>> normalize("(x) Down!")
        'down'
        >>> normalize("[whispering] up")
        'up'
    """
    cleaned = strip_annotations(text)
    cleaned = cleaned.strip()
    cleaned = cleaned.lower()
    cleaned = strip_punctuation(cleaned)
    return cleaned.strip()
