"""Wildcard matching for account and currency names.

Patterns use '*' as the only wildcard. The shape of a pattern is decided
by how many '*' it holds and where they sit:

- no '*'                 exact (case-insensitive) equality
- '*suffix'              name ends with suffix (word boundary tried first)
- 'prefix*'              name starts with prefix (word boundary tried first)
- 'prefix*suffix'        name starts with prefix and ends with suffix
- '*contains*'           name contains the text between the stars
- anything else          stars removed, name contains what is left

Comparisons fold ASCII letters only, so name lengths never change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

WILDCARD = "*"

_ASCII_FOLD = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


def fold(text: str) -> str:
    """Lowercase ASCII letters, leaving every other character untouched."""
    return text.translate(_ASCII_FOLD)


class PatternShape(str, Enum):
    """How a wildcard pattern is interpreted."""

    EXACT = "exact"
    SUFFIX = "suffix"  # *suffix
    PREFIX = "prefix"  # prefix*
    INFIX = "infix"  # prefix*suffix
    CONTAINS = "contains"  # *contains*
    FALLBACK = "fallback"


class PatternMatcher:
    """Matches names against '*' wildcard patterns.

    The matcher is stateless; every method is a pure function of its
    arguments and may be called from any thread.

    Usage:
        PatternMatcher.matches("Player Credit", "*Credit")  # True
        PatternMatcher.match_all("Gold*", currencies)
    """

    @staticmethod
    def classify(pattern: str) -> PatternShape:
        """Classify a pattern by the count and position of its wildcards."""
        star_count = pattern.count(WILDCARD)

        if star_count == 0:
            return PatternShape.EXACT

        if star_count == 1:
            star_pos = pattern.index(WILDCARD)
            if star_pos == 0:
                return PatternShape.SUFFIX
            if star_pos == len(pattern) - 1:
                return PatternShape.PREFIX
            return PatternShape.INFIX

        if star_count == 2 and pattern.startswith(WILDCARD) and pattern.endswith(WILDCARD):
            return PatternShape.CONTAINS

        return PatternShape.FALLBACK

    @staticmethod
    def names_equal(name: str, other: str) -> bool:
        """Case-insensitive equality shared by exact patterns and exact lookups."""
        return fold(name) == fold(other)

    @classmethod
    def matches(cls, name: str, pattern: str) -> bool:
        """Check whether a name matches a wildcard pattern.

        Args:
            name: Candidate name.
            pattern: Pattern that may contain '*'.

        Returns:
            True if the name matches. Never raises for any pattern.
        """
        shape = cls.classify(pattern)
        if shape is PatternShape.EXACT:
            return cls.names_equal(name, pattern)
        return _HANDLERS[shape](fold(name), fold(pattern))

    @classmethod
    def match_all(cls, pattern: str, candidates: Iterable[Any]) -> list[Any]:
        """Filter candidates whose name matches the pattern.

        Candidates keep the order they were supplied in. Missing entries and
        entities without a name are skipped.

        Args:
            pattern: Pattern that may contain '*'.
            candidates: Objects exposing a ``name`` attribute.

        Returns:
            Matching candidates in input order.
        """
        if candidates is None:
            raise ValueError("candidates must not be None")

        matched = [
            candidate
            for candidate in candidates
            if candidate is not None
            and candidate.name
            and cls.matches(candidate.name, pattern)
        ]
        logger.debug(
            "Pattern %r (%s) matched %d candidate(s)",
            pattern,
            cls.classify(pattern).value,
            len(matched),
        )
        return matched


# Handlers receive already-folded name and pattern.


def _match_suffix(name: str, pattern: str) -> bool:
    suffix = pattern[1:].lstrip()
    if name.endswith(" " + suffix):
        return True
    return name.endswith(suffix)


def _match_prefix(name: str, pattern: str) -> bool:
    prefix = pattern[:-1].rstrip()
    if name.startswith(prefix + " "):
        return True
    return name.startswith(prefix)


def _match_infix(name: str, pattern: str) -> bool:
    prefix, suffix = pattern.split(WILDCARD, 1)
    return (
        name.startswith(prefix)
        and name.endswith(suffix)
        and len(name) >= len(prefix) + len(suffix)
    )


def _match_contains(name: str, pattern: str) -> bool:
    return pattern[1:-1].strip() in name


def _match_fallback(name: str, pattern: str) -> bool:
    return pattern.replace(WILDCARD, "").strip() in name


_HANDLERS = {
    PatternShape.SUFFIX: _match_suffix,
    PatternShape.PREFIX: _match_prefix,
    PatternShape.INFIX: _match_infix,
    PatternShape.CONTAINS: _match_contains,
    PatternShape.FALLBACK: _match_fallback,
}
