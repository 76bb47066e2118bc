"""Wildcard pattern matching for account and currency names."""

from econadmin.matching.pattern_matcher import PatternMatcher, PatternShape, fold

__all__ = [
    "PatternMatcher",
    "PatternShape",
    "fold",
]
