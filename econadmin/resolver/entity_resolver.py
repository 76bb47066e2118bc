"""EntityResolver for account and currency lookups.

This module resolves a search token typed by an admin (like "42",
"\"Player One\"" or "gold") to one entity from a candidate list.

Resolution strategies (in order):
1. Numeric ID match
2. Exact name match
3. Substring match

When a substring match is ambiguous, the first candidates are returned
so the caller can ask the admin to be more specific.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import Any

from econadmin.matching.pattern_matcher import PatternMatcher, fold
from econadmin.schemas import ResolutionResult

logger = logging.getLogger(__name__)

# Most candidates carried by an ambiguous result
AMBIGUOUS_PREVIEW_LIMIT = 10

_NUMERIC_TOKEN = re.compile(r"[+-]?[0-9]+")


class EntityResolver:
    """Resolves search tokens to entities.

    The resolver holds no state between calls. Candidates are read, never
    modified, and keep the order the caller supplied them in.

    Usage:
        resolver = EntityResolver()
        result = resolver.resolve("gold", currencies)
        if result.resolved:
            currency = result.entity
        elif result.is_ambiguous:
            candidates = result.candidates
    """

    def __init__(self, preview_limit: int = AMBIGUOUS_PREVIEW_LIMIT) -> None:
        """Initialize EntityResolver.

        Args:
            preview_limit: Most candidates kept on an ambiguous result.
        """
        self.preview_limit = min(preview_limit, AMBIGUOUS_PREVIEW_LIMIT)

    @staticmethod
    def normalize_token(token: str | None) -> str:
        """Trim whitespace and one surrounding pair of double quotes."""
        if token is None:
            return ""
        token = token.strip()
        if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
            token = token[1:-1]
        return token.strip()

    def resolve(self, token: str | None, candidates: Sequence[Any]) -> ResolutionResult:
        """Resolve a token to a single entity.

        Args:
            token: The admin's search text.
            candidates: Entities exposing ``id`` and ``name``.

        Returns:
            ResolutionResult describing what was found.

        Raises:
            ValueError: If candidates is None.
        """
        if candidates is None:
            raise ValueError("candidates must not be None")

        normalized = self.normalize_token(token)
        if not normalized:
            return ResolutionResult.not_found(token=normalized)

        entities = [c for c in candidates if c is not None]

        if _NUMERIC_TOKEN.fullmatch(normalized):
            result = self._try_id(normalized, entities)
        else:
            result = self._try_exact(normalized, entities)
            if not result.resolved:
                result = self._try_substring(normalized, entities)

        logger.debug(
            "Resolved %r via %s: %s (%d match(es))",
            normalized,
            result.method,
            result.status.value,
            result.total_matches,
        )
        return result

    def _try_id(self, token: str, entities: list[Any]) -> ResolutionResult:
        """Look up by ID. A numeric token never falls through to name matching."""
        entity_id = int(token)
        for entity in entities:
            if entity.id == entity_id:
                return ResolutionResult.found(entity, token=token, method="id")
        return ResolutionResult.not_found(token=token, method="id")

    def _try_exact(self, token: str, entities: list[Any]) -> ResolutionResult:
        """First exact name match wins, even if names repeat."""
        for entity in entities:
            if entity.name is not None and PatternMatcher.names_equal(entity.name, token):
                return ResolutionResult.found(entity, token=token, method="exact")
        return ResolutionResult.not_found(token=token, method="exact")

    def _try_substring(self, token: str, entities: list[Any]) -> ResolutionResult:
        """Match names containing the token anywhere."""
        needle = fold(token)
        matched = [e for e in entities if e.name and needle in fold(e.name)]

        if not matched:
            return ResolutionResult.not_found(token=token, method="substring")

        if len(matched) == 1:
            return ResolutionResult.found(matched[0], token=token, method="substring")

        return ResolutionResult.ambiguous(
            candidates=matched[: self.preview_limit],
            total_matches=len(matched),
            token=token,
            method="substring",
        )
