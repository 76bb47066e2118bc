"""Shared data models for entity lookup and resolution.

This module contains:
- NamedEntity: the read-only shape the matcher and resolver consume
- EntityRef: a plain snapshot of an account or currency
- ResolutionResult: the tagged outcome of resolving a search token
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class NamedEntity(Protocol):
    """Anything with a host-assigned integer ID and a display name."""

    id: int
    name: str | None


class EntityKind(str, Enum):
    """Kind of host entity being looked up."""

    ACCOUNT = "account"
    CURRENCY = "currency"


class EntityRef(BaseModel):
    """Snapshot of a host entity (account or currency)."""

    id: int
    name: str | None = Field(default=None)
    kind: EntityKind | None = Field(default=None)

    @classmethod
    def from_entity(cls, entity: Any, kind: EntityKind | None = None) -> EntityRef:
        """Copy id/name off any object implementing NamedEntity."""
        return cls(id=entity.id, name=entity.name, kind=kind)


class ResolutionStatus(str, Enum):
    """Outcome of a single-entity lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class ResolutionResult:
    """Result of resolving a search token against candidates.

    Attributes:
        status: Which variant this result is.
        token: The normalized token that was resolved.
        entity: The resolved entity when status is FOUND.
        candidates: Capped preview of matches when status is AMBIGUOUS.
        total_matches: Number of candidates that matched, before capping.
        method: Strategy that decided the outcome ('id', 'exact', 'substring', 'none').
    """

    status: ResolutionStatus
    token: str = ""
    entity: Any = None
    candidates: list[Any] = field(default_factory=list)
    total_matches: int = 0
    method: str = "none"

    @classmethod
    def found(cls, entity: Any, token: str, method: str) -> ResolutionResult:
        return cls(
            status=ResolutionStatus.FOUND,
            token=token,
            entity=entity,
            total_matches=1,
            method=method,
        )

    @classmethod
    def not_found(cls, token: str = "", method: str = "none") -> ResolutionResult:
        return cls(status=ResolutionStatus.NOT_FOUND, token=token, method=method)

    @classmethod
    def ambiguous(
        cls,
        candidates: list[Any],
        total_matches: int,
        token: str,
        method: str,
    ) -> ResolutionResult:
        return cls(
            status=ResolutionStatus.AMBIGUOUS,
            token=token,
            candidates=list(candidates),
            total_matches=total_matches,
            method=method,
        )

    @property
    def resolved(self) -> bool:
        """True when exactly one entity was identified."""
        return self.status is ResolutionStatus.FOUND

    @property
    def is_ambiguous(self) -> bool:
        return self.status is ResolutionStatus.AMBIGUOUS

    @property
    def hidden_matches(self) -> int:
        """Matches left out of the candidate preview."""
        return max(0, self.total_matches - len(self.candidates))
