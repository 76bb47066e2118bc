"""EconAdmin exception definitions.

Lookups that find nothing or too much are ordinary results in the
resolver. The admin layer turns them into these exceptions when an
operation cannot continue without exactly one entity.
"""

from econadmin.schemas import EntityKind, ResolutionResult


class EconAdminError(Exception):
    """Base exception for admin operations."""

    pass


class ResolutionError(EconAdminError):
    """An account or currency token did not resolve to one entity.

    Attributes:
        kind: Whether an account or a currency was being looked up.
        result: The resolver's result, including any candidates.
    """

    def __init__(self, message: str, kind: EntityKind, result: ResolutionResult) -> None:
        super().__init__(message)
        self.kind = kind
        self.result = result

    @property
    def token(self) -> str:
        return self.result.token


class EntityNotFoundError(ResolutionError):
    """No account or currency matched the token."""

    def __init__(self, kind: EntityKind, result: ResolutionResult) -> None:
        super().__init__(
            f"{kind.value.capitalize()} '{result.token}' not found.",
            kind,
            result,
        )


class AmbiguousEntityError(ResolutionError):
    """Several accounts or currencies matched the token."""

    def __init__(self, kind: EntityKind, result: ResolutionResult) -> None:
        super().__init__(
            f"'{result.token}' matches {result.total_matches} {kind.value}s.",
            kind,
            result,
        )


class GlobalCurrencyError(EconAdminError):
    """The global currency or its treasury is not configured or does not exist."""

    pass


class InvalidAmountError(EconAdminError):
    """An amount was missing, zero, or negative where a positive one is required."""

    pass
