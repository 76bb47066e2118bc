"""Tests for entity snapshots and resolution results."""

from econadmin.schemas import (
    EntityKind,
    EntityRef,
    NamedEntity,
    ResolutionResult,
    ResolutionStatus,
)


class TestEntityRef:
    """Tests for EntityRef snapshots."""

    def test_name_optional(self) -> None:
        """Entities may have no name."""
        ref = EntityRef(id=3)

        assert ref.name is None
        assert ref.kind is None

    def test_implements_named_entity(self) -> None:
        """EntityRef satisfies the NamedEntity protocol."""
        assert isinstance(EntityRef(id=1, name="Gold"), NamedEntity)

    def test_from_entity(self) -> None:
        """from_entity copies id and name off any object."""

        class HostCurrency:
            id = 7
            name = "Player Credit"
            minted_by = "Government"

        ref = EntityRef.from_entity(HostCurrency(), kind=EntityKind.CURRENCY)

        assert ref == EntityRef(id=7, name="Player Credit", kind=EntityKind.CURRENCY)


class TestResolutionResult:
    """Tests for the resolution result variants."""

    def test_found(self) -> None:
        """Found carries the entity and counts one match."""
        entity = EntityRef(id=1, name="Gold")

        result = ResolutionResult.found(entity, token="gold", method="exact")

        assert result.status is ResolutionStatus.FOUND
        assert result.resolved is True
        assert result.is_ambiguous is False
        assert result.entity is entity
        assert result.total_matches == 1
        assert result.candidates == []

    def test_not_found(self) -> None:
        """NotFound carries no entity."""
        result = ResolutionResult.not_found(token="silver", method="substring")

        assert result.resolved is False
        assert result.is_ambiguous is False
        assert result.entity is None
        assert result.total_matches == 0
        assert result.hidden_matches == 0

    def test_not_found_defaults(self) -> None:
        """Blank lookups use method 'none'."""
        result = ResolutionResult.not_found()

        assert result.token == ""
        assert result.method == "none"

    def test_ambiguous(self) -> None:
        """Ambiguous carries a copy of the capped candidates."""
        candidates = [EntityRef(id=i, name=f"Coin {i}") for i in range(3)]

        result = ResolutionResult.ambiguous(
            candidates, total_matches=12, token="coin", method="substring"
        )
        candidates.append(EntityRef(id=99, name="Coin 99"))

        assert result.is_ambiguous is True
        assert result.resolved is False
        assert len(result.candidates) == 3
        assert result.hidden_matches == 9

    def test_status_values(self) -> None:
        """Status values are stable strings."""
        assert ResolutionStatus.FOUND.value == "found"
        assert ResolutionStatus.NOT_FOUND.value == "not_found"
        assert ResolutionStatus.AMBIGUOUS.value == "ambiguous"
