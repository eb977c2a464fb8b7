from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from pokedex_lite.domain.pokemon import NewPokemon, Pokemon


class PokemonRepository(ABC):
    """
    Port for catalog data access.

    Contract (Preconditions):
        - inputs are validated and normalized by the caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Contract (Orderings):
        - list_all / find_by_types: name ascending (code-point order), then id
        - find_by_name_fragments: id ascending

    Contract (Errors):
        - ConflictError when a uniqueness constraint rejects an add
        - TransientStoreError when the store cannot be reached
    """

    @abstractmethod
    def add(self, pokemon: NewPokemon) -> Pokemon:
        """
        Store a new entry and return it with its assigned id.

        Raises:
            ConflictError: If the slug is already taken
        """
        ...

    @abstractmethod
    def list_all(self) -> list[Pokemon]: ...

    @abstractmethod
    def find_by_name_fragments(self, fragments: Sequence[str], limit: int) -> list[Pokemon]:
        """
        Entries whose name contains any fragment, case-insensitively (OR semantics).

        Case is compared with simple lowercasing, the way SQL lower() does,
        so "STRASSE" does not match "Straße".

        Precondition: fragments is non-empty and contains no blank strings.
        """
        ...

    @abstractmethod
    def find_by_types(self, types: Sequence[str]) -> list[Pokemon]:
        """
        Entries sharing at least one type with ``types`` (exact match).

        Precondition: types is non-empty.
        """
        ...

    @abstractmethod
    def get_by_slug(self, slug: str) -> Pokemon | None: ...
