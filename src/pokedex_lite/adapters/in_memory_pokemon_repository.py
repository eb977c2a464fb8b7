from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import count

from pokedex_lite.domain.errors import ConflictError
from pokedex_lite.domain.pokemon import NewPokemon, Pokemon
from pokedex_lite.ports.pokemon_repository import PokemonRepository


class InMemoryPokemonRepository(PokemonRepository):
    """
    Canonical contract implementation for tests.

    - Stores entries in insertion order
    - Assigns increasing ids, never reused
    - Enforces slug uniqueness like the database constraint does
    - Applies the orderings declared by the port
    """

    def __init__(self, pokemon: Iterable[Pokemon] = ()) -> None:
        self._pokemon: list[Pokemon] = list(pokemon)
        next_id = max((p.id for p in self._pokemon), default=0) + 1
        self._ids = count(next_id)

    def add(self, pokemon: NewPokemon) -> Pokemon:
        if any(existing.slug == pokemon.slug for existing in self._pokemon):
            raise ConflictError(
                f"Pokemon with slug '{pokemon.slug}' already exists",
                field="slug",
                value=pokemon.slug,
            )

        stored = pokemon.with_id(next(self._ids))
        self._pokemon.append(stored)
        return stored

    def list_all(self) -> list[Pokemon]:
        return sorted(self._pokemon, key=_by_name)

    def find_by_name_fragments(self, fragments: Sequence[str], limit: int) -> list[Pokemon]:
        # Trust that UseCase has validated inputs (contract programming)
        lowered = [fragment.lower() for fragment in fragments]
        matches = [
            pokemon
            for pokemon in self._pokemon
            if any(fragment in pokemon.name.lower() for fragment in lowered)
        ]
        return sorted(matches, key=lambda pokemon: pokemon.id)[:limit]

    def find_by_types(self, types: Sequence[str]) -> list[Pokemon]:
        wanted = set(types)
        matches = [
            pokemon
            for pokemon in self._pokemon
            if wanted.intersection(pokemon.types)
        ]
        return sorted(matches, key=_by_name)

    def get_by_slug(self, slug: str) -> Pokemon | None:
        return next((p for p in self._pokemon if p.slug == slug), None)


def _by_name(pokemon: Pokemon) -> tuple[str, int]:
    return (pokemon.name, pokemon.id)
