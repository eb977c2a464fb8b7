from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pokedex_lite.domain.pokemon import Pokemon
from pokedex_lite.ports.pokemon_repository import PokemonRepository


@dataclass(frozen=True, slots=True)
class GetPokemonByTypesRequest:
    types: Sequence[str]


@dataclass(frozen=True, slots=True)
class GetPokemonByTypesResponse:
    pokemon: list[Pokemon]


class GetPokemonByTypes:
    """
    Entries having at least one of the requested types.

    Type membership is exact (case-sensitive). An empty request returns
    an empty result without querying the repository.
    """

    def __init__(self, pokemon_repository: PokemonRepository) -> None:
        self._repository = pokemon_repository

    def execute(self, request: GetPokemonByTypesRequest) -> GetPokemonByTypesResponse:
        # Duplicates are harmless for an overlap test; drop them, keep order
        types = list(dict.fromkeys(request.types or ()))
        if not types:
            return GetPokemonByTypesResponse(pokemon=[])

        return GetPokemonByTypesResponse(pokemon=self._repository.find_by_types(types))
