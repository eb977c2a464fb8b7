from __future__ import annotations

from dataclasses import dataclass

from pokedex_lite.domain.pokemon import Pokemon
from pokedex_lite.ports.pokemon_repository import PokemonRepository


@dataclass(frozen=True, slots=True)
class ListPokemonResponse:
    pokemon: list[Pokemon]


class ListPokemon:
    """
    Whole catalog, ordered by name (code-point order) with id as tie-breaker.
    """

    def __init__(self, pokemon_repository: PokemonRepository) -> None:
        self._repository = pokemon_repository

    def execute(self) -> ListPokemonResponse:
        return ListPokemonResponse(pokemon=self._repository.list_all())
