from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pokedex_lite.domain.pokemon import Pokemon
from pokedex_lite.ports.pokemon_repository import PokemonRepository


MAX_NAME_TERMS = 10
MAX_RESULTS = 20


@dataclass(frozen=True, slots=True)
class SearchPokemonByNameRequest:
    names: Sequence[str]


@dataclass(frozen=True, slots=True)
class SearchPokemonByNameResponse:
    pokemon: list[Pokemon]


class SearchPokemonByName:
    """
    Name search with OR semantics across several terms.

    - Only the first MAX_NAME_TERMS names are used, the rest are ignored
    - Names are trimmed and blank ones dropped (a blank term would match everything)
    - No usable names: empty result without touching the repository
    - At most MAX_RESULTS entries, id ascending
    """

    def __init__(self, pokemon_repository: PokemonRepository) -> None:
        self._repository = pokemon_repository

    def execute(self, request: SearchPokemonByNameRequest) -> SearchPokemonByNameResponse:
        fragments = normalize_name_terms(request.names)
        if not fragments:
            return SearchPokemonByNameResponse(pokemon=[])

        pokemon = self._repository.find_by_name_fragments(fragments, limit=MAX_RESULTS)
        return SearchPokemonByNameResponse(pokemon=pokemon)


def normalize_name_terms(names: Sequence[str] | None) -> list[str]:
    if not names:
        return []
    terms = (name.strip() for name in list(names)[:MAX_NAME_TERMS])
    return [term for term in terms if term]
