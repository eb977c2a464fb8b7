from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from pokedex_lite.domain.browse import PAGE_SIZE, CatalogPage, collect_types, filter_and_paginate
from pokedex_lite.ports.pokemon_repository import PokemonRepository


@dataclass(frozen=True, slots=True)
class BrowseCatalogRequest:
    name: str | None = None
    types: Sequence[str] = field(default_factory=tuple)
    page: int = 1


@dataclass(frozen=True, slots=True)
class BrowseCatalogResponse:
    page: CatalogPage
    available_types: list[str]


class BrowseCatalog:
    """
    Collection view: full listing narrowed and paged in memory.

    Fetches the whole catalog (same ordering as ListPokemon) and runs the
    pure filter/paginate step over it. available_types is computed from the
    unfiltered listing so that filter choices do not disappear while browsing.
    """

    def __init__(self, pokemon_repository: PokemonRepository, page_size: int = PAGE_SIZE) -> None:
        self._repository = pokemon_repository
        self._page_size = page_size

    def execute(self, request: BrowseCatalogRequest) -> BrowseCatalogResponse:
        everything = self._repository.list_all()

        page = filter_and_paginate(
            everything,
            name_filter=request.name,
            type_filter=request.types,
            page=request.page,
            page_size=self._page_size,
        )
        return BrowseCatalogResponse(page=page, available_types=collect_types(everything))
