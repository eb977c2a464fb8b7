from __future__ import annotations

from collections.abc import Sequence

from pokedex_lite.domain.pokemon import NewPokemon, Pokemon
from pokedex_lite.entrypoints.http.dtos.pokemon import (
    CatalogPageResponseDTO,
    PokemonCreateDTO,
    PokemonListResponseDTO,
    PokemonResponseDTO,
)
from pokedex_lite.use_cases.browse_catalog import BrowseCatalogResponse
from pokedex_lite.use_cases.create_pokemon import CreatePokemonRequest


class PokemonMapper:
    """Maps between REST DTOs and domain models for the pokemon catalog."""

    @staticmethod
    def to_domain_request(dto: PokemonCreateDTO) -> CreatePokemonRequest:
        """
        Converts the create payload to a domain request.

        Lists become tuples; an absent weakness stays None so it is not
        confused with "no known weaknesses".
        """
        return CreatePokemonRequest(
            pokemon=NewPokemon(
                name=dto.name,
                slug=dto.slug,
                types=tuple(dto.types),
                category=dto.category,
                abilities=dto.abilities,
                weakness=tuple(dto.weakness) if dto.weakness is not None else None,
                description=dto.description,
                sprite=dto.sprite,
            )
        )

    @staticmethod
    def to_pokemon_response(pokemon: Pokemon) -> PokemonResponseDTO:
        return PokemonResponseDTO(
            id=pokemon.id,
            name=pokemon.name,
            slug=pokemon.slug,
            types=list(pokemon.types),
            category=pokemon.category,
            abilities=pokemon.abilities,
            weakness=list(pokemon.weakness) if pokemon.weakness is not None else None,
            description=pokemon.description,
            sprite=pokemon.sprite,
        )

    @staticmethod
    def to_list_response(pokemon: Sequence[Pokemon]) -> PokemonListResponseDTO:
        return PokemonListResponseDTO(
            pokemon=[PokemonMapper.to_pokemon_response(p) for p in pokemon],
            total=len(pokemon),
        )

    @staticmethod
    def to_page_response(result: BrowseCatalogResponse) -> CatalogPageResponseDTO:
        """
        Converts a browse result to the paged REST payload.

        Args:
            result: Domain browse result (page slice plus available types)

        Returns:
            CatalogPageResponseDTO with pager metadata
        """
        page = result.page
        return CatalogPageResponseDTO(
            pokemon=[PokemonMapper.to_pokemon_response(p) for p in page.items],
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
            filtered_count=page.filtered_count,
            has_previous=page.has_previous,
            has_next=page.has_next,
            page_window=page.page_window(),
            available_types=result.available_types,
        )
