"""Get pokemon by slug use case."""

from __future__ import annotations

from dataclasses import dataclass

from pokedex_lite.domain.errors import NotFoundError, ValidationError
from pokedex_lite.domain.pokemon import Pokemon
from pokedex_lite.ports.pokemon_repository import PokemonRepository


@dataclass(frozen=True, slots=True)
class GetPokemonBySlugRequest:
    """Request to get a pokemon by slug."""

    slug: str


@dataclass(frozen=True, slots=True)
class GetPokemonBySlugResponse:
    """Response containing the requested pokemon."""

    pokemon: Pokemon


class GetPokemonBySlug:
    """
    Use case for the detail view.

    Responsibilities:
    - Reject an empty slug before touching the repository
    - Exact, case-sensitive lookup
    - Raise NotFoundError if no entry has that slug
    """

    def __init__(self, pokemon_repository: PokemonRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            pokemon_repository: Repository for pokemon data access
        """
        self._repository = pokemon_repository

    def execute(self, request: GetPokemonBySlugRequest) -> GetPokemonBySlugResponse:
        """
        Execute the get pokemon by slug use case.

        Args:
            request: Request containing slug

        Returns:
            GetPokemonBySlugResponse with the pokemon

        Raises:
            ValidationError: If slug is empty
            NotFoundError: If no pokemon has the given slug
        """
        if not request.slug or not request.slug.strip():
            raise ValidationError(
                errors=[
                    {
                        "field": "slug",
                        "message": "Slug cannot be empty",
                        "code": "EMPTY_SLUG",
                    }
                ]
            )

        pokemon = self._repository.get_by_slug(request.slug)

        if pokemon is None:
            raise NotFoundError(resource="Pokemon", identifier=request.slug)

        return GetPokemonBySlugResponse(pokemon=pokemon)
