"""Create pokemon use case."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pokedex_lite.domain.pokemon import NewPokemon, Pokemon
from pokedex_lite.ports.pokemon_repository import PokemonRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreatePokemonRequest:
    pokemon: NewPokemon


@dataclass(frozen=True, slots=True)
class CreatePokemonResponse:
    pokemon: Pokemon


class CreatePokemon:
    """
    Use case for adding a new entry to the catalog.

    Responsibilities:
    - Normalize input (trim text, derive the default slug)
    - Validate every field before the store is touched
    - Delegate to repository; uniqueness is the store's job
    """

    def __init__(self, pokemon_repository: PokemonRepository) -> None:
        self._repository = pokemon_repository

    def execute(self, request: CreatePokemonRequest) -> CreatePokemonResponse:
        """
        Execute the create use case.

        Args:
            request: Request containing the entry to store

        Returns:
            CreatePokemonResponse with the stored entry (id assigned)

        Raises:
            ValidationError: If any field is invalid (repository not called)
            ConflictError: If the slug is already taken
        """
        new_pokemon = request.pokemon.normalized()
        new_pokemon.validate()

        pokemon = self._repository.add(new_pokemon)

        logger.info(
            "Pokemon created",
            extra={"pokemon_id": pokemon.id, "slug": pokemon.slug},
        )
        return CreatePokemonResponse(pokemon=pokemon)
