"""
Dependency injection for FastAPI routes.

Database sessions are per-request, never cached. Every use case gets a
fresh repository bound to the request's session.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from pokedex_lite.adapters.postgres_pokemon_repository import PostgresPokemonRepository
from pokedex_lite.infra.db.session import get_session
from pokedex_lite.ports.pokemon_repository import PokemonRepository
from pokedex_lite.use_cases.browse_catalog import BrowseCatalog
from pokedex_lite.use_cases.create_pokemon import CreatePokemon
from pokedex_lite.use_cases.get_pokemon_by_slug import GetPokemonBySlug
from pokedex_lite.use_cases.get_pokemon_by_types import GetPokemonByTypes
from pokedex_lite.use_cases.list_pokemon import ListPokemon
from pokedex_lite.use_cases.search_pokemon_by_name import SearchPokemonByName


def get_db() -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    The underlying get_session() is a context manager that handles:
    - Session creation
    - Auto-commit on success
    - Auto-rollback on exception
    - Session cleanup

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session() as session:
        yield session


def get_pokemon_repository(db: Session = Depends(get_db)) -> PokemonRepository:
    return PostgresPokemonRepository(session=db)


def get_create_pokemon_use_case(
    repository: PokemonRepository = Depends(get_pokemon_repository),
) -> CreatePokemon:
    return CreatePokemon(pokemon_repository=repository)


def get_list_pokemon_use_case(
    repository: PokemonRepository = Depends(get_pokemon_repository),
) -> ListPokemon:
    return ListPokemon(pokemon_repository=repository)


def get_search_pokemon_by_name_use_case(
    repository: PokemonRepository = Depends(get_pokemon_repository),
) -> SearchPokemonByName:
    return SearchPokemonByName(pokemon_repository=repository)


def get_pokemon_by_types_use_case(
    repository: PokemonRepository = Depends(get_pokemon_repository),
) -> GetPokemonByTypes:
    return GetPokemonByTypes(pokemon_repository=repository)


def get_pokemon_by_slug_use_case(
    repository: PokemonRepository = Depends(get_pokemon_repository),
) -> GetPokemonBySlug:
    return GetPokemonBySlug(pokemon_repository=repository)


def get_browse_catalog_use_case(
    repository: PokemonRepository = Depends(get_pokemon_repository),
) -> BrowseCatalog:
    return BrowseCatalog(pokemon_repository=repository)
