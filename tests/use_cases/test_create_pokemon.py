"""Test suite for CreatePokemon use case."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import Mock

import pytest

from pokedex_lite.adapters.in_memory_pokemon_repository import InMemoryPokemonRepository
from pokedex_lite.domain.errors import ConflictError, ValidationError
from pokedex_lite.domain.pokemon import NewPokemon
from pokedex_lite.ports.pokemon_repository import PokemonRepository
from pokedex_lite.use_cases.create_pokemon import (
    CreatePokemon,
    CreatePokemonRequest,
    CreatePokemonResponse,
)
from pokedex_lite.use_cases.get_pokemon_by_slug import GetPokemonBySlug, GetPokemonBySlugRequest


@pytest.fixture()
def mock_repository() -> Mock:
    """Mock PokemonRepository."""
    return Mock(spec=PokemonRepository)


# ==============================================================================
# Happy Path Tests
# ==============================================================================


def test_execute_stores_normalized_entry(
    mock_repository: Mock, make_new_pokemon: Callable[..., NewPokemon]
) -> None:
    """Repository receives the trimmed entry with its derived slug."""
    mock_repository.add.side_effect = lambda new: new.with_id(1)
    use_case = CreatePokemon(mock_repository)

    result = use_case.execute(CreatePokemonRequest(pokemon=make_new_pokemon(name=" Tapu Koko ")))

    assert isinstance(result, CreatePokemonResponse)
    stored_input = mock_repository.add.call_args[0][0]
    assert stored_input.name == "Tapu Koko"
    assert stored_input.slug == "tapu-koko"
    assert result.pokemon.id == 1


def test_created_entry_is_retrievable_by_slug(
    make_new_pokemon: Callable[..., NewPokemon],
) -> None:
    repository = InMemoryPokemonRepository()
    created = CreatePokemon(repository).execute(
        CreatePokemonRequest(pokemon=make_new_pokemon(name="Squirtle"))
    )

    found = GetPokemonBySlug(repository).execute(
        GetPokemonBySlugRequest(slug=created.pokemon.slug)
    )

    assert found.pokemon == created.pokemon


# ==============================================================================
# Validation Tests
# ==============================================================================


def test_invalid_entry_never_reaches_repository(
    mock_repository: Mock, make_new_pokemon: Callable[..., NewPokemon]
) -> None:
    use_case = CreatePokemon(mock_repository)

    with pytest.raises(ValidationError) as exc_info:
        use_case.execute(CreatePokemonRequest(pokemon=make_new_pokemon(sprite="not a url")))

    assert exc_info.value.fields == ["sprite"]
    mock_repository.add.assert_not_called()


def test_blank_slug_override_falls_back_to_derived(
    mock_repository: Mock, make_new_pokemon: Callable[..., NewPokemon]
) -> None:
    mock_repository.add.side_effect = lambda new: new.with_id(1)

    result = CreatePokemon(mock_repository).execute(
        CreatePokemonRequest(pokemon=make_new_pokemon(name="Pikachu", slug="   "))
    )

    assert result.pokemon.slug == "pikachu"


# ==============================================================================
# Conflict Tests
# ==============================================================================


def test_duplicate_slug_conflicts(make_new_pokemon: Callable[..., NewPokemon]) -> None:
    use_case = CreatePokemon(InMemoryPokemonRepository())
    use_case.execute(CreatePokemonRequest(pokemon=make_new_pokemon()))

    with pytest.raises(ConflictError) as exc_info:
        use_case.execute(CreatePokemonRequest(pokemon=make_new_pokemon()))

    assert exc_info.value.field == "slug"


def test_repository_conflict_propagates(
    mock_repository: Mock, make_new_pokemon: Callable[..., NewPokemon]
) -> None:
    mock_repository.add.side_effect = ConflictError("taken", field="slug")

    with pytest.raises(ConflictError):
        CreatePokemon(mock_repository).execute(CreatePokemonRequest(pokemon=make_new_pokemon()))
