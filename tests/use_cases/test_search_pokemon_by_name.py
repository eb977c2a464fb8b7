"""Test suite for SearchPokemonByName use case."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import Mock

import pytest

from pokedex_lite.adapters.in_memory_pokemon_repository import InMemoryPokemonRepository
from pokedex_lite.domain.pokemon import Pokemon
from pokedex_lite.ports.pokemon_repository import PokemonRepository
from pokedex_lite.use_cases.search_pokemon_by_name import (
    MAX_NAME_TERMS,
    MAX_RESULTS,
    SearchPokemonByName,
    SearchPokemonByNameRequest,
    normalize_name_terms,
)


@pytest.fixture()
def mock_repository() -> Mock:
    repository = Mock(spec=PokemonRepository)
    repository.find_by_name_fragments.return_value = []
    return repository


# ==============================================================================
# Term Normalization
# ==============================================================================


def test_terms_are_trimmed_and_blanks_dropped() -> None:
    assert normalize_name_terms([" pika ", "", "  ", "char"]) == ["pika", "char"]


def test_terms_beyond_limit_are_ignored() -> None:
    names = [f"n{i}" for i in range(15)]

    assert normalize_name_terms(names) == names[:MAX_NAME_TERMS]


def test_limit_applies_before_dropping_blanks() -> None:
    names = [""] * 10 + ["pika"]

    assert normalize_name_terms(names) == []


def test_no_terms() -> None:
    assert normalize_name_terms([]) == []
    assert normalize_name_terms(None) == []


# ==============================================================================
# Execution
# ==============================================================================


def test_delegates_with_result_limit(mock_repository: Mock) -> None:
    SearchPokemonByName(mock_repository).execute(
        SearchPokemonByNameRequest(names=["pika", "char"])
    )

    mock_repository.find_by_name_fragments.assert_called_once_with(
        ["pika", "char"], limit=MAX_RESULTS
    )


def test_only_first_ten_names_reach_repository(mock_repository: Mock) -> None:
    names = [f"name{i}" for i in range(12)]

    SearchPokemonByName(mock_repository).execute(SearchPokemonByNameRequest(names=names))

    fragments = mock_repository.find_by_name_fragments.call_args[0][0]
    assert fragments == names[:10]


@pytest.mark.parametrize("names", [[], ["", "  "]])
def test_no_usable_names_skips_repository(mock_repository: Mock, names: list[str]) -> None:
    result = SearchPokemonByName(mock_repository).execute(SearchPokemonByNameRequest(names=names))

    assert result.pokemon == []
    mock_repository.find_by_name_fragments.assert_not_called()


def test_results_ordered_by_id_and_capped(make_pokemon: Callable[..., Pokemon]) -> None:
    repository = InMemoryPokemonRepository(
        [make_pokemon(id=i, name=f"Mon{i:02d}") for i in range(30, 0, -1)]
    )

    result = SearchPokemonByName(repository).execute(SearchPokemonByNameRequest(names=["mon"]))

    assert [p.id for p in result.pokemon] == list(range(1, 21))
