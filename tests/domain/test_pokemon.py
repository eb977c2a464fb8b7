"""Tests for the Pokemon entities, slug derivation and field validation."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from pokedex_lite.domain.errors import ValidationError
from pokedex_lite.domain.pokemon import (
    NewPokemon,
    Pokemon,
    derive_slug,
    is_valid_sprite_url,
    split_tags,
)


# ==============================================================================
# Slug derivation
# ==============================================================================


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Pikachu", "pikachu"),
        ("Tapu Koko", "tapu-koko"),
        ("Tapu   Koko", "tapu-koko"),
        ("  Mime Jr  ", "mime-jr"),
        ("Porygon\tZ", "porygon-z"),
    ],
)
def test_derive_slug(name: str, expected: str) -> None:
    assert derive_slug(name) == expected


# ==============================================================================
# Comma-separated tags
# ==============================================================================


def test_split_tags_trims_and_drops_blanks() -> None:
    assert split_tags(" fire, flying ,, ") == ("fire", "flying")


def test_split_tags_empty_input() -> None:
    assert split_tags("") == ()
    assert split_tags(None) == ()


def test_split_tags_preserves_order() -> None:
    assert split_tags("water,ice,psychic") == ("water", "ice", "psychic")


# ==============================================================================
# Sprite URL
# ==============================================================================


@pytest.mark.parametrize(
    "url",
    [
        "https://img.pokemondb.net/sprites/home/normal/pikachu.png",
        "http://localhost:8000/sprite.png",
    ],
)
def test_valid_sprite_urls(url: str) -> None:
    assert is_valid_sprite_url(url)


@pytest.mark.parametrize(
    "url",
    ["", "pikachu.png", "ftp://example.com/p.png", "https://", "http://[::1"],
)
def test_invalid_sprite_urls(url: str) -> None:
    assert not is_valid_sprite_url(url)


# ==============================================================================
# Weakness display
# ==============================================================================


def test_shows_weakness_only_for_non_empty(make_pokemon: Callable[..., Pokemon]) -> None:
    assert make_pokemon(weakness=("ground",)).shows_weakness is True
    assert make_pokemon(weakness=()).shows_weakness is False
    assert make_pokemon(weakness=None).shows_weakness is False


def test_missing_and_empty_weakness_are_distinct(make_pokemon: Callable[..., Pokemon]) -> None:
    assert make_pokemon(weakness=None).weakness is None
    assert make_pokemon(weakness=()).weakness == ()


# ==============================================================================
# Normalization
# ==============================================================================


def test_normalized_derives_slug_when_missing(
    make_new_pokemon: Callable[..., NewPokemon],
) -> None:
    pokemon = make_new_pokemon(name="  Tapu Koko ", slug=None).normalized()

    assert pokemon.name == "Tapu Koko"
    assert pokemon.slug == "tapu-koko"


def test_normalized_derives_slug_when_blank(
    make_new_pokemon: Callable[..., NewPokemon],
) -> None:
    assert make_new_pokemon(name="Pikachu", slug="  ").normalized().slug == "pikachu"


def test_normalized_keeps_override(make_new_pokemon: Callable[..., NewPokemon]) -> None:
    assert make_new_pokemon(name="Pikachu", slug="pika-1").normalized().slug == "pika-1"


def test_normalized_trims_tags_and_keeps_missing_weakness(
    make_new_pokemon: Callable[..., NewPokemon],
) -> None:
    pokemon = make_new_pokemon(types=(" fire ", "flying"), weakness=None).normalized()

    assert pokemon.types == ("fire", "flying")
    assert pokemon.weakness is None


# ==============================================================================
# Validation
# ==============================================================================


def test_valid_entry_passes(make_new_pokemon: Callable[..., NewPokemon]) -> None:
    make_new_pokemon().normalized().validate()


def test_empty_types_and_weakness_are_allowed(
    make_new_pokemon: Callable[..., NewPokemon],
) -> None:
    make_new_pokemon(types=(), weakness=()).normalized().validate()


@pytest.mark.parametrize("name", ["P", "x" * 51])
def test_name_length_out_of_range(
    make_new_pokemon: Callable[..., NewPokemon], name: str
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_new_pokemon(name=name, slug="valid-slug").normalized().validate()

    assert exc_info.value.fields == ["name"]
    assert exc_info.value.errors[0]["code"] == "INVALID_LENGTH"


@pytest.mark.parametrize("name", ["Mu", "x" * 50])
def test_name_length_bounds_inclusive(
    make_new_pokemon: Callable[..., NewPokemon], name: str
) -> None:
    make_new_pokemon(name=name).normalized().validate()


@pytest.mark.parametrize("slug", ["Pikachu", "pika_chu", "mr.-mime", "pika chu"])
def test_slug_must_match_pattern(
    make_new_pokemon: Callable[..., NewPokemon], slug: str
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_new_pokemon(slug=slug).normalized().validate()

    assert exc_info.value.fields == ["slug"]
    assert exc_info.value.errors[0]["code"] == "INVALID_SLUG"


def test_derived_slug_that_breaks_pattern_is_rejected(
    make_new_pokemon: Callable[..., NewPokemon],
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_new_pokemon(name="Mr. Mime").normalized().validate()

    assert exc_info.value.fields == ["slug"]


@pytest.mark.parametrize("description", ["Too short", "x" * 501])
def test_description_length_out_of_range(
    make_new_pokemon: Callable[..., NewPokemon], description: str
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_new_pokemon(description=description).normalized().validate()

    assert exc_info.value.fields == ["description"]


def test_invalid_sprite(make_new_pokemon: Callable[..., NewPokemon]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_new_pokemon(sprite="not a url").normalized().validate()

    assert exc_info.value.fields == ["sprite"]
    assert exc_info.value.errors[0]["code"] == "INVALID_URL"


def test_blank_category_and_abilities(make_new_pokemon: Callable[..., NewPokemon]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_new_pokemon(category=" ", abilities="").normalized().validate()

    assert exc_info.value.fields == ["category", "abilities"]


def test_blank_tags_rejected(make_new_pokemon: Callable[..., NewPokemon]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_new_pokemon(types=("fire", " "), weakness=("",)).normalized().validate()

    assert exc_info.value.fields == ["types", "weakness"]


def test_reports_every_failing_field(make_new_pokemon: Callable[..., NewPokemon]) -> None:
    with pytest.raises(ValidationError) as exc_info:
        make_new_pokemon(
            name="P",
            slug="Bad Slug",
            description="short",
            sprite="nope",
        ).normalized().validate()

    assert exc_info.value.fields == ["name", "slug", "description", "sprite"]


# ==============================================================================
# Identity
# ==============================================================================


def test_with_id_builds_stored_entity(make_new_pokemon: Callable[..., NewPokemon]) -> None:
    new = make_new_pokemon(name="Tapu Koko").normalized()

    stored = new.with_id(7)

    assert isinstance(stored, Pokemon)
    assert stored.id == 7
    assert stored.slug == "tapu-koko"
    assert stored.types == new.types
    assert stored.weakness == new.weakness
