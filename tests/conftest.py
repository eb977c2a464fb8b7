from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pokedex_lite.domain.pokemon import NewPokemon, Pokemon


def build_pokemon(id: int = 1, name: str = "Pikachu", **overrides: Any) -> Pokemon:
    fields: dict[str, Any] = {
        "id": id,
        "name": name,
        "slug": name.lower().replace(" ", "-"),
        "types": ("electric",),
        "category": "Mouse",
        "abilities": "Static",
        "description": "It keeps its tail raised to monitor its surroundings.",
        "sprite": f"https://img.example.com/{name.lower()}.png",
        "weakness": ("ground",),
    }
    fields.update(overrides)
    return Pokemon(**fields)


def build_new_pokemon(name: str = "Pikachu", **overrides: Any) -> NewPokemon:
    fields: dict[str, Any] = {
        "name": name,
        "types": ("electric",),
        "category": "Mouse",
        "abilities": "Static",
        "description": "It keeps its tail raised to monitor its surroundings.",
        "sprite": "https://img.example.com/pikachu.png",
        "weakness": ("ground",),
    }
    fields.update(overrides)
    return NewPokemon(**fields)


@pytest.fixture()
def make_pokemon() -> Callable[..., Pokemon]:
    """Factory for stored Pokemon entities with sensible defaults."""
    return build_pokemon


@pytest.fixture()
def make_new_pokemon() -> Callable[..., NewPokemon]:
    """Factory for valid, not yet stored entries."""
    return build_new_pokemon
