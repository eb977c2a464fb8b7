#!/usr/bin/env python3
"""
Seed the pokemon table with a fixed starter catalog.

Features:
- Deterministic: same entries, same order, every run
- Idempotent: safe to run multiple times (clears before seeding)
- Goes through the CreatePokemon use case, so every entry is validated

Usage:
    python scripts/seed_pokemon.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from pokedex_lite.adapters.postgres_pokemon_repository import PostgresPokemonRepository
from pokedex_lite.domain.pokemon import NewPokemon, split_tags
from pokedex_lite.infra.db.models.pokemon import PokemonRow
from pokedex_lite.infra.db.session import get_session
from pokedex_lite.use_cases.create_pokemon import CreatePokemon, CreatePokemonRequest


SPRITE_URL = "https://img.pokemondb.net/sprites/home/normal/{slug}.png"

# name, types, category, abilities, weakness, description
STARTERS = [
    (
        "Bulbasaur",
        "grass, poison",
        "Seed",
        "Overgrow",
        "fire, ice, flying, psychic",
        "There is a plant seed on its back right from the day this Pokémon is born.",
    ),
    (
        "Charmander",
        "fire",
        "Lizard",
        "Blaze",
        "water, ground, rock",
        "It has a preference for hot things. When it rains, steam is said to spout from the tip of its tail.",
    ),
    (
        "Squirtle",
        "water",
        "Tiny Turtle",
        "Torrent",
        "grass, electric",
        "When it retracts its long neck into its shell, it squirts out water with vigorous force.",
    ),
    (
        "Pikachu",
        "electric",
        "Mouse",
        "Static",
        "ground",
        "When several of these Pokémon gather, their electricity can build and cause lightning storms.",
    ),
    (
        "Jigglypuff",
        "normal, fairy",
        "Balloon",
        "Cute Charm, Competitive",
        "steel, poison",
        "When its huge eyes waver, it sings a mysteriously soothing melody that lulls its enemies to sleep.",
    ),
    (
        "Gengar",
        "ghost, poison",
        "Shadow",
        "Cursed Body",
        "ground, psychic, ghost, dark",
        "On the night of a full moon, if shadows move on their own and laugh, it must be Gengar's doing.",
    ),
    (
        "Mr. Mime",
        "psychic, fairy",
        "Barrier",
        "Soundproof, Filter",
        "",
        "It is a pantomime expert that can create invisible walls by miming.",
    ),
    (
        "Snorlax",
        "normal",
        "Sleeping",
        "Immunity, Thick Fat",
        "fighting",
        "It is not satisfied unless it eats over 880 pounds of food every day.",
    ),
]

# Names whose default slug would not match [a-z0-9-]+
SLUG_OVERRIDES = {"Mr. Mime": "mr-mime"}


def build_entries() -> list[NewPokemon]:
    entries = []
    for name, types, category, abilities, weakness, description in STARTERS:
        slug = SLUG_OVERRIDES.get(name)
        entries.append(
            NewPokemon(
                name=name,
                slug=slug,
                types=split_tags(types),
                category=category,
                abilities=abilities,
                # Empty text means "no known weaknesses", not "unknown"
                weakness=split_tags(weakness),
                description=description,
                sprite=SPRITE_URL.format(slug=slug or name.lower()),
            )
        )
    return entries


def seed_pokemon() -> None:
    """Clear the table and insert the starter catalog."""
    entries = build_entries()

    print(f"Seeding database with {len(entries)} pokemon...")

    with get_session() as session:
        deleted_count = session.query(PokemonRow).delete()
        print(f"   Deleted {deleted_count} existing pokemon")

        use_case = CreatePokemon(PostgresPokemonRepository(session))
        for entry in entries:
            created = use_case.execute(CreatePokemonRequest(pokemon=entry)).pokemon
            print(f"   #{created.id:03d} {created.name} ({', '.join(created.types)})")

    print(f"Successfully seeded {len(entries)} pokemon!")


if __name__ == "__main__":
    try:
        seed_pokemon()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
