from pydantic import BaseModel, ConfigDict, Field


class PokemonCreateDTO(BaseModel):
    """Request payload for creating a pokemon.

    Only shapes are checked here; length, slug and URL rules are domain
    validation and come back as field-level errors.
    """

    name: str = Field(description="Display name, 2-50 characters", examples=["Pikachu"])
    slug: str | None = Field(
        default=None,
        description="URL key ([a-z0-9-]+). Derived from name when omitted",
        examples=["pikachu"],
    )
    types: list[str] = Field(
        default_factory=list,
        description="Type tags, in display order",
        examples=[["electric"]],
    )
    category: str = Field(description="Free-text category", examples=["Mouse"])
    abilities: str = Field(
        description="Abilities as a single string (comma separated by convention)",
        examples=["Static, Lightning Rod"],
    )
    weakness: list[str] | None = Field(
        default=None,
        description="Weakness tags. Omit when unknown",
        examples=[["ground"]],
    )
    description: str = Field(
        description="Description, 10-500 characters",
        examples=["When several of these Pokémon gather, their electricity can build and cause lightning storms."],
    )
    sprite: str = Field(
        description="Image URL (http or https)",
        examples=["https://img.pokemondb.net/sprites/home/normal/pikachu.png"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Pikachu",
                "slug": "pikachu",
                "types": ["electric"],
                "category": "Mouse",
                "abilities": "Static, Lightning Rod",
                "weakness": ["ground"],
                "description": "When several of these Pokémon gather, their electricity can build and cause lightning storms.",
                "sprite": "https://img.pokemondb.net/sprites/home/normal/pikachu.png",
            }
        }
    )


class PokemonResponseDTO(BaseModel):
    id: int
    name: str
    slug: str
    types: list[str]
    category: str
    abilities: str
    weakness: list[str] | None = None
    description: str
    sprite: str


class PokemonListResponseDTO(BaseModel):
    pokemon: list[PokemonResponseDTO]
    total: int


class CatalogPageResponseDTO(BaseModel):
    """One page of the filtered collection plus what a pager needs."""

    pokemon: list[PokemonResponseDTO]
    page: int
    page_size: int
    total_pages: int
    filtered_count: int
    has_previous: bool
    has_next: bool
    page_window: list[int]
    available_types: list[str]
