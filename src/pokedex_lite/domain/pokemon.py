from __future__ import annotations

import re
from dataclasses import dataclass, replace
from urllib.parse import urlparse

from pokedex_lite.domain.errors import ValidationError


NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500

SLUG_PATTERN = re.compile(r"[a-z0-9-]+")
_WHITESPACE_RUN = re.compile(r"\s+")

ALLOWED_SPRITE_SCHEMES = {"http", "https"}


def derive_slug(name: str) -> str:
    """Default slug for a name: lowercased, whitespace runs replaced by hyphens."""
    return _WHITESPACE_RUN.sub("-", name.strip().lower())


def split_tags(text: str | None) -> tuple[str, ...]:
    """Split comma-separated text ("fire, flying") into trimmed, non-empty tags."""
    if not text:
        return ()
    return tuple(tag.strip() for tag in text.split(",") if tag.strip())


def is_valid_sprite_url(value: str) -> bool:
    try:
        parsed = urlparse(value)
    except ValueError:  # e.g. unbalanced IPv6 brackets
        return False
    return parsed.scheme in ALLOWED_SPRITE_SCHEMES and bool(parsed.hostname)


@dataclass(frozen=True, slots=True)
class Pokemon:
    id: int
    name: str
    slug: str
    types: tuple[str, ...]
    category: str
    abilities: str
    description: str
    sprite: str
    weakness: tuple[str, ...] | None = None

    @property
    def shows_weakness(self) -> bool:
        """Absent and empty weakness both hide the weakness section."""
        return bool(self.weakness)


@dataclass(frozen=True, slots=True)
class NewPokemon:
    """A Pokemon that has not been stored yet (no id)."""

    name: str
    types: tuple[str, ...]
    category: str
    abilities: str
    description: str
    sprite: str
    weakness: tuple[str, ...] | None = None
    slug: str | None = None

    def normalized(self) -> NewPokemon:
        """
        Trim text fields and fill in the default slug.

        A caller-supplied slug is kept as-is (only trimmed) so that an
        invalid override is reported instead of silently rewritten.
        """
        name = self.name.strip()
        slug = (self.slug or "").strip() or derive_slug(name)
        return replace(
            self,
            name=name,
            slug=slug,
            types=tuple(tag.strip() for tag in self.types),
            category=self.category.strip(),
            abilities=self.abilities.strip(),
            description=self.description.strip(),
            sprite=self.sprite.strip(),
            weakness=(
                tuple(tag.strip() for tag in self.weakness)
                if self.weakness is not None
                else None
            ),
        )

    def validate(self) -> None:
        """
        Validate every field and report all failures at once.

        Expects a normalized instance (see ``normalized``).

        Raises:
            ValidationError: With one field-level error per failing field
        """
        errors: list[dict[str, str]] = []

        if not NAME_MIN_LENGTH <= len(self.name) <= NAME_MAX_LENGTH:
            errors.append(
                {
                    "field": "name",
                    "message": (
                        f"Must be between {NAME_MIN_LENGTH} and "
                        f"{NAME_MAX_LENGTH} characters"
                    ),
                    "code": "INVALID_LENGTH",
                }
            )

        if not self.slug or not SLUG_PATTERN.fullmatch(self.slug):
            errors.append(
                {
                    "field": "slug",
                    "message": "Must contain only lowercase letters, digits and hyphens",
                    "code": "INVALID_SLUG",
                }
            )

        if any(not tag for tag in self.types):
            errors.append(
                {
                    "field": "types",
                    "message": "Types cannot contain empty values",
                    "code": "EMPTY_VALUE",
                }
            )

        if self.weakness is not None and any(not tag for tag in self.weakness):
            errors.append(
                {
                    "field": "weakness",
                    "message": "Weakness cannot contain empty values",
                    "code": "EMPTY_VALUE",
                }
            )

        for field_name in ("category", "abilities"):
            if not getattr(self, field_name):
                errors.append(
                    {
                        "field": field_name,
                        "message": "Must not be empty",
                        "code": "REQUIRED",
                    }
                )

        if not DESCRIPTION_MIN_LENGTH <= len(self.description) <= DESCRIPTION_MAX_LENGTH:
            errors.append(
                {
                    "field": "description",
                    "message": (
                        f"Must be between {DESCRIPTION_MIN_LENGTH} and "
                        f"{DESCRIPTION_MAX_LENGTH} characters"
                    ),
                    "code": "INVALID_LENGTH",
                }
            )

        if not is_valid_sprite_url(self.sprite):
            errors.append(
                {
                    "field": "sprite",
                    "message": "Must be a valid http(s) URL",
                    "code": "INVALID_URL",
                }
            )

        if errors:
            raise ValidationError(errors=errors)

    def with_id(self, pokemon_id: int) -> Pokemon:
        """Build the stored entity once the store has assigned an id."""
        return Pokemon(
            id=pokemon_id,
            name=self.name,
            slug=self.slug or derive_slug(self.name),
            types=self.types,
            category=self.category,
            abilities=self.abilities,
            description=self.description,
            sprite=self.sprite,
            weakness=self.weakness,
        )
