"""PostgreSQL implementation of PokemonRepository."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from pokedex_lite.domain.errors import ConflictError, TransientStoreError
from pokedex_lite.domain.pokemon import NewPokemon, Pokemon
from pokedex_lite.infra.db.models.pokemon import PokemonRow
from pokedex_lite.ports.pokemon_repository import PokemonRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import Select

logger = logging.getLogger(__name__)

UNIQUE_CONSTRAINT_PREFIX = f"uq_{PokemonRow.__tablename__}_"
UNIQUE_COLUMNS = ("slug",)

# Binary collation: code-point order, identical to Python's str ordering
NAME_COLLATION = "C"


class PostgresPokemonRepository(PokemonRepository):
    """
    PostgreSQL implementation of PokemonRepository.

    - Uses SQLAlchemy ORM for database access
    - Name search via case-insensitive LIKE with escaped wildcards
    - Type filter via array overlap (&&)
    - Translates IntegrityError to ConflictError and OperationalError
      to TransientStoreError
    - Converts PokemonRow (infrastructure) to Pokemon (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def add(self, pokemon: NewPokemon) -> Pokemon:
        """
        Insert a new row and flush so the identity column is populated.

        Raises:
            ConflictError: If a unique constraint rejects the row
            TransientStoreError: If the database cannot be reached
        """
        row = PokemonRow(
            name=pokemon.name,
            slug=pokemon.slug,
            types=list(pokemon.types),
            weakness=list(pokemon.weakness) if pokemon.weakness is not None else None,
            category=pokemon.category,
            abilities=pokemon.abilities,
            description=pokemon.description,
            sprite=pokemon.sprite,
        )

        with self._store_errors():
            try:
                self._session.add(row)
                self._session.flush()
            except IntegrityError as exc:
                self._session.rollback()
                field = _conflicting_field(exc)
                value = getattr(pokemon, field) if field else None
                message = (
                    f"Pokemon with {field} '{value}' already exists"
                    if field
                    else "Pokemon conflicts with an existing entry"
                )
                raise ConflictError(message, field=field, value=value) from exc

        return self._to_domain(row)

    def list_all(self) -> list[Pokemon]:
        query = select(PokemonRow).order_by(
            PokemonRow.name.collate(NAME_COLLATION), PokemonRow.id
        )
        return self._fetch(query)

    def find_by_name_fragments(self, fragments: Sequence[str], limit: int) -> list[Pokemon]:
        # Trust that UseCase has validated inputs (contract programming)
        query = (
            select(PokemonRow)
            .where(
                or_(
                    *(
                        PokemonRow.name.icontains(fragment, autoescape=True)
                        for fragment in fragments
                    )
                )
            )
            .order_by(PokemonRow.id)
            .limit(limit)
        )
        return self._fetch(query)

    def find_by_types(self, types: Sequence[str]) -> list[Pokemon]:
        query = (
            select(PokemonRow)
            .where(PokemonRow.types.overlap(list(types)))
            .order_by(PokemonRow.name.collate(NAME_COLLATION), PokemonRow.id)
        )
        return self._fetch(query)

    def get_by_slug(self, slug: str) -> Pokemon | None:
        query = select(PokemonRow).where(PokemonRow.slug == slug)
        with self._store_errors():
            row = self._session.execute(query).scalar_one_or_none()
        return self._to_domain(row) if row else None

    def _fetch(self, query: Select[tuple[PokemonRow]]) -> list[Pokemon]:
        with self._store_errors():
            rows = self._session.execute(query).scalars().all()
        return [self._to_domain(row) for row in rows]

    @contextmanager
    def _store_errors(self) -> Iterator[None]:
        try:
            yield
        except OperationalError as exc:
            logger.warning(
                "Pokemon store unavailable",
                extra={"error": str(exc.orig)},
            )
            raise TransientStoreError("Pokemon store is unavailable") from exc

    def _to_domain(self, row: PokemonRow) -> Pokemon:
        """
        Convert database model (PokemonRow) to domain entity (Pokemon).

        Args:
            row: SQLAlchemy PokemonRow model

        Returns:
            Pokemon domain entity
        """
        return Pokemon(
            id=row.id,
            name=row.name,
            slug=row.slug,
            types=tuple(row.types or ()),
            category=row.category,
            abilities=row.abilities,
            description=row.description,
            sprite=row.sprite,
            weakness=tuple(row.weakness) if row.weakness is not None else None,
        )


def _conflicting_field(exc: IntegrityError) -> str | None:
    """
    Name the column behind a unique violation.

    Prefers the constraint name reported by the driver (psycopg exposes it
    as ``diag.constraint_name``) and falls back to scanning the message.
    """
    diag = getattr(exc.orig, "diag", None)
    constraint = getattr(diag, "constraint_name", None)
    if isinstance(constraint, str) and constraint.startswith(UNIQUE_CONSTRAINT_PREFIX):
        return constraint[len(UNIQUE_CONSTRAINT_PREFIX) :]

    message = str(exc.orig)
    for column in UNIQUE_COLUMNS:
        if column in message:
            return column
    return None
