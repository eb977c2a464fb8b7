from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Identity, Index, Integer, String, Text, func, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from pokedex_lite.infra.db.models.base import Base


class PokemonRow(Base):
    __tablename__ = "pokemon"
    __table_args__ = (Index("ix_pokemon_types", "types", postgresql_using="gin"),)

    # IDENTITY never hands out a value twice, even after rollbacks
    id: Mapped[int] = mapped_column(Integer, Identity(always=False), primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)

    types: Mapped[list[str]] = mapped_column(
        ARRAY(Text), nullable=False, server_default=text("'{}'")
    )
    weakness: Mapped[list[str] | None] = mapped_column(ARRAY(Text), nullable=True)

    category: Mapped[str] = mapped_column(Text, nullable=False)
    abilities: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    sprite: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
