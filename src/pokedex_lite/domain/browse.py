"""In-memory filtering and pagination of a catalog listing.

Pure functions over an already-fetched list of entries. No I/O, no state:
safe to re-run on every keystroke. Resetting the page when a filter changes
is left to the caller.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pokedex_lite.domain.pokemon import Pokemon


PAGE_SIZE = 12
PAGE_WINDOW = 5


@dataclass(frozen=True, slots=True)
class CatalogPage:
    items: tuple[Pokemon, ...]
    page: int
    total_pages: int
    filtered_count: int
    page_size: int = PAGE_SIZE

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def page_window(self, width: int = PAGE_WINDOW) -> list[int]:
        """
        Page numbers for a pager showing at most ``width`` buttons.

        Starts at 1 near the beginning, ends at the last page near the end,
        and keeps the current page centred otherwise.
        """
        if self.total_pages <= width:
            return list(range(1, self.total_pages + 1))

        half = width // 2
        start = min(max(1, self.page - half), self.total_pages - width + 1)
        return list(range(start, start + width))


def matches(
    pokemon: Pokemon,
    name_filter: str | None = None,
    type_filter: Iterable[str] | None = None,
) -> bool:
    """
    Name is a case-insensitive substring match; types are exact (case-sensitive).
    """
    if name_filter and name_filter.casefold() not in pokemon.name.casefold():
        return False
    if type_filter:
        wanted = set(type_filter)
        if wanted and not any(type_ in wanted for type_ in pokemon.types):
            return False
    return True


def filter_and_paginate(
    entries: Sequence[Pokemon],
    name_filter: str | None = None,
    type_filter: Iterable[str] | None = None,
    page: int | None = 1,
    page_size: int = PAGE_SIZE,
) -> CatalogPage:
    """
    Narrow ``entries`` by name and types, then slice out one page.

    Args:
        entries: Full listing, in display order
        name_filter: Substring to look for in names (None or "" = no filter)
        type_filter: Types to accept, any match wins (None or empty = no filter)
        page: Requested 1-indexed page, clamped into range
        page_size: Items per page

    Returns:
        CatalogPage with the slice plus counts for display
    """
    if page_size <= 0:
        raise ValueError("page_size must be > 0")

    name_filter = name_filter or ""
    type_filter = frozenset(type_filter or ())

    # Stable: keeps the relative order of the input
    filtered = [
        pokemon for pokemon in entries if matches(pokemon, name_filter, type_filter)
    ]
    filtered_count = len(filtered)
    total_pages = math.ceil(filtered_count / page_size)

    current = max(1, min(page or 1, total_pages or 1))
    start = (current - 1) * page_size

    return CatalogPage(
        items=tuple(filtered[start : start + page_size]),
        page=current,
        total_pages=total_pages,
        filtered_count=filtered_count,
        page_size=page_size,
    )


def collect_types(entries: Iterable[Pokemon]) -> list[str]:
    """Sorted distinct types across ``entries`` (the filter chip list)."""
    return sorted({type_ for pokemon in entries for type_ in pokemon.types})
