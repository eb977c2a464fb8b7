from __future__ import annotations

from collections.abc import Iterable

from pokedex_lite.client.api_client import PokedexClient
from pokedex_lite.domain.browse import PAGE_SIZE, CatalogPage, collect_types


class CatalogBrowser:
    """
    Collection view state on top of PokedexClient.

    Holds the name filter, the selected types and the current page. Any
    filter change sends the view back to page 1; the page number itself is
    clamped by the combinator on every render.
    """

    def __init__(self, client: PokedexClient, page_size: int = PAGE_SIZE) -> None:
        self._client = client
        self._page_size = page_size
        self._name_filter = ""
        self._selected_types: list[str] = []
        self._page = 1

    @property
    def name_filter(self) -> str:
        return self._name_filter

    @property
    def selected_types(self) -> tuple[str, ...]:
        return tuple(self._selected_types)

    @property
    def page(self) -> int:
        return self._page

    @property
    def has_active_filters(self) -> bool:
        return bool(self._name_filter or self._selected_types)

    def set_name_filter(self, value: str | None) -> None:
        value = value or ""
        if value != self._name_filter:
            self._name_filter = value
            self._page = 1

    def set_types(self, types: Iterable[str]) -> None:
        selected = list(dict.fromkeys(types))
        if selected != self._selected_types:
            self._selected_types = selected
            self._page = 1

    def toggle_type(self, type_: str) -> None:
        if type_ in self._selected_types:
            self.set_types(t for t in self._selected_types if t != type_)
        else:
            self.set_types([*self._selected_types, type_])

    def clear_filters(self) -> None:
        self.set_name_filter("")
        self.set_types([])

    def go_to(self, page: int) -> CatalogPage:
        self._page = page
        return self.current()

    def next_page(self) -> CatalogPage:
        return self.go_to(self._page + 1)

    def previous_page(self) -> CatalogPage:
        return self.go_to(self._page - 1)

    def current(self) -> CatalogPage:
        result = self._client.browse(
            name_filter=self._name_filter,
            type_filter=self._selected_types,
            page=self._page,
            page_size=self._page_size,
        )
        # Remember the clamped page so next/previous move from what is shown
        self._page = result.page
        return result

    def available_types(self) -> list[str]:
        return collect_types(self._client.get_all())
