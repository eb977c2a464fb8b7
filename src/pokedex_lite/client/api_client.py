"""HTTP client for the Pokedex Lite API.

Reads go through an explicit QueryCache keyed by operation and arguments.
A successful create invalidates the whole cache. HTTP error payloads are
raised again as the matching domain errors, so callers can tell "not found"
from "retry later" from "fix this field".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError as PydanticValidationError

from pokedex_lite.client.query_cache import QueryCache
from pokedex_lite.domain.browse import PAGE_SIZE, CatalogPage, filter_and_paginate
from pokedex_lite.domain.errors import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
    TransientStoreError,
    ValidationError,
)
from pokedex_lite.domain.pokemon import NewPokemon, Pokemon
from pokedex_lite.entrypoints.http.dtos.pokemon import PokemonResponseDTO

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
TRANSIENT_STATUS_CODES = {502, 503, 504}

GET_ALL = "get_all"
GET_MANY_BY_NAME = "get_many_by_name"
GET_BY_TYPES = "get_by_types"
GET_BY_SLUG = "get_by_slug"
READ_OPERATIONS = (GET_ALL, GET_MANY_BY_NAME, GET_BY_TYPES, GET_BY_SLUG)


def parse_name_query(text: str | None) -> list[str]:
    """Split a comma-separated search box ("Pikachu, char") into lowercase names."""
    if not text:
        return []
    names = (name.strip().lower() for name in text.split(","))
    return [name for name in names if name]


def parse_pokemon(payload: Any) -> Pokemon:
    """
    Turn one response item into a Pokemon, or fail loudly.

    Raises:
        ValidationError: If the payload does not have the expected shape
    """
    try:
        dto = PokemonResponseDTO.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(
            "Malformed pokemon payload",
            errors=[
                {
                    "field": ".".join(str(loc) for loc in error["loc"]) or "pokemon",
                    "message": error["msg"],
                    "code": error["type"],
                }
                for error in exc.errors()
            ],
        ) from exc

    return Pokemon(
        id=dto.id,
        name=dto.name,
        slug=dto.slug,
        types=tuple(dto.types),
        category=dto.category,
        abilities=dto.abilities,
        description=dto.description,
        sprite=dto.sprite,
        weakness=tuple(dto.weakness) if dto.weakness is not None else None,
    )


class PokedexClient:
    """
    Typed access to the catalog API.

    Args:
        http_client: httpx client whose base_url points at the API root
        cache: Read cache, a fresh one when omitted
    """

    def __init__(self, http_client: httpx.Client, cache: QueryCache | None = None) -> None:
        self._http = http_client
        self.cache = cache if cache is not None else QueryCache()

    @classmethod
    def from_base_url(cls, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> PokedexClient:
        return cls(httpx.Client(base_url=base_url, timeout=timeout))

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> PokedexClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --------------------------------------------------------------------------
    # Mutations
    # --------------------------------------------------------------------------

    def create(self, pokemon: NewPokemon) -> Pokemon:
        """
        Create an entry and invalidate every cached read.

        Raises:
            ValidationError: If the server rejects a field
            ConflictError: If the slug is taken (``field == "slug"``)
            TransientStoreError: If the API or its store is unavailable
        """
        body = {
            "name": pokemon.name,
            "slug": pokemon.slug,
            "types": list(pokemon.types),
            "category": pokemon.category,
            "abilities": pokemon.abilities,
            "weakness": list(pokemon.weakness) if pokemon.weakness is not None else None,
            "description": pokemon.description,
            "sprite": pokemon.sprite,
        }
        created = parse_pokemon(self._request("POST", "/v1/pokemon", json=body))
        self.cache.invalidate()
        return created

    # --------------------------------------------------------------------------
    # Reads (cached)
    # --------------------------------------------------------------------------

    def get_all(self) -> list[Pokemon]:
        return self.cache.get_or_fetch(
            GET_ALL, (), lambda: self._fetch_list("/v1/pokemon")
        )

    def get_many_by_name(self, names: Sequence[str]) -> list[Pokemon]:
        if not names:
            return []
        return self.cache.get_or_fetch(
            GET_MANY_BY_NAME,
            (tuple(names),),
            lambda: self._fetch_list("/v1/pokemon/search", params={"name": list(names)}),
        )

    def get_by_types(self, types: Iterable[str]) -> list[Pokemon]:
        types = list(types)
        if not types:
            return []
        return self.cache.get_or_fetch(
            GET_BY_TYPES,
            (frozenset(types),),
            lambda: self._fetch_list("/v1/pokemon/by-types", params={"type": types}),
        )

    def get_by_slug(self, slug: str) -> Pokemon:
        """
        Raises:
            NotFoundError: If no entry has this slug (render a "not found" view)
            ValidationError: If the slug is empty
        """
        if not slug or not slug.strip():
            raise ValidationError(
                errors=[{"field": "slug", "message": "Slug cannot be empty", "code": "EMPTY_SLUG"}]
            )
        return self.cache.get_or_fetch(
            GET_BY_SLUG,
            (slug,),
            lambda: parse_pokemon(
                self._request("GET", f"/v1/pokemon/by-slug/{quote(slug, safe='')}", identifier=slug)
            ),
        )

    def browse(
        self,
        name_filter: str | None = None,
        type_filter: Iterable[str] | None = None,
        page: int | None = 1,
        page_size: int = PAGE_SIZE,
    ) -> CatalogPage:
        """Filter and page the cached full listing locally."""
        return filter_and_paginate(
            self.get_all(),
            name_filter=name_filter,
            type_filter=type_filter,
            page=page,
            page_size=page_size,
        )

    def refetch(self, operation: str, *args: Any) -> Any:
        """Manual retry: drop one cached entry and call the operation again."""
        if operation not in READ_OPERATIONS:
            raise ValueError(f"Unknown read operation: {operation}")
        self.cache.invalidate(operation, *_cache_args(operation, args))
        return getattr(self, operation)(*args)

    # --------------------------------------------------------------------------
    # Transport
    # --------------------------------------------------------------------------

    def _fetch_list(self, path: str, params: dict[str, Any] | None = None) -> list[Pokemon]:
        payload = self._request("GET", path, params=params)
        return [parse_pokemon(item) for item in payload["pokemon"]]

    def _request(
        self,
        method: str,
        path: str,
        identifier: str | None = None,
        **kwargs: Any,
    ) -> Any:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.TransportError as exc:
            logger.warning(
                "Pokedex API unreachable",
                extra={"method": method, "path": path, "error": str(exc)},
            )
            raise TransientStoreError("Pokedex API is unreachable") from exc

        if response.is_success:
            return response.json()

        raise _error_from_response(response, identifier)


def _cache_args(operation: str, args: tuple[Any, ...]) -> tuple[Any, ...]:
    # Mirror the key shapes used by the read methods
    if operation == GET_MANY_BY_NAME:
        return (tuple(args[0]),)
    if operation == GET_BY_TYPES:
        return (frozenset(args[0]),)
    return args


def _error_from_response(response: httpx.Response, identifier: str | None) -> DomainError:
    try:
        body = response.json()
    except ValueError:
        body = {}
    if not isinstance(body, dict):
        body = {}

    detail = body.get("detail") or response.reason_phrase or "Request failed"
    errors = body.get("errors") or None
    status_code = response.status_code

    logger.info(
        "Pokedex API error",
        extra={"status_code": status_code, "code": body.get("code"), "detail": detail},
    )

    if status_code == 404:
        return NotFoundError(resource="Pokemon", identifier=identifier)
    if status_code == 409:
        field = errors[0].get("field") if errors else None
        return ConflictError(detail, field=field)
    if status_code == 422:
        return ValidationError(detail, errors=errors)
    if status_code in TRANSIENT_STATUS_CODES:
        return TransientStoreError(detail, status_code=status_code)
    return InternalError(detail, status_code=status_code)
