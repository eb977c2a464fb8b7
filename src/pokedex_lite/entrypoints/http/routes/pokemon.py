from fastapi import APIRouter, Depends, Query, status

from pokedex_lite.entrypoints.http.dependencies import (
    get_browse_catalog_use_case,
    get_create_pokemon_use_case,
    get_list_pokemon_use_case,
    get_pokemon_by_slug_use_case,
    get_pokemon_by_types_use_case,
    get_search_pokemon_by_name_use_case,
)
from pokedex_lite.entrypoints.http.dtos.pokemon import (
    CatalogPageResponseDTO,
    PokemonCreateDTO,
    PokemonListResponseDTO,
    PokemonResponseDTO,
)
from pokedex_lite.entrypoints.http.error_responses import ErrorResponse
from pokedex_lite.entrypoints.http.mappers.pokemon_mapper import PokemonMapper
from pokedex_lite.use_cases.browse_catalog import BrowseCatalog, BrowseCatalogRequest
from pokedex_lite.use_cases.create_pokemon import CreatePokemon
from pokedex_lite.use_cases.get_pokemon_by_slug import GetPokemonBySlug, GetPokemonBySlugRequest
from pokedex_lite.use_cases.get_pokemon_by_types import GetPokemonByTypes, GetPokemonByTypesRequest
from pokedex_lite.use_cases.list_pokemon import ListPokemon
from pokedex_lite.use_cases.search_pokemon_by_name import (
    MAX_NAME_TERMS,
    MAX_RESULTS,
    SearchPokemonByName,
    SearchPokemonByNameRequest,
)


router = APIRouter(tags=["Pokemon"])


@router.post(
    "/pokemon",
    response_model=PokemonResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a pokemon",
    description="""
    Add a new entry to the catalog.

    - `slug` defaults to the name, lowercased, with whitespace runs replaced by `-`
    - Every invalid field is reported in `errors`
    - A slug already in use returns 409 with `errors[0].field == "slug"`
    """,
    responses={
        409: {"model": ErrorResponse, "description": "Slug already in use"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Store unavailable, retry later"},
    },
)
def create_pokemon(
    payload: PokemonCreateDTO,
    use_case: CreatePokemon = Depends(get_create_pokemon_use_case),
) -> PokemonResponseDTO:
    """Create endpoint following parse → map → execute → map → return."""
    request = PokemonMapper.to_domain_request(payload)
    result = use_case.execute(request)
    return PokemonMapper.to_pokemon_response(result.pokemon)


@router.get(
    "/pokemon",
    response_model=PokemonListResponseDTO,
    summary="List all pokemon",
    description="Whole catalog ordered by name (code-point order), ties by id.",
)
def list_pokemon(
    use_case: ListPokemon = Depends(get_list_pokemon_use_case),
) -> PokemonListResponseDTO:
    result = use_case.execute()
    return PokemonMapper.to_list_response(result.pokemon)


@router.get(
    "/pokemon/search",
    response_model=PokemonListResponseDTO,
    summary="Search pokemon by name",
    description=f"""
    Case-insensitive substring search, OR across every `name` parameter.

    - Only the first {MAX_NAME_TERMS} names are used
    - At most {MAX_RESULTS} results, ordered by id
    - No names: empty result

    ## Example
    ```
    GET /v1/pokemon/search?name=pika&name=char
    ```
    """,
)
def search_pokemon_by_name(
    name: list[str] = Query(default=[], description="Name fragment; repeatable"),
    use_case: SearchPokemonByName = Depends(get_search_pokemon_by_name_use_case),
) -> PokemonListResponseDTO:
    result = use_case.execute(SearchPokemonByNameRequest(names=name))
    return PokemonMapper.to_list_response(result.pokemon)


@router.get(
    "/pokemon/by-types",
    response_model=PokemonListResponseDTO,
    summary="Filter pokemon by types",
    description="""
    Entries having at least one of the `type` parameters (exact match),
    ordered by name. No types: empty result.
    """,
)
def get_pokemon_by_types(
    types: list[str] = Query(default=[], alias="type", description="Type tag; repeatable"),
    use_case: GetPokemonByTypes = Depends(get_pokemon_by_types_use_case),
) -> PokemonListResponseDTO:
    result = use_case.execute(GetPokemonByTypesRequest(types=types))
    return PokemonMapper.to_list_response(result.pokemon)


@router.get(
    "/pokemon/browse",
    response_model=CatalogPageResponseDTO,
    summary="Browse the collection",
    description="""
    Full catalog narrowed by name (case-insensitive substring) and types
    (exact, any match), then paged 12 at a time.

    Out-of-range pages are clamped, never rejected.
    """,
)
def browse_catalog(
    name: str | None = Query(default=None, description="Name fragment"),
    types: list[str] = Query(default=[], alias="type", description="Type tag; repeatable"),
    page: int = Query(default=1, description="1-indexed page, clamped into range"),
    use_case: BrowseCatalog = Depends(get_browse_catalog_use_case),
) -> CatalogPageResponseDTO:
    result = use_case.execute(BrowseCatalogRequest(name=name, types=types, page=page))
    return PokemonMapper.to_page_response(result)


@router.get(
    "/pokemon/by-slug/{slug}",
    response_model=PokemonResponseDTO,
    summary="Get pokemon by slug",
    responses={
        404: {"model": ErrorResponse, "description": "No pokemon with that slug"},
        422: {"model": ErrorResponse, "description": "Empty slug"},
    },
)
def get_pokemon_by_slug(
    slug: str,
    use_case: GetPokemonBySlug = Depends(get_pokemon_by_slug_use_case),
) -> PokemonResponseDTO:
    result = use_case.execute(GetPokemonBySlugRequest(slug=slug))
    return PokemonMapper.to_pokemon_response(result.pokemon)
