from fastapi import FastAPI

from pokedex_lite.entrypoints.http.exception_handlers import register_exception_handlers
from pokedex_lite.entrypoints.http.routes.health import router as health_router
from pokedex_lite.entrypoints.http.routes.pokemon import router as pokemon_router
from pokedex_lite.infra.logging_config import configure_logging


def build_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Pokedex Lite API",
        description="""
        Pokémon catalog API for creating, searching and browsing entries.

        ## Features
        - Create entries with types, weaknesses and a sprite
        - Search by name fragments and filter by types
        - Browse the collection 12 entries per page
        - Look up an entry by slug

        ## Error Handling
        All errors return structured JSON responses with error codes.
        503 responses mean the store is unavailable and the request can be retried.
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(pokemon_router, prefix="/v1")

    return app


app = build_app()
