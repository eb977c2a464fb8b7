from pokedex_lite.client.api_client import PokedexClient, parse_name_query, parse_pokemon
from pokedex_lite.client.browser import CatalogBrowser
from pokedex_lite.client.query_cache import QueryCache

__all__ = [
    "CatalogBrowser",
    "PokedexClient",
    "QueryCache",
    "parse_name_query",
    "parse_pokemon",
]
