from pokedex_lite.infra.db.models.base import Base
from pokedex_lite.infra.db.models.pokemon import PokemonRow

__all__ = ["Base", "PokemonRow"]
