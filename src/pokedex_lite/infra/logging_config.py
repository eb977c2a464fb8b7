from __future__ import annotations

import logging

from pokedex_lite.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging once per process.

    Level comes from LOG_LEVEL unless given explicitly. Calling it again
    only adjusts the level of the package logger.
    """
    resolved = (level or log_level()).upper()

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT)

    logging.getLogger("pokedex_lite").setLevel(resolved)
