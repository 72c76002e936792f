"""Logging setup shared by the CLI and the bridge server."""

from __future__ import annotations

import logging


def configure_logging(debug: bool = False) -> None:
    """Attach a console handler to the ``tangent`` logger.

    INFO and up when ``debug`` is set, warnings only otherwise.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("tangent").setLevel(logging.INFO if debug else logging.WARNING)
