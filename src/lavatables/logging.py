from __future__ import annotations

import logging


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
PACKAGE_LOGGER = "lavatables"


def configure_logging(level: str = "INFO") -> None:
    # Root stays at WARNING; only lavatables' own loggers follow ``level``.
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level.upper())
