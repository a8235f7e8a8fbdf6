"""Logging setup for command-line entry points"""

import logging


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str) -> None:
    """Configure root handlers and the docstore logger level (falls back to INFO for unknown names)."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT, force=True)
    logging.getLogger("docstore").setLevel(log_level)
