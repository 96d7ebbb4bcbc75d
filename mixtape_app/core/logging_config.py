import logging
import os
import sys

LOGGER_NAME = "mixtape_app"


def configure_logging(level: int | str | None = None) -> None:
    """
    Configure root logging for the API process.

    - Logs go to stdout, one line per record
    - Level comes from the argument, else LOG_LEVEL, else INFO
    - Safe to call more than once (uvicorn may already own the root logger)
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    root.setLevel(level)
