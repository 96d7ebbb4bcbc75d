import logging

from .logging_config import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def log_info(message: str) -> None:
    logger.info("%s", message)


def log_step(message: str) -> None:
    """
    Outgoing call or state change in progress.
    """
    logger.info("→ %s", message)


def log_success(message: str) -> None:
    logger.info("✅ %s", message)


def log_warning(message: str) -> None:
    """
    Expected failure surfaced to the caller (denied access, upstream error...).
    """
    logger.warning("⚠️ %s", message)


def log_error(message: str, exc_info: bool = False) -> None:
    """
    Unexpected failure; pass exc_info=True from an except block to keep the traceback.
    """
    logger.error("❌ %s", message, exc_info=exc_info)
