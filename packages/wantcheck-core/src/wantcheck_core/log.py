import logging

from .config import WantcheckConfig

_ROOT_LOGGER = "wantcheck"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")


def configure_logger(level: int = logging.WARNING) -> None:
    """
    Ensure the wantcheck logger has a handler in case the app didn't configure logging.
    Safe to call multiple times.
    """
    logger = logging.getLogger(_ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)


def trace(logger: logging.Logger, config: WantcheckConfig, msg: str, *args) -> None:
    if config.trace:
        logger.debug(msg, *args)
