from __future__ import annotations

import logging

from rich.logging import RichHandler

from .config import NotifierConfig
from .state import DEFAULT_LOGGER_NAME


class _SubscriberContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        # Ensure `subscriber` exists for formatter
        if not hasattr(record, "subscriber"):
            setattr(record, "subscriber", "-")
        return True


def configure_logging(*, cfg: NotifierConfig, name: str = DEFAULT_LOGGER_NAME) -> logging.Logger:
    """
    Configure console + optional file logging for notifier diagnostics.

    Returns
    -------
    logger
        The configured logger, suitable for ``NotifierState(logger=...)``.

    Usage example
    -------------
        logger = configure_logging(cfg=NotifierConfig(log_file=Path("logs/errors.log")))
        state = NotifierState(logger=logger)
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.filters.clear()
    logger.propagate = False

    logger.addFilter(_SubscriberContextFilter())

    console_handler = RichHandler(show_path=False, rich_tracebacks=True)
    console_handler.setLevel(cfg.console_level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if cfg.log_file is not None:
        cfg.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(cfg.log_file, encoding="utf-8")
        file_handler.setLevel(cfg.file_level)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)sZ | subscriber=%(subscriber)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%dT%H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logger.debug("Logging configured (name=%s, log_file=%s)", name, cfg.log_file)
    return logger
