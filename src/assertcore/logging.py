from __future__ import annotations

import logging
from pathlib import Path

from . import config

log = logging.getLogger(__name__)

PACKAGE_LOGGER: str = "assertcore"

# Marks handlers installed by setup_logging so a second call replaces them
_HANDLER_FLAG = "_assertcore_handler"


def setup_logging(
    *,
    rich: bool = False,
    rich_tracebacks: bool = False,
    log_level: int | str = logging.INFO,
    log_save_dir: Path | None = None,
    log_failures: bool = True,
) -> logging.Logger:
    """
    Show the package's own log records: failed assertions and config warnings.

    Handlers are attached to the `assertcore` logger only, so the application's
    root logger is left alone. Calling this again replaces the handlers from
    the previous call.

    Args:
        rich: Log through `rich.logging.RichHandler` if `rich` is installed.
        rich_tracebacks: Let the rich handler render tracebacks.
        log_level: Level of the `assertcore` logger.
        log_save_dir: Also write records to `assertcore.log` in this directory.
        log_failures: Turn on `report.log_failures` in the current context, so
            every failed assertion is logged at INFO before it is raised.

    Returns:
        The configured `assertcore` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = []
    if log_save_dir:
        log_file = log_save_dir / "assertcore.log"
        log_file.touch(exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    if rich:
        try:
            from rich.logging import RichHandler  # type: ignore

            handlers.append(RichHandler(rich_tracebacks=rich_tracebacks))
        except ImportError:
            log.info("Failed to import rich. Falling back to a plain stream handler.")

    if not handlers:
        handlers.append(logging.StreamHandler())

    formatter = logging.Formatter("%(name)s: %(message)s")
    for handler in handlers:
        setattr(handler, _HANDLER_FLAG, True)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(log_level)

    if log_failures:
        config.set({**config.report_config(), "log_failures": True}, "report")

    log.debug(
        f"Logging initialized. Rich: {rich}, Log level: {log_level}, "
        f"Log save dir: {log_save_dir}, Log failures: {log_failures}"
    )
    return logger


init_python_logging = setup_logging
