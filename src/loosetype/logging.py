"""Logging helpers for loosetype.

The library logs through ``logging.getLogger(__name__)`` in each module and
never installs handlers on import. Applications that want console output
can call `configure_logging`, which attaches a Rich console handler to the
``loosetype`` logger.
"""

from __future__ import annotations

import logging
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from loosetype.config import get_log_level

PROJECT_LOGGER = "loosetype"
CONSOLE_HANDLER_NAME = "loosetype-console"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def config_console_handler(
    level: int = logging.WARNING, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the console handler used for the package logger.

    The handler writes to stderr and only shows the message text. In debug
    mode it is set to DEBUG, shows timestamps and the source location, and
    prefixes each message with the module that logged it (for example
    ``loosetype.sanitizer``).

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, use verbose debug formatting.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler named `CONSOLE_HANDLER_NAME`.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=debug_mode,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    fmt = "%(name)s: %(message)s" if debug_mode else "%(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))
    handler.set_name(CONSOLE_HANDLER_NAME)
    return handler


def configure_logging(
    level: int | None = None, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Attach a console handler to the ``loosetype`` logger.

    Calling this again replaces the handler installed by the previous call;
    handlers added by the application are left alone.

    Args:
        level: Console level. Read from `LOOSETYPE_LOG_LEVEL` when None.
        debug_mode: See `config_console_handler`.
        color: See `config_console_handler`.

    Returns:
        RichHandler: The installed handler.

    Raises:
        InvalidLogLevelError: If ``level`` is None and the environment names
            an unknown level.
    """
    if level is None:
        level = get_log_level()

    logger = logging.getLogger(PROJECT_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == CONSOLE_HANDLER_NAME:
            logger.removeHandler(existing)

    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    logger.addHandler(handler)
    logger.setLevel(handler.level)
    return handler
