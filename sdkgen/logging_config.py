"""Logging setup for sdkgen.

Modules obtain their logger with ``get_logger(__name__)``. The CLI calls
``configure_logging`` once at startup; library users keep whatever
handlers their application installs.
"""

import logging
from typing import Optional

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "sdkgen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the ``sdkgen`` namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING", rich_output: bool = True) -> None:
    """
    Configure the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
        rich_output: Use rich's console handler instead of a plain stream handler
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level.upper())

    if _configured:
        return

    handler: Optional[logging.Handler]
    if rich_output:
        handler = RichHandler(show_path=False, markup=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root.addHandler(handler)
    root.propagate = False
    _configured = True
