"""Logging setup shared by the whole package.

Every module grabs its logger through :func:`get_logger`; the console
handler is only attached when :func:`setup_logging` is called (the CLI does
this), so library users keep full control of their own logging tree.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "identified_enum_cases"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the package's root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: int | str = logging.WARNING, use_rich: bool = True) -> None:
    """Configure the package root logger.

    Args:
        level: Logging level (name or number).
        use_rich: Use rich's handler for console output, plain stream otherwise.
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root.setLevel(level)

    if _configured:
        for handler in root.handlers:
            handler.setLevel(level)
        return

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    handler.setLevel(level)
    root.addHandler(handler)
    _configured = True
