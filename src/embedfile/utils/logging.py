"""Logging configuration with Rich formatting.

Every embedfile module obtains its logger through
:func:`configure_module_logger`, so output is consistent whether the
library runs inside a development server or a test session.
"""

import logging
import sys
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

_KEYWORDS = ["cache", "embed", "production", "development", "metadata"]


def setup_logging(
    level: int = logging.INFO,
    show_path: bool = False,
    show_time: bool = True,
    rich_tracebacks: bool = True,
    console: Optional[Console] = None,
) -> None:
    """
    Route the root logger through a single Rich handler.

    Args:
        level: Logging level (default: INFO).
        show_path: Show file path in log messages (default: False).
        show_time: Show timestamp in log messages (default: True).
        rich_tracebacks: Use Rich for traceback formatting (default: True).
        console: Optional Rich Console instance (default: stderr console).
    """
    if console is None:
        console = Console(stderr=True)

    handler = RichHandler(
        console=console,
        show_path=show_path,
        show_time=show_time,
        rich_tracebacks=rich_tracebacks,
        markup=True,
        show_level=True,
        level=level,
        keywords=_KEYWORDS,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger, installing the Rich root handler on first use.

    Args:
        name: Logger name (typically __name__).
        level: Optional logging level override.

    Returns:
        Logger instance.
    """
    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level)

    root_logger = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        setup_logging()

    return logger


def configure_module_logger(
    module_name: str,
    level: int = logging.WARNING,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Configure a module-specific logger with its own handler.

    Args:
        module_name: Module name (typically __name__).
        level: Logging level. Library modules default to WARNING so that
            importing embedfile stays quiet.
        use_colors: Use a Rich handler; otherwise a plain stderr handler.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler: Union[RichHandler, logging.Handler]
    if use_colors:
        console = Console(stderr=True, legacy_windows=False)
        handler = RichHandler(
            console=console,
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=True,
            show_level=True,
            level=logging.NOTSET,
            keywords=_KEYWORDS,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def set_verbose(verbose: bool) -> None:
    """Switch every embedfile logger between DEBUG and WARNING."""
    level = logging.DEBUG if verbose else logging.WARNING
    for name in list(logging.root.manager.loggerDict):
        if name == "embedfile" or name.startswith("embedfile."):
            logging.getLogger(name).setLevel(level)
