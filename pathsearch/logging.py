"""Logging for pathsearch.

Searches log through loggers under the ``pathsearch`` namespace, at DEBUG level
only: one summary record when a search ends and, on long searches, periodic
progress records (every ``SearchConfig.progress_log_interval`` expansions).

Importing the package configures nothing beyond a ``NullHandler`` on the
``pathsearch`` logger, so applications keep control of their logging setup.
Call ``enable_search_logging`` (or ``setup_root_logger`` for finer control) to
see the records on stdout.
"""

import logging
import sys
from typing import Optional

from pathsearch.config import SEARCH_CONFIG, SearchConfig

ROOT_LOGGER_NAME = "pathsearch"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by setup_root_logger, None until then
_installed_handler: Optional[logging.Handler] = None

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """Attach a single output handler to the ``pathsearch`` logger.

    Calling it again returns the handler already installed and changes nothing;
    use ``reset_logging`` first to replace it.

    Args:
        level: Level of the ``pathsearch`` logger (default: INFO).
        format_string: Custom format string (optional).
        handler: Custom handler (optional, defaults to a stdout StreamHandler).

    Returns:
        The installed handler.
    """
    global _installed_handler

    if _installed_handler is not None:
        return _installed_handler

    if handler is None:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    _installed_handler = handler
    return handler


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a pathsearch module (typically ``__name__``)."""
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``pathsearch`` logger and of the installed handler."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)
    if _installed_handler is not None:
        _installed_handler.setLevel(level)


def enable_search_logging(
    progress_interval: Optional[int] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Handler:
    """Show search summaries and progress records.

    Installs an output handler if none is installed yet and lowers the
    ``pathsearch`` level to DEBUG.

    Args:
        progress_interval: If given, becomes ``SEARCH_CONFIG.progress_log_interval``
            (expansions between progress records, 0 disables them).
        handler: Custom handler, used only when none is installed yet.

    Returns:
        The handler records go to.

    Raises:
        ValueError: If ``progress_interval`` is negative. Nothing is changed then.
    """
    if progress_interval is not None:
        # Validate before touching any state
        SearchConfig(progress_log_interval=progress_interval)
    installed = setup_root_logger(level=logging.DEBUG, handler=handler)
    set_global_log_level(logging.DEBUG)
    if progress_interval is not None:
        SEARCH_CONFIG.progress_log_interval = progress_interval
    return installed


def disable_search_logging() -> None:
    """Hide search records again by raising the ``pathsearch`` level to INFO."""
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Remove the installed handler and restore the import-time state."""
    global _installed_handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _installed_handler is not None:
        root_logger.removeHandler(_installed_handler)
        _installed_handler = None
    root_logger.setLevel(logging.NOTSET)
