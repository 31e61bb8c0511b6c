"""
Package-level logging configuration.

* Rich console output (colourised, nicely formatted).
* Rotating log file inside ``$MANIFESTOMATIC_LOG_DIR`` when set, otherwise in
  the package-local ``logs/`` folder.
* Optional plain-text mirror controlled via ``--save-logfile`` on the CLI.

The public helper :func:`setup_logging` wires everything and should be the
sole entry-point used by the CLI. Calling it again replaces the handlers it
installed earlier, so repeated invocations in one process do not pile up
open log files.
"""

from __future__ import annotations

import atexit
import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional

import structlog
from rich.console import Console
from rich.logging import RichHandler
from structlog.dev import ConsoleRenderer as StructlogConsoleRenderer
from structlog.stdlib import LoggerFactory

__all__ = ["LOG_DIR_ENV", "log_dir", "reset_logging", "setup_logging"]

LOG_DIR_ENV = "MANIFESTOMATIC_LOG_DIR"

# Marks root handlers installed by setup_logging.
_OWNED = "_manifestomatic_handler"


# --------------------------------------------------------------------------- #
# Internal helpers – file-based handlers                                      #
# --------------------------------------------------------------------------- #
def log_dir() -> Path:
    """Return the directory for the rotating log file."""
    env_dir = os.environ.get(LOG_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path(__file__).resolve().parents[1] / "logs"


def _rotating_file_handler(level: int) -> logging.Handler:
    """Return a rotating file handler writing ``manifestomatic.log``.

    Args:
        level: Log-level for the handler.
    """
    logdir = log_dir()
    logdir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=logdir / "manifestomatic.log",
        maxBytes=5_000_000,  # ~5 MB before rollover
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    )
    return handler


def _plain_text_file_handler(
    path: Optional[Path], level: int
) -> logging.Handler | None:
    """Return a plain-text file handler or *None* when *path* is *None*."""
    if path is None:
        return None

    path = path.expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(path, encoding="utf-8", mode="a")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    # Ensure the buffer is flushed on interpreter exit.
    atexit.register(handler.close)
    return handler


def reset_logging() -> None:
    """Detach and close the root handlers installed by :func:`setup_logging`."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _OWNED, False):
            root.removeHandler(handler)
            handler.close()


# --------------------------------------------------------------------------- #
# Public API – main entry-point                                               #
# --------------------------------------------------------------------------- #
def setup_logging(
    *,
    verbose: bool = False,
    debug: bool = False,
    extra_text_log: Optional[Path] = None,
) -> None:
    """Configure rich console logging and file mirrors.

    Args:
        verbose: Emit INFO-level messages to the console.
        debug: Emit DEBUG-level messages and rich tracebacks.
        extra_text_log: Optional path for a plain-text mirror of console output.
    """
    console_lvl = (
        logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    )
    file_lvl = logging.DEBUG if debug else logging.INFO

    handlers: list[logging.Handler] = [
        RichHandler(
            level=console_lvl,
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
            show_path=debug,
        ),
        _rotating_file_handler(file_lvl),
    ]

    txt_handler = _plain_text_file_handler(extra_text_log, console_lvl)
    if txt_handler:
        handlers.append(txt_handler)

    reset_logging()
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)  # handlers do the filtering
    for handler in handlers:
        setattr(handler, _OWNED, True)
        root.addHandler(handler)

    # structlog renders the event dict, stdlib handlers route it.
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                StructlogConsoleRenderer(colors=False)
                if verbose or debug
                else structlog.processors.JSONRenderer()
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(min(console_lvl, file_lvl)),
        logger_factory=LoggerFactory(),
    )
