"""
Logging configuration — one setup call per qbit process.

main.py calls ``configure_cli_logging`` with the global flags before
any command runs. Modules only ever do
``logger = logging.getLogger(__name__)``.

Console level precedence:
    --debug  >  --verbose  >  --quiet  >  QBIT_LOG_LEVEL  >  WARNING

Installer commands are logged as ``CMD ...`` / ``DRY-RUN ...`` at INFO,
so ``QBIT_LOG_FILE`` with ``QBIT_LOG_FILE_LEVEL=INFO`` keeps an audit
trail of everything qbit spawned while the console stays quiet.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping

LOG_LEVEL_ENV_VAR = "QBIT_LOG_LEVEL"
LOG_FILE_ENV_VAR = "QBIT_LOG_FILE"
LOG_FILE_LEVEL_ENV_VAR = "QBIT_LOG_FILE_LEVEL"

# Console format by threshold: the chattier the level, the more context.
_CONSOLE_FORMATS: tuple[tuple[int, str, str | None], ...] = (
    (logging.DEBUG, "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s", "%H:%M:%S"),
    (logging.INFO, "%(asctime)s [%(name)s] %(message)s", "%H:%M:%S"),
)
_CONSOLE_DEFAULT_FORMAT = "%(levelname)s: %(message)s"

# Audit file: full detail with a date, whatever the console shows.
_FILE_FORMAT = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the console level name from CLI flags, then the environment."""
    if debug:
        return "DEBUG"
    if verbose:
        return "INFO"
    if quiet:
        return "ERROR"
    env = os.environ if environ is None else environ
    return env.get(LOG_LEVEL_ENV_VAR) or "WARNING"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Replace the root logger's handlers with a console and optional file.

    The log file is opened before the root logger is touched, so a bad
    path leaves the previous logging setup in place.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path of an append-mode log file.
        log_file_level: Level for the file. Defaults to ``level``.

    Raises:
        OSError: ``log_file`` cannot be opened for appending.
    """
    handlers = [_console_handler(_level_number(level))]
    if log_file:
        handlers.append(_file_handler(log_file, _level_number(log_file_level or level)))

    root = logging.getLogger()
    root.handlers[:] = handlers
    root.setLevel(min(h.level for h in handlers))

    # A broken log stream must never fail an install.
    logging.raiseExceptions = False


def configure_cli_logging(
    *,
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
    environ: Mapping[str, str] | None = None,
) -> None:
    """Set up logging from the global CLI flags and ``QBIT_LOG_*`` variables."""
    env = os.environ if environ is None else environ
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet, environ=env),
        log_file=env.get(LOG_FILE_ENV_VAR) or None,
        log_file_level=env.get(LOG_FILE_LEVEL_ENV_VAR) or None,
    )


def _console_handler(level: int) -> logging.Handler:
    fmt, datefmt = _CONSOLE_DEFAULT_FORMAT, None
    for threshold, candidate, candidate_datefmt in _CONSOLE_FORMATS:
        if level <= threshold:
            fmt, datefmt = candidate, candidate_datefmt
            break
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    return handler


def _file_handler(path: str, level: int) -> logging.Handler:
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt=_FILE_DATEFMT))
    return handler


def _level_number(name: str | None) -> int:
    """``"info"`` → ``logging.INFO``; unknown or empty names mean WARNING."""
    numeric = logging.getLevelName(name.strip().upper()) if name else None
    return numeric if isinstance(numeric, int) else logging.WARNING
