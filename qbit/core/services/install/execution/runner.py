"""
L4 Execution — Installer runner.

The SINGLE PLACE where an installer process is spawned. Dry-run
handling, audit logging and failure translation are centralised here.
"""

from __future__ import annotations

import logging
import subprocess
import time
from typing import Callable, Sequence

from qbit.core.services.install.domain.command import InstallCommand
from qbit.core.services.install.errors import InstallerFailed, SpawnFailed

logger = logging.getLogger(__name__)

# Runs argv with inherited stdio and returns the exit code.
# Raises OSError when the process cannot be spawned.
Executor = Callable[[Sequence[str]], int]

# Receives one user-facing output line.
Echo = Callable[[str], None]


def run_inherited(argv: Sequence[str]) -> int:
    """Spawn ``argv`` with inherited stdin/stdout/stderr and wait for it.

    No timeout: installers may legitimately prompt or take long.
    """
    result = subprocess.run(list(argv))
    return result.returncode


def execute_or_dry_run(
    command: InstallCommand,
    dry_run: bool,
    *,
    executor: Executor | None = None,
    echo: Echo | None = None,
) -> None:
    """Print the command (dry run) or run it.

    In dry-run mode the executor is never touched, so neither
    ``SpawnFailed`` nor ``InstallerFailed`` can occur.

    Raises:
        SpawnFailed: The process could not be started.
        InstallerFailed: The process exited non-zero.
    """
    rendered = command.render()
    say = echo or _log_only

    if dry_run:
        logger.info("DRY-RUN %s", rendered)
        say(f"Dry run: {rendered}")
        return

    say(f"Executing: {rendered}")
    logger.info("CMD %s", rendered)

    run = executor or run_inherited
    start = time.monotonic()
    try:
        exit_code = run(command.argv)
    except OSError as exc:
        logger.error("Spawn failed for %s: %s", rendered, exc)
        raise SpawnFailed(rendered, exc.strerror or str(exc)) from exc

    elapsed_ms = int((time.monotonic() - start) * 1000)
    if exit_code != 0:
        logger.error("Installer exited %s after %dms: %s", exit_code, elapsed_ms, rendered)
        raise InstallerFailed(rendered, exit_code)

    logger.info("Installer finished in %dms", elapsed_ms)


def _log_only(line: str) -> None:
    logger.info("%s", line)
