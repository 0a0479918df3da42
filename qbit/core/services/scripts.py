"""
Named scripts — run the command lists declared under ``scripts:``.

Each command goes through the platform shell with inherited stdio.
The first failing step stops the script.
"""

from __future__ import annotations

import logging
import subprocess
import sys
from typing import Callable

from qbit.core.config.loader import CONFIG_CANDIDATES, LoadedProjectConfig

logger = logging.getLogger(__name__)

# Runs one shell command line and returns its exit code.
ShellRunner = Callable[[str], int]


class ScriptError(Exception):
    """Raised when a named script cannot be found or a step fails."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        self.exit_code = exit_code
        super().__init__(message)


def shell_argv(command: str) -> list[str]:
    """Wrap a command line for the platform shell."""
    if sys.platform == "win32":
        return ["cmd", "/C", command]
    return ["sh", "-c", command]


def run_shell(command: str) -> int:
    """Run one command line through the shell, inheriting stdio."""
    try:
        result = subprocess.run(shell_argv(command))
    except OSError as e:
        raise ScriptError(f"Could not start shell for `{command}`: {e}") from e
    return result.returncode


def run_named_script(
    name: str,
    *,
    config: LoadedProjectConfig | None,
    dry_run: bool = False,
    runner: ShellRunner | None = None,
    echo: Callable[[str], None] | None = None,
) -> list[str]:
    """Run the script ``name`` step by step.

    Returns:
        The commands that were run (or would run, in dry-run mode).

    Raises:
        ScriptError: No config, unknown script, empty script, or a
            step exiting non-zero.
    """
    if config is None:
        raise ScriptError(
            f"No {'/'.join(CONFIG_CANDIDATES)} file found in the current "
            "directory or its parents."
        )

    commands = config.script(name)
    if commands is None:
        available = ", ".join(sorted(config.data.scripts)) or "none"
        raise ScriptError(
            f"Script `{name}` not found in {config.path} (available: {available})."
        )
    if not commands:
        raise ScriptError(f"No commands defined for script:{name} in {config.path}.")

    say = echo or (lambda line: logger.info("%s", line))
    run = runner or run_shell
    label = f"script:{name}"

    for idx, cmd in enumerate(commands, start=1):
        say(f"[{label}] step {idx} -> {cmd}")
        if dry_run:
            continue
        logger.info("CMD %s", cmd)
        code = run(cmd)
        if code != 0:
            raise ScriptError(
                f"[{label}] step {idx} `{cmd}` exited with code {code}.",
                exit_code=code,
            )

    return list(commands)
