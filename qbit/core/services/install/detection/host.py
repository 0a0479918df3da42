"""
L3 Detection — Host context and executable probing.

Read-only probes for executable availability. The environment is read
once, in ``HostContext.from_environ``, and the resulting snapshot is
passed down the call chain so tests never have to touch PATH or
mutate ``os.environ``.
"""

from __future__ import annotations

import logging
import os
import platform
import subprocess
from dataclasses import dataclass, field
from typing import Callable, Mapping

logger = logging.getLogger(__name__)

# Environment variable naming an explicit package manager.
OVERRIDE_ENV_VAR = "QBIT_PACKAGE_MANAGER"

# A probe answers "can this executable be launched here?"
CommandProbe = Callable[[str], bool]


def command_exists(executable: str, *, timeout: int = 10) -> bool:
    """Check whether ``executable --version`` can be spawned.

    The exit status is irrelevant: spawning and exiting is enough.
    Never cached, the environment may change between invocations.

    Returns:
        True if the process started and exited, False if it could not
        be spawned or did not exit within ``timeout`` seconds.
    """
    try:
        subprocess.run(
            [executable, "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        logger.warning("Timeout probing %s --version (%ss)", executable, timeout)
        return False
    except OSError as exc:
        logger.debug("Probe failed for %s: %s", executable, exc)
        return False
    return True


def current_platform() -> str:
    """Host OS identity: ``linux``, ``darwin``, ``windows``, or other."""
    return platform.system().lower()


@dataclass(frozen=True)
class HostContext:
    """Everything manager selection and command building read from the host.

    Attributes:
        platform: Lower-cased OS name (``linux``, ``darwin``, ``windows``).
        manager_override: Explicit manager name, or None to auto-detect.
        probe: Availability check for an executable name.
    """

    platform: str = field(default_factory=current_platform)
    manager_override: str | None = None
    probe: CommandProbe = command_exists

    @property
    def is_windows(self) -> bool:
        return self.platform == "windows"

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        manager_override: str | None = None,
        probe: CommandProbe | None = None,
        platform_name: str | None = None,
    ) -> HostContext:
        """Snapshot the host once per invocation.

        An explicit ``manager_override`` (e.g. from a CLI flag) wins over
        the ``QBIT_PACKAGE_MANAGER`` variable.
        """
        env = os.environ if environ is None else environ
        override = manager_override
        if override is None:
            override = env.get(OVERRIDE_ENV_VAR)
        return cls(
            platform=platform_name or current_platform(),
            manager_override=override,
            probe=probe or command_exists,
        )
