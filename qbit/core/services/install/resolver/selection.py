"""
L2 Resolver — Package manager selection.

Decides which package manager to use on this host.

Resolution order:
  1. Explicit override (``--manager`` or ``QBIT_PACKAGE_MANAGER``).
     Must name a supported manager and that manager must be available.
  2. Platform-ordered detection: first available candidate wins.

Nothing is cached; every invocation re-detects.
"""

from __future__ import annotations

import logging

from qbit.core.services.install.detection.host import HostContext
from qbit.core.services.install.errors import (
    ManagerUnavailable,
    NoManagerFound,
    UnknownManager,
)
from qbit.core.services.install.managers import (
    ALL_MANAGERS,
    AptGet,
    Brew,
    Chocolatey,
    Dnf,
    PackageManager,
    Pacman,
    Scoop,
    Winget,
    Zypper,
)

logger = logging.getLogger(__name__)

# Accepted override spellings → backend class.
MANAGER_ALIASES: dict[str, type[PackageManager]] = {
    "apt": AptGet,
    "apt-get": AptGet,
    "dnf": Dnf,
    "pacman": Pacman,
    "zypper": Zypper,
    "brew": Brew,
    "homebrew": Brew,
    "winget": Winget,
    "choco": Chocolatey,
    "chocolatey": Chocolatey,
    "scoop": Scoop,
}

# Host OS → candidates in probe order.
PLATFORM_CANDIDATES: dict[str, tuple[type[PackageManager], ...]] = {
    "linux": (AptGet, Dnf, Pacman, Zypper),
    "darwin": (Brew,),
    "windows": (Winget, Chocolatey, Scoop),
}

SUPPORTED_MANAGERS: tuple[str, ...] = tuple(m.descriptor.name for m in ALL_MANAGERS)


def manager_from_name(name: str, host: HostContext) -> PackageManager | None:
    """Instantiate the backend for a (case-insensitive) name or alias."""
    cls = MANAGER_ALIASES.get(name.strip().lower())
    return cls(host) if cls else None


def detection_candidates(host: HostContext) -> list[PackageManager]:
    """Candidates for the host OS, in probe order.

    Unknown platforms probe every supported manager.
    """
    classes = PLATFORM_CANDIDATES.get(host.platform, ALL_MANAGERS)
    return [cls(host) for cls in classes]


def select_manager(host: HostContext | None = None) -> PackageManager:
    """Choose exactly one package manager for this invocation.

    Raises:
        UnknownManager: The override is empty or names no supported manager.
        ManagerUnavailable: The override's executable cannot be launched.
        NoManagerFound: Detection found no available candidate.
    """
    host = host or HostContext.from_environ()

    if host.manager_override is not None:
        override = host.manager_override.strip()
        pm = manager_from_name(override, host) if override else None
        if pm is None:
            raise UnknownManager(override, SUPPORTED_MANAGERS)
        if not pm.is_available():
            raise ManagerUnavailable(pm.name, pm.executable)
        logger.info("Using package manager override: %s", pm.name)
        return pm

    checked: list[str] = []
    for pm in detection_candidates(host):
        checked.append(pm.name)
        if pm.is_available():
            logger.info("Detected package manager: %s (platform=%s)", pm.name, host.platform)
            return pm

    raise NoManagerFound(checked)


def manager_status(host: HostContext | None = None) -> list[dict]:
    """Availability of every detection candidate for the host.

    Returns::

        [{"name": "apt-get", "executable": "apt-get",
          "config_keys": ["apt-get", "apt"], "available": True}, ...]
    """
    host = host or HostContext.from_environ()
    return [
        {
            "name": pm.name,
            "executable": pm.executable,
            "config_keys": list(pm.config_keys),
            "available": pm.is_available(),
        }
        for pm in detection_candidates(host)
    ]
