"""
L2 Backends — Linux system package managers.

apt-get, dnf, pacman and zypper. All four need root, so their
commands get the elevation prefix when it is available.

Package-spec grammar:
    apt-get  install PKG[=VER]
    dnf      install PKG[-VER]
    zypper   install PKG[=VER]
    pacman   -S PKG            (no pinning)
"""

from __future__ import annotations

from qbit.core.services.install.domain.validation import validate_version
from qbit.core.services.install.errors import UnsupportedOperation
from qbit.core.services.install.managers.base import (
    ManagerDescriptor,
    PackageManager,
)


class AptGet(PackageManager):
    descriptor = ManagerDescriptor("apt-get", "apt-get", ("apt-get", "apt"))
    yes_flag = "-y"
    needs_elevation = True

    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        version = validate_version(version, self.name)
        spec = f"{identifier}={version}" if version else identifier
        return ["install", spec]


class Dnf(PackageManager):
    descriptor = ManagerDescriptor("dnf", "dnf", ("dnf",))
    yes_flag = "-y"
    needs_elevation = True

    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        version = validate_version(version, self.name)
        spec = f"{identifier}-{version}" if version else identifier
        return ["install", spec]


class Pacman(PackageManager):
    descriptor = ManagerDescriptor("pacman", "pacman", ("pacman",))
    install_subcommand = "-S"
    yes_flag = "--noconfirm"
    needs_elevation = True

    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        # Never fall back to "latest" silently.
        if version is not None:
            raise UnsupportedOperation(
                "`pacman` does not support reliable direct version pinning "
                "in a single install command.",
                hint="Remove `:<version>` or install the required package "
                "version manually.",
            )
        return ["-S", identifier]


class Zypper(PackageManager):
    descriptor = ManagerDescriptor("zypper", "zypper", ("zypper",))
    yes_flag = "-y"
    needs_elevation = True

    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        version = validate_version(version, self.name)
        spec = f"{identifier}={version}" if version else identifier
        return ["install", spec]
