"""
L2 Backends — Windows package managers.

winget, Chocolatey and Scoop. Windows has no sudo-style prefix;
elevation is the terminal's business.
"""

from __future__ import annotations

from qbit.core.services.install.domain.validation import validate_version
from qbit.core.services.install.errors import UnsupportedOperation
from qbit.core.services.install.managers.base import (
    ManagerDescriptor,
    PackageManager,
)


class Winget(PackageManager):
    descriptor = ManagerDescriptor("winget", "winget", ("winget",))
    yes_flag = "--silent"

    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        version = validate_version(version, self.name)
        args = [
            "install",
            "--id", identifier,
            "--exact",
            "--accept-source-agreements",
            "--accept-package-agreements",
        ]
        if version:
            args += ["--version", version]
        return args


class Chocolatey(PackageManager):
    descriptor = ManagerDescriptor("choco", "choco", ("choco", "chocolatey"))
    yes_flag = "-y"

    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        version = validate_version(version, self.name)
        args = ["install", identifier]
        if version:
            args += ["--version", version]
        return args


class Scoop(PackageManager):
    descriptor = ManagerDescriptor("scoop", "scoop", ("scoop",))

    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        if version is not None:
            raise UnsupportedOperation(
                "`scoop` version pinning is not reliable through a single "
                "install command.",
                hint="Remove `:<version>` and install the required "
                "bucket/package version manually, or switch to "
                "`winget`/`choco`.",
            )
        return ["install", identifier]
