"""
L2 Backends — Homebrew.

Versions are expressed through versioned formulae (``python@3.12``).
Brew has no confirmation prompt, so there is no yes flag, and it must
not run under sudo.
"""

from __future__ import annotations

from qbit.core.services.install.domain.validation import (
    derive_brew_formula,
    validate_version,
)
from qbit.core.services.install.managers.base import (
    ManagerDescriptor,
    PackageManager,
)


class Brew(PackageManager):
    descriptor = ManagerDescriptor("brew", "brew", ("brew", "homebrew"))

    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        version = validate_version(version, self.name)
        return ["install", derive_brew_formula(identifier, version)]
