"""
L1 Domain — Install plan (pure).

The fully resolved decision of one ``qbit install`` invocation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from qbit.core.services.install.domain.command import InstallCommand


@dataclass
class InstallPlan:
    """Which manager installs what, and the exact command to run.

    Built once per invocation. Only ``command`` changes afterwards, when
    the non-interactive flag is applied.
    """

    manager_name: str
    identifier: str
    requested_version: str | None
    command: InstallCommand

    def to_dict(self) -> dict[str, Any]:
        return {
            "manager": self.manager_name,
            "identifier": self.identifier,
            "version": self.requested_version,
            "argv": self.command.argv,
            "command": self.command.render(),
        }
