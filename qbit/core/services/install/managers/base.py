"""
L2 Backends — the package-manager contract.

This defines the interface every backend implements. Selection,
resolution and execution only talk to managers through this
contract, never to a concrete tool's grammar directly.

To add a backend:
    1. Subclass PackageManager
    2. Set ``descriptor`` (and ``install_subcommand`` / ``yes_flag``)
    3. Implement ``_install_args``
    4. Add it to ``ALL_MANAGERS`` in ``managers/__init__.py``
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from qbit.core.services.install.detection.host import HostContext
from qbit.core.services.install.domain.command import InstallCommand
from qbit.core.services.install.domain.validation import validate_identifier

logger = logging.getLogger(__name__)

# Elevation helper prefixed to system package managers on POSIX hosts.
ELEVATION_HELPER = "sudo"


@dataclass(frozen=True)
class ManagerDescriptor:
    """Static identity of a backend.

    Attributes:
        name: Canonical manager name shown to users.
        executable: Binary probed and spawned.
        config_keys: Aliases used to look up identifiers in qbit.yml.
    """

    name: str
    executable: str
    config_keys: tuple[str, ...]


class PackageManager(ABC):
    """Abstract base class for all package-manager backends.

    Subclasses declare a ``descriptor`` and build their own argument
    list. Version handling is each backend's responsibility: a backend
    that cannot pin versions must refuse one loudly.
    """

    descriptor: ClassVar[ManagerDescriptor]
    # Token after which the non-interactive flag is inserted.
    install_subcommand: ClassVar[str] = "install"
    # None → the manager has no non-interactive flag.
    yes_flag: ClassVar[str | None] = None
    # System managers get an elevation prefix on POSIX hosts.
    needs_elevation: ClassVar[bool] = False

    def __init__(self, host: HostContext | None = None) -> None:
        self._host = host or HostContext()

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def executable(self) -> str:
        return self.descriptor.executable

    @property
    def config_keys(self) -> tuple[str, ...]:
        return self.descriptor.config_keys

    def is_available(self) -> bool:
        """Probe the executable. Re-probed on every call."""
        available = self._host.probe(self.executable)
        logger.debug("Probe %s → %s", self.executable, available)
        return available

    def build_install_cmd(
        self,
        identifier: str,
        version: str | None = None,
    ) -> InstallCommand:
        """Build the install command for one package.

        Raises:
            InvalidInput: Empty identifier, blank version, or a version
                containing whitespace.
            UnsupportedOperation: A version was requested from a manager
                that cannot pin one.
        """
        identifier = validate_identifier(identifier, self.name)
        args = self._install_args(identifier, version)
        return self._command(args)

    def apply_yes_flag(self, command: InstallCommand) -> InstallCommand:
        """Add the non-interactive flag after the install subcommand.

        Idempotent. Managers without such a flag return ``command``
        unchanged.
        """
        if self.yes_flag is None:
            return command
        return command.with_flag_after(self.install_subcommand, self.yes_flag)

    @abstractmethod
    def _install_args(self, identifier: str, version: str | None) -> list[str]:
        """Arguments after the executable for ``identifier``.

        ``identifier`` is already validated; ``version`` is raw.
        """

    def _command(self, args: list[str]) -> InstallCommand:
        """Wrap ``args`` into a command, elevating when appropriate.

        Elevation only happens on non-Windows hosts and only if the
        helper itself is available; otherwise the bare command is used
        and a permission failure surfaces at run time.
        """
        if (
            self.needs_elevation
            and not self._host.is_windows
            and self._host.probe(ELEVATION_HELPER)
        ):
            return InstallCommand(ELEVATION_HELPER, (self.executable, *args))
        return InstallCommand(self.executable, tuple(args))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
