"""
Install errors — the typed failures of planning and executing an install.

Every error carries a human-readable message that names the offending
value plus a corrective hint. None of them are retried: package manager
invocations are not safe to repeat blindly.
"""

from __future__ import annotations

from typing import Iterable


class InstallError(Exception):
    """Base class for every install planning / execution failure."""

    kind = "install_error"

    def __init__(self, message: str, *, hint: str = "") -> None:
        self.message = message
        self.hint = hint
        super().__init__(f"{message} {hint}".strip())


class InvalidInput(InstallError):
    """Malformed target spec, empty identifier, or bad version string."""

    kind = "invalid_input"


class UnsupportedOperation(InvalidInput):
    """The selected manager cannot express the requested operation."""

    kind = "unsupported_operation"


class UnknownManager(InstallError):
    """The manager override names something qbit does not support."""

    kind = "unknown_manager"

    def __init__(self, name: str, supported: Iterable[str]) -> None:
        self.name = name
        self.supported = list(supported)
        choices = ", ".join(self.supported)
        if name.strip():
            message = f"Unknown package manager `{name}`."
        else:
            message = "The package manager override is set but empty."
        super().__init__(
            message,
            hint=f"Set the override to one of: {choices}, or unset it.",
        )


class ManagerUnavailable(InstallError):
    """The requested manager is supported but not installed on this host."""

    kind = "manager_unavailable"

    def __init__(self, name: str, executable: str) -> None:
        self.name = name
        self.executable = executable
        super().__init__(
            f"Package manager `{name}` was requested, but executable "
            f"`{executable}` is not available in PATH.",
            hint="Install it or remove the override.",
        )


class NoManagerFound(InstallError):
    """Platform detection found none of the candidate managers."""

    kind = "no_manager_found"

    def __init__(self, checked: Iterable[str]) -> None:
        self.checked = list(checked)
        super().__init__(
            "No supported package manager detected in PATH. "
            f"Checked: {', '.join(self.checked) or 'nothing'}.",
            hint="Install one of them or set QBIT_PACKAGE_MANAGER.",
        )


class SpawnFailed(InstallError):
    """The installer process could not be started at all."""

    kind = "spawn_failed"

    def __init__(self, command: str, reason: str) -> None:
        self.command = command
        self.reason = reason
        super().__init__(
            f"Could not start `{command}`: {reason}.",
            hint="Check that the package manager is installed and on PATH.",
        )


class InstallerFailed(InstallError):
    """The installer ran but exited unsuccessfully."""

    kind = "installer_failed"

    def __init__(self, command: str, exit_code: int) -> None:
        self.command = command
        self.exit_code = exit_code
        super().__init__(
            f"Installer command `{command}` exited with code {exit_code}.",
            hint="Review the installer output above; qbit does not retry.",
        )
