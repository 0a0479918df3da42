"""
L1 Domain — Target spec parsing (pure).

Turns the raw ``name[:version]`` string from the command line into a
``TargetSpec``.
"""

from __future__ import annotations

from dataclasses import dataclass

from qbit.core.services.install.errors import InvalidInput


@dataclass(frozen=True)
class TargetSpec:
    """A logical install target with an optional inline version."""

    logical_name: str
    inline_version: str | None = None

    def __str__(self) -> str:
        if self.inline_version:
            return f"{self.logical_name}:{self.inline_version}"
        return self.logical_name


def parse_target_spec(raw: str) -> TargetSpec:
    """Parse ``name`` or ``name:version``.

    Splits on the first ``:`` only, trims both halves and rejects
    empty ones.

    Raises:
        InvalidInput: If the name, or a version given after ``:``,
            is empty.
    """
    name, sep, version = raw.partition(":")
    name = name.strip()
    if not name:
        raise InvalidInput(
            f"Invalid install target `{raw}`: the target name is empty.",
            hint="Use `qbit install <name>` or `qbit install <name>:<version>`.",
        )
    if not sep:
        return TargetSpec(logical_name=name)

    version = version.strip()
    if not version:
        raise InvalidInput(
            f"Invalid install target `{raw}`: the version after `:` is empty.",
            hint=f"Use `qbit install {name}` to install the latest version.",
        )
    return TargetSpec(logical_name=name, inline_version=version)
