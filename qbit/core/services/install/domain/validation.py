"""
L1 Domain — Identifier and version validation (pure).

Shared checks every backend runs before building a package spec, plus
the Homebrew formula derivation rule.
"""

from __future__ import annotations

from qbit.core.services.install.errors import InvalidInput


def validate_identifier(identifier: str, manager: str) -> str:
    """Return the trimmed identifier, or raise if nothing is left."""
    trimmed = identifier.strip()
    if not trimmed:
        raise InvalidInput(
            f"Resolved identifier is empty for `{manager}`.",
            hint="Define a valid identifier in qbit.yml under install.<target>.",
        )
    return trimmed


def validate_version(version: str | None, manager: str) -> str | None:
    """Return the trimmed version (``None`` stays ``None``).

    Raises:
        InvalidInput: If the version is blank or contains whitespace.
    """
    if version is None:
        return None

    trimmed = version.strip()
    if not trimmed:
        raise InvalidInput(
            f"Version is empty for `{manager}`.",
            hint="Use `qbit install <target>` or provide a non-empty version.",
        )
    if any(c.isspace() for c in trimmed):
        raise InvalidInput(
            f"Version `{trimmed}` contains whitespace, which is not valid "
            f"for `{manager}`.",
            hint="Use a compact version like `3.12`.",
        )
    return trimmed


def derive_brew_formula(identifier: str, version: str | None) -> str:
    """Derive the Homebrew formula name for an optional version.

    ``python`` + ``3.12`` → ``python@3.12``. An identifier that already
    pins the same version is returned as-is; a different pinned version
    is a conflict.

    Raises:
        InvalidInput: On a conflicting pinned version, or when no
            versioned formula can be derived from the identifier.
    """
    if version is None:
        return identifier

    if "@" in identifier:
        existing = identifier.rsplit("@", 1)[1]
        if existing == version:
            return identifier
        raise InvalidInput(
            f"Homebrew identifier `{identifier}` already includes version "
            f"`{existing}`.",
            hint=f"Remove inline version `:{version}` or update your "
            "`identifiers.brew` value.",
        )

    if identifier.endswith("/") or any(c.isspace() for c in identifier):
        raise InvalidInput(
            f"Cannot derive a versioned Homebrew formula from `{identifier}`.",
            hint=f"Set an explicit `identifiers.brew` value like "
            f"`<formula>@{version}`.",
        )

    return f"{identifier}@{version}"
