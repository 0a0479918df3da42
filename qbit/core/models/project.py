"""
Project config model — what qbit.yml / qbit.toml declares.

Two sections matter to qbit: ``scripts`` (named command lists for
``qbit run``) and ``install`` (per-target versions and per-manager
package identifiers for ``qbit install``).

Example::

    scripts:
      test: pytest -q
      ci:
        - ruff check .
        - pytest
    install:
      java: "21"
      python:
        version: "3.12"
        identifiers:
          winget: Python.Python.3.12
          brew: python@3.12
          default: python3
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


def _as_text(value: Any) -> Any:
    """Coerce integer scalars to text; reject floats and booleans.

    YAML and TOML read an unquoted ``3.10`` as the float ``3.1``, so a
    float can no longer be turned back into the version that was written.
    """
    if isinstance(value, bool):
        raise ValueError(
            f"expected text, got boolean `{str(value).lower()}`; "
            "quote the value in the config file"
        )
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        raise ValueError(
            f"unquoted number `{value}` is ambiguous (3.10 reads as 3.1); "
            "quote the version, e.g. \"3.10\""
        )
    return value


class InstallSpec(BaseModel):
    """Install settings for one logical target.

    A bare string entry (``java: "21"``) is shorthand for a version-only
    spec. ``identifiers`` is either a single identifier used by every
    manager, or a mapping of manager alias → identifier with an optional
    ``default`` key.
    """

    version: str | None = None
    identifiers: str | dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _expand_shorthand(cls, data: Any) -> Any:
        data = _as_text(data)
        if isinstance(data, str):
            return {"version": data}
        return data

    @field_validator("version", mode="before")
    @classmethod
    def _version_text(cls, value: Any) -> Any:
        return _as_text(value)

    @field_validator("identifiers", mode="before")
    @classmethod
    def _identifier_text(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): _as_text(v) for k, v in value.items()}
        return _as_text(value)

    @property
    def global_identifier(self) -> str | None:
        """The single identifier for every manager, if one was given."""
        if isinstance(self.identifiers, str) and self.identifiers.strip():
            return self.identifiers.strip()
        return None

    def identifier(self, key: str) -> str | None:
        """Identifier for a manager alias (case-insensitive), if non-blank."""
        if not isinstance(self.identifiers, dict):
            return None
        wanted = key.lower()
        for alias, value in self.identifiers.items():
            if alias.lower() == wanted and value.strip():
                return value.strip()
        return None


class ProjectConfig(BaseModel):
    """Root of qbit.yml / qbit.toml."""

    scripts: dict[str, list[str]] = Field(default_factory=dict)
    install: dict[str, InstallSpec] = Field(default_factory=dict)

    @field_validator("scripts", mode="before")
    @classmethod
    def _single_command_scripts(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {
            name: [cmds] if isinstance(cmds, str) else cmds
            for name, cmds in value.items()
        }

    def script(self, name: str) -> list[str] | None:
        """Commands of a named script (exact name)."""
        return self.scripts.get(name)

    def install_target(self, name: str) -> tuple[str, InstallSpec] | None:
        """Look up an install target case-insensitively.

        Returns:
            ``(canonical_key, spec)`` as written in the config, or None.
        """
        if name in self.install:
            return name, self.install[name]
        wanted = name.casefold()
        for key, spec in self.install.items():
            if key.casefold() == wanted:
                return key, spec
        return None
