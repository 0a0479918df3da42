"""
L2 Resolver — Identifier and version resolution.

Merges the logical target, the optional qbit.yml entry and the
selected manager into the identifier + version a backend needs.

Version:    inline  >  configured  >  None ("latest")
Identifier: global string  >  manager alias  >  ``default``  >  logical name
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from qbit.core.models.project import InstallSpec
from qbit.core.services.install.domain.target import TargetSpec
from qbit.core.services.install.managers.base import PackageManager

logger = logging.getLogger(__name__)

# Generic fallback key in an ``identifiers`` map.
DEFAULT_IDENTIFIER_KEY = "default"


@dataclass(frozen=True)
class ResolvedTarget:
    """Outcome of resolution for one target on one manager."""

    logical_name: str
    identifier: str
    version: str | None = None
    version_source: str = "latest"  # "inline" | "config" | "latest"
    identifier_source: str = "logical_name"
    config_key: str | None = None
    configured_version: str | None = None

    @property
    def overridden_version(self) -> bool:
        """True when an inline version replaced a different configured one."""
        return (
            self.version_source == "inline"
            and self.configured_version is not None
            and self.configured_version != self.version
        )


def resolve_identifier(
    logical_name: str,
    spec: InstallSpec | None,
    manager: PackageManager,
) -> tuple[str, str]:
    """Pick the package identifier for ``manager``.

    Returns:
        ``(identifier, source)`` where source is one of ``global``,
        ``manager:<alias>``, ``default`` or ``logical_name``.
    """
    if spec is not None:
        if spec.global_identifier:
            return spec.global_identifier, "global"
        for key in manager.config_keys:
            found = spec.identifier(key)
            if found:
                return found, f"manager:{key}"
        found = spec.identifier(DEFAULT_IDENTIFIER_KEY)
        if found:
            return found, DEFAULT_IDENTIFIER_KEY
    return logical_name, "logical_name"


def resolve_target(
    target: TargetSpec,
    entry: tuple[str, InstallSpec] | None,
    manager: PackageManager,
) -> ResolvedTarget:
    """Resolve identifier and version for ``target``.

    An inline version silently wins over a configured one; callers
    report that as information, not as an error.
    """
    config_key, spec = entry if entry else (None, None)
    configured = spec.version.strip() if spec and spec.version else None
    configured = configured or None

    if target.inline_version is not None:
        version, version_source = target.inline_version, "inline"
    elif configured is not None:
        version, version_source = configured, "config"
    else:
        version, version_source = None, "latest"

    identifier, identifier_source = resolve_identifier(
        target.logical_name, spec, manager,
    )

    resolved = ResolvedTarget(
        logical_name=target.logical_name,
        identifier=identifier,
        version=version,
        version_source=version_source,
        identifier_source=identifier_source,
        config_key=config_key,
        configured_version=configured,
    )
    logger.debug(
        "Resolved %s on %s → %s (version=%s from %s, id from %s)",
        target.logical_name, manager.name, identifier,
        version or "latest", version_source, identifier_source,
    )
    return resolved
