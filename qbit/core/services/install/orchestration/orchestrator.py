"""
L5 Orchestration — ``qbit install`` end to end.

parse target → select manager → look up config → resolve identifier
and version → build command → (optional) yes flag → dry-run or run.

Everything the steps need arrives as arguments: host snapshot, loaded
config, executor and echo. Nothing here reads the environment itself.
"""

from __future__ import annotations

import logging

from qbit.core.config.loader import LoadedProjectConfig
from qbit.core.services.install.detection.host import HostContext
from qbit.core.services.install.domain.plan import InstallPlan
from qbit.core.services.install.domain.target import parse_target_spec
from qbit.core.services.install.execution.runner import (
    Echo,
    Executor,
    execute_or_dry_run,
)
from qbit.core.services.install.resolver.identifier import resolve_target
from qbit.core.services.install.resolver.selection import select_manager

logger = logging.getLogger(__name__)


def plan_install(
    raw_spec: str,
    *,
    non_interactive: bool = False,
    host: HostContext | None = None,
    config: LoadedProjectConfig | None = None,
    echo: Echo | None = None,
) -> InstallPlan:
    """Resolve everything for ``raw_spec`` without executing anything.

    Args:
        raw_spec: ``name`` or ``name:version``.
        non_interactive: Add the manager's yes flag.
        host: Host snapshot (default: read from the environment).
        config: Loaded qbit.yml, or None when the project has none.
        echo: Receives user-facing report lines.

    Raises:
        InstallError: Any parsing, selection or command-building failure.
    """
    say = echo or (lambda line: logger.info("%s", line))

    target = parse_target_spec(raw_spec)
    manager = select_manager(host or HostContext.from_environ())
    say(f"Detected package manager: {manager.name}")

    entry = config.install_target(target.logical_name) if config else None
    resolved = resolve_target(target, entry, manager)

    if entry is not None and resolved.configured_version:
        say(
            f"Requested `{resolved.config_key}` version "
            f"{resolved.configured_version} (defined in {config.path})"
        )
    if resolved.overridden_version:
        say(
            f"Inline version {resolved.version} overrides configured version "
            f"{resolved.configured_version} for `{target.logical_name}`"
        )

    command = manager.build_install_cmd(resolved.identifier, resolved.version)
    plan = InstallPlan(
        manager_name=manager.name,
        identifier=resolved.identifier,
        requested_version=resolved.version,
        command=command,
    )
    if non_interactive:
        plan.command = manager.apply_yes_flag(plan.command)

    say(f"Resolved identifier: {plan.identifier}")
    say(f"Desired version: {plan.requested_version or 'latest'}")
    return plan


def install(
    raw_spec: str,
    *,
    dry_run: bool = False,
    non_interactive: bool = False,
    host: HostContext | None = None,
    config: LoadedProjectConfig | None = None,
    executor: Executor | None = None,
    echo: Echo | None = None,
) -> InstallPlan:
    """Plan the install of ``raw_spec`` and print or run the command.

    Returns:
        The executed (or, in dry-run mode, rendered) plan.

    Raises:
        InstallError: Planning failures, plus ``SpawnFailed`` /
            ``InstallerFailed`` when actually executing.
    """
    plan = plan_install(
        raw_spec,
        non_interactive=non_interactive,
        host=host,
        config=config,
        echo=echo,
    )
    execute_or_dry_run(plan.command, dry_run, executor=executor, echo=echo)
    return plan
