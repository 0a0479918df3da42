"""
CLI commands for package manager discovery.

Thin wrappers over ``qbit.core.services.install``.
"""

from __future__ import annotations

import json
import sys

import click


@click.group()
def managers() -> None:
    """Package managers — list candidates, show the selected one."""


@managers.command("list")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
def list_managers(as_json: bool) -> None:
    """Show the package managers qbit probes on this host."""
    from qbit.core.services.install import HostContext, manager_status

    host = HostContext.from_environ()
    result = manager_status(host)

    if as_json:
        click.echo(json.dumps({"platform": host.platform, "managers": result}, indent=2))
        return

    click.secho(f"📦 Package managers ({host.platform}):", fg="cyan", bold=True)
    for pm in result:
        icon = "✅" if pm["available"] else "❌"
        click.echo(f"   {icon} {pm['name']:<10} keys: {', '.join(pm['config_keys'])}")
    click.echo()


@managers.command()
@click.option(
    "--manager", "-m", default=None,
    help="Validate this override instead of QBIT_PACKAGE_MANAGER.",
)
def which(manager: str | None) -> None:
    """Show the package manager `qbit install` would use."""
    from qbit.core.services.install import HostContext, InstallError, select_manager

    host = HostContext.from_environ(manager_override=manager)
    try:
        pm = select_manager(host)
    except InstallError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    source = "override" if host.manager_override is not None else "detected"
    click.echo(f"{pm.name} ({source})")
