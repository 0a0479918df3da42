"""
qbit — CLI entrypoint.

Usage:
    python -m qbit.main --help
    python -m qbit.main install python:3.12 --dry-run
    python -m qbit.main run test
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from qbit import __version__
from qbit.core.observability.logging_config import configure_cli_logging


@click.group()
@click.version_option(version=__version__, prog_name="qbit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to qbit.yml / qbit.toml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """qbit — multi-language package/project manager."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    try:
        configure_cli_logging(debug=debug, verbose=verbose, quiet=quiet)
    except OSError as e:
        click.secho(f"❌ Cannot open log file {e.filename}: {e.strerror}", fg="red")
        sys.exit(1)


def load_config_or_exit(ctx: click.Context):
    """Load the project config (None if the project has none) or exit 1."""
    from qbit.core.config.loader import ConfigError, load_project_config

    try:
        return load_project_config(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@cli.command()
@click.argument("target")
@click.option("--dry-run", is_flag=True, help="Print the install command without running it.")
@click.option(
    "--yes", "-y", "non_interactive", is_flag=True,
    help="Pass the package manager's non-interactive flag.",
)
@click.option(
    "--manager", "-m", default=None,
    help="Package manager to use (default: QBIT_PACKAGE_MANAGER or auto-detect).",
)
@click.pass_context
def install(
    ctx: click.Context,
    target: str,
    dry_run: bool,
    non_interactive: bool,
    manager: str | None,
) -> None:
    """Install a system dependency (java, python, python:3.12, ...).

    Examples:

        qbit install git

        qbit install python:3.12 --dry-run

        qbit install jq --yes --manager brew
    """
    from qbit.core.services.install import HostContext, InstallError
    from qbit.core.services.install import install as install_target

    config = load_config_or_exit(ctx)
    host = HostContext.from_environ(manager_override=manager)

    try:
        install_target(
            target,
            dry_run=dry_run,
            non_interactive=non_interactive,
            host=host,
            config=config,
            echo=click.echo,
        )
    except InstallError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)

    if not dry_run and not ctx.obj.get("quiet"):
        click.secho(f"✅ Installed {target}", fg="green", bold=True)


@cli.command()
@click.argument("name")
@click.option("--dry-run", is_flag=True, help="List the steps without running them.")
@click.pass_context
def run(ctx: click.Context, name: str, dry_run: bool) -> None:
    """Run a named script from qbit.yml / qbit.toml."""
    from qbit.core.services.scripts import ScriptError, run_named_script

    config = load_config_or_exit(ctx)

    try:
        run_named_script(name, config=config, dry_run=dry_run, echo=click.echo)
    except ScriptError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


# ── Register sub-command groups from qbit/ui/cli/ ─────────────────

from qbit.ui.cli.managers import managers  # noqa: E402

cli.add_command(managers)


if __name__ == "__main__":
    cli()
