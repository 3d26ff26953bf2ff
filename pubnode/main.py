"""
pubnode — CLI entrypoint.

Usage:
    pubnode --help
    pubnode genconfig config.json
    pubnode checkconfig config.yaml
    pubnode showconfig --json
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from pubnode import __version__
from pubnode.core.observability.logging_config import (
    ENV_LOG_FILE,
    ENV_LOG_FILE_LEVEL,
    cli_log_level,
    setup_logging,
)


@click.group()
@click.version_option(version=__version__, prog_name="pubnode")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to the node config file (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """pubnode — configuration bootstrap for a pub/sub server node."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    setup_logging(
        level=cli_log_level(debug=debug, verbose=verbose, quiet=quiet, env=os.environ),
        log_file=os.environ.get(ENV_LOG_FILE),
        log_file_level=os.environ.get(ENV_LOG_FILE_LEVEL),
    )


@cli.command()
@click.argument("output", type=click.Path(dir_okay=False))
@click.pass_context
def genconfig(ctx: click.Context, output: str) -> None:
    """Generate a starter config file (.json, .toml, .yaml or .yml).

    Prompts for a project name and creates a random project secret.

    Examples:

        pubnode genconfig config.json

        pubnode genconfig /etc/pubnode/config.yaml
    """
    from pubnode.core.use_cases.config_generate import run_generate

    result = run_generate(Path(output))

    # The prompt leaves the cursor on its line
    if result.prompted:
        click.echo()

    if not result.ok:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        click.secho(f"✅ Config written to {result.path}", fg="green", bold=True)
        click.echo(f"   Project: {result.project_name}")
        click.echo()


@cli.command()
@click.argument("path", required=False, type=click.Path(dir_okay=False))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def checkconfig(ctx: click.Context, path: str | None, as_json: bool) -> None:
    """Validate a node config file and its project list."""
    from pubnode.core.use_cases.config_check import check_config

    config_path = Path(path) if path else ctx.obj.get("config_path")
    result = check_config(config_path=config_path)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)
        return

    if result.valid:
        assert result.structure is not None  # guaranteed when valid
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        click.echo(f"   File: {result.config_path}")
        click.echo(f"   Projects: {len(result.structure.projects)}")
        for project in result.structure.projects:
            ns_label = f" ({len(project.namespaces)} namespaces)" if project.namespaces else ""
            click.echo(f"     • {project.name}{ns_label}")
    else:
        click.secho("❌ Configuration errors:", fg="red", bold=True)
        for err in result.errors:
            click.echo(f"   • {err}")

    if result.warnings:
        click.echo()
        click.secho("⚠️  Warnings:", fg="yellow")
        for warn in result.warnings:
            click.echo(f"   • {warn}")

    if not result.valid:
        click.echo()
        sys.exit(1)

    click.echo()


@cli.command()
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def showconfig(ctx: click.Context, as_json: bool) -> None:
    """Show the resolved node configuration (secrets masked)."""
    from pubnode.core.use_cases.config_show import show_config

    result = show_config(config_path=ctx.obj.get("config_path"))
    data = result.to_dict()

    if as_json:
        click.echo(json.dumps(data, indent=2))
        sys.exit(1 if result.error else 0)
        return

    if result.error:
        click.secho(f"❌ {result.error}", fg="red")
        sys.exit(1)

    source = data["config_path"] or "defaults + environment"
    click.secho(f"\n🛰  Node: {data['config']['name']}", fg="cyan", bold=True)
    click.echo(f"   Source: {source}")
    click.echo()
    for key, value in data["config"].items():
        click.echo(f"   {key:<32} {value}")
    click.echo()


if __name__ == "__main__":
    cli()
