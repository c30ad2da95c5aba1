"""
CLI commands for generator settings (autoerror.yml).

Thin wrappers over ``autoerror.core.use_cases.config_check``.
"""

from __future__ import annotations

import json
import sys

import click


@click.group()
def config() -> None:
    """Generator settings — check and show autoerror.yml."""


@config.command("check")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_check(ctx: click.Context, as_json: bool) -> None:
    """Validate autoerror.yml."""
    from autoerror.core.use_cases.config_check import check_config

    result = check_config(config_path=ctx.obj.get("config_path"))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.valid else 1)

    if result.valid:
        click.secho("✅ Configuration is valid", fg="green", bold=True)
        if result.config_path:
            click.echo(f"   File: {result.config_path}")
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


@config.command("show")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def config_show(ctx: click.Context, as_json: bool) -> None:
    """Show the effective settings."""
    from autoerror.core.config.loader import ConfigError, load_settings

    try:
        settings = load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(settings.model_dump(), indent=2))
        return

    click.secho("⚙️  Settings", fg="cyan", bold=True)
    click.echo(f"   Error type names: {', '.join(settings.error_type_names) or '(none)'}")
    click.echo(f"   Match mode:       {settings.error_match}")
    click.echo(f"   Field delimiter:  {settings.field_delimiter!r}")
    click.echo()
