"""
autoerror — CLI entrypoint.

Usage:
    python -m autoerror.main --help
    python -m autoerror.main generate errors.yml
    python -m autoerror.main resolve errors.yml --json
    python -m autoerror.main config check
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from autoerror import __version__
from autoerror.core.observability.logging_config import setup_logging


@click.group()
@click.version_option(version=__version__, prog_name="autoerror")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to autoerror.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    config_path: str | None,
) -> None:
    """autoerror — derive Display, Error and From impls for error enums."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["debug"] = debug
    ctx.obj["config_path"] = Path(config_path) if config_path else None

    # ── Logging setup (once, at process start) ──────────────────
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    elif quiet:
        level = "ERROR"
    else:
        level = os.environ.get("AUTOERROR_LOG_LEVEL", "WARNING")

    setup_logging(
        level=level,
        log_file=os.environ.get("AUTOERROR_LOG_FILE"),
        log_file_level=os.environ.get("AUTOERROR_LOG_FILE_LEVEL"),
    )


@cli.command()
@click.argument("declaration", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--output", "-o", "output", default=None, help="Write to this file instead of stdout.")
@click.option("--overwrite", is_flag=True, help="Replace an existing output file.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    declaration: Path,
    output: str | None,
    overwrite: bool,
    as_json: bool,
) -> None:
    """Generate Rust impls for the types declared in DECLARATION.

    Examples:

        autoerror generate errors.yml

        autoerror generate errors.yml -o src/error_impls.rs --overwrite
    """
    from autoerror.core.services.generate_ops import write_generated_file
    from autoerror.core.use_cases.generate import run_generate

    result = run_generate(
        declaration,
        settings_path=ctx.obj.get("config_path"),
        output_path=output,
        overwrite=overwrite,
    )

    generated = result.generated
    written: dict | None = None
    if output and generated is not None:
        written = write_generated_file(Path.cwd(), generated)

    if as_json:
        payload = result.to_dict()
        if written is not None:
            payload["written"] = written
        failed = not result.ok or bool(written and written.get("error"))
        click.echo(json.dumps(payload, indent=2))
        sys.exit(1 if failed else 0)

    if result.error or generated is None:
        click.secho(f"❌ {result.error or 'Nothing was generated'}", fg="red", err=True)
        sys.exit(1)

    if written is None:
        click.echo(generated.content, nl=False)
        return

    if written.get("error"):
        click.secho(f"❌ {written['error']}", fg="red", err=True)
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        state = "updated" if written.get("changed") else "unchanged"
        click.secho(f"✅ Wrote {written['path']} ({state})", fg="green")
        click.echo(f"   Types: {generated.reason}")


@cli.command()
@click.argument("declaration", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def resolve(ctx: click.Context, declaration: Path, as_json: bool) -> None:
    """Show the per-variant decision table for DECLARATION."""
    from autoerror.core.use_cases.generate import run_generate

    result = run_generate(declaration, settings_path=ctx.obj.get("config_path"))

    if as_json:
        payload = result.to_dict()
        payload.pop("file", None)
        click.echo(json.dumps(payload, indent=2))
        sys.exit(0 if result.ok else 1)

    if result.error:
        click.secho(f"❌ {result.error}", fg="red", err=True)
        sys.exit(1)

    for gen in result.results:
        click.secho(f"\n🧩 {gen.type_name}", fg="cyan", bold=True)
        for policy in gen.policies:
            fields = ", ".join(f.type_ref for f in policy.variant.fields)
            flags = []
            if policy.is_cause:
                flags.append("source")
            if policy.make_from:
                flags.append("from")
            flag_label = f"  [{', '.join(flags)}]" if flags else ""
            click.echo(f"   • {policy.name}({fields}){flag_label}")
            click.echo(f"       display: {policy.display.text!r} ({policy.display.kind})")

        if gen.conversions:
            click.secho("   Conversions:", fg="white", bold=True)
            for conv in gen.conversions:
                click.echo(f"     {conv.source_type} → {gen.type_name}::{conv.variant}")

    click.echo()


# ── Register sub-command groups from autoerror/ui/cli/ ─────────────

from autoerror.ui.cli.config import config

cli.add_command(config)


if __name__ == "__main__":
    cli()
