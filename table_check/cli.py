"""CLI entry point — command definitions using Click.

Commands:
    init    Generate a template config file
    scan    Check every component file under a directory
"""

import dataclasses
import functools
import json
import os
import sys

import click

from table_check import __version__
from table_check.config import FAIL_ON_CHOICES


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _verbose(ctx: click.Context, message: str) -> None:
    if ctx.obj["verbose"]:
        click.echo(f"[verbose] {message}", err=True)


def _emit(text: str, output_path: str | None) -> None:
    """Write *text* to stdout or to *output_path*."""
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        click.echo(f"Report written to '{output_path}'", err=True)
    else:
        click.echo(text)


def _handle_config_errors(func):
    """Decorator that catches configuration errors and exits cleanly."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from table_check.config import ConfigError, InvalidValueError

        try:
            return func(*args, **kwargs)
        except InvalidValueError as exc:
            click.echo(f"Configuration error: {exc}", err=True)
            sys.exit(1)
        except ConfigError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    return wrapper


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--config", "config_path", default=None,
              help="Path to the configuration file (default: ./table-check.yaml if present).")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable verbose logging.")
@click.version_option(__version__, prog_name="table-check")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Find misused <el-table-column> markup in Vue components."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------

@cli.command("init")
@click.option("--output", "output_path", default="table-check.yaml", show_default=True,
              help="Path where the template config file will be written.")
@_handle_config_errors
def init_command(output_path: str) -> None:
    """Generate a template table-check.yaml file."""
    from table_check.config import generate_template

    generate_template(output_path)
    click.echo(f"Template written to '{output_path}'.")


# ---------------------------------------------------------------------------
# scan
# ---------------------------------------------------------------------------

@cli.command("scan")
@click.argument("root", required=False)
@click.option("--format", "output_format", type=click.Choice(["text", "json"]),
              default="text", show_default=True, help="Report format.")
@click.option("--output", "output_path", default=None,
              help="Write the report to a file instead of stdout.")
@click.option("--pretty", is_flag=True, default=False,
              help="Pretty-print the JSON output.")
@click.option("--fail-on", type=click.Choice(FAIL_ON_CHOICES), default=None,
              help="Exit with status 1 when issues at this level are found "
                   "(overrides config; default: never).")
@click.option("--no-color", is_flag=True, default=False,
              help="Disable coloured output.")
@click.pass_context
@_handle_config_errors
def scan_command(ctx: click.Context, root: str | None, output_format: str,
                 output_path: str | None, pretty: bool, fail_on: str | None,
                 no_color: bool) -> None:
    """Check every component file under ROOT (default: config root or /workspace)."""
    from table_check.checks.table_column import check_file
    from table_check.config import load
    from table_check.discovery import find_files
    from table_check.reports import console
    from table_check.reports.summary import build_summary, to_dict

    config = load(ctx.obj["config_path"])
    if fail_on:
        config.fail_on = fail_on
    root = root or config.root
    text_mode = output_format == "text"
    color = not no_color and not output_path

    # Text goes straight to stdout as it is produced unless --output is given.
    buffered: list[str] = []

    def write(lines: list[str]) -> None:
        if not text_mode:
            return
        if output_path:
            buffered.extend(lines)
        else:
            click.echo("\n".join(lines))

    write(console.banner(root, color))

    _verbose(ctx, f"Looking for {', '.join(config.extensions)} files under '{root}'")
    found = find_files(root, tuple(config.extensions), config.exclude_dirs)
    for skipped in found.skipped:
        _verbose(ctx, f"Skipped unreadable directory '{skipped}'")

    if not found.files:
        message = f"⚠ No {'/'.join(config.extensions)} files found"
        if text_mode:
            write([click.style(message, fg="yellow") if color else message])
            if output_path:
                _emit("\n".join(buffered), output_path)
        else:
            click.echo(message, err=True)
            empty = build_summary([], 0, found.skipped)
            _emit(json.dumps(to_dict(empty, root), indent=2 if pretty else None,
                             ensure_ascii=False), output_path)
        return

    write([f"Found {len(found.files)} files", "", "Checking...", ""])

    rules = config.rules()
    results = []
    unreadable: list[str] = []
    for path in found.files:
        relative = os.path.relpath(path, root)
        try:
            result = check_file(path, rules)
        except OSError as exc:
            _verbose(ctx, f"Could not read '{relative}': {exc}")
            unreadable.append(relative)
            continue
        result = dataclasses.replace(result, path=relative)
        results.append(result)
        write(console.format_result(result, color))

    summary = build_summary(results, len(found.files), found.skipped, unreadable)
    _verbose(ctx, f"{summary.total_issues} issues in {len(summary.files_with_issues)} files")

    if text_mode:
        write(console.render_summary(summary, color))
        if output_path:
            _emit("\n".join(buffered), output_path)
    else:
        _emit(json.dumps(to_dict(summary, root), indent=2 if pretty else None,
                         ensure_ascii=False), output_path)

    if config.should_fail(summary.errors, summary.warnings):
        sys.exit(1)
