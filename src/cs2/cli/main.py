"""CLI entry point for cs2.

Invoked as::

    <style checker> | cs2 report [OPTIONS]
    cs2 report [OPTIONS] FILE

or, during development::

    python -m cs2.cli.main

Commands
--------
report      Report coding-style checker output
platforms   List supported CI platforms
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich when ``--verbose`` is given."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
    )


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="cs2")
def cli() -> None:
    """Coding-style report: parse, deduplicate and summarize checker output."""


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from cs2 import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]cs2[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# platforms command
# ---------------------------------------------------------------------------


@cli.command(name="platforms")
def platforms_command() -> None:
    """List the CI platforms accepted by ``report --ci``."""
    from cs2.ci import adapters

    console.print("[bold]Supported CI platforms:[/bold]")
    for name in adapters.list_platforms():
        console.print(f"  {name}")


# ---------------------------------------------------------------------------
# report command
# ---------------------------------------------------------------------------


@cli.command(name="report")
@click.argument("file", default="-", type=click.Path(allow_dash=True))
@click.option(
    "--ci",
    "ci",
    default=None,
    envvar="CS2_CI",
    help="Also print annotations for this CI platform (see `cs2 platforms`).",
)
@click.option(
    "--ci-output",
    type=click.File("w", encoding="utf-8", lazy=True),
    default=None,
    help="Write CI annotations to this file instead of stdout (created on first write).",
)
@click.option(
    "--no-ignore",
    is_flag=True,
    default=False,
    envvar="CS2_NO_IGNORE",
    help="Disable checking for files ignored by git.",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log pipeline details to stderr.")
def report_command(
    file: str,
    ci: str | None,
    ci_output: TextIO | None,
    no_ignore: bool,
    verbose: bool,
) -> None:
    """Report coding-style checker output.

    FILE holds the checker output; use - (the default) to read it from stdin.

    Exits with status 1 when at least one diagnostic is not ignored.
    """
    from cs2.ci import select_adapter
    from cs2.core.errors import Cs2Error
    from cs2.pipeline import ReportOptions, read_lines, run_pipeline

    _configure_logging(verbose)
    options = ReportOptions(no_ignore=no_ignore)

    adapter = None
    if ci is not None:
        adapter = select_adapter(ci, ci_output)
        if adapter is None:
            err_console.print("[yellow]Incorrect CI platform, continuing.[/yellow]")

    try:
        lines = read_lines(file)
        has_findings = run_pipeline(lines, options, adapter=adapter, console=console)
    except Cs2Error as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        sys.exit(1)

    if has_findings:
        sys.exit(1)


if __name__ == "__main__":
    cli()
