"""nsloader CLI - inspect prefix registrations from a settings file."""

import os
import sys

import click
from rich.table import Table
from rich.text import Text

from .console import console
from .console import err_console
from .loaders import BaseLoader
from .logging_setup import init_json_logging
from .resolver import is_readable_file
from .settings import SettingsError
from .settings import build_loaders
from .settings import load_settings
from .utils.error_format import escape_markup
from .utils.error_format import format_error_message

config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (default: $NSLOADER_CONFIG or ./nsloader.yaml)",
)


def _load_loaders(config_path: str | None) -> list[BaseLoader]:
    """Load settings and build loaders, exiting with a message on failure."""
    try:
        settings = load_settings(config_path)
    except SettingsError as e:
        err_console.print(f"[red]Error:[/red] {escape_markup(format_error_message(e))}")
        sys.exit(1)
    return build_loaders(settings)


def _resolve(loaders: list[BaseLoader], name: str) -> str | None:
    for loader in loaders:
        if path := loader.resolve(name):
            return path
    return None


@click.group()
@click.version_option(package_name="nsloader")
@click.option("--log-file", type=click.Path(dir_okay=False), default=None, help="Write JSONL logs to this file")
@click.option("--log-level", default=None, help="Log level (default: $NSLOADER_LOG_LEVEL or WARNING)")
def cli(log_file: str | None, log_level: str | None):
    """nsloader - namespace prefix to directory resolver."""
    if log_file or log_level:
        try:
            init_json_logging(log_file, log_level)
        except OSError as e:
            err_console.print(f"[red]Error:[/red] cannot open log file: {escape_markup(format_error_message(e))}")
            sys.exit(1)


@cli.command()
@click.argument("name")
@config_option
def resolve(name: str, config_path: str | None):
    """Print the source file NAME resolves to."""
    path = _resolve(_load_loaders(config_path), name)
    if path is None:
        err_console.print(f"[yellow]not found:[/yellow] {escape_markup(name)}")
        sys.exit(1)
    click.echo(path)


@cli.command()
@click.argument("name")
@config_option
def explain(name: str, config_path: str | None):
    """Show every candidate path probed for NAME, in order."""
    loaders = _load_loaders(config_path)

    table = Table(title=f"Candidates for {escape_markup(name)}")
    table.add_column("Loader", style="dim")
    table.add_column("Prefix", style="cyan")
    table.add_column("Candidate")
    table.add_column("Readable", justify="center")

    winner = None
    for loader in loaders:
        for prefix, candidate in loader.resolver.iter_candidates(name):
            readable = is_readable_file(candidate)
            if readable and winner is None:
                winner = candidate
            marker = Text("yes", style="green") if readable else Text("no", style="dim")
            table.add_row(type(loader).__name__, Text(prefix), Text(candidate), marker)

    if table.row_count == 0:
        console.print(f"[dim]No registered prefix matches {escape_markup(name)}[/dim]")
        sys.exit(1)

    console.print(table)
    if winner is None:
        console.print("[yellow]Not found[/yellow]")
        sys.exit(1)
    console.print(f"[green]Resolves to:[/green] {escape_markup(winner)}")


@cli.command()
@config_option
def dirs(config_path: str | None):
    """List registered prefixes and their directories in probe order."""
    loaders = _load_loaders(config_path)

    table = Table(title="Registered Prefixes")
    table.add_column("Loader", style="dim")
    table.add_column("Prefix", style="cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Directory")

    for loader in loaders:
        for prefix, directories in loader.registry.items():
            for index, directory in enumerate(directories, start=1):
                table.add_row(type(loader).__name__, Text(prefix), str(index), Text(directory))

    if table.row_count == 0:
        console.print("[dim]No prefixes registered.[/dim]")
        return
    console.print(table)


@cli.command()
@config_option
def check(config_path: str | None):
    """Report registered directories that do not exist.

    Missing directories are accepted at registration time and only show up
    as names that never resolve.
    """
    loaders = _load_loaders(config_path)

    missing = []
    for loader in loaders:
        for prefix, directories in loader.registry.items():
            missing.extend((prefix, d) for d in directories if not os.path.isdir(d))

    if not missing:
        console.print("[green]All registered directories exist.[/green]")
        return

    for prefix, directory in missing:
        console.print(f"[yellow]missing:[/yellow] {escape_markup(prefix)} -> {escape_markup(directory)}")
    sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
