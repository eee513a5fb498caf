"""
cli.py - labtools command line

Usage:
    labtools search ./project test.txt README.md      # Case-sensitive search
    labtools search ./project readme.md -i            # Case-insensitive search
    labtools permute ABC                              # All orderings, swap strategy
    labtools permute AAB --unique --strategy heap     # Distinct orderings only
    labtools permute ABCDE --compare                  # Time every strategy
    labtools config init                              # Write ./.labtools.yaml with defaults
    labtools config check ./labtools.yaml             # Validate a configuration file

Results go to stdout; logs and error messages go to stderr.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import ConfigParser, ConfigurationError, load_config
from .errors import LabToolsError
from .models.config import LabConfig
from .models.permutation import PermutationStrategy, get_fastest
from .tools.file_searcher import FileSearcher
from .tools.permutations import PermutationGenerator


logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="labtools",
    help="Recursive file name search and string permutation generation",
    add_completion=False,
)


def configure_logging(config: LabConfig, verbose: bool = False) -> None:
    """Send log records to stderr at the configured level."""
    level = logging.DEBUG if verbose else config.logging.get_level_number()
    logging.basicConfig(level=level, format=config.logging.format, stream=sys.stderr, force=True)


def _load(config_path: Optional[Path], verbose: bool) -> LabConfig:
    try:
        result = load_config(config_path)
    except ConfigurationError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    configure_logging(result.config, verbose)
    for warning in result.warnings:
        logger.info(f"Config: {warning}")
    return result.config


@app.command("search")
def search(
    root: str = typer.Argument(..., help="Directory to search"),
    names: List[str] = typer.Argument(..., help="File names to look for"),
    ignore_case: Optional[bool] = typer.Option(
        None, "--ignore-case/--case-sensitive", "-i/-I", help="Name matching mode [default: from config]"
    ),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Search a directory tree for files with the given names."""
    config = _load(config_path, verbose)
    case_sensitive = config.search.case_sensitive if ignore_case is None else not ignore_case

    console.print(f"Searching in: {root}")
    console.print(f"Files to find: {', '.join(names)}")
    console.print(f"Case-sensitive: {case_sensitive}")

    try:
        result = FileSearcher(case_sensitive=case_sensitive).search(root, names)
    except LabToolsError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    table = Table(title="Search Results", show_header=True)
    table.add_column("File", style="bold")
    table.add_column("Occurrences", justify="right")
    table.add_column("Status")

    for name, count in result.get_counts().items():
        status = "[green]FOUND[/green]" if count else "[yellow]NOT FOUND[/yellow]"
        table.add_row(name, str(count), status)

    console.print(table)

    for name in result.get_found_names():
        console.print(f"\n[bold]{name}[/bold] locations:")
        for path in result.get_paths(name):
            console.print(f"  - {path}", soft_wrap=True)

    for error in result.errors:
        err_console.print(f"[yellow]Skipped:[/yellow] {error}")


@app.command("permute")
def permute(
    text: str = typer.Argument(..., help="String to permute"),
    unique: bool = typer.Option(False, "--unique", "-d", help="Exclude duplicate permutations"),
    strategy: Optional[PermutationStrategy] = typer.Option(
        None, "--strategy", "-s", case_sensitive=False, help="Generation algorithm"
    ),
    compare: bool = typer.Option(False, "--compare", "-c", help="Compare the running time of all strategies"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Configuration file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Generate every permutation of a string."""
    config = _load(config_path, verbose)
    max_length = config.permutations.max_length
    if len(text) > max_length:
        err_console.print(f"[red]Error:[/red] Input longer than max_length ({len(text)} > {max_length})")
        raise typer.Exit(1)

    include_duplicates = False if unique else config.permutations.include_duplicates
    generator = PermutationGenerator(include_duplicates=include_duplicates)

    try:
        if compare:
            _print_comparison(generator, text)
            return
        request = generator.build_request(text, strategy=strategy or config.permutations.strategy)
        result = generator.run(request)
    except LabToolsError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"Using {result.strategy.value} algorithm...")
    console.print(f"Total count: {result.get_count()}")
    for i, permutation in enumerate(result.permutations, 1):
        console.print(f"{i:4d}: {permutation}", highlight=False)


def _print_comparison(generator: PermutationGenerator, text: str) -> None:
    timings = generator.compare_strategies(text)

    table = Table(title=f"Performance Comparison: '{text}' (length {len(text)})", show_header=True)
    table.add_column("Strategy", style="bold")
    table.add_column("Permutations", justify="right")
    table.add_column("Time (ms)", justify="right")

    for timing in timings:
        table.add_row(timing.strategy.value, str(timing.count), f"{timing.get_elapsed_ms():.3f}")

    console.print(table)
    console.print(f"Fastest: {get_fastest(timings).strategy.value}")


config_app = typer.Typer(
    name="config",
    help="Create, check and show labtools configuration files",
    add_completion=False,
)


@config_app.command("init")
def config_init(
    path: Path = typer.Argument(Path(ConfigParser.DEFAULT_CONFIG_NAMES[0]), help="File to write"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write a configuration file holding the default settings."""
    try:
        written = ConfigParser().write(LabConfig(), path, overwrite=force)
    except ConfigurationError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"Configuration written to {written}", soft_wrap=True)


@config_app.command("check")
def config_check(
    path: Path = typer.Argument(..., help="Configuration file to validate"),
    strict: bool = typer.Option(False, "--strict", help="Treat warnings as errors"),
):
    """Validate a configuration file and list its warnings."""
    try:
        result = ConfigParser(strict_mode=strict).load_config(path)
    except ConfigurationError as e:
        err_console.print(f"[red]Invalid:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]Valid:[/green] {path}", soft_wrap=True)
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


@config_app.command("show")
def config_show(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Configuration file"),
):
    """Print the configuration the other commands would use."""
    parser = ConfigParser()
    try:
        result = parser.load_config(config_path)
    except ConfigurationError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    source = "defaults" if result.is_default else str(result.config_path)
    console.print(f"# Source: {source}", highlight=False, soft_wrap=True)
    console.print(parser.render(result.config), highlight=False, markup=False)


app.add_typer(config_app, name="config")


def main():
    """Entry point for CLI (used by pyproject.toml scripts)."""
    app()


if __name__ == "__main__":
    main()
