"""Command line interface for FileFinder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from filefinder.config import AppConfig
from filefinder.index.indexer import FileCatalog, Indexer
from filefinder.index.search import SearchResult, Searcher
from filefinder.utils.text import format_size, parse_size
from filefinder.web.app import app as web_app


console = Console()
app = typer.Typer(help="FileFinder - find files by name prefix or size range")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _build_catalog(paths: Optional[List[Path]], include_hidden: bool) -> FileCatalog:
    config = AppConfig(include_hidden=include_hidden)
    inputs = paths or [config.resolve_root(Path.cwd())]
    catalog = FileCatalog()
    stats = Indexer(catalog, include_hidden=config.include_hidden).index(inputs)
    logging.getLogger(__name__).debug(
        "Indexed %d files (%d failed)", stats.indexed, stats.failed
    )
    return catalog


def _print_results(results: List[SearchResult]) -> None:
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", no_wrap=True)
    table.add_column("Size", justify="right", no_wrap=True)
    table.add_column("Path")

    for result in results:
        table.add_row(result.name, format_size(result.size), str(result.path or ""))

    console.print(table)


@app.command()
def prefix(
    query: str = typer.Argument(..., help="Name prefix (case-insensitive)"),
    paths: Optional[List[Path]] = typer.Argument(
        None, help="Files or directories to index (defaults to the current directory)."
    ),
    limit: int = typer.Option(AppConfig().max_results, help="Number of results to display"),
    include_hidden: bool = typer.Option(False, "--hidden", help="Include hidden files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List files whose name starts with a prefix."""
    _setup_logging(verbose)
    catalog = _build_catalog(paths, include_hidden)
    _print_results(Searcher(catalog).by_prefix(query, limit=limit))
    catalog.close()


@app.command(name="range")
def size_range(
    low: str = typer.Argument(..., help="Lower size bound, e.g. 512, 10K, 1.5MB"),
    high: str = typer.Argument(..., help="Upper size bound"),
    paths: Optional[List[Path]] = typer.Argument(
        None, help="Files or directories to index (defaults to the current directory)."
    ),
    limit: int = typer.Option(AppConfig().max_results, help="Number of results to display"),
    include_hidden: bool = typer.Option(False, "--hidden", help="Include hidden files"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """List files whose size lies between two bounds, smallest first."""
    _setup_logging(verbose)
    try:
        low_bytes = parse_size(low)
        high_bytes = parse_size(high)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    catalog = _build_catalog(paths, include_hidden)
    _print_results(Searcher(catalog).by_size(low_bytes, high_bytes, limit=limit))
    catalog.close()


@app.command()
def stats(
    paths: Optional[List[Path]] = typer.Argument(
        None, help="Files or directories to index (defaults to the current directory)."
    ),
    include_hidden: bool = typer.Option(False, "--hidden", help="Include hidden files"),
) -> None:
    """Show how many files would be indexed and their total size."""
    config = AppConfig(include_hidden=include_hidden)
    inputs = paths or [config.resolve_root(Path.cwd())]
    catalog = FileCatalog()
    result = Indexer(catalog, include_hidden=config.include_hidden).index(inputs)
    console.print(
        f"Indexed: {result.indexed}, failed: {result.failed}, "
        f"total size: {format_size(result.total_bytes)}"
    )
    catalog.close()


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
) -> None:
    """Start the web API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    console.print(f"Starting web API on http://{host}:{port}")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )
