"""Command line interface for the box office catalog."""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import CatalogConfig, load_config
from .demo import FORMATS, run_demo
from .domain.movie import Movie
from .domain.result import Result
from .exceptions import BoxOfficeError, CatalogIOError
from .infrastructure.storage import CatalogFileStore

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Route the package's log records through rich on stderr."""
    logger = logging.getLogger("box_office")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.handlers = [
        RichHandler(console=err_console, show_path=False, rich_tracebacks=verbose)
    ]


def _movies_table(movies: Iterable[Movie], title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Title", style="cyan")
    table.add_column("Director")
    table.add_column("Genre")
    table.add_column("Year", justify="right")
    table.add_column("Box Office", justify="right", style="green")

    for movie in movies:
        table.add_row(
            escape(movie.title),
            escape(movie.director),
            escape(movie.genre),
            str(movie.year_released),
            movie.earnings_display,
        )
    return table


def _unwrap(result: Result):
    """Return the success value or report the I/O failure and exit."""
    try:
        return result.or_else_raise()
    except CatalogIOError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option(
    '--config',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Configuration file path'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Verbose output'
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: bool):
    """Keep a catalog of movies and their box office earnings."""
    _configure_logging(verbose)
    try:
        cfg = load_config(config) if config else CatalogConfig()
    except BoxOfficeError as e:
        raise click.ClickException(str(e))
    ctx.obj = CatalogFileStore(cfg)


@cli.command()
@click.option(
    '--data-dir',
    type=click.Path(file_okay=False, path_type=Path),
    help='Directory for the demo files (defaults to the configured data_dir)'
)
@click.option(
    '--format', 'fmt',
    type=click.Choice(FORMATS),
    default='json',
    show_default=True,
    help='Persistence format used for the save/reload step'
)
@click.pass_obj
def demo(store: CatalogFileStore, data_dir: Optional[Path], fmt: str):
    """Populate, save, reload, query and list five sample movies."""
    if data_dir is not None:
        store.config.data_dir = data_dir

    try:
        outcome = run_demo(store, fmt)
    except BoxOfficeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if outcome.saved.is_success():
        console.print(f"Saved catalog to {escape(str(outcome.saved.value()))}")
    else:
        console.print(f"[yellow]Save failed: {escape(str(outcome.saved.error()))}[/yellow]")

    if outcome.found is not None:
        console.print(f"Found movie: {escape(outcome.found.title)}")
    else:
        console.print(f"Movie with title '{escape(outcome.search_title)}' not found")

    console.print(f"Removed movie: {escape(outcome.removed.title)}")
    console.print("All movies sorted by box office earnings:")
    for movie in outcome.ranking:
        console.print(f"{escape(movie.title)}: {movie.earnings_display}")


@cli.command(name='list')
@click.argument('file', type=click.Path(path_type=Path))
@click.option(
    '--json', 'as_json',
    is_flag=True,
    help='Read FILE as a JSON catalog document'
)
@click.pass_obj
def list_movies(store: CatalogFileStore, file: Path, as_json: bool):
    """List the movies in FILE, highest earnings first."""
    try:
        if as_json:
            catalog = _unwrap(store.load_document(file))
        else:
            catalog = _unwrap(store.load_delimited(file))
    except BoxOfficeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if not len(catalog):
        console.print("[yellow]No movies found[/yellow]")
        return

    console.print(_movies_table(catalog.sorted_by_earnings(), title="Movies by box office earnings"))


@cli.command()
@click.argument('file', type=click.Path(path_type=Path))
@click.argument('title')
@click.pass_obj
def show(store: CatalogFileStore, file: Path, title: str):
    """Show the movie called TITLE from a delimited FILE."""
    try:
        movie = _unwrap(store.find_movie(title, file))
    except BoxOfficeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if movie is None:
        console.print(f"[yellow]Movie with title '{escape(title)}' not found[/yellow]")
        sys.exit(1)

    console.print(escape(movie.describe()))


@cli.command()
@click.argument('file', type=click.Path(path_type=Path))
@click.argument('title')
@click.argument('director')
@click.argument('genre')
@click.argument('year', type=int)
@click.argument('earnings', type=float)
@click.pass_obj
def add(store: CatalogFileStore, file: Path, title: str, director: str,
        genre: str, year: int, earnings: float):
    """Append a movie to a delimited FILE."""
    try:
        existing = _unwrap(store.find_movie(title, file)) if file.exists() else None
        if existing is not None:
            console.print(f"[red]Error: Movie with title '{escape(title)}' already exists[/red]")
            sys.exit(1)
        movie = _unwrap(store.append_movie(Movie(title, director, genre, year, earnings), file))
    except BoxOfficeError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    console.print(f"[green]Added movie: {escape(movie.title)}[/green]")


@cli.command()
@click.argument('file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('title')
@click.pass_obj
def remove(store: CatalogFileStore, file: Path, title: str):
    """Remove the movie called TITLE from a delimited FILE."""
    removed = _unwrap(store.remove_movie(title, file))
    if not removed:
        console.print(f"[yellow]Movie with title '{escape(title)}' not found[/yellow]")
        sys.exit(1)

    console.print(f"[green]Removed movie: {escape(title)}[/green]")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
