"""
CLI module for Bookshelf.
Seeds a catalog with sample books and prints the resulting listing.
"""

import logging
import sys

import typer
from rich.console import Console

from . import settings
from .exceptions import LibraryError
from .library import Library
from .models import LibraryCollection
from .storage import BACKENDS, get_data_operation

app = typer.Typer(
    name="bookshelf",
    help="Print a listing of the sample Bookshelf catalog",
    add_completion=False
)

console = Console()

SAMPLE_BOOKS = [
    ("The Art of Computer Programming", ["Donald Knuth"], LibraryCollection.Reserve),
    ("Principia Mathematica", ["Alfred North Whitehead", "Bertrand Russell"], LibraryCollection.General),
]


def format_book_line(library: Library, name: str) -> str:
    """
    Format one listing line for a stored book.

    Args:
        library: Catalog holding the book
        name: Exact book name

    Returns:
        "Title: <name>, Author(s): <authors>, Collection: <collection>"
    """
    authors = ", ".join(library.get_book_authors(name))
    collection = library.get_book_collection(name).value
    return f"Title: {name}, Author(s): {authors}, Collection: {collection}"


def resolve_log_level(name: str) -> int:
    """
    Map a log level name such as "info" to its numeric value.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    level = logging.getLevelName((name or "").strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level '{name}'")
    return level


@app.command()
def demo(
    backend: str = typer.Option(
        settings.BACKEND,
        "--backend",
        help=f"Storage backend ({', '.join(BACKENDS)})"
    ),
    collection: LibraryCollection = typer.Option(
        None,
        "--collection",
        help="Only list books in this collection"
    )
) -> None:
    """
    Seed the sample books and print the catalog.

    Args:
        backend: Storage backend name
        collection: Optional collection filter
    """
    try:
        logging.basicConfig(level=resolve_log_level(settings.LOG_LEVEL))

        library = Library(data_operation=get_data_operation(backend))
        for name, authors, book_collection in SAMPLE_BOOKS:
            library.add_book(name, authors, book_collection)

        typer.echo("Library list:")
        for name in library.get_book_names(collection):
            typer.echo(format_book_line(library, name))

    except (LibraryError, ValueError) as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)


if __name__ == "__main__":
    app()
