import logging
from typing import Optional

import typer

from config import settings
from lending_library.errors import SearchConfigurationError
from lending_library.library import Library
from lending_library.search import SearchPolicy
from utils.ui_helpers import (
    get_output_mode,
    print_list_result,
    print_loans_result,
    print_patrons_result,
    print_stats_result,
    set_output_mode,
)

APP_NAME = settings.app_name

DEMO_BOOKS = [
    ("The Great Gatsby", "F. Scott Fitzgerald", "978-0-7432-7356-5", 1925),
    ("To Kill a Mockingbird", "Harper Lee", "978-0-06-112008-4", 1960),
    ("1984", "George Orwell", "978-0-452-28423-4", 1949),
    ("Pride and Prejudice", "Jane Austen", "978-0-14-143951-8", 1813),
]

DEMO_PATRONS = [
    ("John Doe", "john.doe@email.com", "123-456-7890"),
    ("Jane Smith", "jane.smith@email.com", "987-654-3210"),
    ("Bob Johnson", "bob.johnson@email.com", "555-123-4567"),
]


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING),
                        format=settings.log_format)


def build_demo_library() -> Library:
    """Library seeded with the demo books and patrons."""
    lib = Library()
    for title, author, isbn, year in DEMO_BOOKS:
        lib.add_book(lib.create_book(title, author, isbn, year))
    for name, email, phone in DEMO_PATRONS:
        lib.register_patron(name, email, phone)
    return lib


def _say(message: str) -> None:
    # Narration is noise for machine-readable output
    if get_output_mode() != "json":
        print(message)


# --- Typer CLI Application ---
app = typer.Typer(help=f"{APP_NAME} CLI (v{settings.app_version})")

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: plain | json | rich (default: plain)",
    ),
    log_level: str = typer.Option(
        settings.log_level,
        "--log-level",
        help="Logging level: DEBUG | INFO | WARNING | ERROR",
    ),
):
    """Global options for the CLI (output mode, log level)."""
    if output:
        set_output_mode(output)
    configure_logging(log_level)

@app.command("list")
def cli_list():
    """List the demo catalog with availability."""
    lib = build_demo_library()
    print_list_result(lib.list_books())

@app.command("patrons")
def cli_patrons():
    """List the demo patrons."""
    lib = build_demo_library()
    print_patrons_result(sorted(lib.list_patrons(), key=lambda p: p.patron_id))

@app.command("search")
def cli_search(
    query: str,
    by: str = typer.Option(settings.default_search_policy, "--by", "-b", help="title | author | isbn"),
):
    """Search the demo catalog."""
    try:
        policy = SearchPolicy.parse(by)
    except SearchConfigurationError as e:
        print(f"Error: {e}")
        raise typer.Exit(code=1)
    lib = build_demo_library()
    results = lib.search_books(query, policy)
    if not results and get_output_mode() != "json":
        print(f"No books found for '{query}'.")
        return
    print_list_result(results, title=f"Results for '{query}'")

@app.command("demo")
def cli_demo():
    """Run the lending walkthrough against the demo catalog."""
    lib = build_demo_library()
    gatsby, mockingbird, nineteen_eighty_four, austen = (book[2] for book in DEMO_BOOKS)

    _say("--- Searching ---")
    for query, policy in (("Gatsby", SearchPolicy.TITLE), ("Orwell", SearchPolicy.AUTHOR),
                          (austen, SearchPolicy.ISBN)):
        titles = ", ".join(b.title for b in lib.search_books(query, policy)) or "no matches"
        _say(f"Search by {policy.value} '{query}': {titles}")

    _say("--- Updating book ---")
    replacement = lib.create_book("The Great Gatsby (Updated)", "F. Scott Fitzgerald", gatsby, 1925)
    lib.update_book(gatsby, replacement)
    _say(f"Book updated: {lib.find_book_by_isbn(gatsby).title}")

    _say("--- Checking out books ---")
    for isbn, patron_id in ((gatsby, 1), (mockingbird, 2), (nineteen_eighty_four, 1), (gatsby, 3)):
        ok = lib.checkout_book(isbn, patron_id)
        _say(f"Checkout {isbn} -> patron {patron_id}: {'ok' if ok else 'failed'}")

    if get_output_mode() != "json":
        print("--- Borrowing history for patron 1 ---")
        print_loans_result(lib.get_borrowing_history(1))

    _say("--- Returning books ---")
    for isbn, patron_id in ((gatsby, 1), (mockingbird, 2)):
        ok = lib.return_book(isbn, patron_id)
        _say(f"Return {isbn} <- patron {patron_id}: {'ok' if ok else 'failed'}")

    _say("--- Summary ---")
    print_stats_result(lib.get_statistics())


if __name__ == "__main__":
    app()
