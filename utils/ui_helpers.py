import os
import json
from typing import List, Any, Dict
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in {"plain", "json", "rich"}:
        os.environ[OUTPUT_MODE_ENV] = mode

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.cli_output).lower()

def print_list_result(books: List[Any], title: str = "Books") -> None:
    """Print books according to the current output mode.
    - plain: 'ISBN - Title by Author [status]' lines, or 'No books in library.'
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = get_output_mode()

    if not books:
        print("[]" if mode == "json" else "No books in library.")
        return

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Year", justify="right")
        table.add_column("Status")
        for b in books:
            status = "[green]available[/]" if b.available else "[red]borrowed[/]"
            table.add_row(b.isbn, b.title, b.author, str(b.publication_year), status)
        _console.print(table)
    else:
        for b in books:
            status = "available" if b.available else "borrowed"
            print(f"{b.isbn} - {b.title} by {b.author} [{status}]")

def print_loans_result(loans: List[Any], title: str = "Loans") -> None:
    """Print loan records according to the current output mode."""
    mode = get_output_mode()

    if not loans:
        print("[]" if mode == "json" else "No loans.")
        return

    if mode == "json":
        print(json.dumps([loan.to_dict() for loan in loans], ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=f"🔖 {title}", header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Title")
        table.add_column("Patron")
        table.add_column("Checked out")
        table.add_column("Returned")
        for loan in loans:
            data = loan.to_dict()
            table.add_row(data["isbn"], data["title"], data["patron_name"],
                          data["checkout_date"], data["return_date"] or "-")
        _console.print(table)
    else:
        for loan in loans:
            data = loan.to_dict()
            print(f"{data['title']} -> {data['patron_name']} (checked out {data['checkout_date']}, "
                  f"returned {data['return_date'] or 'not yet'})")

def print_patrons_result(patrons: List[Any]) -> None:
    """Print patrons according to the current output mode."""
    mode = get_output_mode()

    if not patrons:
        print("[]" if mode == "json" else "No patrons.")
        return

    rows = [p.to_dict() for p in patrons]
    if mode == "json":
        print(json.dumps(rows, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title="👤 Patrons", header_style="bold cyan")
        table.add_column("ID", justify="right")
        table.add_column("Name")
        table.add_column("Email")
        table.add_column("Phone")
        table.add_column("Loans", justify="right")
        for row in rows:
            table.add_row(str(row["patron_id"]), row["name"], row["email"], row["phone"], str(row["total_loans"]))
        _console.print(table)
    else:
        for row in rows:
            print(f"{row['patron_id']} - {row['name']} <{row['email']}> ({row['total_loans']} loans)")

def print_stats_result(stats: Dict[str, Any]) -> None:
    """Print library statistics according to the current output mode."""
    mode = get_output_mode()

    if not stats:
        print("No statistics available.")
        return

    labels = {
        "total_books": "Total Books",
        "total_patrons": "Total Patrons",
        "available_books": "Available Books",
        "borrowed_books": "Borrowed Books",
        "active_loans": "Active Loans",
    }

    if mode == "json":
        print(json.dumps(stats, ensure_ascii=False))
    elif mode == "rich":
        content = "\n".join(f"[bold]{labels.get(k, k)}:[/] {v}" for k, v in stats.items())
        _console.print(Panel.fit(content, title="📊 Summary", border_style="blue"))
    else:
        for key, value in stats.items():
            print(f"{labels.get(key, key)}: {value}")
