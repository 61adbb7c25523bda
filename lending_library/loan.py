from __future__ import annotations

from datetime import date
from typing import Optional

from lending_library.book import Book
from lending_library.patron import Patron


class Loan:
    """One checkout of a book by a patron. ``return_date`` stays None while active."""

    def __init__(self, book: Book, patron: Patron, checkout_date: date,
                 return_date: Optional[date] = None) -> None:
        self.book = book
        self.patron = patron
        self.checkout_date = checkout_date
        self.return_date = return_date

    @property
    def is_returned(self) -> bool:
        return self.return_date is not None

    def matches(self, isbn: str, patron_id: int) -> bool:
        return self.book.isbn == isbn and self.patron.patron_id == patron_id

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        returned = self.return_date.isoformat() if self.return_date else "Not returned"
        return f"{self.book.title} -> {self.patron.name} ({self.checkout_date.isoformat()} / {returned})"

    def to_dict(self) -> dict:
        return {
            "isbn": self.book.isbn,
            "title": self.book.title,
            "patron_id": self.patron.patron_id,
            "patron_name": self.patron.name,
            "checkout_date": self.checkout_date.isoformat(),
            "return_date": self.return_date.isoformat() if self.return_date else None,
        }
