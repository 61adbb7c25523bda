from __future__ import annotations

from datetime import date
from typing import Optional

from config import settings
from utils.validators import BookValidator


class Book:
    """Represents a single book item in the library catalog."""

    def __init__(self, title: str, author: str, isbn: str, publication_year: int,
                 available: bool = True) -> None:
        self.title = title
        self.author = author
        self.isbn = isbn
        self.publication_year = publication_year
        self.available = available

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"

    def __repr__(self) -> str:  # pragma: no cover
        return (f"Book(title={self.title!r}, author={self.author!r}, isbn={self.isbn!r}, "
                f"publication_year={self.publication_year}, available={self.available})")

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "isbn": self.isbn,
            "publication_year": self.publication_year,
            "available": self.available,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return create_book(
            title=data["title"],
            author=data["author"],
            isbn=data["isbn"],
            publication_year=data["publication_year"],
            available=data.get("available", True),
        )


def create_book(title: str, author: str, isbn: str, publication_year: int, *,
                available: bool = True, today: Optional[date] = None) -> Book:
    """Build a validated Book.

    Empty title, author or ISBN and a publication year outside
    ``[settings.min_publication_year, current year]`` raise ValidationError.
    ``today`` lets callers pin the current year (the injected clock).
    """
    current_year = (today or date.today()).year
    return Book(
        title=BookValidator.validate_title(title).strip(),
        author=BookValidator.validate_author(author).strip(),
        isbn=BookValidator.validate_isbn(isbn).strip(),
        publication_year=BookValidator.validate_publication_year(
            publication_year,
            min_year=settings.min_publication_year,
            current_year=current_year,
        ),
        available=available,
    )
