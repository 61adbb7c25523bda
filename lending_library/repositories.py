from typing import Dict, List, Optional

from lending_library.book import Book
from lending_library.patron import Patron


class BookStore:
    """In-memory ISBN -> Book mapping.

    Failed mutations return False and leave the store untouched.
    """

    def __init__(self) -> None:
        self._books: Dict[str, Book] = {}

    def add(self, book: Book) -> bool:
        if book.isbn in self._books:
            return False
        self._books[book.isbn] = book
        return True

    def remove(self, isbn: str) -> bool:
        if isbn not in self._books:
            return False
        del self._books[isbn]
        return True

    def update(self, isbn: str, new_book: Book) -> bool:
        """Replace the stored record wholesale; fields are not merged."""
        if isbn not in self._books:
            return False
        self._books[isbn] = new_book
        return True

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        return self._books.get(isbn)

    def list_all(self) -> List[Book]:
        return list(self._books.values())

    def count(self) -> int:
        return len(self._books)

    def __len__(self) -> int:
        return len(self._books)


class PatronStore:
    """In-memory patron id -> Patron mapping with a sequential id counter."""

    def __init__(self) -> None:
        self._patrons: Dict[int, Patron] = {}
        self._next_id = 1

    def next_id(self) -> int:
        # Ids are never reused, even after removal
        patron_id = self._next_id
        self._next_id += 1
        return patron_id

    def add(self, patron: Patron) -> bool:
        if patron.patron_id in self._patrons:
            return False
        self._patrons[patron.patron_id] = patron
        return True

    def remove(self, patron_id: int) -> bool:
        if patron_id not in self._patrons:
            return False
        del self._patrons[patron_id]
        return True

    def update(self, patron_id: int, new_patron: Patron) -> bool:
        """Replace the stored record wholesale; fields are not merged."""
        if patron_id not in self._patrons:
            return False
        self._patrons[patron_id] = new_patron
        return True

    def find_by_id(self, patron_id: int) -> Optional[Patron]:
        return self._patrons.get(patron_id)

    def list_all(self) -> List[Patron]:
        return list(self._patrons.values())

    def count(self) -> int:
        return len(self._patrons)

    def __len__(self) -> int:
        return len(self._patrons)
