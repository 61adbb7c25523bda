from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Union

from lending_library.book import Book, create_book
from lending_library.lending import LendingManager
from lending_library.loan import Loan
from lending_library.patron import Patron
from lending_library.repositories import BookStore, PatronStore
from lending_library.search import SearchPolicy
from lending_library.services.catalog_service import CatalogService
from lending_library.services.patron_service import PatronService


class Library:
    """Wires the stores, services and lending manager around one logger and clock.

    All three collaborators share the same BookStore and PatronStore, so a
    checkout is immediately visible through the catalog.
    """

    def __init__(self, *, clock: Callable[[], date] = date.today,
                 logger: Optional[logging.Logger] = None) -> None:
        self.clock = clock
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.book_store = BookStore()
        self.patron_store = PatronStore()
        self.lending = LendingManager(self.book_store, self.patron_store, clock=clock, logger=self.logger)
        self.catalog = CatalogService(self.book_store, logger=self.logger,
                                      is_on_loan=self.lending.has_active_loan)
        self.patrons = PatronService(self.patron_store, logger=self.logger)

    # ------------------------- Catalog ------------------------- #
    def create_book(self, title: str, author: str, isbn: str, publication_year: int) -> Book:
        return create_book(title, author, isbn, publication_year, today=self.clock())

    def add_book(self, book: Book) -> bool:
        return self.catalog.add_book(book)

    def remove_book(self, isbn: str) -> bool:
        return self.catalog.remove_book(isbn)

    def update_book(self, isbn: str, updated_book: Book) -> bool:
        return self.catalog.update_book(isbn, updated_book)

    def find_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self.catalog.find_book_by_isbn(isbn)

    def list_books(self) -> List[Book]:
        return self.catalog.list_books()

    def search_books(self, query: str, policy: Union[SearchPolicy, str, None]) -> List[Book]:
        return self.catalog.search_books(query, policy)

    # ------------------------- Patrons ------------------------- #
    def add_patron(self, patron: Patron) -> bool:
        return self.patrons.add_patron(patron)

    def register_patron(self, name: str, email: str, phone: str) -> Optional[Patron]:
        return self.patrons.register_patron(name, email, phone)

    def update_patron(self, patron_id: int, updated_patron: Patron) -> bool:
        return self.patrons.update_patron(patron_id, updated_patron)

    def remove_patron(self, patron_id: int) -> bool:
        return self.patrons.remove_patron(patron_id)

    def find_patron_by_id(self, patron_id: int) -> Optional[Patron]:
        return self.patrons.find_patron_by_id(patron_id)

    def list_patrons(self) -> List[Patron]:
        return self.patrons.list_patrons()

    def next_patron_id(self) -> int:
        return self.patrons.next_patron_id()

    def get_borrowing_history(self, patron_id: int) -> List[Loan]:
        return self.patrons.get_borrowing_history(patron_id)

    # ------------------------- Lending ------------------------- #
    def checkout_book(self, isbn: str, patron_id: int) -> bool:
        return self.lending.checkout(isbn, patron_id)

    def return_book(self, isbn: str, patron_id: int) -> bool:
        return self.lending.return_book(isbn, patron_id)

    def get_available_books(self) -> List[Book]:
        return self.lending.available_books()

    def get_borrowed_books(self) -> List[Book]:
        return self.lending.borrowed_books()

    def get_active_loans(self) -> List[Loan]:
        return self.lending.active_loans()

    def get_statistics(self) -> Dict[str, Any]:
        """Get library statistics."""
        return {
            "total_books": self.catalog.book_count(),
            "total_patrons": self.patrons.patron_count(),
            "available_books": len(self.get_available_books()),
            "borrowed_books": len(self.get_borrowed_books()),
            "active_loans": len(self.get_active_loans()),
        }
