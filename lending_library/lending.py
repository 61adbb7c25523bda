from __future__ import annotations

import logging
from datetime import date
from enum import Enum
from typing import Callable, List, Optional

from lending_library.book import Book
from lending_library.loan import Loan
from lending_library.repositories import BookStore, PatronStore


class LendingFailure(str, Enum):
    """Why a checkout or return was refused."""

    BOOK_NOT_FOUND = "book_not_found"
    PATRON_NOT_FOUND = "patron_not_found"
    BOOK_UNAVAILABLE = "book_unavailable"
    NO_ACTIVE_LOAN = "no_active_loan"


class LendingManager:
    """Checks books out to patrons and back in.

    The manager works on the Book records held by the BookStore, so the
    ``available`` flag it flips is the one the catalog sees. Every Loan ever
    created stays in ``self._loans`` in creation order.
    """

    def __init__(self, books: BookStore, patrons: PatronStore, *,
                 clock: Callable[[], date] = date.today,
                 logger: Optional[logging.Logger] = None) -> None:
        self.books = books
        self.patrons = patrons
        self.clock = clock
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self._loans: List[Loan] = []
        self.last_failure: Optional[LendingFailure] = None

    # ------------------------- Core operations ------------------------- #
    def checkout(self, isbn: str, patron_id: int) -> bool:
        book = self.books.find_by_isbn(isbn)
        if book is None:
            return self._fail(LendingFailure.BOOK_NOT_FOUND,
                              f"Checkout failed: Book with ISBN {isbn} not found")

        patron = self.patrons.find_by_id(patron_id)
        if patron is None:
            return self._fail(LendingFailure.PATRON_NOT_FOUND,
                              f"Checkout failed: Patron with ID {patron_id} not found")

        if not book.available:
            return self._fail(LendingFailure.BOOK_UNAVAILABLE,
                              f"Checkout failed: Book {book.title} is not available")

        loan = Loan(book, patron, self.clock())
        self._loans.append(loan)
        patron.add_to_borrowing_history(loan)
        book.available = False

        self.last_failure = None
        self.logger.info(f"Book checked out successfully: {book.title} to {patron.name}")
        return True

    def return_book(self, isbn: str, patron_id: int) -> bool:
        book = self.books.find_by_isbn(isbn)
        if book is None:
            return self._fail(LendingFailure.BOOK_NOT_FOUND,
                              f"Return failed: Book with ISBN {isbn} not found")

        patron = self.patrons.find_by_id(patron_id)
        if patron is None:
            return self._fail(LendingFailure.PATRON_NOT_FOUND,
                              f"Return failed: Patron with ID {patron_id} not found")

        loan = self._find_active_loan(isbn, patron_id)
        if loan is None:
            return self._fail(LendingFailure.NO_ACTIVE_LOAN,
                              f"Return failed: No active loan found for book {isbn} and patron {patron_id}")

        loan.return_date = self.clock()
        book.available = True

        self.last_failure = None
        self.logger.info(f"Book returned successfully: {book.title} from {patron.name}")
        return True

    # ------------------------- Inventory views ------------------------- #
    def available_books(self) -> List[Book]:
        return [book for book in self.books.list_all() if book.available]

    def borrowed_books(self) -> List[Book]:
        return [book for book in self.books.list_all() if not book.available]

    def active_loans(self) -> List[Loan]:
        return [loan for loan in self._loans if not loan.is_returned]

    def loans(self) -> List[Loan]:
        return list(self._loans)

    def has_active_loan(self, isbn: str) -> bool:
        return any(not loan.is_returned and loan.book.isbn == isbn for loan in self._loans)

    # ------------------------- Helpers ------------------------- #
    def _find_active_loan(self, isbn: str, patron_id: int) -> Optional[Loan]:
        # Earliest matching loan wins
        for loan in self._loans:
            if not loan.is_returned and loan.matches(isbn, patron_id):
                return loan
        return None

    def _fail(self, reason: LendingFailure, message: str) -> bool:
        self.last_failure = reason
        self.logger.warning(message)
        return False
