from __future__ import annotations

import logging
from typing import Callable, List, Optional, Union

from lending_library.book import Book
from lending_library.errors import SearchConfigurationError
from lending_library.repositories import BookStore
from lending_library.search import SearchPolicy, search


class CatalogService:
    """Book catalog operations with logging around every mutation.

    ``is_on_loan`` answers whether an ISBN has an active loan; books that are
    checked out cannot be replaced or removed.
    """

    def __init__(self, store: BookStore, logger: Optional[logging.Logger] = None,
                 is_on_loan: Optional[Callable[[str], bool]] = None) -> None:
        self.store = store
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self.is_on_loan = is_on_loan if is_on_loan is not None else (lambda isbn: False)

    def add_book(self, book: Book) -> bool:
        result = self.store.add(book)
        if result:
            self.logger.info(f"Book added successfully: {book.title} (ISBN: {book.isbn})")
        else:
            self.logger.warning(f"Failed to add book: Book with ISBN {book.isbn} already exists")
        return result

    def remove_book(self, isbn: str) -> bool:
        if self.is_on_loan(isbn):
            self.logger.warning(f"Failed to remove book: Book with ISBN {isbn} is checked out")
            return False
        result = self.store.remove(isbn)
        if result:
            self.logger.info(f"Book removed successfully: ISBN {isbn}")
        else:
            self.logger.warning(f"Failed to remove book: Book with ISBN {isbn} not found")
        return result

    def update_book(self, isbn: str, updated_book: Book) -> bool:
        """Replace the book stored under ``isbn`` with ``updated_book``."""
        if self.is_on_loan(isbn):
            self.logger.warning(f"Failed to update book: Book with ISBN {isbn} is checked out")
            return False
        result = self.store.update(isbn, updated_book)
        if result:
            self.logger.info(f"Book updated successfully: ISBN {isbn}")
        else:
            self.logger.warning(f"Failed to update book: Book with ISBN {isbn} not found")
        return result

    def find_book_by_isbn(self, isbn: str) -> Optional[Book]:
        return self.store.find_by_isbn(isbn)

    def list_books(self) -> List[Book]:
        return self.store.list_all()

    def book_count(self) -> int:
        return self.store.count()

    def search_books(self, query: str, policy: Union[SearchPolicy, str, None]) -> List[Book]:
        """Search the whole catalog. A missing or unknown policy logs an error and yields []."""
        if policy is None:
            self.logger.error("Search policy not set!")
            return []
        try:
            results = search(self.store.list_all(), query, policy)
        except SearchConfigurationError as e:
            self.logger.error(str(e))
            return []
        self.logger.info(f"Search performed with query: {query}, found {len(results)} results")
        return results
