"""Book search policies.

A policy is picked by the caller on every call; nothing is remembered
between searches. ``search`` keeps the order of the books it is given.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, List, Union

from lending_library.book import Book
from lending_library.errors import SearchConfigurationError


def match_title(book: Book, query: str) -> bool:
    return query.lower() in book.title.lower()


def match_author(book: Book, query: str) -> bool:
    return query.lower() in book.author.lower()


def match_isbn(book: Book, query: str) -> bool:
    return book.isbn.lower() == query.lower()


class SearchPolicy(str, Enum):
    TITLE = "title"
    AUTHOR = "author"
    ISBN = "isbn"

    @property
    def matcher(self) -> Callable[[Book, str], bool]:
        return _MATCHERS[self]

    @classmethod
    def parse(cls, value: Union["SearchPolicy", str]) -> "SearchPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            allowed = ", ".join(p.value for p in cls)
            raise SearchConfigurationError(
                f"Unknown search policy '{value}'. Expected one of: {allowed}."
            ) from e


_MATCHERS = {
    SearchPolicy.TITLE: match_title,
    SearchPolicy.AUTHOR: match_author,
    SearchPolicy.ISBN: match_isbn,
}


def search(books: Iterable[Book], query: str, policy: Union[SearchPolicy, str]) -> List[Book]:
    """Return the books matching ``query`` under ``policy``."""
    matcher = SearchPolicy.parse(policy).matcher
    return [book for book in books if matcher(book, query)]
