import logging

import pytest

from lending_library.book import Book
from lending_library.errors import SearchConfigurationError
from lending_library.search import SearchPolicy, search


BOOKS = [
    Book("The Great Gatsby", "F. Scott Fitzgerald", "978-0-7432-7356-5", 1925),
    Book("1984", "George Orwell", "978-0-452-28423-4", 1949),
    Book("Animal Farm", "George Orwell", "978-0-452-28424-1", 1945),
]


def test_title_search_is_case_insensitive_substring():
    assert search(BOOKS, "gatsby", SearchPolicy.TITLE) == [BOOKS[0]]
    assert search(BOOKS, "GREAT", SearchPolicy.TITLE) == [BOOKS[0]]

def test_author_search_preserves_input_order():
    assert search(BOOKS, "orwell", SearchPolicy.AUTHOR) == [BOOKS[1], BOOKS[2]]
    assert search(list(reversed(BOOKS)), "orwell", SearchPolicy.AUTHOR) == [BOOKS[2], BOOKS[1]]

def test_isbn_search_is_exact():
    assert search(BOOKS, "978-0-452-28423-4", SearchPolicy.ISBN) == [BOOKS[1]]
    assert search(BOOKS, "978-0-452", SearchPolicy.ISBN) == []

def test_isbn_search_ignores_case():
    books = [Book("Title", "Author", "080442957X", 1990)]
    assert search(books, "080442957x", SearchPolicy.ISBN) == books

def test_empty_query():
    assert search(BOOKS, "", SearchPolicy.TITLE) == BOOKS
    assert search(BOOKS, "", SearchPolicy.AUTHOR) == BOOKS
    assert search(BOOKS, "", SearchPolicy.ISBN) == []

def test_policy_by_name():
    assert search(BOOKS, "farm", "title") == [BOOKS[2]]
    assert SearchPolicy.parse(" Author ") is SearchPolicy.AUTHOR

def test_unknown_policy_name():
    with pytest.raises(SearchConfigurationError, match="Unknown search policy"):
        search(BOOKS, "x", "publisher")

def test_catalog_search(stocked_lib):
    results = stocked_lib.search_books("Gatsby", SearchPolicy.TITLE)
    assert [b.title for b in results] == ["The Great Gatsby"]

    results = stocked_lib.search_books("orwell", SearchPolicy.AUTHOR)
    assert [b.author for b in results] == ["George Orwell"]

    results = stocked_lib.search_books("978-0-14-143951-8", SearchPolicy.ISBN)
    assert [b.title for b in results] == ["Pride and Prejudice"]

def test_catalog_search_without_policy(stocked_lib, caplog):
    caplog.set_level(logging.INFO)
    assert stocked_lib.search_books("Gatsby", None) == []
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert [r.getMessage() for r in errors] == ["Search policy not set!"]

def test_catalog_search_with_unknown_policy(stocked_lib, caplog):
    caplog.set_level(logging.ERROR)
    assert stocked_lib.search_books("Gatsby", "genre") == []
    assert "Unknown search policy 'genre'" in caplog.text

def test_catalog_search_logs_result_count(stocked_lib, caplog):
    caplog.set_level(logging.INFO)
    stocked_lib.search_books("the", "title")
    assert "Search performed with query: the, found 1 results" in caplog.text
