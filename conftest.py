import logging
from datetime import date

import pytest

from lending_library.library import Library

FIXED_TODAY = date(2024, 5, 17)


@pytest.fixture(autouse=True)
def reset_output_mode(monkeypatch):
    # set_output_mode() writes to os.environ; keep tests isolated
    monkeypatch.delenv("LIB_CLI_OUTPUT", raising=False)


@pytest.fixture
def lib():
    # Fresh in-memory library per test with a pinned clock
    return Library(clock=lambda: FIXED_TODAY, logger=logging.getLogger("tests.library"))


@pytest.fixture
def stocked_lib(lib):
    books = [
        ("The Great Gatsby", "F. Scott Fitzgerald", "978-0-7432-7356-5", 1925),
        ("To Kill a Mockingbird", "Harper Lee", "978-0-06-112008-4", 1960),
        ("1984", "George Orwell", "978-0-452-28423-4", 1949),
        ("Pride and Prejudice", "Jane Austen", "978-0-14-143951-8", 1813),
    ]
    for title, author, isbn, year in books:
        assert lib.add_book(lib.create_book(title, author, isbn, year))
    lib.register_patron("John Doe", "john.doe@email.com", "123-456-7890")
    lib.register_patron("Jane Smith", "jane.smith@email.com", "987-654-3210")
    lib.register_patron("Bob Johnson", "bob.johnson@email.com", "555-123-4567")
    return lib
