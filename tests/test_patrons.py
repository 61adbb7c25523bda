import logging

from lending_library.patron import Patron
from lending_library.repositories import PatronStore


def test_next_id_starts_at_one_and_increments():
    store = PatronStore()
    assert [store.next_id() for _ in range(3)] == [1, 2, 3]

def test_ids_are_not_reused_after_removal(lib):
    first = lib.register_patron("Ann", "ann@example.com", "1")
    assert first.patron_id == 1
    assert lib.remove_patron(1) is True
    second = lib.register_patron("Ben", "ben@example.com", "2")
    assert second.patron_id == 2
    assert lib.find_patron_by_id(1) is None

def test_add_duplicate_patron_id(lib, caplog):
    caplog.set_level(logging.WARNING)
    assert lib.add_patron(Patron(7, "Ann", "ann@example.com", "1")) is True
    assert lib.add_patron(Patron(7, "Impostor", "x@example.com", "2")) is False
    assert lib.find_patron_by_id(7).name == "Ann"
    assert "Patron with ID 7 already exists" in caplog.text

def test_update_patron_replaces_whole_record(lib):
    lib.add_patron(Patron(1, "Ann", "ann@example.com", "111"))
    replacement = Patron(1, "Ann Lee", "ann.lee@example.com", "222")
    assert lib.update_patron(1, replacement) is True
    assert lib.find_patron_by_id(1) is replacement
    assert lib.update_patron(99, replacement) is False

def test_update_patron_keeps_borrowing_history(stocked_lib):
    stocked_lib.checkout_book("978-0-7432-7356-5", 1)
    stocked_lib.return_book("978-0-7432-7356-5", 1)
    stocked_lib.checkout_book("978-0-452-28423-4", 1)
    replacement = Patron(1, "John A. Doe", "john.a.doe@email.com", "123-456-7890")

    assert stocked_lib.update_patron(1, replacement) is True

    history = stocked_lib.get_borrowing_history(1)
    assert [loan.book.title for loan in history] == ["The Great Gatsby", "1984"]
    assert all(loan.patron is replacement for loan in history)
    assert stocked_lib.get_active_loans()[0].patron is replacement
    # Returns still resolve against the replacement record
    assert stocked_lib.return_book("978-0-452-28423-4", 1) is True
    assert stocked_lib.get_active_loans() == []

def test_remove_missing_patron(lib):
    assert lib.remove_patron(42) is False

def test_list_patrons(stocked_lib):
    names = sorted(p.name for p in stocked_lib.list_patrons())
    assert names == ["Bob Johnson", "Jane Smith", "John Doe"]
    assert stocked_lib.patrons.patron_count() == 3

def test_next_patron_id_after_registrations(stocked_lib):
    assert stocked_lib.next_patron_id() == 4

def test_borrowing_history_missing_patron(lib, caplog):
    caplog.set_level(logging.WARNING)
    assert lib.get_borrowing_history(404) == []
    assert "Patron not found: ID 404" in caplog.text

def test_borrowing_history_keeps_returned_loans(stocked_lib):
    stocked_lib.checkout_book("978-0-7432-7356-5", 1)
    stocked_lib.return_book("978-0-7432-7356-5", 1)
    stocked_lib.checkout_book("978-0-452-28423-4", 1)

    history = stocked_lib.get_borrowing_history(1)
    assert [loan.book.title for loan in history] == ["The Great Gatsby", "1984"]
    assert history[0].is_returned
    assert not history[1].is_returned
    assert stocked_lib.find_patron_by_id(1).to_dict()["total_loans"] == 2
