from __future__ import annotations

import logging
from typing import List, Optional

from lending_library.loan import Loan
from lending_library.patron import Patron
from lending_library.repositories import PatronStore


class PatronService:
    """Patron registry operations with logging around every mutation."""

    def __init__(self, store: PatronStore, logger: Optional[logging.Logger] = None) -> None:
        self.store = store
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def add_patron(self, patron: Patron) -> bool:
        result = self.store.add(patron)
        if result:
            self.logger.info(f"Patron added successfully: {patron.name} (ID: {patron.patron_id})")
        else:
            self.logger.warning(f"Failed to add patron: Patron with ID {patron.patron_id} already exists")
        return result

    def register_patron(self, name: str, email: str, phone: str) -> Optional[Patron]:
        """Create a patron under the next free id and add it. Returns None if the add fails."""
        patron = Patron(self.store.next_id(), name, email, phone)
        return patron if self.add_patron(patron) else None

    def update_patron(self, patron_id: int, updated_patron: Patron) -> bool:
        """Replace the patron stored under ``patron_id``.

        The borrowing history is not a caller-supplied field: the old record's
        loans move to ``updated_patron`` and are re-pointed at it.
        """
        existing = self.store.find_by_id(patron_id)
        result = self.store.update(patron_id, updated_patron)
        if result:
            if existing is not updated_patron:
                for loan in existing.borrowing_history:
                    loan.patron = updated_patron
                updated_patron.borrowing_history = existing.borrowing_history + updated_patron.borrowing_history
            self.logger.info(f"Patron updated successfully: ID {patron_id}")
        else:
            self.logger.warning(f"Failed to update patron: Patron with ID {patron_id} not found")
        return result

    def remove_patron(self, patron_id: int) -> bool:
        result = self.store.remove(patron_id)
        if result:
            self.logger.info(f"Patron removed successfully: ID {patron_id}")
        else:
            self.logger.warning(f"Failed to remove patron: Patron with ID {patron_id} not found")
        return result

    def find_patron_by_id(self, patron_id: int) -> Optional[Patron]:
        return self.store.find_by_id(patron_id)

    def list_patrons(self) -> List[Patron]:
        return self.store.list_all()

    def patron_count(self) -> int:
        return self.store.count()

    def next_patron_id(self) -> int:
        return self.store.next_id()

    def get_borrowing_history(self, patron_id: int) -> List[Loan]:
        patron = self.store.find_by_id(patron_id)
        if patron is None:
            self.logger.warning(f"Patron not found: ID {patron_id}")
            return []
        self.logger.info(f"Retrieved borrowing history for patron: {patron.name} (ID: {patron_id})")
        return list(patron.borrowing_history)
