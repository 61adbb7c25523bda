from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from lending_library.loan import Loan


class Patron:
    """A registered library member and their borrowing history."""

    def __init__(self, patron_id: int, name: str, email: str, phone: str) -> None:
        self.patron_id = patron_id
        self.name = name
        self.email = email
        self.phone = phone
        # Append-only, in checkout order
        self.borrowing_history: List[Loan] = []

    def add_to_borrowing_history(self, loan: Loan) -> None:
        self.borrowing_history.append(loan)

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.name} (ID: {self.patron_id})"

    def to_dict(self) -> dict:
        return {
            "patron_id": self.patron_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "total_loans": len(self.borrowing_history),
        }
