from datetime import date
from typing import Optional

from lending_library.errors import ValidationError


class TextValidator:
    """Basic text checks shared by the book and patron constructors."""

    @staticmethod
    def is_blank(text: Optional[str]) -> bool:
        if text is None:
            return True
        return not text.strip()

    @staticmethod
    def require(text: Optional[str], field_name: str) -> str:
        if TextValidator.is_blank(text):
            raise ValidationError(f"{field_name} cannot be null or empty")
        return text


class BookValidator:
    """Construction-time checks for book fields.
    A failing check raises ValidationError; nothing is returned half-built.
    """

    @staticmethod
    def validate_title(title: Optional[str]) -> str:
        return TextValidator.require(title, "Title")

    @staticmethod
    def validate_author(author: Optional[str]) -> str:
        return TextValidator.require(author, "Author")

    @staticmethod
    def validate_isbn(isbn: Optional[str]) -> str:
        return TextValidator.require(isbn, "ISBN")

    @staticmethod
    def validate_publication_year(year: int, *, min_year: int = 0, current_year: Optional[int] = None) -> int:
        if current_year is None:
            current_year = date.today().year
        # bool is an int subclass; reject it explicitly
        if isinstance(year, bool) or not isinstance(year, int):
            raise ValidationError("Invalid publication year")
        if year < min_year or year > current_year:
            raise ValidationError("Invalid publication year")
        return year
