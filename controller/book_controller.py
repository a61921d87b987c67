import logging
import re
from dataclasses import replace
from typing import List, Optional, Union

from core.models import Book, BookDraft

logger = logging.getLogger(__name__)

SEED_BOOKS = (
    Book(1, "To Kill a Mockingbird", "Harper Lee", 1960),
    Book(2, "1984", "George Orwell", 1949),
    Book(3, "The Great Gatsby", "F. Scott Fitzgerald", 1925),
    Book(4, "Pride and Prejudice", "Jane Austen", 1813),
    Book(5, "The Catcher in the Rye", "J.D. Salinger", 1951),
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_year(value) -> Union[int, str]:
    """Read a year the way an HTML number field hands it over.

    Leading digits win ("1999abc" -> 1999); anything unreadable, and 0, gives "".
    """
    if isinstance(value, int):
        return value or ""
    m = _LEADING_INT.match(str(value))
    if not m:
        return ""
    return int(m.group(1)) or ""


class BookController:
    """In-memory book list with inline editing of one row at a time."""

    def __init__(self, books: Optional[List[Book]] = None):
        seed = SEED_BOOKS if books is None else books
        self.books: List[Book] = [replace(b) for b in seed]
        self.editing_id: Optional[int] = None
        self.edit_form = BookDraft()

    def begin_edit(self, book: Book):
        self.editing_id = book.id
        self.edit_form = BookDraft(title=book.title, author=book.author, year=book.year)

    def change_field(self, name: str, value):
        if name == "year":
            value = parse_year(value)
        elif name not in ("title", "author"):
            raise KeyError(name)
        setattr(self.edit_form, name, value)

    def missing_fields(self) -> List[str]:
        """Draft fields that are blank: what a form with required inputs would refuse.

        Checks the parsed draft, not the entry text, so an unreadable year counts as blank.
        """
        form = self.edit_form
        return [name for name in ("title", "author", "year")
                if not str(getattr(form, name)).strip()]

    def submit(self):
        form = self.edit_form
        self.books = [
            replace(b, title=form.title, author=form.author, year=form.year)
            if b.id == self.editing_id else b
            for b in self.books
        ]
        logger.debug("Book %s saved: %r", self.editing_id, form)
        self.editing_id = None
        self.edit_form = BookDraft()

    def cancel(self):
        self.editing_id = None
        self.edit_form = BookDraft()
