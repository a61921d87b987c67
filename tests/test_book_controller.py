# tests/test_book_controller.py

from __future__ import annotations

import pytest

from controller.book_controller import SEED_BOOKS, BookController, parse_year
from core.models import Book, BookDraft


def test_seed_has_five_books_in_order(books: BookController) -> None:
    assert [b.id for b in books.books] == [1, 2, 3, 4, 5]
    assert books.books[1] == Book(2, "1984", "George Orwell", 1949)
    assert books.editing_id is None


def test_controllers_do_not_share_seed() -> None:
    a, b = BookController(), BookController()
    a.begin_edit(a.books[0])
    a.change_field("title", "Changed")
    a.submit()
    assert b.books[0].title == "To Kill a Mockingbird"
    assert SEED_BOOKS[0].title == "To Kill a Mockingbird"


def test_begin_edit_copies_fields(books: BookController) -> None:
    books.begin_edit(books.books[2])
    assert books.editing_id == 3
    assert books.edit_form == BookDraft("The Great Gatsby", "F. Scott Fitzgerald", 1925)


def test_begin_edit_switches_row(books: BookController) -> None:
    books.begin_edit(books.books[0])
    books.change_field("author", "someone")
    books.begin_edit(books.books[4])
    assert books.editing_id == 5
    assert books.edit_form.author == "J.D. Salinger"


def test_year_parse_failure_scenario(books: BookController) -> None:
    books.begin_edit(books.books[1])
    books.change_field("year", "abc")
    assert books.edit_form.year == ""
    books.submit()

    book = books.books[1]
    assert book.id == 2
    assert book.year == ""
    assert (book.title, book.author) == ("1984", "George Orwell")
    assert books.editing_id is None


def test_submit_replaces_only_edited_row(books: BookController) -> None:
    others = [b for b in books.books if b.id != 4]
    books.begin_edit(books.books[3])
    books.change_field("title", "Emma")
    books.change_field("year", "1815")
    books.submit()
    assert books.books[3] == Book(4, "Emma", "Jane Austen", 1815)
    assert [b for b in books.books if b.id != 4] == others


def test_submit_does_not_validate(books: BookController) -> None:
    books.begin_edit(books.books[0])
    books.change_field("title", "")
    books.submit()
    assert books.books[0].title == ""


def test_cancel_discards_draft(books: BookController) -> None:
    before = list(books.books)
    books.begin_edit(books.books[0])
    books.change_field("title", "nope")
    books.cancel()
    assert books.editing_id is None
    assert books.edit_form == BookDraft()
    assert books.books == before


def test_unknown_field_rejected(books: BookController) -> None:
    books.begin_edit(books.books[0])
    with pytest.raises(KeyError):
        books.change_field("isbn", "123")


@pytest.mark.parametrize("raw, expected", [
    ("1999", 1999),
    ("  2001", 2001),
    ("1999abc", 1999),
    ("-44", -44),
    ("abc", ""),
    ("", ""),
    ("0", ""),
    (1925, 1925),
])
def test_parse_year(raw, expected) -> None:
    assert parse_year(raw) == expected


def test_missing_fields_reads_parsed_draft(books: BookController) -> None:
    books.begin_edit(books.books[1])
    assert books.missing_fields() == []
    books.change_field("year", "abc")
    assert books.missing_fields() == ["year"]
    books.change_field("title", "   ")
    assert books.missing_fields() == ["title", "year"]
    books.change_field("year", "1950x")
    assert books.missing_fields() == ["title"]
