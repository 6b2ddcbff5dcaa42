import pytest
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from bookstore.app import validation_message
from bookstore.schemas.book import BookCreate, BookUpdate


def test_book_create_requires_both_fields():
    with pytest.raises(ValidationError):
        BookCreate(title="Dune")
    with pytest.raises(ValidationError):
        BookCreate(title="Dune", author="")


def test_book_create_keeps_values():
    book = BookCreate(title="Dune", author="Frank Herbert")
    assert book.model_dump() == {"title": "Dune", "author": "Frank Herbert"}


def test_book_update_blank_is_unset():
    patch = BookUpdate(title="  ", author="Frank Herbert")
    assert patch.title is None
    assert patch.author == "Frank Herbert"
    assert BookUpdate().model_dump() == {"title": None, "author": None}


def test_validation_message_with_field():
    exc = RequestValidationError([
        {"type": "missing", "loc": ("body", "title"), "msg": "Field required", "input": {}},
    ])
    assert validation_message(exc) == "title: Field required"


def test_validation_message_without_field():
    exc = RequestValidationError([
        {"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error", "input": {}},
    ])
    assert validation_message(exc) == "JSON decode error"
    assert validation_message(RequestValidationError([])) == "Invalid request"
