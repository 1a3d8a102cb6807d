from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import selectinload

import models
from models.book import Book
from models.schemas.book import BOOK_TAKEN
from services.exceptions import BookNotFound, BookNotDeleted
from utils.integers import fits_db_integer
from utils.pagination import Page, paginate

logger = logging.getLogger(__name__)


class BookRepository:
    """Persistence operations for books."""

    def __init__(self, storage=None):
        self._storage = storage

    @property
    def storage(self):
        # Resolved lazily so the repository follows create_app() rebinding
        return self._storage or models.storage

    @property
    def session(self):
        return self.storage.get_session()

    def get_all_books(self, per_page: int = 10, page: int = 1) -> Page:
        query = (
            self.session.query(Book)
            .options(selectinload(Book.publisher))
            .order_by(Book.id.asc())
        )
        return paginate(query, per_page, page)

    def find_book_by_id(self, book_id: int) -> Optional[Book]:
        if not fits_db_integer(book_id):
            return None
        return self.storage.get(Book, book_id)

    def load_publisher(self, book: Book) -> Book:
        """Fetch the book's publisher keyed by publisher_id."""
        if book.publisher_id is not None:
            self.session.refresh(book, attribute_names=["publisher"])
        return book

    def isbn_taken(self, isbn: str, exclude_id: int | None = None) -> bool:
        q = self.session.query(Book).filter(Book.isbn == isbn)
        if exclude_id is not None:
            q = q.filter(Book.id != exclude_id)
        return self.session.query(q.exists()).scalar()

    def create_book(self, data: Dict[str, Any]) -> Book:
        if self.isbn_taken(data["isbn"]):
            raise ValidationError({"isbn": [BOOK_TAKEN]})
        book = Book(**data)
        self.storage.new(book)
        self._commit()
        return book

    def update_book(self, book_id: int, data: Dict[str, Any]) -> Book:
        book = self.find_book_by_id(book_id)
        if not book:
            raise BookNotFound()

        if "isbn" in data and self.isbn_taken(data["isbn"], exclude_id=book.id):
            raise ValidationError({"isbn": [BOOK_TAKEN]})

        for key, value in data.items():
            setattr(book, key, value)
        self._commit()

        if "publisher_id" in data:
            # The relationship still points at the previous publisher
            self.session.expire(book, ["publisher"])
        return book

    def delete_book_by_id(self, book_id: int) -> bool:
        book = self.find_book_by_id(book_id)
        if not book:
            return False

        self.storage.delete(book)
        try:
            self.storage.save()
        except SQLAlchemyError as err:
            logger.exception("Could not delete book %s", book_id)
            raise BookNotDeleted() from err
        return True

    def _commit(self) -> None:
        try:
            self.storage.save()
        except IntegrityError as err:
            # The unique index is authoritative when two writers race past isbn_taken()
            message = str(getattr(err, "orig", err)).lower()
            if "isbn" in message:
                raise ValidationError({"isbn": [BOOK_TAKEN]}) from err
            raise
