from __future__ import annotations

import logging
from typing import Any, Dict

from models.book import Book
from repositories.book_repository import BookRepository
from repositories.publisher_repository import PublisherRepository
from services.exceptions import BookNotFound, InvalidArgument, PublisherNotFound
from utils.pagination import Page

logger = logging.getLogger(__name__)


class BookService:
    def __init__(
        self,
        book_repository: BookRepository | None = None,
        publisher_repository: PublisherRepository | None = None,
    ):
        self.book_repository = book_repository or BookRepository()
        self.publisher_repository = publisher_repository or PublisherRepository()

    def list_books(self, per_page: int = 10, page: int = 1) -> Page:
        return self.book_repository.get_all_books(per_page, page)

    def get_book(self, book_id: int) -> Book:
        book = self.book_repository.find_book_by_id(book_id)
        if not book:
            raise BookNotFound()
        return self.book_repository.load_publisher(book)

    def create_book(self, data: Dict[str, Any]) -> Book:
        self._check_publisher(data)
        book = self.book_repository.create_book(data)
        logger.info("Created book %s (isbn=%s)", book.id, book.isbn)
        return book

    def update_book(self, book_id: int, data: Dict[str, Any]) -> Book:
        """Partial update: only keys present in data are changed."""
        self._check_publisher(data)
        book = self.book_repository.update_book(book_id, data)
        logger.info("Updated book %s fields=%s", book.id, sorted(data))
        return book

    def delete_book(self, book_id: int) -> bool:
        deleted = self.book_repository.delete_book_by_id(book_id)
        if deleted:
            logger.info("Deleted book %s", book_id)
        else:
            logger.info("Delete of missing book %s ignored", book_id)
        return deleted

    def _check_publisher(self, data: Dict[str, Any]) -> None:
        publisher_id = data.get("publisher_id")
        if publisher_id is None:
            return
        # bool is an int subclass, and numeric strings are not accepted
        if not isinstance(publisher_id, int) or isinstance(publisher_id, bool):
            logger.warning("Rejected non-integer publisher_id %r", publisher_id)
            raise InvalidArgument("The publisher_id must be an integer.")
        if not self.publisher_repository.find_publisher_by_id(publisher_id):
            logger.warning("Rejected unknown publisher_id %s", publisher_id)
            raise PublisherNotFound()
