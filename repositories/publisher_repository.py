from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from marshmallow import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

import models
from models.book import Book
from models.publisher import Publisher
from models.schemas.publisher import PUBLISHER_TAKEN
from services.exceptions import PublisherNotFound, PublisherNotDeleted
from utils.integers import fits_db_integer
from utils.pagination import Page, paginate

logger = logging.getLogger(__name__)

IDENTITY_FIELDS = ("name", "email", "website")


class PublisherRepository:
    """Persistence operations for publishers and their books."""

    def __init__(self, storage=None):
        self._storage = storage

    @property
    def storage(self):
        return self._storage or models.storage

    @property
    def session(self):
        return self.storage.get_session()

    def get_all_publishers(self, per_page: int = 10, page: int = 1) -> Page:
        query = self.session.query(Publisher).order_by(Publisher.id.asc())
        return paginate(query, per_page, page)

    def find_publisher_by_id(self, publisher_id: int) -> Optional[Publisher]:
        if not fits_db_integer(publisher_id):
            return None
        return self.storage.get(Publisher, publisher_id)

    def find_books_by_publisher_id(self, publisher_id: int, per_page: int = 10, page: int = 1) -> Page:
        """Books of a publisher; an existing publisher without books yields an empty page."""
        publisher = self.find_publisher_by_id(publisher_id)
        if not publisher:
            raise PublisherNotFound()

        query = (
            self.session.query(Book)
            .filter(Book.publisher_id == publisher.id)
            .order_by(Book.id.asc())
        )
        return paginate(query, per_page, page)

    def identity_taken(self, name: str, email: str, website: str, exclude_id: int | None = None) -> bool:
        """True when another publisher already has this name, email and website."""
        q = self.session.query(Publisher).filter(
            Publisher.name == name,
            Publisher.email == email,
            Publisher.website == website,
        )
        if exclude_id is not None:
            q = q.filter(Publisher.id != exclude_id)
        return self.session.query(q.exists()).scalar()

    def create_publisher(self, data: Dict[str, Any]) -> Publisher:
        if self.identity_taken(data["name"], data["email"], data["website"]):
            raise ValidationError({"name": [PUBLISHER_TAKEN]})
        publisher = Publisher(**data)
        self.storage.new(publisher)
        self._commit()
        return publisher

    def update_publisher(self, publisher_id: int, data: Dict[str, Any]) -> Publisher:
        publisher = self.find_publisher_by_id(publisher_id)
        if not publisher:
            raise PublisherNotFound()

        if any(key in data for key in IDENTITY_FIELDS):
            merged = {key: data.get(key, getattr(publisher, key)) for key in IDENTITY_FIELDS}
            if self.identity_taken(exclude_id=publisher.id, **merged):
                raise ValidationError({"name": [PUBLISHER_TAKEN]})

        for key, value in data.items():
            setattr(publisher, key, value)
        self._commit()
        return publisher

    def delete_publisher_by_id(self, publisher_id: int) -> bool:
        publisher = self.find_publisher_by_id(publisher_id)
        if not publisher:
            return False

        # Loaded books get publisher_id set to NULL by the ORM
        self.storage.delete(publisher)
        try:
            self.storage.save()
        except SQLAlchemyError as err:
            logger.exception("Could not delete publisher %s", publisher_id)
            raise PublisherNotDeleted() from err
        return True

    def _commit(self) -> None:
        try:
            self.storage.save()
        except IntegrityError as err:
            message = str(getattr(err, "orig", err)).lower()
            if "uq_publishers_identity" in message or "publishers.name" in message:
                raise ValidationError({"name": [PUBLISHER_TAKEN]}) from err
            raise
