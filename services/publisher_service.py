from __future__ import annotations

import logging
from typing import Any, Dict

from models.publisher import Publisher
from repositories.publisher_repository import PublisherRepository
from services.exceptions import PublisherNotFound
from utils.pagination import Page

logger = logging.getLogger(__name__)


class PublisherService:
    def __init__(self, publisher_repository: PublisherRepository | None = None):
        self.publisher_repository = publisher_repository or PublisherRepository()

    def list_publishers(self, per_page: int = 10, page: int = 1) -> Page:
        return self.publisher_repository.get_all_publishers(per_page, page)

    def get_publisher(self, publisher_id: int) -> Publisher:
        publisher = self.publisher_repository.find_publisher_by_id(publisher_id)
        if not publisher:
            raise PublisherNotFound()
        return publisher

    def list_books_of_publisher(self, publisher_id: int, per_page: int = 10, page: int = 1) -> Page:
        return self.publisher_repository.find_books_by_publisher_id(publisher_id, per_page, page)

    def create_publisher(self, data: Dict[str, Any]) -> Publisher:
        publisher = self.publisher_repository.create_publisher(data)
        logger.info("Created publisher %s (%s)", publisher.id, publisher.name)
        return publisher

    def update_publisher(self, publisher_id: int, data: Dict[str, Any]) -> Publisher:
        publisher = self.publisher_repository.update_publisher(publisher_id, data)
        logger.info("Updated publisher %s fields=%s", publisher.id, sorted(data))
        return publisher

    def delete_publisher(self, publisher_id: int) -> bool:
        deleted = self.publisher_repository.delete_publisher_by_id(publisher_id)
        if deleted:
            logger.info("Deleted publisher %s", publisher_id)
        else:
            logger.info("Delete of missing publisher %s ignored", publisher_id)
        return deleted
