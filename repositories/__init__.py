from repositories.book_repository import BookRepository
from repositories.publisher_repository import PublisherRepository

__all__ = ["BookRepository", "PublisherRepository"]
