from sqlalchemy import (
    Column,
    String,
    Integer,
    ForeignKey,
    Text,
    UniqueConstraint,
    Index,
)
from sqlalchemy.orm import relationship

from models.base_model import BaseModel, Base


class Book(BaseModel, Base):
    __tablename__ = "books"

    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    # Stored exactly as supplied; uniqueness is case-sensitive
    isbn = Column(String(32), nullable=False)
    publication_year = Column(Integer, nullable=True)
    genres = Column(Text, nullable=True)
    summary = Column(Text, nullable=True)

    # Publisher does not own the book: deleting it detaches the book
    publisher_id = Column(
        Integer, ForeignKey("publishers.id", ondelete="SET NULL"), nullable=True, index=True
    )

    publisher = relationship("Publisher", back_populates="books")

    __table_args__ = (
        UniqueConstraint("isbn", name="uq_books_isbn"),
        Index("ix_books_title", "title"),
    )
