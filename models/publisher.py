from sqlalchemy.orm import relationship
from sqlalchemy import Column, String, UniqueConstraint, Index

from models.base_model import BaseModel, Base


class Publisher(BaseModel, Base):
    __tablename__ = "publishers"

    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    website = Column(String(255), nullable=False)
    address = Column(String(255), nullable=True)
    zipcode = Column(String(32), nullable=True)
    city = Column(String(128), nullable=True)
    country = Column(String(128), nullable=True)
    phone = Column(String(64), nullable=True)

    # Do NOT cascade delete books. Book.publisher_id has ON DELETE SET NULL.
    books = relationship("Book", back_populates="publisher")

    __table_args__ = (
        UniqueConstraint("name", "email", "website", name="uq_publishers_identity"),
        Index("ix_publishers_name", "name"),
    )
