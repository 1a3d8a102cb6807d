#!/usr/bin/env python3
"""
Shared SQLAlchemy base and mixin for the Book Catalog API.

- Integer primary key generated by the store
- created_at / updated_at timestamps

Notes:
- Timestamps are naive UTC in every state, so a freshly written row and a
  reloaded one serialize the same way.
- Timestamps carry both a Python-side default (so the value is available right
  after flush) and a server default for rows inserted outside the ORM.
- For SQLite, func.now() maps to CURRENT_TIMESTAMP.
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

# Declarative base for all models
Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BaseModel:
    """
    Base mixin for all persistent models: id, created_at, updated_at.
    """

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(
        DateTime(), default=_utcnow, server_default=func.now(), nullable=False
    )
    updated_at = Column(
        DateTime(),
        default=_utcnow,
        server_default=func.now(),
        onupdate=_utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"
