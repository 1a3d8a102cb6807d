"""
Pagination helpers shared by the repositories and the blueprints.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, List, Tuple

from flask import request, abort, current_app

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


@dataclass
class Page:
    """A bounded slice of a list query plus its metadata."""

    items: List[Any] = field(default_factory=list)
    per_page: int = DEFAULT_PER_PAGE
    current_page: int = 1
    total: int = 0

    @property
    def last_page(self) -> int:
        return max(math.ceil(self.total / self.per_page), 1)


def paginate(query, per_page: int = DEFAULT_PER_PAGE, page: int = 1) -> Page:
    """Count the full query, then fetch the requested slice."""
    per_page = max(per_page, 1)
    page = max(page, 1)
    total = query.order_by(None).count()
    items = query.offset((page - 1) * per_page).limit(per_page).all() if total else []
    return Page(items=items, per_page=per_page, current_page=page, total=total)


def parse_pagination() -> Tuple[int, int]:
    """Read per_page and page from the query string; returns (per_page, page)."""
    default_per_page = current_app.config.get("DEFAULT_PER_PAGE", DEFAULT_PER_PAGE)
    max_per_page = current_app.config.get("MAX_PER_PAGE", MAX_PER_PAGE)
    try:
        per_page = int(request.args.get("per_page", default_per_page))
        page = int(request.args.get("page", 1))
    except ValueError:
        abort(400, description="per_page and page must be integers")
    page = max(page, 1)
    per_page = max(1, min(per_page, max_per_page))
    return per_page, page
