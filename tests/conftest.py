"""
Pytest configuration and shared fixtures.
"""

import pytest

from api import create_app
from models import storage
from services.book_service import BookService
from services.publisher_service import PublisherService


@pytest.fixture
def app():
    """Flask app bound to a fresh in-memory database."""
    app = create_app("test")
    yield app
    storage.drop_all()
    storage.close()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def api_url(app):
    """Build a URL under the configured API prefix."""
    prefix = app.config["API_PREFIX"]

    def build(path: str) -> str:
        return f"{prefix}{path}"

    return build


@pytest.fixture
def book_service(app):
    return BookService()


@pytest.fixture
def publisher_service(app):
    return PublisherService()


@pytest.fixture
def publisher_data():
    return {
        "name": "Acme",
        "email": "a@acme.com",
        "website": "https://acme.com",
    }


@pytest.fixture
def book_data():
    return {
        "title": "T",
        "author": "A",
        "isbn": "123",
    }
