"""
Tests for PublisherService and PublisherRepository.
"""

import pytest
from marshmallow import ValidationError

from models import storage
from models.book import Book
from models.publisher import Publisher
from repositories.publisher_repository import PublisherRepository
from services.exceptions import PublisherNotFound
from tests.factories import BookFactory, PublisherFactory


def test_create_publisher(publisher_service, publisher_data):
    publisher = publisher_service.create_publisher(publisher_data)

    assert isinstance(publisher, Publisher)
    assert publisher.name == "Acme"
    assert publisher.email == "a@acme.com"
    assert publisher.website == "https://acme.com"
    assert publisher.address is None
    assert publisher.phone is None
    assert storage.count(Publisher) == 1


def test_create_publisher_duplicate_identity(publisher_service, publisher_data):
    publisher_service.create_publisher(publisher_data)

    with pytest.raises(ValidationError) as excinfo:
        publisher_service.create_publisher(dict(publisher_data))

    assert excinfo.value.messages == {"name": ["The Publisher has already been taken."]}
    assert storage.count(Publisher) == 1


def test_unique_constraint_rejects_duplicate_identity(publisher_service, publisher_data, monkeypatch):
    publisher_service.create_publisher(publisher_data)
    monkeypatch.setattr(
        PublisherRepository,
        "identity_taken",
        lambda self, name, email, website, exclude_id=None: False,
    )

    with pytest.raises(ValidationError) as excinfo:
        publisher_service.create_publisher(dict(publisher_data))

    assert excinfo.value.messages == {"name": ["The Publisher has already been taken."]}
    assert storage.count(Publisher) == 1


def test_get_publisher_id_beyond_integer_column(publisher_service):
    with pytest.raises(PublisherNotFound):
        publisher_service.get_publisher(2 ** 63)
    with pytest.raises(PublisherNotFound):
        publisher_service.list_books_of_publisher(2 ** 63)


def test_same_name_with_other_contact_is_allowed(publisher_service, publisher_data):
    publisher_service.create_publisher(publisher_data)

    other = publisher_service.create_publisher({**publisher_data, "email": "press@acme.org"})

    assert other.name == publisher_data["name"]
    assert storage.count(Publisher) == 2


def test_get_publisher(publisher_service):
    created = PublisherFactory()

    assert publisher_service.get_publisher(created.id).id == created.id


def test_get_publisher_not_found(publisher_service):
    with pytest.raises(PublisherNotFound) as excinfo:
        publisher_service.get_publisher(999)
    assert excinfo.value.message == "Publisher can not found"


def test_update_publisher_partial(publisher_service, publisher_data):
    created = publisher_service.create_publisher(publisher_data)

    publisher = publisher_service.update_publisher(created.id, {"phone": "+44 (0)20 7631 5600"})

    assert publisher.phone == "+44 (0)20 7631 5600"
    assert publisher.name == publisher_data["name"]
    assert publisher.email == publisher_data["email"]
    assert publisher.website == publisher_data["website"]


def test_update_publisher_to_taken_identity(publisher_service, publisher_data):
    publisher_service.create_publisher(publisher_data)
    other = publisher_service.create_publisher({**publisher_data, "name": "Other Press"})

    with pytest.raises(ValidationError) as excinfo:
        publisher_service.update_publisher(other.id, {"name": publisher_data["name"]})

    assert excinfo.value.messages == {"name": ["The Publisher has already been taken."]}


def test_update_publisher_keeps_own_identity(publisher_service, publisher_data):
    created = publisher_service.create_publisher(publisher_data)

    publisher = publisher_service.update_publisher(created.id, {**publisher_data, "city": "London"})

    assert publisher.city == "London"


def test_update_publisher_not_found(publisher_service):
    with pytest.raises(PublisherNotFound):
        publisher_service.update_publisher(999, {"phone": "123"})


def test_list_books_of_publisher(publisher_service):
    publisher = PublisherFactory()
    BookFactory.create_batch(3, publisher=publisher)
    BookFactory.create_batch(2)

    page = publisher_service.list_books_of_publisher(publisher.id, per_page=2, page=1)

    assert len(page.items) == 2
    assert page.total == 3
    assert page.last_page == 2
    assert all(book.publisher_id == publisher.id for book in page.items)


def test_list_books_of_publisher_without_books(publisher_service):
    publisher = PublisherFactory()

    page = publisher_service.list_books_of_publisher(publisher.id)

    assert page.items == []
    assert page.total == 0
    assert page.last_page == 1


def test_list_books_of_missing_publisher(publisher_service):
    with pytest.raises(PublisherNotFound):
        publisher_service.list_books_of_publisher(999)


def test_delete_publisher(publisher_service):
    created = PublisherFactory()

    assert publisher_service.delete_publisher(created.id) is True
    with pytest.raises(PublisherNotFound):
        publisher_service.get_publisher(created.id)


def test_delete_publisher_detaches_books(publisher_service):
    publisher = PublisherFactory()
    book = BookFactory(publisher=publisher)

    publisher_service.delete_publisher(publisher.id)

    storage.get_session().expire_all()
    reloaded = storage.get(Book, book.id)
    assert reloaded is not None
    assert reloaded.publisher_id is None


def test_delete_missing_publisher_returns_false(publisher_service):
    assert publisher_service.delete_publisher(999) is False


def test_list_publishers(publisher_service):
    PublisherFactory.create_batch(4)

    page = publisher_service.list_publishers(per_page=3, page=2)

    assert len(page.items) == 1
    assert page.total == 4
    assert page.current_page == 2
    assert page.last_page == 2
