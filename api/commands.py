"""
Flask CLI commands:
- flask --app api init-db
- flask --app api seed [--books N]
"""
import click
from faker import Faker
from flask.cli import with_appcontext

from models import storage
from models.base_model import Base
from services.book_service import BookService
from services.publisher_service import PublisherService


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all tables."""
    Base.metadata.create_all(storage.get_session().get_bind())
    click.echo("Database initialized.")


@click.command("seed")
@click.option("--books", "book_count", default=10, show_default=True, help="Books to attach to the publisher.")
@with_appcontext
def seed_command(book_count):
    """Create one publisher with a batch of books."""
    fake = Faker()
    publisher = PublisherService().create_publisher(
        {
            "name": fake.company(),
            "email": fake.company_email(),
            "website": fake.url(),
            "address": fake.street_address(),
            "zipcode": fake.postcode(),
            "city": fake.city(),
            "country": fake.country(),
            "phone": fake.phone_number(),
        }
    )
    books = BookService()
    for _ in range(book_count):
        books.create_book(
            {
                "title": fake.sentence(nb_words=4).rstrip("."),
                "author": fake.name(),
                "isbn": fake.unique.isbn13(),
                "publisher_id": publisher.id,
                "publication_year": int(fake.year()),
                "genres": ", ".join(fake.words(nb=2)),
                "summary": fake.paragraph(),
            }
        )
    click.echo(f"Seeded publisher {publisher.id} with {book_count} books.")


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_command)
