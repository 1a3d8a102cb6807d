from __future__ import annotations

from flask import Blueprint, request, jsonify

from models.schemas.book import BookCreateSchema, BookUpdateSchema, BookOutSchema
from models.schemas.common import dump_page
from services.book_service import BookService
from utils.pagination import parse_pagination

bp = Blueprint("books", __name__)

book_service = BookService()

# Schemas
book_create_schema = BookCreateSchema()
book_update_schema = BookUpdateSchema()
book_out_schema = BookOutSchema()


@bp.get("/books")
def list_books():
    """
    List books with pagination
    ---
    tags:
      - Books
    parameters:
      - in: query
        name: per_page
        type: integer
        default: 10
      - in: query
        name: page
        type: integer
        default: 1
    responses:
      200:
        description: "List of books: {data: [...], meta: {per_page, current_page, last_page, total}}"
      400:
        description: per_page or page is not an integer
    """
    per_page, page = parse_pagination()
    return jsonify(dump_page(book_service.list_books(per_page, page), book_out_schema))


@bp.post("/books")
def create_book():
    """
    Create a new book
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [title, author, isbn]
          properties:
            title: { type: string, maxLength: 255 }
            author: { type: string, maxLength: 255 }
            isbn: { type: string, example: "9780747551003" }
            publisher_id: { type: integer }
            publication_year: { type: integer, example: 2003 }
            genres: { type: string, example: "Fantasy, Adventure" }
            summary: { type: string }
    responses:
      201:
        description: Created
      400:
        description: publisher_id is not an integer
      404:
        description: Publisher not found
      422:
        description: Validation error (including "The Book has already been taken.")
    """
    payload = request.get_json(silent=True) or {}
    data = book_create_schema.load(payload)
    book = book_service.create_book(data)
    return jsonify(book_out_schema.dump(book)), 201


@bp.get("/books/<int:book_id>")
def get_book(book_id: int):
    """
    Get a single book by id
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
    responses:
      200:
        description: Book found, with its publisher embedded when set
      404:
        description: Book can not found
    """
    return jsonify(book_out_schema.dump(book_service.get_book(book_id)))


@bp.route("/books/<int:book_id>", methods=["PUT", "PATCH"])
def update_book(book_id: int):
    """
    Update a book (partial)
    ---
    tags:
      - Books
    consumes:
      - application/json
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
    responses:
      200:
        description: Updated
      400:
        description: publisher_id is not an integer
      404:
        description: Book or publisher not found
      422:
        description: Validation error
    """
    payload = request.get_json(silent=True) or {}
    data = book_update_schema.load(payload)
    book = book_service.update_book(book_id, data)
    return jsonify(book_out_schema.dump(book))


@bp.delete("/books/<int:book_id>")
def delete_book(book_id: int):
    """
    Delete a book (idempotent)
    ---
    tags:
      - Books
    parameters:
      - in: path
        name: book_id
        type: integer
        required: true
    responses:
      204:
        description: Deleted, or already absent
      404:
        description: Book can not deleted
    """
    book_service.delete_book(book_id)
    return ("", 204)
