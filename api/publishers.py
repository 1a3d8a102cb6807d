from __future__ import annotations

from flask import Blueprint, request, jsonify

from models.schemas.book import BookOutSchema
from models.schemas.common import dump_page
from models.schemas.publisher import (
    PublisherCreateSchema,
    PublisherUpdateSchema,
    PublisherOutSchema,
)
from services.publisher_service import PublisherService
from utils.pagination import parse_pagination

bp = Blueprint("publishers", __name__)

publisher_service = PublisherService()

create_schema = PublisherCreateSchema()
update_schema = PublisherUpdateSchema()
out_schema = PublisherOutSchema()
# The publisher is the path resource, so it is not embedded in each book
books_out_schema = BookOutSchema(exclude=("publisher",))


@bp.get("/publisher")
def list_publishers():
    """
    List publishers with pagination
    ---
    tags: [Publisher]
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
      200: { description: OK }
      400: { description: per_page or page is not an integer }
    """
    per_page, page = parse_pagination()
    return jsonify(dump_page(publisher_service.list_publishers(per_page, page), out_schema))


@bp.post("/publisher")
def create_publisher():
    """
    Create a publisher
    ---
    tags: [Publisher]
    consumes: [application/json]
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [name, email, website]
          properties:
            name: { type: string, minLength: 3, maxLength: 255, example: "Bloomsbury Publishing Plc" }
            email: { type: string, format: email, example: "contact@bloomsbury.com" }
            website: { type: string, format: uri, example: "https://www.bloomsbury.com" }
            address: { type: string, example: "50 Bedford Square" }
            zipcode: { type: string, example: "WC1B 3DP" }
            city: { type: string, example: "London" }
            country: { type: string, example: "United Kingdom" }
            phone: { type: string, example: "+44 (0)20 7631 5600" }
    responses:
      201: { description: Created }
      422: { description: Validation error (including "The Publisher has already been taken.") }
    """
    data = create_schema.load(request.get_json(silent=True) or {})
    publisher = publisher_service.create_publisher(data)
    return jsonify(out_schema.dump(publisher)), 201


@bp.get("/publisher/<int:publisher_id>")
def get_publisher(publisher_id: int):
    """
    Get a publisher by id
    ---
    tags: [Publisher]
    parameters:
      - in: path
        name: publisher_id
        type: integer
        required: true
    responses:
      200: { description: OK }
      404: { description: Publisher can not found }
    """
    return jsonify(out_schema.dump(publisher_service.get_publisher(publisher_id)))


@bp.get("/publisher/<int:publisher_id>/books")
def list_publisher_books(publisher_id: int):
    """
    List the books of a publisher
    ---
    tags: [Publisher]
    parameters:
      - in: path
        name: publisher_id
        type: integer
        required: true
      - in: query
        name: per_page
        type: integer
        default: 10
      - in: query
        name: page
        type: integer
        default: 1
    responses:
      200: { description: OK (empty data when the publisher has no books) }
      404: { description: Publisher can not found }
    """
    per_page, page = parse_pagination()
    books = publisher_service.list_books_of_publisher(publisher_id, per_page, page)
    return jsonify(dump_page(books, books_out_schema))


@bp.route("/publisher/<int:publisher_id>", methods=["PUT", "PATCH"])
def update_publisher(publisher_id: int):
    """
    Update a publisher (partial)
    ---
    tags: [Publisher]
    consumes: [application/json]
    parameters:
      - in: path
        name: publisher_id
        type: integer
        required: true
      - in: body
        name: body
        required: true
        schema:
          type: object
    responses:
      200: { description: OK }
      404: { description: Publisher can not found }
      422: { description: Validation error }
    """
    data = update_schema.load(request.get_json(silent=True) or {})
    publisher = publisher_service.update_publisher(publisher_id, data)
    return jsonify(out_schema.dump(publisher))


@bp.delete("/publisher/<int:publisher_id>")
def delete_publisher(publisher_id: int):
    """
    Delete a publisher (idempotent). Its books are kept and detached.
    ---
    tags: [Publisher]
    parameters:
      - in: path
        name: publisher_id
        type: integer
        required: true
    responses:
      204: { description: Deleted, or already absent }
      404: { description: Publisher can not deleted }
    """
    publisher_service.delete_publisher(publisher_id)
    return ("", 204)
