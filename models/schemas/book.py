from marshmallow import Schema, fields, validate

from models.schemas.common import validate_not_blank
from models.schemas.publisher import PublisherOutSchema

BOOK_TAKEN = "The Book has already been taken."


class BookCreateSchema(Schema):
    title = fields.String(required=True, validate=[validate_not_blank, validate.Length(max=255)])
    author = fields.String(required=True, validate=[validate_not_blank, validate.Length(max=255)])
    isbn = fields.String(required=True, validate=[validate_not_blank, validate.Length(max=32)])
    # Type is enforced by BookService so a non-integer surfaces as InvalidArgument
    publisher_id = fields.Raw(allow_none=True)
    publication_year = fields.Integer(allow_none=True, validate=validate.Range(min=0, max=9999))
    genres = fields.String(allow_none=True)
    summary = fields.String(allow_none=True)


class BookUpdateSchema(BookCreateSchema):
    # All optional, but validate if present
    def __init__(self, **kwargs):
        kwargs.setdefault("partial", True)
        super().__init__(**kwargs)


class BookOutSchema(Schema):
    id = fields.Integer()
    title = fields.String()
    author = fields.String()
    isbn = fields.String()
    publisher_id = fields.Integer(allow_none=True)
    publisher = fields.Nested(PublisherOutSchema, allow_none=True)
    publication_year = fields.Integer(allow_none=True)
    genres = fields.String(allow_none=True)
    summary = fields.String(allow_none=True)
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
