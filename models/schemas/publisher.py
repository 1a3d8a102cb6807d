from marshmallow import Schema, fields, validate

from models.schemas.common import validate_not_blank

PUBLISHER_TAKEN = "The Publisher has already been taken."


class PublisherCreateSchema(Schema):
    name = fields.String(required=True, validate=[validate_not_blank, validate.Length(min=3, max=255)])
    email = fields.Email(required=True, validate=validate.Length(max=255))
    website = fields.Url(required=True, validate=validate.Length(max=255))
    address = fields.String(allow_none=True, validate=validate.Length(max=255))
    zipcode = fields.String(allow_none=True, validate=validate.Length(max=32))
    city = fields.String(allow_none=True, validate=validate.Length(max=128))
    country = fields.String(allow_none=True, validate=validate.Length(max=128))
    phone = fields.String(allow_none=True, validate=validate.Length(max=64))


class PublisherUpdateSchema(PublisherCreateSchema):
    # Same rules, but every field is optional; only supplied keys are loaded
    def __init__(self, **kwargs):
        kwargs.setdefault("partial", True)
        super().__init__(**kwargs)


class PublisherOutSchema(Schema):
    id = fields.Integer()
    name = fields.String()
    email = fields.String()
    website = fields.String()
    address = fields.String(allow_none=True)
    zipcode = fields.String(allow_none=True)
    city = fields.String(allow_none=True)
    country = fields.String(allow_none=True)
    phone = fields.String(allow_none=True)
    created_at = fields.DateTime()
    updated_at = fields.DateTime()
