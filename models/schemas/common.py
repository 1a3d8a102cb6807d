from marshmallow import Schema, ValidationError, fields


def validate_not_blank(value: str) -> None:
    """Reject empty or whitespace-only strings."""
    if value is not None and not value.strip():
        raise ValidationError("Field may not be blank.")


def first_message(messages) -> str:
    """Return the first error message from marshmallow's nested messages."""
    if isinstance(messages, dict):
        for value in messages.values():
            found = first_message(value)
            if found:
                return found
        return ""
    if isinstance(messages, (list, tuple)):
        for value in messages:
            found = first_message(value)
            if found:
                return found
        return ""
    return str(messages)


class PageMetaSchema(Schema):
    per_page = fields.Integer()
    current_page = fields.Integer()
    last_page = fields.Integer()
    total = fields.Integer()


page_meta_schema = PageMetaSchema()


def dump_page(page, item_schema: Schema) -> dict:
    """Shape a Page into the list envelope: {"data": [...], "meta": {...}}."""
    return {
        "data": item_schema.dump(page.items, many=True),
        "meta": page_meta_schema.dump(page),
    }
