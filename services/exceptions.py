"""
Domain errors raised by the repositories and services.

Each error carries the HTTP status and the message rendered by the error
handlers in api/errors.py as {"error": {"message": ...}}.
"""


class DomainError(Exception):
    status_code = 404
    message = "Domain error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class BookNotFound(DomainError):
    message = "Book can not found"


class BookNotDeleted(DomainError):
    message = "Book can not deleted"


class PublisherNotFound(DomainError):
    message = "Publisher can not found"


class PublisherNotDeleted(DomainError):
    message = "Publisher can not deleted"


class InvalidArgument(DomainError):
    status_code = 400
    message = "Invalid argument"
