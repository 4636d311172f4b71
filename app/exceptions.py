"""
Error taxonomy for the bookstore API.

Every business-rule failure is raised as a ``BookstoreError`` subclass and
rendered by the handlers in ``app.middleware.error_handler``.
"""


class BookstoreError(Exception):
    """Base exception carrying an HTTP status and a machine-readable code."""

    status_code = 500
    code = "INTERNAL_ERROR"
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(BookstoreError):
    status_code = 400
    code = "INVALID_INPUT"
    default_message = "Invalid input"


class DuplicateEmail(BookstoreError):
    status_code = 400
    code = "DUPLICATE_EMAIL"
    default_message = "Email already registered"


class InvalidCredentials(BookstoreError):
    """Deliberately identical for unknown email and wrong password."""

    status_code = 400
    code = "INVALID_CREDENTIALS"
    default_message = "Invalid email or password"


class InsufficientInventory(BookstoreError):
    status_code = 400
    code = "INSUFFICIENT_INVENTORY"
    default_message = "Insufficient inventory"


class Unauthenticated(BookstoreError):
    status_code = 401
    code = "UNAUTHENTICATED"
    default_message = "No token provided"


class InvalidToken(BookstoreError):
    status_code = 401
    code = "INVALID_TOKEN"
    default_message = "Invalid token"


class NotFound(BookstoreError):
    status_code = 404
    code = "NOT_FOUND"
    default_message = "Not found"


class Internal(BookstoreError):
    pass
