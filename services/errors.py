"""Errors raised by the service layer.

Each error subclasses the matching werkzeug HTTP exception so the
application's error handler renders it with the right status code.
"""

from werkzeug.exceptions import BadRequest, Conflict, NotFound, Unauthorized


class BadRequestError(BadRequest):
    """Malformed input or a failed validation."""


class NotFoundError(NotFound):
    """The referenced entity does not exist."""


class DuplicateError(Conflict):
    """An insert violated a uniqueness rule."""


class UnauthorizedError(Unauthorized):
    """Authentication or authorization failed."""


class InvalidTokenError(BadRequestError):
    """A bearer token failed signature, algorithm, issuer or shape checks."""

    description = "Invalid token."


class TokenExpiredError(InvalidTokenError):
    description = "Token has expired."


class EmptyStackError(NotFoundError):
    """A pop was attempted on a stack without items."""

    description = "Stack is empty."
