"""
Application-layer exceptions.

These exceptions are raised by services and repositories and translated
into HTTP responses by the handlers registered in backend.main. Each
carries the status code it maps to so the translation stays in one place.
"""


class ServiceError(Exception):
    """Base class for errors that cross the API boundary."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """Malformed or missing input, or a reference that does not resolve."""

    status_code = 400


class AuthenticationError(ServiceError):
    """Missing, expired or invalid token, or bad login credentials."""

    status_code = 401


class NotFoundError(ServiceError):
    """Unknown resource id in a path parameter."""

    status_code = 404


class ConflictError(ServiceError):
    """Uniqueness violation, e.g. a userName that is already registered."""

    status_code = 409


class InternalError(ServiceError):
    """Unexpected store failure. The message is never sent to clients."""

    status_code = 500
