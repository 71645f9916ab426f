"""
Domain errors raised by the service layer.
Mapped to HTTP responses by the handlers registered in app.py.
"""


class ServiceError(Exception):
    """Base class for business-rule failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ServiceError):
    """Referenced record does not exist."""

    status_code = 404


class ConflictError(ServiceError):
    """Operation blocked by existing data (references, duplicates, nothing to pay)."""

    status_code = 409
