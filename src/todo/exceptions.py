"""Errors raised while handling todo service requests.

Every error carries the HTTP status code and the fixed message that is
returned to the caller as ``{"error": message}``.
"""


class TodoServiceError(Exception):
    """Base error for the todo service"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TodoServiceError):
    """The requested user or todo does not exist"""

    status_code = 404


class ConflictError(TodoServiceError):
    """The request conflicts with current state (duplicate username, already pro)"""

    status_code = 400


class ForbiddenError(TodoServiceError):
    """The user's plan does not allow the operation"""

    status_code = 403


class BadRequestError(TodoServiceError):
    """The request carries a malformed identifier"""

    status_code = 400
