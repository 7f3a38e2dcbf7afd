"""Users, todo items and the in-memory store shared by the HTTP server."""

from .exceptions import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    TodoServiceError,
)
from .identifiers import generate_id, is_uuid_v4
from .models import TodoItem, User
from .store import UserStore

__all__ = [
    "BadRequestError",
    "ConflictError",
    "ForbiddenError",
    "NotFoundError",
    "TodoServiceError",
    "TodoItem",
    "User",
    "UserStore",
    "generate_id",
    "is_uuid_v4",
]
