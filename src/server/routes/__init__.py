"""Route registration helpers."""

from .health import register_health_routes
from .todos import register_todo_routes
from .users import register_user_routes

__all__ = [
    "register_health_routes",
    "register_todo_routes",
    "register_user_routes",
]
