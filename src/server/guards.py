"""Request guards run before the todo and user handlers.

A guard receives the :class:`RequestContext` of the current request. It
either raises a :class:`~src.todo.TodoServiceError`, which ends the request
with that error, or returns after optionally attaching the ``user`` / ``todo``
it resolved, which lets the next guard (or the handler) run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from src.todo import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    TodoItem,
    User,
    UserStore,
    is_uuid_v4,
)

logger = logging.getLogger(__name__)

FREE_PLAN_TODO_LIMIT = 10


@dataclass
class RequestContext:
    """Values a guard pipeline reads from the request and accumulates."""

    store: UserStore
    username: Optional[str] = None
    path_id: Optional[str] = None
    free_plan_todo_limit: int = FREE_PLAN_TODO_LIMIT
    user: Optional[User] = None
    todo: Optional[TodoItem] = None


Guard = Callable[[RequestContext], None]


def user_exists(context: RequestContext) -> None:
    """Resolve the user named by the ``username`` header."""
    user = context.store.find_by_username(context.username)
    if user is None:
        logger.debug("Rejected request: unknown username %r", context.username)
        raise NotFoundError("User not found!")
    context.user = user


def pro_quota(context: RequestContext) -> None:
    """Allow todo creation while under the free limit or on the pro plan."""
    user = context.user
    if user is None:
        raise RuntimeError("pro_quota must run after a guard that resolves the user")
    if len(user.todos) < context.free_plan_todo_limit or user.pro:
        return
    logger.debug("Rejected todo creation for %s: free plan limit reached", user.username)
    raise ForbiddenError("User is not PRO")


def todo_exists(context: RequestContext) -> None:
    """Resolve the todo ``path_id`` owned by the user in the ``username`` header.

    The id format is checked before the user is looked up, and the user
    before the todo.
    """
    if not is_uuid_v4(context.path_id):
        logger.debug("Rejected request: malformed todo id %r", context.path_id)
        raise BadRequestError("Id is not uuid")

    user = context.store.find_by_username(context.username)
    if user is None:
        raise NotFoundError("User not found")

    todo = user.find_todo(context.path_id)
    if todo is None:
        raise NotFoundError("Todo not found")

    context.user = user
    context.todo = todo


def user_by_id(context: RequestContext) -> None:
    """Resolve the user whose id is the ``id`` path parameter."""
    user = context.store.find_by_id(context.path_id)
    if user is None:
        logger.debug("Rejected request: unknown user id %r", context.path_id)
        raise NotFoundError("User not found!")
    context.user = user


def run_guards(context: RequestContext, guards: Sequence[Guard]) -> RequestContext:
    """Run ``guards`` in order; the first failing guard stops the pipeline."""
    for guard in guards:
        guard(context)
    return context
