"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from typing import Awaitable, Callable

from fastapi import Request

from src.todo import TodoItem, User, UserStore

from .guards import Guard, RequestContext, run_guards
from .schemas import TodoResponse, UserResponse


def get_user_store(request: Request) -> UserStore:
    """The store owned by the running application."""
    return request.app.state.user_store


def guarded(*guards: Guard) -> Callable[[Request], Awaitable[RequestContext]]:
    """Build a dependency that runs ``guards`` and yields the enriched context.

    The dependency is a coroutine that never awaits, so the guards and the
    handler that follows run without interleaving with other requests.
    """

    async def run_request_guards(request: Request) -> RequestContext:
        context = RequestContext(
            store=get_user_store(request),
            username=request.headers.get("username"),
            path_id=request.path_params.get("id"),
            free_plan_todo_limit=request.app.state.config.free_plan_todo_limit,
        )
        return run_guards(context, guards)

    return run_request_guards


def serialize_todo(item: TodoItem) -> TodoResponse:
    """Convert domain TodoItem to API response."""
    return TodoResponse(
        id=item.id,
        title=item.title,
        deadline=item.deadline,
        done=item.done,
        created_at=item.created_at,
    )


def serialize_user(user: User) -> UserResponse:
    """Convert domain User to API response."""
    return UserResponse(
        id=user.id,
        name=user.name,
        username=user.username,
        pro=user.pro,
        todos=[serialize_todo(todo) for todo in user.todos],
    )
