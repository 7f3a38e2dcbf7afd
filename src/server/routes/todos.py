"""Todo endpoints."""

from __future__ import annotations

import logging
from typing import List

from fastapi import Depends, FastAPI, Response, status

from src.todo import NotFoundError, TodoItem

from ..dependencies import guarded, serialize_todo
from ..guards import RequestContext, pro_quota, todo_exists, user_exists
from ..schemas import ErrorResponse, TodoResponse, TodoWriteRequest

logger = logging.getLogger(__name__)

_NOT_FOUND = {404: {"model": ErrorResponse}}
_BAD_ID_OR_NOT_FOUND = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


def register_todo_routes(app: FastAPI) -> None:
    """Register todo CRUD endpoints for the user in the `username` header."""

    @app.get("/todos", response_model=List[TodoResponse], responses=_NOT_FOUND)
    async def list_todos(
        context: RequestContext = Depends(guarded(user_exists)),
    ) -> List[TodoResponse]:
        """List the user's todos in creation order."""
        return [serialize_todo(todo) for todo in context.user.todos]

    @app.post(
        "/todos",
        response_model=TodoResponse,
        status_code=status.HTTP_201_CREATED,
        responses={403: {"model": ErrorResponse}, **_NOT_FOUND},
    )
    async def create_todo(
        request: TodoWriteRequest,
        context: RequestContext = Depends(guarded(user_exists, pro_quota)),
    ) -> TodoResponse:
        """Create a todo, subject to the free plan limit."""
        todo = TodoItem(title=request.title, deadline=request.deadline)
        context.user.todos.append(todo)
        logger.info("Todo %s created for %s", todo.id, context.user.username)
        return serialize_todo(todo)

    @app.put("/todos/{id}", response_model=TodoResponse, responses=_BAD_ID_OR_NOT_FOUND)
    async def update_todo(
        request: TodoWriteRequest,
        context: RequestContext = Depends(guarded(todo_exists)),
    ) -> TodoResponse:
        """Replace a todo's title and deadline."""
        todo = context.todo
        todo.title = request.title
        todo.deadline = request.deadline
        return serialize_todo(todo)

    @app.patch("/todos/{id}/done", response_model=TodoResponse, responses=_BAD_ID_OR_NOT_FOUND)
    async def mark_todo_done(
        context: RequestContext = Depends(guarded(todo_exists)),
    ) -> TodoResponse:
        """Mark a todo as done."""
        context.todo.done = True
        return serialize_todo(context.todo)

    @app.delete(
        "/todos/{id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses=_BAD_ID_OR_NOT_FOUND,
    )
    async def delete_todo(
        context: RequestContext = Depends(guarded(user_exists, todo_exists)),
    ) -> Response:
        """Delete a todo."""
        todos = context.user.todos
        index = next((i for i, item in enumerate(todos) if item is context.todo), None)
        if index is None:
            raise NotFoundError("Todo not found")

        del todos[index]
        logger.info("Todo %s deleted for %s", context.todo.id, context.user.username)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
