"""User endpoints."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, status

from src.todo import ConflictError, User, UserStore

from ..dependencies import get_user_store, guarded, serialize_user
from ..guards import RequestContext, user_by_id
from ..schemas import ErrorResponse, UserCreateRequest, UserResponse

logger = logging.getLogger(__name__)


def register_user_routes(app: FastAPI) -> None:
    """Register user registration and plan endpoints."""

    @app.post(
        "/users",
        response_model=UserResponse,
        status_code=status.HTTP_201_CREATED,
        responses={400: {"model": ErrorResponse}},
    )
    async def create_user(
        request: UserCreateRequest,
        store: UserStore = Depends(get_user_store),
    ) -> UserResponse:
        """Register a new user on the free plan."""
        if store.username_exists(request.username):
            raise ConflictError("Username already exists")

        user = store.insert(User(name=request.name, username=request.username))
        logger.info("User created: %s (%s)", user.username, user.id)
        return serialize_user(user)

    @app.get(
        "/users/{id}",
        response_model=UserResponse,
        responses={404: {"model": ErrorResponse}},
    )
    async def get_user(context: RequestContext = Depends(guarded(user_by_id))) -> UserResponse:
        """Return a user by id."""
        return serialize_user(context.user)

    @app.patch(
        "/users/{id}/pro",
        response_model=UserResponse,
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    )
    async def activate_pro(context: RequestContext = Depends(guarded(user_by_id))) -> UserResponse:
        """Move a user to the pro plan."""
        user = context.user
        if user.pro:
            raise ConflictError("Pro plan is already activated.")

        user.pro = True
        logger.info("Pro plan activated for %s", user.username)
        return serialize_user(user)
