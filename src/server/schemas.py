"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, field_validator


class UserCreateRequest(BaseModel):
    """Request body for user registration."""

    name: str = Field(..., description="Display name")
    username: str = Field(..., description="Unique handle, sent later in the `username` header")


class TodoWriteRequest(BaseModel):
    """Request body for creating or replacing a todo."""

    title: str
    deadline: datetime = Field(
        ...,
        description="Deadline as an ISO-8601 date or datetime, stored in UTC; naive values are taken as UTC",
    )

    @field_validator("deadline")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TodoResponse(BaseModel):
    """Todo item returned by the API."""

    id: str
    title: str
    deadline: datetime
    done: bool
    created_at: datetime


class UserResponse(BaseModel):
    """User returned by the API, including the full todo list."""

    id: str
    name: str
    username: str
    pro: bool
    todos: List[TodoResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body of every guard or handler failure."""

    error: str


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str
