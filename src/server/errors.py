"""Translate service errors into JSON responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.todo import TodoServiceError


async def handle_service_error(request: Request, exc: TodoServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TodoServiceError, handle_service_error)
