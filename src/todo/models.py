from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from .identifiers import generate_id


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, eq=False)
class TodoItem:
    """A single task owned by exactly one user."""

    title: str
    deadline: datetime
    id: str = field(default_factory=generate_id)
    done: bool = False
    created_at: datetime = field(default_factory=utc_now)


@dataclass(slots=True, eq=False)
class User:
    """A registered account and the todo list it owns."""

    name: str
    username: str
    id: str = field(default_factory=generate_id)
    pro: bool = False
    todos: List[TodoItem] = field(default_factory=list)

    def find_todo(self, todo_id: str) -> TodoItem | None:
        for todo in self.todos:
            if todo.id == todo_id:
                return todo
        return None
