"""Identifier helpers for users and todo items."""

from __future__ import annotations

import re
import uuid

_UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def generate_id() -> str:
    """Return a new random (version 4) UUID in its canonical text form."""
    return str(uuid.uuid4())


def is_uuid_v4(value: object) -> bool:
    """Check that ``value`` is a hyphenated version-4 UUID string."""
    if not isinstance(value, str):
        return False
    return _UUID_V4_PATTERN.match(value) is not None
