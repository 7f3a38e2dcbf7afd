import uuid

import pytest

from src.todo.identifiers import generate_id, is_uuid_v4


def test_generate_id_returns_distinct_v4_uuids():
    ids = {generate_id() for _ in range(100)}

    assert len(ids) == 100
    for value in ids:
        assert uuid.UUID(value).version == 4
        assert is_uuid_v4(value)


@pytest.mark.parametrize(
    "value",
    [
        "not-a-uuid",
        "",
        None,
        42,
        # version 1
        "2f1e6c1a-1dd2-11b2-8000-000000000000",
        # wrong variant nibble
        "3b241101-e2bb-4255-c8ca-9e1b5e3c0d6e",
        # braces and missing hyphens are valid for uuid.UUID but not here
        "{3b241101-e2bb-4255-8caf-4136c566a962}",
        "3b241101e2bb42558caf4136c566a962",
    ],
)
def test_is_uuid_v4_rejects_malformed_values(value):
    assert is_uuid_v4(value) is False


def test_is_uuid_v4_ignores_case():
    assert is_uuid_v4("3B241101-E2BB-4255-8CAF-4136C566A962")
