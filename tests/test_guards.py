from datetime import datetime, timezone

import pytest

from src.server.guards import (
    RequestContext,
    pro_quota,
    run_guards,
    todo_exists,
    user_by_id,
    user_exists,
)
from src.todo import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    TodoItem,
    User,
    UserStore,
)

DEADLINE = datetime(2030, 1, 1, tzinfo=timezone.utc)
MISSING_ID = "3b241101-e2bb-4255-8caf-4136c566a962"


@pytest.fixture
def store():
    store = UserStore()
    store.insert(User(name="Alice", username="alice"))
    return store


def add_todos(user, count):
    for index in range(count):
        user.todos.append(TodoItem(title=f"task {index}", deadline=DEADLINE))
    return user.todos


class TestUserExists:
    def test_attaches_user(self, store):
        context = RequestContext(store=store, username="alice")

        user_exists(context)

        assert context.user is store.find_by_username("alice")

    def test_unknown_username(self, store):
        with pytest.raises(NotFoundError, match="User not found!"):
            user_exists(RequestContext(store=store, username="nobody"))

    def test_missing_header(self, store):
        with pytest.raises(NotFoundError) as excinfo:
            user_exists(RequestContext(store=store))
        assert excinfo.value.status_code == 404


class TestProQuota:
    def test_allows_below_limit(self, store):
        user = store.find_by_username("alice")
        add_todos(user, 9)

        pro_quota(RequestContext(store=store, user=user))

    def test_rejects_at_limit(self, store):
        user = store.find_by_username("alice")
        add_todos(user, 10)

        with pytest.raises(ForbiddenError, match="User is not PRO") as excinfo:
            pro_quota(RequestContext(store=store, user=user))
        assert excinfo.value.status_code == 403

    def test_pro_user_has_no_limit(self, store):
        user = store.find_by_username("alice")
        user.pro = True
        add_todos(user, 25)

        pro_quota(RequestContext(store=store, user=user))

    def test_configured_limit(self, store):
        user = store.find_by_username("alice")
        add_todos(user, 2)

        with pytest.raises(ForbiddenError):
            pro_quota(RequestContext(store=store, user=user, free_plan_todo_limit=2))

    def test_requires_resolved_user(self, store):
        with pytest.raises(RuntimeError):
            pro_quota(RequestContext(store=store))


class TestTodoExists:
    def test_attaches_user_and_todo(self, store):
        user = store.find_by_username("alice")
        todo = add_todos(user, 3)[1]
        context = RequestContext(store=store, username="alice", path_id=todo.id)

        todo_exists(context)

        assert context.user is user
        assert context.todo is todo

    def test_malformed_id_checked_before_user(self, store):
        context = RequestContext(store=store, username="nobody", path_id="not-a-uuid")

        with pytest.raises(BadRequestError, match="Id is not uuid") as excinfo:
            todo_exists(context)
        assert excinfo.value.status_code == 400

    def test_unknown_user(self, store):
        context = RequestContext(store=store, username="nobody", path_id=MISSING_ID)

        with pytest.raises(NotFoundError) as excinfo:
            todo_exists(context)
        assert excinfo.value.message == "User not found"

    def test_todo_of_another_user(self, store):
        bob = store.insert(User(name="Bob", username="bob"))
        bobs_todo = add_todos(bob, 1)[0]
        context = RequestContext(store=store, username="alice", path_id=bobs_todo.id)

        with pytest.raises(NotFoundError) as excinfo:
            todo_exists(context)
        assert excinfo.value.message == "Todo not found"
        assert context.todo is None


class TestUserById:
    def test_attaches_user(self, store):
        user = store.find_by_username("alice")
        context = RequestContext(store=store, path_id=user.id)

        user_by_id(context)

        assert context.user is user

    def test_unknown_id(self, store):
        with pytest.raises(NotFoundError, match="User not found!"):
            user_by_id(RequestContext(store=store, path_id=MISSING_ID))


def test_run_guards_stops_at_first_failure(store):
    calls = []

    def record(context):
        calls.append("record")

    context = RequestContext(store=store, username="nobody")

    with pytest.raises(NotFoundError):
        run_guards(context, [user_exists, record])
    assert calls == []


def test_run_guards_returns_enriched_context(store):
    context = RequestContext(store=store, username="alice")

    result = run_guards(context, [user_exists, pro_quota])

    assert result is context
    assert result.user.username == "alice"
