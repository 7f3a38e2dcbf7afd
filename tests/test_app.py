from fastapi.testclient import TestClient

from src.server.app import build_app


def test_build_app_uses_loaded_config(tmp_path, monkeypatch):
    config_path = tmp_path / "app_config.yaml"
    config_path.write_text(
        "plan:\n  free_todo_limit: 1\nlog:\n  level: \"WARNING\"\n  file: null\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("TODO_PRO_CONFIG", str(config_path))

    app = build_app()

    assert app.state.config.free_plan_todo_limit == 1
    assert app.state.config.log_file is None
    assert len(app.state.user_store) == 0

    client = TestClient(app)
    client.post("/users", json={"name": "A", "username": "a"})
    body = {"title": "x", "deadline": "2030-01-01"}
    assert client.post("/todos", headers={"username": "a"}, json=body).status_code == 201
    assert client.post("/todos", headers={"username": "a"}, json=body).status_code == 403


def test_importing_app_module_does_not_build_an_app():
    import src.server.app as app_module

    assert not hasattr(app_module, "app")
