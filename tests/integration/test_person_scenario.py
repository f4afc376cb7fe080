"""End-to-end walk through the person lifecycle over HTTP."""

from fastapi.testclient import TestClient


def test_person_lifecycle(client: TestClient):
    ann = {
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "ann@x.com",
        "age": 30,
    }

    created = client.post("/api/persons", json=ann)
    assert created.status_code == 201
    person_id = created.json()["id"]

    duplicate = client.post("/api/persons", json=ann)
    assert duplicate.status_code == 400
    assert "ann@x.com" in duplicate.json()["detail"]

    by_last_name = client.get(
        "/api/persons/search/lastname", params={"lastname": "Lee"}
    )
    assert [p["id"] for p in by_last_name.json()] == [person_id]

    older = client.get("/api/persons/filter/age", params={"minAge": 25})
    assert [p["id"] for p in older.json()] == [person_id]

    updated = client.put(f"/api/persons/{person_id}", json={**ann, "age": 31})
    assert updated.status_code == 200
    assert updated.json()["age"] == 31
    assert client.get(f"/api/persons/{person_id}").json()["age"] == 31

    deleted = client.delete(f"/api/persons/{person_id}")
    assert deleted.status_code == 204

    gone = client.get(f"/api/persons/{person_id}")
    assert gone.status_code == 404
    assert gone.content == b""
    assert client.get("/api/persons").json() == []


def test_app_lifespan_creates_tables(tmp_path, monkeypatch):
    """Running the real lifespan wires a working database service."""
    from src.person_api.api.http.app import app
    from src.person_api.runtime.context import get_config

    monkeypatch.setattr(
        get_config().database, "url", f"sqlite:///{tmp_path / 'lifespan.db'}"
    )
    previous = getattr(app.state, "app_dependencies", None)

    try:
        with TestClient(app) as client:
            response = client.post(
                "/api/persons",
                json={"firstName": "Ann", "lastName": "Lee", "email": "ann@x.com"},
            )
            assert response.status_code == 201
            assert client.get("/health/ready").status_code == 200
    finally:
        app.state.app_dependencies = previous
