from fastapi.testclient import TestClient


def test_create_child(client: TestClient):
    response = client.post("/api/children", json={"name": "Ava", "age": 7})

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Ava"
    assert data["age"] == 7
    assert "id" in data
    assert "created_at" in data
    assert "note" not in data


def test_create_child_defaults_age(client: TestClient):
    response = client.post("/api/children", json={"name": "Finn"})

    assert response.status_code == 201
    assert response.json()["age"] == 5


def test_create_child_then_read_it_back(client: TestClient):
    created = client.post("/api/children", json={"name": "Ava", "age": 7}).json()

    response = client.get(f"/api/children/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_create_child_requires_name(client: TestClient, store):
    for body in ({}, {"name": ""}, {"age": 4}, {"name": None}):
        response = client.post("/api/children", json=body)
        assert response.status_code == 400
        assert response.json() == {"ok": False, "error": "name is required"}

    assert store.tables["children"] == []


def test_create_child_without_body(client: TestClient):
    response = client.post("/api/children")

    assert response.status_code == 400
    assert response.json()["error"] == "name is required"


def test_create_child_rejects_non_integer_age(client: TestClient):
    response = client.post("/api/children", json={"name": "Ava", "age": "seven"})

    assert response.status_code == 400
    body = response.json()
    assert body["ok"] is False
    assert body["error"].startswith("age:")


def test_list_children_in_id_order(client: TestClient):
    for name in ("Ava", "Ben", "Cleo"):
        client.post("/api/children", json={"name": name})

    response = client.get("/api/children")

    assert response.status_code == 200
    data = response.json()
    assert [child["name"] for child in data] == ["Ava", "Ben", "Cleo"]
    assert [child["id"] for child in data] == sorted(child["id"] for child in data)


def test_list_children_empty(client: TestClient):
    response = client.get("/api/children")

    assert response.status_code == 200
    assert response.json() == []


def test_get_missing_child_returns_404(client: TestClient):
    response = client.get("/api/children/999")

    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "Not found"}


def test_get_child_with_non_numeric_id(client: TestClient):
    response = client.get("/api/children/abc")

    assert response.status_code == 400
    assert response.json()["ok"] is False
