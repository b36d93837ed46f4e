from fastapi.testclient import TestClient

from user_api.services.user_store import UserStore


def _create(client: TestClient, name: str, email: str) -> dict:
    response = client.post("/users", json={"name": name, "email": email})
    assert response.status_code == 201
    return response.json()


def test_create_and_get_user(basic_client: TestClient):
    created = _create(basic_client, "Alice", "a@x.com")
    assert created == {"id": 1, "name": "Alice", "email": "a@x.com"}

    response = basic_client.get("/users/1")
    assert response.status_code == 200
    assert response.json() == created


def test_email_format_not_checked(basic_client: TestClient):
    """Test that the basic variant accepts any string as an email"""
    created = _create(basic_client, "Alice", "not-an-email")

    assert created["email"] == "not-an-email"


def test_list_users(basic_client: TestClient):
    _create(basic_client, "Alice", "a@x.com")
    _create(basic_client, "Bob", "b@x.com")

    response = basic_client.get("/users")
    assert response.status_code == 200
    assert [(u["id"], u["name"]) for u in response.json()] == [(1, "Alice"), (2, "Bob")]


def test_update_replaces_user(basic_client: TestClient):
    _create(basic_client, "Alice", "a@x.com")

    response = basic_client.put("/users/1", json={"name": "Alicia", "email": "alicia@x.com"})

    assert response.status_code == 200
    assert response.json() == {"id": 1, "name": "Alicia", "email": "alicia@x.com"}


def test_update_requires_full_body(basic_client: TestClient):
    """Test that a replacement update needs both name and email"""
    _create(basic_client, "Alice", "a@x.com")

    response = basic_client.put("/users/1", json={"name": "Alicia"})

    assert response.status_code == 422
    assert basic_client.get("/users/1").json()["name"] == "Alice"


def test_update_missing_user_returns_null(basic_client: TestClient, basic_store: UserStore):
    response = basic_client.put("/users/5", json={"name": "Ghost", "email": "g@x.com"})

    assert response.status_code == 200
    assert response.json() is None
    assert len(basic_store) == 0


def test_delete_user(basic_client: TestClient):
    _create(basic_client, "Alice", "a@x.com")

    assert basic_client.delete("/users/1").json() is True
    assert basic_client.delete("/users/1").json() is False
    assert basic_client.get("/users/1").json() is None


def test_length_derived_id_collides_after_delete(basic_client: TestClient):
    """Test that the basic variant reuses Bob's id for Carol after Alice is deleted"""
    _create(basic_client, "Alice", "a@x.com")
    bob = _create(basic_client, "Bob", "b@x.com")
    assert basic_client.delete("/users/1").json() is True

    carol = _create(basic_client, "Carol", "c@x.com")

    assert carol["id"] == bob["id"] == 2
    assert [u["name"] for u in basic_client.get("/users").json()] == ["Bob", "Carol"]
