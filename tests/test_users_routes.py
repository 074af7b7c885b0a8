# tests/test_users_routes.py

from bson import ObjectId
from pymongo.errors import ServerSelectionTimeoutError


def test_create_user(client, db):
    response = client.post("/users", json={"email": "bob@example.com", "name": "Bob"})
    print("response", response.json())
    assert response.status_code == 200

    body = response.json()
    assert body["acknowledged"] is True
    assert ObjectId.is_valid(body["insertedId"])

    stored = db["users"].docs
    assert len(stored) == 1
    assert stored[0]["email"] == "bob@example.com"
    assert stored[0]["name"] == "Bob"


def test_create_existing_user_is_not_duplicated(client, db):
    client.post("/users", json={"email": "bob@example.com"})
    response = client.post("/users", json={"email": "bob@example.com", "name": "Bobby"})

    assert response.status_code == 200
    assert response.json() == {"message": "User already exists!", "insertedId": None}
    assert len(db["users"].docs) == 1


def test_create_user_does_not_need_token(client):
    response = client.post("/users", json={"email": "carol@example.com"})
    assert response.status_code == 200


def test_create_user_store_failure(client, db):
    db["users"].fail_with = ServerSelectionTimeoutError("no server")
    response = client.post("/users", json={"email": "bob@example.com"})

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create user"}


def test_create_user_without_email_returns_error_message(client, db):
    response = client.post("/users", json={})
    print("response", response.json())

    assert response.status_code == 422
    body = response.json()
    assert set(body) == {"error"}
    assert "body -> email" in body["error"]
    assert db["users"].calls == []
