# tests/test_ownership.py
# Filtre de propriété optionnel (ENFORCE_TASK_OWNERSHIP=true).

from bson import ObjectId

from .conftest import USER_EMAIL

OTHER_EMAIL = "mallory@example.com"


def _foreign_task(db) -> str:
    oid = ObjectId()
    db["tasks"].docs.append({"_id": oid, "email": OTHER_EMAIL, "title": "theirs", "category": "work", "order": 0})
    return str(oid)


def test_foreign_tasks_are_reachable_by_default(client, db, auth_headers):
    task_id = _foreign_task(db)
    response = client.patch(f"/my-task/{task_id}", json={"title": "hijacked"}, headers=auth_headers)

    assert response.status_code == 200
    assert db["tasks"].get(ObjectId(task_id))["title"] == "hijacked"


def test_listing_another_user_is_forbidden(client, enforce_ownership, auth_headers):
    response = client.get(f"/tasks/{OTHER_EMAIL}", headers=auth_headers)

    assert response.status_code == 403
    assert response.json() == {"message": "forbidden access"}


def test_listing_own_tasks_still_works(client, seed_tasks, enforce_ownership, auth_headers):
    seed_tasks({"title": "mine", "category": "work", "order": 0})
    response = client.get(f"/tasks/{USER_EMAIL}", headers=auth_headers)

    assert response.status_code == 200
    assert [t["title"] for t in response.json()] == ["mine"]


def test_foreign_task_update_is_not_found(client, db, enforce_ownership, auth_headers):
    task_id = _foreign_task(db)
    response = client.patch(f"/my-task/{task_id}", json={"title": "hijacked"}, headers=auth_headers)

    assert response.status_code == 404
    assert db["tasks"].get(ObjectId(task_id))["title"] == "theirs"


def test_foreign_task_delete_matches_nothing(client, db, enforce_ownership, auth_headers):
    task_id = _foreign_task(db)
    response = client.delete(f"/my-task/{task_id}", headers=auth_headers)

    assert response.json()["deletedCount"] == 0
    assert db["tasks"].get(ObjectId(task_id)) is not None


def test_reorder_skips_foreign_tasks(client, db, seed_tasks, enforce_ownership, auth_headers):
    foreign_id = _foreign_task(db)
    (mine,) = seed_tasks({"title": "mine", "category": "work", "order": 4})
    response = client.patch(
        "/reorder-tasks", json={"category": "work", "orderedTaskIds": [mine, foreign_id]}, headers=auth_headers
    )

    assert response.json() == {"matchedCount": 1, "modifiedCount": 1}
    assert db["tasks"].get(ObjectId(foreign_id))["order"] == 0
    assert db["tasks"].get(ObjectId(mine))["order"] == 0


def test_create_forces_token_email(client, db, enforce_ownership, auth_headers):
    response = client.post("/tasks", json={"title": "x", "email": OTHER_EMAIL}, headers=auth_headers)

    stored = db["tasks"].get(ObjectId(response.json()["insertedId"]))
    assert stored["email"] == USER_EMAIL
