# tests/test_auth.py

import datetime as dt

import pytest
from jose import jwt

from tasque.core.exceptions import Unauthenticated
from tasque.core.security import create_access_token, decode_access_token
from tasque.core.settings import get_settings

from .conftest import USER_EMAIL

settings = get_settings()

TASK_ID = "507f1f77bcf86cd799439011"

# Toutes les routes de tâches exigent un Bearer valide
PROTECTED = [
    ("post", "/tasks", {"title": "t"}),
    ("get", f"/tasks/{USER_EMAIL}", None),
    ("delete", f"/my-task/{TASK_ID}", None),
    ("patch", f"/my-task/{TASK_ID}", {"title": "t"}),
    ("patch", "/reorder-tasks", {"category": "work", "orderedTaskIds": [TASK_ID]}),
    ("patch", "/reorder-tasks", {"category": None}),
]


def test_issue_token_returns_signed_claims(client):
    response = client.post("/jwt", json={"email": USER_EMAIL})
    print("response", response.json())
    assert response.status_code == 200

    claims = jwt.decode(response.json()["token"], settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    assert claims["email"] == USER_EMAIL
    assert "exp" in claims


def test_issued_token_expires_after_one_hour():
    token = create_access_token({"email": USER_EMAIL})
    claims = decode_access_token(token)
    expires_in = claims["exp"] - dt.datetime.now(dt.timezone.utc).timestamp()
    assert 3500 < expires_in <= 3600


def test_decode_expired_token():
    token = create_access_token({"email": USER_EMAIL}, expires_delta=dt.timedelta(minutes=-5))
    with pytest.raises(Unauthenticated):
        decode_access_token(token)


def test_decode_token_signed_with_other_secret():
    token = jwt.encode({"email": USER_EMAIL}, "another-secret", algorithm="HS256")
    with pytest.raises(Unauthenticated):
        decode_access_token(token)


@pytest.mark.parametrize("method,path,body", PROTECTED)
def test_task_routes_require_token(client, db, method, path, body):
    kwargs = {"json": body} if body is not None else {}
    response = client.request(method.upper(), path, **kwargs)
    print("response", response.json())
    assert response.status_code == 401
    assert response.json() == {"message": "unauthorized access"}
    assert response.headers["www-authenticate"] == "Bearer"
    assert db["tasks"].calls == []


@pytest.mark.parametrize("method,path,body", PROTECTED)
def test_task_routes_reject_invalid_token(client, method, path, body):
    kwargs = {"json": body} if body is not None else {}
    response = client.request(method.upper(), path, headers={"Authorization": "Bearer abc.def.ghi"}, **kwargs)
    assert response.status_code == 401


def test_expired_token_is_rejected(client):
    token = create_access_token({"email": USER_EMAIL}, expires_delta=dt.timedelta(seconds=-1))
    response = client.get(f"/tasks/{USER_EMAIL}", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json() == {"message": "unauthorized access"}


def test_non_bearer_scheme_is_rejected(client):
    token = create_access_token({"email": USER_EMAIL})
    response = client.get(f"/tasks/{USER_EMAIL}", headers={"Authorization": f"Basic {token}"})
    assert response.status_code == 401


def test_issue_token_rejects_non_object_claims(client):
    response = client.post("/jwt", json=["alice"])
    print("response", response.json())

    assert response.status_code == 422
    assert set(response.json()) == {"error"}
    assert response.json()["error"].startswith("body")
