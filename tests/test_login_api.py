"""Login and end-to-end token flow tests."""

import pytest

from db_helper import INITIAL_BLOGS, ROOT_PASSWORD, ROOT_USERNAME, blogs_in_db
from utils.tokens import TokenSigner


def test_login_with_valid_credentials_returns_token(client):
    response = client.post("/api/login", json={"username": ROOT_USERNAME, "password": ROOT_PASSWORD})
    assert response.status_code == 200
    assert response.mimetype == "application/json"
    body = response.get_json()
    assert isinstance(body["token"], str) and body["token"]
    assert body["username"] == ROOT_USERNAME


@pytest.mark.parametrize(
    "credentials",
    [
        {"username": ROOT_USERNAME, "password": "wrong"},
        {"username": "nobody", "password": ROOT_PASSWORD},
        {"username": ROOT_USERNAME},
        {},
    ],
)
def test_login_with_invalid_credentials_is_401(client, credentials):
    response = client.post("/api/login", json=credentials)
    assert response.status_code == 401
    assert "token" not in response.get_json()


def test_unknown_user_and_wrong_password_look_the_same(client):
    wrong_password = client.post("/api/login", json={"username": ROOT_USERNAME, "password": "wrong"})
    unknown_user = client.post("/api/login", json={"username": "nobody", "password": "wrong"})
    assert wrong_password.get_json() == unknown_user.get_json()


def test_token_create_then_delete_round_trip(client, app):
    login = client.post("/api/login", json={"username": ROOT_USERNAME, "password": ROOT_PASSWORD})
    headers = {"Authorization": f"Bearer {login.get_json()['token']}"}

    created = client.post(
        "/api/blogs",
        json={"title": "E2E", "author": "root", "url": "e2e.fi"},
        headers=headers,
    )
    assert created.status_code == 200
    assert len(blogs_in_db(app)) == len(INITIAL_BLOGS) + 1

    deleted = client.delete(f"/api/blogs/{created.get_json()['id']}", headers=headers)
    assert deleted.status_code == 204
    assert len(blogs_in_db(app)) == len(INITIAL_BLOGS)


def test_token_from_rotated_secret_is_rejected(client, app, token):
    app.extensions["token_signer"] = TokenSigner("rotated-signing-secret-0123456789abcdef")
    response = client.post(
        "/api/blogs",
        json={"title": "t", "url": "u"},
        headers={"Authorization": f"Bearer {token}"},
    )
    assert response.status_code == 401


def test_unknown_endpoint_is_json_404(client):
    response = client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.get_json() == {"error": "unknown endpoint"}


def test_healthz(client):
    assert client.get("/healthz").get_json() == {"status": "ok"}
