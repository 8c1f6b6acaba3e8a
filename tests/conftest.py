"""Root conftest — application, database seed and login fixtures."""

import os

# Конфигурация читается при импорте config.py, поэтому задаём окружение заранее
os.environ.setdefault("SECRET_KEY", "test-signing-secret-0123456789abcdef")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from extensions import db
from models.blog import Blog
from models.user import User

from db_helper import INITIAL_BLOGS, INITIAL_USERS, ROOT_PASSWORD, ROOT_USERNAME

# Быстрый хеш для тестов; в приложении по умолчанию scrypt
TEST_HASH_METHOD = "pbkdf2:sha256:1000"


@pytest.fixture
def app():
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": "sqlite://",
            "PASSWORD_HASH_METHOD": TEST_HASH_METHOD,
        }
    )
    with app.app_context():
        db.drop_all()
        db.create_all()
        for blog in INITIAL_BLOGS:
            db.session.add(Blog(**blog))
        for user in INITIAL_USERS:
            db.session.add(
                User(
                    username=user["username"],
                    name=user["name"],
                    password_hash=generate_password_hash(user["password"], method=TEST_HASH_METHOD),
                )
            )
        db.session.add(
            User(
                username=ROOT_USERNAME,
                name="Superuser",
                password_hash=generate_password_hash(ROOT_PASSWORD, method=TEST_HASH_METHOD),
            )
        )
        db.session.commit()

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def token(client):
    response = client.post("/api/login", json={"username": ROOT_USERNAME, "password": ROOT_PASSWORD})
    assert response.status_code == 200
    return response.get_json()["token"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}