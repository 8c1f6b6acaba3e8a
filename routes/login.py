"""
Программа: «Bloglist» – бэкенд для хранения блогов и учётных записей пользователей.
Модуль: routes/login.py – вход по логину/паролю и аутентификация запросов.

Назначение модуля:
- Выдача токена доступа по корректной паре логин/пароль.
- Загрузка пользователя Flask-Login из заголовка `Authorization: Bearer <token>`.
"""

from flask import current_app, jsonify, request

from extensions import db, login_manager
from models.user import User
from services.credentials import authenticate
from utils.errors import Unauthorized
from utils.tokens import extract_bearer_token


@login_manager.request_loader
def load_user_from_request(req):
    token = extract_bearer_token(req.headers.get("Authorization"))
    if token is None:
        return None

    signer = current_app.extensions["token_signer"]
    try:
        payload = signer.verify(token)
    except Unauthorized as exc:
        current_app.logger.info("Токен отклонён: %s", exc.message)
        return None

    # Пользователь мог исчезнуть из базы после выпуска токена
    return db.session.get(User, payload["id"])


def register_routes(app):
    @app.post("/api/login")
    def login():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
        user, token = authenticate(
            data.get("username"),
            data.get("password"),
            current_app.extensions["token_signer"],
        )
        return jsonify({"token": token, "username": user.username, "name": user.name}), 200
