"""
Модуль: `routes/users.py`.
Назначение: Регистрация пользователей и выдача их списка.
"""

from flask import current_app, jsonify, request

from services import users as user_service


def register_routes(app):
    @app.get("/api/users")
    def list_users():
        return jsonify([user.to_dict() for user in user_service.list_users()])

    @app.post("/api/users")
    def register_user():
        """Создаёт пользователя; хеш пароля в ответ не попадает."""
        config = current_app.config
        user = user_service.register_user(
            request.get_json(silent=True),
            hash_method=config["PASSWORD_HASH_METHOD"],
            min_username_length=config["MIN_USERNAME_LENGTH"],
            min_password_length=config["MIN_PASSWORD_LENGTH"],
        )
        return jsonify(user.to_dict()), 200
