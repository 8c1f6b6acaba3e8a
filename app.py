"""
Программа: «Bloglist» – бэкенд для хранения блогов и учётных записей пользователей.
Модуль: app.py – фабрика приложения Flask.

Назначение модуля:
- Инициализация расширений (БД, Flask-Login, CORS) и подписчика токенов.
- Регистрация маршрутов API и единых JSON-обработчиков ошибок.
- Журналирование запросов и служебные заголовки ответа.
"""

import os
from collections.abc import Mapping

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from config import Config
from extensions import db, login_manager, cors
import models  # noqa: F401 - регистрирует модели для db.create_all()
from routes.blogs import register_routes as register_blog_routes
from routes.users import register_routes as register_user_routes
from routes.login import register_routes as register_login_routes
from utils.errors import ApiError
from utils.tokens import TokenSigner

HTTP_ERROR_MESSAGES = {
    404: "unknown endpoint",
    405: "method not allowed",
}


def create_app(overrides: Mapping | None = None) -> Flask:
    """Фабрика приложения, собирающая все модули воедино."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Инициализация расширений
    db.init_app(app)
    login_manager.init_app(app)

    if app.config["CORS_ENABLED"]:
        cors.init_app(
            app,
            resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        )

    # Секрет подписи читается один раз и дальше не меняется
    app.extensions["token_signer"] = TokenSigner(
        app.config["SECRET_KEY"],
        algorithm=app.config["JWT_ALGORITHM"],
        ttl_seconds=app.config["TOKEN_TTL_SECONDS"],
    )

    # Регистрация роутов по модулям
    register_blog_routes(app)
    register_user_routes(app)
    register_login_routes(app)

    with app.app_context():
        # Создаем отсутствующие таблицы (без изменения существующих колонок)
        db.create_all()

    @login_manager.unauthorized_handler
    def handle_unauthorized():
        """Ответ для защищённых маршрутов без корректного bearer-токена."""
        current_app.logger.warning("Запрос без действительного токена: %s %s", request.method, request.path)
        return jsonify({"error": "token missing or invalid"}), 401

    @app.errorhandler(ApiError)
    def handle_api_error(exc: ApiError):
        return jsonify(exc.to_response()), exc.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        message = HTTP_ERROR_MESSAGES.get(exc.code) or (exc.description or exc.name)
        return jsonify({"error": message}), exc.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc: Exception):
        """Непредвиденные сбои: откат сессии и 500 без внутренних подробностей."""
        db.session.rollback()
        app.logger.exception("Необработанная ошибка на %s %s", request.method, request.path)
        return jsonify({"error": "internal server error"}), 500

    @app.after_request
    def log_request(response):
        # Тело не пишем: в нём бывают пароли
        app.logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    @app.after_request
    def apply_security_headers(response):
        """Выполняет операцию `apply_security_headers` в рамках сценария модуля."""
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        return response

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}, 200

    return app


app = create_app()


if __name__ == "__main__":
    is_production = os.environ.get("FLASK_ENV", "").lower() == "production"
    app.run(debug=not is_production)
