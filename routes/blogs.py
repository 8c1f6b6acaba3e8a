"""
Программа: «Bloglist» – бэкенд для хранения блогов и учётных записей пользователей.
Модуль: routes/blogs.py – REST-маршруты блогов.

Назначение модуля:
- Выдача списка блогов и отдельного блога без аутентификации.
- Создание и удаление блогов владельцем по bearer-токену.
- Изменение полей блога.
"""

from flask import jsonify, request
from flask_login import current_user, login_required

from services import blogs as blog_service


def _json_body():
    return request.get_json(silent=True)


def register_routes(app):
    @app.get("/api/blogs")
    def list_blogs():
        """Все блоги с развёрнутым владельцем."""
        return jsonify([blog.to_dict() for blog in blog_service.list_blogs()])

    @app.get("/api/blogs/<int:blog_id>")
    def get_blog(blog_id: int):
        return jsonify(blog_service.get_blog(blog_id).to_dict())

    @app.post("/api/blogs")
    @login_required
    def create_blog():
        blog = blog_service.create_blog(current_user, _json_body())
        return jsonify(blog.to_dict()), 200

    @app.put("/api/blogs/<int:blog_id>")
    def update_blog(blog_id: int):
        blog = blog_service.update_blog(blog_id, _json_body())
        return jsonify(blog.to_dict())

    @app.delete("/api/blogs/<int:blog_id>")
    @login_required
    def delete_blog(blog_id: int):
        blog_service.delete_blog(current_user, blog_id)
        return "", 204
