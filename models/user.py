"""
Программа: «Bloglist» – бэкенд для хранения блогов и учётных записей пользователей.
Модуль: models/user.py – модель пользователя системы.

Назначение модуля:
- Описание ORM-модели User для работы с таблицей пользователей в базе данных.
- Хранение учётных записей (логин, имя, хеш пароля) и связи с блогами владельца.
- Внешнее представление пользователя без хеша пароля.
"""

from flask_login import UserMixin
from extensions import db


class User(UserMixin, db.Model):
    """Учётная запись автора блогов."""
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    name = db.Column(db.String(120), nullable=True)
    password_hash = db.Column(db.String(200), nullable=False)
    blogs = db.relationship("Blog", backref="user", lazy=True, order_by="Blog.id")

    def to_summary(self) -> dict:
        """Краткая форма для вложения в запись блога."""
        return {"id": self.id, "username": self.username, "name": self.name}

    def to_dict(self) -> dict:
        # password_hash наружу не отдаётся никогда
        return {
            "id": self.id,
            "username": self.username,
            "name": self.name,
            "blogs": [blog.to_summary() for blog in self.blogs],
        }
