"""
Программа: «Bloglist» – бэкенд для хранения блогов и учётных записей пользователей.
Модуль: models/blog.py – модель записи блога.

Назначение модуля:
- Описание ORM-модели Blog (заголовок, ссылка, автор, число лайков).
- Привязка к пользователю-владельцу (может быть пустой для начальных данных).
"""

from extensions import db


class Blog(db.Model):
    """Класс `Blog` описывает сущность записи блога."""
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    author = db.Column(db.String(120), nullable=True)
    url = db.Column(db.String(2048), nullable=False)
    likes = db.Column(db.Integer, nullable=False, default=0)
    # Владелец; у блогов из начальных данных его может не быть
    user_id = db.Column(db.Integer, db.ForeignKey("user.id"), nullable=True, index=True)

    def to_summary(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "url": self.url,
            "likes": self.likes,
        }

    def to_dict(self) -> dict:
        """Внешнее представление с развёрнутой ссылкой на владельца."""
        data = self.to_summary()
        data["user"] = self.user.to_summary() if self.user is not None else None
        return data
