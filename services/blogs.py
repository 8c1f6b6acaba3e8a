"""
Программа: «Bloglist» – бэкенд для хранения блогов и учётных записей пользователей.
Модуль: services/blogs.py – жизненный цикл записей блога.

Назначение модуля:
- Чтение списка блогов и отдельного блога.
- Создание блога от имени аутентифицированного пользователя.
- Изменение полей блога и удаление блога владельцем.
"""

from flask import current_app

from extensions import db
from models.blog import Blog
from services.authorization import authorize_blog_mutation
from utils.errors import NotFound, Unauthorized, ValidationError

REQUIRED_FIELDS = ("title", "url")
# Столбец INTEGER в SQLite 64-битный
MAX_LIKES = 2**63 - 1
MUTABLE_FIELDS = ("title", "author", "url", "likes")


def _validate_likes(value) -> int:
    # bool – подкласс int, но лайками не является
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_LIKES:
        raise ValidationError("likes must be a non-negative integer", field="likes")
    return value


def _validate_fields(payload, partial: bool) -> dict:
    """Проверяет поля блога; при partial=True обязательные поля могут отсутствовать."""
    if not isinstance(payload, dict):
        raise ValidationError("request body must be a JSON object")

    fields = {}
    missing = []
    for name in REQUIRED_FIELDS:
        if name not in payload and partial:
            continue
        value = payload.get(name)
        if not isinstance(value, str) or not value.strip():
            missing.append(name)
            continue
        fields[name] = value.strip()

    if missing:
        verb = "is" if len(missing) == 1 else "are"
        raise ValidationError(f"{' and '.join(missing)} {verb} required", field=missing[0])

    if "author" in payload:
        author = payload["author"]
        if author is not None and not isinstance(author, str):
            raise ValidationError("author must be a string", field="author")
        fields["author"] = author.strip() if author else author

    if "likes" in payload and (payload["likes"] is not None or partial):
        # при изменении явный null не игнорируется молча
        fields["likes"] = _validate_likes(payload["likes"])
    elif not partial:
        fields["likes"] = 0

    return fields


def list_blogs() -> list[Blog]:
    return Blog.query.order_by(Blog.id).all()


def get_blog(blog_id: int) -> Blog:
    blog = db.session.get(Blog, blog_id)
    if blog is None:
        raise NotFound("blog not found")
    return blog


def create_blog(user, payload) -> Blog:
    """Создаёт блог; владельцем становится пользователь из токена."""
    if user is None or not getattr(user, "is_authenticated", False):
        raise Unauthorized("token missing or invalid")

    fields = _validate_fields(payload, partial=False)
    blog = Blog(user_id=user.id, **fields)
    db.session.add(blog)
    db.session.commit()

    current_app.logger.info("Пользователь %s создал блог %s", user.id, blog.id)
    return blog


def update_blog(blog_id: int, payload) -> Blog:
    """Заменяет переданные изменяемые поля блога.

    Владение здесь не проверяется, в отличие от создания и удаления.
    """
    blog = get_blog(blog_id)
    fields = _validate_fields(payload, partial=True)
    for name in MUTABLE_FIELDS:
        if name in fields:
            setattr(blog, name, fields[name])
    db.session.commit()
    return blog


def delete_blog(user, blog_id: int) -> None:
    blog = get_blog(blog_id)
    try:
        authorize_blog_mutation(user, blog)
    except Unauthorized:
        current_app.logger.warning(
            "Отказано в удалении блога %s пользователю %s",
            blog_id,
            getattr(user, "id", None),
        )
        raise

    db.session.delete(blog)
    db.session.commit()
