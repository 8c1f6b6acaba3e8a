"""
Модуль: `services/authorization.py`.
Назначение: Проверка прав на изменение блога и корректности данных регистрации.
"""

from models.user import User
from utils.errors import Unauthorized, ValidationError


def authorize_blog_mutation(user, blog) -> None:
    """Разрешает изменение только владельцу блога, иначе Unauthorized.

    `user` – объект из Flask-Login: анонимный, если токена нет или он не прошёл проверку.
    Блоги без владельца изменять через этот путь нельзя никому.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        raise Unauthorized("token missing or invalid")
    if blog.user_id is None or blog.user_id != user.id:
        raise Unauthorized("only the creator of the blog may modify it")


def _clean_text(value) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError("expected a string value")
    return value.strip()


def validate_registration(
    candidate: dict,
    min_username_length: int = 3,
    min_password_length: int = 3,
) -> tuple[str, str | None, str]:
    """Проверяет данные регистрации и возвращает (username, name, password).

    Длина пароля проверяется по открытому тексту до хеширования.
    """
    if not isinstance(candidate, dict):
        raise ValidationError("request body must be a JSON object")

    try:
        username = _clean_text(candidate.get("username"))
    except ValidationError:
        raise ValidationError("username must be a string", field="username")
    password = candidate.get("password")
    name = candidate.get("name")

    if not username:
        raise ValidationError("username is required", field="username")
    if len(username) < min_username_length:
        raise ValidationError(
            f"username must be at least {min_username_length} characters long",
            field="username",
        )

    if not isinstance(password, str) or not password:
        raise ValidationError("password is required", field="password")
    if len(password) < min_password_length:
        raise ValidationError(
            f"password must be at least {min_password_length} characters long",
            field="password",
        )

    if name is not None and not isinstance(name, str):
        raise ValidationError("name must be a string", field="name")

    if User.query.filter_by(username=username).first():
        raise ValidationError("username must be unique", field="username")

    return username, (name.strip() if name else None), password
