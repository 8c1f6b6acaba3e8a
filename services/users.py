"""
Модуль: `services/users.py`.
Назначение: Регистрация пользователей и выдача их списка.
"""

from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash

from extensions import db
from models.user import User
from services.authorization import validate_registration
from utils.errors import ValidationError


def list_users() -> list[User]:
    return User.query.order_by(User.id).all()


def register_user(
    candidate,
    hash_method: str = "scrypt",
    min_username_length: int = 3,
    min_password_length: int = 3,
) -> User:
    """Проверяет данные, хеширует пароль и сохраняет нового пользователя."""
    username, name, password = validate_registration(
        candidate,
        min_username_length=min_username_length,
        min_password_length=min_password_length,
    )

    user = User(
        username=username,
        name=name,
        password_hash=generate_password_hash(password, method=hash_method),
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        # параллельная регистрация успела занять тот же логин
        db.session.rollback()
        raise ValidationError("username must be unique", field="username")
    return user
