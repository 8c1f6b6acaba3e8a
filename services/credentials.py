"""
Модуль: `services/credentials.py`.
Назначение: Проверка логина/пароля и выпуск токена доступа.
"""

from flask import current_app
from werkzeug.security import check_password_hash

from models.user import User
from utils.errors import InvalidCredentials
from utils.tokens import TokenSigner


def authenticate(username, password, signer: TokenSigner) -> tuple[User, str]:
    """Возвращает пользователя и выпущенный для него токен.

    Неизвестный логин и неверный пароль неразличимы снаружи: оба дают InvalidCredentials.
    """
    if not isinstance(username, str) or not isinstance(password, str):
        raise InvalidCredentials()

    user = User.query.filter_by(username=username.strip()).first()
    if user is None or not check_password_hash(user.password_hash, password):
        current_app.logger.warning("Неудачная попытка входа для %r", username)
        raise InvalidCredentials()

    return user, signer.issue(user)
