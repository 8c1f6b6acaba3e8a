"""
Модуль: `utils/tokens.py`.
Назначение: Выпуск и проверка подписанных токенов доступа (JWT).

Экземпляр TokenSigner создаётся один раз в фабрике приложения и хранится
в `app.extensions["token_signer"]`; секрет после старта не меняется.
"""

from datetime import datetime, timedelta, timezone

import jwt

from utils.errors import Unauthorized


class TokenSigner:
    """Подписывает и проверяет токены с полями {username, id, exp}."""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl_seconds: int = 3600):
        if not secret:
            raise ValueError("token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(seconds=ttl_seconds)

    def issue(self, user) -> str:
        """Выпускает токен только с публичными полями пользователя."""
        payload = {
            "username": user.username,
            "id": user.id,
            "exp": datetime.now(timezone.utc) + self._ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str | None) -> dict:
        if not token:
            raise Unauthorized("token missing or invalid")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise Unauthorized("token expired")
        except jwt.InvalidTokenError:
            raise Unauthorized("token missing or invalid")

        if not isinstance(payload.get("id"), int) or not payload.get("username"):
            raise Unauthorized("token missing or invalid")
        return payload


def extract_bearer_token(header_value: str | None) -> str | None:
    """Достаёт токен из заголовка `Authorization: Bearer <token>`."""
    if not header_value:
        return None
    scheme, _, token = header_value.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None
