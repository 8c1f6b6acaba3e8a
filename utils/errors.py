"""
Модуль: `utils/errors.py`.
Назначение: Типизированные ошибки API и их HTTP-статусы.

Маршруты и сервисы поднимают эти исключения, а обработчики из `app.py`
превращают их в JSON вида {"error": "..."} с соответствующим статусом.
"""


class ApiError(Exception):
    """Базовая ошибка API с сообщением для клиента и HTTP-статусом."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        return {"error": self.message}


class ValidationError(ApiError):
    """Отсутствует или некорректно обязательное поле; поле названо в сообщении."""

    status_code = 400

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class Unauthorized(ApiError):
    status_code = 401


class InvalidCredentials(Unauthorized):
    """Неверная пара логин/пароль (без уточнения, что именно не совпало)."""

    def __init__(self, message: str = "invalid username or password"):
        super().__init__(message)


class NotFound(ApiError):
    status_code = 404
