"""
Модуль: `utils/list_helper.py`.
Назначение: Сводная статистика по коллекции блогов.

Функции чистые и тотальные: не обращаются к БД, не бросают исключений
на пустом входе и возвращают {} как признак «нет данных».
При равенстве максимумов побеждает первый по порядку входа элемент.
Автор используется как непрозрачный ключ группировки без нормализации.
Принимаются как словари (вывод `to_dict()`), так и ORM-объекты.
"""


def _field(blog, name: str, default=None):
    if isinstance(blog, dict):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog) -> int:
    return _field(blog, "likes") or 0


def _first_max(pairs):
    """Первая пара (ключ, значение) с максимальным значением."""
    best = None
    for key, value in pairs:
        # строгое сравнение сохраняет первого из равных
        if best is None or value > best[1]:
            best = (key, value)
    return best


def total_likes(blogs) -> int:
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs):
    """Блог с наибольшим числом лайков или {} для пустой коллекции."""
    best = _first_max((blog, _likes(blog)) for blog in blogs)
    if best is None:
        return {}
    return best[0]


def most_blogs(blogs) -> dict:
    """Автор с наибольшим числом блогов: {"author", "blogs"}."""
    counts: dict = {}
    for blog in blogs:
        author = _field(blog, "author")
        counts[author] = counts.get(author, 0) + 1

    best = _first_max(counts.items())
    if best is None:
        return {}
    return {"author": best[0], "blogs": best[1]}


def most_likes(blogs) -> dict:
    """Автор с наибольшей суммой лайков: {"author", "likes"}."""
    sums: dict = {}
    for blog in blogs:
        author = _field(blog, "author")
        sums[author] = sums.get(author, 0) + _likes(blog)

    best = _first_max(sums.items())
    if best is None:
        return {}
    return {"author": best[0], "likes": best[1]}
