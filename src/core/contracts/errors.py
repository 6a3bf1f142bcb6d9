"""
Container Errors — иерархия исключений контейнеров

Все ошибки сообщаются синхронно вызывающему коду, без подавления и повторов.
Ошибка прерывает только операцию, которая её вызвала: проверки выполняются
до любой аллокации или мутации.

Иерархия:
- ContainerError           : базовый класс
- SizeError                : недопустимый размер, несовпадение размеров,
                             consumed операнд
- ContainerIndexError      : checked доступ вне [0, size)
- TokenStreamError         : нехватка токенов или ошибка конверсии при чтении
"""


class ContainerError(Exception):
    """Базовое исключение для DynamicVector / DynamicMatrix."""

    pass


class SizeError(ContainerError, ValueError):
    """
    Недопустимый размер контейнера.

    Возникает, если:
    1. Запрошенный размер равен 0 или отрицательный
    2. Размер превышает сконфигурированный максимум (ContainerLimits)
    3. Размеры операндов не совпадают там, где требуется равенство
    4. Операнд находится в consumed состоянии (после move)
    """

    pass


class ContainerIndexError(ContainerError, IndexError):
    """Checked доступ (at/set_at) с индексом вне [0, size)."""

    pass


class TokenStreamError(ContainerError, ValueError):
    """Поток токенов исчерпан или токен не конвертируется в тип элемента."""

    pass
