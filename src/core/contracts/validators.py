"""
Size & Index Validators

Проверки контрактов контейнеров. Каждая проверка выполняется ДО аллокации
или мутации, поэтому неуспешная операция не оставляет побочных эффектов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. 1 <= size <= limit для любого создаваемого контейнера
2. 0 <= index < size для checked доступа
3. Операции над двумя контейнерами требуют равных размеров
4. Consumed контейнер (size == 0) не участвует в арифметике
"""

import logging
from typing import Any

from .errors import ContainerIndexError, SizeError

logger = logging.getLogger(__name__)


def _require_int(value: Any, name: str) -> int:
    """
    Проверка, что значение является целым числом (bool отвергается).

    Raises:
        TypeError: Если value не int
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def validate_size(size: Any, limit: int, name: str = "size") -> int:
    """
    Валидация запрошенного размера контейнера.

    Args:
        size: Запрошенный размер
        limit: Максимально допустимый размер (включительно)
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        size как int

    Raises:
        TypeError: Если size не целое число
        SizeError: Если size <= 0 или size > limit

    Examples:
        >>> validate_size(5, limit=10)
        5
        >>> validate_size(0, limit=10)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        SizeError: size should be greater than zero, got 0
    """
    _require_int(size, name)

    if size <= 0:
        logger.debug("Rejected %s=%d: not positive", name, size)
        raise SizeError(f"{name} should be greater than zero, got {size}")

    if size > limit:
        logger.debug("Rejected %s=%d: exceeds limit %d", name, size, limit)
        raise SizeError(f"{name} {size} exceeds maximum allowed {limit}")

    return size


def validate_index(index: Any, size: int) -> int:
    """
    Валидация индекса для checked доступа.

    Отрицательные индексы отвергаются (в отличие от list), так как
    индекс контейнера является неотрицательным смещением.

    Raises:
        TypeError: Если index не целое число
        ContainerIndexError: Если index < 0 или index >= size
    """
    _require_int(index, "index")

    if index < 0 or index >= size:
        raise ContainerIndexError(f"Index {index} out of range [0, {size})")

    return index


def validate_same_size(left_size: int, right_size: int, what: str = "Operands") -> None:
    """
    Валидация равенства размеров двух операндов.

    Args:
        left_size: Размер левого операнда
        right_size: Размер правого операнда
        what: Описание операндов для сообщения (например, 'Vectors')

    Raises:
        SizeError: Если размеры различаются
    """
    if left_size != right_size:
        raise SizeError(f"{what} are of different sizes: {left_size} != {right_size}")


def validate_not_consumed(size: int, what: str = "Container") -> None:
    """
    Валидация, что контейнер не находится в consumed состоянии.

    Consumed контейнер (после move) имеет size == 0 и не владеет памятью;
    арифметика над ним запрещена.

    Raises:
        SizeError: Если size == 0
    """
    if size == 0:
        raise SizeError(f"{what} is consumed (moved-from) and holds no elements")
