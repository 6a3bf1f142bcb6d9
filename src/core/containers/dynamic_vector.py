"""
DynamicVector — динамический вектор с value-семантикой

Одномерный контейнер фиксированного размера над generic числовым типом
элемента. Владеет собственным хранилищем, копируется глубоко, перемещается
с передачей владения.

Модуль обеспечивает:
- Конструирование по размеру (zero-fill значением dtype()) и из источника
- Copy / move семантику с явным consumed состоянием после move
- Unchecked ([]) и checked (at/set_at) доступ
- Скалярные операции, поэлементные +/- и скалярное произведение
- Чтение/запись через whitespace-разделённый поток токенов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. size >= 1 после успешного конструирования
2. size == 0 только в consumed состоянии (после move)
3. Копия не разделяет хранилище с источником
4. Все проверки выполняются до мутации (strong failure safety)
5. Скалярное произведение накапливается от dtype() в порядке индексов 0..n-1
"""

import itertools
import logging
from typing import Any, Generic, Iterable, Iterator, Optional, TextIO, TypeVar

from src.core.contracts.errors import SizeError
from src.core.contracts.validators import (
    validate_index,
    validate_not_consumed,
    validate_same_size,
    validate_size,
)
from src.core.domain.limits import DEFAULT_LIMITS, ContainerLimits
from src.core.domain.ownership import OwnershipState
from src.core.io.token_stream import TokenSource, as_token_reader, convert_tokens
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    infer_element_type,
    is_close,
    sum_of_products,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DynamicVector(Generic[T]):
    """
    Динамический вектор над типом элемента dtype.

    Нулевое значение типа: dtype() (0 для int, 0.0 для float, Fraction(0)...).
    Элементы хранятся в собственном list, который никогда не разделяется
    с другим контейнером.

    Args:
        size: Длина вектора (1 <= size <= limits.max_vector_size)
        dtype: Тип элемента (default: float)
        limits: Лимиты размеров (default: DEFAULT_LIMITS)

    Raises:
        TypeError: Если size не целое число
        SizeError: Если size == 0, отрицательный или превышает лимит

    Examples:
        >>> v = DynamicVector(3, dtype=int)
        >>> v[0] = 1
        >>> str(v)
        '1 0 0'
    """

    def __init__(
        self,
        size: int = 1,
        dtype: type = float,
        limits: Optional[ContainerLimits] = None,
    ):
        self._limits = limits or DEFAULT_LIMITS
        validate_size(size, self._limits.max_vector_size, name="Vector size")

        self._dtype = dtype
        self._size = size
        # Нулевые значения числовых типов immutable, разделять их безопасно
        self._mem: list = [dtype()] * size

    # =========================================================================
    # АЛЬТЕРНАТИВНЫЕ КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def _from_storage(
        cls,
        mem: list,
        dtype: type,
        limits: ContainerLimits,
    ) -> "DynamicVector[T]":
        """Обёртка над уже провалидированным хранилищем (без копирования)."""
        vector = cls.__new__(cls)
        vector._limits = limits
        vector._dtype = dtype
        vector._size = len(mem)
        vector._mem = mem
        return vector

    @classmethod
    def from_sequence(
        cls,
        values: Iterable[T],
        size: Optional[int] = None,
        dtype: Optional[type] = None,
        limits: Optional[ContainerLimits] = None,
    ) -> "DynamicVector[T]":
        """
        Конструирование копированием первых size элементов источника.

        Из источника читается не больше size элементов, поэтому допустимы
        и бесконечные итераторы.

        Args:
            values: Источник элементов
            size: Количество копируемых элементов (default: len(values))
            dtype: Тип элемента (default: общий тип элементов, см. infer_element_type)
            limits: Лимиты размеров (default: DEFAULT_LIMITS)

        Returns:
            Новый вектор длины size

        Raises:
            SizeError: Если size недопустим или источник короче size

        Examples:
            >>> DynamicVector.from_sequence([1, 2, 3]).to_list()
            [1, 2, 3]
            >>> DynamicVector.from_sequence([1, 2, 3], size=2).to_list()
            [1, 2]
        """
        limits = limits or DEFAULT_LIMITS

        if size is None:
            items = list(values)
            size = len(items)
            validate_size(size, limits.max_vector_size, name="Vector size")
        else:
            validate_size(size, limits.max_vector_size, name="Vector size")
            items = list(itertools.islice(values, size))

        if len(items) < size:
            raise SizeError(
                f"Source holds {len(items)} elements, {size} required"
            )

        if dtype is None:
            dtype = infer_element_type(items)

        return cls._from_storage(items, dtype, limits)

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def size(self) -> int:
        """Количество элементов (0 в consumed состоянии)."""
        return self._size

    @property
    def dtype(self) -> type:
        return self._dtype

    @property
    def limits(self) -> ContainerLimits:
        return self._limits

    @property
    def is_consumed(self) -> bool:
        """True, если вектор был перемещён и больше не владеет памятью."""
        return self._size == 0

    @property
    def state(self) -> OwnershipState:
        return OwnershipState.CONSUMED if self.is_consumed else OwnershipState.OWNING

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        return iter(self._mem)

    def to_list(self) -> list:
        """Копия элементов в виде list."""
        return list(self._mem)

    # =========================================================================
    # COPY / MOVE
    # =========================================================================

    def _is_nested(self) -> bool:
        # Строки матрицы сами являются векторами, копируются глубоко
        return isinstance(self._dtype, type) and issubclass(self._dtype, DynamicVector)

    def _copy_storage(self) -> list:
        if self._is_nested():
            return [element.copy() for element in self._mem]
        return list(self._mem)

    def _release(self) -> None:
        self._mem = []
        self._size = 0

    def copy(self) -> "DynamicVector[T]":
        """
        Глубокая копия: новый вектор с собственным хранилищем.

        Мутации копии не видны источнику и наоборот.
        """
        return self._from_storage(self._copy_storage(), self._dtype, self._limits)

    def __copy__(self) -> "DynamicVector[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "DynamicVector[T]":
        return self.copy()

    def move(self) -> "DynamicVector[T]":
        """
        Move-конструирование: передача владения хранилищем новому вектору.

        Источник переходит в consumed состояние (size == 0, пустое хранилище).
        Элементы не копируются.

        Returns:
            Новый вектор, владеющий хранилищем источника
        """
        moved = self._from_storage(self._mem, self._dtype, self._limits)
        self._release()
        logger.debug("Moved vector of size %d, source consumed", moved._size)
        return moved

    def assign(self, other: "DynamicVector[T]") -> "DynamicVector[T]":
        """
        Copy-присваивание.

        Самоприсваивание: no-op. Размер получателя может измениться;
        присваивание consumed вектора делает получатель consumed.

        Returns:
            self
        """
        if other is self:
            return self

        self._mem = other._copy_storage()
        self._size = other._size
        self._dtype = other._dtype
        self._limits = other._limits
        return self

    def assign_move(self, other: "DynamicVector[T]") -> "DynamicVector[T]":
        """
        Move-присваивание.

        Самоперемещение: no-op. Иначе получатель освобождает своё хранилище,
        забирает хранилище источника, источник переходит в consumed.

        Returns:
            self
        """
        if other is self:
            return self

        self._mem = other._mem
        self._size = other._size
        self._dtype = other._dtype
        self._limits = other._limits
        other._release()
        logger.debug("Move-assigned vector of size %d, source consumed", self._size)
        return self

    def swap(self, other: "DynamicVector[T]") -> None:
        """Обмен хранилищем и размером за O(1), без копирования элементов."""
        self._mem, other._mem = other._mem, self._mem
        self._size, other._size = other._size, self._size
        self._dtype, other._dtype = other._dtype, self._dtype
        self._limits, other._limits = other._limits, self._limits
        logger.debug("Swapped vectors of sizes %d and %d", other._size, self._size)

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def __getitem__(self, index: int) -> T:
        """
        Unchecked доступ.

        Предусловие: 0 <= index < size. Нарушение не проверяется
        (отрицательные индексы адресуют элементы с конца, как в list).
        """
        return self._mem[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._mem[index] = value

    def at(self, index: int) -> T:
        """
        Checked доступ.

        Raises:
            TypeError: Если index не целое число
            ContainerIndexError: Если index < 0 или index >= size
        """
        validate_index(index, self._size)
        return self._mem[index]

    def set_at(self, index: int, value: T) -> None:
        """
        Checked запись.

        Raises:
            TypeError: Если index не целое число
            ContainerIndexError: Если index < 0 или index >= size
        """
        validate_index(index, self._size)
        self._mem[index] = value

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        if self._size != other._size:
            return False
        for i in range(self._size):
            if not (self._mem[i] == other._mem[i]):
                return False
        return True

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Мутабельный контейнер
    __hash__ = None  # type: ignore[assignment]

    def approx_equals(
        self,
        other: "DynamicVector[T]",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """
        Сравнение с толерантностью для floating типов элементов.

        Размеры должны совпадать; вложенные векторы (строки матрицы)
        сравниваются рекурсивно.
        """
        if self._size != other._size:
            return False
        for i in range(self._size):
            a, b = self._mem[i], other._mem[i]
            if isinstance(a, DynamicVector):
                if not a.approx_equals(b, rel_tol=rel_tol, abs_tol=abs_tol):
                    return False
            elif not is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol):
                return False
        return True

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _derive(self, mem: list) -> "DynamicVector[T]":
        """Результат операции: тип элемента расширяется по фактическим значениям."""
        return self._from_storage(mem, infer_element_type(mem), self._limits)

    def _check_operand(self, other: "DynamicVector[T]") -> None:
        validate_not_consumed(self._size, "Vector")
        validate_not_consumed(other._size, "Vector operand")
        validate_same_size(self._size, other._size, "Vectors")

    def __add__(self, other: Any) -> "DynamicVector[T]":
        """v + w (поэлементно) или v + scalar."""
        if isinstance(other, DynamicVector):
            self._check_operand(other)
            return self._derive([a + b for a, b in zip(self._mem, other._mem)])

        validate_not_consumed(self._size, "Vector")
        return self._derive([a + other for a in self._mem])

    def __sub__(self, other: Any) -> "DynamicVector[T]":
        """v - w (поэлементно) или v - scalar."""
        if isinstance(other, DynamicVector):
            self._check_operand(other)
            return self._derive([a - b for a, b in zip(self._mem, other._mem)])

        validate_not_consumed(self._size, "Vector")
        return self._derive([a - other for a in self._mem])

    def __mul__(self, other: Any) -> Any:
        """
        v * w: скалярное произведение; v * scalar: новый вектор.

        Скалярное произведение:
            Σ self[i] * other[i], накопление от dtype() по i = 0..n-1

        Raises:
            SizeError: Если размеры различаются или операнд consumed

        Examples:
            >>> a = DynamicVector.from_sequence([1, 2, 3])
            >>> b = DynamicVector.from_sequence([4, 5, 6])
            >>> a * b
            32
        """
        if isinstance(other, DynamicVector):
            self._check_operand(other)
            return sum_of_products(self._mem, other._mem, self._dtype())

        validate_not_consumed(self._size, "Vector")
        return self._derive([a * other for a in self._mem])

    # =========================================================================
    # ВВОД / ВЫВОД
    # =========================================================================

    def read(self, source: TokenSource) -> "DynamicVector[T]":
        """
        Заполнение элементов в порядке индексов из потока токенов.

        Каждый токен конвертируется через dtype(token). Если токенов не
        хватает или токен не конвертируется, вектор не изменяется.

        Args:
            source: Строка, текстовый поток или общий TokenReader

        Returns:
            self

        Raises:
            TokenStreamError: Поток исчерпан или токен невалиден
        """
        reader = as_token_reader(source)
        values = convert_tokens(reader.take(self._size), self._dtype)
        self._mem[:] = values
        return self

    def write(self, stream: TextIO) -> None:
        """Запись элементов в порядке индексов через один пробел."""
        stream.write(str(self))

    def __str__(self) -> str:
        return " ".join(str(element) for element in self._mem)

    def __repr__(self) -> str:
        dtype_name = getattr(self._dtype, "__name__", repr(self._dtype))
        return f"{type(self).__name__}({self._mem!r}, dtype={dtype_name})"


def swap(lhs: DynamicVector, rhs: DynamicVector) -> None:
    """Обмен содержимым двух векторов за O(1)."""
    lhs.swap(rhs)
