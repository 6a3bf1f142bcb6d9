"""
DynamicMatrix — квадратная динамическая матрица

Матрица size × size хранится как DynamicVector из size строк; каждая строка является
собственным DynamicVector длины size. Хранилище, copy/move семантика и
сравнение делегируются вектору строк; матрица добавляет только
матрично-специфичную арифметику.

Операции:
- matrix * scalar, matrix *= scalar
- matrix ± matrix (построчно), matrix ± scalar (поэлементно)
- matrix * matrix (порядок циклов i → j → k)
- matrix * vector (result[i] = row_i · v)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждая строка имеет длину size (матрица всегда квадратная)
2. Строки не разделяются между матрицами
3. Накопление произведений от dtype() в фиксированном порядке индексов
4. matrix *= scalar либо применяется ко всем строкам, либо не меняет матрицу
"""

import io
import logging
from typing import Any, Generic, Iterator, Optional, Sequence, TextIO, TypeVar

from src.core.contracts.errors import SizeError
from src.core.contracts.validators import (
    validate_not_consumed,
    validate_same_size,
    validate_size,
)
from src.core.containers.dynamic_vector import DynamicVector
from src.core.domain.limits import DEFAULT_LIMITS, ContainerLimits
from src.core.domain.ownership import OwnershipState
from src.core.io.token_stream import TokenSource, as_token_reader, convert_tokens
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    column_product,
    infer_element_type,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DynamicMatrix(Generic[T]):
    """
    Квадратная матрица над типом элемента dtype.

    Доступ к элементу: m[i][j] (unchecked) или m.at(i).at(j) (checked).

    Args:
        size: Размерность (1 <= size <= limits.max_matrix_size)
        dtype: Тип элемента (default: float)
        limits: Лимиты размеров (default: DEFAULT_LIMITS)

    Raises:
        TypeError: Если size не целое число
        SizeError: Если size == 0, отрицательный или превышает лимит
    """

    def __init__(
        self,
        size: int = 1,
        dtype: type = float,
        limits: Optional[ContainerLimits] = None,
    ):
        limits = limits or DEFAULT_LIMITS
        validate_size(size, limits.max_matrix_size, name="Matrix size")

        self._dtype = dtype
        self._rows: DynamicVector[DynamicVector[T]] = DynamicVector.from_sequence(
            [DynamicVector(size, dtype, limits) for _ in range(size)],
            limits=limits,
        )

    @classmethod
    def _wrap(cls, rows: DynamicVector, dtype: type) -> "DynamicMatrix[T]":
        matrix = cls.__new__(cls)
        matrix._dtype = dtype
        matrix._rows = rows
        return matrix

    @classmethod
    def _derive(cls, rows: DynamicVector) -> "DynamicMatrix[T]":
        """Результат операции: общий тип элементов по всем строкам."""
        dtype = infer_element_type([row.dtype() for row in rows])
        return cls._wrap(rows, dtype)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[T]],
        dtype: Optional[type] = None,
        limits: Optional[ContainerLimits] = None,
    ) -> "DynamicMatrix[T]":
        """
        Конструирование из вложенных последовательностей.

        Args:
            rows: Строки матрицы; каждая длины len(rows)
            dtype: Тип элемента (default: общий тип всех элементов)
            limits: Лимиты размеров

        Raises:
            SizeError: Если размерность недопустима или матрица не квадратная

        Examples:
            >>> DynamicMatrix.from_rows([[1, 2], [3, 4]]).to_lists()
            [[1, 2], [3, 4]]
        """
        limits = limits or DEFAULT_LIMITS
        size = validate_size(len(rows), limits.max_matrix_size, name="Matrix size")

        for i, row in enumerate(rows):
            if len(row) != size:
                raise SizeError(
                    f"Matrix must be square: row {i} has {len(row)} elements, "
                    f"expected {size}"
                )

        if dtype is None:
            dtype = infer_element_type([value for row in rows for value in row])

        store = DynamicVector.from_sequence(
            [DynamicVector.from_sequence(row, dtype=dtype, limits=limits) for row in rows],
            limits=limits,
        )
        return cls._wrap(store, dtype)

    @classmethod
    def identity(
        cls,
        size: int,
        dtype: type = float,
        limits: Optional[ContainerLimits] = None,
    ) -> "DynamicMatrix[T]":
        """Единичная матрица: dtype(1) на диагонали, dtype() вне её."""
        matrix = cls(size, dtype, limits)
        for i in range(size):
            matrix._rows[i][i] = dtype(1)
        return matrix

    # =========================================================================
    # СВОЙСТВА
    # =========================================================================

    @property
    def size(self) -> int:
        """Размерность матрицы (0 в consumed состоянии)."""
        return self._rows.size

    @property
    def dtype(self) -> type:
        return self._dtype

    @property
    def limits(self) -> ContainerLimits:
        return self._rows.limits

    @property
    def is_consumed(self) -> bool:
        return self._rows.is_consumed

    @property
    def state(self) -> OwnershipState:
        return self._rows.state

    def __len__(self) -> int:
        return self._rows.size

    def __iter__(self) -> Iterator[DynamicVector[T]]:
        return iter(self._rows)

    def to_lists(self) -> list[list]:
        return [row.to_list() for row in self._rows]

    # =========================================================================
    # COPY / MOVE
    # =========================================================================

    def copy(self) -> "DynamicMatrix[T]":
        """Глубокая копия: каждая строка копируется в новое хранилище."""
        return self._wrap(self._rows.copy(), self._dtype)

    def __copy__(self) -> "DynamicMatrix[T]":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "DynamicMatrix[T]":
        return self.copy()

    def move(self) -> "DynamicMatrix[T]":
        """Передача владения строками новой матрице; источник consumed."""
        moved = self._wrap(self._rows.move(), self._dtype)
        logger.debug("Moved matrix of size %d, source consumed", moved.size)
        return moved

    def assign(self, other: "DynamicMatrix[T]") -> "DynamicMatrix[T]":
        """Copy-присваивание; самоприсваивание: no-op."""
        if other is self:
            return self
        self._rows.assign(other._rows)
        self._dtype = other._dtype
        return self

    def assign_move(self, other: "DynamicMatrix[T]") -> "DynamicMatrix[T]":
        """Move-присваивание; самоперемещение: no-op, источник consumed."""
        if other is self:
            return self
        self._rows.assign_move(other._rows)
        self._dtype = other._dtype
        return self

    def swap(self, other: "DynamicMatrix[T]") -> None:
        self._rows.swap(other._rows)
        self._dtype, other._dtype = other._dtype, self._dtype

    # =========================================================================
    # ДОСТУП
    # =========================================================================

    def __getitem__(self, index: int) -> DynamicVector[T]:
        """Unchecked доступ к строке (предусловие: 0 <= index < size)."""
        return self._rows[index]

    def at(self, index: int) -> DynamicVector[T]:
        """
        Checked доступ к строке.

        Raises:
            ContainerIndexError: Если index < 0 или index >= size
        """
        return self._rows.at(index)

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicMatrix):
            return NotImplemented
        return self._rows == other._rows

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def approx_equals(
        self,
        other: "DynamicMatrix[T]",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        return self._rows.approx_equals(other._rows, rel_tol=rel_tol, abs_tol=abs_tol)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def _check_operand(self, other: "DynamicMatrix[T]") -> None:
        validate_not_consumed(self.size, "Matrix")
        validate_not_consumed(other.size, "Matrix operand")
        validate_same_size(self.size, other.size, "Matrices")

    def __add__(self, other: Any) -> "DynamicMatrix[T]":
        """m + n: построчная сумма; m + scalar: scalar прибавляется к каждому элементу."""
        if isinstance(other, DynamicMatrix):
            self._check_operand(other)
            return self._derive(self._rows + other._rows)
        if isinstance(other, DynamicVector):
            return NotImplemented

        validate_not_consumed(self.size, "Matrix")
        return self._derive(self._rows + other)

    def __sub__(self, other: Any) -> "DynamicMatrix[T]":
        """m - n: построчная разность; m - scalar: scalar вычитается из каждого элемента."""
        if isinstance(other, DynamicMatrix):
            self._check_operand(other)
            return self._derive(self._rows - other._rows)
        if isinstance(other, DynamicVector):
            return NotImplemented

        validate_not_consumed(self.size, "Matrix")
        return self._derive(self._rows - other)

    def __mul__(self, other: Any) -> Any:
        """
        m * n: матричное произведение; m * v: вектор; m * scalar: матрица.

        Raises:
            SizeError: Если размерности несовместимы или операнд consumed
        """
        if isinstance(other, DynamicMatrix):
            return self._multiply_matrix(other)
        if isinstance(other, DynamicVector):
            return self._multiply_vector(other)

        validate_not_consumed(self.size, "Matrix")
        return self._derive(self._rows * other)

    def __imul__(self, other: Any) -> "DynamicMatrix[T]":
        """
        m *= scalar: умножение на месте.

        Все строки сначала вычисляются во временное хранилище и только затем
        подменяют текущие: если умножение элемента падает на любой строке,
        матрица остаётся неизменной.
        """
        if isinstance(other, (DynamicMatrix, DynamicVector)):
            return NotImplemented

        validate_not_consumed(self.size, "Matrix")
        scaled = self._derive(self._rows * other)
        self._rows.assign_move(scaled._rows)
        self._dtype = scaled._dtype
        return self

    def _multiply_matrix(self, other: "DynamicMatrix[T]") -> "DynamicMatrix[T]":
        """
        result[i][j] = Σ_k self[i][k] * other[k][j]

        Порядок обхода фиксирован: строка i, затем столбец j, затем k.
        """
        self._check_operand(other)

        n = self.size
        zero = self._dtype()
        rows = self._rows
        other_rows = other._rows
        values = []

        for i in range(n):
            row = rows[i]
            values.append(
                [column_product(row, lambda k: other_rows[k][j], zero) for j in range(n)]
            )

        return self.from_rows(values, limits=self.limits)

    def _multiply_vector(self, vector: DynamicVector[T]) -> DynamicVector[T]:
        """result[i] = Σ_j self[i][j] * vector[j]"""
        validate_not_consumed(self.size, "Matrix")
        validate_not_consumed(vector.size, "Vector operand")
        validate_same_size(self.size, vector.size, "Matrix and vector")

        return DynamicVector.from_sequence(
            [self._rows[i] * vector for i in range(self.size)],
            limits=self.limits,
        )

    # =========================================================================
    # ВВОД / ВЫВОД
    # =========================================================================

    def read(self, source: TokenSource) -> "DynamicMatrix[T]":
        """
        Заполнение строк по порядку из плоского потока токенов.

        Читается ровно size * size токенов; при ошибке матрица не изменяется.

        Raises:
            TokenStreamError: Поток исчерпан или токен невалиден
        """
        reader = as_token_reader(source)
        n = self.size
        values = convert_tokens(reader.take(n * n), self._dtype)

        for i in range(n):
            row = self._rows[i]
            for j in range(n):
                row[j] = values[i * n + j]
        return self

    def write(self, stream: TextIO) -> None:
        """Одна строка матрицы на строку вывода."""
        for row in self._rows:
            row.write(stream)
            stream.write("\n")

    def __str__(self) -> str:
        buffer = io.StringIO()
        self.write(buffer)
        return buffer.getvalue()

    def __repr__(self) -> str:
        dtype_name = getattr(self._dtype, "__name__", repr(self._dtype))
        return f"{type(self).__name__}({self.to_lists()!r}, dtype={dtype_name})"
