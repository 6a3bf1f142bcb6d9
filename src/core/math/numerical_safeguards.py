"""
Numerical Safeguards — сравнения и накопление для элементов контейнеров

Модуль обеспечивает:
- Epsilon-сравнения с учётом машинной точности (float/complex)
- Точное сравнение для остальных типов элементов (int, Fraction, Decimal)
- Детерминированное накопление суммы произведений в порядке индексов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Накопление начинается с нулевого значения типа элемента (dtype())
2. Порядок накопления фиксирован: индексы 0..n-1
3. Результат воспроизводим для неассоциативных типов (float rounding)
"""

import cmath
import math
from numbers import Complex, Real
from typing import Any, Callable, Final, Sequence

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для approx сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для approx сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: Any,
    b: Any,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение элементов с учётом машинной точности.

    Алгоритм:
        - float и прочие Real: math.isclose
        - complex: cmath.isclose
        - остальные типы: точное равенство a == b

    int/Fraction тоже Real, но для них isclose совпадает с точным
    равенством при abs_tol близком к нулю.

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1, 2)
        False
        >>> is_close(1 + 1j, 1 + 1.0000000000001j)
        True
    """
    if isinstance(a, Real) and isinstance(b, Real):
        return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)

    if isinstance(a, Complex) and isinstance(b, Complex):
        return cmath.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)

    return a == b


# =============================================================================
# НАКОПЛЕНИЕ
# =============================================================================


def sum_of_products(
    left: Sequence[Any],
    right: Sequence[Any],
    zero: Any,
) -> Any:
    """
    Сумма попарных произведений: Σ left[i] * right[i].

    Накопление стартует с zero (аддитивный нейтральный элемент типа) и
    идёт строго по индексам 0..n-1 через acc = acc + a * b. Аккумулятор
    не расширяется и не насыщается.

    Args:
        left: Левая последовательность
        right: Правая последовательность (та же длина)
        zero: Нулевое значение типа элемента

    Returns:
        Сумма произведений в типе элемента

    Examples:
        >>> sum_of_products([1, 2, 3], [4, 5, 6], 0)
        32
    """
    acc = zero
    for i in range(len(left)):
        acc = acc + left[i] * right[i]
    return acc


def column_product(
    row: Sequence[Any],
    column_at: Callable[[int], Any],
    zero: Any,
) -> Any:
    """
    Σ row[k] * column_at(k) для k = 0..n-1.

    Используется в матричном умножении, где столбец правого операнда
    не хранится непрерывно и читается через accessor.
    """
    acc = zero
    for k in range(len(row)):
        acc = acc + row[k] * column_at(k)
    return acc


# =============================================================================
# ТИП ЭЛЕМЕНТОВ
# =============================================================================


def infer_element_type(values: Sequence[Any]) -> type:
    """
    Общий тип элементов последовательности.

    Стартует с типа первого элемента; при встрече элемента другого типа
    тип расширяется по правилам арифметики Python: type(result_type() + value).
    Так int и float дают float, int и Fraction дают Fraction, float и
    complex дают complex.

    Args:
        values: Непустая последовательность элементов

    Returns:
        Тип, в который без потерь конвертируется текстовое представление
        каждого элемента

    Raises:
        TypeError: Если типы элементов не складываются (например, Decimal и float)

    Examples:
        >>> infer_element_type([1, 2, 3])
        <class 'int'>
        >>> infer_element_type([1, 2.5, 3])
        <class 'float'>
    """
    result_type = type(values[0])
    for value in values[1:]:
        if type(value) is result_type:
            continue
        try:
            result_type = type(result_type() + value)
        except TypeError as e:
            raise TypeError(
                f"Incompatible element types: {result_type.__name__} and "
                f"{type(value).__name__}"
            ) from e
    return result_type
