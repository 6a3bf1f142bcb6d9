"""
Тесты для Size & Index Validators и иерархии ошибок

Проверяет:
1. Границы размеров (0, отрицательные, лимит)
2. Checked индексы
3. Равенство размеров операндов
4. Consumed операнды
5. Совместимость ошибок со встроенными исключениями
"""

import pytest

from src.core.contracts import (
    ContainerError,
    ContainerIndexError,
    SizeError,
    TokenStreamError,
    validate_index,
    validate_not_consumed,
    validate_same_size,
    validate_size,
)


class TestErrorHierarchy:
    """Ошибки контейнеров ловятся и как встроенные исключения"""

    def test_size_error_is_value_error(self) -> None:
        assert issubclass(SizeError, ContainerError)
        assert issubclass(SizeError, ValueError)

    def test_index_error_is_builtin_index_error(self) -> None:
        assert issubclass(ContainerIndexError, ContainerError)
        assert issubclass(ContainerIndexError, IndexError)

    def test_token_stream_error(self) -> None:
        assert issubclass(TokenStreamError, ContainerError)
        assert issubclass(TokenStreamError, ValueError)


class TestValidateSize:
    """Тесты для validate_size"""

    def test_valid_size_returned(self) -> None:
        assert validate_size(1, limit=10) == 1
        assert validate_size(10, limit=10) == 10

    def test_zero_raises(self) -> None:
        with pytest.raises(SizeError, match="greater than zero"):
            validate_size(0, limit=10)

    def test_negative_raises(self) -> None:
        with pytest.raises(SizeError, match="greater than zero"):
            validate_size(-5, limit=10)

    def test_above_limit_raises(self) -> None:
        with pytest.raises(SizeError, match="exceeds maximum allowed 10"):
            validate_size(11, limit=10)

    def test_name_in_message(self) -> None:
        with pytest.raises(SizeError, match="Matrix size"):
            validate_size(0, limit=10, name="Matrix size")

    @pytest.mark.parametrize("value", [1.5, "3", None, True])
    def test_non_integer_raises_type_error(self, value) -> None:
        with pytest.raises(TypeError, match="must be an integer"):
            validate_size(value, limit=10)


class TestValidateIndex:
    """Тесты для validate_index"""

    def test_valid_bounds(self) -> None:
        assert validate_index(0, 4) == 0
        assert validate_index(3, 4) == 3

    def test_index_equal_to_size_raises(self) -> None:
        with pytest.raises(ContainerIndexError, match=r"Index 4 out of range \[0, 4\)"):
            validate_index(4, 4)

    def test_negative_index_raises(self) -> None:
        with pytest.raises(ContainerIndexError):
            validate_index(-1, 4)

    def test_any_index_on_empty_raises(self) -> None:
        with pytest.raises(IndexError):
            validate_index(0, 0)

    def test_non_integer_index(self) -> None:
        with pytest.raises(TypeError):
            validate_index(1.0, 4)


class TestValidateSameSize:
    """Тесты для validate_same_size"""

    def test_equal_sizes_pass(self) -> None:
        validate_same_size(3, 3)

    def test_different_sizes_raise(self) -> None:
        with pytest.raises(SizeError, match="Vectors are of different sizes: 3 != 4"):
            validate_same_size(3, 4, "Vectors")


class TestValidateNotConsumed:
    """Тесты для validate_not_consumed"""

    def test_non_empty_passes(self) -> None:
        validate_not_consumed(1)

    def test_consumed_raises(self) -> None:
        with pytest.raises(SizeError, match="Vector is consumed"):
            validate_not_consumed(0, "Vector")
