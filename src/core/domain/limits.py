"""
ContainerLimits — Лимиты размеров контейнеров

Immutable Pydantic модель с максимальной ёмкостью вектора и максимальной
размерностью матрицы. Лимиты отсекают патологические запросы на аллокацию
на этапе конструирования.

Значения по умолчанию соответствуют MAX_VECTOR_SIZE / MAX_MATRIX_SIZE.
"""

from typing import Final

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# LIMIT CONSTANTS
# =============================================================================

# Максимальная ёмкость вектора (элементов)
MAX_VECTOR_SIZE: Final[int] = 100_000_000

# Максимальная размерность квадратной матрицы (size × size)
MAX_MATRIX_SIZE: Final[int] = 10_000


# =============================================================================
# LIMITS MODEL
# =============================================================================


class ContainerLimits(BaseModel):
    """
    Лимиты размеров для DynamicVector и DynamicMatrix.

    Immutable модель (frozen=True): экземпляр разделяется между контейнером
    и всеми результатами операций над ним.
    """

    max_vector_size: int = Field(
        MAX_VECTOR_SIZE, gt=0, description="Максимальная длина вектора"
    )
    max_matrix_size: int = Field(
        MAX_MATRIX_SIZE, gt=0, description="Максимальная размерность матрицы"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_matrix_fits_vector(self) -> "ContainerLimits":
        """
        Строка матрицы является вектором длины size, поэтому размерность матрицы
        не может превышать ёмкость вектора.
        """
        if self.max_matrix_size > self.max_vector_size:
            raise ValueError(
                f"max_matrix_size {self.max_matrix_size} exceeds "
                f"max_vector_size {self.max_vector_size}"
            )
        return self


# Экземпляр по умолчанию
DEFAULT_LIMITS: Final[ContainerLimits] = ContainerLimits()
