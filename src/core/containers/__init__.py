"""
Containers — DynamicVector и DynamicMatrix

Value-семантика, bounds-checked доступ, поэлементная и линейно-алгебраическая
арифметика.
"""

from src.core.containers.dynamic_matrix import DynamicMatrix
from src.core.containers.dynamic_vector import DynamicVector, swap

__all__ = [
    "DynamicVector",
    "DynamicMatrix",
    "swap",
]
