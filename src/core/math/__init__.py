"""
Core math modules

Сравнения с учётом точности и детерминированное накопление произведений.
"""

from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    column_product,
    infer_element_type,
    is_close,
    sum_of_products,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Comparisons
    "is_close",
    # Accumulation
    "sum_of_products",
    "column_product",
    # Element types
    "infer_element_type",
]
