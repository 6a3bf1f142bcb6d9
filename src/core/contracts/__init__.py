"""
Contract Validation Module

Ошибки контейнеров и проверки размеров/индексов.
"""

from .errors import (
    ContainerError,
    ContainerIndexError,
    SizeError,
    TokenStreamError,
)
from .validators import (
    validate_index,
    validate_not_consumed,
    validate_same_size,
    validate_size,
)

__all__ = [
    # Exceptions
    "ContainerError",
    "SizeError",
    "ContainerIndexError",
    "TokenStreamError",
    # Functions
    "validate_size",
    "validate_index",
    "validate_same_size",
    "validate_not_consumed",
]
