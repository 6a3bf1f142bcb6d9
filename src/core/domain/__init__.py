"""
Domain models and value objects.

Contains container limits configuration and the ownership lifecycle state.
"""

from src.core.domain.limits import (
    DEFAULT_LIMITS,
    MAX_MATRIX_SIZE,
    MAX_VECTOR_SIZE,
    ContainerLimits,
)
from src.core.domain.ownership import OwnershipState

__all__ = [
    # Limits
    "MAX_VECTOR_SIZE",
    "MAX_MATRIX_SIZE",
    "DEFAULT_LIMITS",
    "ContainerLimits",
    # Ownership
    "OwnershipState",
]
