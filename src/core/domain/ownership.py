"""
Ownership — жизненный цикл владения памятью контейнера

uninitialized → OWNING → [copied-from: OWNING] / [moved-from: CONSUMED]

Из CONSUMED в OWNING контейнер возвращается только через assign/assign_move.
"""

from enum import Enum


class OwnershipState(str, Enum):
    """Состояние владения хранилищем"""

    OWNING = "OWNING"
    CONSUMED = "CONSUMED"
