"""
Random Source — источник равномерно распределённых целых чисел

Внешний коллаборатор для Matrix.random: единственная точка
недетерминизма в matrixkit.

Контракт:
    next_in_range(low, high) -> int, low <= result < high
"""

import random
from typing import Protocol, runtime_checkable

from matrixkit.core.math.numeric import validate_half_open_range, validate_int_bound


@runtime_checkable
class RandomSource(Protocol):
    """Источник равномерных целых в полуинтервале [low, high)."""

    def next_in_range(self, low: int, high: int) -> int: ...


class StdRandomSource:
    """
    RandomSource на основе random.Random.

    С seed результаты воспроизводимы; без seed используется
    системная энтропия.
    """

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def next_in_range(self, low: int, high: int) -> int:
        """
        Равномерное целое из [low, high).

        Raises:
            TypeError: если low/high не int
            ValueError: если low >= high
        """
        validate_int_bound(low, "low")
        validate_int_bound(high, "high")
        validate_half_open_range(low, high)
        return self._rng.randrange(low, high)
