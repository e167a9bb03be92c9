"""A counter whose digits each have their own upper bound."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


class MixedBaseCounter:
    """Counts through every combination of digits ``0 <= d[i] <= max_counts[i]``.

    Used to enumerate the ways of distributing prime factors: digit ``i``
    says how many copies of the ``i``-th distinct prime are taken.
    """

    def __init__(self, counts: Iterable[int]) -> None:
        self._max = list(counts)
        self._cur = [0] * len(self._max)

    @classmethod
    def remainder(cls, left: MixedBaseCounter, right: MixedBaseCounter) -> MixedBaseCounter:
        """Counter over what is left of ``left``'s maxima after ``right``'s current digits."""
        return cls(limit - used for limit, used in zip(left._max, right._cur))

    @property
    def max_counts(self) -> tuple[int, ...]:
        return tuple(self._max)

    @property
    def current(self) -> tuple[int, ...]:
        return tuple(self._cur)

    def next(self) -> None:
        """Advance by one; after the last combination the counter wraps to zero."""
        for i, limit in enumerate(self._max):
            self._cur[i] += 1
            if self._cur[i] <= limit:
                return
            self._cur[i] = 0

    def is_zero(self) -> bool:
        return not any(self._cur)

    def product(self, multipliers: Sequence[int]) -> int:
        """Product of ``multipliers[i] ** digit[i]``; a zero counter yields 0."""
        if self.is_zero():
            return 0
        return math.prod(m**c for m, c in zip(multipliers, self._cur))