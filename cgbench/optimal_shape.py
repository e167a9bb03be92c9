"""Factor a process count into a 3D grid that is as close to a cube as possible."""

from __future__ import annotations

import math
from collections.abc import Iterator

from .mixed_base_counter import MixedBaseCounter


def prime_factors(n: int) -> dict[int, int]:
    """Prime factorisation as ``{prime: exponent}`` in ascending order.

    ``1`` factors as ``{1: 1}``.
    """
    if n < 1:
        raise ValueError(f"cannot factor {n}: a positive integer is required")
    factors: dict[int, int] = {}
    limit = math.isqrt(n) + 1
    while n > 1 and n % 2 == 0:
        factors[2] = factors.get(2, 0) + 1
        n //= 2
    for d in range(3, limit + 1, 2):
        while n % d == 0:
            factors[d] = factors.get(d, 0) + 1
            n //= d
    if n > 1 or not factors:
        factors[n] = factors.get(n, 0) + 1
    return dict(sorted(factors.items()))


def cubic_radical_search(n: int) -> tuple[int, int, int]:
    """Search divisors around the cube root for the best min/max ratio."""
    if n < 1:
        raise ValueError(f"cannot shape {n} processes")
    best = 0.0
    shape = (n, 1, 1)
    for f1 in range(int(n ** (1.0 / 3.0) + 0.5), 0, -1):
        if n % f1:
            continue
        n1 = n // f1
        for f2 in range(int(n1**0.5 + 0.5), 0, -1):
            if n1 % f2:
                continue
            f3 = n1 // f2
            current = min(f1, f2, f3) / max(f1, f2, f3)
            if current > best:
                best = current
                shape = (f1, f2, f3)
    return shape


def _nonzero_states(counter: MixedBaseCounter) -> Iterator[MixedBaseCounter]:
    counter.next()
    while not counter.is_zero():
        yield counter
        counter.next()


def _search_min_area(xyz: int, factors: dict[int, int]) -> tuple[int, int, int]:
    primes = list(factors)
    counts = list(factors.values())
    main = MixedBaseCounter(counts)
    min_area = 2.0 * xyz + 1.0
    shape = (xyz, 1, 1)
    for c1 in _nonzero_states(MixedBaseCounter(counts)):
        tf1 = c1.product(primes)
        for c2 in _nonzero_states(MixedBaseCounter.remainder(main, c1)):
            tf2 = c2.product(primes)
            tf3 = xyz // tf1 // tf2
            area = float(tf1 * tf2 + tf2 * tf3 + tf1 * tf3)
            if area < min_area:
                min_area = area
                shape = (tf1, tf2, tf3)
    return shape


def compute_optimal_shape(xyz: int, cubic_search: bool = False) -> tuple[int, int, int]:
    """Split ``xyz`` into ``(x, y, z)`` with ``x * y * z == xyz``, as cube-like as possible."""
    if cubic_search:
        return cubic_radical_search(xyz)

    factors = prime_factors(xyz)
    primes = list(factors)
    exps = list(factors.values())

    if len(primes) == 1:
        p, e = primes[0], exps[0]
        q, rem = divmod(e, 3)
        return (
            p ** (q + (1 if rem >= 1 else 0)),
            p ** (q + (1 if rem >= 2 else 0)),
            p**q,
        )
    x, y = primes[0], primes[1]
    if len(primes) == 2 and exps == [1, 1]:
        return x, y, 1
    if len(primes) == 2 and sum(exps) == 3:
        return x, y, (x if exps[0] == 2 else y)
    if len(primes) == 3 and exps == [1, 1, 1]:
        return x, y, primes[2]
    return _search_min_area(xyz, factors)