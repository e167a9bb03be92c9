"""Dense vector kernels used by the conjugate gradient iteration."""

from __future__ import annotations

from collections.abc import Sequence


def _require_length(name: str, vector: Sequence[float], n: int) -> None:
    if n < 0:
        raise ValueError(f"vector length must not be negative, got {n}")
    if len(vector) < n:
        raise ValueError(f"vector {name} has {len(vector)} entries, at least {n} are required")


def dot_product(n: int, x: Sequence[float], y: Sequence[float]) -> float:
    """Dot product of the first ``n`` entries of ``x`` and ``y``."""
    _require_length("x", x, n)
    _require_length("y", y, n)
    if x is y:
        return sum((v * v for v in x[:n]), 0.0)
    return sum((a * b for a, b in zip(x[:n], y[:n])), 0.0)


def waxpby(
    n: int,
    alpha: float,
    x: Sequence[float],
    beta: float,
    y: Sequence[float],
) -> list[float]:
    """Return ``w = alpha * x + beta * y`` over the first ``n`` entries."""
    _require_length("x", x, n)
    _require_length("y", y, n)
    if alpha == 1.0:
        return [a + beta * b for a, b in zip(x[:n], y[:n])]
    if beta == 1.0:
        return [alpha * a + b for a, b in zip(x[:n], y[:n])]
    return [alpha * a + beta * b for a, b in zip(x[:n], y[:n])]


def residual_norm(n: int, v1: Sequence[float], v2: Sequence[float]) -> float:
    """Infinity norm of ``v1 - v2`` over the first ``n`` entries."""
    _require_length("v1", v1, n)
    _require_length("v2", v2, n)
    return max((abs(a - b) for a, b in zip(v1[:n], v2[:n])), default=0.0)