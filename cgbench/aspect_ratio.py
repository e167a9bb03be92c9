"""Rejection of grids that are too far from a cube."""

from __future__ import annotations

from typing import TextIO


class AspectRatioError(ValueError):
    """Raised when min(x, y, z) / max(x, y, z) falls below the required ratio."""

    exit_code = 127

    def __init__(self, message: str, ratio: float) -> None:
        super().__init__(message)
        self.ratio = ratio


def check_aspect_ratio(
    smallest_ratio: float,
    x: int,
    y: int,
    z: int,
    what: str,
    out: TextIO | None = None,
) -> float:
    """Return the ratio of the smallest to the largest size, or raise if it is too small.

    When ``out`` is given, the explanation is also written there.
    """
    ratio = min(x, y, z) / float(max(x, y, z))
    if ratio < smallest_ratio:
        message = (
            f"The {what} sizes ({x},{y},{z}) are invalid because the ratio "
            f"min(x,y,z)/max(x,y,z)={ratio:g} is too small "
            f"(at least {smallest_ratio:g} is required)."
        )
        if out is not None:
            out.write(message + "\n")
            out.write("The shape should resemble a 3D cube. Please adjust and try again.\n")
            out.flush()
        raise AspectRatioError(message, ratio)
    return ratio