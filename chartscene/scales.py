from __future__ import annotations

from typing import Union

import numpy as np

from chartscene.errors import InvalidDimension

PERCENT_MAX = 100.0
RELATIVE_MAX = 1.0
PERCENT_DECIMALS = 1
RELATIVE_DECIMALS = 3

Numeric = Union[float, int, np.ndarray]


def lerp(x: Numeric, x0: float, x1: float, u0: float, u1: float) -> Numeric:
    """Linear interpolate: x in (x0 .. x1) maps to (u0 .. u1)."""

    if x1 == x0:
        raise InvalidDimension(f"cannot interpolate over an empty range ({x0} .. {x1})")
    return u0 + ((x - x0) * (u1 - u0)) / (x1 - x0)


def pixel_to_percent(p: float, extent: int) -> str:
    """Map a pixel position in ``[0, extent]`` to ``[0, 100]`` with one decimal."""

    return _format(float(lerp(float(p), 0.0, float(extent), 0.0, PERCENT_MAX)), PERCENT_DECIMALS)


def pixel_to_relative(p: float, extent: int) -> str:
    """Map a pixel position in ``[0, extent]`` to ``[0, 1]`` with three decimals."""

    return _format(float(lerp(float(p), 0.0, float(extent), 0.0, RELATIVE_MAX)), RELATIVE_DECIMALS)


def pixels_to_percent(values: np.ndarray, extent: int) -> list[str]:
    mapped = lerp(np.asarray(values, dtype=np.float64), 0.0, float(extent), 0.0, PERCENT_MAX)
    return [_format(v, PERCENT_DECIMALS) for v in np.atleast_1d(mapped).tolist()]


def _format(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"
