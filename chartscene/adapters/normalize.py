from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


Point = tuple[float, float]


def normalize_points(points: Any) -> tuple[Point, ...]:
    """Coerce an offset list into a tuple of ``(dx, dy)`` float pairs.

    Accepts nested sequences, ``(N, 2)`` numpy arrays, torch tensors and
    two-column pandas DataFrames. ``None`` means no points.
    """

    if points is None:
        return ()
    arr = _coerce_2d_numeric(points)
    if arr.size == 0:
        return ()
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must be a sequence of (dx, dy) pairs, got shape {arr.shape}")
    if not np.all(np.isfinite(arr)):
        raise ValueError("points must be finite")
    return tuple((float(dx), float(dy)) for dx, dy in arr.tolist())


def _coerce_2d_numeric(value: Any) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.DataFrame):
        if value.shape[1] != 2:
            raise ValueError("points DataFrame must have exactly two columns (dx, dy)")
        return _coerce_ndarray(value.to_numpy())

    if isinstance(value, np.ndarray):
        return _coerce_ndarray(value)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if len(value) == 0:
            return np.zeros((0, 2), dtype=np.float64)
        try:
            rows = [tuple(p) for p in value]
        except TypeError as exc:
            raise ValueError("points must be a sequence of (dx, dy) pairs") from exc
        return _coerce_ndarray(np.asarray(rows, dtype=object))

    raise ValueError(f"unsupported points input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=False)
    try:
        return arr.astype(np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError("points must contain only numeric values") from exc
