from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

import numpy as np

from simplegraph.errors import GraphDataError
from simplegraph.geometry import Point


LOGGER = logging.getLogger(__name__)

try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_points(y: Any, *, x: Any = None) -> tuple[Point, ...]:
    """Coerce x/y inputs to finite points; x defaults to the sample index."""
    if _is_pair_sequence(y) and x is None:
        pairs = [_as_pair(p) for p in y]
        x = [p[0] for p in pairs]
        y = [p[1] for p in pairs]

    y_arr = _coerce_1d_numeric(_resolve_column(y, label="y"), label="y")
    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _coerce_1d_numeric(_resolve_column(x, label="x"), label="x")

    if x_arr.shape != y_arr.shape:
        raise GraphDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    dropped = int(mask.size - np.count_nonzero(mask))
    if dropped:
        LOGGER.debug("dropped %d non-finite points", dropped)
    return tuple(Point(float(px), float(py)) for px, py in zip(x_arr[mask].tolist(), y_arr[mask].tolist()))


def normalize_values(values: Any) -> tuple[float, ...]:
    arr = _coerce_1d_numeric(_resolve_column(values, label="values"), label="values")
    finite = arr[np.isfinite(arr)]
    if finite.size != arr.size:
        LOGGER.debug("dropped %d non-finite values", arr.size - finite.size)
    return tuple(float(v) for v in finite.tolist())


def _is_pair_sequence(value: Any) -> bool:
    if isinstance(value, np.ndarray):
        return value.ndim == 2 and value.shape[1] == 2
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        return False
    return len(value) > 0 and all(
        isinstance(item, (Point, tuple, list)) and len(_as_pair(item)) == 2 for item in value
    )


def _as_pair(item: Any) -> tuple[Any, ...]:
    if isinstance(item, Point):
        return (item.x, item.y)
    return tuple(item)


def _resolve_column(value: Any, *, label: str) -> Any:
    if pd is None or not isinstance(value, pd.DataFrame):
        return value
    numeric = [name for name in value.columns if pd.api.types.is_numeric_dtype(value[name])]
    if len(numeric) != 1:
        raise GraphDataError(f"{label} DataFrame must contain exactly one numeric column")
    return value[numeric[0]]


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    """Flatten a tensor, Series, ndarray or plain sequence to float64; None becomes NaN."""
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach().cpu()
        _require_1d(tensor.ndim, label)
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        value = value.to_numpy()
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        value = np.asarray(list(value), dtype=object)
    if not isinstance(value, np.ndarray):
        raise GraphDataError(f"unsupported {label} input type: {type(value)!r}")
    _require_1d(value.ndim, label)

    if value.dtype.kind in "iufb":
        return value.astype(np.float64, copy=False)
    out = np.full(value.shape[0], np.nan, dtype=np.float64)
    for index, raw in enumerate(value.tolist()):
        if raw is None:
            continue
        try:
            out[index] = float(raw)
        except (TypeError, ValueError) as exc:
            raise GraphDataError(f"{label} contains non-numeric value at index {index}: {raw!r}") from exc
    return out


def _require_1d(ndim: int, label: str) -> None:
    if ndim != 1:
        raise GraphDataError(f"{label} must be 1-D, got {ndim} dimensions")
