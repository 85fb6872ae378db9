from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from tickscale.errors import InvalidInputError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def flatten_values(values: Any) -> np.ndarray:
    """Merge per-series values into one finite float64 array.

    Accepts flat or nested sequences, numpy arrays of any rank, pandas
    Series/DataFrames (numeric columns only) and torch tensors. Missing and
    non-finite samples are dropped.
    """
    if values is None:
        raise InvalidInputError("values are required")
    arr = _coerce_numeric(values, label="values")
    if arr.size == 0:
        raise InvalidInputError("values must be non-empty")
    finite = arr[np.isfinite(arr)]
    if finite.size == 0:
        raise InvalidInputError("values contain no finite numbers")
    return finite


def _coerce_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy().ravel()

    if pd is not None and isinstance(value, pd.DataFrame):
        numeric_cols = [c for c in value.columns if _is_numeric_dtype(value[c])]
        if not numeric_cols:
            raise InvalidInputError(f"{label} DataFrame has no numeric columns")
        return _coerce_ndarray(value[numeric_cols].to_numpy().ravel(), label=label)

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        return _coerce_ndarray(value.ravel(), label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        flat: list[Any] = []
        _flatten_into(value, flat, label=label)
        return _coerce_ndarray(np.asarray(flat, dtype=object), label=label)

    raise InvalidInputError(f"unsupported {label} input type: {type(value)!r}")


def _flatten_into(items: Sequence[Any], out: list[Any], *, label: str) -> None:
    for item in items:
        if isinstance(item, (str, bytes, bytearray)):
            raise InvalidInputError(f"{label} contains non-numeric value: {item!r}")
        if isinstance(item, (Sequence, np.ndarray)) or (torch is not None and isinstance(item, torch.Tensor)):
            out.extend(_coerce_numeric(item, label=label).tolist())
        else:
            out.append(item)


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except Exception:
        return False


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        if isinstance(raw, (str, bytes, bytearray)):
            raise InvalidInputError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise InvalidInputError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
