"""
First-order differencing of a univariate series and its inverse, reconstructing levels from consecutive differences given a single anchor value.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from engine.exceptions import InvalidInputError


def _as_vector(values: Sequence[float], name: str) -> np.ndarray:
    try:
        raw = np.asarray(values)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{name} must contain real numbers: {exc}") from exc
    # strings, booleans and objects are not silently coerced
    if raw.dtype.kind not in "iuf":
        raise InvalidInputError(f"{name} must contain real numbers, got dtype {raw.dtype}")
    arr = raw.astype(float)
    if arr.ndim != 1:
        raise InvalidInputError(f"{name} must be one-dimensional, got shape {arr.shape}")
    return arr


def diff(series: Sequence[float]) -> np.ndarray:
    arr = _as_vector(series, "series")
    if len(arr) < 2:
        raise InvalidInputError(f"differencing needs at least 2 values, got {len(arr)}")
    return np.diff(arr)


def inv_diff(diff_series: Sequence[float], init_value: float) -> np.ndarray:
    """
    Rebuild levels from differences: ``out[0] = init_value`` and
    ``out[i] = out[i - 1] + diff_series[i - 1]``. The result is one element
    longer than ``diff_series``. Rounding error grows with the length of the
    reconstruction.
    """
    arr = _as_vector(diff_series, "diff_series")
    return np.cumsum(np.concatenate(([float(init_value)], arr)))
