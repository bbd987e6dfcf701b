"""
Iterative multi-step forecasting on differenced data: fits the lag model once on the trailing window, then rolls it forward one step at a time, sliding the autoregressive window and deriving each new predictor from the produced level and the observed history.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from engine.differencing.series import _as_vector
from engine.exceptions import IndexOutOfRangeError, InvalidInputError
from engine.regression.ols import OLSModel, augment, fit, predict

log = logging.getLogger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def training_window(diff_series: Sequence[float], order: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Lag-aligned training pairs for the trailing window of ``order``
    differences. Targets are ``diff[n - order : n]`` and predictors the same
    window shifted one position earlier, so every difference is regressed on
    its immediate predecessor.
    """
    if not _is_int(order):
        raise InvalidInputError(f"order must be an integer, got {order!r}")
    d = _as_vector(diff_series, "diff_series")
    n = len(d)
    if order < 1:
        raise InvalidInputError(f"order must be positive, got {order}")
    if n < order + 1:
        raise InvalidInputError(
            f"order {order} needs at least {order + 1} differences, got {n}"
        )
    return d[n - order - 1 : n - 1].copy(), d[n - order : n].copy()


def _history_level(series: np.ndarray, produced: List[float], index: int) -> float:
    # observed levels followed by the levels produced so far
    if index < 0 or index >= len(series) + len(produced):
        raise IndexOutOfRangeError(
            f"history offset {index} outside [0, {len(series) + len(produced)})"
        )
    if index < len(series):
        return float(series[index])
    return produced[index - len(series)]


def generate_forecast(
    diff_series: Sequence[float],
    series: Sequence[float],
    order: int,
    prediction_length: int,
    model: Optional[OLSModel] = None,
) -> np.ndarray:
    """
    Return ``prediction_length`` differenced forecasts.

    The rolling window starts as ``diff[n - order : n]`` in chronological
    order. Each step predicts from ``window[0]`` only, shifts the window up by
    one and sets ``window[0] = level - H[N - order + i + 1]``, where ``level``
    is the prediction plus the last observed value and ``H`` is the observed
    series extended by the levels of earlier steps.
    """
    if not _is_int(order):
        raise InvalidInputError(f"order must be an integer, got {order!r}")
    if not _is_int(prediction_length):
        raise InvalidInputError(f"prediction length must be an integer, got {prediction_length!r}")

    s = _as_vector(series, "series")
    d = _as_vector(diff_series, "diff_series")
    N = len(s)

    if len(d) != N - 1:
        raise InvalidInputError(
            f"expected {N - 1} differences for a series of {N} values, got {len(d)}"
        )
    if order < 1:
        raise InvalidInputError(f"order must be positive, got {order}")
    if order > N:
        raise IndexOutOfRangeError(f"order {order} exceeds series length {N}")
    if prediction_length < 1:
        raise InvalidInputError(f"prediction length must be at least 1, got {prediction_length}")
    if len(d) < order:
        raise InvalidInputError(f"order {order} exceeds {len(d)} available differences")

    if model is None:
        x_fit, y_fit = training_window(d, order)
        model = fit(x_fit, y_fit)

    window = d[len(d) - order :].copy()
    last_level = float(s[-1])
    out = np.empty(prediction_length, dtype=float)
    levels: List[float] = []

    for i in range(prediction_length):
        y = predict(augment(window), model)
        out[i] = y
        level = y + last_level

        for j in range(order - 1, 0, -1):
            window[j] = window[j - 1]
        window[0] = level - _history_level(s, levels, N - order + i + 1)
        levels.append(level)

        log.debug("step %d: diff=%.6f level=%.6f next_x=%.6f", i, y, level, window[0])

    return out
