"""
Top-level forecast orchestration: validates the series and parameters, differences the series once, runs the iterative forecaster and re-integrates the differenced forecasts to level values anchored at the last observation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Sequence

import numpy as np

from config import settings
from engine.differencing.series import _as_vector, diff, inv_diff
from engine.exceptions import InvalidInputError
from engine.forecast.iterative import _is_int, generate_forecast

log = logging.getLogger(__name__)


class Forecaster:
    """Differencing plus lag-regression forecaster over a single series."""

    def __init__(self, time_series_data: Sequence[float], prediction_length: int):
        # always a private copy, so the caller cannot mutate it afterwards
        arr = np.array(_as_vector(time_series_data, "series"), dtype=float)
        if len(arr) < settings.min_series_length:
            raise InvalidInputError(
                f"series needs at least {settings.min_series_length} values, got {len(arr)}"
            )
        if not np.all(np.isfinite(arr)):
            raise InvalidInputError("series contains non-finite values")
        if not _is_int(prediction_length) or prediction_length < 1:
            raise InvalidInputError(f"prediction length must be a positive integer, got {prediction_length!r}")

        arr.setflags(write=False)
        self._series = arr
        self._prediction_length = int(prediction_length)

    @property
    def series(self) -> np.ndarray:
        return self._series

    @property
    def prediction_length(self) -> int:
        return self._prediction_length

    def _check_order(self, p: int) -> None:
        upper = len(self._series) - 1
        if not _is_int(p):
            raise InvalidInputError(f"order must be an integer, got {p!r}")
        if p < settings.min_order or p >= upper:
            raise InvalidInputError(
                f"order must satisfy {settings.min_order} <= p < {upper}, got {p}"
            )

    def forecast(self, p: int) -> List[float]:
        self._check_order(p)
        diff_data = diff(self._series)
        diffs = generate_forecast(diff_data, self._series, int(p), self._prediction_length)
        anchor = float(self._series[-1])
        levels = inv_diff(diffs, anchor)[1:]
        log.info(
            "forecast p=%d horizon=%d from %d observations", p, self._prediction_length, len(self._series)
        )
        return [float(v) for v in levels]


def forecast(series: Sequence[float], p: int | None = None, prediction_length: int | None = None) -> List[float]:
    if p is None:
        p = settings.default_order
    if prediction_length is None:
        prediction_length = settings.default_prediction_length
    return Forecaster(series, prediction_length).forecast(p)
