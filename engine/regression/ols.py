"""
Two-parameter ordinary least squares fit (intercept plus a single lag coefficient) over a bias-augmented design matrix, with detection of rank-deficient fits and prediction from an augmented feature row.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from config import settings
from engine.exceptions import InvalidInputError, SingularMatrixError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class OLSModel:
    intercept: float
    slope: float
    n_samples: int
    residual_ss: float

    @property
    def coefficients(self) -> np.ndarray:
        return np.array([self.intercept, self.slope], dtype=float)


def build_design_matrix(x: Sequence[float]) -> np.ndarray:
    v = np.asarray(x, dtype=float)
    return np.column_stack([np.ones(len(v)), v])


def fit(x: Sequence[float], y: Sequence[float]) -> OLSModel:
    xv = np.asarray(x, dtype=float)
    yv = np.asarray(y, dtype=float)
    if xv.ndim != 1 or yv.ndim != 1:
        raise InvalidInputError("predictors and targets must be one-dimensional")
    if len(xv) != len(yv):
        raise InvalidInputError(
            f"predictor and target lengths differ: {len(xv)} != {len(yv)}"
        )
    if len(xv) < 2:
        raise InvalidInputError(f"least squares needs at least 2 samples, got {len(xv)}")
    if not (np.all(np.isfinite(xv)) and np.all(np.isfinite(yv))):
        raise InvalidInputError("predictors and targets must be finite")

    # a constant predictor makes the lag column collinear with the bias column;
    # the tolerance is relative to the predictor's mean square
    scale = float(np.mean(xv ** 2))
    if float(np.var(xv)) <= settings.singular_variance_tolerance * scale:
        raise SingularMatrixError("predictor column has zero variance")

    X = build_design_matrix(xv)
    coeffs, _, rank, _ = np.linalg.lstsq(X, yv, rcond=None)
    if rank < X.shape[1]:
        raise SingularMatrixError(f"design matrix is rank deficient (rank {rank})")
    if not np.all(np.isfinite(coeffs)):
        raise SingularMatrixError("least squares produced non-finite coefficients")

    residual_ss = float(np.sum((yv - X @ coeffs) ** 2))
    model = OLSModel(
        intercept=float(coeffs[0]),
        slope=float(coeffs[1]),
        n_samples=len(xv),
        residual_ss=residual_ss,
    )
    log.debug("fitted b0=%.6f b1=%.6f on %d samples", model.intercept, model.slope, model.n_samples)
    return model


def augment(window: Sequence[float]) -> np.ndarray:
    # only the first element of the rolling window feeds the regression
    if len(window) == 0:
        raise InvalidInputError("cannot build a feature row from an empty window")
    return np.array([1.0, float(window[0])])


def predict(row: Sequence[float], model: OLSModel) -> float:
    r = np.asarray(row, dtype=float)
    if r.shape != (2,):
        raise InvalidInputError(f"feature row must be [1, x], got shape {r.shape}")
    return float(model.coefficients @ r)
