"""
Test cases for the two-parameter least squares estimator, including design matrix layout, exact coefficient recovery, singular fits and prediction from an augmented row.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from config import settings
from engine.exceptions import InvalidInputError, SingularMatrixError
from engine.regression import OLSModel, augment, build_design_matrix, fit, predict


def test_design_matrix_shape_and_order():
    X = build_design_matrix([3.0, -1.0, 2.5])
    assert X.shape == (3, 2)
    assert list(X[:, 0]) == [1.0, 1.0, 1.0]
    assert list(X[:, 1]) == [3.0, -1.0, 2.5]


def test_fit_recovers_line():
    x = [0.0, 1.0, 2.0, 3.0, 4.0]
    y = [2.0 + 0.5 * v for v in x]
    model = fit(x, y)
    assert model.intercept == pytest.approx(2.0)
    assert model.slope == pytest.approx(0.5)
    assert model.n_samples == 5
    assert model.residual_ss == pytest.approx(0.0, abs=1e-12)


def test_fit_two_points_is_exact():
    model = fit([2.2, 1.2], [1.2, 1.4])
    assert model.slope == pytest.approx(-0.2)
    assert model.intercept == pytest.approx(1.64)


def test_fit_noisy_matches_polyfit():
    rng = np.random.default_rng(7)
    x = rng.normal(size=30)
    y = 1.5 - 0.8 * x + rng.normal(scale=0.1, size=30)
    model = fit(x, y)
    slope, intercept = np.polyfit(x, y, 1)
    assert model.slope == pytest.approx(slope)
    assert model.intercept == pytest.approx(intercept)


def test_fit_length_mismatch():
    with pytest.raises(InvalidInputError):
        fit([1.0, 2.0, 3.0], [1.0, 2.0])


def test_fit_needs_two_samples():
    with pytest.raises(InvalidInputError):
        fit([1.0], [2.0])


def test_fit_non_finite():
    with pytest.raises(InvalidInputError):
        fit([1.0, float("nan")], [1.0, 2.0])


def test_fit_constant_predictor_is_singular():
    with pytest.raises(SingularMatrixError):
        fit([0.0, 0.0, 0.0], [1.0, 2.0, 3.0])


def test_fit_tolerance_from_settings(monkeypatch):
    x = [1.0, 1.001]
    y = [1.0, 2.0]
    assert isinstance(fit(x, y), OLSModel)
    monkeypatch.setattr(settings, "singular_variance_tolerance", 1.0)
    with pytest.raises(SingularMatrixError):
        fit(x, y)


def test_augment_uses_first_window_value():
    row = augment([4.0, 9.0, 16.0])
    assert list(row) == [1.0, 4.0]


def test_augment_empty_window():
    with pytest.raises(InvalidInputError):
        augment([])


def test_predict_dot_product():
    model = OLSModel(intercept=1.5, slope=-2.0, n_samples=2, residual_ss=0.0)
    assert predict([1.0, 3.0], model) == pytest.approx(-4.5)


def test_predict_rejects_wrong_row():
    model = OLSModel(intercept=0.0, slope=1.0, n_samples=2, residual_ss=0.0)
    with pytest.raises(InvalidInputError):
        predict([1.0, 2.0, 3.0], model)


def test_fit_small_scale_predictor():
    model = fit([2.2e-9, 1.2e-9], [1.2e-9, 1.4e-9])
    assert model.slope == pytest.approx(-0.2, rel=1e-5)
    assert model.intercept == pytest.approx(1.64e-9, rel=1e-5)


def test_fit_constant_nonzero_predictor_is_singular():
    with pytest.raises(SingularMatrixError):
        fit([3.7, 3.7, 3.7], [1.0, 2.0, 3.0])
