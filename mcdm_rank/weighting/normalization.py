# -*- coding: utf-8 -*-
"""
Normalization Methods for MCDM
==============================

Weight vector normalization and the two decision-matrix normalizations
used by the ranking methods:

- ``linear_normalize``: direction-aware min-max scaling (WSM, WASPAS)
- ``vector_normalize``: Euclidean column scaling (TOPSIS)

All functions return new arrays and never modify their input.
"""

import numpy as np
from typing import Sequence

from ..models import CriterionType, Direction


def normalize_weights(weights: Sequence[float]) -> np.ndarray:
    """
    Rescale a non-negative weight vector to sum to 1.

    Parameters
    ----------
    weights : sequence of float
        Raw criterion weights.

    Returns
    -------
    np.ndarray
        Weights summing to 1. An all-zero vector of length N maps to
        ``1/N`` everywhere.

    Examples
    --------
    >>> normalize_weights([2, 1, 1])
    array([0.5 , 0.25, 0.25])
    >>> normalize_weights([0, 0])
    array([0.5, 0.5])
    """
    w = np.asarray(weights, dtype=float).ravel()
    if w.size == 0:
        return w
    total = w.sum()
    if total == 0:
        return np.full(w.size, 1.0 / w.size)
    return w / total


def _as_matrix(matrix, n_columns: int = 0) -> np.ndarray:
    X = np.array(matrix, dtype=float)
    if X.ndim != 2:
        X = X.reshape(0, n_columns) if X.size == 0 else np.atleast_2d(X)
    return X


def linear_normalize(
    matrix,
    directions: Sequence[Direction]
) -> np.ndarray:
    """
    Direction-aware min-max normalization.

    Parameters
    ----------
    matrix : array-like, shape (n_alternatives, n_criteria)
        Raw decision matrix.
    directions : sequence of CriterionType or str
        ``'benefit'`` or ``'cost'`` for each column.

    Returns
    -------
    np.ndarray
        Matrix with values in [0, 1].

    Notes
    -----
    **Formula:**
    ```
    benefit:  r_ij = (x_ij - min_j) / (max_j - min_j)
    cost:     r_ij = (max_j - x_ij) / (max_j - min_j)
    ```
    A constant column (``max_j == min_j``) is set to 1 for every
    alternative so it cannot discriminate between them.
    """
    X = _as_matrix(matrix, len(directions))
    norm = np.ones_like(X)
    if X.shape[0] == 0:
        return norm

    col_min = X.min(axis=0)
    col_max = X.max(axis=0)
    rng = col_max - col_min

    for j, direction in enumerate(directions):
        if rng[j] == 0:
            continue
        if CriterionType(direction) is CriterionType.COST:
            norm[:, j] = (col_max[j] - X[:, j]) / rng[j]
        else:
            norm[:, j] = (X[:, j] - col_min[j]) / rng[j]
    return norm


def vector_normalize(matrix) -> np.ndarray:
    """
    Euclidean (vector) normalization, direction-agnostic.

    ``r_ij = x_ij / sqrt(sum_i x_ij^2)``; a column whose norm is 0
    normalizes to all zeros.
    """
    X = _as_matrix(matrix)
    norm = np.sqrt((X ** 2).sum(axis=0))
    out = np.zeros_like(X)
    nonzero = norm != 0
    out[:, nonzero] = X[:, nonzero] / norm[nonzero]
    return out
