# -*- coding: utf-8 -*-
"""Base classes and utilities for criterion weighting."""

import numpy as np
import pandas as pd
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence

from ..config import WeightingMode
from ..models import Criterion


@dataclass
class WeightResult:
    """Result container for weight calculations."""
    weights: Dict[str, float]    # criterion id -> weight
    method: str
    details: Dict

    @property
    def as_array(self) -> np.ndarray:
        """Weights in criterion order."""
        return np.array(list(self.weights.values()))

    @property
    def as_series(self) -> pd.Series:
        return pd.Series(self.weights)


def apply_weights(criteria: Sequence[Criterion],
                  weights: Sequence[float]) -> List[Criterion]:
    """
    Return copies of ``criteria`` carrying ``weights`` positionally.

    Criteria beyond the end of ``weights`` keep their current weight.
    """
    return [
        replace(c, weight=float(weights[i])) if i < len(weights) else replace(c)
        for i, c in enumerate(criteria)
    ]


def calculate_weights(criteria: Sequence[Criterion],
                      method: str = "direct",
                      pairwise_matrix=None) -> WeightResult:
    """
    Convenience function to derive criterion weights.

    Parameters
    ----------
    criteria : sequence of Criterion
        Criteria in decision-matrix order.
    method : str
        'direct' (weights as entered), 'equal' (1/n each) or 'ahp'
        (priority vector of ``pairwise_matrix``).
    pairwise_matrix : array-like, optional
        Required for 'ahp'.

    Returns
    -------
    WeightResult
        Weights keyed by criterion id, with metadata
    """
    ids = [c.id for c in criteria]
    mode = WeightingMode(method)

    if mode is WeightingMode.DIRECT:
        return WeightResult(
            weights={c.id: float(c.weight) for c in criteria},
            method="direct",
            details={}
        )
    elif mode is WeightingMode.EQUAL:
        w = 1.0 / len(ids) if ids else 0.0
        return WeightResult(
            weights={i: w for i in ids},
            method="equal",
            details={}
        )
    else:
        from .ahp import AHPCalculator

        if pairwise_matrix is None:
            raise ValueError("AHP weighting requires a pairwise comparison matrix")
        result = AHPCalculator().calculate(pairwise_matrix)
        if len(result.weights) != len(ids):
            raise ValueError(
                f"Pairwise matrix order {len(result.weights)} does not match "
                f"{len(ids)} criteria"
            )
        return WeightResult(
            weights=dict(zip(ids, result.weights.tolist())),
            method="ahp",
            details={
                "consistency_ratio": result.consistency_ratio,
                "is_consistent": result.is_consistent,
                "lambda_max": result.lambda_max,
            }
        )
