# -*- coding: utf-8 -*-
"""
WPM: Weighted Product Model

Multiplicative aggregation on the raw decision matrix:

    Score_i = Π_j  x_ij ^ (+w_j)   for benefit criteria
                   x_ij ^ (-w_j)   for cost criteria

No normalisation is applied. WPM compares alternatives by ratios, which
are invariant to the unit of each criterion, so it needs the raw
(positive) magnitudes; min-max scaling would introduce zeros and change
the ratios.

Non-positive raw values follow IEEE rules (0 with a cost exponent gives
inf, negatives with fractional exponents give nan); nan scores rank last.

References
----------
[1] Bridgman, P.W. (1922). Dimensional Analysis. Yale University Press.
[2] Triantaphyllou, E. (2000). Multi-Criteria Decision Making Methods:
    A Comparative Study. Springer.
"""

import numpy as np
from typing import Dict, List, Sequence, Tuple

from ..base import MCDMCalculator
from ...models import Alternative, Criterion, CriterionType, RankedResult


class WPMCalculator(MCDMCalculator):
    """Weighted Product Model calculator."""

    name = "WPM"

    def score(self,
              matrix: np.ndarray,
              weights: np.ndarray,
              types: List[CriterionType]
              ) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
        signs = np.array([-1.0 if CriterionType(t) is CriterionType.COST else 1.0
                          for t in types])
        exponents = signs * weights
        return np.power(matrix, exponents).prod(axis=1), {}


def calculate_wpm(alternatives: Sequence[Alternative],
                  criteria: Sequence[Criterion]) -> List[RankedResult]:
    """Convenience function for WPM."""
    return WPMCalculator().calculate(alternatives, criteria)
