# -*- coding: utf-8 -*-
"""
WSM: Weighted Sum Model (Simple Additive Weighting)

The simplest MCDM method and a transparent baseline.

    Score_i = Σ_j  w_j × r_ij

where r_ij is the min-max normalised value and w_j the normalised
criterion weight.

Properties
----------
- Linear aggregation (fully compensatory).
- Assumes preference independence among criteria.
- Computationally O(m × n).

References
----------
[1] Fishburn, P.C. (1967). "Additive Utilities with Incomplete Product
    Sets: Application to Priorities and Assignments."
    Operations Research, 15(3), 537–542.
[2] MacCrimmon, K.R. (1968). "Decision Making among Multiple-Attribute
    Alternatives." RAND Corporation, RM-4823-ARPA.
"""

import numpy as np
from typing import Dict, List, Sequence, Tuple

from ..base import MCDMCalculator
from ...models import Alternative, Criterion, CriterionType, RankedResult
from ...weighting.normalization import linear_normalize


class WSMCalculator(MCDMCalculator):
    """
    Weighted Sum Model calculator.

    Values are min-max normalised per criterion (cost criteria inverted)
    before the weighted sum; higher scores rank first.
    """

    name = "WSM"

    def score(self,
              matrix: np.ndarray,
              weights: np.ndarray,
              types: List[CriterionType]
              ) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
        norm = linear_normalize(matrix, types)
        return (norm * weights).sum(axis=1), {}


def calculate_wsm(alternatives: Sequence[Alternative],
                  criteria: Sequence[Criterion]) -> List[RankedResult]:
    """Convenience function for WSM."""
    return WSMCalculator().calculate(alternatives, criteria)
