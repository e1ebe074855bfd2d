# -*- coding: utf-8 -*-
"""
TOPSIS: Technique for Order of Preference by Similarity to Ideal Solution

Mathematical Steps:
1. Vector-normalise the decision matrix: r_ij = x_ij / sqrt(Σ_i x_ij²)
2. Weight it: v_ij = w_j × r_ij
3. Ideal A+ and anti-ideal A- per criterion (max/min, swapped for cost)
4. Separations S+_i = ||v_i - A+||, S-_i = ||v_i - A-||
5. Closeness C_i = S-_i / (S+_i + S-_i), higher is better
"""

import numpy as np
from typing import Dict, List, Sequence, Tuple

from ..base import MCDMCalculator
from ...models import Alternative, Criterion, CriterionType, RankedResult
from ...weighting.normalization import vector_normalize


class TOPSISCalculator(MCDMCalculator):
    """TOPSIS calculator reporting both separation measures per alternative."""

    name = "TOPSIS"

    def score(self,
              matrix: np.ndarray,
              weights: np.ndarray,
              types: List[CriterionType]
              ) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
        # Step 1-2: weighted normalized matrix
        weighted = vector_normalize(matrix) * weights

        # Step 3: ideal solutions
        ideal, anti_ideal = self._get_ideal_solutions(weighted, types)

        # Step 4: separation measures
        s_plus = self._calculate_distance(weighted, ideal)
        s_minus = self._calculate_distance(weighted, anti_ideal)

        # Step 5: closeness coefficient
        denom = s_plus + s_minus
        scores = np.zeros_like(denom)
        nz = denom != 0
        scores[nz] = s_minus[nz] / denom[nz]

        return scores, {'s_plus': s_plus, 's_minus': s_minus}

    @staticmethod
    def _get_ideal_solutions(weighted: np.ndarray,
                             types: List[CriterionType]
                             ) -> Tuple[np.ndarray, np.ndarray]:
        """Determine ideal and anti-ideal solutions."""
        col_max = weighted.max(axis=0)
        col_min = weighted.min(axis=0)
        is_cost = np.array([CriterionType(t) is CriterionType.COST for t in types])
        ideal = np.where(is_cost, col_min, col_max)
        anti_ideal = np.where(is_cost, col_max, col_min)
        return ideal, anti_ideal

    @staticmethod
    def _calculate_distance(weighted: np.ndarray,
                            reference: np.ndarray) -> np.ndarray:
        """Euclidean distance of each row to a reference point."""
        diff = weighted - reference
        return np.sqrt((diff ** 2).sum(axis=1))


def calculate_topsis(alternatives: Sequence[Alternative],
                     criteria: Sequence[Criterion]) -> List[RankedResult]:
    """Convenience function for TOPSIS."""
    return TOPSISCalculator().calculate(alternatives, criteria)
