# -*- coding: utf-8 -*-
"""
VIKOR: Multi-criteria Optimization and Compromise Solution

A compromise ranking method that focuses on ranking and selecting from
a set of alternatives in the presence of conflicting criteria.

Mathematical Steps:
1. Determine best (f*) and worst (f-) values for each criterion
2. Calculate S_i (group utility) and R_i (individual regret)
3. Calculate Q_i = v × (S_i - S*) / (S- - S*) + (1-v) × (R_i - R*) / (R- - R*)
4. Rank by Q values (lower is better)
"""

import numpy as np
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from ..base import MCDMCalculator, rank_order
from ...config import get_config
from ...models import Alternative, Criterion, CriterionType, RankedResult


@dataclass
class VIKORCompromise:
    """Acceptance conditions for the VIKOR compromise solution."""
    compromise_solution: str        # Best alternative by Q (name)
    advantage_condition: bool       # C1: Acceptable advantage
    stability_condition: bool       # C2: Acceptable stability
    compromise_set: List[str]       # Set of compromise solutions (names)
    dq: float                       # Advantage threshold 1/(n-1)


class VIKORCalculator(MCDMCalculator):
    """
    VIKOR (VIseKriterijumska Optimizacija I Kompromisno Resenje) calculator.

    Works on the raw decision matrix; the gap to the best value of each
    criterion is scaled by that criterion's range.

    Parameters
    ----------
    v : float, optional
        Weight of the maximum group utility (0-1), default 0.5 from config
        - v=0.5: consensus by majority (recommended)
        - v>0.5: emphasizes group utility
        - v<0.5: emphasizes individual regret

    Examples
    --------
    >>> from mcdm_rank.models import Alternative, Criterion
    >>> criteria = [Criterion('Quality', 'benefit', 0.4),
    ...             Criterion('Price', 'cost', 0.3),
    ...             Criterion('Speed', 'benefit', 0.3)]
    >>> alternatives = [Alternative('A', [0.8, 100, 5]),
    ...                 Alternative('B', [0.6, 150, 3])]
    >>> results = VIKORCalculator(v=0.5).calculate(alternatives, criteria)
    >>> results[0].alternative_name
    'A'

    References
    ----------
    Opricovic, S., & Tzeng, G.H. (2004). Compromise solution by MCDM methods:
    A comparative analysis of VIKOR and TOPSIS. EJOR.
    """

    name = "VIKOR"
    ascending = True

    def __init__(self, v: Optional[float] = None):
        if v is None:
            v = get_config().vikor.v
        if not 0 <= v <= 1:
            raise ValueError("v must be between 0 and 1")
        self.v = v

    def score(self,
              matrix: np.ndarray,
              weights: np.ndarray,
              types: List[CriterionType]
              ) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
        # Step 1: best and worst values
        f_best, f_worst = self._get_ideal_values(matrix, types)

        # Step 2: S and R
        S, R = self._calculate_S_R(matrix, weights, f_best, f_worst)

        # Step 3: Q
        Q = self._calculate_Q(S, R)

        return Q, {'S': S, 'R': R, 'Q': Q}

    @staticmethod
    def _get_ideal_values(matrix: np.ndarray,
                          types: List[CriterionType]
                          ) -> Tuple[np.ndarray, np.ndarray]:
        """Determine best and worst values for each criterion."""
        col_max = matrix.max(axis=0)
        col_min = matrix.min(axis=0)
        is_cost = np.array([CriterionType(t) is CriterionType.COST for t in types])
        f_best = np.where(is_cost, col_min, col_max)
        f_worst = np.where(is_cost, col_max, col_min)
        return f_best, f_worst

    @staticmethod
    def _calculate_S_R(matrix: np.ndarray, weights: np.ndarray,
                       f_best: np.ndarray, f_worst: np.ndarray
                       ) -> Tuple[np.ndarray, np.ndarray]:
        """Calculate S (group utility) and R (individual regret)."""
        denominator = f_best - f_worst
        regret = np.zeros_like(matrix)
        nz = denominator != 0
        regret[:, nz] = weights[nz] * (f_best[nz] - matrix[:, nz]) / denominator[nz]

        S = regret.sum(axis=1)
        R = regret.max(axis=1, initial=0.0)
        return S, R

    def _calculate_Q(self, S: np.ndarray, R: np.ndarray) -> np.ndarray:
        """Calculate Q (compromise index)."""
        S_norm = self._rescale(S)
        R_norm = self._rescale(R)
        return self.v * S_norm + (1 - self.v) * R_norm

    @staticmethod
    def _rescale(values: np.ndarray) -> np.ndarray:
        lo, hi = values.min(), values.max()
        if hi - lo == 0:
            return np.zeros_like(values)
        return (values - lo) / (hi - lo)

    def compromise(self, results: Sequence[RankedResult]) -> Optional[VIKORCompromise]:
        """
        Check acceptance conditions for the compromise solution.

        Parameters
        ----------
        results : sequence of RankedResult
            Output of ``calculate`` (details must carry S, R and Q).

        Returns
        -------
        VIKORCompromise or None
            None when ``results`` is empty.
        """
        if not results:
            return None

        ordered = sorted(results, key=lambda r: r.rank)
        names = [r.alternative_name for r in ordered]
        Q = np.array([r.details['Q'] for r in ordered])
        S = np.array([r.details['S'] for r in ordered])
        R = np.array([r.details['R'] for r in ordered])
        n = len(ordered)

        # Condition 1: Acceptable advantage
        dq = 1 / (n - 1) if n > 1 else 0.0
        q1 = Q[0]
        q2 = Q[1] if n > 1 else q1
        advantage = bool((q2 - q1) >= dq)

        # Condition 2: Acceptable stability (best by Q is also best by S or R)
        stability = bool(rank_order(S, ascending=True)[0] == 0
                         or rank_order(R, ascending=True)[0] == 0)

        if advantage and stability:
            compromise_set = [names[0]]
        elif not advantage:
            compromise_set = [names[i] for i in range(n) if Q[i] - q1 < dq]
        else:
            compromise_set = names[:2]

        return VIKORCompromise(
            compromise_solution=names[0],
            advantage_condition=advantage,
            stability_condition=stability,
            compromise_set=compromise_set,
            dq=dq,
        )


def calculate_vikor(alternatives: Sequence[Alternative],
                    criteria: Sequence[Criterion],
                    v: Optional[float] = None) -> List[RankedResult]:
    """Convenience function for VIKOR."""
    return VIKORCalculator(v=v).calculate(alternatives, criteria)
