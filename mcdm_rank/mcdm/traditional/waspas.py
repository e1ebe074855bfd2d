# -*- coding: utf-8 -*-
"""
WASPAS: Weighted Aggregated Sum Product Assessment

Joint criterion of WSM and WPM:

    Q_i = λ × WSM_i + (1 - λ) × WPM_i / max_k WPM_k

The WPM scores are divided by their maximum so both parts lie on a
comparable [0, 1] scale (all zeros when the maximum is 0). λ = 1 reduces
to WSM, λ = 0 to the rescaled WPM.

References
----------
Zavadskas, E.K., Turskis, Z., Antucheviciene, J., & Zakarevicius, A.
(2012). Optimization of weighted aggregated sum product assessment.
Elektronika ir Elektrotechnika, 122(6), 3-6.
"""

import numpy as np
from typing import Dict, List, Optional, Sequence, Tuple

from ..base import MCDMCalculator
from .wsm import WSMCalculator
from .wpm import WPMCalculator
from ...config import get_config
from ...models import Alternative, Criterion, CriterionType, RankedResult


class WASPASCalculator(MCDMCalculator):
    """
    WASPAS calculator.

    Parameters
    ----------
    lam : float, optional
        Weight of the WSM component in [0, 1] (default 0.5 from config).
    """

    name = "WASPAS"

    def __init__(self, lam: Optional[float] = None):
        if lam is None:
            lam = get_config().waspas.lam
        if not 0 <= lam <= 1:
            raise ValueError("lam must be between 0 and 1")
        self.lam = lam

    def score(self,
              matrix: np.ndarray,
              weights: np.ndarray,
              types: List[CriterionType]
              ) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
        wsm, _ = WSMCalculator().score(matrix, weights, types)
        wpm, _ = WPMCalculator().score(matrix, weights, types)

        max_wpm = wpm.max()
        if max_wpm == 0:
            wpm_norm = np.zeros_like(wpm)
        else:
            wpm_norm = wpm / max_wpm

        scores = self.lam * wsm + (1 - self.lam) * wpm_norm
        return scores, {'wsm': wsm, 'wpm': wpm_norm}


def calculate_waspas(alternatives: Sequence[Alternative],
                     criteria: Sequence[Criterion],
                     lam: Optional[float] = None) -> List[RankedResult]:
    """Convenience function for WASPAS."""
    return WASPASCalculator(lam=lam).calculate(alternatives, criteria)
