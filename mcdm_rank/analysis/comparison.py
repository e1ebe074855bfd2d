# -*- coding: utf-8 -*-
"""
Cross-Method Ranking Comparison
===============================

Agreement between the rankings produced by different methods on the same
decision problem, measured with Spearman's rank correlation.
"""

import logging
import numpy as np
import pandas as pd
from typing import Dict, Optional, Sequence

from scipy.stats import spearmanr

from ..models import Alternative, Criterion, RankedResult

logger = logging.getLogger(__name__)


def _rank_series(results: Sequence[RankedResult]) -> pd.Series:
    return pd.Series({r.alternative_id: r.rank for r in results}, dtype=float)


def compare_rankings(results_a: Sequence[RankedResult],
                     results_b: Sequence[RankedResult],
                     label_a: str = 'A',
                     label_b: str = 'B') -> Dict:
    """
    Compare two rankings of the same alternatives.

    Returns
    -------
    dict
        ``spearman_correlation`` and ``p_value`` (nan with fewer than
        three common alternatives), ``mean_rank_difference``,
        ``max_rank_difference`` and ``comparison_df`` indexed by
        alternative name.
    """
    ranks_a = _rank_series(results_a)
    ranks_b = _rank_series(results_b)
    common = ranks_a.index.intersection(ranks_b.index)
    a, b = ranks_a.loc[common], ranks_b.loc[common]

    if len(common) >= 3:
        correlation, p_value = spearmanr(a, b)
    else:
        correlation, p_value = np.nan, np.nan

    names = {r.alternative_id: r.alternative_name for r in results_a}
    rank_diff = (a - b).abs()
    comparison_df = pd.DataFrame({
        f'{label_a}_Rank': a.astype(int),
        f'{label_b}_Rank': b.astype(int),
        'Difference': rank_diff.astype(int),
    })
    comparison_df.index = [names[i] for i in common]
    comparison_df.index.name = 'Alternative'

    return {
        'spearman_correlation': float(correlation),
        'p_value': float(p_value),
        'mean_rank_difference': float(rank_diff.mean()) if len(common) else 0.0,
        'max_rank_difference': int(rank_diff.max()) if len(common) else 0,
        'comparison_df': comparison_df,
    }


def compare_all_methods(alternatives: Sequence[Alternative],
                        criteria: Sequence[Criterion],
                        methods: Optional[Sequence] = None) -> pd.DataFrame:
    """
    Rank with every method and collect the ranks side by side.

    Returns
    -------
    pd.DataFrame
        One row per alternative (by name, in input order), one rank
        column per method.
    """
    from ..mcdm import MCDMMethod, MCDM_METHODS, calculate_results

    methods = [MCDMMethod(m) for m in (methods or list(MCDMMethod))]
    columns = {}
    for method in methods:
        results = calculate_results(method, alternatives, criteria)
        ranks = {r.alternative_id: r.rank for r in results}
        columns[MCDM_METHODS[method].name] = [ranks.get(a.id) for a in alternatives]

    frame = pd.DataFrame(columns, index=[a.name for a in alternatives])
    frame.index.name = 'Alternative'
    logger.debug(f"Compared {len(methods)} methods on {len(alternatives)} alternatives")
    return frame
