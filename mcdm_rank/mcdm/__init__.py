# -*- coding: utf-8 -*-
"""
Multi-Criteria Decision Making Module
=====================================

Five crisp ranking methods behind one closed method enum.

Usage
-----
>>> from mcdm_rank.mcdm import MCDMMethod, calculate_results
>>> results = calculate_results(MCDMMethod.TOPSIS, alternatives, criteria)
>>> results[0].rank
1
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Sequence, Type, Union

from .base import MCDMCalculator, rank_alternatives, rank_order
from .traditional import (
    WSMCalculator, calculate_wsm,
    WPMCalculator, calculate_wpm,
    WASPASCalculator, calculate_waspas,
    TOPSISCalculator, calculate_topsis,
    VIKORCalculator, VIKORCompromise, calculate_vikor,
)
from ..logger import log_execution
from ..models import Alternative, Criterion, RankedResult

logger = logging.getLogger(__name__)


class MCDMMethod(Enum):
    """Supported ranking methods."""
    WSM = "wsm"
    WPM = "wpm"
    WASPAS = "waspas"
    TOPSIS = "topsis"
    VIKOR = "vikor"


@dataclass(frozen=True)
class MethodInfo:
    """Display metadata for a ranking method."""
    method: MCDMMethod
    name: str
    description: str
    tooltip: str


MCDM_METHODS: Dict[MCDMMethod, MethodInfo] = {
    MCDMMethod.WSM: MethodInfo(
        MCDMMethod.WSM, "WSM", "Weighted Sum Model",
        "Simple additive weighting. Best for criteria with the same unit of measure."),
    MCDMMethod.WPM: MethodInfo(
        MCDMMethod.WPM, "WPM", "Weighted Product Model",
        "Multiplicative weighting. Good for comparing ratios between alternatives."),
    MCDMMethod.WASPAS: MethodInfo(
        MCDMMethod.WASPAS, "WASPAS", "Weighted Aggregated Sum Product",
        "Combines WSM and WPM for more robust results. λ=0.5 by default."),
    MCDMMethod.TOPSIS: MethodInfo(
        MCDMMethod.TOPSIS, "TOPSIS", "Ideal Solution Proximity",
        "Finds the alternative closest to ideal and farthest from negative-ideal."),
    MCDMMethod.VIKOR: MethodInfo(
        MCDMMethod.VIKOR, "VIKOR", "Compromise Ranking",
        "Ranks by a blend of group utility and individual regret. Lower Q is better."),
}


def get_all_calculators() -> Dict[MCDMMethod, Type[MCDMCalculator]]:
    """
    Get dictionary of all MCDM calculators.

    Returns
    -------
    Dict[MCDMMethod, class]
        Calculator class per method
    """
    return {
        MCDMMethod.WSM: WSMCalculator,
        MCDMMethod.WPM: WPMCalculator,
        MCDMMethod.WASPAS: WASPASCalculator,
        MCDMMethod.TOPSIS: TOPSISCalculator,
        MCDMMethod.VIKOR: VIKORCalculator,
    }


def get_calculator(method: Union[MCDMMethod, str], **params) -> MCDMCalculator:
    """
    Instantiate the calculator for ``method``.

    ``params`` go to the calculator (``lam`` for WASPAS, ``v`` for VIKOR).
    Unknown method identifiers raise ``ValueError``.
    """
    method = MCDMMethod(method)
    return get_all_calculators()[method](**params)


@log_execution(logger=logger)
def calculate_results(method: Union[MCDMMethod, str],
                      alternatives: Sequence[Alternative],
                      criteria: Sequence[Criterion],
                      **params) -> List[RankedResult]:
    """
    Rank ``alternatives`` with one method.

    Parameters
    ----------
    method : MCDMMethod or str
        'wsm', 'wpm', 'waspas', 'topsis' or 'vikor'.
    alternatives, criteria : sequences
        Criteria must already carry weights.
    **params
        Method parameters (``lam`` for WASPAS, ``v`` for VIKOR).

    Returns
    -------
    List[RankedResult]
        Best first; empty when there are no alternatives or criteria.
    """
    calculator = get_calculator(method, **params)
    results = calculator.calculate(alternatives, criteria)
    logger.info(f"{calculator.name}: ranked {len(results)} alternatives")
    return results


__all__ = [
    'MCDMMethod', 'MethodInfo', 'MCDM_METHODS',
    'MCDMCalculator', 'rank_alternatives', 'rank_order',
    'WSMCalculator', 'calculate_wsm',
    'WPMCalculator', 'calculate_wpm',
    'WASPASCalculator', 'calculate_waspas',
    'TOPSISCalculator', 'calculate_topsis',
    'VIKORCalculator', 'VIKORCompromise', 'calculate_vikor',
    'get_all_calculators', 'get_calculator', 'calculate_results',
]
