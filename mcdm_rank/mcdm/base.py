# -*- coding: utf-8 -*-
"""
Base Class for Ranking Methods
==============================

Shared input preparation and ranking for the crisp MCDM calculators.
Every calculator renormalizes the criterion weights, scores a fresh copy
of the decision matrix and turns the scores into ``RankedResult`` rows.
"""

import logging
import numpy as np
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence, Tuple

from ..models import (
    Alternative, Criterion, CriterionType, RankedResult,
    criterion_types, criterion_weights, decision_matrix,
)
from ..weighting.normalization import normalize_weights

logger = logging.getLogger(__name__)


def rank_order(scores: np.ndarray, ascending: bool = False) -> np.ndarray:
    """
    Indices of ``scores`` from best to worst.

    Stable, so tied alternatives keep their input order; NaN scores go
    last in either direction.
    """
    scores = np.asarray(scores, dtype=float)
    key = scores if ascending else -scores
    return np.argsort(key, kind='stable')


def rank_alternatives(alternatives: Sequence[Alternative],
                      scores: np.ndarray,
                      details: Dict[str, np.ndarray],
                      ascending: bool = False) -> List[RankedResult]:
    """Build ranked results ordered best first, ranks 1..n."""
    results = []
    for rank, i in enumerate(rank_order(scores, ascending), 1):
        alt = alternatives[i]
        results.append(RankedResult(
            alternative_id=alt.id,
            alternative_name=alt.name,
            score=float(scores[i]),
            rank=rank,
            details={k: float(v[i]) for k, v in details.items()},
        ))
    return results


class MCDMCalculator(ABC):
    """
    Abstract base for ranking methods.

    Subclasses implement ``score`` on the raw matrix, normalized weights
    and criterion directions; ``calculate`` handles the shared contract.
    """

    name: str = "MCDM"
    ascending: bool = False  # True when lower scores are better

    @abstractmethod
    def score(self,
              matrix: np.ndarray,
              weights: np.ndarray,
              types: List[CriterionType]
              ) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
        """
        Score every alternative.

        Returns
        -------
        scores : np.ndarray, shape (n_alternatives,)
        details : dict of np.ndarray
            Per-alternative diagnostics reported with each result.
        """
        pass

    def calculate(self,
                  alternatives: Sequence[Alternative],
                  criteria: Sequence[Criterion]) -> List[RankedResult]:
        """
        Score and rank ``alternatives`` against ``criteria``.

        Returns an empty list when either input is empty.
        """
        if not alternatives or not criteria:
            return []

        X, w, types = self.prepare(alternatives, criteria)
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            scores, details = self.score(X, w, types)

        results = rank_alternatives(alternatives, scores, details, self.ascending)
        logger.debug(
            f"{self.name}: ranked {len(results)} alternatives on "
            f"{len(criteria)} criteria, best={results[0].alternative_name}"
        )
        return results

    @staticmethod
    def prepare(alternatives: Sequence[Alternative],
                criteria: Sequence[Criterion]
                ) -> Tuple[np.ndarray, np.ndarray, List[CriterionType]]:
        """Decision matrix copy, normalized weights and directions."""
        X = decision_matrix(alternatives, len(criteria))
        w = normalize_weights(criterion_weights(criteria))
        return X, w, criterion_types(criteria)
